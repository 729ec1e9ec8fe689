"""
Logging Configuration
Sets up the logger shared by the editor and the file server.
"""
import logging
import sys
from typing import Optional


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
	"""
	Configures the 'gatos' logger namespace.

	Args:
		level: Logging level (e.g. logging.DEBUG, logging.INFO)
		log_file: Optional path to also save logs to a file.
	"""
	logger = logging.getLogger("gatos")
	logger.setLevel(level)

	# Re-running setup (tests, restarts) must not stack handlers
	if logger.hasHandlers():
		logger.handlers.clear()

	formatter = logging.Formatter(
		'%(asctime)s - %(name)s - %(levelname)s - %(message)s',
		datefmt='%H:%M:%S'
	)

	console_handler = logging.StreamHandler(sys.stdout)
	console_handler.setLevel(level)
	console_handler.setFormatter(formatter)
	logger.addHandler(console_handler)

	if log_file:
		file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
		file_handler.setLevel(level)
		file_handler.setFormatter(formatter)
		logger.addHandler(file_handler)

	logger.debug("Logging initialized.")
	return logger


def parse_level(name: str) -> int:
	"""`"debug"` -> `logging.DEBUG`. Raises ValueError for unknown names."""
	level = logging.getLevelName(name.upper())
	if not isinstance(level, int):
		raise ValueError(f"unknown log level: {name}")
	return level
