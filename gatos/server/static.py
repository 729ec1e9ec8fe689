"""
Static file server for the web build.

Serves one directory and logs every request/response pair at DEBUG.
"""
from __future__ import annotations
import argparse
import logging
import os
from functools import partial
from http.server import SimpleHTTPRequestHandler, ThreadingHTTPServer
from typing import Any

from gatos.core.logging_config import setup_logging, parse_level
from gatos.core import Const

logger = logging.getLogger(__name__)





class LoggingHandler(SimpleHTTPRequestHandler):
	"""SimpleHTTPRequestHandler that reports to the `gatos` logger instead of stderr."""

	def parse_request(self) -> bool:
		ok = super().parse_request()
		logger.debug("request  %s %s", self.address_string(), self.requestline)
		return ok

	def send_response(self, code: int, message: str | None = None) -> None:
		logger.debug("response %s %d for %r", self.address_string(), code, getattr(self, "requestline", ""))
		super().send_response(code, message)

	def log_message(self, fmt: str, *args: Any) -> None:
		logger.debug("HTTP %s - %s", self.address_string(), fmt % args)


def make_server(root: str, bind: tuple[str, int] = Const.SERVE_ADDR) -> ThreadingHTTPServer:
	if not os.path.isdir(root):
		raise NotADirectoryError(root)
	handler = partial(LoggingHandler, directory=root)
	return ThreadingHTTPServer(bind, handler)


def parse_bind(text: str) -> tuple[str, int]:
	host, sep, port = text.rpartition(":")
	if not sep or not port.isdigit():
		raise argparse.ArgumentTypeError(f"expected HOST:PORT, got {text!r}")
	return host or "0.0.0.0", int(port)


def parse_args(argv=None):
	host, port = Const.SERVE_ADDR
	parser = argparse.ArgumentParser(prog="gatos-serve", description="Serve a directory over HTTP")
	parser.add_argument("root", help="Directory to serve")
	parser.add_argument("--bind", default=f"{host}:{port}", type=parse_bind, help="HOST:PORT to listen on")
	parser.add_argument("--log-level", default="debug", type=parse_level, help="debug, info, warning, error")
	args = parser.parse_args(argv)
	if not os.path.isdir(args.root):
		parser.error(f"no such directory: {args.root}")
	return args


def main(argv=None) -> int:
	args = parse_args(argv)
	setup_logging(args.log_level)

	server = make_server(args.root, args.bind)
	host, port = server.server_address[:2]
	logger.info("Serving %s on http://%s:%s", os.path.abspath(args.root), host, port)
	try:
		server.serve_forever()
	except KeyboardInterrupt:
		logger.info("Shutting down")
	finally:
		server.server_close()
	return 0


if __name__ == "__main__":
	raise SystemExit(main())
