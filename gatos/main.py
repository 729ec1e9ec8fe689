import sys
import argparse
import logging

from gatos.core.QtCore import *
from gatos.core.logging_config import setup_logging, parse_level
from gatos.core.editor import Editor
from gatos.core import Const

from gatos.editor.styles import Color
from gatos.editor.circuit.viewport import CircuitView
from gatos.editor.tools.palette import GatePalette

logger = logging.getLogger(__name__)




class AppWindow(QMainWindow):
	def __init__(self, editor: Editor | None = None):
		super().__init__()
		self.setWindowTitle(Const.TITLE)

		central = QWidget()
		self.setCentralWidget(central)
		layout_main = QVBoxLayout(central)
		layout_main.setContentsMargins(0, 0, 0, 0)
		layout_main.setSpacing(0)


		###======= GATE PALETTE =======###
		self.palette_bar = GatePalette()

		###======= CIRCUIT =======###
		self.view = CircuitView(editor)
		self.editor = self.view.editor
		self.palette_bar.activated.connect(self.view.activate)
		self.view.isOverPalette = self.palette_bar.isHovered

		layout_main.addWidget(self.palette_bar)
		layout_main.addWidget(self.view, 1)

		self.setupQActions()


	###======= ACTIONS =======###
	def setupQActions(self):
		self.close_shortcut = QShortcut(QKeySequence(Key.Key_Escape), self)
		self.close_shortcut.activated.connect(self.close)

		self.clear_shortcut = QShortcut(QKeySequence.StandardKey.New, self)
		self.clear_shortcut.activated.connect(self.clearCanvas)

	def clearCanvas(self):
		logger.info("Clearing canvas")
		self.editor.reset()



def parse_args(argv=None):
	parser = argparse.ArgumentParser(prog="gatos", description="Logic gate canvas")
	parser.add_argument("--log-level", default="info", type=parse_level, help="debug, info, warning, error")
	parser.add_argument("--log-file", default=None, help="Also write logs to this file")
	return parser.parse_args(argv)


def main(argv=None):
	args = parse_args(argv)
	setup_logging(args.log_level, args.log_file)

	app = QApplication(sys.argv[:1])

	###======= APP COLOR PALETTE =======###
	app.setStyle("Fusion")
	dark_palette = QPalette()
	Role = QPalette.ColorRole

	palette_colors = {
		Role.Window         : Color.secondary_bg,
		Role.WindowText     : Color.text,
		Role.Base           : Color.primary_bg,
		Role.AlternateBase  : Color.secondary_bg,
		Role.ToolTipBase    : Color.tooltip_bg,
		Role.ToolTipText    : Color.tooltip_text,
		Role.Text           : Color.text,
		Role.Button         : Color.button,
		Role.ButtonText     : Color.text,
		Role.Highlight      : Color.hl_text_bg,
		Role.HighlightedText: Color.text,
	}
	for role, color in palette_colors.items():
		dark_palette.setColor(QPalette.ColorGroup.All, role, color)
	app.setPalette(dark_palette)


	###======= APP WINDOW =======###
	window = AppWindow()
	window.resize(1000, 600)
	window.show()

	return app.exec()


if __name__ == "__main__":
	sys.exit(main())
