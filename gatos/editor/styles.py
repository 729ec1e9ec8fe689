from gatos.core.QtCore import QColor, QFont
from gatos.core import Const





class Color:
	clear        = QColor.fromRgbF(*Const.CLEAR_COLOR)
	primary_bg   = QColor("#1e1f22")
	secondary_bg = QColor("#000000")
	button       = QColor("#2b2d30")
	text         = QColor.fromRgbF(0.6, 0.5, 0.4)
	tooltip_bg   = QColor("#2b2d30")
	tooltip_text = QColor("#dfe1e5")
	hl_text_bg   = QColor("#f39c12")

	outline      = QColor("#d9d9d9")
	gate_body    = QColor(0, 0, 0, 0)
	grid_dot     = QColor(255, 255, 255, 30)


class Font:
	# QFont wants a QGuiApplication around, so build on demand
	@staticmethod
	def label() -> QFont:
		font = QFont("Varela Round")
		font.setPointSize(10)
		return font
