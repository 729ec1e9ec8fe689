from __future__ import annotations

from gatos.core.QtCore import *
from gatos.core.Enums import GateKind

from gatos.editor.styles import Color, Font
from gatos.editor import assets





class GatePalette(QWidget):
	"""Bar of gate buttons. Pressing one spawns a gate that is already being dragged."""
	activated = Signal(object)    # GateKind

	def __init__(self, parent=None):
		super().__init__(parent)
		self.buttons: dict[GateKind, QPushButton] = {}
		self.buildUI()

	def buildUI(self):
		self.setAutoFillBackground(True)
		self.setStyleSheet(f"""
			GatePalette {{
				background: {Color.secondary_bg.name()};
			}}
			QPushButton {{
				background: transparent;
				color: {Color.text.name()};
				border: none;
				padding: 4px 12px;
			}}
		""")

		layout = QHBoxLayout(self)
		layout.setContentsMargins(8, 4, 8, 4)
		layout.addStretch()

		for kind in GateKind:
			btn = QPushButton(kind.label)
			btn.setFont(Font.label())
			btn.setIcon(assets.gate_icon(kind))
			btn.setIconSize(QSize(48, 48))
			btn.setMinimumHeight(56)
			# Fire on press, the release is what places (or cancels) the gate
			btn.pressed.connect(lambda kind=kind: self.activated.emit(kind))
			self.buttons[kind] = btn
			layout.addWidget(btn)
			layout.addStretch()

	def isHovered(self) -> bool:
		local = self.mapFromGlobal(QCursor.pos())
		return self.rect().contains(local)
