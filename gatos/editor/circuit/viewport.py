from __future__ import annotations
import logging
from typing import Callable

from gatos.core.QtCore import *
from gatos.core.Enums import Button, GateKind
from gatos.core.editor import Editor
from gatos.core.input import ButtonInput, InputFrame
from gatos.core.mapper import Camera
from gatos.core import Const

from .canvas import CircuitScene

logger = logging.getLogger(__name__)


BUTTON_MAP = {
	MouseBtn.LeftButton : Button.PRIMARY,
	MouseBtn.RightButton: Button.SECONDARY,
}





class CircuitView(QGraphicsView):
	"""Presents the scene through the Camera and turns Qt input into per-tick InputFrames."""

	def __init__(self, editor: Editor | None = None):
		self.editor = editor if editor is not None else Editor()
		self._scene = CircuitScene(self.editor.world)
		super().__init__(self._scene)

		self.setSceneRect(-50000, -50000, 100000, 100000)
		self.viewport().setMouseTracking(True)
		self.setRenderHints(QPainter.RenderHint.Antialiasing)
		self.setContextMenuPolicy(Qt.ContextMenuPolicy.NoContextMenu)

		# Hide scrollbars
		self.setVerticalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
		self.setHorizontalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
		self.setViewportUpdateMode(QGraphicsView.ViewportUpdateMode.FullViewportUpdate)

		# Input
		self.camera = Camera()
		self.buttons = ButtonInput()
		self.activated: list[GateKind] = []
		self.isOverPalette: Callable[[], bool] = lambda: False
		self._pan_last_pos: QPointF | None = None

		# Update loop
		self.timer = QTimer(self)
		self.timer.timeout.connect(self.tick)
		self.timer.start(Const.TICK_MS)

		self.applyCamera()


	@property
	def cscene(self) -> CircuitScene:
		return self._scene


	###======= CAMERA =======###
	def applyCamera(self):
		z = self.camera.zoom
		# World Y grows upwards, Qt's grows downwards
		self.setTransform(QTransform(z, 0, 0, -z, 0, 0))
		self.centerOn(self.camera.center)

	def viewportSize(self) -> QSizeF:
		vp = self.viewport()
		return QSizeF(vp.width(), vp.height())

	def toDevice(self, pos: QPointF) -> QPointF:
		"""Qt viewport pixels (top-left origin) -> device pixels (bottom-left origin)"""
		return QPointF(pos.x(), self.viewport().height() - pos.y())

	def pointerSample(self) -> QPointF | None:
		vp = self.viewport()
		local = vp.mapFromGlobal(QCursor.pos())
		if not vp.rect().contains(local): return None
		return self.toDevice(QPointF(local))

	def resizeEvent(self, event):
		super().resizeEvent(event)
		self.applyCamera()


	###======= TICK =======###
	def tick(self):
		held = {
			btn for qtbtn, btn in BUTTON_MAP.items()
			if QGuiApplication.mouseButtons() & qtbtn
		}
		self.buttons.sync(held)

		frame = InputFrame(
			buttons=self.buttons,
			viewport_size=self.viewportSize(),
			camera=self.camera,
			pointer_px=self.pointerSample(),
			over_palette=self.isOverPalette(),
			activated=self.activated,
		)
		self.editor.tick(frame)

		self.buttons.clear()
		self.activated = []

	def activate(self, kind: GateKind):
		self.activated.append(kind)


	###======= MOUSE CONTROLS =======###
	def mousePressEvent(self, event: QMouseEvent):
		btn = event.button()
		if btn in BUTTON_MAP:
			self.buttons.press(BUTTON_MAP[btn])
		elif btn == MouseBtn.MiddleButton:
			self._pan_last_pos = event.position()
		event.accept()

	def mouseReleaseEvent(self, event: QMouseEvent):
		btn = event.button()
		if btn in BUTTON_MAP:
			self.buttons.release(BUTTON_MAP[btn])
		elif btn == MouseBtn.MiddleButton:
			self._pan_last_pos = None
		event.accept()

	def mouseMoveEvent(self, event: QMouseEvent):
		# Canvas Panning
		if self._pan_last_pos is not None:
			mousepos = event.position()
			delta = mousepos - self._pan_last_pos
			z = self.camera.zoom
			self.camera.pan(QPointF(delta.x()/z, -delta.y()/z))
			self.applyCamera()
			self._pan_last_pos = mousepos
		event.accept()

	def wheelEvent(self, event: QWheelEvent):
		# angleDelta.y() equals to +/- 120 for mouse scroll
		dy = event.angleDelta().y()
		if abs(dy) <= 10: return

		anchor = self.camera.pointerToWorld(self.toDevice(event.position()), self.viewportSize())
		self.camera.zoom_by(1.25 if dy > 0 else 0.8, anchor)
		self.applyCamera()
