from __future__ import annotations
import logging

from gatos.core.QtCore import *
from gatos.core.world import World, WorldEvent
from gatos.core import Const

from gatos.editor.styles import Color
from .spriteitem import GateItem, WireSpriteItem

logger = logging.getLogger(__name__)





# region: ###======= CIRCUIT SCENE =======###
class CircuitScene(QGraphicsScene):
	"""Mirrors the World into graphics items. The World stays the single source of truth."""

	def __init__(self, world: World):
		super().__init__()
		self.world = world
		self.sprites: dict[int, QGraphicsItem] = {}
		self.setBackgroundBrush(Color.clear)
		self.world.listeners.append(self.worldChanged)

	def worldChanged(self, event: WorldEvent, handle: int):
		match event:
			case WorldEvent.GATE_ADDED:
				self._addItem(handle, GateItem(self.world.gates[handle]))
			case WorldEvent.GATE_MOVED | WorldEvent.GATE_PLACED:
				item = self.sprites.get(handle)
				if item: item.syncFrom(self.world.gates[handle])
			case WorldEvent.ARTIFACT_ADDED:
				self._addItem(handle, WireSpriteItem(self.world.artifacts[handle]))
			case WorldEvent.ARTIFACT_MOVED | WorldEvent.ARTIFACT_PLACED:
				item = self.sprites.get(handle)
				if item: item.syncFrom(self.world.artifacts[handle])
			case WorldEvent.GATE_REMOVED | WorldEvent.ARTIFACT_REMOVED:
				self._removeItem(handle)

	def _addItem(self, handle: int, item: QGraphicsItem):
		self.sprites[handle] = item
		self.addItem(item)

	def _removeItem(self, handle: int):
		item = self.sprites.pop(handle, None)
		if item is not None:
			self.removeItem(item)

	def drawBackground(self, painter: QPainter, rect: QRectF):
		super().drawBackground(painter, rect)

		# One dot every few grid cells, denser would just be noise
		step = Const.PITCH*4
		left = int(rect.left()//step)*step
		bottom = int(rect.top()//step)*step
		painter.setPen(QPen(Color.grid_dot, 0))
		y = bottom
		while y < rect.bottom():
			x = left
			while x < rect.right():
				painter.drawPoint(QPointF(x, y))
				x += step
			y += step
# endregion
