from __future__ import annotations

from gatos.core.QtCore import *
from gatos.core.world import Gate, RasterArtifact
from gatos.core import Const

from gatos.editor import assets





class SpriteItem(QGraphicsItem):
	"""An image centred on its position. World Y points up, so the image is flipped back."""

	def __init__(self, image: QImage, size: QSizeF):
		super().__init__()
		self._image = image
		self._rect = QRectF(-size.width()/2, -size.height()/2, size.width(), size.height())
		self.setZValue(0)

	def boundingRect(self) -> QRectF:
		return self._rect

	def paint(self, painter: QPainter, option, widget=None):
		painter.save()
		painter.scale(1, -1)
		painter.drawImage(self._rect, self._image)
		painter.restore()



###======= GATE =======###
class GateItem(SpriteItem):
	def __init__(self, gate: Gate):
		size = Const.GATE_SIZE
		super().__init__(assets.gate_image(gate.kind), QSizeF(size, size))
		self.kind = gate.kind
		self.syncFrom(gate)

	def syncFrom(self, gate: Gate):
		self.setPos(gate.pos)
		# Held gates float above everything else
		self.setZValue(2 if gate.offset is not None else 1)
		self.setOpacity(0.75 if gate.offset is not None else 1.0)



###======= WIRE =======###
class WireSpriteItem(SpriteItem):
	def __init__(self, artifact: RasterArtifact):
		super().__init__(artifact.image, artifact.size)
		self.syncFrom(artifact)

	def syncFrom(self, artifact: RasterArtifact):
		self.setPos(artifact.anchor)
		self.setZValue(2 if artifact.offset is not None else 0)
		self.setOpacity(0.75 if artifact.offset is not None else 1.0)

	def paint(self, painter: QPainter, option, widget=None):
		# One image pixel per grid cell, keep them crisp
		painter.setRenderHint(QPainter.RenderHint.SmoothPixmapTransform, False)
		super().paint(painter, option, widget)
