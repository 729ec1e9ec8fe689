"""
Pointer -> world mapping.

The pointer arrives in device convention: pixels from the bottom-left corner of
the viewport. It is scaled straight into NDC without a Y flip and then
un-projected through the camera, so world Y grows upwards.
"""
from __future__ import annotations

from gatos.core.QtCore import QPointF, QSizeF, QMatrix4x4, QVector3D
from gatos.core import Const





def screen_to_world(
		pointer_px: QPointF,
		viewport_size_px: QSizeF,
		camera_projection_inverse: QMatrix4x4,
		camera_transform: QMatrix4x4
	) -> QPointF:
	# screen position [0..resolution] -> ndc [-1..1]
	ndc_x = pointer_px.x()/viewport_size_px.width()*2.0 - 1.0
	ndc_y = pointer_px.y()/viewport_size_px.height()*2.0 - 1.0

	# Undo the projection, then the camera transform
	ndc_to_world = camera_transform * camera_projection_inverse
	world = ndc_to_world.map(QVector3D(ndc_x, ndc_y, -1.0))
	return QPointF(world.x(), world.y())



###======= CAMERA =======###
class Camera:
	"""Orthographic 2D camera: a world-space centre and a zoom in pixels per world unit."""

	def __init__(self, center: QPointF | None = None, zoom: float = Const.DEFAULT_ZOOM):
		self.center = QPointF(center) if center is not None else QPointF(0, 0)
		self.zoom = zoom

	def _halfExtents(self, viewport_size: QSizeF) -> tuple[float, float]:
		return (
			viewport_size.width()/(2*self.zoom),
			viewport_size.height()/(2*self.zoom)
		)

	def projection_matrix(self, viewport_size: QSizeF) -> QMatrix4x4:
		hw, hh = self._halfExtents(viewport_size)
		m = QMatrix4x4()
		m.ortho(-hw, hw, -hh, hh, Const.NEAR, Const.FAR)
		return m

	def projection_inverse(self, viewport_size: QSizeF) -> QMatrix4x4:
		# Closed form of ortho()^-1, no need to go through a general inverse
		hw, hh = self._halfExtents(viewport_size)
		n, f = Const.NEAR, Const.FAR
		m = QMatrix4x4()
		m.translate(0, 0, -(f + n)/2)
		m.scale(hw, hh, -(f - n)/2)
		return m

	def transform_matrix(self) -> QMatrix4x4:
		m = QMatrix4x4()
		m.translate(self.center.x(), self.center.y(), 0)
		return m

	def pointerToWorld(self, pointer_px: QPointF, viewport_size: QSizeF) -> QPointF:
		return screen_to_world(
			pointer_px,
			viewport_size,
			self.projection_inverse(viewport_size),
			self.transform_matrix()
		)


	# Movement
	def pan(self, delta_world: QPointF):
		self.center -= delta_world

	def zoom_by(self, factor: float, anchor_world: QPointF) -> float:
		"""Zooms while keeping `anchor_world` at the same pixel. Returns the new zoom."""
		old = self.zoom
		new = max(Const.MIN_ZOOM, min(old*factor, Const.MAX_ZOOM))
		self.center = anchor_world - (anchor_world - self.center)*(old/new)
		self.zoom = new
		return new
