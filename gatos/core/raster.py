"""
Wire rasterization: one pixel per grid cell, one image per wire.

The buffer is top-left origin while world Y grows upwards, so rows are written
bottom-up (`row = height - 1 - y`).
"""
from __future__ import annotations

from gatos.core.QtCore import Qt, QPointF, QSizeF, QImage, QColor, ImageFormat
from gatos.core.world import RasterArtifact
from gatos.core.errors import DegenerateWireError, RoutingInvariantError
from gatos.core.grid import snap_to_grid, toCells
from gatos.core import Const





def bounding_box(points: list[QPointF]) -> tuple[QPointF, QPointF]:
	xs = [p.x() for p in points]
	ys = [p.y() for p in points]
	return QPointF(min(xs), min(ys)), QPointF(max(xs), max(ys))

def buffer_size(lo: QPointF, hi: QPointF, pitch: float = Const.PITCH) -> tuple[int, int]:
	"""Cells per axis. A straight run still gets one row (or column)."""
	w, h = toCells(hi - lo, pitch)
	if w == 0 and h == 0:
		raise DegenerateWireError(lo, hi)
	return max(w, 1), max(h, 1)

def wire_color() -> QColor:
	return QColor.fromRgbF(*Const.WIRE_COLOR)


def rasterize(points: list[QPointF], pitch: float = Const.PITCH, scale: float = Const.SPRITE_SCALE) -> RasterArtifact:
	"""
	Draws a routed wire into a one-pixel-per-cell image.

	Each cell is nominally `2*pitch` world units across, drawn at `scale` like
	the gate sprites (110 -> 55). With the default 0.5 the cell ends up `pitch`
	wide: the (0, 0) -> (10, 0) wire gives a 2x1 buffer shown at 10x5, not the
	unscaled 20x10.
	"""
	lo, hi = bounding_box(points)
	w, h = buffer_size(lo, hi, pitch)

	img = QImage(w, h, ImageFormat.Format_ARGB32)
	img.fill(Qt.GlobalColor.transparent)
	color = wire_color()

	def put(x: int, y: int):
		# A run along the far edge of the box lands one past the last cell
		x = min(x, w-1)
		y = min(y, h-1)
		img.setPixelColor(x, h-1-y, color)

	cells = [toCells(p - lo, pitch) for p in points]
	for (x1, y1), (x2, y2) in zip(cells, cells[1:]):
		if x1 == x2:
			for y in range(min(y1, y2), max(y1, y2)): put(x1, y)
		elif y1 == y2:
			for x in range(min(x1, x2), max(x1, x2)): put(x, y1)
		else:
			raise RoutingInvariantError((x1, y1), (x2, y2))

	anchor = snap_to_grid(lo, pitch) + (hi - lo)*0.5
	cell = 2*pitch*scale
	return RasterArtifact(img, anchor, QSizeF(w*cell, h*cell))


def count_filled(img: QImage) -> int:
	return sum(
		1
		for y in range(img.height())
		for x in range(img.width())
		if img.pixelColor(x, y).alpha() > 0
	)
