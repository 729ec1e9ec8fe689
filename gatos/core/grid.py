import math

from gatos.core.QtCore import QPointF
from gatos.core import Const

PITCH = Const.PITCH


def round_half_away(v: float) -> float:
	"""`round()` but ties go away from zero (2.5 -> 3, -2.5 -> -3)"""
	return math.copysign(math.floor(abs(v) + 0.5), v)

def snap_to_grid(point: QPointF, pitch: float = PITCH) -> QPointF:
	return QPointF(
		round_half_away(point.x()/pitch)*pitch,
		round_half_away(point.y()/pitch)*pitch
	)

def snapT(tup: tuple[float, float], pitch: float = PITCH) -> tuple[float, float]:
	x, y = tup
	return (
		round_half_away(x/pitch)*pitch,
		round_half_away(y/pitch)*pitch
	)

def toCells(span: QPointF, pitch: float = PITCH) -> tuple[int, int]:
	"""World-space extent -> whole grid cells per axis"""
	return (
		int(round_half_away(span.x()/pitch)),
		int(round_half_away(span.y()/pitch))
	)

def isSettled(point: QPointF, pitch: float = PITCH) -> bool:
	return point.x() % pitch == 0 and point.y() % pitch == 0
