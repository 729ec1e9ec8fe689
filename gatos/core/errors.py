class GatosError(Exception):
	"""Base class for everything the editor core raises on purpose."""


class DegenerateWireError(GatosError):
	"""A finished wire whose bounding box covers no grid cells."""

	def __init__(self, lo, hi):
		self.lo = lo
		self.hi = hi
		super().__init__(f"wire size zero: min={lo.toTuple()} max={hi.toTuple()}")


class RoutingInvariantError(GatosError, AssertionError):
	"""A segment reached the rasterizer without sharing an axis."""

	def __init__(self, a, b):
		self.a = a
		self.b = b
		super().__init__(f"segment {a} -> {b} is not orthogonal")
