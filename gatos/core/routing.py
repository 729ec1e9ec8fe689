"""
Orthogonal wire routing.

`normalize` turns every diagonal segment into a Z-shaped dogleg by inserting two
via points on a shared vertical. One pass already yields an orthogonal path, the
second pass is what proves it (no new points, so the path has converged).
"""
from __future__ import annotations
import logging

from gatos.core.QtCore import QPointF
from gatos.core.world import World
from gatos.core.grid import snap_to_grid
from gatos.core import Const

logger = logging.getLogger(__name__)





def shares_axis(a: QPointF, b: QPointF) -> bool:
	return int(a.x()) == int(b.x()) or int(a.y()) == int(b.y())

def is_orthogonal(points: list[QPointF]) -> bool:
	return all(shares_axis(a, b) for a, b in zip(points, points[1:]))

def split_x(a: QPointF, b: QPointF, pitch: float = Const.PITCH) -> float:
	return snap_to_grid(QPointF((a.x() + b.x())/2, 0), pitch).x()


def normalize(points: list[QPointF], pitch: float = Const.PITCH) -> tuple[list[QPointF], bool]:
	"""One routing pass. Returns the new points and whether nothing had to be split."""
	if len(points) < 2:
		return list(points), True

	out: list[QPointF] = []
	for a, b in zip(points, points[1:]):
		out.append(a)
		if not shares_axis(a, b):
			sx = split_x(a, b, pitch)
			out.append(QPointF(sx, a.y()))
			out.append(QPointF(sx, b.y()))
	out.append(points[-1])

	return out, len(out) == len(points)



###======= DRIVER =======###
class Normalizer:
	"""Runs one `normalize` pass per pending wire per tick, keeping the world's nodes in sync."""

	def __init__(self, world: World, pitch: float = Const.PITCH):
		self.world = world
		self.pitch = pitch
		self.pending: list[int] = []
		self.passes: dict[int, int] = {}

	def submit(self, wire: int):
		if wire not in self.pending:
			self.pending.append(wire)
			self.passes[wire] = 0

	def step(self) -> list[int]:
		"""Returns the wires that converged during this pass"""
		converged: list[int] = []

		for wire in list(self.pending):
			if wire not in self.world.wires:
				# Dropped by someone else
				self._forget(wire)
				continue

			self.passes[wire] += 1
			if self._pass(wire):
				logger.debug("Wire %s converged after %d pass(es)", wire, self.passes[wire])
				self._forget(wire)
				converged.append(wire)

		return converged

	def _pass(self, wire: int) -> bool:
		record = self.world.wires[wire]
		positions = self.world.node_positions(wire)
		points, converged = normalize(positions, self.pitch)
		if converged: return True

		# Existing nodes come back as the very same objects, everything else is a via
		originals = {id(p): n for p, n in zip(positions, record.nodes)}
		record.nodes = [
			originals[id(p)] if id(p) in originals else self.world.spawn_node(p)
			for p in points
		]
		return False

	def _forget(self, wire: int):
		self.pending.remove(wire)
		self.passes.pop(wire, None)
