"""
Arena for everything that lives on the canvas.

Records are plain dataclasses addressed by integer handles. Handles are never
reused within one World, so a stale handle simply misses.
"""
from __future__ import annotations
import itertools
import logging
from dataclasses import dataclass
from enum import IntEnum
from typing import Callable

from gatos.core.QtCore import QPointF, QRectF, QSizeF, QImage
from gatos.core.Enums import GateKind, GateState
from gatos.core import Const

logger = logging.getLogger(__name__)





###======= RECORDS =======###
@dataclass
class Gate:
	kind: GateKind
	pos: QPointF
	offset: QPointF | None = None    # only set while Unplaced

	@property
	def state(self) -> GateState:
		return GateState.UNPLACED if self.offset is not None else GateState.PLACED

	def rect(self) -> QRectF:
		s = Const.GATE_SIZE
		return QRectF(self.pos.x() - s/2, self.pos.y() - s/2, s, s)


@dataclass
class WireNode:
	pos: QPointF


@dataclass
class Wire:
	nodes: list[int]
	sealed: bool = False    # released, waiting for normalisation


@dataclass
class RasterArtifact:
	image: QImage
	anchor: QPointF
	size: QSizeF
	offset: QPointF | None = None    # only set while held, same as Gate

	@property
	def pos(self) -> QPointF:
		return self.anchor

	@property
	def state(self) -> GateState:
		return GateState.UNPLACED if self.offset is not None else GateState.PLACED

	def rect(self) -> QRectF:
		w, h = self.size.width(), self.size.height()
		return QRectF(self.anchor.x() - w/2, self.anchor.y() - h/2, w, h)



###======= POINT QUERIES =======###
class ShapeIndex:
	"""Axis aligned hit shapes. Later registrations sit on top."""

	def __init__(self):
		self._shapes: dict[int, QRectF] = {}

	def __contains__(self, handle: int) -> bool:
		return handle in self._shapes

	def __len__(self) -> int:
		return len(self._shapes)

	def register(self, handle: int, rect: QRectF):
		self._shapes.pop(handle, None)
		self._shapes[handle] = QRectF(rect)

	def update(self, handle: int, rect: QRectF):
		"""Moves a shape without changing its stacking"""
		if handle in self._shapes:
			self._shapes[handle] = QRectF(rect)

	def raise_(self, handle: int):
		rect = self._shapes.pop(handle, None)
		if rect is not None:
			self._shapes[handle] = rect

	def remove(self, handle: int):
		self._shapes.pop(handle, None)

	def intersections_with_point(self, point: QPointF) -> list[int]:
		return [h for h, r in reversed(self._shapes.items()) if r.contains(point)]

	def clear(self):
		self._shapes.clear()



###======= WORLD =======###
class WorldEvent(IntEnum):
	GATE_ADDED       = 0
	GATE_MOVED       = 1
	GATE_REMOVED     = 2
	GATE_PLACED      = 3
	ARTIFACT_ADDED   = 4
	ARTIFACT_REMOVED = 5
	ARTIFACT_MOVED   = 6
	ARTIFACT_PLACED  = 7


class World:
	def __init__(self):
		self._ids = itertools.count(1)
		self.gates: dict[int, Gate] = {}
		self.nodes: dict[int, WireNode] = {}
		self.wires: dict[int, Wire] = {}
		self.artifacts: dict[int, RasterArtifact] = {}
		self.shapes = ShapeIndex()
		self.listeners: list[Callable[[WorldEvent, int], None]] = []

	def _emit(self, event: WorldEvent, handle: int):
		for listener in self.listeners:
			listener(event, handle)


	### Gates
	def spawn_gate(self, kind: GateKind, pos: QPointF, offset: QPointF | None = None) -> int:
		h = next(self._ids)
		gate = Gate(kind, QPointF(pos), offset)
		self.gates[h] = gate
		self.shapes.register(h, gate.rect())
		self._emit(WorldEvent.GATE_ADDED, h)
		return h

	def move_gate(self, handle: int, pos: QPointF):
		gate = self.gates[handle]
		if gate.pos == pos: return
		gate.pos = QPointF(pos)
		self.shapes.update(handle, gate.rect())
		self._emit(WorldEvent.GATE_MOVED, handle)

	def place_gate(self, handle: int):
		self.gates[handle].offset = None
		self.shapes.raise_(handle)
		self._emit(WorldEvent.GATE_PLACED, handle)

	def despawn_gate(self, handle: int):
		if self.gates.pop(handle, None) is None: return
		self.shapes.remove(handle)
		self._emit(WorldEvent.GATE_REMOVED, handle)


	### Wires
	def spawn_node(self, pos: QPointF) -> int:
		h = next(self._ids)
		self.nodes[h] = WireNode(QPointF(pos))
		return h

	def open_wire(self) -> int:
		h = next(self._ids)
		self.wires[h] = Wire([])
		return h

	def push_node(self, wire: int, pos: QPointF) -> int:
		n = self.spawn_node(pos)
		self.wires[wire].nodes.append(n)
		return n

	def node_positions(self, wire: int) -> list[QPointF]:
		return [self.nodes[n].pos for n in self.wires[wire].nodes]

	def despawn_wire(self, wire: int, keep_nodes: bool = False):
		w = self.wires.pop(wire, None)
		if w is None or keep_nodes: return
		for n in w.nodes:
			self.nodes.pop(n, None)


	### Artifacts
	def add_artifact(self, artifact: RasterArtifact) -> int:
		h = next(self._ids)
		self.artifacts[h] = artifact
		self.shapes.register(h, artifact.rect())
		self._emit(WorldEvent.ARTIFACT_ADDED, h)
		return h

	def move_artifact(self, handle: int, anchor: QPointF):
		artifact = self.artifacts[handle]
		if artifact.anchor == anchor: return
		artifact.anchor = QPointF(anchor)
		self.shapes.update(handle, artifact.rect())
		self._emit(WorldEvent.ARTIFACT_MOVED, handle)

	def place_artifact(self, handle: int):
		self.artifacts[handle].offset = None
		self.shapes.raise_(handle)
		self._emit(WorldEvent.ARTIFACT_PLACED, handle)

	def remove_artifact(self, handle: int):
		if self.artifacts.pop(handle, None) is None: return
		self.shapes.remove(handle)
		self._emit(WorldEvent.ARTIFACT_REMOVED, handle)


	### Anything with a hit shape (gates and wire sprites)
	def sprite(self, handle: int | None) -> Gate | RasterArtifact | None:
		if handle in self.gates: return self.gates[handle]
		return self.artifacts.get(handle)

	def sprite_at(self, point: QPointF) -> int | None:
		"""Topmost gate or wire sprite under `point`"""
		for h in self.shapes.intersections_with_point(point):
			if h in self.gates or h in self.artifacts:
				return h
		return None

	def move(self, handle: int, pos: QPointF):
		if handle in self.gates: self.move_gate(handle, pos)
		else:                    self.move_artifact(handle, pos)

	def place(self, handle: int):
		if handle in self.gates: self.place_gate(handle)
		else:                    self.place_artifact(handle)

	def despawn(self, handle: int):
		if handle in self.gates: self.despawn_gate(handle)
		else:                    self.remove_artifact(handle)


	def clear(self):
		for h in list(self.gates):     self.despawn_gate(h)
		for h in list(self.artifacts): self.remove_artifact(h)
		self.wires.clear()
		self.nodes.clear()
		self.shapes.clear()
		logger.debug("World cleared")
