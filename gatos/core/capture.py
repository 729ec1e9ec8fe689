from __future__ import annotations
import logging

from gatos.core.QtCore import QPointF
from gatos.core.Enums import CaptureState, Button
from gatos.core.input import ButtonInput
from gatos.core.world import World
from gatos.core.grid import snap_to_grid
from gatos.core import Const

logger = logging.getLogger(__name__)





class WireCapture:
	"""Two-point wire capture on the secondary button: one node at press, one at release."""

	def __init__(self, world: World, pitch: float = Const.PITCH):
		self.world = world
		self.pitch = pitch
		self.wire: int | None = None

	@property
	def state(self) -> CaptureState:
		return CaptureState.IDLE if self.wire is None else CaptureState.CAPTURING

	def begin(self, pointer: QPointF) -> int:
		if self.wire is not None:
			# A press we never saw the release for. Keep the open wire.
			return self.wire

		self.wire = self.world.open_wire()
		self.world.push_node(self.wire, snap_to_grid(pointer, self.pitch))
		return self.wire

	def finish(self, pointer: QPointF) -> int | None:
		"""Seals the wire and hands its handle over. Returns None when idle."""
		wire = self.wire
		if wire is None: return None

		self.world.push_node(wire, snap_to_grid(pointer, self.pitch))
		self.world.wires[wire].sealed = True
		self.wire = None
		logger.debug("Captured wire %s: %s", wire, [p.toTuple() for p in self.world.node_positions(wire)])
		return wire

	def update(self, buttons: ButtonInput, pointer: QPointF | None) -> int | None:
		if pointer is None: return None

		if buttons.just_pressed(Button.SECONDARY):
			self.begin(pointer)

		if self.wire is not None and (
			buttons.just_released(Button.SECONDARY)
			or not buttons.pressed(Button.SECONDARY)
		):
			return self.finish(pointer)
		return None
