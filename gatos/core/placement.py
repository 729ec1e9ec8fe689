"""
Gate placement.

A gate is Unplaced while it follows the pointer and Placed once dropped. Only
one sprite may be Unplaced at a time, the one held in `PlacementController.held`.
Wire sprites carry the same hit shape as gates, so they are picked up, dragged
and dropped the same way.
"""
from __future__ import annotations
import logging

from gatos.core.QtCore import QPointF
from gatos.core.Enums import GateKind, GateState, Button
from gatos.core.input import ButtonInput
from gatos.core.world import World
from gatos.core.grid import snap_to_grid
from gatos.core import Const

logger = logging.getLogger(__name__)





class PlacementController:
	def __init__(self, world: World, pitch: float = Const.PITCH):
		self.world = world
		self.pitch = pitch
		self.held: int | None = None

	def state(self, handle: int | None = None) -> GateState:
		if handle is None: handle = self.held
		sprite = self.world.sprite(handle)
		if sprite is None: return GateState.PALETTE_IDLE
		return sprite.state


	###======= TRANSITIONS =======###
	def activate(self, kind: GateKind) -> int | None:
		"""PaletteIdle -> Unplaced. Spawns off-canvas until the pointer drags it in."""
		if self.held is not None:
			logger.debug("Ignoring %s activation, sprite %s is still unplaced", kind.name, self.held)
			return None

		self.held = self.world.spawn_gate(kind, QPointF(*Const.STAGING_POS), QPointF(0, 0))
		logger.info("Spawning %s gate %s", kind.name, self.held)
		return self.held

	def pick_up(self, pointer: QPointF) -> int | None:
		"""Placed -> Unplaced. The grab point is kept as the drag offset."""
		if self.held is not None: return None

		handle = self.world.sprite_at(pointer)
		if handle is None: return None

		sprite = self.world.sprite(handle)
		sprite.offset = pointer - sprite.pos
		self.held = handle
		logger.debug("Picked up sprite %s, offset %s", handle, sprite.offset.toTuple())
		return handle

	def drag_move(self, pointer: QPointF):
		if self.held is None: return

		sprite = self.world.sprite(self.held)
		self.world.move(self.held, snap_to_grid(pointer - sprite.offset, self.pitch))

	def release(self, over_palette: bool) -> GateState:
		"""Unplaced -> destroyed (over the palette) or Placed (anywhere else)"""
		handle = self.held
		if handle is None: return GateState.PALETTE_IDLE
		self.held = None

		if over_palette:
			self.world.despawn(handle)
			logger.info("Cancelled sprite %s", handle)
			return GateState.PALETTE_IDLE

		self.world.place(handle)
		logger.info("Placed sprite %s at %s", handle, self.world.sprite(handle).pos.toTuple())
		return GateState.PLACED


	###======= PER TICK =======###
	def update(self, buttons: ButtonInput, pointer: QPointF | None, over_palette: bool):
		if buttons.just_pressed(Button.PRIMARY) and pointer is not None:
			self.pick_up(pointer)

		if self.held is None: return

		if buttons.just_released(Button.PRIMARY):
			# Commit where the pointer let go, not where the last tick left it
			if pointer is not None: self.drag_move(pointer)
			self.release(over_palette)
		elif buttons.pressed(Button.PRIMARY) and pointer is not None:
			self.drag_move(pointer)
