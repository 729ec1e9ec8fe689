"""
One editor tick.

Every tick maps the pointer exactly once and feeds that same world position to
placement and wire capture, then advances routing and rasterizes whatever
converged.
"""
from __future__ import annotations
import logging

from gatos.core.QtCore import QPointF
from gatos.core.input import InputFrame
from gatos.core.world import World
from gatos.core.placement import PlacementController
from gatos.core.capture import WireCapture
from gatos.core.routing import Normalizer
from gatos.core.raster import rasterize, count_filled
from gatos.core.errors import DegenerateWireError
from gatos.core import Const

logger = logging.getLogger(__name__)





class Editor:
	def __init__(self, world: World | None = None, pitch: float = Const.PITCH):
		self.world = world if world is not None else World()
		self.pitch = pitch
		self.placement = PlacementController(self.world, pitch)
		self.capture = WireCapture(self.world, pitch)
		self.normalizer = Normalizer(self.world, pitch)
		self.pointer: QPointF | None = None

	def tick(self, frame: InputFrame) -> list[int]:
		"""Returns the handles of wire artifacts created this tick"""
		if frame.pointer_px is None:
			self.pointer = None
		else:
			self.pointer = frame.camera.pointerToWorld(frame.pointer_px, frame.viewport_size)

		for kind in frame.activated:
			self.placement.activate(kind)
		self.placement.update(frame.buttons, self.pointer, frame.over_palette)

		sealed = self.capture.update(frame.buttons, self.pointer)
		if sealed is not None:
			self.normalizer.submit(sealed)

		created = []
		for wire in self.normalizer.step():
			handle = self.finalize(wire)
			if handle is not None: created.append(handle)
		return created

	def finalize(self, wire: int) -> int | None:
		"""Rasterizes a converged wire and frees its nodes. Degenerate wires are dropped."""
		points = self.world.node_positions(wire)
		try:
			artifact = rasterize(points, self.pitch)
		except DegenerateWireError as e:
			logger.error("%s, dropping wire %s", e, wire)
			return None
		finally:
			self.world.despawn_wire(wire)

		handle = self.world.add_artifact(artifact)
		logger.info(
			"Wire %s -> sprite %s: %dx%d cells, %d filled",
			wire, handle, artifact.image.width(), artifact.image.height(), count_filled(artifact.image)
		)
		return handle

	def reset(self):
		self.placement.held = None
		self.capture.wire = None
		self.normalizer.pending.clear()
		self.normalizer.passes.clear()
		self.world.clear()
