from __future__ import annotations
from dataclasses import dataclass, field

from gatos.core.QtCore import QPointF, QSizeF
from gatos.core.Enums import Button
from gatos.core.mapper import Camera





###======= BUTTON EDGES =======###
class ButtonInput:
	"""Press/hold/release bookkeeping for the logical buttons, flushed once per tick."""

	def __init__(self):
		self._held: set[Button] = set()
		self._pressed: set[Button] = set()
		self._released: set[Button] = set()

	def press(self, btn: Button):
		if btn not in self._held:
			self._pressed.add(btn)
		self._held.add(btn)

	def release(self, btn: Button):
		if btn in self._held:
			self._released.add(btn)
		self._held.discard(btn)

	def pressed(self, btn: Button) -> bool:       return btn in self._held
	def just_pressed(self, btn: Button) -> bool:  return btn in self._pressed
	def just_released(self, btn: Button) -> bool: return btn in self._released

	def sync(self, held_now: set[Button]):
		"""Catches up with buttons polled from the OS, e.g. released over another widget"""
		for btn in held_now - self._held: self.press(btn)
		for btn in self._held - held_now: self.release(btn)

	def clear(self):
		"""Forget this tick's edges. Held buttons stay held."""
		self._pressed.clear()
		self._released.clear()



###======= PER-TICK SAMPLE =======###
@dataclass
class InputFrame:
	buttons: ButtonInput
	viewport_size: QSizeF
	camera: Camera
	pointer_px: QPointF | None = None    # None while the pointer is outside the viewport
	over_palette: bool = False
	activated: list = field(default_factory=list)    # gate kinds clicked in the palette this tick
