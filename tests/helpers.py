from gatos.core.QtCore import QPointF, QSizeF
from gatos.core.Enums import Button
from gatos.core.input import ButtonInput, InputFrame
from gatos.core.mapper import Camera

# With a 200x100 viewport, zoom 1 and the camera at the origin, the pointer
# sits at world + (100, 50)
VIEWPORT = QSizeF(200, 100)


def P(x, y):
	return QPointF(x, y)

def tup(points):
	return [p.toTuple() for p in points]


class FakeInput:
	"""Drives an Editor the way CircuitView does: edges in, one frame per tick, edges out."""

	def __init__(self, editor):
		self.editor = editor
		self.camera = Camera(zoom=1.0)
		self.buttons = ButtonInput()

	def at(self, wx, wy):
		return QPointF(wx + VIEWPORT.width()/2, wy + VIEWPORT.height()/2)

	def tick(self, world_pos=None, press=(), release=(), over_palette=False, activated=()):
		for btn in press:   self.buttons.press(btn)
		for btn in release: self.buttons.release(btn)
		frame = InputFrame(
			buttons=self.buttons,
			viewport_size=VIEWPORT,
			camera=self.camera,
			pointer_px=None if world_pos is None else self.at(*world_pos),
			over_palette=over_palette,
			activated=list(activated),
		)
		created = self.editor.tick(frame)
		self.buttons.clear()
		return created


PRIMARY = Button.PRIMARY
SECONDARY = Button.SECONDARY
