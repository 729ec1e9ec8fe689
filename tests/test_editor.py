import unittest

from gatos.core.Enums import GateKind, GateState
from gatos.core.editor import Editor
from gatos.core.raster import count_filled
from gatos.core import Const
from helpers import FakeInput, PRIMARY, SECONDARY


class TestEditorTick(unittest.TestCase):
	def setUp(self):
		self.editor = Editor()
		self.world = self.editor.world
		self.input = FakeInput(self.editor)

	# ==========================================
	# 1. WIRES
	# ==========================================

	def test_straight_wire_becomes_sprite_same_tick(self):
		self.input.tick((0, 0), press=[SECONDARY])
		created = self.input.tick((10, 0), release=[SECONDARY])

		self.assertEqual(len(created), 1)
		art = self.world.artifacts[created[0]]
		self.assertEqual((art.image.width(), art.image.height()), (2, 1))
		self.assertEqual(count_filled(art.image), 2)
		# The wire and its nodes are gone, only the sprite remains
		self.assertEqual(self.world.wires, {})
		self.assertEqual(self.world.nodes, {})
		self.assertIn(created[0], self.world.shapes)

	def test_diagonal_wire_waits_one_tick(self):
		self.input.tick((0, 0), press=[SECONDARY])
		self.assertEqual(self.input.tick((10, 10), release=[SECONDARY]), [])
		self.assertEqual(len(self.world.wires), 1)
		self.assertEqual(self.world.artifacts, {})

		created = self.input.tick((10, 10))
		self.assertEqual(len(created), 1)
		art = self.world.artifacts[created[0]]
		self.assertEqual((art.image.width(), art.image.height()), (2, 2))

	def test_degenerate_wire_is_dropped_and_logged(self):
		with self.assertLogs("gatos.core.editor", level="ERROR") as logs:
			created = self.input.tick((3, 3), press=[SECONDARY], release=[SECONDARY])
		self.assertEqual(created, [])
		self.assertIn("wire size zero", logs.output[0])
		self.assertEqual(self.world.wires, {})
		self.assertEqual(self.world.nodes, {})
		self.assertEqual(self.world.artifacts, {})

	# ==========================================
	# 2. GATES
	# ==========================================

	def test_palette_drag_and_place(self):
		self.input.tick(None, press=[PRIMARY], activated=[GateKind.AND])
		h = self.editor.placement.held
		self.assertEqual(self.world.gates[h].pos.toTuple(), Const.STAGING_POS)

		self.input.tick((22, 13))
		self.assertEqual(self.world.gates[h].pos.toTuple(), (20, 15))

		self.input.tick((22, 13), release=[PRIMARY])
		self.assertEqual(self.editor.placement.state(h), GateState.PLACED)

	def test_palette_drop_cancels(self):
		self.input.tick(None, press=[PRIMARY], activated=[GateKind.OR])
		self.input.tick(None, release=[PRIMARY], over_palette=True)
		self.assertEqual(self.world.gates, {})

	def test_drag_and_wire_share_one_pointer_sample(self):
		h = self.world.spawn_gate(GateKind.NOT, self.input.camera.center)
		self.input.tick((1, 1), press=[PRIMARY, SECONDARY])
		self.input.tick((41, 21))
		created = self.input.tick((41, 21), release=[PRIMARY, SECONDARY])

		self.assertEqual(self.world.gates[h].pos.toTuple(), (40, 20))
		self.assertEqual(created, [])    # diagonal, routed next tick
		self.assertEqual(len(self.input.tick((41, 21))), 1)

	def test_wire_sprite_can_be_dragged(self):
		self.input.tick((0, 0), press=[SECONDARY])
		h, = self.input.tick((20, 0), release=[SECONDARY])

		self.input.tick((10, 0), press=[PRIMARY])
		self.assertEqual(self.editor.placement.held, h)
		self.input.tick((31, 4))
		self.assertEqual(self.world.artifacts[h].anchor.toTuple(), (30, 5))

		self.input.tick((52, -3), release=[PRIMARY])
		self.assertIsNone(self.editor.placement.held)
		self.assertEqual(self.world.artifacts[h].anchor.toTuple(), (50, -5))
		self.assertEqual(self.editor.placement.state(h), GateState.PLACED)

	def test_reset_clears_everything(self):
		self.input.tick((0, 0), press=[SECONDARY])
		self.input.tick(None, activated=[GateKind.AND])
		self.editor.reset()
		self.assertEqual(self.world.gates, {})
		self.assertEqual(self.world.wires, {})
		self.assertIsNone(self.editor.placement.held)
		self.assertIsNone(self.editor.capture.wire)


if __name__ == "__main__":
	unittest.main(verbosity=2)
