import unittest

from gatos.core.QtCore import QPointF, QSizeF, QMatrix4x4, QVector3D
from gatos.core.mapper import screen_to_world, Camera
from gatos.core import Const
from helpers import P, VIEWPORT


class TestScreenToWorld(unittest.TestCase):
	def assertPoint(self, got: QPointF, x: float, y: float):
		self.assertAlmostEqual(got.x(), x, places=3)
		self.assertAlmostEqual(got.y(), y, places=3)

	def test_identity_matrices_give_ndc(self):
		"""Without a camera the result is just NDC, bottom-left pixel is (-1, -1)"""
		size = QSizeF(200, 100)
		self.assertPoint(screen_to_world(P(0, 0), size, QMatrix4x4(), QMatrix4x4()), -1, -1)
		self.assertPoint(screen_to_world(P(200, 100), size, QMatrix4x4(), QMatrix4x4()), 1, 1)
		self.assertPoint(screen_to_world(P(100, 50), size, QMatrix4x4(), QMatrix4x4()), 0, 0)

	def test_no_vertical_flip(self):
		"""Larger pointer Y means larger world Y"""
		cam = Camera(zoom=1.0)
		low = cam.pointerToWorld(P(100, 10), VIEWPORT)
		high = cam.pointerToWorld(P(100, 90), VIEWPORT)
		self.assertGreater(high.y(), low.y())

	def test_camera_translation(self):
		cam = Camera(P(40, -20), zoom=1.0)
		self.assertPoint(cam.pointerToWorld(P(100, 50), VIEWPORT), 40, -20)
		self.assertPoint(cam.pointerToWorld(P(110, 55), VIEWPORT), 50, -15)

	def test_zoom_scales_pixels(self):
		cam = Camera(zoom=2.0)
		self.assertPoint(cam.pointerToWorld(P(120, 50), VIEWPORT), 10, 0)

	def test_projection_inverse_undoes_projection(self):
		cam = Camera(zoom=1.5)
		proj = cam.projection_matrix(VIEWPORT)
		inv = cam.projection_inverse(VIEWPORT)
		v = QVector3D(12.0, -7.0, 3.0)
		back = inv.map(proj.map(v))
		self.assertAlmostEqual(back.x(), v.x(), places=3)
		self.assertAlmostEqual(back.y(), v.y(), places=3)
		self.assertAlmostEqual(back.z(), v.z(), places=2)


class TestCamera(unittest.TestCase):
	def test_zoom_keeps_anchor_under_pointer(self):
		cam = Camera(P(10, 10), zoom=1.0)
		pointer = P(150, 20)
		before = cam.pointerToWorld(pointer, VIEWPORT)
		cam.zoom_by(1.25, before)
		after = cam.pointerToWorld(pointer, VIEWPORT)
		self.assertAlmostEqual(before.x(), after.x(), places=3)
		self.assertAlmostEqual(before.y(), after.y(), places=3)

	def test_zoom_is_clamped(self):
		cam = Camera(zoom=1.0)
		self.assertEqual(cam.zoom_by(100, P(0, 0)), Const.MAX_ZOOM)
		self.assertEqual(cam.zoom_by(0.0001, P(0, 0)), Const.MIN_ZOOM)

	def test_pan_moves_center_against_drag(self):
		cam = Camera(zoom=1.0)
		cam.pan(P(5, -5))
		self.assertEqual(cam.center.toTuple(), (-5, 5))


if __name__ == "__main__":
	unittest.main(verbosity=2)
