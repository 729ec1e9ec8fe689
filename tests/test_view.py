import os
import unittest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from gatos.core.QtCore import QApplication, QPoint, QPointF
from gatos.core.editor import Editor
from gatos.editor.circuit.viewport import CircuitView
from helpers import P


class TestCircuitView(unittest.TestCase):
	"""What the view draws at a pixel is what the Camera maps that pixel to"""

	@classmethod
	def setUpClass(cls):
		cls.app = QApplication.instance() or QApplication([])

	def setUp(self):
		self.view = CircuitView(Editor())
		self.view.timer.stop()
		self.view.resize(400, 300)
		self.view.show()
		self.app.processEvents()
		self.view.applyCamera()

	def tearDown(self):
		self.view.close()
		self.view.deleteLater()

	def pixels(self):
		w, h = self.view.viewport().width(), self.view.viewport().height()
		return [(0, 0), (w - 1, 0), (0, h - 1), (w - 1, h - 1), (w//2, h//2), (w - 1, 10)]

	def assertViewMatchesCamera(self):
		cam = self.view.camera
		# Scroll bars are integral, so the view may sit up to one device pixel off
		tol = 1.0/cam.zoom + 1e-6
		size = self.view.viewportSize()
		for x, y in self.pixels():
			with self.subTest(pixel=(x, y), zoom=cam.zoom, center=cam.center.toTuple()):
				drawn = self.view.mapToScene(QPoint(x, y))
				mapped = cam.pointerToWorld(self.view.toDevice(QPointF(x, y)), size)
				self.assertAlmostEqual(drawn.x(), mapped.x(), delta=tol)
				self.assertAlmostEqual(drawn.y(), mapped.y(), delta=tol)

	# ==========================================
	# 1. DEVICE PIXELS
	# ==========================================

	def test_to_device_flips_y(self):
		h = self.view.viewport().height()
		self.assertEqual(self.view.toDevice(P(7, 0)).toTuple(), (7, h))
		self.assertEqual(self.view.toDevice(P(7, h)).toTuple(), (7, 0))

	def test_world_y_grows_upwards(self):
		top = self.view.mapToScene(QPoint(50, 0))
		bottom = self.view.mapToScene(QPoint(50, self.view.viewport().height() - 1))
		self.assertGreater(top.y(), bottom.y())

	# ==========================================
	# 2. CAMERA AGREEMENT
	# ==========================================

	def test_default_camera(self):
		self.assertViewMatchesCamera()

	def test_after_zoom(self):
		cam = self.view.camera
		anchor = cam.pointerToWorld(P(300, 40), self.view.viewportSize())
		cam.zoom_by(1.25, anchor)
		self.view.applyCamera()
		self.assertViewMatchesCamera()

	def test_after_pan(self):
		self.view.camera.pan(P(30, -15))
		self.view.applyCamera()
		self.assertViewMatchesCamera()

	def test_after_pan_and_zoom_out(self):
		cam = self.view.camera
		cam.pan(P(-42, 17))
		cam.zoom_by(0.8, P(10, 10))
		self.view.applyCamera()
		self.assertViewMatchesCamera()


if __name__ == "__main__":
	unittest.main(verbosity=2)
