"""
Gate artwork, drawn with QPainterPath instead of loaded from sprite files.

Images are SPRITE-sized (twice the on-canvas size) and cached per kind.
"""
from __future__ import annotations
from functools import cache

from gatos.core.QtCore import *
from gatos.core.Enums import GateKind
from gatos.core import Const

from gatos.editor.styles import Color





def _andPath(s: float) -> QPainterPath:
	path = QPainterPath()
	path.moveTo(0.2*s, 0.2*s)
	path.lineTo(0.5*s, 0.2*s)
	path.arcTo(QRectF(0.2*s, 0.2*s, 0.6*s, 0.6*s), 90, -180)
	path.lineTo(0.2*s, 0.8*s)
	path.closeSubpath()
	return path

def _orPath(s: float) -> QPainterPath:
	path = QPainterPath()
	path.moveTo(0.2*s, 0.2*s)
	path.quadTo(0.65*s, 0.2*s, 0.85*s, 0.5*s)
	path.quadTo(0.65*s, 0.8*s, 0.2*s, 0.8*s)
	path.quadTo(0.35*s, 0.5*s, 0.2*s, 0.2*s)
	return path

def _notPath(s: float) -> QPainterPath:
	path = QPainterPath()
	path.moveTo(0.2*s, 0.25*s)
	path.lineTo(0.72*s, 0.5*s)
	path.lineTo(0.2*s, 0.75*s)
	path.closeSubpath()
	path.addEllipse(QPointF(0.77*s, 0.5*s), 0.05*s, 0.05*s)
	return path

def _leads(kind: GateKind, s: float) -> QPainterPath:
	path = QPainterPath()
	if kind == GateKind.NOT:
		path.moveTo(0.0, 0.5*s); path.lineTo(0.2*s, 0.5*s)
		path.moveTo(0.82*s, 0.5*s); path.lineTo(s, 0.5*s)
	else:
		path.moveTo(0.0, 0.35*s); path.lineTo(0.27*s, 0.35*s)
		path.moveTo(0.0, 0.65*s); path.lineTo(0.27*s, 0.65*s)
		path.moveTo(0.8*s, 0.5*s); path.lineTo(s, 0.5*s)
	return path

BODY = {
	GateKind.AND: _andPath,
	GateKind.OR : _orPath,
	GateKind.NOT: _notPath,
}


@cache
def gate_image(kind: GateKind) -> QImage:
	s = Const.GATE_SPRITE
	img = QImage(s, s, ImageFormat.Format_ARGB32_Premultiplied)
	img.fill(Qt.GlobalColor.transparent)

	painter = QPainter(img)
	painter.setRenderHint(QPainter.RenderHint.Antialiasing)
	painter.setPen(QPen(Color.outline, 4))
	painter.drawPath(_leads(kind, s))
	painter.setBrush(Color.gate_body)
	painter.drawPath(BODY[kind](s))
	painter.end()
	return img

def gate_icon(kind: GateKind) -> QIcon:
	return QIcon(QPixmap.fromImage(gate_image(kind)))
