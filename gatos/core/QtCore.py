# Using this file to import everything I need from PySide6 so that I don't need to
# constantly manage packages and ruin how the other project files look

from PySide6.QtWidgets import (
	QApplication, QMainWindow, QWidget,
	QPushButton, QLabel, QFrame,
	QGraphicsScene, QGraphicsView, QGraphicsItem,
	QVBoxLayout, QHBoxLayout, QStyleOptionGraphicsItem,
)
from PySide6.QtCore import (
	Qt, QObject, QEvent, QTimer, Signal,
	QPoint, QPointF, QRectF, QSize, QSizeF,
)
from PySide6.QtGui import (
	QGuiApplication, QCursor, QIcon, QPixmap, QImage,
	QPalette, QColor, QFont, QPainter, QPen, QBrush, QPainterPath, QTransform,
	QMatrix4x4, QVector3D,
	QMouseEvent, QKeyEvent, QWheelEvent, QKeySequence, QShortcut,
)

# Just some Quality of Life
GraphicsItemFlag = QGraphicsItem.GraphicsItemFlag
Key = Qt.Key
KeyMod = Qt.KeyboardModifier
MouseBtn = Qt.MouseButton
ImageFormat = QImage.Format
