from __future__ import annotations
from typing import List
from PySide6.QtCore import Qt, QRectF
from PySide6.QtGui import QBrush, QColor, QPainter, QPen
from PySide6.QtWidgets import QGraphicsEllipseItem, QGraphicsItem, QGraphicsRectItem

from .models import Desk, Layer, Rect
from .utils import DESK_SIZE, DESK_COLOR, DESK_BORDER


class RectItem(QGraphicsRectItem):
    def __init__(self, element: Rect, parent: QGraphicsItem = None):
        super().__init__(QRectF(0, 0, element.width, element.height), parent)
        self.element = element
        self.setPos(element.x, element.y)

        # no colour in the document means nothing is painted
        self.setBrush(QBrush(element.fill) if element.fill is not None else QBrush(Qt.NoBrush))
        if element.stroke is not None:
            pen = QPen(element.stroke, 1)
            pen.setCosmetic(True)
            self.setPen(pen)
        else:
            self.setPen(QPen(Qt.NoPen))
        self.setToolTip(f"{element.width:.0f} × {element.height:.0f} px")


class DeskItem(QGraphicsEllipseItem):
    """Fixed-size circle anchored with its top-left corner on the desk point."""
    def __init__(self, element: Desk, parent: QGraphicsItem = None):
        super().__init__(QRectF(0, 0, DESK_SIZE, DESK_SIZE), parent)
        self.element = element
        self.setPos(element.x, element.y)
        self.setBrush(QBrush(DESK_COLOR))
        self.setPen(QPen(DESK_BORDER, 1))
        self.setToolTip(f"Desk: {element.desk_id}")
        self.setAcceptHoverEvents(True)

    @property
    def desk_id(self) -> str:
        return self.element.desk_id

    def hoverEnterEvent(self, e):
        self.setBrush(QBrush(QColor(DESK_COLOR).lighter(130)))
        super().hoverEnterEvent(e)

    def hoverLeaveEvent(self, e):
        self.setBrush(QBrush(DESK_COLOR))
        super().hoverLeaveEvent(e)

    def paint(self, painter: QPainter, option, widget=None):
        painter.setRenderHint(QPainter.Antialiasing, True)
        super().paint(painter, option, widget)


class LayerItem(QGraphicsItem):
    """Content-less parent for one layer's items; hiding it hides the layer."""
    def __init__(self, layer: Layer, index: int):
        super().__init__()
        self.layer = layer
        self.index = index
        self.setZValue(index)
        self.setFlag(QGraphicsItem.ItemHasNoContents, True)

    def boundingRect(self) -> QRectF:
        return QRectF()

    def paint(self, painter: QPainter, option, widget=None):
        pass

    def add_element_item(self, item: QGraphicsItem):
        # later children paint on top of earlier ones
        item.setZValue(len(self.childItems()))
        item.setParentItem(self)

    def element_items(self) -> List[QGraphicsItem]:
        return sorted(self.childItems(), key=lambda it: it.zValue())
