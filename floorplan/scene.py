from __future__ import annotations
import logging
import math
from typing import List, Optional

from PySide6.QtCore import Qt, QPointF, QRectF, Signal
from PySide6.QtGui import QPainter, QPen, QWheelEvent
from PySide6.QtWidgets import QGraphicsItem, QGraphicsScene, QGraphicsView

from .errors import InvariantError
from .hud import LayersHUD
from .items import DeskItem, LayerItem, RectItem
from .models import Desk, LayerChild, Rect, Rectangle, Root
from .utils import (BG_COLOR, GRID_STEP, MAJOR_EVERY, GRID_MAJOR, GRID_MINOR,
                    SCENE_BORDER, SCENE_BORDER_W, SCENE_MARGIN, MIN_SCALE, MAX_SCALE, ZOOM_STEP)

logger = logging.getLogger(__name__)


class FloorplanScene(QGraphicsScene):
    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.setItemIndexMethod(QGraphicsScene.NoIndex)
        self.root: Optional[Root] = None
        self.extent = Rectangle()
        self.layer_items: List[LayerItem] = []

    def load_root(self, root: Root):
        """Replaces whatever is shown with the items for ``root``."""
        self.clear()
        self.layer_items = []
        for index, layer in enumerate(root.layers):
            layer_item = LayerItem(layer, index)
            for element in layer.children:
                layer_item.add_element_item(self.build_item(element))
            self.addItem(layer_item)
            self.layer_items.append(layer_item)

        self.root = root
        self.extent = root.extent()
        self.setSceneRect(self.extent.to_qrectf())
        logger.debug(f"Scene built: {len(self.layer_items)} layer item(s), extent {self.extent}")

    def build_item(self, element: LayerChild) -> QGraphicsItem:
        if isinstance(element, Rect):
            return RectItem(element)
        if isinstance(element, Desk):
            return DeskItem(element)
        raise InvariantError(f"unexpected layer element: {type(element).__name__}")

    def set_layer_visible(self, index: int, visible: bool):
        self.layer_items[index].setVisible(visible)

    def desk_items(self) -> List[DeskItem]:
        out = []
        for layer_item in self.layer_items:
            for it in layer_item.element_items():
                if isinstance(it, DeskItem):
                    out.append(it)
        return out

    def find_desk(self, desk_id: str) -> Optional[DeskItem]:
        for it in self.desk_items():
            if it.desk_id == desk_id:
                return it
        return None

    def drawBackground(self, painter: QPainter, rect: QRectF):
        painter.fillRect(rect, BG_COLOR)
        step = GRID_STEP
        left = math.floor(rect.left() / step) * step
        top  = math.floor(rect.top()  / step) * step
        x = left; i = int(x // step)
        while x < rect.right():
            is_major = (i % MAJOR_EVERY == 0)
            painter.setPen(QPen(GRID_MAJOR if is_major else GRID_MINOR, 1.5 if is_major else 1, Qt.SolidLine, Qt.SquareCap))
            painter.drawLine(QPointF(x, rect.top()), QPointF(x, rect.bottom()))
            x += step; i += 1
        y = top; j = int(y // step)
        while y < rect.bottom():
            is_major = (j % MAJOR_EVERY == 0)
            painter.setPen(QPen(GRID_MAJOR if is_major else GRID_MINOR, 1.5 if is_major else 1, Qt.SolidLine, Qt.SquareCap))
            painter.drawLine(QPointF(rect.left(), y), QPointF(rect.right(), y))
            y += step; j += 1
        painter.setPen(QPen(SCENE_BORDER, SCENE_BORDER_W)); painter.setBrush(Qt.NoBrush); painter.drawRect(self.sceneRect())


class FloorplanView(QGraphicsView):
    scaleChanged = Signal(float)  # текущее m11()

    def __init__(self, scene: FloorplanScene):
        super().__init__(scene)
        self.setRenderHint(QPainter.Antialiasing, True)
        self.setViewportUpdateMode(QGraphicsView.BoundingRectViewportUpdate)
        self.setDragMode(QGraphicsView.ScrollHandDrag)
        self.setTransformationAnchor(QGraphicsView.AnchorUnderMouse)
        self.setResizeAnchor(QGraphicsView.AnchorViewCenter)
        self.setBackgroundBrush(Qt.NoBrush)

        self.hud = LayersHUD(self)
        self.hud.reposition()

    def current_scale(self) -> float:
        return self.transform().m11()

    def zoom(self, factor: float):
        """Scales by ``factor``, clamped to [MIN_SCALE, MAX_SCALE]."""
        current = self.current_scale()
        target = min(max(current * factor, MIN_SCALE), MAX_SCALE)
        if math.isclose(target, current):
            return
        self.scale(target / current, target / current)
        self.scaleChanged.emit(self.current_scale())

    def fit_to_scene(self):
        r = self.sceneRect().adjusted(-SCENE_MARGIN, -SCENE_MARGIN, SCENE_MARGIN, SCENE_MARGIN)
        self.fitInView(r, Qt.KeepAspectRatio)
        # fitInView ignores our limits
        s = self.current_scale()
        clamped = min(max(s, MIN_SCALE), MAX_SCALE)
        if not math.isclose(clamped, s):
            self.scale(clamped / s, clamped / s)
        self.scaleChanged.emit(self.current_scale())

    def sync_layers(self):
        scene = self.scene()
        if isinstance(scene, FloorplanScene):
            self.hud.set_layers(len(scene.layer_items))

    def resizeEvent(self, event):
        super().resizeEvent(event)
        if hasattr(self, "hud") and self.hud:
            self.hud.reposition()

    def wheelEvent(self, event: QWheelEvent):
        angle = event.angleDelta().y()
        if angle == 0:
            super().wheelEvent(event)
            return
        self.zoom(ZOOM_STEP if angle > 0 else 1.0 / ZOOM_STEP)
        event.accept()
