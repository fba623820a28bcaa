from __future__ import annotations
from typing import List
from PySide6.QtCore import Qt
from PySide6.QtWidgets import QWidget, QHBoxLayout, QToolButton


class LayersHUD(QWidget):
    """Floating row of per-layer visibility toggles in the view's corner."""
    def __init__(self, view):
        super().__init__(view.viewport())
        self.view = view
        self.setObjectName("LayersHUD")
        self.setAttribute(Qt.WA_StyledBackground, True)
        self.setStyleSheet("""
            QWidget#LayersHUD { background: rgba(255,255,255,0.95); border:1px solid #e7e8ee; border-radius:12px; }
            QToolButton.layer { border:none; padding:6px; border-radius:10px; }
            QToolButton.layer:hover { background:#f2f4f7; }
            QToolButton.layer:checked { background:#dbe7ff; }
        """)

        self._lay = QHBoxLayout(self)
        self._lay.setContentsMargins(8, 8, 8, 8)
        self._lay.setSpacing(6)
        self.buttons: List[QToolButton] = []
        self.hide()

    def set_layers(self, count: int):
        for btn in self.buttons:
            self._lay.removeWidget(btn)
            btn.deleteLater()
        self.buttons = []

        for index in range(count):
            btn = QToolButton(self)
            btn.setProperty("class", "layer")
            btn.setText(str(index + 1))
            btn.setToolTip(f"Слой {index + 1}")
            btn.setCheckable(True)
            btn.setChecked(True)
            btn.setFixedSize(36, 36)
            btn.toggled.connect(lambda on, i=index: self._set_visible(i, on))
            self._lay.addWidget(btn)
            self.buttons.append(btn)

        # a single layer has nothing to toggle against
        self.setVisible(count > 1)
        self.adjustSize()
        self.reposition()
        self.raise_()

    def _set_visible(self, index: int, on: bool):
        from .scene import FloorplanScene
        scene = self.view.scene()
        if isinstance(scene, FloorplanScene):
            scene.set_layer_visible(index, on)

    def reposition(self):
        margin = 12
        vw = self.view.viewport().width()
        vh = self.view.viewport().height()
        self.move(vw - self.width() - margin, vh - self.height() - margin)
