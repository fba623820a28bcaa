#!/usr/bin/env python3
# -*- coding: utf-8 -*-
from __future__ import annotations
import argparse
import logging
import os
import sys
from typing import List, Optional

from PySide6.QtCore import Qt, QSizeF
from PySide6.QtGui import QAction, QKeySequence
from PySide6.QtWidgets import (
    QApplication, QMainWindow, QToolBar, QStatusBar, QFileDialog, QMessageBox, QStyle, QLabel
)

from floorplan import FloorplanError, FloorplanScene, FloorplanView, load_file
from floorplan.logging_config import setup_logging

logger = logging.getLogger("floorplan.viewer")


class MainWindow(QMainWindow):
    def __init__(self):
        super().__init__()
        self.setWindowTitle("Floorplan Viewer")
        self.resize(1280, 860)

        self.scene = FloorplanScene()
        self.view = FloorplanView(self.scene)
        self.setCentralWidget(self.view)

        self._build_toolbar()
        self.setStatusBar(QStatusBar(self))
        # summary stays visible; timed messages show next to it
        self.summary_label = QLabel(self)
        self.statusBar().addPermanentWidget(self.summary_label)
        self.view.scaleChanged.connect(lambda s: self._update_status())
        self._update_status()

    def _build_toolbar(self):
        tb = QToolBar("Панель", self)
        tb.setMovable(False)
        tb.setIconSize(QSizeF(18, 18).toSize())
        tb.setToolButtonStyle(Qt.ToolButtonTextBesideIcon)
        self.addToolBar(Qt.TopToolBarArea, tb)
        style = self.style()

        self.act_open = QAction(style.standardIcon(QStyle.SP_DirOpenIcon), "Открыть…", self)
        self.act_open.setShortcut(QKeySequence("Ctrl+O"))
        self.act_open.triggered.connect(self._open_dialog)

        self.act_fit = QAction(style.standardIcon(QStyle.SP_DesktopIcon), "Вписать", self)
        self.act_fit.setShortcut(QKeySequence("Ctrl+0"))
        self.act_fit.triggered.connect(self.view.fit_to_scene)

        tb.addAction(self.act_open)
        tb.addAction(self.act_fit)

    def _open_dialog(self):
        path, _ = QFileDialog.getOpenFileName(self, "Открыть план", "", "JSON (*.json);;Все файлы (*)")
        if not path:
            return
        self.open_path(path)

    def open_path(self, path: str) -> bool:
        """Loads ``path``; on failure the current plan stays on screen."""
        try:
            root = load_file(path)
        except (FloorplanError, OSError) as e:
            logger.error(f"Could not open '{path}': {e}")
            QMessageBox.critical(self, "Ошибка открытия", str(e))
            return False

        self.scene.load_root(root)
        self.view.sync_layers()
        self.view.fit_to_scene()
        self._update_status()
        self.setWindowTitle(f"Floorplan Viewer — {root.location_id}")
        self._status(f"Открыт план: {os.path.basename(path)}")
        return True

    def _status(self, text: str):
        self.statusBar().showMessage(text, 3000)

    def _update_status(self):
        root = self.scene.root
        ext = self.scene.extent
        self.summary_label.setText(
            f"План: {root.location_id if root else '—'} | "
            f"Слоёв: {len(root.layers) if root else 0} | "
            f"Границы: {ext.width:.0f}×{ext.height:.0f} px | "
            f"Масштаб: {int(self.view.current_scale() * 100)}%"
        )


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Show a floorplan JSON document.")
    parser.add_argument("path", nargs="?", help="floorplan JSON file to open")
    parser.add_argument("--debug", action="store_true", help="log at DEBUG level")
    parser.add_argument("--log-file", type=str, default=None, help="also write logs to this file")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    setup_logging(level=logging.DEBUG if args.debug else logging.INFO, log_file=args.log_file)

    app = QApplication(sys.argv[:1])
    app.setApplicationName("Floorplan Viewer")
    win = MainWindow()
    win.show()
    if args.path:
        win.open_path(args.path)
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
