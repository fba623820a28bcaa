import copy
import os

import pytest

# no display on CI
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PySide6.QtWidgets import QApplication


END_TO_END = {
    "locationId": "L1",
    "children": [
        {
            "type": "layer",
            "children": [
                {"type": "rect", "x": 0, "y": 0, "w": 100, "h": 50, "fill": "aabbcc"},
                {"type": "desk", "deskId": "D1", "x": 10, "y": 10},
            ],
        }
    ],
}


@pytest.fixture(scope="session")
def qapp():
    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def end_to_end_doc():
    return copy.deepcopy(END_TO_END)
