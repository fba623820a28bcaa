from __future__ import annotations
import math
import re
from typing import Any, Optional
from PySide6.QtGui import QColor

from .errors import FloorplanTypeError, ParseError

# ===== Desks =====
DESK_SIZE = 20.0
DESK_COLOR = QColor("#F97316")
DESK_BORDER = QColor("#9A3412")

# ===== Grid visuals =====
GRID_STEP = 10.0
MAJOR_EVERY = 5
BG_COLOR = QColor("#F2F4F7")
GRID_MINOR = QColor("#D0D6E0")
GRID_MAJOR = QColor("#A8B3C2")
SCENE_BORDER = QColor("#111827")
SCENE_BORDER_W = 2
SCENE_MARGIN = 40.0

# ===== Zoom =====
MIN_SCALE = 0.05
MAX_SCALE = 20.0
ZOOM_STEP = 1.15

_HEX_RE = re.compile(r"[0-9a-fA-F]+")
_RGB_DIGITS = 6
_ARGB_DIGITS = 8


def parse_number(value: Any, path: Optional[str] = None) -> float:
    # bool is an int subclass, but true/false are not coordinates
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise FloorplanTypeError(f"expected a number, got {value!r}", path)
    try:
        number = float(value)
    except OverflowError as e:
        raise FloorplanTypeError("number is out of the float range", path) from e
    if not math.isfinite(number):
        raise FloorplanTypeError(f"expected a finite number, got {value!r}", path)
    return number


def parse_color(value: Any, path: Optional[str] = None) -> Optional[QColor]:
    """
    Hex string -> QColor. ``None`` stays ``None`` (no colour).

    ``RRGGBB`` (up to six digits) is opaque, ``AARRGGBB`` carries its own alpha.
    """
    if value is None:
        return None
    if not isinstance(value, str):
        raise FloorplanTypeError(f"expected a hex colour string, got {value!r}", path)
    if not _HEX_RE.fullmatch(value):
        raise ParseError(f"invalid hex colour {value!r}", path)
    if len(value) > _ARGB_DIGITS:
        raise ParseError(f"colour {value!r} is out of the 32-bit range", path)
    rgba = int(value, 16)
    if len(value) <= _RGB_DIGITS:
        rgba |= 0xFF000000
    return QColor.fromRgba(rgba)
