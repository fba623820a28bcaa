from .errors import FloorplanError, FloorplanTypeError, ParseError, SchemaError, InvariantError
from .models import Rectangle, Element, ExtentContainer, Rect, Desk, Layer, LayerChild, Root
from .utils import parse_number, parse_color
from .loader import load_root, loads, load_file
from .items import RectItem, DeskItem, LayerItem
from .scene import FloorplanScene, FloorplanView
from .hud import LayersHUD

__all__ = [
    "FloorplanError", "FloorplanTypeError", "ParseError", "SchemaError", "InvariantError",
    "Rectangle", "Element", "ExtentContainer", "Rect", "Desk", "Layer", "LayerChild", "Root",
    "parse_number", "parse_color", "load_root", "loads", "load_file",
    "RectItem", "DeskItem", "LayerItem", "FloorplanScene", "FloorplanView", "LayersHUD",
]
