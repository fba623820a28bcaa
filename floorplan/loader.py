"""
Scene loader: JSON document -> ``Root`` tree.

The whole document is parsed eagerly; the first error aborts the load and no
partial tree is returned.
"""
from __future__ import annotations
import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Union

from .errors import FloorplanTypeError, ParseError, SchemaError
from .models import Desk, Layer, LayerChild, Rect, Root
from .utils import parse_color, parse_number

logger = logging.getLogger(__name__)


def _child_path(path: str, key: str) -> str:
    return f"{path}.{key}" if path else key


def _require_object(node: Any, path: str) -> Dict[str, Any]:
    if not isinstance(node, dict):
        raise SchemaError(f"expected an object, got {node!r}", path or None)
    return node


def _require(node: Dict[str, Any], key: str, path: str) -> Any:
    if key not in node:
        raise SchemaError(f"missing required field '{key}' in {node!r}", path or None)
    return node[key]


def _require_string(node: Dict[str, Any], key: str, path: str) -> str:
    value = _require(node, key, path)
    if not isinstance(value, str):
        raise FloorplanTypeError(f"expected a string, got {value!r}", _child_path(path, key))
    return value


def _number(node: Dict[str, Any], key: str, path: str) -> float:
    return parse_number(_require(node, key, path), _child_path(path, key))


def _children(node: Dict[str, Any], path: str) -> List[Any]:
    children = node.get("children")
    if children is None:
        return []
    if not isinstance(children, list):
        raise SchemaError(f"'children' must be a list, got {children!r}", _child_path(path, "children"))
    return children


def _load_rect(node: Dict[str, Any], path: str) -> Rect:
    return Rect(
        x=_number(node, "x", path),
        y=_number(node, "y", path),
        width=_number(node, "w", path),
        height=_number(node, "h", path),
        fill=parse_color(node.get("fill"), _child_path(path, "fill")),
        stroke=parse_color(node.get("stroke"), _child_path(path, "stroke")),
    )


def _load_desk(node: Dict[str, Any], path: str) -> Desk:
    return Desk(
        desk_id=_require_string(node, "deskId", path),
        x=_number(node, "x", path),
        y=_number(node, "y", path),
    )


_LAYER_CHILD_LOADERS = {
    "rect": _load_rect,
    "desk": _load_desk,
}


def _load_layer(node: Dict[str, Any], path: str) -> Layer:
    children: List[LayerChild] = []
    for i, raw in enumerate(_children(node, path)):
        child_path = f"{_child_path(path, 'children')}[{i}]"
        child = _require_object(raw, child_path)
        kind = child.get("type")
        load = _LAYER_CHILD_LOADERS.get(kind) if isinstance(kind, str) else None
        if load is None:
            raise SchemaError(f"invalid layer child: {child!r}", child_path)
        children.append(load(child, child_path))
    return Layer(tuple(children))


def load_root(document: Any) -> Root:
    """Builds the scene tree from an already decoded JSON document."""
    node = _require_object(document, "")
    location_id = _require_string(node, "locationId", "")
    layers: List[Layer] = []
    for i, raw in enumerate(_children(node, "")):
        child_path = f"children[{i}]"
        child = _require_object(raw, child_path)
        if child.get("type") != "layer":
            raise SchemaError(f"invalid root element child: {child!r}", child_path)
        layers.append(_load_layer(child, child_path))

    root = Root(location_id, tuple(layers))
    logger.info(f"Loaded floorplan '{root.location_id}': "
                f"{len(root.layers)} layer(s), {root.element_count()} element(s).")
    return root


def _reject_constant(name: str):
    # json accepts NaN/Infinity, which are not JSON
    raise ParseError(f"invalid JSON: non-standard constant {name}")


def loads(text: Union[str, bytes]) -> Root:
    try:
        document = json.loads(text, parse_constant=_reject_constant)
    except json.JSONDecodeError as e:
        raise ParseError(f"invalid JSON: {e.msg} (line {e.lineno}, column {e.colno})") from e
    except UnicodeDecodeError as e:
        raise ParseError(f"document is not valid UTF-8: {e.reason} at byte {e.start}") from e
    except ParseError:
        raise
    except ValueError as e:
        # e.g. integer literals past the int-to-str digit limit
        raise ParseError(f"invalid JSON: {e}") from e
    logger.debug(f"Floorplan document: {document!r}")
    return load_root(document)


def load_file(path: Union[str, Path]) -> Root:
    logger.info(f"Opening floorplan: {path}")
    with open(path, "rb") as f:
        data = f.read()
    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise ParseError(f"document is not valid UTF-8: {e.reason} at byte {e.start}", str(path)) from e
    return loads(text)
