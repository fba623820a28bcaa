from __future__ import annotations
from dataclasses import dataclass
from typing import Generic, Iterator, Optional, Protocol, Tuple, TypeVar, Union
from PySide6.QtCore import QRectF
from PySide6.QtGui import QColor


@dataclass(frozen=True)
class Rectangle:
    left: float = 0.0
    top: float = 0.0
    right: float = 0.0
    bottom: float = 0.0

    @classmethod
    def from_position_size(cls, x: float, y: float, w: float, h: float) -> Rectangle:
        return cls(x, y, x + w, y + h)

    @property
    def width(self) -> float:
        return self.right - self.left

    @property
    def height(self) -> float:
        return self.bottom - self.top

    def union(self, other: Rectangle) -> Rectangle:
        return Rectangle(
            min(self.left, other.left),
            min(self.top, other.top),
            max(self.right, other.right),
            max(self.bottom, other.bottom),
        )

    def to_qrectf(self) -> QRectF:
        return QRectF(self.left, self.top, self.width, self.height)


class Element(Protocol):
    def extent(self) -> Rectangle: ...


T = TypeVar("T", bound=Element)


class ExtentContainer(Generic[T]):
    """
    Ordered, read-only sequence of child elements.

    The extent is folded from the children's extents starting at the
    origin, so a container always covers (0, 0).
    """
    children: Tuple[T, ...]

    def __post_init__(self):
        object.__setattr__(self, "children", tuple(self.children))

    def extent(self) -> Rectangle:
        bounds = Rectangle()
        for child in self.children:
            bounds = bounds.union(child.extent())
        return bounds

    def __iter__(self) -> Iterator[T]:
        return iter(self.children)

    def __len__(self) -> int:
        return len(self.children)


@dataclass(frozen=True)
class Rect:
    x: float
    y: float
    width: float
    height: float
    fill: Optional[QColor] = None
    stroke: Optional[QColor] = None

    def extent(self) -> Rectangle:
        return Rectangle.from_position_size(self.x, self.y, self.width, self.height)


@dataclass(frozen=True)
class Desk:
    desk_id: str
    x: float
    y: float

    def extent(self) -> Rectangle:
        # a desk is a point; the drawn marker size is a view concern
        return Rectangle(self.x, self.y, self.x, self.y)


LayerChild = Union[Rect, Desk]


@dataclass(frozen=True)
class Layer(ExtentContainer[LayerChild]):
    children: Tuple[LayerChild, ...] = ()


@dataclass(frozen=True)
class Root(ExtentContainer[Layer]):
    location_id: str
    children: Tuple[Layer, ...] = ()

    @property
    def layers(self) -> Tuple[Layer, ...]:
        return self.children

    def element_count(self) -> int:
        return sum(len(layer) for layer in self.children)
