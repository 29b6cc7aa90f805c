"""Basic graphics types: colours, points, rectangles and drawing styles."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar


def _check_range(name: str, value: int, low: int, high: int) -> None:
    if not isinstance(value, int) or isinstance(value, bool) or not low <= value <= high:
        raise ValueError(f"{name} must be an integer in [{low}, {high}], got {value!r}")


class GraphicsBackend(Enum):
    """Rendering backend; SOFTWARE is the default."""

    SOFTWARE = "software"
    OPENGL = "opengl"
    VULKAN = "vulkan"


@dataclass(frozen=True)
class Color:
    """An RGBA colour with 8-bit components."""

    r: int
    g: int
    b: int
    a: int = 255

    BLACK: ClassVar["Color"]
    WHITE: ClassVar["Color"]
    RED: ClassVar["Color"]
    GREEN: ClassVar["Color"]
    BLUE: ClassVar["Color"]

    def __post_init__(self) -> None:
        for name in ("r", "g", "b", "a"):
            _check_range(name, getattr(self, name), 0, 0xFF)

    @classmethod
    def rgb(cls, r: int, g: int, b: int) -> "Color":
        """An opaque colour."""
        return cls(r, g, b, 255)

    def to_u32(self) -> int:
        """Pack as 0xAARRGGBB."""
        return (self.a << 24) | (self.r << 16) | (self.g << 8) | self.b

    @classmethod
    def from_u32(cls, color: int) -> "Color":
        """Unpack from 0xAARRGGBB."""
        _check_range("color", color, 0, 0xFFFFFFFF)
        return cls(
            r=(color >> 16) & 0xFF,
            g=(color >> 8) & 0xFF,
            b=color & 0xFF,
            a=(color >> 24) & 0xFF,
        )


Color.BLACK = Color(0, 0, 0, 255)
Color.WHITE = Color(255, 255, 255, 255)
Color.RED = Color(255, 0, 0, 255)
Color.GREEN = Color(0, 255, 0, 255)
Color.BLUE = Color(0, 0, 255, 255)

_I16 = (-0x8000, 0x7FFF)
_U16 = (0, 0xFFFF)


@dataclass(frozen=True)
class Point:
    """A point with signed 16-bit coordinates."""

    x: int
    y: int

    def __post_init__(self) -> None:
        _check_range("x", self.x, *_I16)
        _check_range("y", self.y, *_I16)


@dataclass(frozen=True)
class Rectangle:
    """An axis-aligned rectangle; the right and bottom edges are exclusive."""

    x: int
    y: int
    width: int
    height: int

    def __post_init__(self) -> None:
        _check_range("x", self.x, *_I16)
        _check_range("y", self.y, *_I16)
        _check_range("width", self.width, *_U16)
        _check_range("height", self.height, *_U16)

    def contains(self, point: Point) -> bool:
        return (
            self.x <= point.x < self.x + self.width
            and self.y <= point.y < self.y + self.height
        )

    def intersects(self, other: "Rectangle") -> bool:
        return (
            self.x < other.x + other.width
            and self.x + self.width > other.x
            and self.y < other.y + other.height
            and self.y + self.height > other.y
        )


class LineStyle(Enum):
    SOLID = 0
    ON_OFF_DASH = 1
    DOUBLE_DASH = 2


class CapStyle(Enum):
    NOT_LAST = 0
    BUTT = 1
    ROUND = 2
    PROJECTING = 3


class JoinStyle(Enum):
    MITER = 0
    ROUND = 1
    BEVEL = 2


class FillStyle(Enum):
    SOLID = 0
    TILED = 1
    STIPPLED = 2
    OPAQUE_STIPPLED = 3


class Function(Enum):
    """Raster operation applied when drawing."""

    CLEAR = 0
    AND = 1
    AND_REVERSE = 2
    COPY = 3
    AND_INVERTED = 4
    NO_OP = 5
    XOR = 6
    OR = 7
    NOR = 8
    EQUIV = 9
    INVERT = 10
    OR_REVERSE = 11
    COPY_INVERTED = 12
    OR_INVERTED = 13
    NAND = 14
    SET = 15