"""Plain geometric value types used to describe drawings."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from typing import NamedTuple

__all__ = ["Vector", "Surface", "Circle", "Line", "Rectangle", "Polygon", "Image"]

_PIXEL_MAX = 0xFFFF


def _check_pixel(value: int) -> None:
    if not 0 <= value <= _PIXEL_MAX:
        raise ValueError(f"pixel value {value} does not fit in 16 bits")


def _check_buffer(size: Vector, buffer: Sequence[int]) -> None:
    if size.x < 0 or size.y < 0:
        raise ValueError(f"size must not be negative, got {size}")
    if len(buffer) != size.x * size.y:
        raise ValueError(
            f"buffer holds {len(buffer)} pixels, {size.x}x{size.y} needs {size.x * size.y}"
        )


class Vector(NamedTuple):
    """A pair of integer coordinates."""

    x: int
    y: int

    def __add__(self, other: tuple[int, int]) -> Vector:  # type: ignore[override]
        ox, oy = other
        return Vector(self.x + ox, self.y + oy)


@dataclass
class Surface:
    """A drawable area: its size and a row-major pixel buffer."""

    size: Vector
    buffer: list[int]

    def __post_init__(self) -> None:
        self.size = Vector(*self.size)
        _check_buffer(self.size, self.buffer)

    @classmethod
    def blank(cls, width: int, height: int) -> Surface:
        """Return a surface of the given size with every pixel zero."""
        if width < 0 or height < 0:
            raise ValueError(f"size must not be negative, got {width}x{height}")
        return cls(Vector(width, height), [0] * (width * height))


@dataclass(frozen=True)
class Circle:
    """A circle given by centre, radius and colour."""

    center: Vector
    radius: int
    color: int

    def __post_init__(self) -> None:
        if self.radius < 0:
            raise ValueError(f"radius must not be negative, got {self.radius}")
        _check_pixel(self.color)


@dataclass(frozen=True)
class Line:
    """A line segment between two points."""

    start: Vector
    end: Vector
    color: int

    def __post_init__(self) -> None:
        _check_pixel(self.color)


@dataclass(frozen=True)
class Rectangle:
    """An axis-aligned rectangle given by its top left corner and size."""

    top_left: Vector
    size: Vector
    color: int

    def __post_init__(self) -> None:
        if self.size[0] < 0 or self.size[1] < 0:
            raise ValueError(f"size must not be negative, got {self.size}")
        _check_pixel(self.color)


@dataclass(frozen=True)
class Polygon:
    """A closed polygon outline through its vertices in order."""

    vertices: tuple[Vector, ...] = field()
    color: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "vertices", tuple(Vector(*v) for v in self.vertices))
        _check_pixel(self.color)

    @property
    def num_vertices(self) -> int:
        return len(self.vertices)

    def edges(self) -> Iterator[Line]:
        """Yield the sides, the last one joining the final vertex to the first."""
        following = self.vertices[1:] + self.vertices[:1]
        for start, end in zip(self.vertices, following):
            yield Line(start, end, self.color)


@dataclass(frozen=True)
class Image:
    """A picture to be placed with its top left corner at ``top_left``."""

    top_left: Vector
    size: Vector
    buffer: tuple[int, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "size", Vector(*self.size))
        object.__setattr__(self, "buffer", tuple(self.buffer))
        _check_buffer(self.size, self.buffer)
        for value in self.buffer:
            _check_pixel(value)