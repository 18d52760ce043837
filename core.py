"""Core geometry value types."""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True, order=True)
class Vector:
    x: int
    y: int

    def __add__(self, other: Vector) -> Vector:
        return Vector(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector) -> Vector:
        return Vector(self.x - other.x, self.y - other.y)


# A vector used as a grid location.
Point = Vector


@dataclass(frozen=True)
class Rect:
    """An axis-aligned block of cells.

    `top_left` is inclusive and `bottom_right` is exclusive, so
    `Rect(Point(0, 0), Point(1, 1))` covers exactly the cell (0, 0).
    """

    top_left: Point
    bottom_right: Point

    def __post_init__(self) -> None:
        if (
            self.top_left.x > self.bottom_right.x
            or self.top_left.y > self.bottom_right.y
        ):
            raise ValueError(
                f"Rect corners are inverted: {self.top_left} > {self.bottom_right}"
            )

    @property
    def width(self) -> int:
        return self.bottom_right.x - self.top_left.x

    @property
    def height(self) -> int:
        return self.bottom_right.y - self.top_left.y

    @property
    def size(self) -> Vector:
        return self.bottom_right - self.top_left

    @property
    def is_empty(self) -> bool:
        return self.width == 0 or self.height == 0

    def translate(self, offset: Vector) -> Rect:
        """Shift both corners by `offset`."""
        return Rect(self.top_left + offset, self.bottom_right + offset)

    def at_origin(self) -> Rect:
        """Same size, anchored at (0, 0)."""
        return Rect(Point(0, 0), self.size)

    def cells(self) -> Iterator[Point]:
        """Yield every covered cell, row by row."""
        for y in range(self.top_left.y, self.bottom_right.y):
            for x in range(self.top_left.x, self.bottom_right.x):
                yield Point(x, y)
