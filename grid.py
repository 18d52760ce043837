"""Obstruction grid: which cells a footprint may cover."""

from __future__ import annotations
import logging

import numpy as np

from core import Point, Rect, Vector

logger = logging.getLogger(__name__)


# Single steps a footprint can take, in traversal order: up, right, down, left.
DIRECTIONS: tuple[Vector, ...] = (
    Vector(0, -1),
    Vector(1, 0),
    Vector(0, 1),
    Vector(-1, 0),
)


class Grid:
    """A fixed-size mask of blocked cells.

    Everything outside `[0, width) x [0, height)` counts as blocked.
    """

    def __init__(self, width: int, height: int) -> None:
        if width < 0 or height < 0:
            raise ValueError(f"Grid dimensions must be non-negative, got {width}x{height}")
        self.width = width
        self.height = height
        # Indexed [y, x].
        self.blocked: np.ndarray = np.zeros((height, width), dtype=bool)

    @property
    def area(self) -> int:
        return self.width * self.height

    def in_bounds(self, p: Point) -> bool:
        return 0 <= p.x < self.width and 0 <= p.y < self.height

    def is_blocked(self, p: Point) -> bool:
        """Check if a cell is obstructed or off the grid."""
        return not self.in_bounds(p) or bool(self.blocked[p.y, p.x])

    def obstruct_line(self, p1: Point, p2: Point) -> None:
        """Mark every cell on the segment from p1 to p2 (inclusive) as blocked.

        Uses Bresenham's algorithm. The endpoints are put in a fixed order
        first so that the same cells are marked whichever one is passed first.
        Cells off the grid are skipped.
        """
        (x1, y1), (x2, y2) = sorted([(p1.x, p1.y), (p2.x, p2.y)])
        logger.debug(f"Obstructing line ({x1}, {y1}) -> ({x2}, {y2})")

        dx = abs(x2 - x1)
        sx = 1 if x1 < x2 else -1
        dy = -abs(y2 - y1)
        sy = 1 if y1 < y2 else -1
        error = dx + dy

        while True:
            if 0 <= x1 < self.width and 0 <= y1 < self.height:
                self.blocked[y1, x1] = True

            if x1 == x2 and y1 == y2:
                break

            e2 = 2 * error
            if e2 >= dy:
                if x1 == x2:
                    break
                error += dy
                x1 += sx

            if e2 <= dx:
                if y1 == y2:
                    break
                error += dx
                y1 += sy

    def can_occupy(self, rect: Rect) -> bool:
        """Check if every cell of the rect is on the grid and unobstructed."""
        if rect.is_empty:
            return True

        x1, y1 = rect.top_left.x, rect.top_left.y
        x2, y2 = rect.bottom_right.x, rect.bottom_right.y
        if x1 < 0 or y1 < 0 or x2 > self.width or y2 > self.height:
            return False

        return not self.blocked[y1:y2, x1:x2].any()

    def adj_points(self, rect: Rect) -> list[Point]:
        """Return the anchors the rect's top-left can step to without obstruction.

        Empty if the rect itself can't be occupied.
        """
        if not self.can_occupy(rect):
            return []

        return [
            rect.top_left + d
            for d in DIRECTIONS
            if self.can_occupy(rect.translate(d))
        ]
