"""Lazy decomposition of a grid into connected components.

Two anchors are in the same part if a footprint of a fixed size can travel
between them without ever covering a blocked cell. Parts are discovered on
demand: each query explores only until it can answer, and everything learned
along the way is kept for later queries.
"""

from __future__ import annotations
import logging
from collections import deque
from dataclasses import dataclass, field

import numpy as np

from core import Point, Rect
from grid import Grid
from union_find import UnionFind

logger = logging.getLogger(__name__)


# Part id stored for cells that no part has reached yet.
UNEXPLORED = 0


@dataclass
class Part:
    """One connected component. May be only partially explored."""

    id: int
    # Anchors adjacent to the explored cells that haven't been examined yet.
    # May hold duplicates and cells the part already owns.
    frontier: deque[Point] = field(default_factory=deque)

    @property
    def is_final(self) -> bool:
        """True once every anchor reachable from this part has been explored."""
        return not self.frontier

    def subsume(self, other: Part) -> None:
        """Take over the unexamined frontier of a part being merged into this one."""
        self.frontier.extend(other.frontier)


class GridPartition:
    """Connected components of a grid for footprints of one size."""

    def __init__(self, grid: Grid, footprint: Rect) -> None:
        if grid.area == 0:
            raise ValueError(
                f"Can't partition a zero-area grid ({grid.width}x{grid.height})"
            )
        if footprint.is_empty:
            raise ValueError(f"Footprint must cover at least one cell, got {footprint}")

        self._grid = grid
        # Only the size matters; queries supply the anchor.
        self._footprint = footprint.at_origin()

        # Non-canonical part id per cell, indexed [y, x].
        self._part_ids: np.ndarray = np.zeros((grid.height, grid.width), dtype=np.int64)
        self._next_id = UNEXPLORED + 1
        # Every live part, keyed by its canonical id.
        self._parts: dict[int, Part] = {}
        self._uf = UnionFind[int]()

    @property
    def grid(self) -> Grid:
        return self._grid

    @property
    def footprint(self) -> Rect:
        return self._footprint

    @property
    def explored_cells(self) -> int:
        """Number of anchors assigned to some part so far."""
        return int(np.count_nonzero(self._part_ids))

    @property
    def part_count(self) -> int:
        """Number of distinct parts discovered so far."""
        return len(self._parts)

    def part_id(self, p: Point) -> int:
        """Canonical id of the part containing the anchor, or 0 if unexplored."""
        if not self._grid.in_bounds(p):
            return UNEXPLORED
        return self._uf.find(int(self._part_ids[p.y, p.x]))

    def is_final(self, p: Point) -> bool:
        """Check if the anchor's part is known to be completely explored."""
        pid = self.part_id(p)
        return pid != UNEXPLORED and self._parts[pid].is_final

    def can_anchor(self, p: Point) -> bool:
        """Check if the footprint fits with its top-left at the given anchor."""
        return self._grid.can_occupy(self._footprint.translate(p))

    def in_same_part(self, a: Point, b: Point) -> bool:
        """Check if the footprint can travel from anchor a to anchor b."""
        # Impossible anchors aren't in any part.
        if not self.can_anchor(a) or not self.can_anchor(b):
            return False

        a_id = self.part_id(a)
        b_id = self.part_id(b)

        # If either part has been searched exhaustively, we'd already have
        # found the other anchor in it.
        if self.is_final(a) or self.is_final(b):
            return a_id == b_id

        if a_id != UNEXPLORED and a_id == b_id:
            return True

        self._flood(a, b)

        return self.part_id(a) == self.part_id(b)

    def _new_part(self, origin: Point) -> Part:
        part = Part(id=self._next_id, frontier=deque([origin]))
        self._next_id += 1
        self._parts[part.id] = part
        logger.debug(f"Created part {part.id} at ({origin.x}, {origin.y})")
        return part

    def _merge(self, part: Part, other: Part) -> Part:
        """Join `other` into `part`, re-keying the result under the new root."""
        root = self._uf.union(part.id, other.id)
        part.subsume(other)
        del self._parts[part.id]
        del self._parts[other.id]
        logger.debug(f"Merged parts {part.id} and {other.id} into {root}")
        part.id = root
        self._parts[root] = part
        return part

    def _flood(self, a: Point, b: Point) -> None:
        """Explore a's part until it joins b's part or runs out of frontier."""
        a_id = self.part_id(a)
        part = self._new_part(a) if a_id == UNEXPLORED else self._parts[a_id]

        while not part.is_final:
            cur = part.frontier.popleft()
            # Ids may change under any merge, so always resolve them afresh.
            active_id = self._uf.find(part.id)
            cur_id = self.part_id(cur)

            if cur_id == UNEXPLORED:
                self._part_ids[cur.y, cur.x] = active_id
                for p in self._grid.adj_points(self._footprint.translate(cur)):
                    if self.part_id(p) != active_id:
                        part.frontier.append(p)
            elif cur_id != active_id:
                part = self._merge(part, self._parts[cur_id])

            if self.part_id(b) == self._uf.find(part.id):
                return

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                f"Part {part.id} is final; {self.explored_cells} cells explored"
            )
