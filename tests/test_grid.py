"""Tests for the obstruction grid."""

import random

import pytest
from core import Point, Rect
from grid import Grid
from test_utils import grid_from_rows, pretty_grid


def one_cell_at(x: int, y: int) -> Rect:
    return Rect(Point(x, y), Point(x + 1, y + 1))


class TestGridConstruction:
    def test_grid_starts_empty(self) -> None:
        g = Grid(2, 2)
        assert pretty_grid(g) == "\n".join(["  ", "  "])

    def test_rejects_negative_dimensions(self) -> None:
        with pytest.raises(ValueError):
            Grid(-1, 3)

    def test_allows_zero_area(self) -> None:
        g = Grid(0, 0)
        assert g.area == 0
        assert g.is_blocked(Point(0, 0))


class TestObstructLine:
    def test_can_block_grid_cells(self) -> None:
        g = Grid(5, 5)
        g.obstruct_line(Point(0, 2), Point(4, 2))
        g.obstruct_line(Point(2, 0), Point(2, 2))
        g.obstruct_line(Point(1, 2), Point(4, 4))

        # fmt: off
        expected = "\n".join([
            "  x  ",
            "  x  ",
            "xxxxx",
            "  xx ",
            "    x",
        ])
        # fmt: on
        assert pretty_grid(g) == expected

    def test_single_point_line_blocks_one_cell(self) -> None:
        g = Grid(3, 3)
        g.obstruct_line(Point(1, 1), Point(1, 1))
        assert pretty_grid(g) == "\n".join(["   ", " x ", "   "])

    def test_steep_line_is_connected(self) -> None:
        g = Grid(3, 6)
        g.obstruct_line(Point(0, 0), Point(2, 5))
        # One blocked cell per row for a steep line.
        assert [int(row.sum()) for row in g.blocked] == [1] * 6
        assert g.blocked[0, 0] and g.blocked[5, 2]

    def test_same_cells_regardless_of_endpoint_order(self) -> None:
        rng = random.Random(1234)
        for _ in range(200):
            p1 = Point(rng.randrange(9), rng.randrange(9))
            p2 = Point(rng.randrange(9), rng.randrange(9))
            forward = Grid(9, 9)
            forward.obstruct_line(p1, p2)
            backward = Grid(9, 9)
            backward.obstruct_line(p2, p1)
            assert (forward.blocked == backward.blocked).all(), (p1, p2)

    def test_endpoints_are_inclusive(self) -> None:
        rng = random.Random(99)
        for _ in range(50):
            p1 = Point(rng.randrange(7), rng.randrange(7))
            p2 = Point(rng.randrange(7), rng.randrange(7))
            g = Grid(7, 7)
            g.obstruct_line(p1, p2)
            assert g.is_blocked(p1) and g.is_blocked(p2)

    def test_skips_cells_off_the_grid(self) -> None:
        g = Grid(3, 3)
        g.obstruct_line(Point(-2, 1), Point(5, 1))
        assert pretty_grid(g) == "\n".join(["   ", "xxx", "   "])


class TestCanOccupy:
    def test_reports_obstructions_inside_rect(self) -> None:
        g = Grid(4, 4)
        g.obstruct_line(Point(1, 0), Point(1, 1))
        g.obstruct_line(Point(0, 1), Point(1, 1))

        assert g.can_occupy(Rect(Point(0, 0), Point(1, 1)))
        assert not g.can_occupy(Rect(Point(0, 0), Point(2, 1)))
        assert g.can_occupy(Rect(Point(2, 2), Point(4, 4)))

    def test_off_grid_counts_as_blocked(self) -> None:
        g = Grid(4, 4)
        assert not g.can_occupy(Rect(Point(-1, 0), Point(1, 1)))
        assert not g.can_occupy(Rect(Point(3, 3), Point(5, 4)))
        assert not g.can_occupy(one_cell_at(4, 0))

    def test_whole_empty_grid_is_occupiable(self) -> None:
        g = Grid(4, 3)
        assert g.can_occupy(Rect(Point(0, 0), Point(4, 3)))

    def test_empty_rect_is_occupiable(self) -> None:
        g = grid_from_rows(["x"])
        assert g.can_occupy(Rect(Point(0, 0), Point(0, 0)))


class TestAdjPoints:
    @pytest.fixture
    def grid(self) -> Grid:
        g = Grid(5, 4)
        for p in [Point(1, 0), Point(0, 1), Point(2, 1), Point(3, 3)]:
            g.obstruct_line(p, p)
        return g

    def test_walled_in_cell_has_no_neighbours(self, grid: Grid) -> None:
        assert grid.adj_points(Rect(Point(0, 0), Point(1, 1))) == []

    def test_only_open_direction_is_returned(self, grid: Grid) -> None:
        assert grid.adj_points(Rect(Point(1, 1), Point(2, 2))) == [Point(1, 2)]

    def test_grid_edges_block_movement(self, grid: Grid) -> None:
        assert grid.adj_points(Rect(Point(4, 3), Point(5, 4))) == [Point(4, 2)]

    def test_unoccupiable_rect_has_no_neighbours(self, grid: Grid) -> None:
        assert grid.adj_points(Rect(Point(1, 0), Point(2, 1))) == []

    def test_open_cell_lists_up_right_down_left(self) -> None:
        g = Grid(3, 3)
        assert g.adj_points(one_cell_at(1, 1)) == [
            Point(1, 0),
            Point(2, 1),
            Point(1, 2),
            Point(0, 1),
        ]

    def test_wide_footprint_needs_room_for_every_cell(self) -> None:
        g = grid_from_rows([
            "    ",
            "    ",
            "x   ",
        ])
        # Moving a 2x2 footprint down from (0, 0) would cover the blocked cell.
        assert g.adj_points(Rect(Point(0, 0), Point(2, 2))) == [Point(1, 0)]
        assert g.adj_points(Rect(Point(1, 0), Point(3, 2))) == [
            Point(2, 0),
            Point(1, 1),
            Point(0, 0),
        ]
