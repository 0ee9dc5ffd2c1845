"""Tests for the Map grid and its queries."""

import pytest

from tile_mapgen.core.geometry import Rectangle
from tile_mapgen.core.grid import Map
from tile_mapgen.core.types import Cell


class TestCell:

    def test_equality_ignores_flags(self):
        assert Cell(2, 3, True, True) == Cell(2, 3, False, False)
        assert len({Cell(2, 3, True, True), Cell(2, 3)}) == 1

    def test_symbols(self):
        assert Cell(0, 0, True, True).symbol() == "."
        assert Cell(0, 0, False, True).symbol() == "s"
        assert Cell(0, 0, True, False).symbol() == "o"
        assert Cell(0, 0, False, False).symbol() == "#"


class TestMap:

    def test_new_map_is_solid(self):
        grid = Map(4, 3)
        assert (grid.width, grid.height) == (4, 3)
        assert grid.walkable_count() == 0

    @pytest.mark.parametrize("w,h", [(0, 0), (0, 3), (3, None), (-2, 5)])
    def test_constructor_rejects_explicit_bad_sizes(self, w, h):
        with pytest.raises(ValueError):
            Map(w, h)

    def test_default_map_is_empty(self):
        grid = Map()
        assert (grid.width, grid.height) == (0, 0)
        assert list(grid.get_all_cells()) == []

    @pytest.mark.parametrize("w,h", [(0, 3), (3, 0), (-1, -1)])
    def test_initialize_rejects_bad_sizes(self, w, h):
        with pytest.raises(ValueError):
            Map().initialize(w, h)

    def test_set_and_get(self):
        grid = Map(4, 4)
        grid.set_cell_properties(2, 1, False, True)
        cell = grid.get_cell(2, 1)
        assert cell.is_walkable and not cell.is_transparent
        assert grid.is_walkable(2, 1)
        assert not grid.is_transparent(2, 1)

    def test_out_of_bounds(self):
        grid = Map(4, 4)
        with pytest.raises(IndexError):
            grid.get_cell(4, 0)
        with pytest.raises(IndexError):
            grid.set_cell_properties(-1, 0, True, True)

    def test_snapshot_does_not_follow_map(self):
        grid = Map(3, 3)
        before = grid.get_cell(1, 1)
        grid.set_cell_properties(1, 1, True, True)
        assert not before.is_walkable

    def test_clone_is_independent(self):
        grid = Map(3, 3)
        copy = grid.clone()
        copy.set_cell_properties(1, 1, True, True)
        assert not grid.is_walkable(1, 1)
        assert copy.is_walkable(1, 1)

    def test_all_cells_row_major(self):
        grid = Map(3, 2)
        assert [c.coord for c in grid.get_all_cells()] == [
            (0, 0), (1, 0), (2, 0), (0, 1), (1, 1), (2, 1),
        ]

    def test_area_is_clipped(self):
        grid = Map(5, 5)
        assert len(list(grid.get_cells_in_area(2, 2, 1))) == 9
        assert len(list(grid.get_cells_in_area(2, 2, 2))) == 25
        assert len(list(grid.get_cells_in_area(0, 0, 1))) == 4

    def test_rows_and_columns(self):
        grid = Map(4, 3)
        assert len(list(grid.get_cells_in_rows(0, 2))) == 8
        assert {c.x for c in grid.get_cells_in_columns(3)} == {3}

    def test_adjacent(self):
        grid = Map(3, 3)
        assert len(grid.get_adjacent_cells(1, 1)) == 4
        assert len(grid.get_adjacent_cells(1, 1, diagonals=True)) == 8
        assert len(grid.get_adjacent_cells(0, 0)) == 2

    def test_border(self):
        grid = Map(4, 4)
        assert grid.is_border_cell(0, 2)
        assert grid.is_border_cell(3, 3)
        assert not grid.is_border_cell(1, 2)


class TestLine:

    def test_includes_both_ends(self):
        line = Map(10, 10).get_cells_along_line(1, 1, 5, 1)
        assert [c.coord for c in line] == [(1, 1), (2, 1), (3, 1), (4, 1), (5, 1)]

    def test_single_point(self):
        line = Map(5, 5).get_cells_along_line(2, 3, 2, 3)
        assert [c.coord for c in line] == [(2, 3)]

    def test_shallow_slope(self):
        line = Map(10, 10).get_cells_along_line(0, 0, 4, 2)
        assert [c.coord for c in line] == [(0, 0), (1, 0), (2, 1), (3, 1), (4, 2)]

    def test_reverse_direction(self):
        line = Map(10, 10).get_cells_along_line(3, 3, 0, 0)
        assert [c.coord for c in line] == [(3, 3), (2, 2), (1, 1), (0, 0)]

    def test_clamped_to_map(self):
        line = Map(5, 5).get_cells_along_line(-3, 2, 9, 2)
        assert line[0].coord == (0, 2)
        assert line[-1].coord == (4, 2)


class TestRectangle:

    def test_edges_and_center(self):
        r = Rectangle(2, 3, 5, 4)
        assert (r.left, r.right, r.top, r.bottom) == (2, 7, 3, 7)
        assert r.center == (4, 5)

    def test_intersects(self):
        a = Rectangle(0, 0, 5, 5)
        assert a.intersects(Rectangle(4, 4, 3, 3))
        assert not a.intersects(Rectangle(5, 0, 3, 3))
        assert not a.intersects(Rectangle(0, 6, 2, 2))

    def test_contains(self):
        r = Rectangle(1, 1, 2, 2)
        assert r.contains(1, 1)
        assert not r.contains(3, 1)
