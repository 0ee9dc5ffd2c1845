"""Tests for the room, border and text map strategies."""

import pytest

from tile_mapgen.core.config import RandomRoomsParams
from tile_mapgen.core.connectivity import find_regions
from tile_mapgen.core.generation import BorderOnlyMapCreationStrategy
from tile_mapgen.core.grid import Map
from tile_mapgen.core.io import StringDeserializeMapCreationStrategy, load_map_string, map_to_string
from tile_mapgen.core.rng import SeededRandom
from tile_mapgen.core.rooms import RandomRoomsMapCreationStrategy


class TestBorderOnly:

    def test_layout(self):
        grid = BorderOnlyMapCreationStrategy(5, 4).create_map()
        assert str(grid) == "#####\n#...#\n#...#\n#####"

    def test_via_map_create(self):
        grid = Map.create(BorderOnlyMapCreationStrategy(8, 6))
        assert grid.walkable_count() == 6 * 4
        assert len(find_regions(grid)) == 1

    def test_rejects_bad_size(self):
        with pytest.raises(ValueError):
            BorderOnlyMapCreationStrategy(0, 4)


class TestRandomRooms:

    def test_minimum_random_places_one_room(self, minimum_random):
        strategy = RandomRoomsMapCreationStrategy(20, 15, 6, 8, 5, minimum_random)
        rooms = strategy.place_rooms()
        assert len(rooms) == 1
        assert (rooms[0].x, rooms[0].y, rooms[0].width, rooms[0].height) == (0, 0, 5, 5)

    def test_minimum_random_room_interior(self, minimum_random):
        grid = RandomRoomsMapCreationStrategy(20, 15, 6, 8, 5, minimum_random).create_map()
        floors = {c.coord for c in grid.get_all_cells() if c.is_walkable}
        assert floors == {(x, y) for x in range(1, 5) for y in range(1, 5)}

    @pytest.mark.parametrize("seed", [1, 7, 21])
    def test_rooms_are_connected_and_walled(self, seed):
        grid = RandomRoomsMapCreationStrategy(40, 30, 10, 9, 4, SeededRandom(seed)).create_map()
        assert len(find_regions(grid)) == 1
        for cell in grid.get_all_cells():
            if grid.is_border_cell(cell.x, cell.y):
                assert not cell.is_walkable

    def test_rooms_do_not_overlap(self):
        strategy = RandomRoomsMapCreationStrategy(60, 40, 30, 10, 4, SeededRandom(11))
        rooms = strategy.place_rooms()
        for i, a in enumerate(rooms):
            for b in rooms[i + 1:]:
                assert not a.intersects(b)

    def test_from_params_is_deterministic(self):
        params = RandomRoomsParams(width=40, height=30, seed=5)
        a = RandomRoomsMapCreationStrategy.from_params(params).create_map()
        b = RandomRoomsMapCreationStrategy.from_params(params).create_map()
        assert str(a) == str(b)

    @pytest.mark.parametrize(
        "args",
        [
            (20, 20, 5, 4, 6),     # min > max
            (20, 20, 5, 4, 0),     # empty rooms
            (10, 10, 5, 10, 3),    # does not fit
            (20, 20, -1, 6, 3),
        ],
    )
    def test_rejects_bad_room_sizes(self, args):
        with pytest.raises(ValueError):
            RandomRoomsMapCreationStrategy(*args)


class TestStringDeserialize:

    TEXT = """
        #####
        #.so#
        #####
    """

    def test_symbols(self):
        grid = StringDeserializeMapCreationStrategy(self.TEXT).create_map()
        assert (grid.width, grid.height) == (5, 3)
        a, b, c = grid.get_cell(1, 1), grid.get_cell(2, 1), grid.get_cell(3, 1)
        assert a.is_walkable and a.is_transparent
        assert b.is_walkable and not b.is_transparent
        assert not c.is_walkable and c.is_transparent

    def test_to_string(self):
        grid = load_map_string(self.TEXT)
        assert map_to_string(grid) == "#####\n#.so#\n#####"
        assert str(grid) == map_to_string(grid)

    def test_windows_newlines_and_spaces(self):
        grid = load_map_string("# # #\r\n# . #\r\n# # #\r\n")
        assert str(grid) == "###\n#.#\n###"

    def test_ragged_rows(self):
        with pytest.raises(ValueError):
            load_map_string("###\n##\n###")

    def test_unknown_symbol(self):
        with pytest.raises(ValueError):
            load_map_string("###\n#x#\n###")

    def test_empty(self):
        with pytest.raises(ValueError):
            load_map_string("  \n\n")
