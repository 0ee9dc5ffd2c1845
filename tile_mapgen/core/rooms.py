from __future__ import annotations

from typing import List, Optional

import structlog

from .config import RandomRoomsParams
from .generation import MapCreationStrategy
from .geometry import Rectangle
from .grid import Map
from .rng import RandomSource, default_random, random_from_seed

logger = structlog.get_logger()


class RandomRoomsMapCreationStrategy(MapCreationStrategy):
    """
    Rectangular rooms dropped at random, overlapping ones discarded, each room
    joined to the previous one by an L-shaped tunnel.
    """

    def __init__(
        self,
        width: int,
        height: int,
        max_rooms: int,
        room_max_size: int,
        room_min_size: int,
        random: Optional[RandomSource] = None,
    ) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"Map dimensions must be positive, got {width}x{height}.")
        if max_rooms < 0:
            raise ValueError(f"max_rooms must be >= 0, got {max_rooms}.")
        if room_min_size < 1 or room_min_size > room_max_size:
            raise ValueError(f"Invalid room size range [{room_min_size}, {room_max_size}].")
        if room_max_size > min(width, height) - 1:
            raise ValueError(f"room_max_size {room_max_size} does not fit a {width}x{height} map.")

        self.width = width
        self.height = height
        self.max_rooms = max_rooms
        self.room_max_size = room_max_size
        self.room_min_size = room_min_size
        self.random = random if random is not None else default_random()

    @classmethod
    def from_params(cls, params: RandomRoomsParams) -> "RandomRoomsMapCreationStrategy":
        return cls(
            params.width,
            params.height,
            params.max_rooms,
            params.room_max_size,
            params.room_min_size,
            random_from_seed(params.seed),
        )

    def place_rooms(self) -> List[Rectangle]:
        rng = self.random
        rooms: List[Rectangle] = []

        for _ in range(self.max_rooms):
            w = rng.next_int(self.room_min_size, self.room_max_size + 1)
            h = rng.next_int(self.room_min_size, self.room_max_size + 1)
            x = rng.next_int(0, self.width - w)
            y = rng.next_int(0, self.height - h)

            room = Rectangle(x, y, w, h)
            if any(room.intersects(other) for other in rooms):
                continue
            rooms.append(room)

        return rooms

    def create_map(self) -> Map:
        grid = Map(self.width, self.height)
        rooms = self.place_rooms()

        for room in rooms:
            _make_room(grid, room)

        for prev, cur in zip(rooms, rooms[1:]):
            px, py = prev.center
            cx, cy = cur.center
            if self.random.next_int(0, 2) == 0:
                _make_horizontal_tunnel(grid, px, cx, py)
                _make_vertical_tunnel(grid, py, cy, cx)
            else:
                _make_vertical_tunnel(grid, py, cy, px)
                _make_horizontal_tunnel(grid, px, cx, cy)

        logger.info("Room map created", width=self.width, height=self.height, rooms=len(rooms))
        return grid


def _make_room(grid: Map, room: Rectangle) -> None:
    for y in range(room.top + 1, room.bottom):
        for x in range(room.left + 1, room.right):
            grid.set_cell_properties(x, y, True, True)


def _make_horizontal_tunnel(grid: Map, x_start: int, x_end: int, y: int) -> None:
    for x in range(min(x_start, x_end), max(x_start, x_end) + 1):
        grid.set_cell_properties(x, y, True, True)


def _make_vertical_tunnel(grid: Map, y_start: int, y_end: int, x: int) -> None:
    for y in range(min(y_start, y_end), max(y_start, y_end) + 1):
        grid.set_cell_properties(x, y, True, True)
