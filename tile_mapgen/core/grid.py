from __future__ import annotations

from typing import TYPE_CHECKING, Iterator, List, Optional

from .types import Cell

if TYPE_CHECKING:
    from .generation import MapCreationStrategy


BoolGrid = List[List[bool]]


def _in_bounds(x: int, y: int, w: int, h: int) -> bool:
    return 0 <= x < w and 0 <= y < h


def _clamp(v: int, lo: int, hi: int) -> int:
    return max(lo, min(v, hi))


class Map:
    """
    Rectangular grid of cells with transparency and walkability flags.

    Storage is two dense [y][x] boolean layers. Every query hands out
    immutable Cell snapshots; the only way to change the map is
    set_cell_properties (or clear).
    """

    def __init__(self, width: Optional[int] = None, height: Optional[int] = None) -> None:
        self._width = 0
        self._height = 0
        self._transparent: BoolGrid = []
        self._walkable: BoolGrid = []
        # Map() is an empty shell for initialize(); any explicit size is validated
        if width is not None or height is not None:
            self.initialize(0 if width is None else width, 0 if height is None else height)

    @classmethod
    def create(cls, strategy: "MapCreationStrategy") -> "Map":
        return strategy.create_map()

    def initialize(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"Map dimensions must be positive, got {width}x{height}.")

        self._width = width
        self._height = height
        self._transparent = [[False] * width for _ in range(height)]
        self._walkable = [[False] * width for _ in range(height)]

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    # ----------------------------- mutation -----------------------------

    def clear(self, is_transparent: bool = False, is_walkable: bool = False) -> None:
        for y in range(self._height):
            for x in range(self._width):
                self._transparent[y][x] = is_transparent
                self._walkable[y][x] = is_walkable

    def set_cell_properties(self, x: int, y: int, is_transparent: bool, is_walkable: bool) -> None:
        self._check(x, y)
        self._transparent[y][x] = is_transparent
        self._walkable[y][x] = is_walkable

    def clone(self) -> "Map":
        other = Map()
        other._width = self._width
        other._height = self._height
        other._transparent = [row[:] for row in self._transparent]
        other._walkable = [row[:] for row in self._walkable]
        return other

    # ----------------------------- point queries -----------------------------

    def _check(self, x: int, y: int) -> None:
        if not _in_bounds(x, y, self._width, self._height):
            raise IndexError(f"Cell ({x}, {y}) is outside the {self._width}x{self._height} map.")

    def in_bounds(self, x: int, y: int) -> bool:
        return _in_bounds(x, y, self._width, self._height)

    def get_cell(self, x: int, y: int) -> Cell:
        self._check(x, y)
        return Cell(x, y, self._transparent[y][x], self._walkable[y][x])

    def is_walkable(self, x: int, y: int) -> bool:
        self._check(x, y)
        return self._walkable[y][x]

    def is_transparent(self, x: int, y: int) -> bool:
        self._check(x, y)
        return self._transparent[y][x]

    def is_border_cell(self, x: int, y: int) -> bool:
        return x == 0 or x == self._width - 1 or y == 0 or y == self._height - 1

    # ----------------------------- area queries -----------------------------

    def get_all_cells(self) -> Iterator[Cell]:
        for y in range(self._height):
            for x in range(self._width):
                yield Cell(x, y, self._transparent[y][x], self._walkable[y][x])

    def get_cells_in_area(self, x: int, y: int, distance: int) -> Iterator[Cell]:
        """Square (Chebyshev) area around (x, y), clipped to the map, centre included."""
        x0 = _clamp(x - distance, 0, self._width - 1)
        x1 = _clamp(x + distance, 0, self._width - 1)
        y0 = _clamp(y - distance, 0, self._height - 1)
        y1 = _clamp(y + distance, 0, self._height - 1)
        for cy in range(y0, y1 + 1):
            for cx in range(x0, x1 + 1):
                yield Cell(cx, cy, self._transparent[cy][cx], self._walkable[cy][cx])

    def get_cells_in_rows(self, *rows: int) -> Iterator[Cell]:
        for y in rows:
            for x in range(self._width):
                yield self.get_cell(x, y)

    def get_cells_in_columns(self, *columns: int) -> Iterator[Cell]:
        for x in columns:
            for y in range(self._height):
                yield self.get_cell(x, y)

    def get_adjacent_cells(self, x: int, y: int, diagonals: bool = False) -> List[Cell]:
        offsets = [(-1, 0), (1, 0), (0, -1), (0, 1)]
        if diagonals:
            offsets += [(-1, -1), (1, -1), (-1, 1), (1, 1)]

        out: List[Cell] = []
        for dx, dy in offsets:
            nx, ny = x + dx, y + dy
            if _in_bounds(nx, ny, self._width, self._height):
                out.append(Cell(nx, ny, self._transparent[ny][nx], self._walkable[ny][nx]))
        return out

    def get_cells_along_line(self, x_origin: int, y_origin: int, x_dest: int, y_dest: int) -> List[Cell]:
        """
        Bresenham line from origin to destination, both ends included.
        Endpoints are clamped onto the map first.
        """
        x = _clamp(x_origin, 0, self._width - 1)
        y = _clamp(y_origin, 0, self._height - 1)
        x_dest = _clamp(x_dest, 0, self._width - 1)
        y_dest = _clamp(y_dest, 0, self._height - 1)

        dx = abs(x_dest - x)
        dy = abs(y_dest - y)
        sx = 1 if x < x_dest else -1
        sy = 1 if y < y_dest else -1
        err = dx - dy

        out: List[Cell] = []
        while True:
            out.append(Cell(x, y, self._transparent[y][x], self._walkable[y][x]))
            if x == x_dest and y == y_dest:
                break
            e2 = 2 * err
            if e2 > -dy:
                err -= dy
                x += sx
            if e2 < dx:
                err += dx
                y += sy

        return out

    # ----------------------------- misc -----------------------------

    def walkable_count(self) -> int:
        return sum(row.count(True) for row in self._walkable)

    def __str__(self) -> str:
        from .io import map_to_string
        return map_to_string(self)

    def __repr__(self) -> str:
        return f"Map(width={self._width}, height={self._height})"
