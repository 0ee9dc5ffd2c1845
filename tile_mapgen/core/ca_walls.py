from __future__ import annotations

from typing import Callable

import structlog

from .grid import Map
from .rng import RandomSource

logger = structlog.get_logger()

WALL_LIMIT = 5
OPEN_AREA_LIMIT = 2


def _set_wall(grid: Map, x: int, y: int) -> None:
    grid.set_cell_properties(x, y, False, False)


def _set_floor(grid: Map, x: int, y: int) -> None:
    grid.set_cell_properties(x, y, True, True)


def randomly_fill_cells(grid: Map, rng: RandomSource, fill_probability: int) -> None:
    # border cells never consume a draw
    floors = 0
    for cell in grid.get_all_cells():
        if grid.is_border_cell(cell.x, cell.y):
            _set_wall(grid, cell.x, cell.y)
        elif rng.next_int(1, 100) < fill_probability:
            _set_floor(grid, cell.x, cell.y)
            floors += 1
        else:
            _set_wall(grid, cell.x, cell.y)

    logger.debug("Random fill complete", floors=floors, fill_probability=fill_probability)


def count_walls_near(grid: Map, x: int, y: int, distance: int) -> int:
    c = 0
    for cell in grid.get_cells_in_area(x, y, distance):
        if cell.x == x and cell.y == y:
            continue
        if not cell.is_walkable:
            c += 1
    return c


def _big_area_rule(grid: Map, x: int, y: int) -> bool:
    return count_walls_near(grid, x, y, 1) >= WALL_LIMIT or count_walls_near(grid, x, y, 2) <= OPEN_AREA_LIMIT


def _nearest_neighbors_rule(grid: Map, x: int, y: int) -> bool:
    return count_walls_near(grid, x, y, 1) >= WALL_LIMIT


def _ca_step(grid: Map, becomes_wall: Callable[[Map, int, int], bool]) -> Map:
    # reads only from `grid`, writes only to `out`
    out = grid.clone()

    for cell in grid.get_all_cells():
        if grid.is_border_cell(cell.x, cell.y):
            continue

        if becomes_wall(grid, cell.x, cell.y):
            _set_wall(out, cell.x, cell.y)
        else:
            _set_floor(out, cell.x, cell.y)

    return out


def big_area_step(grid: Map) -> Map:
    return _ca_step(grid, _big_area_rule)


def nearest_neighbors_step(grid: Map) -> Map:
    return _ca_step(grid, _nearest_neighbors_rule)


def erode(grid: Map, total_iterations: int, cutoff_of_big_area_fill: int) -> Map:
    for i in range(max(0, total_iterations)):
        if i < cutoff_of_big_area_fill:
            grid = big_area_step(grid)
            rule = "big_area"
        else:
            grid = nearest_neighbors_step(grid)
            rule = "nearest_neighbors"

        logger.debug("Erosion pass complete", iteration=i, rule=rule, floors=grid.walkable_count())

    return grid
