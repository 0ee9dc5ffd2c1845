from __future__ import annotations

from dataclasses import dataclass
from heapq import heappush, heappop
from typing import Dict, List, Optional, Tuple

from .grid import Map
from .types import Cell, Coord


@dataclass(frozen=True)
class Path:
    steps: Tuple[Cell, ...]

    @property
    def start(self) -> Cell:
        return self.steps[0]

    @property
    def end(self) -> Cell:
        return self.steps[-1]

    @property
    def length(self) -> int:
        return len(self.steps)

    def __iter__(self):
        return iter(self.steps)


class PathFinder:
    """
    A* over the walkable cells of one map.

    Movement is 4-directional unless a diagonal_cost is given, in which case
    diagonal steps are allowed at that cost (orthogonal steps cost 1).
    """

    def __init__(self, grid: Map, diagonal_cost: Optional[float] = None) -> None:
        if diagonal_cost is not None and diagonal_cost <= 0:
            raise ValueError(f"diagonal_cost must be positive, got {diagonal_cost}.")
        self.grid = grid
        self.diagonal_cost = diagonal_cost

    def _heur(self, a: Coord, b: Coord) -> float:
        dx = abs(a[0] - b[0])
        dy = abs(a[1] - b[1])
        if self.diagonal_cost is None:
            return dx + dy
        if self.diagonal_cost >= 1:
            d = min(self.diagonal_cost, 2.0)
            return dx + dy + (d - 2) * min(dx, dy)
        return self.diagonal_cost * max(dx, dy)

    def _step_cost(self, a: Coord, b: Coord) -> float:
        if a[0] != b[0] and a[1] != b[1]:
            return self.diagonal_cost  # type: ignore[return-value]
        return 1

    def shortest_path(self, source: Cell, destination: Cell) -> Optional[Path]:
        grid = self.grid
        if not grid.in_bounds(source.x, source.y) or not grid.in_bounds(destination.x, destination.y):
            return None
        if not grid.is_walkable(source.x, source.y) or not grid.is_walkable(destination.x, destination.y):
            return None

        start: Coord = (source.x, source.y)
        goal: Coord = (destination.x, destination.y)
        diagonals = self.diagonal_cost is not None

        open_heap: List[Tuple[float, int, Coord]] = []
        heappush(open_heap, (0, 0, start))

        came_from: Dict[Coord, Coord] = {}
        gscore: Dict[Coord, float] = {start: 0}
        closed: set[Coord] = set()

        counter = 0

        while open_heap:
            _, _, cur = heappop(open_heap)
            if cur == goal:
                coords = [cur]
                while cur in came_from:
                    cur = came_from[cur]
                    coords.append(cur)
                coords.reverse()
                return Path(tuple(grid.get_cell(x, y) for x, y in coords))

            if cur in closed:
                continue
            closed.add(cur)

            for n in grid.get_adjacent_cells(cur[0], cur[1], diagonals=diagonals):
                if not n.is_walkable:
                    continue
                ncoord = n.coord
                if ncoord in closed:
                    continue

                tentative = gscore[cur] + self._step_cost(cur, ncoord)
                if tentative < gscore.get(ncoord, float("inf")):
                    came_from[ncoord] = cur
                    gscore[ncoord] = tentative
                    counter += 1
                    heappush(open_heap, (tentative + self._heur(ncoord, goal), counter, ncoord))

        return None

    def is_reachable(self, source: Cell, destination: Cell) -> bool:
        return self.shortest_path(source, destination) is not None
