from __future__ import annotations

from typing import Dict, List, Optional

import structlog

from .geometry import Rectangle
from .grid import Map
from .pathfinding import PathFinder
from .types import Cell, Coord
from .union_find import UnionFind

logger = structlog.get_logger()


class _MapSection:
    """
    One region of mutually reachable walkable cells.

    Holds coordinates only (no reference to the map it came from) and a
    bounding box that grows as cells are added.
    """

    def __init__(self) -> None:
        self._cells: List[Coord] = []
        self._members: set[Coord] = set()
        self._left = 1 << 30
        self._top = 1 << 30
        self._right = -1
        self._bottom = -1

    def add_cell(self, x: int, y: int) -> None:
        if (x, y) in self._members:
            return
        self._cells.append((x, y))
        self._members.add((x, y))
        self._left = min(self._left, x)
        self._right = max(self._right, x)
        self._top = min(self._top, y)
        self._bottom = max(self._bottom, y)

    @property
    def cells(self) -> List[Coord]:
        return list(self._cells)

    @property
    def first(self) -> Coord:
        return self._cells[0]

    @property
    def bounds(self) -> Rectangle:
        return Rectangle(self._left, self._top, self._right - self._left + 1, self._bottom - self._top + 1)

    def __contains__(self, coord: Coord) -> bool:
        return coord in self._members

    def __len__(self) -> int:
        return len(self._cells)

    def anchor(self) -> Coord:
        """Bounds centre if it is part of the section, else the closest member (first in scan order)."""
        center = self.bounds.center
        if center in self._members:
            return center
        cx, cy = center
        return min(self._cells, key=lambda c: abs(c[0] - cx) + abs(c[1] - cy))

    def __repr__(self) -> str:
        return f"Bounds: {self.bounds}"


# ----------------------------- analysis -----------------------------

def find_regions(grid: Map, path_finder: Optional[PathFinder] = None) -> List[_MapSection]:
    """
    Groups walkable cells into regions by asking the path finder whether each
    cell can reach the first cell of an already known region. Regions come
    back in the order their first cell appears in a row-major scan.

    A cell that reaches an already placed neighbour joins that neighbour's
    region without a search back to the region's first cell.
    """
    finder = path_finder or PathFinder(grid)
    diagonals = finder.diagonal_cost is not None
    sections: List[_MapSection] = []
    owner: Dict[Coord, _MapSection] = {}

    for cell in grid.get_all_cells():
        if not cell.is_walkable:
            continue

        placed = _section_of_neighbour(grid, finder, cell, owner, diagonals)
        if placed is not None:
            placed.add_cell(cell.x, cell.y)
            owner[cell.coord] = placed
            continue

        for section in sections:
            fx, fy = section.first
            if finder.shortest_path(cell, grid.get_cell(fx, fy)) is not None:
                section.add_cell(cell.x, cell.y)
                break
        else:
            section = _MapSection()
            section.add_cell(cell.x, cell.y)
            sections.append(section)
        owner[cell.coord] = section

    return sections


def _section_of_neighbour(
    grid: Map,
    finder: PathFinder,
    cell: Cell,
    owner: Dict[Coord, _MapSection],
    diagonals: bool,
) -> Optional[_MapSection]:
    for n in grid.get_adjacent_cells(cell.x, cell.y, diagonals=diagonals):
        section = owner.get(n.coord)
        if section is not None and finder.shortest_path(cell, n) is not None:
            return section
    return None


def _distance_between(a: _MapSection, b: _MapSection) -> int:
    ax, ay = a.bounds.center
    bx, by = b.bounds.center
    return abs(ax - bx) + abs(ay - by)


def _find_nearest_section(sections: List[_MapSection], index: int, union_find: UnionFind) -> Optional[int]:
    start = sections[index]
    closest: Optional[int] = None
    best = 1_000_000_000

    for i, section in enumerate(sections):
        if i == index or union_find.connected(i, index):
            continue
        d = _distance_between(start, section)
        if d < best:
            best = d
            closest = i

    return closest


# ----------------------------- carving -----------------------------

def carve_tunnel(grid: Map, start: Coord, end: Coord) -> int:
    """
    Carve a straight floor line from start to end. Diagonal steps also open
    the elbow cell (previous x, current y) so the tunnel stays connected for
    4-directional movement.
    """
    carved = 0
    prev: Optional[Cell] = None
    for cell in grid.get_cells_along_line(start[0], start[1], end[0], end[1]):
        grid.set_cell_properties(cell.x, cell.y, True, True)
        carved += 1
        if prev is not None and cell.x != prev.x and cell.y != prev.y:
            grid.set_cell_properties(prev.x, cell.y, True, True)
            carved += 1
        prev = cell
    return carved


def connect_regions(grid: Map, sections: List[_MapSection]) -> int:
    """Carve tunnels until every section is joined. Returns the number of tunnels."""
    union_find = UnionFind(len(sections))
    tunnels = 0

    while union_find.count > 1:
        for i in range(len(sections)):
            j = _find_nearest_section(sections, i, union_find)
            if j is None:
                continue

            a = sections[i].anchor()
            b = sections[j].anchor()
            carve_tunnel(grid, a, b)
            union_find.union(i, j)
            tunnels += 1
            logger.debug("Tunnel carved", source=i, target=j, start=a, end=b, groups=union_find.count)

    return tunnels


def connect_caves(grid: Map) -> Map:
    sections = find_regions(grid)
    logger.info("Regions found", regions=len(sections))

    tunnels = connect_regions(grid, sections)
    if tunnels:
        logger.info("Connectivity repair complete", tunnels=tunnels)
    return grid
