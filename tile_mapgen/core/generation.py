from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

import structlog

from .ca_walls import erode, randomly_fill_cells
from .config import BorderOnlyParams, CaveParams
from .connectivity import connect_caves
from .grid import Map
from .rng import RandomSource, default_random, random_from_seed

logger = structlog.get_logger()


class MapCreationStrategy(ABC):
    @abstractmethod
    def create_map(self) -> Map:
        ...


class CaveMapCreationStrategy(MapCreationStrategy):
    """
    Cellular-automata caves.

    Cells start as floor with `fill_probability` percent chance, then go
    through `total_iterations` erosion passes: the first
    `cutoff_of_big_area_fill` passes also fill large open areas, the rest only
    look at the 8 nearest neighbours. Isolated caves are joined afterwards with
    straight tunnels.
    """

    def __init__(
        self,
        width: int,
        height: int,
        fill_probability: int,
        total_iterations: int,
        cutoff_of_big_area_fill: int,
        random: Optional[RandomSource] = None,
    ) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"Map dimensions must be positive, got {width}x{height}.")

        self.width = width
        self.height = height
        self.fill_probability = fill_probability
        self.total_iterations = total_iterations
        self.cutoff_of_big_area_fill = cutoff_of_big_area_fill
        self.random = random if random is not None else default_random()

    @classmethod
    def from_params(cls, params: CaveParams) -> "CaveMapCreationStrategy":
        return cls(
            params.width,
            params.height,
            params.fill_probability,
            params.total_iterations,
            params.cutoff_of_big_area_fill,
            random_from_seed(params.seed),
        )

    def create_map(self) -> Map:
        grid = Map(self.width, self.height)

        randomly_fill_cells(grid, self.random, self.fill_probability)
        grid = erode(grid, self.total_iterations, self.cutoff_of_big_area_fill)
        connect_caves(grid)

        logger.info(
            "Cave map created",
            width=self.width,
            height=self.height,
            floors=grid.walkable_count(),
        )
        return grid


class BorderOnlyMapCreationStrategy(MapCreationStrategy):
    """Open floor everywhere except a solid wall around the edge."""

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"Map dimensions must be positive, got {width}x{height}.")
        self.width = width
        self.height = height

    @classmethod
    def from_params(cls, params: BorderOnlyParams) -> "BorderOnlyMapCreationStrategy":
        return cls(params.width, params.height)

    def create_map(self) -> Map:
        grid = Map(self.width, self.height)
        grid.clear(True, True)

        for cell in grid.get_cells_in_rows(0, self.height - 1):
            grid.set_cell_properties(cell.x, cell.y, False, False)
        for cell in grid.get_cells_in_columns(0, self.width - 1):
            grid.set_cell_properties(cell.x, cell.y, False, False)

        return grid
