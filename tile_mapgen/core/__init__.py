from __future__ import annotations

from .config import BorderOnlyParams, CaveParams, RandomRoomsParams
from .generation import BorderOnlyMapCreationStrategy, CaveMapCreationStrategy, MapCreationStrategy
from .geometry import Rectangle
from .grid import Map
from .io import StringDeserializeMapCreationStrategy, load_map_string, map_to_string
from .pathfinding import Path, PathFinder
from .rng import RandomSource, SeededRandom, default_random
from .rooms import RandomRoomsMapCreationStrategy
from .types import Cell, Coord
from .union_find import UnionFind

__all__ = [
    "BorderOnlyParams",
    "CaveParams",
    "RandomRoomsParams",
    "MapCreationStrategy",
    "CaveMapCreationStrategy",
    "BorderOnlyMapCreationStrategy",
    "RandomRoomsMapCreationStrategy",
    "StringDeserializeMapCreationStrategy",
    "load_map_string",
    "map_to_string",
    "Rectangle",
    "Map",
    "Cell",
    "Coord",
    "Path",
    "PathFinder",
    "RandomSource",
    "SeededRandom",
    "default_random",
    "UnionFind",
]
