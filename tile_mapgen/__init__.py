from __future__ import annotations
from .core import (
    BorderOnlyMapCreationStrategy,
    BorderOnlyParams,
    CaveMapCreationStrategy,
    CaveParams,
    Cell,
    Map,
    MapCreationStrategy,
    PathFinder,
    RandomRoomsMapCreationStrategy,
    RandomRoomsParams,
    SeededRandom,
    StringDeserializeMapCreationStrategy,
    UnionFind,
    load_map_string,
)
from .logging_setup import configure_logging, install_quiet_default

install_quiet_default()

__all__ = [
    "BorderOnlyMapCreationStrategy",
    "BorderOnlyParams",
    "CaveMapCreationStrategy",
    "CaveParams",
    "Cell",
    "Map",
    "MapCreationStrategy",
    "PathFinder",
    "RandomRoomsMapCreationStrategy",
    "RandomRoomsParams",
    "SeededRandom",
    "StringDeserializeMapCreationStrategy",
    "UnionFind",
    "load_map_string",
    "configure_logging",
    "install_quiet_default",
]
