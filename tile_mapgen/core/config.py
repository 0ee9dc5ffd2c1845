from __future__ import annotations
from dataclasses import dataclass
from typing import Optional


@dataclass
class CaveParams:
    width: int = 50
    height: int = 40
    # percent chance (1..100) that an interior cell starts as floor
    fill_probability: int = 45
    total_iterations: int = 3
    # iterations before this index use the big-area rule
    cutoff_of_big_area_fill: int = 2
    seed: Optional[int] = None


@dataclass
class RandomRoomsParams:
    width: int = 50
    height: int = 40
    max_rooms: int = 12
    room_max_size: int = 10
    room_min_size: int = 5
    seed: Optional[int] = None


@dataclass
class BorderOnlyParams:
    width: int = 50
    height: int = 40
