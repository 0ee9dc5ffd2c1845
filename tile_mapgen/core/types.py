from __future__ import annotations
from dataclasses import dataclass, field
from typing import Tuple

Coord = Tuple[int, int]


@dataclass(frozen=True)
class Cell:
    """Snapshot of one map position. Equal (and hashed) by coordinates only."""
    x: int
    y: int
    is_transparent: bool = field(default=False, compare=False)
    is_walkable: bool = field(default=False, compare=False)

    @property
    def coord(self) -> Coord:
        return (self.x, self.y)

    def symbol(self) -> str:
        if self.is_walkable:
            return "." if self.is_transparent else "s"
        return "o" if self.is_transparent else "#"

    def __str__(self) -> str:
        return self.symbol()
