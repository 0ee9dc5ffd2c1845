from __future__ import annotations
from dataclasses import dataclass

from .types import Coord


@dataclass(frozen=True)
class Rectangle:
    x: int
    y: int
    width: int
    height: int

    @property
    def left(self) -> int:
        return self.x

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def top(self) -> int:
        return self.y

    @property
    def bottom(self) -> int:
        return self.y + self.height

    @property
    def center(self) -> Coord:
        return (self.x + self.width // 2, self.y + self.height // 2)

    def intersects(self, other: "Rectangle") -> bool:
        # shared edges do not count as overlap
        return (
            other.left < self.right and self.left < other.right
            and other.top < self.bottom and self.top < other.bottom
        )

    def contains(self, x: int, y: int) -> bool:
        return self.left <= x < self.right and self.top <= y < self.bottom
