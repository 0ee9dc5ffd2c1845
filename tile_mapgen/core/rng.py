from __future__ import annotations

import random
from typing import Optional, Protocol


class RandomSource(Protocol):
    def next_int(self, min_inclusive: int, max_exclusive: int) -> int:
        ...


class SeededRandom:
    """RandomSource backed by random.Random. One instance per generation task."""

    def __init__(self, seed: Optional[int] = None) -> None:
        self.seed = seed
        self._rng = random.Random(seed)

    def next_int(self, min_inclusive: int, max_exclusive: int) -> int:
        return self._rng.randrange(min_inclusive, max_exclusive)


_DEFAULT: Optional[SeededRandom] = None


def default_random() -> SeededRandom:
    global _DEFAULT
    if _DEFAULT is None:
        _DEFAULT = SeededRandom()
    return _DEFAULT


def random_from_seed(seed: Optional[int]) -> RandomSource:
    return default_random() if seed is None else SeededRandom(seed)
