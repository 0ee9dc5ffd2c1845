from __future__ import annotations

from typing import Iterable, List

import pytest

from tile_mapgen.logging_setup import configure_logging


class MinimumRandom:
    """Always answers the low end of the requested range."""

    def __init__(self) -> None:
        self.calls = 0

    def next_int(self, min_inclusive: int, max_exclusive: int) -> int:
        self.calls += 1
        return min_inclusive


class ScriptedRandom:
    """Replays a fixed list of values, clipped into the requested range."""

    def __init__(self, values: Iterable[int]) -> None:
        self.values: List[int] = list(values)
        self.pos = 0

    def next_int(self, min_inclusive: int, max_exclusive: int) -> int:
        v = self.values[self.pos % len(self.values)]
        self.pos += 1
        return max(min_inclusive, min(v, max_exclusive - 1))


@pytest.fixture(scope="session", autouse=True)
def quiet_logging():
    configure_logging("WARNING")


@pytest.fixture
def minimum_random() -> MinimumRandom:
    return MinimumRandom()


@pytest.fixture
def scripted_random():
    return ScriptedRandom
