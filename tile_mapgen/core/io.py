from __future__ import annotations

from typing import Dict, List, Tuple

from .generation import MapCreationStrategy
from .grid import Map

# symbol -> (is_transparent, is_walkable)
SYMBOLS: Dict[str, Tuple[bool, bool]] = {
    ".": (True, True),
    "s": (False, True),
    "o": (True, False),
    "#": (False, False),
}


def map_to_string(grid: Map) -> str:
    rows: List[str] = []
    for y in range(grid.height):
        rows.append("".join(grid.get_cell(x, y).symbol() for x in range(grid.width)))
    return "\n".join(rows)


def _split_lines(representation: str) -> List[str]:
    lines = representation.replace(" ", "").replace("\r", "").split("\n")

    while lines and not lines[0]:
        lines.pop(0)
    while lines and not lines[-1]:
        lines.pop()

    if not lines:
        raise ValueError("Map representation is empty.")
    return lines


class StringDeserializeMapCreationStrategy(MapCreationStrategy):
    """
    Builds a map from its text form, one line per row:
    - `.`: transparent and walkable
    - `s`: walkable only
    - `o`: transparent only
    - `#`: neither
    Spaces are ignored.
    """

    def __init__(self, map_representation: str) -> None:
        self.map_representation = map_representation

    def create_map(self) -> Map:
        lines = _split_lines(self.map_representation)
        width = len(lines[0])
        height = len(lines)

        grid = Map(width, height)
        for y, line in enumerate(lines):
            if len(line) != width:
                raise ValueError(f"Row {y} has {len(line)} cells, expected {width}.")
            for x, ch in enumerate(line):
                if ch not in SYMBOLS:
                    raise ValueError(f"Unknown map symbol {ch!r} at ({x}, {y}).")
                transparent, walkable = SYMBOLS[ch]
                grid.set_cell_properties(x, y, transparent, walkable)

        return grid


def load_map_string(representation: str) -> Map:
    return StringDeserializeMapCreationStrategy(representation).create_map()
