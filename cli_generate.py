from __future__ import annotations

import argparse
from typing import List, Optional

from tile_mapgen.core.config import BorderOnlyParams, CaveParams, RandomRoomsParams
from tile_mapgen.core.generation import BorderOnlyMapCreationStrategy, CaveMapCreationStrategy, MapCreationStrategy
from tile_mapgen.core.rooms import RandomRoomsMapCreationStrategy
from tile_mapgen.logging_setup import configure_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Generate a tile map and print it.")
    parser.add_argument("--log-level", default="WARNING")
    parser.add_argument("--json-logs", action="store_true")

    sub = parser.add_subparsers(dest="strategy", required=True)

    cave = sub.add_parser("cave", help="cellular automata caves")
    cave.add_argument("--width", type=int, default=CaveParams.width)
    cave.add_argument("--height", type=int, default=CaveParams.height)
    cave.add_argument("--fill", type=int, default=CaveParams.fill_probability, dest="fill_probability")
    cave.add_argument("--iterations", type=int, default=CaveParams.total_iterations, dest="total_iterations")
    cave.add_argument("--cutoff", type=int, default=CaveParams.cutoff_of_big_area_fill, dest="cutoff_of_big_area_fill")
    cave.add_argument("--seed", type=int, default=None)

    rooms = sub.add_parser("rooms", help="random rooms joined by tunnels")
    rooms.add_argument("--width", type=int, default=RandomRoomsParams.width)
    rooms.add_argument("--height", type=int, default=RandomRoomsParams.height)
    rooms.add_argument("--max-rooms", type=int, default=RandomRoomsParams.max_rooms)
    rooms.add_argument("--room-max-size", type=int, default=RandomRoomsParams.room_max_size)
    rooms.add_argument("--room-min-size", type=int, default=RandomRoomsParams.room_min_size)
    rooms.add_argument("--seed", type=int, default=None)

    border = sub.add_parser("border", help="open map with a wall border")
    border.add_argument("--width", type=int, default=BorderOnlyParams.width)
    border.add_argument("--height", type=int, default=BorderOnlyParams.height)

    return parser


def strategy_from_args(args: argparse.Namespace) -> MapCreationStrategy:
    if args.strategy == "cave":
        return CaveMapCreationStrategy.from_params(
            CaveParams(
                width=args.width,
                height=args.height,
                fill_probability=args.fill_probability,
                total_iterations=args.total_iterations,
                cutoff_of_big_area_fill=args.cutoff_of_big_area_fill,
                seed=args.seed,
            )
        )
    if args.strategy == "rooms":
        return RandomRoomsMapCreationStrategy.from_params(
            RandomRoomsParams(
                width=args.width,
                height=args.height,
                max_rooms=args.max_rooms,
                room_max_size=args.room_max_size,
                room_min_size=args.room_min_size,
                seed=args.seed,
            )
        )
    return BorderOnlyMapCreationStrategy.from_params(BorderOnlyParams(width=args.width, height=args.height))


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level, json=args.json_logs)

    try:
        grid = strategy_from_args(args).create_map()
    except ValueError as e:
        parser.error(str(e))

    print(grid)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
