"""Command line entry: read a position on stdin and print the chosen move."""

from __future__ import annotations

import argparse
import random
import sys

from .constants import (
    MCTS_FAILSAVE_STEPS,
    MCTS_KILL_AFTER,
    MINIMAX_KILL_AFTER,
    SEED,
    elapsed,
)
from .mcts import MCTS
from .minimax import Minimax
from .protocol import format_final_move, read_game_state


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gemesis", description="Choose a move for the player to act."
    )
    parser.add_argument("--minimax", action="store_true", help="use minimax search")
    parser.add_argument("--time-limit", type=float, help="search budget in seconds")
    parser.add_argument(
        "--max-steps",
        type=int,
        default=MCTS_FAILSAVE_STEPS,
        help="maximum tree search iterations",
    )
    parser.add_argument("--depth", type=int, help="fixed minimax depth")
    parser.add_argument(
        "--debug", action="store_true", help="print the parsed board to stderr"
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    if args.depth is not None and args.depth < 1:
        parser.error("--depth must be at least 1")

    elapsed()
    try:
        game = read_game_state(sys.stdin)
    except ValueError as exc:
        print(f"gemesis: {exc}", file=sys.stderr)
        return 1

    if args.debug:
        print(game.describe(), file=sys.stderr)

    if args.minimax:
        limit = MINIMAX_KILL_AFTER if args.time_limit is None else args.time_limit
        if args.depth is not None:
            searcher = Minimax(limit, min_depth=args.depth, max_depth=args.depth)
        else:
            searcher = Minimax(limit)
        move = searcher.search(game)
    else:
        limit = MCTS_KILL_AFTER if args.time_limit is None else args.time_limit
        move = MCTS(random.Random(SEED), limit, args.max_steps).best_move(game)

    sys.stdout.write(format_final_move(move))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())