"""Game constants, search parameters, the card tables and a process clock."""

from __future__ import annotations

import time

# Search parameters: minimax
SEED = 1
MIN_MINIMAX_DEPTH = 5
MAX_MINIMAX_DEPTH = 12
MINIMAX_KILL_AFTER = 2.0

# Static evaluation multipliers
MINIMAX_TOTAL_SCORE_MUL = 25
MINIMAX_TOTAL_CHIPS_MUL = 1
MINIMAX_TOTAL_GOLD_MUL = 1
MINIMAX_RES_CNT_MUL = -8
MINIMAX_NUM_CARDS_MUL = 15

# Search parameters: Monte Carlo tree search
MCTS_EXPLOR_MUL = 1.41
MCTS_KILL_AFTER = 2.0
MCTS_NODE_ROLLOUTS = 10
MCTS_FAILSAVE_STEPS = 100_000_000
MCTS_SIM_MAX_MOVES = (0, 36, 72, 108, 144)

# Game constants
VIS_PER_PACK = 4
PACK_CNT = 3
GEM_CNT = 5
CHIP_CNT = 6
GOLD = GEM_CNT
CARDS_CNT = 90
NOBLE_CNT = 10
NOBLE_SCORE = 3

MAX_HOLD_CHIPS = 10
MAX_HOLD_RES = 3

MAX_PLAYER_CNT = 4

SCORE_ENDGAME = 15

MAX_MOVES = 100

INF = 100_000_000

# Each row: five gem costs, the bonus gem the card grants, the points it is worth.
CARDS: tuple[tuple[int, ...], ...] = (
    (-1, -1, -1, -1, -1, -1, -1), (0, 0, 0, 3, 0, 0, 0), (3, 0, 0, 0, 0, 1, 0),
    (0, 0, 0, 0, 3, 2, 0), (0, 0, 3, 0, 0, 3, 0), (0, 3, 0, 0, 0, 4, 0),
    (0, 1, 2, 0, 0, 0, 0), (0, 0, 1, 2, 0, 1, 0), (0, 0, 0, 1, 2, 2, 0),
    (2, 0, 0, 0, 1, 3, 0), (1, 2, 0, 0, 0, 4, 0), (0, 0, 0, 4, 0, 0, 1),
    (0, 0, 0, 0, 4, 1, 1), (4, 0, 0, 0, 0, 2, 1), (0, 4, 0, 0, 0, 3, 1),
    (0, 0, 4, 0, 0, 4, 1), (2, 0, 0, 2, 0, 0, 0), (2, 0, 2, 0, 0, 1, 0),
    (0, 2, 0, 0, 2, 2, 0), (0, 0, 2, 0, 2, 3, 0), (0, 2, 0, 2, 0, 4, 0),
    (0, 1, 1, 1, 1, 0, 0), (1, 0, 1, 1, 1, 1, 0), (1, 1, 0, 1, 1, 2, 0),
    (1, 1, 1, 0, 1, 3, 0), (1, 1, 1, 1, 0, 4, 0), (0, 1, 1, 2, 1, 0, 0),
    (1, 0, 1, 1, 2, 1, 0), (2, 1, 0, 1, 1, 2, 0), (1, 2, 1, 0, 1, 3, 0),
    (1, 1, 2, 1, 0, 4, 0), (0, 1, 0, 2, 2, 0, 0), (2, 0, 1, 0, 2, 1, 0),
    (2, 2, 0, 1, 0, 2, 0), (0, 2, 2, 0, 1, 3, 0), (1, 0, 2, 2, 0, 4, 0),
    (1, 0, 0, 1, 3, 0, 0), (0, 1, 3, 1, 0, 1, 0), (1, 3, 1, 0, 0, 2, 0),
    (0, 0, 1, 3, 1, 3, 0), (3, 1, 0, 0, 1, 4, 0), (0, 0, 0, 0, 5, 0, 2),
    (0, 5, 0, 0, 0, 1, 2), (0, 0, 5, 0, 0, 2, 2), (5, 0, 0, 0, 0, 3, 2),
    (0, 0, 0, 5, 0, 4, 2), (6, 0, 0, 0, 0, 0, 3), (0, 6, 0, 0, 0, 1, 3),
    (0, 0, 6, 0, 0, 2, 3), (0, 0, 0, 6, 0, 3, 3), (0, 0, 0, 0, 6, 4, 3),
    (0, 0, 0, 3, 5, 0, 2), (0, 3, 5, 0, 0, 1, 2), (0, 0, 3, 5, 0, 2, 2),
    (5, 0, 0, 0, 3, 3, 2), (3, 5, 0, 0, 0, 4, 2), (0, 2, 4, 1, 0, 0, 2),
    (0, 0, 2, 4, 1, 1, 2), (1, 0, 0, 2, 4, 2, 2), (4, 1, 0, 0, 2, 3, 2),
    (2, 4, 1, 0, 0, 4, 2), (2, 0, 0, 2, 3, 0, 1), (0, 0, 3, 2, 2, 1, 1),
    (3, 2, 2, 0, 0, 2, 1), (2, 3, 0, 0, 2, 3, 1), (0, 2, 2, 3, 0, 4, 1),
    (2, 0, 3, 0, 3, 0, 1), (3, 2, 0, 3, 0, 1, 1), (0, 3, 2, 0, 3, 2, 1),
    (3, 0, 3, 2, 0, 3, 1), (0, 3, 0, 3, 2, 4, 1), (0, 7, 0, 0, 0, 0, 4),
    (0, 0, 7, 0, 0, 1, 4), (0, 0, 0, 7, 0, 2, 4), (0, 0, 0, 0, 7, 3, 4),
    (7, 0, 0, 0, 0, 4, 4), (3, 7, 0, 0, 0, 0, 5), (0, 3, 7, 0, 0, 1, 5),
    (0, 0, 3, 7, 0, 2, 5), (0, 0, 0, 3, 7, 3, 5), (7, 0, 0, 0, 3, 4, 5),
    (3, 6, 3, 0, 0, 0, 4), (0, 3, 6, 3, 0, 1, 4), (0, 0, 3, 6, 3, 2, 4),
    (3, 0, 0, 3, 6, 3, 4), (6, 3, 0, 0, 3, 4, 4), (0, 3, 5, 3, 3, 0, 3),
    (3, 0, 3, 5, 3, 1, 3), (3, 3, 0, 3, 5, 2, 3), (5, 3, 3, 0, 3, 3, 3),
    (3, 5, 3, 3, 0, 4, 3),
)

# Bonus requirements per gem for each noble.
NOBLE_CARDS: tuple[tuple[int, ...], ...] = (
    (-1, -1, -1, -1, -1), (4, 4, 0, 0, 0), (0, 4, 4, 0, 0), (0, 0, 4, 4, 0),
    (0, 0, 0, 4, 4), (4, 0, 0, 0, 4), (3, 3, 3, 0, 0), (0, 3, 3, 3, 0),
    (0, 0, 3, 3, 3), (3, 0, 0, 3, 3), (3, 3, 0, 0, 3),
)


def _card_row(card: int) -> tuple[int, ...]:
    if not 1 <= card <= CARDS_CNT:
        raise IndexError(f"card {card} out of range 1..{CARDS_CNT}")
    return CARDS[card]


def card_cost(card: int) -> tuple[int, ...]:
    """Gem cost of a card, one entry per gem colour."""
    return _card_row(card)[:GEM_CNT]


def card_bonus(card: int) -> int:
    """The gem colour a card grants as a permanent bonus."""
    return _card_row(card)[GEM_CNT]


def card_points(card: int) -> int:
    """Prestige points a card is worth."""
    return _card_row(card)[CHIP_CNT]


_start: float | None = None


def elapsed() -> float:
    """Seconds since the first call to this function."""
    global _start
    now = time.perf_counter()
    if _start is None:
        _start = now
    return now - _start