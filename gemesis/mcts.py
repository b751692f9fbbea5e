"""Monte Carlo tree search over game states."""

from __future__ import annotations

import math
import random
from itertools import pairwise

from .chips import Action, Move
from .constants import (
    CARDS_CNT,
    INF,
    MAX_MOVES,
    MAX_PLAYER_CNT,
    MCTS_EXPLOR_MUL,
    MCTS_FAILSAVE_STEPS,
    MCTS_KILL_AFTER,
    MCTS_NODE_ROLLOUTS,
    MCTS_SIM_MAX_MOVES,
    PACK_CNT,
    SEED,
    VIS_PER_PACK,
    elapsed,
)
from .game import GameState
from .log import log_assert
from .moves import generate_moves
from .protocol import log_arbiter


def _empty_score() -> list[float]:
    return [0.0] * MAX_PLAYER_CNT


def is_none(move: Move) -> bool:
    """Whether the move does nothing."""
    return move.code == Action.NO_ACTION or (
        move.code == Action.TAKE_3_DIFF_GEMS and not move.quant
    )


def evaluate(game: GameState) -> list[float]:
    """Share of a win credited to each player for the position."""
    score = _empty_score()
    count = game.player_count
    if not game.is_end_game():
        for player in range(count):
            if player != game.current_player:
                score[player] = 1 / (count - 1)
        return score

    # Higher score wins; on equal score the player with fewer cards wins.
    details = sorted(
        (
            (state.score, -state.chips.total_bonus, player)
            for player, state in enumerate(game.players[:count])
        ),
        key=lambda detail: detail[:2],
    )
    winners = 1 + sum(1 for low, high in pairwise(details) if low[:2] == high[:2])
    for _, _, player in details[-winners:]:
        score[player] += 1 / winners
    return score


def random_move(game: GameState, rng: random.Random) -> Move:
    """A uniformly chosen legal move for the current player."""
    moves = generate_moves(game)
    return moves[rng.randrange(len(moves))]


class Node:
    """A search tree node: visit count, accumulated score and children."""

    def __init__(self, parent: Node | None = None) -> None:
        self.parent = parent
        self.vis = 0
        self.score = _empty_score()
        self.moves: list[Move] = []
        self.children: list[Node] = []

    def win_rate(self, player: int) -> float:
        """Average win share of player over the visits; NaN when unvisited."""
        if self.vis == 0:
            return math.nan
        return self.score[player] / self.vis

    def expand(self, game: GameState) -> None:
        """Create one child for every legal move in game."""
        self.moves = generate_moves(game)
        log_assert(len(self.moves) < MAX_MOVES, "too many moves")
        self.children = [Node(self) for _ in self.moves]

    def roll_out(self, game: GameState, rng: random.Random) -> list[float]:
        """Play random games from game and sum their evaluations."""
        total = _empty_score()
        visible = VIS_PER_PACK * PACK_CNT
        for _ in range(MCTS_NODE_ROLLOUTS):
            sim = game.copy()
            played = 0
            while not sim.is_end_game() and played < MCTS_SIM_MAX_MOVES[sim.player_count]:
                sim.apply_move(random_move(sim, rng))
                while len(sim.cards) < visible:
                    sim.cards.add(rng.randint(1, CARDS_CNT))
                sim.current_player = sim.next_player()
                played += 1
            for player, value in enumerate(evaluate(sim)):
                total[player] += value
        return total

    def choose_child(self, player: int) -> int:
        """Index of the child with the best UCT value for player."""
        lg = math.log(self.vis)
        best_uct = -INF
        best_child = 0
        for idx, child in enumerate(self.children):
            if child.vis == 0:
                uct = INF
            else:
                exploit = child.win_rate(player)
                explore = math.sqrt(lg / child.vis)
                uct = exploit + explore * MCTS_EXPLOR_MUL
            if uct > best_uct:
                best_uct = uct
                best_child = idx
        return best_child


class MCTS:
    """Select, simulate and back-propagate until the budget runs out."""

    def __init__(
        self,
        rng: random.Random | None = None,
        time_limit: float = MCTS_KILL_AFTER,
        max_steps: int = MCTS_FAILSAVE_STEPS,
    ) -> None:
        self.rng = rng if rng is not None else random.Random(SEED)
        self.time_limit = time_limit
        self.max_steps = max_steps
        self.steps = 0
        self.root = Node()

    def select(self, game: GameState) -> Node:
        """Walk down to an unvisited node, playing its moves on game."""
        node = self.root
        while node.vis != 0:
            if not node.moves:
                node.expand(game)
                continue
            idx = node.choose_child(game.current_player)
            game.apply_move(node.moves[idx])
            game.current_player = game.next_player()
            node = node.children[idx]
        return node

    def backprop(self, node: Node | None, score: list[float]) -> None:
        """Add score and the rollout count to node and all its ancestors."""
        while node is not None:
            for player, value in enumerate(score):
                node.score[player] += value
            node.vis += MCTS_NODE_ROLLOUTS
            node = node.parent

    def step(self, game: GameState) -> None:
        """One round of selection, simulation and back-propagation."""
        sim = game.copy()
        leaf = self.select(sim)
        score = leaf.roll_out(sim, self.rng)
        self.backprop(leaf, score)

    def best_move(self, game: GameState) -> Move:
        """Search from game and return the root move with the best win rate."""
        start = elapsed()
        while self.steps < self.max_steps:
            if elapsed() - start > self.time_limit:
                break
            self.step(game)
            self.steps += 1

        best = Move(Action.NO_ACTION)
        best_prob = -1.0
        for move, child in zip(self.root.moves, self.root.children):
            rate = child.win_rate(game.current_player)
            if best_prob < rate:
                best_prob = rate
                best = move
        log_arbiter(f"Best win probability: {best_prob:f}")
        return best