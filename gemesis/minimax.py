"""Depth-limited minimax search with a static evaluation."""

from __future__ import annotations

from .chips import Action, Move
from .constants import (
    GOLD,
    INF,
    MAX_MINIMAX_DEPTH,
    MAX_PLAYER_CNT,
    MIN_MINIMAX_DEPTH,
    MINIMAX_KILL_AFTER,
    MINIMAX_NUM_CARDS_MUL,
    MINIMAX_RES_CNT_MUL,
    MINIMAX_TOTAL_CHIPS_MUL,
    MINIMAX_TOTAL_GOLD_MUL,
    MINIMAX_TOTAL_SCORE_MUL,
    SCORE_ENDGAME,
    elapsed,
)
from .game import GameState
from .log import log_info
from .moves import generate_moves
from .protocol import log_arbiter

END_GAME_MUL = 1_000_000
_TIME_CHECK_EVERY = 16000


class Scores:
    """Per-player evaluation values."""

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, player_count: int, fill: int = 0) -> None:
        self.player_count = player_count
        self.values = [fill] * MAX_PLAYER_CNT

    def get(self, player: int) -> int:
        """The player's value minus the best other player's (floored at zero)."""
        others = [
            self.values[p] for p in range(self.player_count) if p != player
        ]
        return self.values[player] - max([0, *others])

    def __getitem__(self, player: int) -> int:
        return self.values[player]

    def __setitem__(self, player: int, value: int) -> None:
        self.values[player] = value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Scores):
            return NotImplemented
        return (
            self.player_count == other.player_count
            and self.values[: self.player_count] == other.values[: other.player_count]
        )

    def __repr__(self) -> str:
        return f"Scores({self.values[: self.player_count]!r})"


def evaluate(game: GameState, player: int) -> int:
    """Static value of the position for one player."""
    if game.is_end_game():
        return game.players[player].score * END_GAME_MUL
    state = game.players[player]
    return (
        state.score * MINIMAX_TOTAL_SCORE_MUL
        + state.chips.total * MINIMAX_TOTAL_CHIPS_MUL
        + state.chips[GOLD] * MINIMAX_TOTAL_GOLD_MUL
        + len(state.res) * MINIMAX_RES_CNT_MUL
        + len(state.cards) * MINIMAX_NUM_CARDS_MUL
    )


def static_eval(game: GameState) -> Scores:
    """Static values of the position for every player."""
    scores = Scores(game.player_count)
    for player in range(game.player_count):
        scores[player] = evaluate(game, player)
    return scores


def static_eval_duo(game: GameState) -> int:
    """Value for player 0 minus value for player 1."""
    return evaluate(game, 0) - evaluate(game, 1)


class Minimax:
    """Iterative-deepening minimax with a wall-clock budget."""

    def __init__(
        self,
        time_limit: float = MINIMAX_KILL_AFTER,
        min_depth: int = MIN_MINIMAX_DEPTH,
        max_depth: int = MAX_MINIMAX_DEPTH,
    ) -> None:
        if min_depth < 1 or max_depth < min_depth:
            raise ValueError(f"invalid depth range {min_depth}..{max_depth}")
        self.time_limit = time_limit
        self.min_depth = min_depth
        self.max_depth = max_depth
        self.moves: dict[int, list[Move]] = {}
        self.best_move: dict[int, int] = {}
        self.total_moves = 0
        self.timed_out = False
        self._start = elapsed()

    def _out_of_time(self) -> bool:
        if (
            self.total_moves % _TIME_CHECK_EVERY == 0
            and elapsed() - self._start >= self.time_limit
        ):
            self.timed_out = True
            return True
        return False

    def minimax(self, depth: int, max_depth: int, game: GameState) -> Scores:
        """Search for any number of players; each maximises its own lead."""
        if self._out_of_time():
            return Scores(0)
        if depth == max_depth:
            self.total_moves += 1
            return static_eval(game)
        if game.current.score >= SCORE_ENDGAME:
            return static_eval(game)

        moves = self.moves[depth] = generate_moves(game)
        me = game.current_player
        best = Scores(game.player_count, INF)
        best[me] = -INF
        for idx, move in enumerate(moves):
            game.apply_move(move)
            game.current_player = game.next_player()
            score = self.minimax(depth + 1, max_depth, game)
            game.current_player = game.prev_player()
            game.unapply_move(move)

            if score.get(me) > best.get(me):
                best = score
                self.best_move[depth] = idx
        return best

    def minimax_duo(
        self,
        depth: int,
        max_depth: int,
        game: GameState,
        alpha: int,
        beta: int,
        maximize: bool,
    ) -> int:
        """Two-player alpha-beta search; player 0 maximises."""
        if self._out_of_time():
            return 0
        if depth == max_depth:
            self.total_moves += 1
            return static_eval_duo(game)
        if game.is_end_game():
            return static_eval_duo(game)

        moves = self.moves[depth] = generate_moves(game)
        best = -INF if maximize else INF
        for idx, move in enumerate(moves):
            game.apply_move(move)
            game.current_player = game.next_player()
            score = self.minimax_duo(depth + 1, max_depth, game, alpha, beta, not maximize)
            game.current_player = game.prev_player()
            game.unapply_move(move)

            if maximize:
                if score > best:
                    best = score
                    self.best_move[depth] = idx
                if best >= beta:
                    break
                alpha = max(alpha, best)
            else:
                if score < best:
                    best = score
                    self.best_move[depth] = idx
                if best <= alpha:
                    break
                beta = min(best, beta)
        return best

    def search(self, game: GameState) -> Move:
        """Deepen until the budget runs out and return the last complete best move."""
        best = Move(Action.NO_ACTION)
        self._start = elapsed()
        for depth in range(self.min_depth, self.max_depth + 1):
            sim = game.copy()
            self.total_moves = 0
            self.timed_out = False
            self.moves.pop(0, None)
            if sim.player_count != 2:
                score = self.minimax(0, depth, sim).get(game.current_player)
            else:
                score = self.minimax_duo(
                    0, depth, sim, -INF, INF, not game.current_player
                )
            if self.timed_out:
                log_info(f"Timeout at depth: {depth}")
                break
            log_arbiter(
                f"Depth: {depth} Evaluated: {self.total_moves} moves. "
                f"Evaluation score: {score}"
            )
            root_moves = self.moves.get(0)
            if root_moves:
                best = root_moves[self.best_move.get(0, 0)]
        return best