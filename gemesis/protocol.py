"""Reading the referee's game description and writing the chosen move."""

from __future__ import annotations

import sys
from typing import Iterator, TextIO

from .chips import Action, Move
from .constants import (
    CHIP_CNT,
    GEM_CNT,
    MAX_PLAYER_CNT,
    NOBLE_SCORE,
    PACK_CNT,
    VIS_PER_PACK,
    card_bonus,
    card_points,
)
from .game import GameState, PlayerState


def _take(tokens: Iterator[int]) -> int:
    try:
        return next(tokens)
    except StopIteration:
        raise ValueError("unexpected end of game description") from None


def _take_many(tokens: Iterator[int]) -> list[int]:
    return [_take(tokens) for _ in range(_take(tokens))]


def read_player_state(tokens: Iterator[int], player: PlayerState) -> None:
    """Fill player from the integer tokens describing one player."""
    for chip in range(CHIP_CNT):
        player.chips.mod_chip(chip, _take(tokens))

    for card in _take_many(tokens):
        player.cards.add(card)
        player.chips.add_bonus(card_bonus(card))
        player.score += card_points(card)

    for card in _take_many(tokens):
        if card > 0:
            player.res.add(card)
        else:
            player.secret_res += 1

    for noble in _take_many(tokens):
        if noble > 0:
            player.nobles.add(noble)
            player.score += NOBLE_SCORE


def read_game_state(stream: TextIO) -> GameState:
    """Parse a whole game description from a text stream."""
    tokens = iter([int(token) for token in stream.read().split()])
    game = GameState()

    game.player_count = _take(tokens)
    if not 1 <= game.player_count <= MAX_PLAYER_CNT:
        raise ValueError(f"player count {game.player_count} out of range")
    game.current_player = _take(tokens) - 1
    _take(tokens)  # current round, unused

    for chip in range(CHIP_CNT):
        game.chips.mod_chip(chip, _take(tokens))

    for _ in range(PACK_CNT):
        _take(tokens)  # pack size, unused
        for _ in range(VIS_PER_PACK):
            card = _take(tokens)
            if card > 0:
                game.cards.add(card)

    game.nobles.update(_take_many(tokens))

    for player in game.players[: game.player_count]:
        read_player_state(tokens, player)

    # A player who qualified for several nobles at once is credited with all
    # of them, so that undoing a purchase restores a consistent state.
    for player in game.players[: game.player_count]:
        for noble in sorted(game.nobles):
            if player.should_receive(noble):
                player.nobles.add(noble)
                player.score += NOBLE_SCORE
                game.nobles.discard(noble)

    return game


def format_final_move(move: Move) -> str:
    """The line sent to the referee for the chosen move."""
    if move.code == Action.NO_ACTION:
        return "1 0\n"
    if move.code == Action.TAKE_3_DIFF_GEMS:
        gems = "".join(f"{gem} " for gem in range(GEM_CNT) if move.data[gem])
        return f"1 {move.quant} {gems}\n"
    if move.code == Action.TAKE_2_SAME_GEMS:
        return f"2 {move.quant}\n"
    if move.code == Action.RES_CARD:
        return f"3 {move.quant}\n"
    return f"4 {move.quant}\n"


def log_arbiter(message: str) -> None:
    """Send a comment line to the referee on standard error."""
    print(f"kibitz {message}", file=sys.stderr)