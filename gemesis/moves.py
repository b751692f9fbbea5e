"""Generation of the legal moves for the player to act."""

from __future__ import annotations

from itertools import combinations
from typing import TYPE_CHECKING

from .chips import Action, ChipSet, Move
from .constants import GEM_CNT, GOLD, MAX_HOLD_CHIPS, MAX_HOLD_RES

if TYPE_CHECKING:
    from .game import GameState


def _buy_move(game: GameState, card: int, reserved: bool) -> Move:
    # The chips held before the purchase are kept so the move can be undone;
    # the gold slot records whether the card came from the reserve.
    before = ChipSet([*game.current.chips.gems, int(reserved)])
    return Move(Action.BUY_CARD, card, before)


def generate_moves(game: GameState) -> list[Move]:
    """All moves available to the current player, in search order."""
    player = game.current
    moves: list[Move] = []

    moves.extend(
        _buy_move(game, card, False)
        for card in sorted(game.cards)
        if player.can_buy(card)
    )
    moves.extend(
        _buy_move(game, card, True)
        for card in sorted(player.res)
        if player.can_buy(card)
    )

    available = [gem for gem in range(GEM_CNT) if game.chips[gem] > 0]
    take = min(3, MAX_HOLD_CHIPS - player.chips.total, len(available))
    if take > 0:
        for gems in combinations(available, take):
            data = ChipSet()
            for gem in gems:
                data.mod_chip(gem, +1)
            moves.append(Move(Action.TAKE_3_DIFF_GEMS, take, data))

    if player.chips.total + 2 <= MAX_HOLD_CHIPS:
        moves.extend(
            Move(Action.TAKE_2_SAME_GEMS, gem, ChipSet())
            for gem in range(GEM_CNT)
            if game.chips[gem] >= 4
        )

    can_reserve = len(player.res) + player.secret_res < MAX_HOLD_RES and (
        player.chips.total < MAX_HOLD_CHIPS or not game.chips[GOLD]
    )
    if can_reserve:
        gold = int(game.chips[GOLD] > 0)
        moves.extend(
            Move(Action.RES_CARD, card, ChipSet([0, 0, 0, 0, 0, gold]))
            for card in sorted(game.cards)
        )

    if not moves:
        moves.append(Move(Action.TAKE_3_DIFF_GEMS, 0, ChipSet()))
    return moves


def describe_move(move: Move) -> str:
    """A one-line human-readable description of a move."""
    chips = " ".join(str(count) for count in move.data)
    if move.code == Action.NO_ACTION:
        return "NONE (error)"
    if move.code == Action.TAKE_3_DIFF_GEMS:
        return f"Take Chips: {{{chips}}}"
    if move.code == Action.TAKE_2_SAME_GEMS:
        return f"Take 2 chips of {move.quant}"
    if move.code == Action.RES_CARD:
        return f"Reserve: {move.quant}, getting {{{chips}}}"
    gems = " ".join(str(count) for count in move.data.gems)
    return f"Buy card: {move.quant} (gems before: {gems} [{move.data.gold}]])"