"""Player and board state, with moves that can be applied and undone."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from .chips import Action, ChipSet, FullChipSet, Move
from .constants import (
    GEM_CNT,
    GOLD,
    MAX_PLAYER_CNT,
    NOBLE_SCORE,
    SCORE_ENDGAME,
    card_points,
)
from .log import log_error


def _ids(values: Iterable[int]) -> str:
    return " ".join(str(value) for value in sorted(values))


@dataclass(eq=False)
class PlayerState:
    """One player's score, owned and reserved cards, nobles and chips."""

    score: int = 0
    cards: set[int] = field(default_factory=set)
    nobles: set[int] = field(default_factory=set)
    secret_res: int = 0
    res: set[int] = field(default_factory=set)
    chips: FullChipSet = field(default_factory=FullChipSet)

    def buy(self, card: int, bank: ChipSet) -> None:
        """Buy a card, paying into bank."""
        self.chips.buy(card, bank)
        self.cards.add(card)
        self.res.discard(card)
        self.score += card_points(card)

    def unbuy(self, card: int, before: ChipSet, bank: ChipSet) -> None:
        """Undo a purchase; before.gold tells whether the card was reserved."""
        self.score -= card_points(card)
        self.chips.unbuy(card, before, bank)
        self.cards.discard(card)
        if before.gold:
            self.res.add(card)
        else:
            self.res.discard(card)

    def can_buy(self, card: int) -> bool:
        return self.chips.can_buy(card)

    def should_receive(self, noble: int) -> bool:
        return self.chips.should_receive(noble)

    def describe(self) -> str:
        """A multi-line human-readable summary."""
        bonus = "".join(f"{self.chips.bonus(gem):2d} " for gem in range(GEM_CNT))
        chips = "".join(f"{count:2d} " for count in self.chips)
        return "\n".join(
            [
                "  <PLAYER>",
                f"  Score: {self.score}",
                f"  Bonus: {bonus}   | total: {self.chips.total_bonus}",
                f"  Chips: {chips}| total: {self.chips.total}",
                f"  Cards: {_ids(self.cards)}",
                f"  Res: {_ids(self.res)}",
                f"  Nobles: {_ids(self.nobles)}",
            ]
        )

    def copy(self) -> PlayerState:
        return PlayerState(
            score=self.score,
            cards=set(self.cards),
            nobles=set(self.nobles),
            secret_res=self.secret_res,
            res=set(self.res),
            chips=self.chips.copy(),
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PlayerState):
            return NotImplemented
        return (
            self.score == other.score
            and self.cards == other.cards
            and self.res == other.res
            and self.chips == other.chips
        )

    __hash__ = None  # type: ignore[assignment]


def _default_players() -> list[PlayerState]:
    return [PlayerState() for _ in range(MAX_PLAYER_CNT)]


@dataclass(eq=False)
class GameState:
    """The board: visible cards, nobles, the chip bank and every player."""

    player_count: int = 2
    current_player: int = 0
    players: list[PlayerState] = field(default_factory=_default_players)
    cards: set[int] = field(default_factory=set)
    nobles: set[int] = field(default_factory=set)
    chips: ChipSet = field(default_factory=ChipSet)

    @property
    def current(self) -> PlayerState:
        return self.players[self.current_player]

    def apply_move(self, move: Move) -> None:
        """Play move for the current player."""
        player = self.current
        if move.code == Action.NO_ACTION:
            log_error("NO_ACTION")
        elif move.code == Action.TAKE_3_DIFF_GEMS:
            self.chips -= move.data
            player.chips += move.data
        elif move.code == Action.TAKE_2_SAME_GEMS:
            self.chips.mod_chip(move.quant, -2)
            player.chips.mod_chip(move.quant, +2)
        elif move.code == Action.RES_CARD:
            player.res.add(move.quant)
            player.chips.mod_chip(GOLD, move.data[GOLD])
            self.chips.mod_chip(GOLD, -move.data[GOLD])
            self.cards.discard(move.quant)
        elif move.code == Action.BUY_CARD:
            player.buy(move.quant, self.chips)
            self.cards.discard(move.quant)
            for noble in sorted(self.nobles):
                if player.should_receive(noble):
                    self.nobles.discard(noble)
                    player.nobles.add(noble)
                    player.score += NOBLE_SCORE

    def unapply_move(self, move: Move) -> None:
        """Take back move for the current player."""
        player = self.current
        if move.code == Action.NO_ACTION:
            log_error("NO_ACTION")
        elif move.code == Action.TAKE_3_DIFF_GEMS:
            self.chips += move.data
            player.chips -= move.data
        elif move.code == Action.TAKE_2_SAME_GEMS:
            self.chips.mod_chip(move.quant, +2)
            player.chips.mod_chip(move.quant, -2)
        elif move.code == Action.RES_CARD:
            player.res.discard(move.quant)
            player.chips.mod_chip(GOLD, -move.data[GOLD])
            self.chips.mod_chip(GOLD, +move.data[GOLD])
            self.cards.add(move.quant)
        elif move.code == Action.BUY_CARD:
            player.unbuy(move.quant, move.data, self.chips)
            if move.data[GOLD]:
                self.cards.discard(move.quant)
            else:
                self.cards.add(move.quant)
            for noble in sorted(player.nobles):
                if not player.should_receive(noble):
                    self.nobles.add(noble)
                    player.nobles.discard(noble)
                    player.score -= NOBLE_SCORE

    def next_player(self) -> int:
        return (self.current_player + 1) % self.player_count

    def prev_player(self) -> int:
        return (self.player_count + self.current_player - 1) % self.player_count

    def is_end_game(self) -> bool:
        """True once the round is complete and someone has reached the winning score."""
        if self.current_player != self.player_count - 1:
            return False
        return any(
            player.score >= SCORE_ENDGAME
            for player in self.players[: self.player_count]
        )

    def is_in_game(self, card: int) -> bool:
        """Whether the card is on the table or held by a player."""
        if card in self.cards:
            return True
        return any(
            card in player.cards or card in player.res
            for player in self.players[: self.player_count]
        )

    def describe(self) -> str:
        """A multi-line human-readable summary of the board and players."""
        chips = "".join(f"{count} " for count in self.chips)
        lines = [
            "<<<GAMEBOARD>>>",
            f"Player: {self.current_player}/{self.player_count}",
            f"Chips: {chips}| total: {self.chips.total}",
            f"Cards: {_ids(self.cards)}",
            f"Nobles: {_ids(self.nobles)}",
        ]
        lines.extend(player.describe() for player in self.players[: self.player_count])
        return "\n".join(lines)

    def copy(self) -> GameState:
        return GameState(
            player_count=self.player_count,
            current_player=self.current_player,
            players=[player.copy() for player in self.players],
            cards=set(self.cards),
            nobles=set(self.nobles),
            chips=self.chips.copy(),
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GameState):
            return NotImplemented
        return (
            self.current_player == other.current_player
            and self.cards == other.cards
            and self.nobles == other.nobles
            and list(self.chips) == list(other.chips)
            and all(
                mine == theirs
                for mine, theirs in zip(
                    self.players[: self.player_count], other.players
                )
            )
        )

    __hash__ = None  # type: ignore[assignment]