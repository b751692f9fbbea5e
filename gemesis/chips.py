"""Chip sets, bonuses, purchase arithmetic and the move record."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Iterable, Iterator

from .constants import (
    CHIP_CNT,
    GEM_CNT,
    GOLD,
    NOBLE_CARDS,
    NOBLE_CNT,
    card_bonus,
    card_cost,
)


class Action(enum.IntEnum):
    """Kinds of turn a player can take."""

    NO_ACTION = 0
    TAKE_3_DIFF_GEMS = 1
    TAKE_2_SAME_GEMS = 2
    RES_CARD = 3
    BUY_CARD = 4


class ChipSet:
    """Counts of the five gem colours plus gold, with a running total."""

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, chips: Iterable[int] | None = None) -> None:
        self.gems = [0] * GEM_CNT
        self.gold = 0
        self.total = 0
        if chips is not None:
            values = list(chips)
            if len(values) != CHIP_CNT:
                raise ValueError(f"expected {CHIP_CNT} chip counts, got {len(values)}")
            self.gems = values[:GEM_CNT]
            self.gold = values[GOLD]
            self.total = sum(values)

    def __iadd__(self, other: ChipSet) -> ChipSet:
        for gem, count in enumerate(other.gems):
            self.gems[gem] += count
        self.gold += other.gold
        self.total += sum(other.gems) + other.gold
        return self

    def __isub__(self, other: ChipSet) -> ChipSet:
        for gem, count in enumerate(other.gems):
            self.gems[gem] -= count
        self.gold -= other.gold
        self.total -= sum(other.gems) + other.gold
        return self

    def __add__(self, other: ChipSet) -> ChipSet:
        result = self.copy()
        result += other
        return result

    def __sub__(self, other: ChipSet) -> ChipSet:
        result = self.copy()
        result -= other
        return result

    def __getitem__(self, idx: int) -> int:
        if idx == GOLD:
            return self.gold
        if 0 <= idx < GEM_CNT:
            return self.gems[idx]
        raise IndexError(f"chip index {idx} out of range")

    def __iter__(self) -> Iterator[int]:
        yield from self.gems
        yield self.gold

    def __len__(self) -> int:
        return CHIP_CNT

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ChipSet):
            return NotImplemented
        return (
            self.gems == other.gems
            and self.gold == other.gold
            and self.total == other.total
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def mod_chip(self, idx: int, val: int = 1) -> None:
        """Change the count of one chip kind (GOLD for gold) by val."""
        if idx == GOLD:
            self.gold += val
        elif 0 <= idx < GEM_CNT:
            self.gems[idx] += val
        else:
            raise IndexError(f"chip index {idx} out of range")
        self.total += val

    def copy(self) -> ChipSet:
        result = ChipSet()
        result.gems = list(self.gems)
        result.gold = self.gold
        result.total = self.total
        return result


def _noble_requirement(noble: int) -> tuple[int, ...]:
    if not 1 <= noble <= NOBLE_CNT:
        raise IndexError(f"noble {noble} out of range 1..{NOBLE_CNT}")
    return NOBLE_CARDS[noble]


class FullChipSet(ChipSet):
    """A player's chips together with the bonuses of the cards they own."""

    def __init__(self, chips: Iterable[int] | None = None) -> None:
        super().__init__(chips)
        self._bonus = [0] * GEM_CNT
        self.total_bonus = 0

    def add_bonus(self, gem: int) -> None:
        self._bonus[gem] += 1
        self.total_bonus += 1

    def rem_bonus(self, gem: int) -> None:
        self._bonus[gem] -= 1
        self.total_bonus -= 1

    def bonus(self, gem: int) -> int:
        return self._bonus[gem]

    def needs_gold(self, card: int) -> int:
        """How many more gold chips would be needed to buy the card."""
        missing = 0
        gold = self.gold
        for cost, bonus, held in zip(card_cost(card), self._bonus, self.gems):
            need = max(0, cost - bonus - held)
            if need < gold:
                gold -= need
            else:
                missing += need - gold
                gold = 0
        return missing

    def should_receive(self, noble: int) -> bool:
        """Whether the bonuses meet the noble's requirement."""
        return all(
            have >= need for have, need in zip(self._bonus, _noble_requirement(noble))
        )

    def can_buy(self, card: int) -> bool:
        return self.needs_gold(card) == 0

    def buy(self, card: int, bank: ChipSet) -> None:
        """Pay for the card, moving the spent chips into bank, and gain its bonus."""
        for gem, cost in enumerate(card_cost(card)):
            to_pay = max(cost - self._bonus[gem], 0)
            held = self.gems[gem]
            if to_pay > held:
                self.gold -= to_pay - held
                bank.mod_chip(GOLD, to_pay - held)
                bank.mod_chip(gem, held)
                self.gems[gem] = 0
            else:
                self.gems[gem] -= to_pay
                bank.mod_chip(gem, to_pay)
        self.total = sum(self.gems) + self.gold
        self.add_bonus(card_bonus(card))

    def unbuy(self, card: int, before: ChipSet, bank: ChipSet) -> None:
        """Undo buy, restoring the gems held before and taking chips back from bank."""
        self.rem_bonus(card_bonus(card))
        for gem, cost in enumerate(card_cost(card)):
            to_pay = max(cost - self._bonus[gem], 0)
            gold_used = max(0, to_pay - before[gem])
            self.gold += gold_used
            bank.mod_chip(GOLD, -gold_used)
            bank.mod_chip(gem, -(before[gem] - self.gems[gem]))
            self.gems[gem] = before[gem]
        self.total = sum(self.gems) + self.gold

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FullChipSet):
            return NotImplemented
        return (
            super().__eq__(other)
            and self._bonus == other._bonus
            and self.total_bonus == other.total_bonus
        )

    def copy(self) -> FullChipSet:
        result = FullChipSet()
        result.gems = list(self.gems)
        result.gold = self.gold
        result.total = self.total
        result._bonus = list(self._bonus)
        result.total_bonus = self.total_bonus
        return result


@dataclass
class Move:
    """A turn: its kind, a quantity (colour, chip count or card) and a chip set."""

    code: Action
    quant: int = 0
    data: ChipSet = field(default_factory=ChipSet)