"""Card values, suits and the card model used throughout the game."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import ClassVar, Optional


@dataclass(frozen=True)
class Vec2:
    """An immutable 2D point or offset in scene coordinates."""

    x: float = 0.0
    y: float = 0.0

    ZERO: ClassVar["Vec2"]

    def __add__(self, other: "Vec2") -> "Vec2":
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vec2") -> "Vec2":
        return Vec2(self.x - other.x, self.y - other.y)


Vec2.ZERO = Vec2(0.0, 0.0)


class CardSuit(IntEnum):
    """Suit of a card."""

    NONE = -1
    CLUBS = 0
    DIAMONDS = 1
    HEARTS = 2
    SPADES = 3


class CardFace(IntEnum):
    """Face value of a card, from ace to king."""

    NONE = -1
    ACE = 0
    TWO = 1
    THREE = 2
    FOUR = 3
    FIVE = 4
    SIX = 5
    SEVEN = 6
    EIGHT = 7
    NINE = 8
    TEN = 9
    JACK = 10
    QUEEN = 11
    KING = 12


@dataclass(eq=False)
class Card:
    """A single card: unique id, face, suit and position in the scene."""

    id: int
    face: CardFace
    suit: CardSuit
    position: Vec2 = field(default=Vec2.ZERO)

    def can_match(self, other: Optional["Card"]) -> bool:
        """Return True when the other card's face differs from this one by exactly one."""
        if other is None:
            return False
        return abs(int(self.face) - int(other.face)) == 1