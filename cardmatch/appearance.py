"""How a card is drawn: card sizes, glyph labels, colours and image paths."""

from __future__ import annotations

from typing import Dict

from cardmatch.cards import CardFace, CardSuit
from cardmatch.resources import card_path, number_path, suit_path

CARD_WIDTH = 182.0
CARD_HEIGHT = 282.0
SUIT_WIDTH = 43.0
SUIT_HEIGHT = 43.0
SMALL_NUMBER_WIDTH = 26.0
SMALL_NUMBER_HEIGHT = 46.0
BIG_NUMBER_WIDTH = 80.0
BIG_NUMBER_HEIGHT = 139.0

_SUIT_NAMES: Dict[CardSuit, str] = {
    CardSuit.CLUBS: "club",
    CardSuit.DIAMONDS: "diamond",
    CardSuit.HEARTS: "heart",
    CardSuit.SPADES: "spade",
}

_NUMBER_LABELS: Dict[CardFace, str] = {
    CardFace.ACE: "A",
    CardFace.TWO: "2",
    CardFace.THREE: "3",
    CardFace.FOUR: "4",
    CardFace.FIVE: "5",
    CardFace.SIX: "6",
    CardFace.SEVEN: "7",
    CardFace.EIGHT: "8",
    CardFace.NINE: "9",
    CardFace.TEN: "10",
    CardFace.JACK: "J",
    CardFace.QUEEN: "Q",
    CardFace.KING: "K",
}

_BLACK_SUITS = frozenset({CardSuit.CLUBS, CardSuit.SPADES})


def suit_name(suit: int) -> str:
    """Return the image name of a suit; unknown suits are drawn as clubs."""
    return _SUIT_NAMES.get(suit, "club")


def number_label(face: int) -> str:
    """Return the glyph shown for a face value; unknown faces show as an ace."""
    return _NUMBER_LABELS.get(face, "A")


def number_color(suit: int) -> str:
    """Return "black" for clubs and spades and "red" for every other suit."""
    return "black" if suit in _BLACK_SUITS else "red"


def background_path() -> str:
    """Path of the card background image."""
    return card_path("card_general.png")


def suit_sprite_path(suit: int) -> str:
    """Path of the suit icon drawn in a card's corner."""
    return suit_path(f"{suit_name(suit)}.png")


def number_sprite_path(face: int, suit: int, big: bool) -> str:
    """Path of the big (centre) or small (corner) number glyph of a card."""
    prefix = "big_" if big else "small_"
    return number_path(f"{prefix}{number_color(suit)}_{number_label(face)}.png")