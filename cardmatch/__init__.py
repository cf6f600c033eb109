"""Game logic for a card matching puzzle: cards, piles, undo, JSON levels and sprite paths."""

__version__ = "0.1.0"