"""Game state: playfield, stock and tray piles, with matching and undo support."""

from __future__ import annotations

import logging
from typing import Dict, List, Optional, Tuple

from cardmatch.cards import Card, Vec2

logger = logging.getLogger(__name__)


class GameModel:
    """Holds every card and which pile it lies in."""

    def __init__(self) -> None:
        self._playfield: List[Card] = []
        self._stock: List[Card] = []
        self._tray: List[Card] = []
        self._position_history: Dict[int, Vec2] = {}
        self._cards: Dict[int, Card] = {}

    def reset(self) -> None:
        """Empty all piles and forget all cards and recorded positions."""
        self._playfield.clear()
        self._stock.clear()
        self._tray.clear()
        self._position_history.clear()
        self._cards.clear()

    def _register(self, pile: List[Card], card: Optional[Card]) -> None:
        if card is None:
            return
        pile.append(card)
        self._cards[card.id] = card

    def add_card_to_playfield(self, card: Optional[Card]) -> None:
        """Put a card on the playfield; None is ignored."""
        self._register(self._playfield, card)

    def add_card_to_stock(self, card: Optional[Card]) -> None:
        """Put a card on the stock pile; None is ignored."""
        self._register(self._stock, card)

    def add_card_to_tray(self, card: Optional[Card]) -> None:
        """Put a card on the tray; None is ignored."""
        self._register(self._tray, card)

    @property
    def playfield_cards(self) -> Tuple[Card, ...]:
        return tuple(self._playfield)

    @property
    def stock_cards(self) -> Tuple[Card, ...]:
        return tuple(self._stock)

    @property
    def tray_cards(self) -> Tuple[Card, ...]:
        return tuple(self._tray)

    @property
    def position_history(self) -> Dict[int, Vec2]:
        """Positions recorded before matches, by card id."""
        return dict(self._position_history)

    def top_tray_card(self) -> Optional[Card]:
        """Return the card on top of the tray, or None if the tray is empty."""
        return self._tray[-1] if self._tray else None

    def stock_to_tray(self) -> bool:
        """Move the top stock card onto the tray; False if the stock is empty."""
        if not self._stock:
            return False
        self._tray.append(self._stock.pop())
        return True

    def playfield_to_tray(self, card_id: int) -> bool:
        """Move the playfield card with this id onto the tray; False if it is not there."""
        for index, card in enumerate(self._playfield):
            if card.id == card_id:
                del self._playfield[index]
                logger.debug("playfield now has %d cards", len(self._playfield))
                self._tray.append(card)
                return True
        logger.info("playfield_to_tray: card %d not found", card_id)
        return False

    def can_move_to_tray(self, card_id: int) -> bool:
        """Return True when the card is known and matches the top tray card."""
        card = self._cards.get(card_id)
        top = self.top_tray_card()
        if card is None or top is None:
            return False
        return card.can_match(top)

    def match_card_to_tray(self, card_id: int) -> bool:
        """Move a matching playfield card onto the tray, remembering its position."""
        if not self.can_move_to_tray(card_id):
            return False
        self.record_card_position(card_id, self.card_position(card_id))
        return self.playfield_to_tray(card_id)

    def record_card_position(self, card_id: int, position: Vec2) -> None:
        """Remember a card's position for a later undo."""
        self._position_history[card_id] = position

    def restore_card_position(self, card_id: int, position: Vec2) -> None:
        """Set a known card's position; unknown ids are ignored."""
        card = self._cards.get(card_id)
        if card is not None:
            card.position = position

    def undo_card_match(self, card_id: int, target_position: Vec2) -> None:
        """Take the top tray card off and put the given card back on the playfield.

        Raises KeyError for an unknown card and IndexError when the tray is empty.
        """
        logger.debug(
            "undo match of card %d to (%.2f, %.2f)",
            card_id,
            target_position.x,
            target_position.y,
        )
        card = self._cards[card_id]
        card.position = target_position
        self._tray.pop()
        self._playfield.append(card)

    def undo_card_replace(self, card_id: int) -> None:
        """Take the top tray card off and put the given card back on the stock.

        Raises KeyError for an unknown card and IndexError when the tray is empty.
        """
        card = self._cards[card_id]
        self._tray.pop()
        self._stock.append(card)

    def is_card_in_playfield(self, card_id: int) -> bool:
        """Return True if a card with this id lies on the playfield."""
        return any(card.id == card_id for card in self._playfield)

    def card_position(self, card_id: int) -> Vec2:
        """Return a card's position, or the origin for an unknown id."""
        card = self._cards.get(card_id)
        return card.position if card is not None else Vec2.ZERO

    def card_by_id(self, card_id: int) -> Optional[Card]:
        """Return the card with this id, or None."""
        return self._cards.get(card_id)