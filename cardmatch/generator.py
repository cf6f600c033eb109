"""Building a ready-to-play game model from a level's configuration."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Union

from cardmatch.cards import Card, CardFace, CardSuit
from cardmatch.game_model import GameModel
from cardmatch.level_config import CardConfig, LevelConfig, LevelConfigError, load_level_config

logger = logging.getLogger(__name__)


class GameModelGenerationError(Exception):
    """A game model could not be built for a level."""


def _make_card(card_id: int, config: CardConfig) -> Card:
    try:
        face = CardFace(config.face)
        suit = CardSuit(config.suit)
    except ValueError as exc:
        raise GameModelGenerationError(f"card {card_id}: {exc}") from exc
    return Card(card_id, face, suit, config.position)


def build_game_model(config: LevelConfig) -> GameModel:
    """Create a model holding the level's cards, with one stock card drawn to the tray.

    Ids are given out from 0, playfield cards first and then stock cards.
    Raises GameModelGenerationError when the stock is empty or a card is invalid.
    """
    model = GameModel()
    next_id = 0
    for card_config in config.playfield_cards:
        card = _make_card(next_id, card_config)
        model.add_card_to_playfield(card)
        logger.debug(
            "adding playfield card id=%d pos=(%.1f,%.1f)",
            card.id,
            card.position.x,
            card.position.y,
        )
        next_id += 1
    for card_config in config.stock_cards:
        model.add_card_to_stock(_make_card(next_id, CardConfig(card_config.face, card_config.suit)))
        next_id += 1
    if not model.stock_to_tray():
        raise GameModelGenerationError("failed to draw the initial card from the stock")
    return model


def generate_game_model(level_id: int, base_dir: Union[str, Path] = ".") -> GameModel:
    """Load a level's configuration from base_dir and build its game model."""
    try:
        config = load_level_config(level_id, base_dir)
    except LevelConfigError as exc:
        raise GameModelGenerationError(
            f"failed to load the configuration of level {level_id}"
        ) from exc
    return build_game_model(config)