"""Level layouts: the cards on the playfield and in the stock, read from JSON."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, List, Union

from cardmatch.appearance import CARD_HEIGHT, CARD_WIDTH
from cardmatch.cards import Vec2
from cardmatch.resources import level_config_path


class LevelConfigError(Exception):
    """A level configuration could not be read or understood."""


@dataclass(frozen=True)
class CardConfig:
    """Face, suit and position of one card in a level layout."""

    face: int
    suit: int
    position: Vec2 = field(default=Vec2.ZERO)


@dataclass
class LevelConfig:
    """The playfield and stock cards of one level."""

    playfield_cards: List[CardConfig] = field(default_factory=list)
    stock_cards: List[CardConfig] = field(default_factory=list)

    def add_playfield_card(self, card: CardConfig) -> None:
        """Append a card to the playfield layout."""
        self.playfield_cards.append(card)

    def add_stock_card(self, card: CardConfig) -> None:
        """Append a card to the stock layout."""
        self.stock_cards.append(card)

    def load_from_file(self, path: Union[str, Path]) -> None:
        """Append the cards of a JSON file, keeping positions exactly as written.

        Raises LevelConfigError when the file is missing, empty or malformed.
        """
        document = _parse_document(_read_text(Path(path)), str(path))
        self.playfield_cards.extend(_playfield_entries(document, Vec2.ZERO))
        self.stock_cards.extend(_stock_entries(document))


def _read_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise LevelConfigError(f"cannot read level config {path}: {exc}") from exc


def _parse_document(text: str, source: str) -> dict:
    if not text:
        raise LevelConfigError(f"level config is empty: {source}")
    try:
        document = json.loads(text)
    except json.JSONDecodeError as exc:
        raise LevelConfigError(f"level config parse error in {source}: {exc}") from exc
    if not isinstance(document, dict):
        raise LevelConfigError(f"level config is not a JSON object: {source}")
    return document


def _member(obj: Any, key: str) -> Any:
    if not isinstance(obj, dict) or key not in obj:
        raise LevelConfigError(f"level config entry lacks {key!r}")
    return obj[key]


def _int_member(obj: Any, key: str) -> int:
    value = _member(obj, key)
    if isinstance(value, bool) or not isinstance(value, int):
        raise LevelConfigError(f"{key!r} must be an integer, got {value!r}")
    return value


def _float_member(obj: Any, key: str) -> float:
    value = _member(obj, key)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise LevelConfigError(f"{key!r} must be a number, got {value!r}")
    return float(value)


def _array(document: dict, key: str) -> list:
    value = document.get(key)
    return value if isinstance(value, list) else []


def _playfield_entries(document: dict, offset: Vec2) -> List[CardConfig]:
    entries = []
    for entry in _array(document, "Playfield"):
        position = _member(entry, "Position")
        entries.append(
            CardConfig(
                face=_int_member(entry, "CardFace"),
                suit=_int_member(entry, "CardSuit"),
                position=Vec2(
                    _float_member(position, "x") - offset.x,
                    _float_member(position, "y") - offset.y,
                ),
            )
        )
    return entries


def _stock_entries(document: dict) -> List[CardConfig]:
    return [
        CardConfig(
            face=_int_member(entry, "CardFace"),
            suit=_int_member(entry, "CardSuit"),
        )
        for entry in _array(document, "Stack")
    ]


def parse_level_config(text: str) -> LevelConfig:
    """Parse a level's JSON, shifting playfield positions back by one card size.

    Missing or non-array "Playfield" and "Stack" members give empty piles.
    Raises LevelConfigError for empty or malformed text.
    """
    document = _parse_document(text, "<text>")
    return LevelConfig(
        playfield_cards=_playfield_entries(document, Vec2(CARD_WIDTH, CARD_HEIGHT)),
        stock_cards=_stock_entries(document),
    )


def load_level_config(level_id: int, base_dir: Union[str, Path] = ".") -> LevelConfig:
    """Read and parse the configuration of a level found under base_dir."""
    path = Path(base_dir) / level_config_path(level_id)
    text = _read_text(path)
    if not text:
        raise LevelConfigError(f"level config file is empty: {path}")
    return parse_level_config(text)