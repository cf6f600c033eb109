"""Paths of the game's resource files."""

from __future__ import annotations


def resource_root() -> str:
    """Return the directory prefix that all resource paths start with."""
    return ""


def card_path(filename: str) -> str:
    """Path of a card image."""
    return f"{resource_root()}res/{filename}"


def suit_path(filename: str) -> str:
    """Path of a suit icon."""
    return f"{resource_root()}res/suits/{filename}"


def number_path(filename: str) -> str:
    """Path of a number glyph image."""
    return f"{resource_root()}res/number/{filename}"


def ui_path(filename: str) -> str:
    """Path of a user-interface image."""
    return f"{resource_root()}ui/{filename}"


def font_path(filename: str) -> str:
    """Path of a font file."""
    return f"{resource_root()}fonts/{filename}"


def level_config_path(level_id: int) -> str:
    """Path of the JSON configuration for a level."""
    return f"{resource_root()}levels/level_{int(level_id)}.json"