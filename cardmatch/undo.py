"""Undoable actions and the stack that records them."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from cardmatch.cards import Vec2


class UndoActionType(Enum):
    """Kinds of state change that can be undone."""

    NONE = "none"
    CARD_MATCHED = "card_matched"
    STACK_TO_TRAY = "stack_to_tray"


@dataclass(frozen=True)
class UndoAction:
    """One undoable change: its kind, the card involved and the card's prior position."""

    type: UndoActionType
    card_id: int
    position: Vec2 = field(default=Vec2.ZERO)


class UndoManager:
    """A last-in, first-out stack of undoable actions."""

    def __init__(self) -> None:
        self._stack: List[UndoAction] = []

    def record_action(self, action: UndoAction) -> None:
        """Push an action onto the stack."""
        self._stack.append(action)

    def undo(self) -> Optional[UndoAction]:
        """Pop and return the most recent action, or None when there is none."""
        if not self._stack:
            return None
        return self._stack.pop()

    def can_undo(self) -> bool:
        """Return True while at least one action is recorded."""
        return bool(self._stack)

    def clear(self) -> None:
        """Forget all recorded actions."""
        self._stack.clear()

    def __len__(self) -> int:
        return len(self._stack)