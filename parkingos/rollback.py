"""Undo history for parking operations."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .models import ParkingSlot
from .request import ParkingRequest


class ActionType(Enum):
    """Kinds of operations that can be undone."""

    PARK = 0
    REMOVE = 1


@dataclass
class HistoryEntry:
    """One recorded operation."""

    action_type: ActionType
    request: ParkingRequest
    slot: ParkingSlot


class RollbackManager:
    """Last-in, first-out stack of recorded operations."""

    def __init__(self) -> None:
        self._stack: list[HistoryEntry] = []

    def __len__(self) -> int:
        return len(self._stack)

    def push_operation(
        self, action_type: ActionType, request: ParkingRequest, slot: ParkingSlot
    ) -> HistoryEntry:
        """Record an operation and return its entry."""
        entry = HistoryEntry(action_type, request, slot)
        self._stack.append(entry)
        return entry

    def pop_operation(self) -> HistoryEntry | None:
        """Remove and return the most recent entry, or None when empty."""
        return self._stack.pop() if self._stack else None

    def is_empty(self) -> bool:
        """True when there is nothing to undo."""
        return not self._stack