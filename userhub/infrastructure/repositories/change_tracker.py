"""
Change tracking shared by a repository and its unit of work.

Repositories record staged changes here; the unit of work replays them in
order inside one transaction and clears them once committed.
"""

# Standard library imports
from dataclasses import dataclass
from enum import Enum
from typing import Any


class ChangeType(Enum):
    """Kind of staged change."""

    ADDED = "added"
    MODIFIED = "modified"
    DELETED = "deleted"


@dataclass(frozen=True)
class PendingChange:
    """One staged change."""

    change_type: ChangeType
    entity: Any


class ChangeTracker:
    """Ordered list of changes waiting for the next save."""

    def __init__(self) -> None:
        self._changes: list[PendingChange] = []

    def track(self, change_type: ChangeType, entity: Any) -> None:
        self._changes.append(PendingChange(change_type, entity))

    @property
    def changes(self) -> tuple[PendingChange, ...]:
        return tuple(self._changes)

    def has_changes(self) -> bool:
        return bool(self._changes)

    def clear(self) -> None:
        self._changes.clear()

    def __len__(self) -> int:
        return len(self._changes)
