"""
In-memory user persistence.

Stores rows the way the users table would and applies the same rules as the
database: primary key on id, unique email, non-null name and the column
lengths. Suitable for local development and tests; contents vanish with the
process.
"""

# Standard library imports
import asyncio
import logging
from collections.abc import Callable
from dataclasses import dataclass
from uuid import UUID

# Local imports
from userhub.application.interfaces.exceptions import (
    DuplicateEntityError,
    UserNotFoundError,
    ValidationError,
)
from userhub.application.interfaces.repositories import IUserRepository
from userhub.application.interfaces.unit_of_work import IUnitOfWork
from userhub.domain.entities.user import User, UserId
from userhub.domain.value_objects.email import Email
from userhub.infrastructure.database.schema import EMAIL_MAX_LENGTH, NAME_MAX_LENGTH

from .change_tracker import ChangeTracker, ChangeType, PendingChange

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UserRow:
    """Stored form of a user."""

    id: UUID
    name: str | None
    email: str

    @classmethod
    def from_user(cls, user: User) -> "UserRow":
        return cls(id=user.id.value, name=user.name, email=user.email.value)

    def to_user(self) -> User:
        return User.restore(UserId(self.id), self.name, Email(self.email))


class InMemoryUserStore:
    """Committed rows shared by every unit of work created over it."""

    def __init__(self) -> None:
        self.rows: dict[UUID, UserRow] = {}
        self.lock = asyncio.Lock()

    def __len__(self) -> int:
        return len(self.rows)


class InMemoryUserRepository(IUserRepository):
    """IUserRepository over an InMemoryUserStore; reads see committed rows only."""

    def __init__(self, store: InMemoryUserStore, tracker: ChangeTracker) -> None:
        self.store = store
        self.tracker = tracker

    async def get_by_id(self, entity_id: UserId) -> User | None:
        row = self.store.rows.get(entity_id.value)
        return row.to_user() if row else None

    async def get_all(self) -> list[User]:
        return [row.to_user() for row in sorted(self.store.rows.values(), key=lambda r: r.email)]

    async def find(self, predicate: Callable[[User], bool]) -> list[User]:
        return [user for user in await self.get_all() if predicate(user)]

    async def get_by_email(self, email: str) -> User | None:
        for row in self.store.rows.values():
            if row.email == email:
                return row.to_user()
        return None

    async def is_email_unique(self, email: str) -> bool:
        return all(row.email != email for row in self.store.rows.values())

    def add(self, entity: User) -> None:
        self.tracker.track(ChangeType.ADDED, entity)

    def update(self, entity: User) -> None:
        self.tracker.track(ChangeType.MODIFIED, entity)

    def remove(self, entity: User) -> None:
        self.tracker.track(ChangeType.DELETED, entity)


class InMemoryUnitOfWork(IUnitOfWork):
    """
    Unit of work over an InMemoryUserStore.

    Changes are applied to a copy of the committed rows and swapped in only
    when every change passes, so a rejected save leaves the store untouched.
    """

    def __init__(self, store: InMemoryUserStore | None = None) -> None:
        self.store = store if store is not None else InMemoryUserStore()
        self._tracker = ChangeTracker()
        self._users = InMemoryUserRepository(self.store, self._tracker)

    @property
    def users(self) -> IUserRepository:
        return self._users

    def has_pending_changes(self) -> bool:
        return self._tracker.has_changes()

    def discard_changes(self) -> None:
        self._tracker.clear()

    async def save_changes(self) -> int:
        """
        Commit all pending changes atomically.

        Raises:
            DuplicateEntityError: If a change would duplicate an id or email
            UserNotFoundError: If an updated user does not exist
        """
        if not self._tracker.has_changes():
            return 0

        async with self.store.lock:
            rows = dict(self.store.rows)
            affected = sum(self._apply(rows, change) for change in self._tracker.changes)
            self.store.rows = rows

        logger.debug(f"In-memory save: {len(self._tracker)} change(s), {affected} row(s) affected")
        self._tracker.clear()
        return affected

    @staticmethod
    def _apply(rows: dict[UUID, UserRow], change: PendingChange) -> int:
        row = UserRow.from_user(change.entity)

        if change.change_type is ChangeType.DELETED:
            return 1 if rows.pop(row.id, None) is not None else 0

        _check_columns(row)

        if change.change_type is ChangeType.ADDED and row.id in rows:
            raise DuplicateEntityError("User", row.id)
        if change.change_type is ChangeType.MODIFIED and row.id not in rows:
            raise UserNotFoundError(row.id)
        if any(other.email == row.email and other.id != row.id for other in rows.values()):
            raise DuplicateEntityError("User", row.email)

        rows[row.id] = row
        return 1


def _check_columns(row: UserRow) -> None:
    """Apply the users table column constraints."""
    if row.name is None:
        raise ValidationError("User", "name", row.name, "name cannot be null")
    if len(row.name) > NAME_MAX_LENGTH:
        raise ValidationError(
            "User", "name", row.name, f"name exceeds {NAME_MAX_LENGTH} characters"
        )
    if len(row.email) > EMAIL_MAX_LENGTH:
        raise ValidationError(
            "User", "email", row.email, f"email exceeds {EMAIL_MAX_LENGTH} characters"
        )
