"""
PostgreSQL Unit of Work Implementation

Concrete implementation of IUnitOfWork using PostgreSQL database.
Flushes the changes staged through its repositories in a single transaction.
"""

# Standard library imports
import logging

# Local imports
from userhub.application.interfaces.exceptions import (
    DuplicateEntityError,
    IntegrityError,
    UserNotFoundError,
)
from userhub.application.interfaces.repositories import IUserRepository
from userhub.application.interfaces.unit_of_work import IUnitOfWork
from userhub.domain.entities.user import User
from userhub.infrastructure.database.adapter import PostgreSQLAdapter
from userhub.infrastructure.database.schema import USERS_EMAIL_UNIQUE_CONSTRAINT, USERS_TABLE

from .change_tracker import ChangeTracker, ChangeType, PendingChange
from .user_repository import PostgreSQLUserRepository

logger = logging.getLogger(__name__)


class PostgreSQLUnitOfWork(IUnitOfWork):
    """
    PostgreSQL implementation of IUnitOfWork.

    Owns the change tracker and the repositories writing into it. Pending
    changes are kept when a save fails so the caller can inspect them.
    """

    def __init__(self, adapter: PostgreSQLAdapter) -> None:
        """
        Initialize Unit of Work with database adapter.

        Args:
            adapter: PostgreSQL database adapter
        """
        self.adapter = adapter
        self._tracker = ChangeTracker()
        self._users = PostgreSQLUserRepository(adapter, self._tracker)

    @property
    def users(self) -> IUserRepository:
        """Get the users repository."""
        return self._users

    def has_pending_changes(self) -> bool:
        return self._tracker.has_changes()

    def discard_changes(self) -> None:
        """Drop every staged change without touching the database."""
        self._tracker.clear()

    async def save_changes(self) -> int:
        """
        Write all pending changes in one transaction.

        Returns:
            Number of affected rows

        Raises:
            DuplicateEntityError: If the unique email index rejects a change
            UserNotFoundError: If an updated user no longer exists
            TransactionError: If the transaction cannot be started or committed
        """
        if not self._tracker.has_changes():
            return 0

        changes = self._tracker.changes
        current: PendingChange | None = None
        affected = 0

        await self.adapter.begin_transaction()
        try:
            for current in changes:
                affected += await self._apply(current)
            await self.adapter.commit_transaction()

        except IntegrityError as e:
            await self._rollback()
            if e.constraint == USERS_EMAIL_UNIQUE_CONSTRAINT and current is not None:
                raise DuplicateEntityError("User", current.entity.email.value) from e
            raise
        except BaseException:
            await self._rollback()
            raise

        self._tracker.clear()
        logger.debug(f"Unit of Work saved {len(changes)} change(s), {affected} row(s) affected")
        return affected

    async def _apply(self, change: PendingChange) -> int:
        user: User = change.entity

        if change.change_type is ChangeType.ADDED:
            return await self.adapter.execute_query(
                f"INSERT INTO {USERS_TABLE} (id, name, email) VALUES (%s, %s, %s)",
                user.id.value,
                user.name,
                user.email.value,
            )

        if change.change_type is ChangeType.MODIFIED:
            rows = await self.adapter.execute_query(
                f"UPDATE {USERS_TABLE} SET name = %s, email = %s WHERE id = %s",
                user.name,
                user.email.value,
                user.id.value,
            )
            if rows == 0:
                raise UserNotFoundError(user.id.value)
            return rows

        return await self.adapter.execute_query(
            f"DELETE FROM {USERS_TABLE} WHERE id = %s", user.id.value
        )

    async def _rollback(self) -> None:
        if not self.adapter.has_active_transaction:
            return
        try:
            await self.adapter.rollback_transaction()
        except Exception as rollback_error:
            # The original failure is what the caller needs to see.
            logger.error(f"Failed to rollback after save error: {rollback_error}")
