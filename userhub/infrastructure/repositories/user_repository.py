"""
PostgreSQL User Repository Implementation

Concrete implementation of IUserRepository using PostgreSQL database.
Handles user retrieval and mapping between domain entities and database records.
Writes are staged in a ChangeTracker and flushed by PostgreSQLUnitOfWork.
"""

# Standard library imports
import logging
from collections.abc import Callable
from typing import Any

# Local imports
from userhub.application.interfaces.exceptions import RepositoryError, ValidationError
from userhub.application.interfaces.repositories import IUserRepository
from userhub.domain.entities.user import User, UserId
from userhub.domain.value_objects.email import Email
from userhub.infrastructure.database.adapter import PostgreSQLAdapter
from userhub.infrastructure.database.schema import USERS_TABLE

from .change_tracker import ChangeTracker, ChangeType

logger = logging.getLogger(__name__)

_SELECT_COLUMNS = f"SELECT id, name, email FROM {USERS_TABLE}"


class PostgreSQLUserRepository(IUserRepository):
    """
    PostgreSQL implementation of IUserRepository.

    Reads go straight to the database; ``add``, ``update`` and ``remove``
    only record the change until the unit of work saves.
    """

    def __init__(self, adapter: PostgreSQLAdapter, tracker: ChangeTracker) -> None:
        """
        Initialize repository with database adapter.

        Args:
            adapter: PostgreSQL database adapter
            tracker: Change tracker shared with the unit of work
        """
        self.adapter = adapter
        self.tracker = tracker

    async def get_by_id(self, entity_id: UserId) -> User | None:
        """
        Retrieve a user by its ID.

        Args:
            entity_id: The unique identifier of the user

        Returns:
            The user entity if found, None otherwise

        Raises:
            RepositoryError: If retrieval operation fails
        """
        try:
            record = await self.adapter.fetch_one(f"{_SELECT_COLUMNS} WHERE id = %s", entity_id.value)
        except RepositoryError:
            raise
        except Exception as e:
            logger.error(f"Failed to get user {entity_id}: {e}")
            raise RepositoryError(f"Failed to retrieve user: {e}", e) from e

        if record is None:
            return None
        return self._map_record_to_user(record)

    async def get_all(self) -> list[User]:
        """
        Retrieve all users ordered by email.

        Returns:
            List of users

        Raises:
            RepositoryError: If retrieval operation fails
        """
        try:
            records = await self.adapter.fetch_all(f"{_SELECT_COLUMNS} ORDER BY email")
        except RepositoryError:
            raise
        except Exception as e:
            logger.error(f"Failed to get users: {e}")
            raise RepositoryError(f"Failed to retrieve users: {e}", e) from e

        return [self._map_record_to_user(record) for record in records]

    async def find(self, predicate: Callable[[User], bool]) -> list[User]:
        """Retrieve all users matching ``predicate``, evaluated client-side."""
        return [user for user in await self.get_all() if predicate(user)]

    async def get_by_email(self, email: str) -> User | None:
        """
        Retrieve a user by email address.

        Args:
            email: The exact address to look up

        Returns:
            The user entity if found, None otherwise

        Raises:
            RepositoryError: If retrieval operation fails
        """
        try:
            record = await self.adapter.fetch_one(f"{_SELECT_COLUMNS} WHERE email = %s", email)
        except RepositoryError:
            raise
        except Exception as e:
            logger.error(f"Failed to get user by email: {e}")
            raise RepositoryError(f"Failed to retrieve user by email: {e}", e) from e

        if record is None:
            return None
        return self._map_record_to_user(record)

    async def is_email_unique(self, email: str) -> bool:
        """
        Check that no stored user has this email.

        Raises:
            RepositoryError: If retrieval operation fails
        """
        try:
            record = await self.adapter.fetch_one(
                f"SELECT EXISTS (SELECT 1 FROM {USERS_TABLE} WHERE email = %s) AS taken", email
            )
        except RepositoryError:
            raise
        except Exception as e:
            logger.error(f"Failed to check email uniqueness: {e}")
            raise RepositoryError(f"Failed to check email uniqueness: {e}", e) from e

        return not (record and record["taken"])

    def add(self, entity: User) -> None:
        self.tracker.track(ChangeType.ADDED, entity)
        logger.debug(f"Staged insert of user {entity.id}")

    def update(self, entity: User) -> None:
        self.tracker.track(ChangeType.MODIFIED, entity)
        logger.debug(f"Staged update of user {entity.id}")

    def remove(self, entity: User) -> None:
        self.tracker.track(ChangeType.DELETED, entity)
        logger.debug(f"Staged delete of user {entity.id}")

    def _map_record_to_user(self, record: dict[str, Any]) -> User:
        """Map a database record to a User entity."""
        try:
            email = Email(record["email"])
        except ValueError as e:
            raise ValidationError("User", "email", record["email"], str(e)) from e

        return User.restore(UserId(record["id"]), record["name"], email)
