"""
Repository Interface Definitions

Defines the contracts that infrastructure repositories must implement.
Following the Repository pattern and clean architecture principles.

Reads are asynchronous. ``add``, ``update`` and ``remove`` only stage a change;
nothing reaches storage until the unit of work saves.
"""

# Standard library imports
from abc import abstractmethod
from collections.abc import Callable
from typing import Any, Protocol, TypeVar

# Local imports
from userhub.domain.common.strongly_typed_id import StronglyTypedId
from userhub.domain.entities.entity import Entity
from userhub.domain.entities.user import User, UserId

TEntity = TypeVar("TEntity", bound=Entity[Any])
TId = TypeVar("TId", bound=StronglyTypedId[Any])


class IRepository(Protocol[TEntity, TId]):
    """
    Generic entity repository interface.

    The infrastructure layer must implement this interface for each entity.
    """

    @abstractmethod
    async def get_by_id(self, entity_id: TId) -> TEntity | None:
        """
        Retrieve an entity by its identifier.

        Args:
            entity_id: The strongly-typed identifier

        Returns:
            The entity if found, None otherwise

        Raises:
            RepositoryError: If retrieval operation fails
        """
        ...

    @abstractmethod
    async def get_all(self) -> list[TEntity]:
        """
        Retrieve all entities.

        Returns:
            List of entities, empty if none stored

        Raises:
            RepositoryError: If retrieval operation fails
        """
        ...

    @abstractmethod
    async def find(self, predicate: Callable[[TEntity], bool]) -> list[TEntity]:
        """
        Retrieve all entities matching an in-memory predicate.

        Args:
            predicate: Filter applied to each entity

        Returns:
            Matching entities

        Raises:
            RepositoryError: If retrieval operation fails
        """
        ...

    @abstractmethod
    def add(self, entity: TEntity) -> None:
        """Stage a new entity for insertion."""
        ...

    @abstractmethod
    def update(self, entity: TEntity) -> None:
        """Stage an existing entity for update."""
        ...

    @abstractmethod
    def remove(self, entity: TEntity) -> None:
        """Stage an entity for deletion."""
        ...


class IUserRepository(IRepository[User, UserId], Protocol):
    """
    User repository interface.

    Adds email lookups on top of the generic repository contract.
    """

    @abstractmethod
    async def get_by_email(self, email: str) -> User | None:
        """
        Retrieve a user by email address.

        Args:
            email: The exact address to look up

        Returns:
            The user if found, None otherwise

        Raises:
            RepositoryError: If retrieval operation fails
        """
        ...

    @abstractmethod
    async def is_email_unique(self, email: str) -> bool:
        """
        Check that no stored user has this email.

        Args:
            email: The address to check

        Returns:
            True if the email is not in use

        Raises:
            RepositoryError: If retrieval operation fails
        """
        ...
