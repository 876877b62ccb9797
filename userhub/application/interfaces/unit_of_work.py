"""
Unit of Work Interface

Defines the contract for committing changes staged through repositories.
Implements the Unit of Work pattern for atomic operations.
"""

# Standard library imports
from abc import abstractmethod
from typing import Protocol


class IUnitOfWork(Protocol):
    """
    Unit of Work interface for transaction management.

    Everything staged through the repositories sharing this unit of work is
    written in a single transaction. Cancel the awaiting task to abandon a
    save; pending changes are then left untouched.
    """

    @abstractmethod
    async def save_changes(self) -> int:
        """
        Commit all pending changes atomically.

        Returns:
            Number of affected rows

        Raises:
            DuplicateEntityError: If a unique constraint rejects a change
            TransactionError: If the commit fails
        """
        ...

    @abstractmethod
    def has_pending_changes(self) -> bool:
        """
        Check whether any change is waiting to be saved.

        Returns:
            True if ``save_changes`` would write something
        """
        ...
