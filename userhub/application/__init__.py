"""
Application Layer - Use Cases and Orchestration

This layer contains:
- Use Cases: Orchestration of business logic
- Interfaces: Repository and unit of work contracts
- Configuration: Runtime settings

Depends on domain layer, orchestrates business logic.
Defines interfaces that infrastructure layer must implement.
"""

from .interfaces import (
    ConfigurationError,
    ConnectionError,
    DuplicateEntityError,
    EntityNotFoundError,
    FactoryError,
    IntegrityError,
    IRepository,
    IUnitOfWork,
    IUserRepository,
    RepositoryError,
    TimeoutError,
    TransactionAlreadyActiveError,
    TransactionCommitError,
    TransactionError,
    TransactionNotActiveError,
    TransactionRollbackError,
    UserNotFoundError,
    ValidationError,
)

__all__ = [
    # Repository interfaces
    "IRepository",
    "IUserRepository",
    # Unit of Work interfaces
    "IUnitOfWork",
    # Exceptions
    "RepositoryError",
    "EntityNotFoundError",
    "UserNotFoundError",
    "DuplicateEntityError",
    "ValidationError",
    "TransactionError",
    "TransactionNotActiveError",
    "TransactionAlreadyActiveError",
    "TransactionCommitError",
    "TransactionRollbackError",
    "ConnectionError",
    "TimeoutError",
    "IntegrityError",
    "FactoryError",
    "ConfigurationError",
]
