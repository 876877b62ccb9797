"""
Application Interfaces

Contracts that the infrastructure layer implements.
"""

from .exceptions import (
    ConfigurationError,
    ConnectionError,
    DuplicateEntityError,
    EntityNotFoundError,
    FactoryError,
    IntegrityError,
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
from .repositories import IRepository, IUserRepository
from .unit_of_work import IUnitOfWork

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
