"""
Repository Implementations

Concrete IUserRepository / IUnitOfWork implementations backed by PostgreSQL
or by process memory.
"""

from .change_tracker import ChangeTracker, ChangeType, PendingChange
from .in_memory import InMemoryUnitOfWork, InMemoryUserRepository, InMemoryUserStore
from .unit_of_work import PostgreSQLUnitOfWork
from .user_repository import PostgreSQLUserRepository

__all__ = [
    "ChangeTracker",
    "ChangeType",
    "InMemoryUnitOfWork",
    "InMemoryUserRepository",
    "InMemoryUserStore",
    "PendingChange",
    "PostgreSQLUnitOfWork",
    "PostgreSQLUserRepository",
]
