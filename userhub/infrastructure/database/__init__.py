"""PostgreSQL connectivity: pool factory, query adapter and table definitions."""

from .adapter import PostgreSQLAdapter
from .connection import ConnectionFactory
from .schema import USERS_EMAIL_UNIQUE_CONSTRAINT, USERS_TABLE, create_schema

__all__ = [
    "ConnectionFactory",
    "PostgreSQLAdapter",
    "USERS_EMAIL_UNIQUE_CONSTRAINT",
    "USERS_TABLE",
    "create_schema",
]
