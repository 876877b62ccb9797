"""
Users table definition.

The unique index on ``email`` backs up the use case's uniqueness check when
two registrations race.
"""

# Standard library imports
import logging

from .adapter import PostgreSQLAdapter

logger = logging.getLogger(__name__)

USERS_TABLE = "users"
USERS_EMAIL_UNIQUE_CONSTRAINT = "ix_users_email"
NAME_MAX_LENGTH = 255
EMAIL_MAX_LENGTH = 255

CREATE_USERS_TABLE = f"""
CREATE TABLE IF NOT EXISTS {USERS_TABLE} (
    id UUID PRIMARY KEY,
    name VARCHAR({NAME_MAX_LENGTH}) NOT NULL,
    email VARCHAR({EMAIL_MAX_LENGTH}) NOT NULL
)
"""

CREATE_USERS_EMAIL_INDEX = f"""
CREATE UNIQUE INDEX IF NOT EXISTS {USERS_EMAIL_UNIQUE_CONSTRAINT} ON {USERS_TABLE} (email)
"""


async def create_schema(adapter: PostgreSQLAdapter) -> None:
    """Create the users table and its unique email index if missing."""
    await adapter.execute_query(CREATE_USERS_TABLE)
    await adapter.execute_query(CREATE_USERS_EMAIL_INDEX)
    logger.info(f"Schema for table '{USERS_TABLE}' is in place")
