"""
Database Connection Management

Provides connection factory and lifecycle management for PostgreSQL connection pools.
"""

# Standard library imports
import logging

# Third-party imports
import psycopg
from psycopg_pool import AsyncConnectionPool

# Local imports
from userhub.application.config import DatabaseConfig
from userhub.application.interfaces.exceptions import ConnectionError, FactoryError

logger = logging.getLogger(__name__)


class ConnectionFactory:
    """
    Creates and owns the async connection pool.

    One factory holds at most one open pool; ``create_pool`` is idempotent
    until ``close`` is called.
    """

    def __init__(self, config: DatabaseConfig) -> None:
        self.config = config
        self._pool: AsyncConnectionPool | None = None

    @property
    def pool(self) -> AsyncConnectionPool | None:
        return self._pool

    async def create_pool(self) -> AsyncConnectionPool:
        """
        Open the connection pool.

        Returns:
            The open pool

        Raises:
            ConnectionError: If the database cannot be reached
            FactoryError: If the pool cannot be configured
        """
        if self._pool is not None:
            return self._pool

        try:
            pool = AsyncConnectionPool(
                conninfo=self.config.get_connection_string(),
                min_size=self.config.min_pool_size,
                max_size=self.config.max_pool_size,
                timeout=self.config.command_timeout,
                open=False,
            )
        except (TypeError, ValueError) as e:
            raise FactoryError("ConnectionFactory", f"Invalid pool configuration: {e}") from e

        try:
            await pool.open(wait=True, timeout=self.config.command_timeout)
        except psycopg.OperationalError as e:
            logger.error(
                f"Failed to open connection pool to {self.config.host}:{self.config.port}: {e}"
            )
            await pool.close()
            raise ConnectionError(f"Failed to open connection pool: {e}") from e

        logger.info(
            f"Connection pool opened for {self.config.host}:{self.config.port}/"
            f"{self.config.database} (size {self.config.min_pool_size}-{self.config.max_pool_size})"
        )
        self._pool = pool
        return pool

    async def close(self) -> None:
        """Close the pool if open."""
        if self._pool is None:
            return
        await self._pool.close()
        self._pool = None
        logger.info("Connection pool closed")
