"""
Dependency Injection Container - Central container for application dependencies.

This module wires configuration, persistence and use cases together and owns
the lifecycle of the database connection pool.
"""

import logging

from userhub.application.config import ApplicationConfig, PersistenceBackend, get_config
from userhub.application.interfaces.exceptions import FactoryError
from userhub.application.use_cases.users import CreateUserUseCase
from userhub.infrastructure.database.adapter import PostgreSQLAdapter
from userhub.infrastructure.database.connection import ConnectionFactory
from userhub.infrastructure.database.schema import create_schema
from userhub.infrastructure.repositories.in_memory import InMemoryUnitOfWork, InMemoryUserStore
from userhub.infrastructure.repositories.unit_of_work import PostgreSQLUnitOfWork

logger = logging.getLogger(__name__)


class Container:
    """
    Dependency Injection Container for the user service.

    Long-lived resources (pool, in-memory store) are created once in
    ``start``; units of work and use cases are created per request because
    each one carries its own transaction state.
    """

    def __init__(self, config: ApplicationConfig | None = None) -> None:
        """Initialize the container with configuration."""
        self.config = config or get_config()
        self.config.validate()
        self._connection_factory = ConnectionFactory(self.config.database)
        self._memory_store: InMemoryUserStore | None = None
        self._started = False

    @property
    def backend(self) -> PersistenceBackend:
        return self.config.persistence.backend

    async def start(self) -> None:
        """Open the persistence backend and create the schema if configured."""
        if self._started:
            return

        if self.backend is PersistenceBackend.MEMORY:
            self._memory_store = InMemoryUserStore()
        else:
            pool = await self._connection_factory.create_pool()
            if self.config.persistence.create_schema:
                await create_schema(PostgreSQLAdapter(pool, self.config.database.command_timeout))

        self._started = True
        logger.info(f"Container started with {self.backend.value} persistence")

    async def close(self) -> None:
        """Release the persistence backend."""
        await self._connection_factory.close()
        self._memory_store = None
        self._started = False

    def create_unit_of_work(self) -> PostgreSQLUnitOfWork | InMemoryUnitOfWork:
        """
        Create a fresh unit of work for one request.

        Raises:
            FactoryError: If the container has not been started
        """
        if not self._started:
            raise FactoryError("Container", "Container must be started before use")

        if self.backend is PersistenceBackend.MEMORY:
            return InMemoryUnitOfWork(self._memory_store)

        pool = self._connection_factory.pool
        if pool is None:
            raise FactoryError("Container", "Connection pool is not open")
        return PostgreSQLUnitOfWork(PostgreSQLAdapter(pool, self.config.database.command_timeout))

    def create_user_use_case(self) -> CreateUserUseCase:
        """Create a CreateUserUseCase bound to a fresh unit of work."""
        unit_of_work = self.create_unit_of_work()
        return CreateUserUseCase(unit_of_work.users, unit_of_work)

    async def __aenter__(self) -> "Container":
        await self.start()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
