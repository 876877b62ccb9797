"""
Unit tests for ConnectionFactory.
"""

# Standard library imports
from unittest.mock import AsyncMock, MagicMock, patch

# Third-party imports
import psycopg
import pytest

# Local imports
from userhub.application.config import DatabaseConfig
from userhub.application.interfaces.exceptions import ConnectionError, FactoryError
from userhub.infrastructure.database.connection import ConnectionFactory

POOL_CLASS = "userhub.infrastructure.database.connection.AsyncConnectionPool"


@pytest.fixture
def db_config():
    return DatabaseConfig(host="db", port=5432, database="users", user="svc", password="pw")


@pytest.fixture
def mock_pool():
    pool = MagicMock()
    pool.open = AsyncMock()
    pool.close = AsyncMock()
    return pool


@pytest.mark.unit
class TestConnectionFactory:
    """Test pool lifecycle."""

    async def test_create_pool(self, db_config, mock_pool):
        with patch(POOL_CLASS, return_value=mock_pool) as pool_class:
            factory = ConnectionFactory(db_config)
            pool = await factory.create_pool()

        assert pool is mock_pool
        assert factory.pool is mock_pool
        kwargs = pool_class.call_args.kwargs
        assert kwargs["conninfo"] == "postgresql://svc:pw@db:5432/users"
        assert kwargs["min_size"] == 1
        assert kwargs["max_size"] == 10
        assert kwargs["open"] is False
        mock_pool.open.assert_awaited_once_with(wait=True, timeout=30.0)

    async def test_create_pool_is_idempotent(self, db_config, mock_pool):
        with patch(POOL_CLASS, return_value=mock_pool) as pool_class:
            factory = ConnectionFactory(db_config)
            await factory.create_pool()
            await factory.create_pool()

        assert pool_class.call_count == 1

    async def test_unreachable_database(self, db_config, mock_pool):
        mock_pool.open.side_effect = psycopg.OperationalError("connection refused")

        with patch(POOL_CLASS, return_value=mock_pool):
            factory = ConnectionFactory(db_config)
            with pytest.raises(ConnectionError):
                await factory.create_pool()

        mock_pool.close.assert_awaited_once()
        assert factory.pool is None

    async def test_invalid_pool_configuration(self, db_config):
        with patch(POOL_CLASS, side_effect=ValueError("max_size must be positive")):
            with pytest.raises(FactoryError):
                await ConnectionFactory(db_config).create_pool()

    async def test_close(self, db_config, mock_pool):
        with patch(POOL_CLASS, return_value=mock_pool):
            factory = ConnectionFactory(db_config)
            await factory.create_pool()

        await factory.close()
        await factory.close()

        mock_pool.close.assert_awaited_once()
        assert factory.pool is None
