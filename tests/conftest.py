"""Global pytest configuration and fixtures."""

# Standard library imports
from unittest.mock import AsyncMock, MagicMock
from uuid import UUID

# Third-party imports
import pytest

# Local imports
from userhub.application.config import reset_config
from userhub.application.interfaces.repositories import IUserRepository
from userhub.application.interfaces.unit_of_work import IUnitOfWork
from userhub.domain.entities.user import User, UserId
from userhub.domain.value_objects.email import Email

FIXED_USER_ID = UUID("6f1c9a52-3d0e-4b8c-9a41-2f7e5d8c1b03")


@pytest.fixture(autouse=True)
def reset_global_config():
    """Make sure no test leaks a cached ApplicationConfig into the next one."""
    reset_config()
    yield
    reset_config()


@pytest.fixture
def user_id() -> UserId:
    return UserId(FIXED_USER_ID)


@pytest.fixture
def sample_user(user_id) -> User:
    """A valid, already persisted user."""
    return User.restore(user_id, "Test User", Email("test@example.com"))


@pytest.fixture
def mock_user_repository():
    """Mock user repository; every email is free unless a test says otherwise."""
    repository = MagicMock(spec=IUserRepository)
    repository.get_by_id = AsyncMock(return_value=None)
    repository.get_all = AsyncMock(return_value=[])
    repository.find = AsyncMock(return_value=[])
    repository.get_by_email = AsyncMock(return_value=None)
    repository.is_email_unique = AsyncMock(return_value=True)
    return repository


@pytest.fixture
def mock_unit_of_work():
    """Mock unit of work reporting one affected row per save."""
    unit_of_work = MagicMock(spec=IUnitOfWork)
    unit_of_work.save_changes = AsyncMock(return_value=1)
    unit_of_work.has_pending_changes = MagicMock(return_value=False)
    return unit_of_work
