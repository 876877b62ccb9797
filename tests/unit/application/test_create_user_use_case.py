"""
Unit tests for CreateUserUseCase.

Repository and unit of work are mocked; these tests pin the order of checks
and that nothing is persisted when any check fails.
"""

# Standard library imports
import logging
from unittest.mock import AsyncMock
from uuid import UUID, uuid4

# Third-party imports
import pytest

# Local imports
from userhub.application.interfaces.exceptions import DuplicateEntityError, RepositoryError
from userhub.application.use_cases.base import UseCase, UseCaseRequest
from userhub.application.use_cases.users import (
    CreateUserRequest,
    CreateUserUseCase,
    UserResponse,
)
from userhub.domain.common.result import Error, Result
from userhub.domain.entities.user import User


@pytest.fixture
def use_case(mock_user_repository, mock_unit_of_work):
    return CreateUserUseCase(mock_user_repository, mock_unit_of_work)


@pytest.mark.unit
class TestCreateUserSuccess:
    """Test registering a valid user."""

    async def test_creates_user(self, use_case, mock_user_repository, mock_unit_of_work):
        request = CreateUserRequest(name="Test User", email="test@example.com")

        result = await use_case.execute(request)

        assert result.is_success
        assert result.value.name == "Test User"
        assert result.value.email == "test@example.com"
        assert isinstance(result.value.id, UUID)

        mock_user_repository.is_email_unique.assert_awaited_once_with("test@example.com")
        mock_user_repository.add.assert_called_once()
        added = mock_user_repository.add.call_args[0][0]
        assert isinstance(added, User)
        assert added.id.value == result.value.id
        mock_unit_of_work.save_changes.assert_awaited_once()

    async def test_each_request_gets_new_id(self, use_case):
        first = await use_case.execute(CreateUserRequest(name="A", email="a@example.com"))
        second = await use_case.execute(CreateUserRequest(name="B", email="b@example.com"))

        assert first.value.id != second.value.id

    async def test_response_serialization(self, use_case):
        result = await use_case.execute(CreateUserRequest(name="Test User", email="test@example.com"))

        payload = result.value.to_dict()

        assert payload == {
            "id": str(result.value.id),
            "name": "Test User",
            "email": "test@example.com",
        }


@pytest.mark.unit
class TestCreateUserRejections:
    """Test domain failures leave storage untouched."""

    async def test_email_not_unique(self, use_case, mock_user_repository, mock_unit_of_work):
        mock_user_repository.is_email_unique.return_value = False

        result = await use_case.execute(CreateUserRequest(name="Test User", email="taken@example.com"))

        assert result.is_failure
        assert result.error.code == "User.EmailNotUnique"
        assert result.error.message == "The email is already in use."
        mock_user_repository.add.assert_not_called()
        mock_unit_of_work.save_changes.assert_not_awaited()

    async def test_uniqueness_checked_before_validation(self, use_case, mock_user_repository):
        mock_user_repository.is_email_unique.return_value = False

        result = await use_case.execute(CreateUserRequest(name="", email="taken@example.com"))

        assert result.error.code == "User.EmailNotUnique"

    async def test_empty_name(self, use_case, mock_user_repository, mock_unit_of_work):
        result = await use_case.execute(CreateUserRequest(name="", email="test@example.com"))

        assert result.is_failure
        assert result.error.code == "UserBuilder.NameEmpty"
        mock_user_repository.add.assert_not_called()
        mock_unit_of_work.save_changes.assert_not_awaited()

    async def test_invalid_email(self, use_case, mock_user_repository, mock_unit_of_work):
        result = await use_case.execute(CreateUserRequest(name="Test User", email="invalid-email"))

        assert result.is_failure
        assert result.error.code == "UserBuilder.InvalidEmail"
        assert result.error.message == "Invalid email format."
        mock_user_repository.add.assert_not_called()
        mock_unit_of_work.save_changes.assert_not_awaited()

    async def test_missing_email_checked_as_empty_string(self, use_case, mock_user_repository):
        result = await use_case.execute(CreateUserRequest(name="Test User", email=None))

        mock_user_repository.is_email_unique.assert_awaited_once_with("")
        assert result.error.code == "UserBuilder.InvalidEmail"

    async def test_rejection_logged_with_code(self, use_case, mock_user_repository, caplog):
        mock_user_repository.is_email_unique.return_value = False

        with caplog.at_level(logging.INFO):
            await use_case.execute(CreateUserRequest(name="Test User", email="taken@example.com"))

        rejected = [r for r in caplog.records if "rejected" in r.getMessage()]
        assert len(rejected) == 1
        assert rejected[0].error_code == "User.EmailNotUnique"


@pytest.mark.unit
class TestCreateUserFaults:
    """Test infrastructure faults propagate."""

    async def test_repository_fault_propagates(self, use_case, mock_user_repository):
        mock_user_repository.is_email_unique.side_effect = RepositoryError("connection lost")

        with pytest.raises(RepositoryError, match="connection lost"):
            await use_case.execute(CreateUserRequest(name="Test User", email="test@example.com"))

    async def test_duplicate_at_commit_propagates(self, use_case, mock_unit_of_work):
        mock_unit_of_work.save_changes.side_effect = DuplicateEntityError("User", "test@example.com")

        with pytest.raises(DuplicateEntityError):
            await use_case.execute(CreateUserRequest(name="Test User", email="test@example.com"))

    async def test_fault_logged(self, use_case, mock_unit_of_work, caplog):
        mock_unit_of_work.save_changes.side_effect = RepositoryError("disk full")

        with pytest.raises(RepositoryError):
            await use_case.execute(CreateUserRequest(name="Test User", email="test@example.com"))

        assert any(
            r.levelno == logging.ERROR and "disk full" in r.getMessage() for r in caplog.records
        )


class _EchoRequest(UseCaseRequest):
    pass


class _RejectingUseCase(UseCase[UseCaseRequest, str]):
    """Use case whose validate hook always rejects."""

    def __init__(self) -> None:
        super().__init__()
        self.process_mock = AsyncMock(return_value=Result.success("processed"))

    async def validate(self, request: UseCaseRequest) -> Error | None:
        return Error("Echo.Rejected", "Rejected by validation.")

    async def process(self, request: UseCaseRequest) -> Result[str]:
        return await self.process_mock(request)


@pytest.mark.unit
class TestUseCaseBase:
    """Test the template shared by all use cases."""

    async def test_validation_failure_skips_process(self):
        use_case = _RejectingUseCase()

        result = await use_case.execute(_EchoRequest())

        assert result.error.code == "Echo.Rejected"
        use_case.process_mock.assert_not_awaited()

    async def test_request_and_correlation_ids_logged(self, caplog):
        correlation_id = uuid4()
        request = _EchoRequest(correlation_id=correlation_id)

        with caplog.at_level(logging.INFO):
            await _RejectingUseCase().execute(request)

        records = [r for r in caplog.records if hasattr(r, "request_id")]
        assert records
        for record in records:
            assert record.request_id == str(request.request_id)
            assert record.correlation_id == str(correlation_id)

    async def test_missing_correlation_id_logged_as_none(self, caplog):
        with caplog.at_level(logging.INFO):
            await _RejectingUseCase().execute(_EchoRequest())

        started = next(r for r in caplog.records if r.getMessage().startswith("Executing"))
        assert started.correlation_id is None

    def test_default_name_is_class_name(self):
        assert _RejectingUseCase().name == "_RejectingUseCase"

    def test_request_ids_are_unique(self):
        assert _EchoRequest().request_id != _EchoRequest().request_id

    def test_user_response_from_user(self, sample_user):
        response = UserResponse.from_user(sample_user)

        assert response.id == sample_user.id.value
        assert response.email == "test@example.com"
