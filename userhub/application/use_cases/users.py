"""
User Use Cases

Implements business logic for registering users.
"""

from dataclasses import dataclass
from uuid import UUID

from userhub.application.interfaces.repositories import IUserRepository
from userhub.application.interfaces.unit_of_work import IUnitOfWork
from userhub.domain.common.result import Result
from userhub.domain.entities.user import User, UserErrors
from userhub.domain.entities.user_builder import UserBuilder

from .base import UseCase, UseCaseRequest


# Request/Response DTOs
@dataclass
class CreateUserRequest(UseCaseRequest):
    """Request to register a new user."""

    name: str | None
    email: str | None


@dataclass(frozen=True)
class UserResponse:
    """Public view of a user."""

    id: UUID
    name: str | None
    email: str

    @classmethod
    def from_user(cls, user: User) -> "UserResponse":
        return cls(id=user.id.value, name=user.name, email=user.email.value)

    def to_dict(self) -> dict[str, str | None]:
        """Serialize to the ``{id, name, email}`` shape."""
        return {"id": str(self.id), "name": self.name, "email": self.email}


# Use Case Implementations
class CreateUserUseCase(UseCase[CreateUserRequest, UserResponse]):
    """
    Use case for registering a user.

    Checks that the email is free, builds and validates the user, then
    stages it and commits through the unit of work. Nothing is written
    unless every check passes.
    """

    def __init__(self, users: IUserRepository, unit_of_work: IUnitOfWork) -> None:
        """Initialize create user use case."""
        super().__init__("CreateUserUseCase")
        self.users = users
        self.unit_of_work = unit_of_work

    async def process(self, request: CreateUserRequest) -> Result[UserResponse]:
        """Register the user described by the request."""
        if not await self.users.is_email_unique(request.email or ""):
            return Result.failure(UserErrors.EMAIL_NOT_UNIQUE)

        user_result = UserBuilder().with_name(request.name).with_email(request.email).build()
        if user_result.is_failure:
            return Result.failure(user_result.error)

        user = user_result.value
        self.users.add(user)
        await self.unit_of_work.save_changes()

        self.logger.debug(
            f"User {user.id} persisted",
            extra={"request_id": str(request.request_id), "user_id": str(user.id)},
        )
        return Result.success(UserResponse.from_user(user))
