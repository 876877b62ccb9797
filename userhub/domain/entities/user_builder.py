"""
User construction with validation.

``build_user`` is the single validating constructor for new users. It takes a
``UserDraft`` and returns a Result, so invalid input never raises.
``UserBuilder`` is an immutable fluent front end that fills in the draft.
"""

from __future__ import annotations

# Standard library imports
from dataclasses import dataclass, replace
from typing import ClassVar

from ..common.result import Error, Result
from ..value_objects.email import Email
from .user import User, UserId


class UserBuilderErrors:
    """Errors produced while building a user."""

    NAME_EMPTY: ClassVar[Error] = Error("UserBuilder.NameEmpty", "Name cannot be null or empty.")
    INVALID_EMAIL_CODE: ClassVar[str] = "UserBuilder.InvalidEmail"

    @classmethod
    def invalid_email(cls, cause: Error) -> Error:
        return Error(cls.INVALID_EMAIL_CODE, cause.message)


@dataclass(frozen=True)
class UserDraft:
    """Raw, unvalidated input for a new user."""

    name: str | None = None
    email: str | None = None
    id: UserId | None = None


def build_user(draft: UserDraft) -> Result[User]:
    """
    Validate a draft and construct the User.

    Checks run in a fixed order: the name is validated before the email, so a
    draft with both problems reports ``UserBuilder.NameEmpty``.

    Args:
        draft: The raw user data

    Returns:
        Success with the new User, or failure with ``UserBuilder.NameEmpty`` /
        ``UserBuilder.InvalidEmail``
    """
    user_id = draft.id if draft.id is not None else UserId.new()

    if draft.name is None or not draft.name.strip():
        return Result.failure(UserBuilderErrors.NAME_EMPTY)

    email_result = Email.create(draft.email)
    if email_result.is_failure:
        return Result.failure(UserBuilderErrors.invalid_email(email_result.error))

    return Result.success(User(user_id, draft.name, email_result.value))


class UserBuilder:
    """Fluent, immutable builder: every ``with_*`` call returns a new builder."""

    __slots__ = ("_draft",)

    def __init__(self, draft: UserDraft | None = None) -> None:
        self._draft = draft or UserDraft()

    @property
    def draft(self) -> UserDraft:
        return self._draft

    def with_id(self, user_id: UserId) -> UserBuilder:
        return UserBuilder(replace(self._draft, id=user_id))

    def with_name(self, name: str | None) -> UserBuilder:
        return UserBuilder(replace(self._draft, name=name))

    def with_email(self, email: str | None) -> UserBuilder:
        return UserBuilder(replace(self._draft, email=email))

    def build(self) -> Result[User]:
        """Validate and construct the user (see ``build_user``)."""
        return build_user(self._draft)
