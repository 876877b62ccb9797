"""
User Entity - registered user with a validated email address
"""

from __future__ import annotations

# Standard library imports
from typing import ClassVar
from uuid import UUID, uuid4

from ..common.result import Error
from ..common.strongly_typed_id import StronglyTypedId
from ..value_objects.email import Email
from .entity import Entity


class UserId(StronglyTypedId[UUID]):
    """Identifier of a User."""

    __slots__ = ()

    @classmethod
    def new(cls) -> UserId:
        """Generate a fresh random identifier."""
        return cls(uuid4())


class UserErrors:
    """Errors raised by user-level business rules."""

    EMAIL_NOT_UNIQUE: ClassVar[Error] = Error("User.EmailNotUnique", "The email is already in use.")


class User(Entity[UserId], kind="user"):
    """
    User entity.

    New users come from ``build_user`` / ``UserBuilder``, which validate the
    name and email first. ``restore`` rebuilds a user from stored data.
    """

    def __init__(self, id: UserId, name: str | None, email: Email) -> None:
        super().__init__(id)
        self._name = name
        self._email = email

    @classmethod
    def restore(cls, id: UserId, name: str | None, email: Email) -> User:
        """Rehydrate a persisted user without re-running creation rules."""
        return cls(id, name, email)

    @property
    def name(self) -> str | None:
        return self._name

    @property
    def email(self) -> Email:
        return self._email

    def change_email(self, new_email: Email) -> None:
        """Replace the email address.

        ``Email`` is validated on creation, so this cannot fail.
        """
        self._email = new_email

    def __repr__(self) -> str:
        return f"User(id={self.id!r}, name={self._name!r}, email={self._email!r})"
