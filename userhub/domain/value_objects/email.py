"""Email value object."""

from __future__ import annotations

# Standard library imports
import re
from typing import Any, ClassVar

from ..common.result import Error, Result
from .base import ValueObject


class EmailErrors:
    """Errors produced while validating an email address."""

    EMPTY: ClassVar[Error] = Error("Email.Empty", "Email cannot be empty.")
    INVALID_FORMAT: ClassVar[Error] = Error("Email.InvalidFormat", "Invalid email format.")


class Email(ValueObject):
    """Immutable, validated email address compared by value."""

    __slots__ = ("_value",)

    _PATTERN: ClassVar[re.Pattern[str]] = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")

    def __init__(self, value: str) -> None:
        """Initialize Email from trusted data.

        Prefer ``Email.create`` for user input; it reports problems as a Result.

        Raises:
            ValueError: If the address is empty or malformed
        """
        error = self._validation_error(value)
        if error is not None:
            raise ValueError(error.message)
        self._value = value

    @classmethod
    def create(cls, raw: str | None) -> Result[Email]:
        """Validate ``raw`` and wrap it.

        Args:
            raw: Candidate email address

        Returns:
            Success with the Email, or failure with ``Email.Empty`` /
            ``Email.InvalidFormat``
        """
        error = cls._validation_error(raw)
        if error is not None:
            return Result.failure(error)
        return Result.success(cls(raw))  # type: ignore[arg-type]

    @classmethod
    def is_valid(cls, raw: str | None) -> bool:
        """Check if a string is a valid email without creating an instance."""
        return cls._validation_error(raw) is None

    @classmethod
    def _validation_error(cls, raw: str | None) -> Error | None:
        if raw is None or not raw.strip():
            return EmailErrors.EMPTY
        if not cls._PATTERN.match(raw):
            return EmailErrors.INVALID_FORMAT
        return None

    @property
    def value(self) -> str:
        """Get the address string."""
        return self._value

    def _equality_components(self) -> tuple[Any, ...]:
        return (self._value,)

    def __str__(self) -> str:
        return self._value

    def __repr__(self) -> str:
        return f"Email('{self._value}')"
