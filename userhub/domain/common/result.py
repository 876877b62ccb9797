"""Result type used as the return value of every fallible domain operation."""

from __future__ import annotations

# Standard library imports
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar, cast

from ..exceptions import InvalidResultAccessError

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class Error:
    """Machine-readable code plus a human-readable message."""

    code: str
    message: str

    def to_dict(self) -> dict[str, str]:
        """Serialize to the ``{code, message}`` shape exposed to callers."""
        return {"code": self.code, "message": self.message}

    def __str__(self) -> str:
        return f"{self.code}: {self.message}"


class Result(Generic[T]):
    """
    Tagged union of a successful value or an Error.

    Exactly one side is accessible. Instances are immutable; build them with
    ``Result.success``, ``Result.failure`` or ``Result.of``.
    """

    __slots__ = ("_is_success", "_value", "_error")

    def __init__(self, is_success: bool, value: T | None, error: Error | None) -> None:
        if is_success and error is not None:
            raise ValueError("A successful result cannot carry an error")
        if not is_success and error is None:
            raise ValueError("A failed result requires an error")

        object.__setattr__(self, "_is_success", is_success)
        object.__setattr__(self, "_value", value)
        object.__setattr__(self, "_error", error)

    @classmethod
    def success(cls, value: T) -> Result[T]:
        """Create a successful result wrapping ``value``."""
        return cls(True, value, None)

    @classmethod
    def failure(cls, error: Error) -> Result[T]:
        """Create a failed result carrying ``error``."""
        return cls(False, None, error)

    @classmethod
    def of(cls, outcome: T | Error) -> Result[T]:
        """
        Wrap a bare value or a bare Error.

        An ``Error`` becomes a failure; any other object becomes a success.
        """
        if isinstance(outcome, Error):
            return cls.failure(outcome)
        return cls.success(outcome)

    @property
    def is_success(self) -> bool:
        return self._is_success

    @property
    def is_failure(self) -> bool:
        return not self._is_success

    @property
    def value(self) -> T:
        """
        The success value.

        Raises:
            InvalidResultAccessError: If the result is a failure
        """
        if not self._is_success:
            raise InvalidResultAccessError("value", "failure")
        return cast(T, self._value)

    @property
    def error(self) -> Error:
        """
        The failure error.

        Raises:
            InvalidResultAccessError: If the result is a success
        """
        if self._is_success:
            raise InvalidResultAccessError("error", "success")
        return cast(Error, self._error)

    def map(self, func: Callable[[T], U]) -> Result[U]:
        """Transform the success value; failures pass through untouched."""
        if self._is_success:
            return Result.success(func(cast(T, self._value)))
        return Result.failure(cast(Error, self._error))

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"Cannot modify immutable result attribute '{name}'")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Result):
            return False
        return (self._is_success, self._value, self._error) == (
            other._is_success,
            other._value,
            other._error,
        )

    def __hash__(self) -> int:
        return hash((self._is_success, self._value, self._error))

    def __repr__(self) -> str:
        if self._is_success:
            return f"Result.success({self._value!r})"
        return f"Result.failure({self._error!r})"
