"""Strongly-typed identifier wrapper."""

from __future__ import annotations

# Standard library imports
from typing import Any, Generic, TypeVar

from ..value_objects.base import ComparableValueObject

T = TypeVar("T")


class StronglyTypedId(ComparableValueObject, Generic[T]):
    """
    Immutable wrapper around a raw identifier value.

    Each entity kind declares its own subclass so identifiers of different
    kinds cannot be mixed up. Two identifiers are equal only when both the
    concrete wrapper type and the wrapped value match.
    """

    __slots__ = ("_value",)

    def __init__(self, value: T) -> None:
        self._value = value

    @property
    def value(self) -> T:
        """Get the wrapped raw identifier."""
        return self._value

    def _equality_components(self) -> tuple[Any, ...]:
        return (self._value,)

    def compare_to(self, other: StronglyTypedId[T] | None) -> int:
        """
        Three-way comparison by the wrapped value.

        Returns:
            1 if ``other`` is None, otherwise -1, 0 or 1
        """
        if other is None:
            return 1
        if self < other:
            return -1
        if other < self:
            return 1
        return 0

    def __lt__(self, other: StronglyTypedId[T]) -> bool:
        """Order by the natural ordering of the wrapped value."""
        if type(other) is not type(self):
            raise TypeError(f"Cannot compare {type(self).__name__} and {type(other).__name__}")
        return self._value < other._value  # type: ignore[operator]

    def __str__(self) -> str:
        return str(self._value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value!r})"
