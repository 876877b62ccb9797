"""Base classes for value objects."""

# Standard library imports
from abc import ABC, abstractmethod
from functools import total_ordering
from typing import Any, Self


class ValueObject(ABC):
    """Abstract base class for all value objects.

    Provides common functionality for value objects including:
    - Immutability enforcement
    - Equality comparison by contained data
    - Hashability
    """

    __slots__ = ()  # Subclasses should define their own __slots__

    @abstractmethod
    def _equality_components(self) -> tuple[Any, ...]:
        """Return the data that defines this value object's identity."""
        pass

    def __eq__(self, other: object) -> bool:
        """Check equality with another value object of the same type."""
        if other is self:
            return True
        if type(other) is not type(self):
            return False
        return self._equality_components() == other._equality_components()  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        """Get hash for use in sets/dicts."""
        return hash((type(self), self._equality_components()))

    @abstractmethod
    def __repr__(self) -> str:
        """Get string representation for debugging."""
        pass

    def __setattr__(self, name: str, value: Any) -> None:
        """Prevent modification after initialization."""
        if hasattr(self, name):
            raise AttributeError(f"Cannot modify immutable value object attribute '{name}'")
        super().__setattr__(name, value)


@total_ordering
class ComparableValueObject(ValueObject):
    """Base class for value objects that support comparison operations.

    Subclasses need only implement __lt__ thanks to @total_ordering.
    """

    __slots__ = ()

    @abstractmethod
    def __lt__(self, other: Self) -> bool:
        """Check if less than another value object."""
        pass
