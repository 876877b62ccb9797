"""Immutable value objects for type safety."""

from .base import ComparableValueObject, ValueObject
from .email import Email, EmailErrors

__all__ = ["ComparableValueObject", "Email", "EmailErrors", "ValueObject"]
