"""
Domain-level exceptions for the user service.

Validation failures never travel as exceptions; they are returned inside a
``Result``. The exceptions here signal misuse of domain types by calling code.
"""

from typing import Any


class DomainException(Exception):
    """Base exception for all domain-level errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.details = details or {}


class InvalidResultAccessError(DomainException, RuntimeError):
    """
    Raised when the wrong side of a Result is accessed.

    Reading ``value`` from a failed result or ``error`` from a successful one
    is a programming error, not a recoverable domain condition.
    """

    def __init__(self, attempted: str, state: str) -> None:
        super().__init__(
            f"Cannot access {attempted} when result is a {state}.",
            details={"attempted": attempted, "state": state},
        )
        self.attempted = attempted
        self.state = state
