"""
Base Use Case

Provides the foundation for all use cases in the application layer.
Implements common patterns like logging, request validation, and fault
propagation. Domain failures are returned as a ``Result``; infrastructure
faults are logged and re-raised for the boundary layer to translate.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Generic, TypeVar
from uuid import UUID, uuid4

from userhub.domain.common.result import Error, Result

logger = logging.getLogger(__name__)

# Type variables for request and response
TRequest = TypeVar("TRequest")
TResponse = TypeVar("TResponse")


@dataclass(kw_only=True)
class UseCaseRequest:
    """Base class for use case requests."""

    request_id: UUID = field(default_factory=uuid4)
    correlation_id: UUID | None = None


class UseCase(ABC, Generic[TRequest, TResponse]):
    """
    Abstract base class for all use cases.

    Provides a consistent interface and common functionality for
    business logic orchestration.
    """

    def __init__(self, name: str | None = None) -> None:
        """
        Initialize use case.

        Args:
            name: Optional name for the use case (defaults to class name)
        """
        self.name = name or self.__class__.__name__
        self.logger = logging.getLogger(f"{__name__}.{self.name}")

    async def execute(self, request: TRequest) -> Result[TResponse]:
        """
        Execute the use case.

        This method provides the template for use case execution with
        logging, validation, and error handling.

        Args:
            request: The use case request

        Returns:
            Success with the response, or failure with a domain Error

        Raises:
            Exception: Any infrastructure fault raised while processing
        """
        correlation_id = getattr(request, "correlation_id", None)
        context = {
            "request_id": str(getattr(request, "request_id", None) or uuid4()),
            "correlation_id": str(correlation_id) if correlation_id else None,
        }

        self.logger.info(
            f"Executing {self.name}",
            extra={**context, "use_case": self.name},
        )

        try:
            validation_error = await self.validate(request)
            if validation_error is not None:
                self.logger.warning(
                    f"Validation failed for {self.name}: {validation_error}",
                    extra={**context, "error_code": validation_error.code},
                )
                return Result.failure(validation_error)

            result = await self.process(request)

        except Exception as e:
            self.logger.error(
                f"Error executing {self.name}: {e}",
                extra=context,
                exc_info=True,
            )
            raise

        if result.is_success:
            self.logger.info(
                f"Successfully executed {self.name}",
                extra=context,
            )
        else:
            self.logger.info(
                f"{self.name} rejected: {result.error}",
                extra={**context, "error_code": result.error.code},
            )

        return result

    async def validate(self, request: TRequest) -> Error | None:
        """
        Validate the request before processing.

        Args:
            request: The request to validate

        Returns:
            Error if validation fails, None otherwise
        """
        return None

    @abstractmethod
    async def process(self, request: TRequest) -> Result[TResponse]:
        """
        Process the request and execute business logic.

        Args:
            request: The validated request

        Returns:
            The result of the operation
        """
        pass
