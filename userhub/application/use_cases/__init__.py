"""
Application Use Cases

Each use case orchestrates one business operation on top of the domain
layer and the repository contracts.
"""

from .base import UseCase, UseCaseRequest
from .users import CreateUserRequest, CreateUserUseCase, UserResponse

__all__ = [
    "UseCase",
    "UseCaseRequest",
    "CreateUserRequest",
    "CreateUserUseCase",
    "UserResponse",
]
