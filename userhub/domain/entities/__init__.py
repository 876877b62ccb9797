"""Domain entities with business logic."""

from .entity import Entity
from .user import User, UserErrors, UserId
from .user_builder import UserBuilder, UserBuilderErrors, UserDraft, build_user

__all__ = [
    "Entity",
    "User",
    "UserBuilder",
    "UserBuilderErrors",
    "UserDraft",
    "UserErrors",
    "UserId",
    "build_user",
]
