"""
Entity base class - identity-based equality for domain objects
"""

from __future__ import annotations

# Standard library imports
from typing import Any, ClassVar, Generic, TypeVar

from ..common.strongly_typed_id import StronglyTypedId

TId = TypeVar("TId", bound=StronglyTypedId[Any])


class Entity(Generic[TId]):
    """
    Base class for objects compared by a stable identifier.

    A concrete entity may declare a ``kind`` discriminant in its class
    statement::

        class User(Entity[UserId], kind="user"):
            ...

    Two entities are equal iff their kinds match and their identifiers are
    equal; all other attributes are ignored. When no kind is given the
    qualified class name is used, subclasses included. A kind belongs to
    exactly one class.
    """

    entity_kind: ClassVar[str] = "entity"
    _kinds: ClassVar[dict[str, type[Entity[Any]]]] = {}

    def __init_subclass__(cls, kind: str | None = None, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        name = f"{cls.__module__}.{cls.__qualname__}"
        entity_kind = kind or name

        owner = Entity._kinds.get(entity_kind)
        # Re-executing the same class statement (module reload) keeps its kind.
        if owner is not None and f"{owner.__module__}.{owner.__qualname__}" != name:
            raise TypeError(
                f"Entity kind '{entity_kind}' is already used by {owner.__qualname__}"
            )

        Entity._kinds[entity_kind] = cls
        cls.entity_kind = entity_kind

    def __init__(self, id: TId) -> None:
        if id is None:
            raise ValueError(f"{type(self).__name__} requires an identifier")
        self._kind = self.entity_kind
        self._id = id

    @property
    def id(self) -> TId:
        """Get the entity identifier."""
        return self._id

    @property
    def kind(self) -> str:
        """Get the discriminant set at construction."""
        return self._kind

    def __setattr__(self, name: str, value: Any) -> None:
        if name in ("_id", "_kind") and name in self.__dict__:
            raise AttributeError(f"Cannot reassign '{name}' of {type(self).__name__}")
        super().__setattr__(name, value)

    def __eq__(self, other: object) -> bool:
        if other is self:
            return True
        if not isinstance(other, Entity):
            return False
        if self._kind != other._kind:
            return False
        return self._id == other._id

    def __ne__(self, other: object) -> bool:
        return not self == other

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self._id!r})"
