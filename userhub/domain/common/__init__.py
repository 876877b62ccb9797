"""Building blocks shared by every entity and use case."""

from .result import Error, Result
from .strongly_typed_id import StronglyTypedId

__all__ = ["Error", "Result", "StronglyTypedId"]
