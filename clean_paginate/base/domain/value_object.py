# (c) Nelen & Schuurmans

from typing import Type
from typing import TypeVar

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import ValidationError

from .exceptions import BadRequest

__all__ = ["ValueObject"]


T = TypeVar("T", bound="ValueObject")


class ValueObject(BaseModel):
    """Immutable, validated arguments. Invalid input raises BadRequest."""

    model_config = ConfigDict(frozen=True)

    @classmethod
    def create(cls: Type[T], **values) -> T:
        try:
            return cls(**values)
        except ValidationError as e:
            raise BadRequest(e)

    def merge(self: T, **values) -> T:
        """Return a validated copy with some fields replaced.

        Nested values are kept as instances (not dumped to dicts), so that
        subclasses like ComparisonFilter survive.
        """
        if not values:
            return self
        return self.create(**{**dict(self), **values})
