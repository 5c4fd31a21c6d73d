# (c) Nelen & Schuurmans

import operator
from enum import Enum
from typing import Any

from pydantic import model_validator

from .types import Json
from .value_object import ValueObject

__all__ = ["Filter", "ComparisonFilter", "ComparisonOperator"]


class Filter(ValueObject):
    """A record matches if its ``field`` equals any of ``values``.

    An empty ``values`` list matches nothing. A list of filters is AND-ed.
    """

    field: str
    values: list[Any]

    def matches(self, record: Json) -> bool:
        return record.get(self.field) in self.values


class ComparisonOperator(str, Enum):
    LT = "lt"
    LE = "le"
    GE = "ge"
    GT = "gt"
    EQ = "eq"
    NE = "ne"

    def apply(self, left: Any, right: Any) -> Any:
        """Compare two values; also builds SQL expressions when given columns."""
        return getattr(operator, self.value)(left, right)


class ComparisonFilter(Filter):
    """A record matches if ``record[field] <operator> values[0]``.

    Records with a missing or None value never match.
    """

    operator: ComparisonOperator

    @model_validator(mode="after")
    def verify_single_value(self):
        if len(self.values) != 1:
            raise ValueError("ComparisonFilter needs to have exactly one value")
        return self

    def matches(self, record: Json) -> bool:
        value = record.get(self.field)
        if value is None:
            return False
        return self.operator.apply(value, self.values[0])
