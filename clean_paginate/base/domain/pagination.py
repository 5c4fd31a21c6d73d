# (c) Nelen & Schuurmans

from enum import Enum
from typing import Any

from pydantic import BaseModel
from pydantic import Field
from pydantic import field_validator

from .filter import Filter
from .types import Json
from .value_object import ValueObject

__all__ = ["SortOrder", "OrderBy", "PageOptions", "PaginateArgs"]


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"


# insertion order matters: the first key is the primary sort key
OrderBy = dict[str, SortOrder]


class PageOptions(BaseModel):
    """The options a Gateway receives for fetching one page.

    When a cursor is given, the result starts *at* the record that it identifies
    (under ``order_by``) and then skips ``offset`` records. When the cursor record
    does not exist, the result is empty.
    """

    limit: int
    offset: int = 0
    order_by: OrderBy = Field(default_factory=lambda: {"id": SortOrder.ASC})
    cursor: Json | None = None

    @field_validator("cursor")
    @classmethod
    def verify_single_cursor_field(cls, value: Json | None) -> Json | None:
        if value is not None and len(value) != 1:
            raise ValueError("a cursor must identify a record by exactly one field")
        return value

    @property
    def cursor_item(self) -> tuple[str, Any]:
        if self.cursor is None:
            raise ValueError("these page options have no cursor")
        ((field, value),) = self.cursor.items()
        return field, value

    def cursor_order(self) -> list[tuple[str, SortOrder]]:
        """The part of ``order_by`` that positions the cursor record.

        Keys after the (unique) cursor field cannot change which records come
        after the cursor, so the order is cut off there. Without the cursor field
        in ``order_by``, this is all of ``order_by``.
        """
        field, _ = self.cursor_item
        result = []
        for name, order in self.order_by.items():
            result.append((name, order))
            if name == field:
                break
        return result


class PaginateArgs(ValueObject):
    """Arguments for paginating through a Gateway.

    ``where`` and ``select`` are passed to the gateway on every fetch. The cursor
    field must be unique under the effective ordering, and the ordering must be
    stable while paginating; neither is checked. Violating this skips or
    duplicates records.
    """

    where: list[Filter] = []
    select: list[str] | None = None
    order_by: OrderBy = {}
    page_size: int = Field(gt=0)
    cursor_field: str | None = None

    def effective_order(self, cursor_field: str) -> OrderBy:
        return {cursor_field: SortOrder.ASC, **self.order_by}
