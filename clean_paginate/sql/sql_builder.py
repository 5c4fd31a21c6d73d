from collections.abc import Sequence

from sqlalchemy import and_
from sqlalchemy import Column
from sqlalchemy import Executable
from sqlalchemy import or_
from sqlalchemy import select
from sqlalchemy import Table
from sqlalchemy.sql.expression import ColumnElement
from sqlalchemy.sql.expression import false

from clean_paginate import BadRequest
from clean_paginate import ComparisonFilter
from clean_paginate import Filter
from clean_paginate import OrderBy
from clean_paginate import PageOptions
from clean_paginate import SortOrder

__all__ = ["SQLBuilder"]


def _after(column: ColumnElement, value: ColumnElement, order: SortOrder):
    """Strictly after ``value`` in ``order``, with NULL as the largest value.

    This matches the PostgreSQL default (NULLS LAST for ASC, NULLS FIRST for
    DESC) and the in-memory gateway.
    """
    if order is SortOrder.ASC:
        return or_(column > value, and_(column.is_(None), value.is_not(None)))
    else:
        return or_(column < value, and_(column.is_not(None), value.is_(None)))


class SQLBuilder:
    def __init__(self, table: Table):
        self.table = table

    def _column(self, name: str) -> Column:
        try:
            return self.table.c[name]
        except KeyError:
            raise BadRequest(f"unknown field '{name}' for {self.table.name}")

    def _filter_to_sql(self, filter: Filter) -> ColumnElement:
        try:
            column = getattr(self.table.c, filter.field)
        except AttributeError:
            return false()
        if isinstance(filter, ComparisonFilter):
            return filter.operator.apply(column, filter.values[0])
        if len(filter.values) == 0:
            return false()
        elif len(filter.values) == 1:
            return column == filter.values[0]
        else:
            return column.in_(filter.values)

    def _filters_to_sql(self, filters: list[Filter]) -> list[ColumnElement]:
        return [self._filter_to_sql(x) for x in filters]

    def _order_by_to_sql(self, order_by: OrderBy) -> list[ColumnElement]:
        return [
            self._column(name).asc()
            if order is SortOrder.ASC
            else self._column(name).desc()
            for (name, order) in order_by.items()
        ]

    def _cursor_to_sql(self, params: PageOptions) -> ColumnElement:
        """Select the cursor record and everything after it in the given order.

        This is a keyset condition: the order columns of each row are compared
        lexicographically with those of the cursor record, which is looked up in
        subqueries. Only the order columns up to the cursor field take part.
        """
        field, value = params.cursor_item
        cursor_row = self.table.alias("cursor_row")
        lookup = self._column(field)

        def at_cursor(name: str) -> ColumnElement:
            return (
                select(cursor_row.c[name])
                .where(cursor_row.c[lookup.key] == value)
                .scalar_subquery()
            )

        items = params.cursor_order() or [(field, SortOrder.ASC)]
        name, order = items[-1]
        column = self._column(name)
        if name == field:
            # the cursor field identifies the cursor record, so it is not NULL
            if order is SortOrder.ASC:
                result = column >= at_cursor(name)
            else:
                result = column <= at_cursor(name)
        else:
            result = or_(
                _after(column, at_cursor(name), order),
                column.is_not_distinct_from(at_cursor(name)),
            )
        for name, order in reversed(items[:-1]):
            column = self._column(name)
            result = or_(
                _after(column, at_cursor(name), order),
                and_(column.is_not_distinct_from(at_cursor(name)), result),
            )
        return result

    def select(
        self,
        filters: list[Filter],
        params: PageOptions | None = None,
        select_fields: Sequence[str] | None = None,
    ) -> Executable:
        if select_fields is None:
            query = select(self.table)
        else:
            query = select(*[self._column(x) for x in select_fields])
        query = query.where(*self._filters_to_sql(filters))
        if params is not None:
            if params.cursor is not None:
                query = query.where(self._cursor_to_sql(params))
            query = (
                query.order_by(*self._order_by_to_sql(params.order_by))
                .limit(params.limit)
                .offset(params.offset)
            )
        return query
