# (c) Nelen & Schuurmans
from collections.abc import Sequence

import inject
from sqlalchemy import Table
from sqlalchemy.sql import Executable

from clean_paginate import Filter
from clean_paginate import Gateway
from clean_paginate import Json
from clean_paginate import Page
from clean_paginate import PageOptions

from .sql_builder import SQLBuilder
from .sql_provider import SQLProvider

__all__ = ["SQLGateway"]


class SQLGateway(Gateway):
    """A Gateway for one table; subclass it with the table as keyword argument:

    >>> class BookGateway(SQLGateway, table=book):
    ...     pass

    The SQLProvider is injected unless given explicitly.
    """

    table: Table

    def __init__(self, provider_override: SQLProvider | None = None):
        self.provider_override = provider_override
        self.builder = SQLBuilder(self.table)

    @property
    def provider(self) -> SQLProvider:
        return self.provider_override or inject.instance(SQLProvider)

    def __init_subclass__(cls, table: Table) -> None:
        cls.table = table
        super().__init_subclass__()

    async def execute(self, query: Executable) -> list[Json]:
        return await self.provider.execute(query)

    async def filter(
        self,
        filters: list[Filter],
        params: PageOptions | None = None,
        select: Sequence[str] | None = None,
    ) -> Page:
        return await self.execute(self.builder.select(filters, params, select))
