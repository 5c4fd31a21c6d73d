from typing import Any

from sqlalchemy.sql import Executable

from clean_paginate import Json

__all__ = ["SQLProvider"]


class SQLProvider:
    """Executes queries for a SQLGateway and returns the rows as dicts.

    Implementations own the connection (and any transaction); this package
    only builds the queries.
    """

    async def execute(
        self, query: Executable, bind_params: dict[str, Any] | None = None
    ) -> list[Json]:
        raise NotImplementedError()
