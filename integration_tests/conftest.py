# (c) Nelen & Schuurmans

import os
from typing import Any

import pytest
import pytest_asyncio
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncConnection
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.sql import Executable

from clean_paginate import Json
from clean_paginate.sql import SQLProvider


def pytest_collection_modifyitems(items):
    # the database engine is shared, so all tests run in the session event loop
    marker = pytest.mark.asyncio(loop_scope="session")
    for item in items:
        if pytest_asyncio.is_async_test(item):
            item.add_marker(marker, append=False)


@pytest.fixture(scope="session")
def postgres_url():
    return os.environ.get("POSTGRES_URL", "postgres:postgres@localhost:5432")


@pytest_asyncio.fixture(scope="session", loop_scope="session")
async def postgres_db_url(postgres_url) -> str:
    from .sql_model import metadata

    dbname = "cleanpaginate_test"
    root_engine = create_async_engine(
        f"postgresql+asyncpg://{postgres_url}", isolation_level="AUTOCOMMIT"
    )
    async with root_engine.connect() as connection:
        await connection.execute(text(f"DROP DATABASE IF EXISTS {dbname}"))
        await connection.execute(text(f"CREATE DATABASE {dbname}"))
    await root_engine.dispose()

    engine = create_async_engine(f"postgresql+asyncpg://{postgres_url}/{dbname}")
    async with engine.begin() as connection:
        await connection.run_sync(metadata.drop_all)
        await connection.run_sync(metadata.create_all)
    await engine.dispose()
    return f"{postgres_url}/{dbname}"


class ConnectionProvider(SQLProvider):
    """Runs the queries of a SQLGateway on one (test) connection."""

    def __init__(self, connection: AsyncConnection):
        self.connection = connection

    async def execute(
        self, query: Executable, bind_params: dict[str, Any] | None = None
    ) -> list[Json]:
        result = await self.connection.execute(query, bind_params)
        return [x._asdict() for x in result.fetchall()]


@pytest_asyncio.fixture(scope="session", loop_scope="session")
async def engine(postgres_db_url):
    engine = create_async_engine(f"postgresql+asyncpg://{postgres_db_url}")
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture(loop_scope="session")
async def provider(engine):
    async with engine.connect() as connection:
        transaction = await connection.begin()
        yield ConnectionProvider(connection)
        await transaction.rollback()
