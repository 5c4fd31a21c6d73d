# (c) Nelen & Schuurmans

import pytest
import pytest_asyncio
from sqlalchemy import insert

from clean_paginate import Filter
from clean_paginate import InMemoryGateway
from clean_paginate import PageOptions
from clean_paginate import Paginator
from clean_paginate.sql import SQLGateway

from .sql_model import test_model


class TstSQLGateway(SQLGateway, table=test_model):
    pass


@pytest.fixture
def sql_gateway(provider):
    return TstSQLGateway(provider)


@pytest_asyncio.fixture(loop_scope="session")
async def records(provider):
    # f has duplicates, t is unique and in reverse order of id, n has a NULL
    values = [
        {"t": "e", "f": 1.0, "n": "a"},
        {"t": "d", "f": 2.0, "n": None},
        {"t": "c", "f": 1.0, "n": "c"},
        {"t": "b", "f": 2.0, "n": "d"},
        {"t": "a", "f": 1.0, "n": "b"},
    ]
    return await provider.execute(
        insert(test_model).values(values).returning(*test_model.c)
    )


async def collect(sequence):
    return [[x["t"] for x in page] async for page in sequence]


@pytest.mark.parametrize("page_size", [1, 2, 5, 10])
async def test_paginate(sql_gateway, records, page_size):
    pages = await collect(Paginator(sql_gateway, "id")(page_size=page_size))
    assert [x for page in pages for x in page] == ["e", "d", "c", "b", "a"]
    assert all(len(page) == page_size for page in pages[:-1])


async def test_paginate_cursor_field(sql_gateway, records):
    pages = await collect(Paginator(sql_gateway, "id")(page_size=2, cursor_field="t"))
    assert pages == [["a", "b"], ["c", "d"], ["e"]]


async def test_paginate_desc(sql_gateway, records):
    sequence = Paginator(sql_gateway, "id")(page_size=2, order_by={"id": "desc"})
    assert await collect(sequence) == [["a", "b"], ["c", "d"], ["e"]]


@pytest.mark.parametrize("order", ["asc", "desc"])
async def test_paginate_order_by_nullable(sql_gateway, records, order):
    sequence = Paginator(sql_gateway, "id")(page_size=2, order_by={"n": order})
    assert await collect(sequence) == [["e", "d"], ["c", "b"], ["a"]]


@pytest.mark.parametrize(
    "order_by",
    [{"n": "asc", "id": "asc"}, {"n": "desc", "id": "asc"}, {"f": "desc", "n": "asc"}],
)
@pytest.mark.parametrize("cursor", ["e", "d", "c", "b", "a"])
async def test_cursor_same_as_in_memory(sql_gateway, records, order_by, cursor):
    # keys before the cursor field, including NULLs, position like in memory
    params = PageOptions(limit=10, order_by=order_by, cursor={"t": cursor})
    expected = await InMemoryGateway(records).filter([], params=params)
    actual = await sql_gateway.filter([], params=params)
    assert [x["t"] for x in actual] == [x["t"] for x in expected]


async def test_paginate_where(sql_gateway, records):
    sequence = Paginator(sql_gateway, "id")(
        page_size=2, where=[Filter(field="f", values=[1.0])]
    )
    assert await collect(sequence) == [["e", "c"], ["a"]]


async def test_paginate_select(sql_gateway, records):
    sequence = Paginator(sql_gateway, "id")(page_size=3, select=["id", "t"])
    pages = [page async for page in sequence]
    assert set(pages[0][0]) == {"id", "t"}


async def test_paginate_no_records(sql_gateway):
    assert await collect(Paginator(sql_gateway, "id")(page_size=2)) == []
