import pytest
from sqlalchemy import Column
from sqlalchemy import ForeignKey
from sqlalchemy import Integer
from sqlalchemy import MetaData
from sqlalchemy import Table
from sqlalchemy import Text
from sqlalchemy import UniqueConstraint


@pytest.fixture
def metadata() -> MetaData:
    result = MetaData()
    Table(
        "writer",
        result,
        Column("id", Integer, primary_key=True, autoincrement=True),
        Column("email", Text, nullable=False, unique=True),
        Column("name", Text, nullable=False),
    )
    Table(
        "book",
        result,
        Column("id", Integer, primary_key=True, autoincrement=True),
        Column("isbn", Text, nullable=False),
        Column("title", Text, nullable=False),
        Column("writer_id", Integer, ForeignKey("writer.id"), nullable=False),
        UniqueConstraint("isbn"),
    )
    Table(
        "book_tag",
        result,
        Column("book_id", Integer, ForeignKey("book.id"), primary_key=True),
        Column("tag", Text, primary_key=True),
    )
    return result
