from sqlalchemy import Column
from sqlalchemy import Float
from sqlalchemy import Integer
from sqlalchemy import MetaData
from sqlalchemy import Table
from sqlalchemy import Text

metadata = MetaData()

test_model = Table(
    "test_model",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("t", Text, nullable=False, unique=True),
    Column("f", Float, nullable=False),
    Column("n", Text, nullable=True),
)
