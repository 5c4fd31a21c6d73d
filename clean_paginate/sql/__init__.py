from .sql_builder import *  # NOQA
from .sql_gateway import *  # NOQA
from .sql_provider import *  # NOQA
