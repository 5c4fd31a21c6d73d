from .in_memory_gateway import *  # NOQA
from .null_gateway import *  # NOQA
