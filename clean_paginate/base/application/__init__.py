from .client import *  # NOQA
from .paginator import *  # NOQA
