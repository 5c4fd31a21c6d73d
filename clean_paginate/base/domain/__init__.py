from .exceptions import *  # NOQA
from .filter import *  # NOQA
from .gateway import *  # NOQA
from .pagination import *  # NOQA
from .types import *  # NOQA
from .value_object import *  # NOQA
