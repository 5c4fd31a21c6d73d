from .generator import *  # NOQA
from .schema import *  # NOQA
from .templates import *  # NOQA
