# -*- coding: utf-8 -*-
# (c) Nelen & Schuurmans

from .base.application.client import *  # NOQA
from .base.application.paginator import *  # NOQA
from .base.domain.exceptions import *  # NOQA
from .base.domain.filter import *  # NOQA
from .base.domain.gateway import *  # NOQA
from .base.domain.pagination import *  # NOQA
from .base.domain.types import *  # NOQA
from .base.domain.value_object import ValueObject  # NOQA
from .base.infrastructure.in_memory_gateway import *  # NOQA
from .base.infrastructure.null_gateway import NullGateway  # NOQA

# fmt: off
__version__ = '0.1.0.dev0'
# fmt: on
