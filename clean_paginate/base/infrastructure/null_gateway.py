from collections.abc import Sequence
from typing import List
from typing import Optional

from clean_paginate.base.domain import Filter
from clean_paginate.base.domain import Gateway
from clean_paginate.base.domain import Page
from clean_paginate.base.domain import PageOptions

__all__ = ["NullGateway"]


class NullGateway(Gateway):
    async def filter(
        self,
        filters: List[Filter],
        params: Optional[PageOptions] = None,
        select: Optional[Sequence[str]] = None,
    ) -> Page:
        return []
