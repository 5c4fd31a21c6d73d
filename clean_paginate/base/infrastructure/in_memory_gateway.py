# (c) Nelen & Schuurmans

from collections.abc import Sequence
from copy import deepcopy
from typing import Any
from typing import List
from typing import Optional

from clean_paginate.base.domain import Filter
from clean_paginate.base.domain import Gateway
from clean_paginate.base.domain import Json
from clean_paginate.base.domain import Page
from clean_paginate.base.domain import PageOptions
from clean_paginate.base.domain import SortOrder
from clean_paginate.base.domain import SyncGateway

__all__ = ["InMemoryGateway", "InMemorySyncGateway"]


def _sort_key(field: str):
    # None sorts as the largest value: last for asc, first for desc (as in PostgreSQL)
    def key(x: Json) -> tuple[bool, Any]:
        return (x.get(field) is None, x.get(field))

    return key


def _paginate(objs: Page, params: PageOptions) -> Page:
    # sort by the least significant key first; list.sort is stable
    for field, order in reversed(params.order_by.items()):
        objs.sort(key=_sort_key(field), reverse=order is SortOrder.DESC)
    if params.cursor is not None:
        field, value = params.cursor_item
        for start, x in enumerate(objs):
            if x.get(field) == value:
                break
        else:
            return []
        objs = objs[start:]
    return objs[params.offset : params.offset + params.limit]


def _filter(
    data: Page,
    filters: List[Filter],
    params: Optional[PageOptions],
    select: Optional[Sequence[str]],
) -> Page:
    result = [deepcopy(x) for x in data if all(f.matches(x) for f in filters)]
    if params is not None:
        result = _paginate(result, params)
    if select is not None:
        result = [{k: x[k] for k in select if k in x} for x in result]
    return result


class InMemoryGateway(Gateway):
    """For testing purposes"""

    def __init__(self, data: Page):
        self.data = [deepcopy(x) for x in data]

    async def filter(
        self,
        filters: List[Filter],
        params: Optional[PageOptions] = None,
        select: Optional[Sequence[str]] = None,
    ) -> Page:
        return _filter(self.data, filters, params, select)


class InMemorySyncGateway(SyncGateway):
    """For testing purposes"""

    def __init__(self, data: Page):
        self.data = [deepcopy(x) for x in data]

    def filter(
        self,
        filters: List[Filter],
        params: Optional[PageOptions] = None,
        select: Optional[Sequence[str]] = None,
    ) -> Page:
        return _filter(self.data, filters, params, select)
