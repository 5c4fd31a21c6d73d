# (c) Nelen & Schuurmans

import logging
from collections.abc import AsyncIterator
from collections.abc import Iterator
from typing import Any
from typing import Generic
from typing import Optional
from typing import TypeVar
from typing import Union

from clean_paginate.base.domain import BadRequest
from clean_paginate.base.domain import Gateway
from clean_paginate.base.domain import Page
from clean_paginate.base.domain import NoCursorField
from clean_paginate.base.domain import PageOptions
from clean_paginate.base.domain import PaginateArgs
from clean_paginate.base.domain import SyncGateway

__all__ = ["Paginator", "PageSequence", "SyncPaginator", "SyncPageSequence"]


logger = logging.getLogger(__name__)

G = TypeVar("G", bound=Union[Gateway, SyncGateway])


class BasePageSequence(Generic[G]):
    """Pagination state of one traversal over a gateway.

    The first page starts at the beginning of the ordering. Every next page
    starts one record after the record holding ``last_cursor`` (so not at the
    first value larger than ``last_cursor``). The traversal ends when a fetch
    returns no records; a short page does not end it.
    """

    def __init__(
        self,
        gateway: G,
        args: PaginateArgs,
        cursor_field: str,
        name: Optional[str] = None,
    ):
        self.gateway = gateway
        self.args = args
        self.cursor_field = cursor_field
        self.name = name or gateway.__class__.__name__
        self.order_by = args.effective_order(cursor_field)
        self.last_cursor: Any = None
        self.pages_fetched = 0
        self.exhausted = False

    def next_page_options(self) -> PageOptions:
        if self.pages_fetched == 0:
            return PageOptions(limit=self.args.page_size, order_by=self.order_by)
        return PageOptions(
            limit=self.args.page_size,
            offset=1,
            order_by=self.order_by,
            cursor={self.cursor_field: self.last_cursor},
        )

    def _before_fetch(self) -> PageOptions:
        logger.debug(
            "Fetching page %d of %s (cursor_field=%s, page_size=%d)",
            self.pages_fetched + 1,
            self.name,
            self.cursor_field,
            self.args.page_size,
        )
        return self.next_page_options()

    def _after_fetch(self, page: Page) -> bool:
        if not page:
            logger.debug(
                "Done paginating %s after %d page(s)", self.name, self.pages_fetched
            )
            self.exhausted = True
            return False
        self.last_cursor = page[-1][self.cursor_field]
        self.pages_fetched += 1
        return True


class PageSequence(BasePageSequence[Gateway], AsyncIterator[Page]):
    """Async iterator over pages (lists of records). It can be consumed once.

    Gateway errors propagate from ``__anext__`` and leave the state untouched,
    so the same page can be requested again.
    """

    def __aiter__(self) -> "PageSequence":
        return self

    async def __anext__(self) -> Page:
        if self.exhausted:
            raise StopAsyncIteration()
        params = self._before_fetch()
        page = await self.gateway.filter(
            self.args.where, params=params, select=self.args.select
        )
        if not self._after_fetch(page):
            raise StopAsyncIteration()
        return page

    async def all(self) -> Page:
        return [x async for page in self for x in page]


class SyncPageSequence(BasePageSequence[SyncGateway], Iterator[Page]):
    def __iter__(self) -> "SyncPageSequence":
        return self

    def __next__(self) -> Page:
        if self.exhausted:
            raise StopIteration()
        params = self._before_fetch()
        page = self.gateway.filter(
            self.args.where, params=params, select=self.args.select
        )
        if not self._after_fetch(page):
            raise StopIteration()
        return page

    def all(self) -> Page:
        return [x for page in self for x in page]


class BasePaginator(Generic[G]):
    def __init__(
        self,
        gateway: G,
        default_cursor_field: Optional[str] = None,
        name: Optional[str] = None,
    ):
        self.gateway = gateway
        self.default_cursor_field = default_cursor_field
        self.name = name

    def resolve(
        self, args: Optional[PaginateArgs] = None, **values
    ) -> tuple[PaginateArgs, str]:
        """Validate the arguments and determine the cursor field.

        This fails fast, before anything is fetched.
        """
        if args is None:
            args = PaginateArgs.create(**values)
        else:
            args = args.merge(**values)
        cursor_field = args.cursor_field or self.default_cursor_field
        if cursor_field is None:
            raise NoCursorField(self.name)
        if args.select is not None and cursor_field not in args.select:
            raise BadRequest(f"select must include the cursor field '{cursor_field}'")
        return args, cursor_field


class Paginator(BasePaginator[Gateway]):
    """Binds a Gateway and its default cursor field into a pagination entrypoint.

    Every call returns a new, independent PageSequence:

    >>> paginate = Paginator(gateway, "id")
    >>> active = Filter(field="status", values=["active"])
    >>> async for page in paginate(page_size=100, where=[active]):
    ...     print(len(page))
    """

    def __call__(self, args: Optional[PaginateArgs] = None, **values) -> PageSequence:
        args, cursor_field = self.resolve(args, **values)
        return PageSequence(self.gateway, args, cursor_field, name=self.name)


class SyncPaginator(BasePaginator[SyncGateway]):
    def __call__(
        self, args: Optional[PaginateArgs] = None, **values
    ) -> SyncPageSequence:
        args, cursor_field = self.resolve(args, **values)
        return SyncPageSequence(self.gateway, args, cursor_field, name=self.name)
