# (c) Nelen & Schuurmans

from abc import ABC
from abc import abstractmethod
from collections.abc import Sequence
from typing import List
from typing import Optional

from .filter import Filter
from .pagination import PageOptions
from .types import Page

__all__ = ["Gateway", "SyncGateway"]


class Gateway(ABC):
    """The data source a Paginator fetches pages from.

    ``filter`` returns the records matching all ``filters``. With ``params``,
    they are ordered by ``params.order_by``, start at ``params.cursor`` (if
    given), skip ``params.offset`` records and hold at most ``params.limit``
    records. Without ``params`` the result is unordered and unlimited.
    With ``select``, each record only holds the listed fields.

    Errors are raised as-is; the paginator does not catch them.
    """

    @abstractmethod
    async def filter(
        self,
        filters: List[Filter],
        params: Optional[PageOptions] = None,
        select: Optional[Sequence[str]] = None,
    ) -> Page:
        pass


# This is a copy-paste of Gateway, but with all the async / await removed


class SyncGateway(ABC):
    @abstractmethod
    def filter(
        self,
        filters: List[Filter],
        params: Optional[PageOptions] = None,
        select: Optional[Sequence[str]] = None,
    ) -> Page:
        pass
