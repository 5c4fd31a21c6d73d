# (c) Nelen & Schuurmans

from collections.abc import Iterator
from collections.abc import Mapping
from typing import Optional
from typing import Union

from clean_paginate.base.domain import DoesNotExist
from clean_paginate.base.domain import Gateway
from clean_paginate.base.domain import PaginateArgs
from clean_paginate.base.domain import SyncGateway

from .paginator import PageSequence
from .paginator import Paginator
from .paginator import SyncPageSequence
from .paginator import SyncPaginator

__all__ = ["PaginatedDelegate", "PaginatedClient", "with_pagination"]


AnyGateway = Union[Gateway, SyncGateway]


class PaginatedDelegate:
    """One model of a PaginatedClient: its gateway plus a bound paginator."""

    paginate: Union[Paginator, SyncPaginator]

    def __init__(
        self, name: str, gateway: AnyGateway, default_cursor_field: Optional[str]
    ):
        self.name = name
        self.gateway = gateway
        self.default_cursor_field = default_cursor_field
        if isinstance(gateway, SyncGateway):
            self.paginate = SyncPaginator(gateway, default_cursor_field, name=name)
        else:
            self.paginate = Paginator(gateway, default_cursor_field, name=name)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}({self.name!r}, "
            f"default_cursor_field={self.default_cursor_field!r})"
        )


class PaginatedClient(Mapping[str, PaginatedDelegate]):
    """Adds pagination to a set of gateways, one gateway per model.

    The gateways are not modified. The default cursor field per model typically
    comes from a generated module (see ``clean_paginate.generator``).
    """

    has_pagination = True

    def __init__(
        self,
        gateways: Mapping[str, AnyGateway],
        cursor_fields: Mapping[str, Optional[str]],
    ):
        self._delegates = {
            name: PaginatedDelegate(name, gateway, cursor_fields.get(name))
            for name, gateway in gateways.items()
        }

    def __getitem__(self, name: str) -> PaginatedDelegate:
        try:
            return self._delegates[name]
        except KeyError:
            raise DoesNotExist("model", name)

    def __iter__(self) -> Iterator[str]:
        return iter(self._delegates)

    def __len__(self) -> int:
        return len(self._delegates)

    def paginate(
        self, name: str, args: Optional[PaginateArgs] = None, **values
    ) -> Union[PageSequence, SyncPageSequence]:
        return self[name].paginate(args, **values)


def with_pagination(
    gateways: Mapping[str, AnyGateway], cursor_fields: Mapping[str, Optional[str]]
) -> PaginatedClient:
    return PaginatedClient(gateways, cursor_fields)
