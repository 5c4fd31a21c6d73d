import re
from textwrap import dedent
from typing import Optional

from .schema import get_default_cursor_fields
from .schema import ModelInfo

__all__ = [
    "indent_string",
    "quote",
    "render_type_stubs",
    "render_client_module",
]


HEADER = "# Generated by clean-paginate. Do not edit."

NON_BLANK_LINE = re.compile(r"^(?!\s*$)", re.MULTILINE)

# templates are dedented first and filled in afterwards, so that multiline
# values do not interfere with the dedent

STUB_IMPORTS = dedent(
    """
    from collections.abc import Mapping
    from typing import Literal
    from typing import overload
    from typing import Protocol
    from typing import Required
    from typing import TypedDict
    from typing import Unpack

    from clean_paginate import Filter
    from clean_paginate import Gateway
    from clean_paginate import PageSequence
    from clean_paginate import PaginateArgs
    from clean_paginate import PaginatedClient
    from clean_paginate import SortOrder
    from clean_paginate import SyncGateway
    from clean_paginate import SyncPageSequence
    """
).strip()

PAGINATE_ARGS = dedent(
    '''
    class {model}PaginateArgs(TypedDict, total=False):
        where: list[Filter]
        """Filter, which {model}s to fetch."""
        select: list[{model}Field] | None
        """Select specific fields to fetch from the {model}."""
        order_by: dict[{model}Field, SortOrder | Literal["asc", "desc"]]
        """Determine the order of {model}s to fetch."""
        page_size: Required[int]
        """Items to be fetched per page."""
        cursor_field: {cursor_fields}
        """The field to paginate on. Defaults to {default}."""
    '''
).strip()

DELEGATE = dedent(
    """
    class {model}Delegate(Protocol):
        name: str
        gateway: Gateway | SyncGateway
        default_cursor_field: str | None
        def paginate(
            self,
            args: PaginateArgs | None = None,
            **values: Unpack[{model}PaginateArgs],
        ) -> PageSequence | SyncPageSequence: ...
    """
).strip()

CLIENT_STUB = dedent(
    """
    class Client(PaginatedClient):
    {overloads}

    DEFAULT_CURSOR_FIELDS: dict[str, str | None]

    def create_client(gateways: Mapping[str, Gateway | SyncGateway]) -> Client: ...
    """
).strip()

GETITEM = "def __getitem__(self, name: Literal[{name}]) -> {model}Delegate: ..."

CLIENT_MODULE = dedent(
    '''
    {header}

    from collections.abc import Mapping

    from clean_paginate import Gateway
    from clean_paginate import PaginatedClient
    from clean_paginate import SyncGateway

    __all__ = ["DEFAULT_CURSOR_FIELDS", "Client", "create_client"]


    DEFAULT_CURSOR_FIELDS = {{
    {defaults}
    }}


    class Client(PaginatedClient):
        pass


    def create_client(gateways: Mapping[str, Gateway | SyncGateway]) -> Client:
        """Add pagination to the gateways of the models in this schema."""
        return Client(gateways, DEFAULT_CURSOR_FIELDS)
    '''
).lstrip()


def indent_string(string: str, count: int = 1) -> str:
    """Indent all non-blank lines of ``string`` with ``count`` spaces."""
    if count < 0:
        raise ValueError(f"Expected `count` to be at least 0, got `{count}`")
    if count == 0:
        return string
    return NON_BLANK_LINE.sub(" " * count, string)


def quote(string: Optional[str]) -> str:
    return "None" if string is None else f'"{string}"'


def _literal(values: list[str]) -> str:
    if not values:
        return "str"
    return f"Literal[{', '.join(quote(x) for x in values)}]"


def render_field_type(model: ModelInfo) -> str:
    return f"{model.name}Field = {_literal([x.name for x in model.fields])}"


def render_paginate_args(model: ModelInfo) -> str:
    result = PAGINATE_ARGS.format(
        model=model.name,
        cursor_fields=_literal(model.cursor_fields()),
        default=quote(model.default_cursor_field()),
    )
    if model.has_relations:
        related = sorted({x.relation_name for x in model.fields if x.relation_name})
        result = f"# related: {', '.join(related)}\n{result}"
    return result


def render_delegate(model: ModelInfo) -> str:
    return DELEGATE.format(model=model.name)


def render_client(models: list[ModelInfo]) -> str:
    overloads = [
        GETITEM.format(name=quote(x.delegate_name), model=x.name) for x in models
    ]
    if len(overloads) > 1:
        overloads = ["@overload\n" + x for x in overloads]
    overloads_str = "\n".join(overloads) or "..."
    return CLIENT_STUB.format(overloads=indent_string(overloads_str, 4))


def render_type_stubs(models: list[ModelInfo]) -> str:
    """Type declarations (.pyi) for the generated client module."""
    parts = [HEADER, STUB_IMPORTS]
    for model in models:
        parts.append(render_field_type(model))
        parts.append(render_paginate_args(model))
        parts.append(render_delegate(model))
    parts.append(render_client(models))
    return "\n\n".join(parts) + "\n"


def render_client_module(models: list[ModelInfo]) -> str:
    """A module that builds a PaginatedClient with the default cursor fields."""
    defaults = get_default_cursor_fields(models)
    entries = "\n".join(f"{quote(k)}: {quote(v)}," for (k, v) in defaults.items())
    return CLIENT_MODULE.format(header=HEADER, defaults=indent_string(entries, 4))
