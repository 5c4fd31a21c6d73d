# (c) Nelen & Schuurmans

from pydantic import ValidationError
from pydantic_core import ErrorDetails

__all__ = [
    "BadRequest",
    "DoesNotExist",
    "NoCursorField",
]


class DoesNotExist(KeyError):
    """Lookup by name failed, for example of a model in a PaginatedClient.

    This is a KeyError, so that Mapping semantics (``in``, ``.get``) hold.
    """

    def __init__(self, kind: str, name: str):
        super().__init__(name)
        self.kind = kind
        self.name = name

    def __str__(self):
        return f"does not exist: {self.kind} '{self.name}'"


class NoCursorField(Exception):
    """There is no field to paginate on: no override and no model default.

    This happens for models without an id field and without unique fields.
    """

    def __init__(self, name: str | None = None):
        super().__init__()
        self.name = name

    def __str__(self):
        if self.name:
            return f"no cursor field for {self.name}: pass cursor_field explicitly"
        else:
            return "no cursor field: pass cursor_field explicitly"


class BadRequest(Exception):
    """Invalid pagination arguments or an unknown field.

    Wraps a pydantic ValidationError, or a plain message.
    """

    def __init__(self, err_or_msg: ValidationError | str):
        self._internal_error = err_or_msg
        super().__init__(err_or_msg)

    def errors(self) -> list[ErrorDetails]:
        if isinstance(self._internal_error, ValidationError):
            return self._internal_error.errors()
        return [
            ErrorDetails(
                type="value_error",
                msg=self._internal_error,
                loc=[],  # type: ignore
                input=None,
            )
        ]

    def __str__(self) -> str:
        error = self._internal_error
        if not isinstance(error, ValidationError):
            return f"validation error: {error}"
        details = error.errors()[0]
        loc = ",".join(str(x) for x in details["loc"])
        if loc in ("", "*"):
            return f"validation error: {details['msg']}"
        return f"validation error: '{loc}' {details['msg']}"
