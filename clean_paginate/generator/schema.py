from typing import Optional

from sqlalchemy import MetaData
from sqlalchemy import Table
from sqlalchemy import UniqueConstraint

from clean_paginate import ValueObject

__all__ = [
    "FieldInfo",
    "ModelInfo",
    "models_from_metadata",
    "get_default_cursor_fields",
]


class FieldInfo(ValueObject):
    name: str
    is_id: bool = False
    is_unique: bool = False
    relation_name: Optional[str] = None


class ModelInfo(ValueObject):
    name: str
    # the key of this model in a PaginatedClient: the table name, unchanged
    delegate_name: str
    fields: list[FieldInfo]

    @property
    def has_relations(self) -> bool:
        return any(x.relation_name for x in self.fields)

    def cursor_fields(self) -> list[str]:
        return [x.name for x in self.fields if x.is_id or x.is_unique]

    def default_cursor_field(self) -> Optional[str]:
        """The id field; else the first unique field; else None."""
        for x in self.fields:
            if x.is_id:
                return x.name
        for x in self.fields:
            if x.is_unique:
                return x.name
        return None


def _camel_case(name: str) -> str:
    return "".join(x[:1].upper() + x[1:] for x in name.split("_"))


def _unique_columns(table: Table) -> set[str]:
    result = {x.name for x in table.columns if x.unique}
    for constraint in table.constraints:
        if isinstance(constraint, UniqueConstraint) and len(constraint.columns) == 1:
            result |= {x.name for x in constraint.columns}
    return result


def model_from_table(table: Table) -> ModelInfo:
    # a composite primary key has no single id field
    primary_key = [x.name for x in table.primary_key.columns]
    id_field = primary_key[0] if len(primary_key) == 1 else None
    unique = _unique_columns(table)
    fields = []
    for column in table.columns:
        relation_name = None
        for foreign_key in column.foreign_keys:
            # "schema.table.column" or "table.column"
            relation_name = foreign_key.target_fullname.split(".")[-2]
        fields.append(
            FieldInfo(
                name=column.name,
                is_id=column.name == id_field,
                is_unique=column.name in unique,
                relation_name=relation_name,
            )
        )
    return ModelInfo(
        name=_camel_case(table.name), delegate_name=table.name, fields=fields
    )


def models_from_metadata(metadata: MetaData) -> list[ModelInfo]:
    return [model_from_table(x) for x in metadata.sorted_tables]


def get_default_cursor_fields(models: list[ModelInfo]) -> dict[str, Optional[str]]:
    return {x.delegate_name: x.default_cursor_field() for x in models}
