"""Field descriptors for argument and record types.

A record type is described by an ordered set of `(name, kind)` pairs. Descriptors are reflected from
pydantic models or dataclasses once per type and reused; types that cannot be reflected can supply
an explicit table via `describe()`.
"""

from __future__ import annotations

import dataclasses
import functools
import typing
from collections.abc import Iterable, Mapping
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

from querymeta.errors import UnsupportedValueKind
from querymeta.sql.scanner import is_identifier


class FieldKind(StrEnum):
    """Value kinds a row accessor can produce."""

    text = "text"
    integer = "integer"
    boolean = "boolean"


_KIND_BY_TYPE: dict[Any, FieldKind] = {
    str: FieldKind.text,
    int: FieldKind.integer,
    bool: FieldKind.boolean,
}


class FieldDescriptor(BaseModel):
    """One named field of a record or argument type."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str
    kind: FieldKind

    @field_validator("name")
    @classmethod
    def validate_name(cls, value: str) -> str:
        if not is_identifier(value):
            raise ValueError(f"field name must be an identifier, got {value!r}")
        return value


def kind_of(name: str, annotation: Any) -> FieldKind:
    """Resolve a Python type (or kind name) to a `FieldKind`.

    Raises:
        UnsupportedValueKind: If there is no row accessor for the type.
    """

    if isinstance(annotation, FieldKind):
        return annotation
    if isinstance(annotation, str):
        try:
            return FieldKind(annotation)
        except ValueError as exc:
            raise UnsupportedValueKind(name, annotation) from exc
    try:
        return _KIND_BY_TYPE[annotation]
    except (KeyError, TypeError) as exc:
        raise UnsupportedValueKind(name, annotation) from exc


def describe(table: Mapping[str, Any]) -> tuple[FieldDescriptor, ...]:
    """Build descriptors from an explicit `{name: kind}` table, keeping its order."""

    return tuple(FieldDescriptor(name=name, kind=kind_of(name, kind)) for name, kind in table.items())


def _annotations_of(record_type: type) -> list[tuple[str, Any]]:
    if isinstance(record_type, type) and issubclass(record_type, BaseModel):
        return [(name, info.annotation) for name, info in record_type.model_fields.items()]
    if dataclasses.is_dataclass(record_type):
        hints = typing.get_type_hints(record_type)
        return [(f.name, hints[f.name]) for f in dataclasses.fields(record_type)]
    raise TypeError(f"cannot reflect fields of {record_type!r}; pass explicit descriptors")


@functools.cache
def fields_of(record_type: type) -> tuple[FieldDescriptor, ...]:
    """Reflect the ordered field descriptors of a pydantic model or dataclass.

    Raises:
        UnsupportedValueKind: If a field's type is not `str`, `int` or `bool`.
        TypeError: If the type is neither a pydantic model nor a dataclass.
    """

    return tuple(
        FieldDescriptor(name=name, kind=kind_of(name, annotation))
        for name, annotation in _annotations_of(record_type)
    )


def field_names(fields: Any) -> tuple[str, ...]:
    """Return the field names of a record type, argument set, or descriptor list."""

    if isinstance(fields, type):
        if issubclass(fields, BaseModel):
            return tuple(fields.model_fields)
        if dataclasses.is_dataclass(fields):
            return tuple(f.name for f in dataclasses.fields(fields))
        raise TypeError(f"cannot reflect fields of {fields!r}; pass explicit descriptors")
    if isinstance(fields, (Mapping, BaseModel)) or dataclasses.is_dataclass(fields):
        return tuple(arguments_of(fields))
    return tuple(f.name if isinstance(f, FieldDescriptor) else str(f) for f in _iterable(fields))


def arguments_of(args: Any) -> Mapping[str, Any]:
    """View a mapping, pydantic model instance or dataclass instance as `{name: value}`."""

    if isinstance(args, Mapping):
        return args
    if isinstance(args, BaseModel):
        return {name: getattr(args, name) for name in type(args).model_fields}
    if dataclasses.is_dataclass(args) and not isinstance(args, type):
        return {f.name: getattr(args, f.name) for f in dataclasses.fields(args)}
    raise TypeError(f"unsupported argument set: {type(args).__name__}")


def _iterable(fields: Any) -> Iterable[Any]:
    if isinstance(fields, str):
        raise TypeError("expected a collection of field names, got a single string")
    return fields
