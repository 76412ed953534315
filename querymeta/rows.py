"""Row accessors and row-to-record mapping.

The database driver is an external collaborator. All the mapper needs from a row is positional
access to text and integer values; booleans follow the nonzero-integer convention.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Generic, Protocol, TypeVar, runtime_checkable

from querymeta.fields import FieldDescriptor, FieldKind, fields_of

if TYPE_CHECKING:
    from querymeta.query import Query

T = TypeVar("T")


@runtime_checkable
class RowAccessor(Protocol):
    """Positional access to the values of one result row."""

    def text_at(self, ordinal: int) -> str: ...

    def integer_at(self, ordinal: int) -> int: ...


@dataclass(frozen=True)
class SequenceRow:
    """Adapt a plain DB-API row (tuple/list) to `RowAccessor`."""

    values: Sequence[Any]

    def _value(self, ordinal: int) -> Any:
        value = self.values[ordinal]
        if value is None:
            raise ValueError(f"NULL value at ordinal {ordinal}")
        return value

    def text_at(self, ordinal: int) -> str:
        value = self._value(ordinal)
        return value if isinstance(value, str) else str(value)

    def integer_at(self, ordinal: int) -> int:
        value = self._value(ordinal)
        number = int(value)
        if not isinstance(value, str) and value != number:
            raise ValueError(f"non-integral value at ordinal {ordinal}: {value!r}")
        return number


def as_accessor(row: Any) -> RowAccessor:
    """Return `row` itself if it is a `RowAccessor`, else wrap a sequence row."""

    if isinstance(row, RowAccessor):
        return row
    if isinstance(row, Sequence) and not isinstance(row, str | bytes):
        return SequenceRow(row)
    raise TypeError(f"unsupported row type: {type(row).__name__}")


Reader = Callable[[RowAccessor, int], Any]

_READERS: dict[FieldKind, Reader] = {
    FieldKind.text: lambda row, ordinal: row.text_at(ordinal),
    FieldKind.integer: lambda row, ordinal: row.integer_at(ordinal),
    FieldKind.boolean: lambda row, ordinal: row.integer_at(ordinal) != 0,
}


def reader_for(field: FieldDescriptor) -> Reader:
    return _READERS[field.kind]


class RowMapper(Generic[T]):
    """Map rows of one query into instances of one record type.

    Ordinals and readers are resolved once, at construction, so every field/column mismatch and
    unsupported kind surfaces before the first row is read.

    Raises:
        ColumnNotFound: If a field has no matching column.
        UnsupportedValueKind: If a reflected field's type has no accessor.
    """

    __slots__ = ("_query", "_record_type", "_plan")

    def __init__(
            self,
            query: Query,
            record_type: Callable[..., T],
            fields: Iterable[FieldDescriptor] | None = None,
    ) -> None:
        descriptors = tuple(fields) if fields is not None else fields_of(record_type)
        self._query = query
        self._record_type = record_type
        self._plan: tuple[tuple[str, int, Reader], ...] = tuple(
            (f.name, query.column_index(f.name), reader_for(f)) for f in descriptors
        )

    @property
    def query(self) -> Query:
        return self._query

    @property
    def record_type(self) -> Callable[..., T]:
        return self._record_type

    @property
    def ordinals(self) -> dict[str, int]:
        return {name: ordinal for name, ordinal, _ in self._plan}

    def map(self, row: Any) -> T:
        accessor = as_accessor(row)
        values = {name: read(accessor, ordinal) for name, ordinal, read in self._plan}
        return self._record_type(**values)

    def map_all(self, rows: Iterable[Any]) -> list[T]:
        return [self.map(row) for row in rows]
