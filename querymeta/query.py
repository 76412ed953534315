"""Statement metadata bundle.

A `Query` is derived once from a static SQL string and is read-only afterwards:

    >>> q = parse("SELECT id, first_name AS name FROM users WHERE age > :min_age")
    >>> q.positional
    'SELECT id, first_name AS name FROM users WHERE age > ?'
    >>> q.params
    ('min_age',)
    >>> q.columns
    ('id', 'name')
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any, TypeVar

from querymeta.errors import ColumnNotFound, MissingParameter, UnknownColumn
from querymeta.fields import FieldDescriptor, arguments_of, field_names
from querymeta.rows import RowMapper
from querymeta.sql.columns import extract_columns
from querymeta.sql.limits import DEFAULT_LIMITS, Limits
from querymeta.sql.params import extract_params

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class Query:
    """Immutable metadata extracted from one SQL statement."""

    raw: str
    positional: str
    param_count: int
    params: tuple[str, ...]
    columns: tuple[str, ...]

    @classmethod
    def from_sql(cls, sql: str, *, limits: Limits = DEFAULT_LIMITS) -> Query:
        """Build (or reuse) the metadata for `sql`.

        Raises:
            CapacityExceeded: If the statement exceeds any of `limits`.
        """

        return _build(sql, limits)

    def validate_args(self, fields: Any) -> None:
        """Check that every named parameter has a matching argument field.

        `fields` may be an argument type, an argument set, descriptors or plain names. Extra fields
        are allowed.

        Raises:
            MissingParameter: For the first parameter without a field.
        """

        names = set(field_names(fields))
        for param in self.params:
            if param not in names:
                raise MissingParameter(param)

    def validate_struct(self, fields: Any) -> None:
        """Check that every record field matches an extracted column.

        The fields may cover only a subset of the columns.

        Raises:
            UnknownColumn: For the first field without a column.
        """

        columns = set(self.columns)
        for name in field_names(fields):
            if name not in columns:
                raise UnknownColumn(name)

    def column_index(self, name: str) -> int:
        """Return the ordinal of the first column called `name`."""

        try:
            return self.columns.index(name)
        except ValueError as exc:
            raise ColumnNotFound(name) from exc

    def bind(self, args: Any) -> tuple[Any, ...]:
        """Order argument values by parameter position.

        The input order is irrelevant; a parameter that occurs twice is bound twice.

        Raises:
            MissingParameter: If an argument for a parameter is absent.
        """

        values = arguments_of(args)
        bound: list[Any] = []
        for param in self.params:
            try:
                bound.append(values[param])
            except KeyError as exc:
                raise MissingParameter(param) from exc
        return tuple(bound)

    def from_row(
            self,
            record_type: Callable[..., T],
            row: Any,
            fields: Iterable[FieldDescriptor] | None = None,
    ) -> T:
        """Map one row into `record_type` by column name."""

        return RowMapper(self, record_type, fields).map(row)


@functools.cache
def _build(sql: str, limits: Limits) -> Query:
    extracted = extract_params(sql, limits)
    columns = extract_columns(sql, limits)
    logger.debug(
        "parsed statement: %d params (%d named), %d columns",
        extracted.param_count,
        len(extracted.params),
        len(columns),
    )
    return Query(
        raw=sql,
        positional=extracted.positional,
        param_count=extracted.param_count,
        params=extracted.params,
        columns=columns,
    )


def parse(sql: str, *, limits: Limits = DEFAULT_LIMITS) -> Query:
    """Extract statement metadata (convenience wrapper around `Query.from_sql`)."""

    return Query.from_sql(sql, limits=limits)
