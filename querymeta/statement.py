"""Statements paired with their argument and row types.

Pairing a statement with its record types runs every schema check up front, so a mismatched
argument or row type fails when the `Statement` is defined (typically at import time), not on the
first execution.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from querymeta.fields import FieldDescriptor
from querymeta.query import Query, parse
from querymeta.rows import RowMapper
from querymeta.sql.limits import DEFAULT_LIMITS, Limits

T = TypeVar("T")


@dataclass(frozen=True)
class PreparedStatement:
    """A positional statement and its bind tuple, ready for a driver."""

    sql: str
    params: tuple[Any, ...]


class Statement(Generic[T]):
    """A parsed statement validated against its argument and row types.

    Example:
        >>> class User(BaseModel):
        ...     id: int
        ...     name: str
        >>> by_age = Statement("SELECT id, name FROM users WHERE age > :min_age", row=User)
        >>> by_age.prepare({"min_age": 18})
        PreparedStatement(sql='SELECT id, name FROM users WHERE age > ?', params=(18,))
    """

    __slots__ = ("_query", "_mapper")

    def __init__(
            self,
            sql: str,
            *,
            args: Any = None,
            row: Callable[..., T] | None = None,
            row_fields: Iterable[FieldDescriptor] | None = None,
            limits: Limits = DEFAULT_LIMITS,
    ) -> None:
        query = parse(sql, limits=limits)
        if args is not None:
            query.validate_args(args)

        mapper: RowMapper[T] | None = None
        if row is not None:
            row_fields = tuple(row_fields) if row_fields is not None else None
            query.validate_struct(row_fields if row_fields is not None else row)
            mapper = RowMapper(query, row, row_fields)

        self._query = query
        self._mapper = mapper

    @property
    def query(self) -> Query:
        return self._query

    @property
    def sql(self) -> str:
        return self.query.positional

    def prepare(self, args: Any) -> PreparedStatement:
        """Bind `args` in parameter order."""

        return PreparedStatement(sql=self.query.positional, params=self.query.bind(args))

    def map_row(self, row: Any) -> T:
        return self._require_mapper().map(row)

    def map_rows(self, rows: Iterable[Any]) -> list[T]:
        return self._require_mapper().map_all(rows)

    def _require_mapper(self) -> RowMapper[T]:
        if self._mapper is None:
            raise RuntimeError("statement has no row type; pass row=... to map rows")
        return self._mapper

    def __repr__(self) -> str:
        return f"Statement({self.query.raw!r})"
