"""Error types raised while building or using query metadata.

Every error here is a programmer error (a schema/record mismatch or an oversized statement). They are
raised as early as possible, before a statement reaches the driver, and are never retried.
"""

from __future__ import annotations


class QueryMetaError(ValueError):
    """Base class for all query metadata errors."""


class CapacityExceeded(QueryMetaError):
    """Raised when a statement exceeds a fixed capacity ceiling (length, params, columns)."""

    def __init__(self, limit: str, bound: int, actual: int) -> None:
        self.limit = limit
        self.bound = bound
        self.actual = actual
        super().__init__(f"{limit} exceeded: {actual} > {bound}")


class MissingParameter(QueryMetaError):
    """Raised when a named parameter has no matching argument."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"missing param :{name} in args")


class UnknownColumn(QueryMetaError):
    """Raised when a record field does not match any extracted column."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"field '{name}' not found in query columns")


class ColumnNotFound(QueryMetaError, LookupError):
    """Raised when a column ordinal cannot be resolved by name."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"column '{name}' not found in query")


class UnsupportedValueKind(QueryMetaError, TypeError):
    """Raised when a field's value kind has no row accessor."""

    def __init__(self, field: str, kind: object) -> None:
        self.field = field
        self.kind = kind
        super().__init__(f"unsupported value kind for field '{field}': {kind!r}")
