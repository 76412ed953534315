"""querymeta - validated metadata for simple SQL statements.

Extracts named parameters and result columns from a SQL string before it is executed, and uses them
to validate, bind and map values by name:

    >>> q = parse("INSERT INTO users (name, age) VALUES (:name, :age)")
    >>> q.positional
    'INSERT INTO users (name, age) VALUES (?, ?)'
    >>> q.bind({"age": 30, "name": "bob"})
    ('bob', 30)
"""

from querymeta.errors import (
    CapacityExceeded,
    ColumnNotFound,
    MissingParameter,
    QueryMetaError,
    UnknownColumn,
    UnsupportedValueKind,
)
from querymeta.fields import FieldDescriptor, FieldKind, describe, fields_of
from querymeta.query import Query, parse
from querymeta.rows import RowAccessor, RowMapper, SequenceRow
from querymeta.sql.limits import DEFAULT_LIMITS, Limits
from querymeta.statement import PreparedStatement, Statement

__all__ = [
    "DEFAULT_LIMITS",
    "CapacityExceeded",
    "ColumnNotFound",
    "FieldDescriptor",
    "FieldKind",
    "Limits",
    "MissingParameter",
    "PreparedStatement",
    "Query",
    "QueryMetaError",
    "RowAccessor",
    "RowMapper",
    "SequenceRow",
    "Statement",
    "UnknownColumn",
    "UnsupportedValueKind",
    "describe",
    "fields_of",
    "parse",
]
