"""Result column extraction.

Column names are taken from the `SELECT ... FROM` span. The span is split at top-level commas and
each segment contributes its last top-level identifier, which is the alias when one is present
(`col AS alias`, `COUNT(*) total`) and the outer name otherwise (`col`, `t.col`).

Known limitations:
    - quoted/escaped identifiers (`"from"`, `` `col` ``) are not understood;
    - comments are not stripped;
    - `SELECT *` yields no columns, since the schema is unknown.
"""

from __future__ import annotations

from querymeta.errors import CapacityExceeded
from querymeta.sql.limits import DEFAULT_LIMITS, Limits
from querymeta.sql.scanner import (
    QUOTE,
    find_keyword,
    is_digit,
    is_ident_start,
    scan_identifier,
    scan_number,
    skip_string_literal,
    trim,
)

_SELECT = "SELECT"
_FROM = "FROM"
_WILDCARD = "*"


def column_span(sql: str) -> str | None:
    """Return the trimmed column list between `SELECT` and its top-level `FROM`.

    Returns `None` when the statement has no `SELECT`. Without a top-level `FROM` the span runs to
    the end of the text (e.g. `SELECT 1 AS one`).
    """

    select_pos = find_keyword(sql, _SELECT)
    if select_pos is None:
        return None

    span_start = select_pos + len(_SELECT)
    from_pos = find_keyword(sql, _FROM, span_start, top_level=True)
    span_end = len(sql) if from_pos is None else from_pos
    return trim(sql[span_start:span_end])


def split_top_level(span: str) -> list[str]:
    """Split `span` at commas outside parentheses and string literals."""

    segments: list[str] = []
    depth = 0
    segment_start = 0
    i = 0
    while i < len(span):
        c = span[i]
        if c == QUOTE:
            i = skip_string_literal(span, i)
            continue
        if c == "(":
            depth += 1
        elif c == ")":
            depth = max(depth - 1, 0)
        elif c == "," and depth == 0:
            segments.append(span[segment_start:i])
            segment_start = i + 1
        i += 1
    segments.append(span[segment_start:])
    return segments


def last_top_level_identifier(segment: str) -> str | None:
    """Return the rightmost identifier of `segment` outside parentheses, strings and numbers."""

    last: str | None = None
    depth = 0
    i = 0
    while i < len(segment):
        c = segment[i]
        if c == QUOTE:
            i = skip_string_literal(segment, i)
            continue
        if c == "(":
            depth += 1
        elif c == ")":
            depth = max(depth - 1, 0)
        elif is_digit(c):
            i = scan_number(segment, i)
            continue
        elif is_ident_start(c):
            end = scan_identifier(segment, i)
            if depth == 0:
                last = segment[i:end]
            i = end
            continue
        i += 1
    return last


def extract_columns(sql: str, limits: Limits = DEFAULT_LIMITS) -> tuple[str, ...]:
    """Extract result column names/aliases in left-to-right order.

    Segments without a top-level identifier (a bare numeric or string literal) produce no entry.

    Raises:
        CapacityExceeded: If more than `limits.max_columns` columns are found.
    """

    span = column_span(sql)
    if not span or span == _WILDCARD:
        return ()

    columns: list[str] = []
    for segment in split_top_level(span):
        name = last_top_level_identifier(segment)
        if name is None:
            continue
        columns.append(name)
        if len(columns) > limits.max_columns:
            raise CapacityExceeded("max_columns", limits.max_columns, len(columns))

    return tuple(columns)
