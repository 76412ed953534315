"""Named parameter extraction.

Rewrites `:name` markers to positional `?` placeholders in a single forward scan with one character
of lookahead, recording the names in order of appearance.
"""

from __future__ import annotations

from dataclasses import dataclass

from querymeta.errors import CapacityExceeded
from querymeta.sql.limits import DEFAULT_LIMITS, Limits
from querymeta.sql.scanner import is_ident_start, scan_identifier

PLACEHOLDER = "?"
MARKER = ":"


@dataclass(frozen=True)
class ParamExtraction:
    """Positional rewrite of a statement plus its named parameters."""

    positional: str
    param_count: int
    params: tuple[str, ...]


def extract_params(sql: str, limits: Limits = DEFAULT_LIMITS) -> ParamExtraction:
    """Rewrite named parameters to positional placeholders.

    Rules:
        - An existing `?` is kept and counted, but has no name.
        - `:` followed by an identifier-start character becomes `?`; the longest identifier run
          after it is recorded as the parameter name.
        - Any other `:` (e.g. `a : b`, `'12:30'`) is copied verbatim.

    Duplicate names are recorded each time they appear, since every occurrence is its own
    positional slot.

    Raises:
        CapacityExceeded: If the statement or its placeholder count exceeds `limits`.
    """

    if len(sql) > limits.max_sql_len:
        raise CapacityExceeded("max_sql_len", limits.max_sql_len, len(sql))

    out: list[str] = []
    params: list[str] = []
    param_count = 0

    i = 0
    while i < len(sql):
        c = sql[i]
        if c == PLACEHOLDER:
            out.append(PLACEHOLDER)
            param_count += 1
        elif c == MARKER and i + 1 < len(sql) and is_ident_start(sql[i + 1]):
            end = scan_identifier(sql, i + 1)
            out.append(PLACEHOLDER)
            param_count += 1
            params.append(sql[i + 1:end])
            i = end
            continue
        else:
            out.append(c)
        i += 1

    if param_count > limits.max_params:
        raise CapacityExceeded("max_params", limits.max_params, param_count)

    return ParamExtraction(positional="".join(out), param_count=param_count, params=tuple(params))
