"""Capacity ceilings for statement metadata.

The ceilings are safety bounds, not semantic limits: they keep failure modes predictable. Exceeding
one is a construction-time `CapacityExceeded` error, never a silent truncation.
"""

from __future__ import annotations

from dataclasses import dataclass

MAX_SQL_LEN = 4096
MAX_PARAMS = 32
MAX_COLUMNS = 64


@dataclass(frozen=True)
class Limits:
    """Fixed ceilings applied while extracting metadata from one statement."""

    max_sql_len: int = MAX_SQL_LEN
    max_params: int = MAX_PARAMS
    max_columns: int = MAX_COLUMNS

    def __post_init__(self) -> None:
        for name in ("max_sql_len", "max_params", "max_columns"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be a positive integer")


DEFAULT_LIMITS = Limits()
