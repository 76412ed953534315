"""Inspect the metadata extracted from a SQL statement.

Usage:
    querymeta-inspect "SELECT id, name FROM users WHERE age > :min_age"
    querymeta-inspect --path queries/users.sql --check-columns id,name
    echo "INSERT INTO t (a) VALUES (:a)" | querymeta-inspect --check-args a
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import asdict
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

from querymeta.config.logging import configure_logging
from querymeta.config.settings import load_settings
from querymeta.query import parse

logger = logging.getLogger(__name__)


def _read_sql(*, sql: str | None, path: str | None) -> str:
    if sql is not None and path is not None:
        raise ValueError("Pass either a SQL argument or --path, not both")
    if path is not None:
        return Path(path).read_text(encoding="utf-8")
    if sql is not None:
        return sql
    return sys.stdin.read()


def _split_names(value: str | None) -> list[str] | None:
    if value is None:
        return None
    return [name.strip() for name in value.split(",") if name.strip()]


def inspect_sql(
        sql: str,
        *,
        check_args: list[str] | None = None,
        check_columns: list[str] | None = None,
) -> dict[str, Any]:
    """Parse `sql` and run the requested validations.

    Raises:
        QueryMetaError: If parsing or a validation fails.
    """

    query = parse(sql)
    if check_args is not None:
        query.validate_args(check_args)
    if check_columns is not None:
        query.validate_struct(check_columns)
    return asdict(query)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point; returns the process exit code."""

    parser = argparse.ArgumentParser(description="Show parameters and columns of a SQL statement.")
    parser.add_argument("sql", nargs="?", help="SQL text (read from stdin if omitted).")
    parser.add_argument("--path", help="Read the SQL statement from this file.")
    parser.add_argument(
        "--check-args",
        help="Comma-separated argument names that must cover every named parameter.",
    )
    parser.add_argument(
        "--check-columns",
        help="Comma-separated field names that must all be extracted columns.",
    )
    args = parser.parse_args(argv)

    load_dotenv(".env")
    settings = load_settings()
    configure_logging(settings.log_level)

    try:
        sql = _read_sql(sql=args.sql, path=args.path)
        result = inspect_sql(
            sql,
            check_args=_split_names(args.check_args),
            check_columns=_split_names(args.check_columns),
        )
    except (ValueError, OSError) as exc:
        logger.debug("inspection failed", exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 2

    print(json.dumps(result, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
