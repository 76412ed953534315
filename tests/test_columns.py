"""Tests for result column extraction (nesting, aliases, trimming)."""

from __future__ import annotations

import pytest

from querymeta.errors import CapacityExceeded
from querymeta.sql.columns import column_span, extract_columns, split_top_level
from querymeta.sql.limits import Limits


def test_plain_columns() -> None:
    assert extract_columns("SELECT id, name, age FROM users") == ("id", "name", "age")


def test_alias_wins() -> None:
    assert extract_columns("SELECT first_name AS name FROM users") == ("name",)
    assert extract_columns("SELECT id, first_name AS name FROM users") == ("id", "name")


def test_bare_alias_without_as() -> None:
    assert extract_columns("SELECT first_name name FROM users") == ("name",)


def test_function_calls_with_aliases() -> None:
    sql = "SELECT COUNT(*) AS count, MAX(age) AS max_age FROM users"
    assert extract_columns(sql) == ("count", "max_age")


def test_comma_inside_call_does_not_split() -> None:
    assert extract_columns("SELECT COUNT(a, b) AS n FROM t") == ("n",)
    assert extract_columns("SELECT COALESCE(x, y, 0) AS v, z FROM t") == ("v", "z")


def test_function_without_alias_yields_function_name() -> None:
    assert extract_columns("SELECT COUNT(*) FROM t") == ("COUNT",)


def test_qualified_names_yield_last_part() -> None:
    assert extract_columns("SELECT u.id, u.name FROM users u") == ("id", "name")


def test_case_expression_alias() -> None:
    sql = "SELECT id, CASE WHEN age >= 18 THEN 1 ELSE 0 END AS adult FROM users"
    assert extract_columns(sql) == ("id", "adult")


def test_wildcard_yields_no_columns() -> None:
    assert extract_columns("SELECT * FROM t") == ()
    assert extract_columns("SELECT   *   FROM users WHERE id = :id") == ()


def test_no_select_yields_no_columns() -> None:
    assert extract_columns("INSERT INTO users (name, age) VALUES (:name, :age)") == ()
    assert column_span("DELETE FROM t") is None


def test_keywords_are_case_insensitive() -> None:
    assert extract_columns("select id, name from users") == ("id", "name")


def test_multiline_select() -> None:
    sql = "SELECT\n    id,\n    name\nFROM users\nWHERE age > :min_age"
    assert extract_columns(sql) == ("id", "name")


def test_missing_from_runs_to_end() -> None:
    assert extract_columns("SELECT 1 AS one, 2 AS two") == ("one", "two")


def test_from_inside_parentheses_is_ignored() -> None:
    sql = "SELECT (SELECT MAX(id) FROM t2) AS top_id, name FROM t"
    assert extract_columns(sql) == ("top_id", "name")


def test_identifier_containing_from_is_not_a_keyword() -> None:
    assert extract_columns("SELECT valid_from, id FROM t") == ("valid_from", "id")


def test_literal_segments_produce_no_entry() -> None:
    assert extract_columns("SELECT 1, 'x', id FROM t") == ("id",)


def test_string_literal_contents_are_opaque() -> None:
    sql = "SELECT 'a,b (c' AS label, id FROM t"
    assert extract_columns(sql) == ("label", "id")


def test_distinct_prefix() -> None:
    assert extract_columns("SELECT DISTINCT id, name FROM t") == ("id", "name")


def test_split_top_level() -> None:
    assert split_top_level("a, f(b, c), d") == ["a", " f(b, c)", " d"]


def test_column_count_matches_identifier_segments() -> None:
    sql = "SELECT a, 1, b AS c, (2 + 3), MAX(d) FROM t"
    span = column_span(sql)
    assert span is not None
    assert len(split_top_level(span)) == 5
    assert extract_columns(sql) == ("a", "c", "MAX")


def test_column_ceiling() -> None:
    with pytest.raises(CapacityExceeded) as exc_info:
        extract_columns("SELECT a, b, c FROM t", Limits(max_columns=2))
    assert exc_info.value.limit == "max_columns"


def test_default_column_ceiling() -> None:
    sql = "SELECT " + ", ".join(f"c{i}" for i in range(65)) + " FROM t"
    with pytest.raises(CapacityExceeded):
        extract_columns(sql)


def test_numeric_literals_produce_no_entry() -> None:
    assert extract_columns("SELECT 1e5, 0x1F, 3.14, id FROM t") == ("id",)
    assert extract_columns("SELECT 2.5e-3 AS ratio FROM t") == ("ratio",)
