"""Tests for named parameter extraction and positional rewriting."""

from __future__ import annotations

import pytest

from querymeta.errors import CapacityExceeded
from querymeta.sql.limits import Limits
from querymeta.sql.params import extract_params


def test_named_params_are_rewritten_in_order() -> None:
    result = extract_params("SELECT * FROM users WHERE id = :id AND age > :min_age")
    assert result.positional == "SELECT * FROM users WHERE id = ? AND age > ?"
    assert result.params == ("id", "min_age")
    assert result.param_count == 2


def test_insert_values_rewrite() -> None:
    result = extract_params("INSERT INTO users (name, age) VALUES (:name, :age)")
    assert result.positional == "INSERT INTO users (name, age) VALUES (?, ?)"
    assert result.params == ("name", "age")


def test_existing_placeholders_count_but_have_no_name() -> None:
    result = extract_params("SELECT * FROM users WHERE id = :id AND age > ?")
    assert result.param_count == 2
    assert result.params == ("id",)
    assert result.positional == "SELECT * FROM users WHERE id = ? AND age > ?"


def test_duplicate_names_are_kept() -> None:
    result = extract_params("SELECT * FROM t WHERE a = :v OR b = :v")
    assert result.params == ("v", "v")
    assert result.param_count == 2


def test_name_at_end_of_text_is_captured_in_full() -> None:
    result = extract_params("DELETE FROM t WHERE id=:record_id")
    assert result.positional == "DELETE FROM t WHERE id=?"
    assert result.params == ("record_id",)


def test_colon_without_identifier_is_verbatim() -> None:
    result = extract_params("SELECT a : b, :1, x: FROM t")
    assert result.positional == "SELECT a : b, :1, x: FROM t"
    assert result.params == ()
    assert result.param_count == 0


def test_name_stops_at_first_non_identifier_char() -> None:
    result = extract_params("WHERE x = :a.b AND y = :_c9)")
    assert result.positional == "WHERE x = ?.b AND y = ?)"
    assert result.params == ("a", "_c9")


def test_multiline_statement() -> None:
    sql = "UPDATE users\n   SET name = :name\n WHERE id = :id\n"
    result = extract_params(sql)
    assert result.positional == "UPDATE users\n   SET name = ?\n WHERE id = ?\n"
    assert result.params == ("name", "id")


def test_source_length_ceiling() -> None:
    with pytest.raises(CapacityExceeded) as exc_info:
        extract_params("SELECT 1", Limits(max_sql_len=5))
    assert exc_info.value.limit == "max_sql_len"
    assert exc_info.value.actual == 8


def test_param_count_ceiling_includes_positional_markers() -> None:
    with pytest.raises(CapacityExceeded) as exc_info:
        extract_params("VALUES (:a, ?, :b)", Limits(max_params=2))
    assert exc_info.value.limit == "max_params"
    assert exc_info.value.bound == 2
    assert exc_info.value.actual == 3


def test_default_param_ceiling() -> None:
    sql = "VALUES (" + ", ".join("?" for _ in range(33)) + ")"
    with pytest.raises(CapacityExceeded):
        extract_params(sql)
