"""Tests for typed access to database result rows."""

from __future__ import annotations

from decimal import Decimal

import pytest
from sqlalchemy import text
from sqlalchemy.engine import Engine

from stdshims.errors import ArgumentNullError, ValueMissingError
from stdshims.extensions.readers import (
    get_optional,
    get_value,
    get_value_or_default,
    iter_values,
)


def _rows(engine: Engine) -> list:
    with engine.connect() as conn:
        return list(conn.execute(text("SELECT id, name, score FROM samples ORDER BY id")))


class TestGetValue:
    def test_by_name(self, db_engine: Engine) -> None:
        first, _ = _rows(db_engine)
        assert get_value(first, "name") == "alpha"

    def test_by_index(self, db_engine: Engine) -> None:
        first, _ = _rows(db_engine)
        assert get_value(first, 0) == 1

    def test_cast(self, db_engine: Engine) -> None:
        first, _ = _rows(db_engine)
        assert get_value(first, "score", Decimal) == Decimal("1.5")

    def test_null_raises(self, db_engine: Engine) -> None:
        _, second = _rows(db_engine)
        with pytest.raises(ValueMissingError) as exc_info:
            get_value(second, "name")
        assert exc_info.value.detail == {"column": "name"}
        assert exc_info.value.to_payload().code == "VALUE_MISSING"

    def test_unknown_column(self, db_engine: Engine) -> None:
        first, _ = _rows(db_engine)
        with pytest.raises(KeyError):
            get_value(first, "missing")

    def test_index_out_of_range(self, db_engine: Engine) -> None:
        first, _ = _rows(db_engine)
        with pytest.raises(IndexError):
            get_value(first, 10)

    def test_row_mapping(self, db_engine: Engine) -> None:
        with db_engine.connect() as conn:
            mapping = conn.execute(text("SELECT id, name FROM samples WHERE id = 1")).mappings().one()
        assert get_value(mapping, "name", str.upper) == "ALPHA"

    def test_plain_containers(self) -> None:
        assert get_value({"a": 1}, "a") == 1
        assert get_value((5, 6), 1) == 6

    def test_none_row(self) -> None:
        with pytest.raises(ArgumentNullError):
            get_value(None, "a")  # type: ignore[arg-type]


class TestDefaults:
    def test_default_on_null(self, db_engine: Engine) -> None:
        _, second = _rows(db_engine)
        assert get_value_or_default(second, "score", 0.0) == 0.0

    def test_value_when_present(self, db_engine: Engine) -> None:
        first, _ = _rows(db_engine)
        assert get_value_or_default(first, "score", 0.0, cast=int) == 1

    def test_optional(self, db_engine: Engine) -> None:
        first, second = _rows(db_engine)
        assert get_optional(first, "name") == "alpha"
        assert get_optional(second, "name") is None


class TestIterValues:
    def test_yields_each_row(self, db_engine: Engine) -> None:
        assert list(iter_values(_rows(db_engine), "id", str)) == ["1", "2"]

    def test_null_raises_lazily(self, db_engine: Engine) -> None:
        values = iter_values(_rows(db_engine), "name")
        assert next(values) == "alpha"
        with pytest.raises(ValueMissingError):
            next(values)

    def test_none_raises_on_call(self) -> None:
        with pytest.raises(ArgumentNullError):
            iter_values(None, "id")  # type: ignore[arg-type]
