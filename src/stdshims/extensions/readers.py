"""Typed access to values of database result rows.

Works on SQLAlchemy ``Row`` and ``RowMapping`` objects as returned by
``conn.execute(...)`` and ``.mappings()``, and on plain mappings or
sequences. Columns are addressed by name or position. SQL ``NULL`` comes
back as None and is handled explicitly by each helper.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Mapping, Sequence
from typing import Any, TypeVar, Union

import structlog
from sqlalchemy.engine import Row

from stdshims.errors import ValueMissingError, require_not_none

log = structlog.get_logger(__name__)

_T = TypeVar("_T")

RowLike = Union[Row[Any], Mapping[str, Any], Sequence[Any]]
Column = Union[str, int]


def _raw_value(row: RowLike, column: Column) -> Any:
    require_not_none(row, "row")
    if isinstance(row, Row):
        if isinstance(column, str):
            return row._mapping[column]
        return row[column]
    return row[column]  # type: ignore[index]


def get_value(row: RowLike, column: Column, cast: Callable[[Any], Any] | None = None) -> Any:
    """Return the value of *column*, converted by *cast* if given.

    Raises:
        ValueMissingError: The value is NULL.
        KeyError: No column with that name.
        IndexError: Column position out of range.
    """
    value = _raw_value(row, column)
    if value is None:
        log.debug("readers.value_missing", column=column)
        raise ValueMissingError(f"Column {column!r} is NULL", column=column)
    return cast(value) if cast is not None else value


def get_value_or_default(
    row: RowLike,
    column: Column,
    default: Any = None,
    cast: Callable[[Any], Any] | None = None,
) -> Any:
    """Like :func:`get_value`, but return *default* for NULL values."""
    value = _raw_value(row, column)
    if value is None:
        return default
    return cast(value) if cast is not None else value


def get_optional(
    row: RowLike,
    column: Column,
    cast: Callable[[Any], _T] | None = None,
) -> _T | None:
    return get_value_or_default(row, column, None, cast)


def iter_values(
    rows: Iterable[RowLike],
    column: Column,
    cast: Callable[[Any], Any] | None = None,
) -> Iterator[Any]:
    """Yield :func:`get_value` of *column* for every row in *rows*.

    *rows* is checked when called; NULL values raise as they are reached.
    """
    require_not_none(rows, "rows")
    return (get_value(row, column, cast) for row in rows)
