"""Comparison helpers for values supporting ``<`` / ``<=``.

Ties in :func:`max_of` and :func:`min_of` return the first argument.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, TypeVar

_T = TypeVar("_T", bound=Any)


def max_of(x: _T, y: _T) -> _T:
    return x if x >= y else y


def min_of(x: _T, y: _T) -> _T:
    return x if x <= y else y


def is_greater(a: Any, b: Any) -> bool:
    return a > b


def is_less(a: Any, b: Any) -> bool:
    return a < b


def is_greater_equal(a: Any, b: Any) -> bool:
    return a >= b


def is_less_equal(a: Any, b: Any) -> bool:
    return a <= b


def search_binary(
    items: Sequence[_T],
    item: _T,
    lo: int = 0,
    hi: int | None = None,
) -> int | None:
    """Find *item* in the ascending *items* by halving ``[lo, hi]``.

    *hi* is inclusive and defaults to the last index. Returns the index of
    a matching element, or None if *item* is absent.
    """
    if hi is None:
        hi = len(items) - 1
    while hi >= lo:
        middle = (lo + hi) // 2
        current = items[middle]
        if current > item:
            hi = middle - 1
        elif current < item:
            lo = middle + 1
        else:
            return middle
    return None


def between(x: _T, low: _T, high: _T) -> _T:
    """Clamp *x* into the interval bounded by *low* and *high*.

    The bounds may be given in either order.

    Examples:
        >>> between(15, 0, 10)
        10
        >>> between(-3, 10, 0)
        0
    """
    return min_of(max_of(x, min_of(low, high)), max_of(high, low))
