"""Helpers for ordered pairs."""

from __future__ import annotations

from typing import Any, TypeVar

_T = TypeVar("_T", bound=Any)


def min_max(pair: tuple[_T, _T]) -> tuple[_T, _T]:
    """Return *pair* ordered as ``(min, max)``.

    Equal items keep their original order, so the input tuple itself is
    returned when it is already ordered.

    Examples:
        >>> min_max((3, 1))
        (1, 3)
        >>> min_max((1.5, 2.5))
        (1.5, 2.5)
    """
    first, second = pair
    if first <= second:
        return pair
    return second, first


def max_min(pair: tuple[_T, _T]) -> tuple[_T, _T]:
    """Return *pair* ordered as ``(max, min)``.

    Equal items keep their original order.

    Examples:
        >>> max_min((1, 3))
        (3, 1)
    """
    first, second = pair
    if first >= second:
        return pair
    return second, first


def min_max_to_min_length(pair: tuple[_T, _T]) -> tuple[_T, _T]:
    """Return ``(min, max - min)`` for *pair*."""
    low, high = min_max(pair)
    return low, high - low
