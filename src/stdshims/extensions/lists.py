"""Helpers for mutable lists."""

from __future__ import annotations

import random
from collections.abc import Callable, MutableSequence
from typing import TypeVar

from stdshims.errors import require_not_none

_T = TypeVar("_T")
_L = TypeVar("_L", bound=MutableSequence)


def is_null_or_empty(items: MutableSequence[_T] | None) -> bool:
    """True if *items* is None or has no elements."""
    return not items


def initialize(
    items: _L | None,
    count: int,
    factory: Callable[[int], _T],
    clear_before: bool = True,
) -> _L | None:
    """Fill *items* with ``factory(i)`` for ``i`` in ``range(count)``.

    Existing elements are removed first unless *clear_before* is False.
    Returns *items* for chaining, or None when *items* is None.
    """
    if items is None:
        return None
    if clear_before:
        del items[:]
    items.extend(factory(i) for i in range(count))
    return items


def mix(items: _L, rng: random.Random | None = None) -> _L:
    """Shuffle *items* in place and return it."""
    (rng or random.Random()).shuffle(require_not_none(items, "items"))
    return items
