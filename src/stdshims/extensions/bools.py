"""Reductions over iterables of booleans.

The strict variants (:func:`and_`, :func:`or_`) consume every element, so
side effects of a generator all run. The lazy variants stop at the first
deciding value.
"""

from __future__ import annotations

from collections.abc import Iterable

from stdshims.errors import require_not_none


def and_(items: Iterable[bool]) -> bool:
    """Logical AND of all *items*, consuming the whole iterable.

    Examples:
        >>> and_([True, True])
        True
        >>> and_([])
        True
    """
    result = True
    for item in require_not_none(items, "items"):
        result = result and bool(item)
    return result


def and_lazy(items: Iterable[bool]) -> bool:
    """Logical AND of *items*, stopping at the first false value."""
    for item in require_not_none(items, "items"):
        if not item:
            return False
    return True


def or_(items: Iterable[bool]) -> bool:
    """Logical OR of all *items*, consuming the whole iterable.

    Examples:
        >>> or_([False, True])
        True
        >>> or_([])
        False
    """
    result = False
    for item in require_not_none(items, "items"):
        result = result or bool(item)
    return result


def or_lazy(items: Iterable[bool]) -> bool:
    """Logical OR of *items*, stopping at the first true value."""
    for item in require_not_none(items, "items"):
        if item:
            return True
    return False
