"""Helpers for a ``list`` used as a stack.

The top of the stack is the last element (``append`` / ``pop``), so the
stack's order — the order items come off it — is the list reversed.
"""

from __future__ import annotations

from collections import deque
from typing import TypeVar

from stdshims.errors import require_not_none

_T = TypeVar("_T")


def push_value(stack: list[_T], value: _T) -> list[_T]:
    """Push *value* and return the same stack for chaining."""
    require_not_none(stack, "stack").append(value)
    return stack


def to_queue(stack: list[_T]) -> deque[_T]:
    """Copy *stack* into a queue that dequeues in pop order (top first)."""
    return deque(reversed(require_not_none(stack, "stack")))


def to_queue_reverse(stack: list[_T]) -> deque[_T]:
    """Copy *stack* into a queue that dequeues in push order (bottom first)."""
    buffer = list(reversed(require_not_none(stack, "stack")))
    buffer.reverse()
    return deque(buffer)


def pop_or_default(stack: list[_T], default: _T | None = None) -> _T | None:
    if not require_not_none(stack, "stack"):
        return default
    return stack.pop()


def peek_or_default(stack: list[_T], default: _T | None = None) -> _T | None:
    if not require_not_none(stack, "stack"):
        return default
    return stack[-1]
