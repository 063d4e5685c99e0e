"""Helpers for a ``collections.deque`` used as a FIFO queue.

The front of the queue is the left end (``append`` / ``popleft``). Stacks
produced here are plain lists with the top at the end, matching
:mod:`stdshims.extensions.stacks`.
"""

from __future__ import annotations

from collections import deque
from typing import TypeVar

from stdshims.errors import require_not_none

_T = TypeVar("_T")


def enqueue_value(queue: deque[_T], value: _T) -> deque[_T]:
    """Enqueue *value* and return the same queue for chaining."""
    require_not_none(queue, "queue").append(value)
    return queue


def to_stack(queue: deque[_T]) -> list[_T]:
    """Copy *queue* into a stack that pops in dequeue order."""
    return list(reversed(require_not_none(queue, "queue")))


def to_stack_reverse(queue: deque[_T]) -> list[_T]:
    """Copy *queue* into a stack that pops in reverse dequeue order."""
    buffer = list(reversed(require_not_none(queue, "queue")))
    buffer.reverse()
    return buffer


def dequeue_or_default(queue: deque[_T], default: _T | None = None) -> _T | None:
    if not require_not_none(queue, "queue"):
        return default
    return queue.popleft()


def peek_or_default(queue: deque[_T], default: _T | None = None) -> _T | None:
    if not require_not_none(queue, "queue"):
        return default
    return queue[0]
