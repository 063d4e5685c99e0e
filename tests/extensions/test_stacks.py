"""Tests for list-as-stack helpers and stack/queue conversions."""

from __future__ import annotations

from collections import deque

import pytest

from stdshims.errors import ArgumentNullError
from stdshims.extensions.queues import to_stack, to_stack_reverse
from stdshims.extensions.stacks import (
    peek_or_default,
    pop_or_default,
    push_value,
    to_queue,
    to_queue_reverse,
)


def _pop_order(stack: list[int]) -> list[int]:
    copy = list(stack)
    return [copy.pop() for _ in range(len(copy))]


def _dequeue_order(queue: deque[int]) -> list[int]:
    copy = deque(queue)
    return [copy.popleft() for _ in range(len(copy))]


class TestPushValue:
    def test_returns_same_stack(self) -> None:
        stack: list[int] = []
        assert push_value(push_value(stack, 1), 2) is stack
        assert stack == [1, 2]

    def test_none(self) -> None:
        with pytest.raises(ArgumentNullError):
            push_value(None, 1)  # type: ignore[arg-type]


class TestToQueue:
    def test_preserves_pop_order(self) -> None:
        stack = [1, 2, 3]
        assert _dequeue_order(to_queue(stack)) == _pop_order(stack) == [3, 2, 1]

    def test_reverse_inverts_order(self) -> None:
        stack = [1, 2, 3]
        assert _dequeue_order(to_queue_reverse(stack)) == [1, 2, 3]

    def test_source_untouched(self) -> None:
        stack = [1, 2, 3]
        to_queue(stack)
        to_queue_reverse(stack)
        assert stack == [1, 2, 3]

    def test_empty(self) -> None:
        assert to_queue([]) == deque()
        assert to_queue_reverse([]) == deque()

    def test_none(self) -> None:
        with pytest.raises(ArgumentNullError):
            to_queue(None)  # type: ignore[arg-type]


class TestRoundTrip:
    @pytest.mark.parametrize("stack", [[], [7], [1, 2, 3], ["a", "b", "c", "d"]])
    def test_plain_path(self, stack: list) -> None:
        assert to_stack(to_queue(stack)) == stack

    @pytest.mark.parametrize("stack", [[], [7], [1, 2, 3], ["a", "b", "c", "d"]])
    def test_reverse_path(self, stack: list) -> None:
        assert to_stack_reverse(to_queue_reverse(stack)) == stack


class TestNonRaisingAccess:
    def test_pop_or_default(self) -> None:
        stack = [1, 2]
        assert pop_or_default(stack) == 2
        assert pop_or_default(stack) == 1
        assert pop_or_default(stack, -1) == -1

    def test_peek_or_default(self) -> None:
        assert peek_or_default([1, 2]) == 2
        assert peek_or_default([]) is None
