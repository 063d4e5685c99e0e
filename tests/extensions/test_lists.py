"""Tests for list helpers."""

from __future__ import annotations

import random

import pytest

from stdshims.errors import ArgumentNullError
from stdshims.extensions.lists import initialize, is_null_or_empty, mix


class TestIsNullOrEmpty:
    def test_cases(self) -> None:
        assert is_null_or_empty(None)
        assert is_null_or_empty([])
        assert not is_null_or_empty([0])


class TestInitialize:
    def test_fills_from_factory(self) -> None:
        items = [99]
        assert initialize(items, 3, lambda i: i * i) is items
        assert items == [0, 1, 4]

    def test_keeps_existing(self) -> None:
        items = [99]
        initialize(items, 2, str, clear_before=False)
        assert items == [99, "0", "1"]

    def test_none_passthrough(self) -> None:
        assert initialize(None, 3, str) is None


class TestMix:
    def test_same_elements(self) -> None:
        items = list(range(20))
        assert sorted(mix(items, random.Random(1))) == list(range(20))

    def test_seeded_is_deterministic(self) -> None:
        a = mix(list(range(20)), random.Random(7))
        b = mix(list(range(20)), random.Random(7))
        assert a == b

    def test_none(self) -> None:
        with pytest.raises(ArgumentNullError):
            mix(None)  # type: ignore[arg-type]
