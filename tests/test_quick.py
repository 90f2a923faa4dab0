"""Unit tests for the quick-roll helpers."""

import random
from collections import Counter
from unittest.mock import patch

import pytest

from one_d_six import quickroll, try_quickroll
from one_d_six.errors import DiceError, MalformedNotation, NumericOverflow
from one_d_six.rollable import U8, U16, U32


class TestQuickroll:
    def test_d6_in_range(self) -> None:
        for _ in range(20):
            assert 1 <= quickroll("1d6") <= 6

    def test_2d6_in_range(self) -> None:
        for _ in range(20):
            assert 2 <= quickroll("2d6") <= 12

    def test_coin_flip_u8(self) -> None:
        counts = Counter(quickroll("1d2", U8) for _ in range(10_000))
        assert set(counts) == {1, 2}

    def test_one_sided(self) -> None:
        assert quickroll("5d1", U16) == 5

    def test_injected_rng_is_reproducible(self) -> None:
        first = [quickroll("3d6", U32, random.Random(7)) for _ in range(5)]
        second = [quickroll("3d6", U32, random.Random(7)) for _ in range(5)]
        assert first == second

    def test_deterministic_total(self) -> None:
        with patch("one_d_six.rollable.random.randint", return_value=4):
            assert quickroll("3d6") == 12

    def test_invalid_notation_raises(self) -> None:
        with pytest.raises(MalformedNotation):
            quickroll("bad notation")

    def test_total_overflows_narrow_type(self) -> None:
        with patch("one_d_six.rollable.random.randint", return_value=250):
            with pytest.raises(NumericOverflow):
                quickroll("2d250", U8)


class TestTryQuickroll:
    def test_success(self) -> None:
        assert try_quickroll("1d1") == 1

    @pytest.mark.parametrize("notation", ["0d6", "3d0", "d6", "3d", "3dd6", "xdy"])
    def test_failure_returns_none(self, notation: str) -> None:
        assert try_quickroll(notation) is None

    def test_never_raises_dice_error(self) -> None:
        try:
            try_quickroll("1d300", U8)
        except DiceError:  # pragma: no cover
            pytest.fail("try_quickroll raised")
