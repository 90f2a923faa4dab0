"""Unit tests for a single die."""

import random
from unittest.mock import patch

import pytest

from one_d_six.die import Die
from one_d_six.errors import ConstructionError, NumericOverflow
from one_d_six.rollable import U8, U64, U128


class TestConstruction:
    def test_no_roll_yet(self) -> None:
        die = Die(6)
        assert die.last_roll is None
        assert die.value() == 1

    def test_zero_sides(self) -> None:
        with pytest.raises(ConstructionError):
            Die(0)

    def test_negative_sides(self) -> None:
        with pytest.raises(ConstructionError):
            Die(-4)

    def test_sides_overflow(self) -> None:
        with pytest.raises(NumericOverflow):
            Die(256, U8)


class TestRoll:
    def test_coin_in_range(self) -> None:
        coin = Die(2, U128)
        for _ in range(100):
            assert coin.roll() in (1, 2)

    def test_d12_in_range(self, rng: random.Random) -> None:
        d12 = Die(12, U64)
        for _ in range(100):
            d12.roll(rng)
            assert 1 <= d12.value() <= 12

    def test_roll_is_remembered(self) -> None:
        die = Die(20)
        with patch("one_d_six.rollable.random.randint", return_value=17):
            assert die.roll() == 17
        assert die.last_roll == 17
        assert die.value() == 17

    def test_every_face_appears(self, rng: random.Random) -> None:
        die = Die(6)
        seen = {die.roll(rng) for _ in range(1000)}
        assert seen == {1, 2, 3, 4, 5, 6}


class TestAddAndCopy:
    def test_add_dice(self) -> None:
        for _ in range(100):
            penny = Die(2, U8)
            quarter = Die(2, U8)
            penny.roll()
            quarter.roll()
            assert 2 <= penny + quarter <= 4

    def test_add_unrolled(self) -> None:
        assert Die(4) + Die(6) == 2

    def test_copy_is_independent(self) -> None:
        die = Die(6)
        with patch("one_d_six.rollable.random.randint", return_value=5):
            die.roll()
        twin = die.copy()
        assert twin.value() == 5
        with patch("one_d_six.rollable.random.randint", return_value=2):
            twin.roll()
        assert die.value() == 5
        assert twin.value() == 2
