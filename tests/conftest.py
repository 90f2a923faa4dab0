"""Shared test fixtures.

rng
    A seeded ``random.Random``, for tests that want a reproducible but still
    random sequence. Tests that need exact faces patch
    ``one_d_six.rollable.random.randint`` instead.
"""

from __future__ import annotations

import random

import pytest


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)
