"""Pytest configuration and fixtures for vecmath tests."""

import random

import pytest

from vecmath.math_utils import Vector2


@pytest.fixture
def seeded_rng():
    """Provide a deterministic RNG for tests."""
    return random.Random(42)


@pytest.fixture
def random_vectors(seeded_rng):
    """Fifty non-zero vectors with components in [-100, 100]."""
    vectors = []
    while len(vectors) < 50:
        vec = Vector2(seeded_rng.uniform(-100, 100), seeded_rng.uniform(-100, 100))
        if vec.length() > 1e-6:
            vectors.append(vec)
    return vectors
