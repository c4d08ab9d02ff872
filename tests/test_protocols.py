"""Tests that the vector math works on any vector-like type."""

from dataclasses import dataclass

import pytest

from vecmath import vector_math as vm
from vecmath.exceptions import DegenerateVectorError
from vecmath.math_utils import Vector2
from vecmath.protocols import VectorLike, is_scalar, is_vector_like


@dataclass
class PlainVec:
    x: float
    y: float


@dataclass(frozen=True)
class FrozenVec:
    x: float
    y: float


class TestCapabilityChecks:
    def test_vector_like_types(self):
        assert isinstance(Vector2(1, 2), VectorLike)
        assert is_vector_like(PlainVec(1, 2))
        assert is_vector_like(FrozenVec(1, 2))

    def test_non_vectors_are_rejected(self):
        assert not is_vector_like((1, 2))
        assert not is_vector_like(3.0)
        assert not is_vector_like("xy")

    def test_scalars(self):
        assert is_scalar(1)
        assert is_scalar(2.5)
        assert not is_scalar(Vector2())
        assert not is_scalar("1")


class TestForeignVectorTypes:
    """Results keep the caller's vector type."""

    def test_plain_dataclass(self):
        result = vm.add(PlainVec(1, 2), PlainVec(3, 4))
        assert result == PlainVec(4, 6)
        assert vm.multiply(2, PlainVec(1, 1)) == PlainVec(2, 2)

    def test_plain_dataclass_in_place(self):
        v = PlainVec(0.0, 3.0)
        assert vm.normalize(v) is v
        assert v == PlainVec(0.0, 1.0)

    def test_frozen_dataclass_pure_operations(self):
        v = FrozenVec(3.0, 4.0)
        assert vm.get_inverted(v) == FrozenVec(-3.0, -4.0)
        assert vm.get_length(v) == 5.0
        assert vm.projection(v, FrozenVec(0.0, 0.0)) == FrozenVec(0.0, 0.0)

    def test_mixed_types(self):
        result = vm.subtract(Vector2(5, 5), PlainVec(1, 2))
        assert isinstance(result, Vector2)
        assert result == Vector2(4, 3)


class TestPygameVectors:
    """pygame.math.Vector2 satisfies the capability without adaptation."""

    @pytest.fixture
    def pg_vector(self):
        pygame_math = pytest.importorskip("pygame.math")
        return pygame_math.Vector2

    def test_is_vector_like(self, pg_vector):
        assert is_vector_like(pg_vector(1, 2))

    def test_arithmetic_returns_pygame_vectors(self, pg_vector):
        result = vm.add(pg_vector(1, 2), pg_vector(3, 4))
        assert isinstance(result, pg_vector)
        assert (result.x, result.y) == (4, 6)
        assert vm.dot(pg_vector(1, 1), pg_vector(1, 1)) == 2.0

    def test_rotation_convention(self, pg_vector):
        rotated = vm.get_rotated(pg_vector(1, 0), 90)
        assert rotated.x == pytest.approx(0.0, abs=1e-6)
        assert rotated.y == pytest.approx(-1.0)

    def test_in_place_normalize(self, pg_vector):
        v = pg_vector(0, 4)
        assert vm.normalize(v) is v
        assert v.y == pytest.approx(1.0)

    def test_zero_vector_raises(self, pg_vector):
        with pytest.raises(DegenerateVectorError):
            vm.get_rotation_angle(pg_vector(0, 0))
