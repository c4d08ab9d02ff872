import pytest

from vecmath.exceptions import DegenerateVectorError
from vecmath.math_utils import Vector2


def test_vector2_inplace_add():
    v1 = Vector2(1, 2)
    v2 = Vector2(3, 4)
    result = v1.add_inplace(v2)
    assert v1.x == 4
    assert v1.y == 6
    assert result is v1


def test_vector2_augmented_add_rebinds():
    v1 = Vector2(1, 2)
    v1 += Vector2(3, 4)
    assert v1 == Vector2(4, 6)


def test_vector2_inplace_sub():
    v1 = Vector2(5, 6)
    v1.sub_inplace(Vector2(2, 2))
    assert v1.x == 3
    assert v1.y == 4


def test_vector2_inplace_mul():
    v1 = Vector2(2, 3)
    v1.mul_inplace(2)
    assert v1.x == 4
    assert v1.y == 6


def test_vector2_inplace_div():
    v1 = Vector2(4, 6)
    v1.div_inplace(2)
    assert v1.x == 2
    assert v1.y == 3


def test_vector2_div_by_zero():
    v1 = Vector2(4, 6)
    with pytest.raises(ZeroDivisionError):
        v1 /= 0


def test_vector2_rmul():
    v = Vector2(1.5, -2.0)
    result = 3 * v
    assert result.x == pytest.approx(4.5)
    assert result.y == pytest.approx(-6.0)


def test_vector2_mul_by_vector_is_dot_product():
    assert Vector2(1, 1) * Vector2(1, 1) == 2.0
    assert Vector2(1, 0) * Vector2(0, 1) == 0.0


def test_vector2_mul_unsupported_operand():
    with pytest.raises(TypeError):
        Vector2(1, 1) * "2"


def test_vector2_neg_and_iter():
    x, y = -Vector2(1, -2)
    assert (x, y) == (-1.0, 2.0)


def test_vector2_equality_tolerance():
    base = Vector2(1.0, 1.0)
    close = Vector2(1.0 + 5e-10, 1.0 - 5e-10)
    far = Vector2(1.0, 1.0001)

    assert base == close
    assert base != far
    assert base != (1.0, 1.0)


def test_vector2_normalize_returns_copy():
    v = Vector2(3, 4)
    unit = v.normalize()
    assert unit == Vector2(0.6, 0.8)
    assert v == Vector2(3, 4)


def test_vector2_normalize_zero_raises():
    with pytest.raises(DegenerateVectorError):
        Vector2(0, 0).normalize()
    zero = Vector2()
    with pytest.raises(DegenerateVectorError):
        zero.normalize_inplace()
    assert zero == Vector2(0, 0)


def test_vector2_normalize_inplace_returns_self():
    v = Vector2(0, 5)
    assert v.normalize_inplace() is v
    assert v == Vector2(0, 1)


def test_vector2_limit_inplace():
    v = Vector2(30, 40)
    v.limit_inplace(5)
    assert v.length() == pytest.approx(5.0)
    short = Vector2(1, 0)
    short.limit_inplace(5)
    assert short == Vector2(1, 0)


def test_vector2_copy_and_update():
    v = Vector2(1, 2)
    c = v.copy()
    c.update(7, 8)
    assert v == Vector2(1, 2)
    assert c == Vector2(7, 8)
    assert repr(c) == "Vector2(7.0, 8.0)"


def test_vector2_inplace_helpers_return_self():
    v = Vector2(2, 4)
    assert v.sub_inplace(Vector2(1, 1)) is v
    assert v.mul_inplace(2) is v
    assert v.div_inplace(4) is v
    assert v == Vector2(0.5, 1.5)


def test_vector2_div_inplace_by_zero():
    v = Vector2(4, 6)
    with pytest.raises(ZeroDivisionError):
        v.div_inplace(0)
    assert v == Vector2(4, 6)


def test_vector2_limit_inplace_huge_vector():
    v = Vector2(3e200, 4e200)
    assert v.limit_inplace(10) is v
    assert v == Vector2(6, 8)


def test_vector2_limit_inplace_zero_vector():
    zero = Vector2()
    assert zero.limit_inplace(-1) == Vector2(0, 0)
