"""Reference vector type for the vector math functions.

This module provides a small mutable Vector2 whose operators delegate to
``vecmath.vector_math``, so ``a * b`` dispatches between scaling and the dot
product by operand type the same way ``multiply`` does.
"""

from __future__ import annotations

from typing import Iterator

from vecmath import vector_math
from vecmath.config.vectors import EQUALITY_TOLERANCE
from vecmath.protocols import is_scalar, is_vector_like


class Vector2:
    """A 2D vector class for mathematical operations."""

    __slots__ = ("x", "y")

    def __init__(self, x: float = 0.0, y: float = 0.0) -> None:
        self.x: float = float(x)
        self.y: float = float(y)

    def __add__(self, other: "Vector2") -> "Vector2":
        return vector_math.add(self, other)

    def __sub__(self, other: "Vector2") -> "Vector2":
        return vector_math.subtract(self, other)

    def __mul__(self, other):
        """Scale by a scalar, or take the dot product with another vector."""
        if is_scalar(other) or is_vector_like(other):
            return vector_math.multiply(self, other)
        return NotImplemented

    def __rmul__(self, other):
        if is_scalar(other):
            return vector_math.scale_left(other, self)
        return NotImplemented

    def __truediv__(self, scalar: float) -> "Vector2":
        return Vector2(self.x / scalar, self.y / scalar)

    def __neg__(self) -> "Vector2":
        return vector_math.get_inverted(self)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def length(self) -> float:
        return vector_math.get_length(self)

    def length_squared(self) -> float:
        return vector_math.get_length_squared(self)

    def normalize(self) -> "Vector2":
        """Return a unit-length copy; raises DegenerateVectorError for zero length."""
        return vector_math.get_normalized(self)

    def dot(self, other: "Vector2") -> float:
        return vector_math.dot(self, other)

    def update(self, x: float, y: float) -> None:
        self.x = float(x)
        self.y = float(y)

    def copy(self) -> "Vector2":
        """Return a copy of this vector."""
        return Vector2(self.x, self.y)

    def __eq__(self, other: object) -> bool:
        """Check if two vectors are equal."""
        if other.__class__ is not Vector2:
            return False
        return abs(self.x - other.x) < EQUALITY_TOLERANCE and abs(self.y - other.y) < EQUALITY_TOLERANCE

    def __ne__(self, other: object) -> bool:
        """Check if two vectors are not equal."""
        return not self.__eq__(other)

    def __repr__(self) -> str:
        return f"Vector2({self.x}, {self.y})"

    def add_inplace(self, other: "Vector2") -> "Vector2":
        """Add another vector to this one in-place."""
        return self._assign(vector_math.add(self, other))

    def sub_inplace(self, other: "Vector2") -> "Vector2":
        """Subtract another vector from this one in-place."""
        return self._assign(vector_math.subtract(self, other))

    def mul_inplace(self, scalar: float) -> "Vector2":
        """Multiply this vector by a scalar in-place."""
        return self._assign(vector_math.scale(self, scalar))

    def div_inplace(self, scalar: float) -> "Vector2":
        """Divide this vector by a scalar in-place; raises ZeroDivisionError for 0."""
        return self._assign(vector_math.scale(self, 1.0 / scalar))

    def normalize_inplace(self) -> "Vector2":
        """Normalize this vector in-place; raises DegenerateVectorError for zero length."""
        return vector_math.normalize(self)

    def limit_inplace(self, max_length: float) -> "Vector2":
        """Limit the length of this vector in-place."""
        length = self.length()
        if length > max_length and length > 0:
            self._assign(vector_math.scale(vector_math.get_normalized(self), max_length))
        return self

    def _assign(self, other: "Vector2") -> "Vector2":
        self.x = other.x
        self.y = other.y
        return self


__all__ = ["Vector2"]
