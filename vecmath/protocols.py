"""Protocol-based abstraction for vector-like values.

The vector math functions never depend on a concrete vector class. Anything
exposing numeric ``x`` and ``y`` attributes and a ``(x, y)`` constructor
qualifies: ``vecmath.Vector2``, ``pygame.math.Vector2``, a plain dataclass.

Example:
    # ❌ Bad - tightly couples the math to one vector class
    if isinstance(value, Vector2):
        ...

    # ✅ Good - works with any value that has x and y
    if isinstance(value, VectorLike):
        ...

Results are built by calling ``type(vec)(x, y)``, so the caller gets back the
same kind of vector it passed in.
"""

import numbers
from typing import Any, Protocol, TypeVar, runtime_checkable


@runtime_checkable
class VectorLike(Protocol):
    """Protocol for values with two numeric components.

    In-place operations additionally require the components to be writable.
    """

    @property
    def x(self) -> float:
        """Horizontal component."""
        ...

    @x.setter
    def x(self, value: float) -> None:
        ...

    @property
    def y(self) -> float:
        """Vertical component."""
        ...

    @y.setter
    def y(self, value: float) -> None:
        ...


V = TypeVar("V", bound=VectorLike)


def is_scalar(value: Any) -> bool:
    """Return True for real numbers (ints, floats, numpy scalars)."""
    return isinstance(value, numbers.Real)


def is_vector_like(value: Any) -> bool:
    """Return True if ``value`` exposes ``x`` and ``y`` components.

    Scalars are rejected first so numeric types that grow unrelated ``x``/``y``
    attributes can never be mistaken for a vector.
    """
    return not is_scalar(value) and isinstance(value, VectorLike)


__all__ = ["V", "VectorLike", "is_scalar", "is_vector_like"]
