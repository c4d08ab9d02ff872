"""Generic 2D vector math.

This module provides stateless functions over any vector-like value (see
``vecmath.protocols.VectorLike``): arithmetic, normalization, rotation,
projection, reflection and angle/distance measurements.

Calling conventions:
    get_*      return a new vector of the input's type, inputs untouched
    invert / normalize / rotate
               mutate the receiver and return it for chaining

Angle conventions:
    Angles are in degrees. ``rotate``/``get_rotated`` apply the standard
    counter-clockwise rotation matrix to the *negated* angle, so a positive
    angle turns clockwise in math coordinates (counter-clockwise on a screen
    whose y axis points down). ``get_rotation_angle`` reports orientation
    counter-clockwise from +x in [0, 360).

Degenerate input:
    Direction-dependent operations raise ``DegenerateVectorError`` for a
    zero-length vector instead of producing NaN. ``projection`` onto a zero
    axis is defined and returns the zero vector.
"""

import logging
import math
from typing import Any, Tuple, Union

from vecmath.config.vectors import FULL_TURN_DEGREES, PI
from vecmath.exceptions import DegenerateVectorError
from vecmath.protocols import V, VectorLike, is_scalar, is_vector_like

logger = logging.getLogger(__name__)

Scalar = Union[int, float]


def _clamp_unit(value: float) -> float:
    # Rounding can push a cosine/sine a hair outside [-1, 1]
    return max(-1.0, min(1.0, value))


def _require_length(vec: VectorLike, operation: str) -> float:
    """Return the length of ``vec`` or raise if it has no direction."""
    length = get_length(vec)
    if length == 0:
        logger.debug("%s rejected zero-length vector %r", operation, vec)
        raise DegenerateVectorError(operation)
    return length


# ---------------------------------------------------------------------------
# Arithmetic
# ---------------------------------------------------------------------------


def add(vec1: V, vec2: VectorLike) -> V:
    """Component-wise sum."""
    return type(vec1)(vec1.x + vec2.x, vec1.y + vec2.y)


def subtract(vec1: V, vec2: VectorLike) -> V:
    """Component-wise difference ``vec1 - vec2``."""
    return type(vec1)(vec1.x - vec2.x, vec1.y - vec2.y)


def scale(vec: V, scalar: Scalar) -> V:
    """Multiply both components by ``scalar``."""
    return type(vec)(vec.x * scalar, vec.y * scalar)


def scale_left(scalar: Scalar, vec: V) -> V:
    """Scalar-first form of :func:`scale`; the result is identical."""
    return scale(vec, scalar)


def dot(vec1: VectorLike, vec2: VectorLike) -> float:
    """Return the dot product of two vectors."""
    return float(vec1.x * vec2.x + vec1.y * vec2.y)


def multiply(left: Any, right: Any) -> Any:
    """Dispatch ``left * right`` by operand types.

    vector * scalar and scalar * vector scale the vector; vector * vector is
    the dot product.

    Raises:
        TypeError: If the operands are not one of the combinations above
    """
    if is_vector_like(left):
        if is_scalar(right):
            return scale(left, right)
        if is_vector_like(right):
            return dot(left, right)
    elif is_scalar(left) and is_vector_like(right):
        return scale_left(left, right)
    raise TypeError(
        f"unsupported operand types for multiply: "
        f"'{type(left).__name__}' and '{type(right).__name__}'"
    )


def sqr(value: Scalar) -> Scalar:
    return value * value


# ---------------------------------------------------------------------------
# Units
# ---------------------------------------------------------------------------


def rad_to_deg(radians: Scalar) -> float:
    return radians * 180.0 / PI


def deg_to_rad(degrees: Scalar) -> float:
    return degrees / 180.0 * PI


# ---------------------------------------------------------------------------
# Length, inversion, normalization
# ---------------------------------------------------------------------------


def get_length(vec: VectorLike) -> float:
    """Return the Euclidean length; 0.0 for the zero vector."""
    return math.hypot(vec.x, vec.y)


def get_length_squared(vec: VectorLike) -> float:
    return float(sqr(vec.x) + sqr(vec.y))


def get_inverted(vec: V) -> V:
    return type(vec)(-vec.x, -vec.y)


def invert(vec: V) -> V:
    """Negate both components in place and return ``vec``."""
    vec.x = -vec.x
    vec.y = -vec.y
    return vec


def get_normalized(vec: V) -> V:
    """Return a unit vector pointing the same way as ``vec``.

    Raises:
        DegenerateVectorError: If ``vec`` has zero length
    """
    length = _require_length(vec, "get_normalized")
    return type(vec)(vec.x / length, vec.y / length)


def normalize(vec: V) -> V:
    """Scale ``vec`` to unit length in place and return it.

    Raises:
        DegenerateVectorError: If ``vec`` has zero length; ``vec`` is left unchanged
    """
    length = _require_length(vec, "normalize")
    vec.x /= length
    vec.y /= length
    return vec


def distance(point1: VectorLike, point2: VectorLike) -> float:
    """Return the Euclidean distance between two points."""
    return math.hypot(point2.x - point1.x, point2.y - point1.y)


# ---------------------------------------------------------------------------
# Angles and rotation
# ---------------------------------------------------------------------------


def get_rotation_angle(vec: VectorLike) -> float:
    """Return the orientation of ``vec`` in degrees, in [0, 360).

    Measured counter-clockwise from the positive x axis. The angle comes from
    ``acos`` of the normalized x component; a negative ``asin`` of the
    normalized y component selects the lower half of the circle.

    Raises:
        DegenerateVectorError: If ``vec`` has zero length
    """
    length = _require_length(vec, "get_rotation_angle")
    angle_x_rad = math.acos(_clamp_unit(vec.x / length))
    angle_y_rad = math.asin(_clamp_unit(vec.y / length))

    if angle_y_rad < 0:
        angle_rad = deg_to_rad(FULL_TURN_DEGREES) - angle_x_rad
    else:
        angle_rad = angle_x_rad

    # 360 - acos(1.0) lands exactly on a full turn for tiny negative y
    return rad_to_deg(angle_rad) % FULL_TURN_DEGREES


def get_angle_between(vec1: VectorLike, vec2: VectorLike) -> float:
    """Return the unsigned angle in degrees between two directions, in [0, 180].

    Raises:
        DegenerateVectorError: If either vector has zero length
    """
    length1 = _require_length(vec1, "get_angle_between")
    length2 = _require_length(vec2, "get_angle_between")
    # Unit components first so huge or tiny inputs cannot overflow the product
    cosine = _clamp_unit(
        (vec1.x / length1) * (vec2.x / length2) + (vec1.y / length1) * (vec2.y / length2)
    )
    return rad_to_deg(math.acos(cosine))


def _rotated_components(x: float, y: float, angle: float) -> Tuple[float, float]:
    angle_rad = deg_to_rad(-angle)
    cos_a = math.cos(angle_rad)
    sin_a = math.sin(angle_rad)
    return x * cos_a - y * sin_a, x * sin_a + y * cos_a


def get_rotated(vec: V, angle: float) -> V:
    """Return ``vec`` rotated by ``angle`` degrees (positive is clockwise).

    Example:
        get_rotated(Vector2(1, 0), 90) is Vector2(0, -1) up to rounding.
    """
    new_x, new_y = _rotated_components(vec.x, vec.y, angle)
    return type(vec)(new_x, new_y)


def rotate(vec: V, angle: float) -> V:
    """Rotate ``vec`` in place by ``angle`` degrees and return it."""
    # Both components are computed from the original x/y before assignment
    vec.x, vec.y = _rotated_components(vec.x, vec.y, angle)
    return vec


# ---------------------------------------------------------------------------
# Projection, reflection, normals
# ---------------------------------------------------------------------------


def projection(vec: VectorLike, axis: V) -> V:
    """Return the component of ``vec`` along ``axis``.

    ``((vec . axis) / (axis . axis)) * axis``, evaluated against the unit axis
    so a tiny or huge axis never divides by an underflowed or overflowed
    squared length. A zero axis has no direction to project onto and yields
    the zero vector.
    """
    axis_length = get_length(axis)
    if axis_length == 0:
        logger.debug("projection onto zero axis, returning zero vector")
        return type(axis)(0.0, 0.0)
    ux = axis.x / axis_length
    uy = axis.y / axis_length
    k = vec.x * ux + vec.y * uy
    return type(axis)(k * ux, k * uy)


def reflect(vec: V, normal: VectorLike) -> V:
    """Reflect ``vec`` across the line whose normal is ``normal``.

    Computes ``vec - 2 (vec . n) n`` with ``n`` the normalized ``normal``, so
    the normal does not need to be unit length.

    Raises:
        DegenerateVectorError: If ``normal`` has zero length
    """
    length = _require_length(normal, "reflect")
    nx = normal.x / length
    ny = normal.y / length
    twice_dot = 2.0 * (vec.x * nx + vec.y * ny)
    return type(vec)(vec.x - twice_dot * nx, vec.y - twice_dot * ny)


def normal_between_points(point1: V, point2: VectorLike) -> V:
    """Return the unit normal of the segment ``point1 -> point2``.

    The direction ``d = point2 - point1`` is turned into ``(d.y, -d.x)``, so
    ``(0, 0) -> (1, 0)`` gives ``(0, -1)``.

    Raises:
        DegenerateVectorError: If the two points coincide
    """
    direction = subtract(point2, point1)
    normal = type(point1)(direction.y, -direction.x)
    length = _require_length(normal, "normal_between_points")
    return type(point1)(normal.x / length, normal.y / length)


__all__ = [
    "add",
    "deg_to_rad",
    "distance",
    "dot",
    "get_angle_between",
    "get_inverted",
    "get_length",
    "get_length_squared",
    "get_normalized",
    "get_rotated",
    "get_rotation_angle",
    "invert",
    "multiply",
    "normal_between_points",
    "normalize",
    "projection",
    "rad_to_deg",
    "reflect",
    "rotate",
    "scale",
    "scale_left",
    "sqr",
    "subtract",
]
