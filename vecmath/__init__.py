"""Generic 2D vector math over any value with ``x`` and ``y`` components."""

from vecmath.exceptions import DegenerateVectorError, VecMathError
from vecmath.protocols import VectorLike, is_scalar, is_vector_like
from vecmath.vector_math import (
    add,
    deg_to_rad,
    distance,
    dot,
    get_angle_between,
    get_inverted,
    get_length,
    get_length_squared,
    get_normalized,
    get_rotated,
    get_rotation_angle,
    invert,
    multiply,
    normal_between_points,
    normalize,
    projection,
    rad_to_deg,
    reflect,
    rotate,
    scale,
    scale_left,
    sqr,
    subtract,
)
from vecmath.math_utils import Vector2

__version__ = "0.1.0"

__all__ = [
    "DegenerateVectorError",
    "VecMathError",
    "Vector2",
    "VectorLike",
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
    "is_scalar",
    "is_vector_like",
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
