"""Headless calculation modes for showcasing the vector math.

Each mode takes a pointer position and a fixed midpoint, forms the working
vector ``l2 = pointer - mid`` and runs one vector math operation on it. The
result is returned as a ``ShowcaseFrame``: the final offset, the tip point
``mid + offset``, optional scalar measurements and guide segments a front-end
could draw. Nothing here opens a window or reads input.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from vecmath import vector_math
from vecmath.config.showcase import (
    CANVAS_HEIGHT,
    CANVAS_WIDTH,
    DOT_AXES,
    GUIDE_HALF_LENGTH,
    MULTIPLIER,
    NORMAL_DISPLAY_LENGTH,
    NORMAL_GUIDE_LENGTH,
    OFFSET_ADDEND,
    ROTATION_STEP_DEGREES,
)
from vecmath.math_utils import Vector2
from vecmath.protocols import VectorLike

logger = logging.getLogger(__name__)

Segment = Tuple[Vector2, Vector2]

PREAMBLE = "l1 = mid\nl2 = pointer - mid\nline = {l1, l2 + l1}\n\n"


class CalculationType(Enum):
    """The calculation applied to the working vector."""

    NONE = "none"
    MULTIPLICATION = "multiplication"
    ADDITION = "addition"
    SUBTRACTION = "subtraction"
    NORMAL = "normal"
    REFLECT = "reflect"
    PROJECTION = "projection"
    ROTATE = "rotate"
    INVERT = "invert"
    LENGTH = "length"
    DISTANCE = "distance"
    DOT = "dot"

    @classmethod
    def from_name(cls, name: str) -> "CalculationType":
        """Parse a mode name case-insensitively.

        Raises:
            ValueError: If ``name`` is not a known mode
        """
        try:
            return cls(name.strip().lower())
        except ValueError:
            valid = ", ".join(member.value for member in cls)
            raise ValueError(f"Unknown calculation mode {name!r}; expected one of: {valid}") from None


@dataclass
class ShowcaseFrame:
    """Result of evaluating one calculation mode."""

    calc_type: CalculationType
    mid: Vector2
    offset: Vector2
    description: str
    measurements: Dict[str, float] = field(default_factory=dict)
    guides: Tuple[Segment, ...] = ()

    @property
    def tip(self) -> Vector2:
        """End point of the result line, ``mid + offset``."""
        return vector_math.add(self.mid, self.offset)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "mode": self.calc_type.value,
            "mid": _pair(self.mid),
            "offset": _pair(self.offset),
            "tip": _pair(self.tip),
            "description": self.description,
            "measurements": dict(self.measurements),
            "guides": [[_pair(start), _pair(end)] for start, end in self.guides],
        }


def _pair(vec: VectorLike) -> List[float]:
    return [float(vec.x), float(vec.y)]


def default_mid() -> Vector2:
    """Centre of the showcase canvas."""
    return Vector2(CANVAS_WIDTH / 2, CANVAS_HEIGHT / 2)


def _horizontal_guide(mid: Vector2) -> Segment:
    half = Vector2(GUIDE_HALF_LENGTH, 0.0)
    return vector_math.add(mid, half), vector_math.subtract(mid, half)


def evaluate(calc_type: CalculationType, pointer: Vector2, mid: Optional[Vector2] = None) -> ShowcaseFrame:
    """Run one calculation mode for a pointer position.

    Args:
        calc_type: Mode to evaluate
        pointer: Pointer position in canvas coordinates
        mid: Fixed anchor point; defaults to the canvas centre

    Returns:
        ShowcaseFrame describing the result

    Raises:
        DegenerateVectorError: In NORMAL mode when ``pointer`` equals ``mid``
    """
    if mid is None:
        mid = default_mid()
    l2 = vector_math.subtract(pointer, mid)
    measurements: Dict[str, float] = {}
    guides: Tuple[Segment, ...] = ()
    text = ""

    if calc_type is CalculationType.MULTIPLICATION:
        l2 = vector_math.scale(l2, MULTIPLIER)
        text = f"Modify the vector with multiplication: \nl2 = l2 * {MULTIPLIER}"
    elif calc_type is CalculationType.ADDITION:
        l2 = vector_math.add(l2, Vector2(*OFFSET_ADDEND))
        text = "Modify the vector with addition: \nl2 = l2 + {%g, %g}" % OFFSET_ADDEND
    elif calc_type is CalculationType.SUBTRACTION:
        l2 = vector_math.subtract(l2, Vector2(*OFFSET_ADDEND))
        text = "Modify the vector with subtraction: \nl2 = l2 - {%g, %g}" % OFFSET_ADDEND
    elif calc_type is CalculationType.NORMAL:
        l2 = vector_math.scale(vector_math.normal_between_points(pointer, mid), NORMAL_DISPLAY_LENGTH)
        text = (
            "Normal between mid and pointer: \n"
            f"l2 = normal_between_points(pointer, mid) * {NORMAL_DISPLAY_LENGTH}"
        )
    elif calc_type is CalculationType.REFLECT:
        right, left = _horizontal_guide(mid)
        normal = vector_math.normal_between_points(left, right)
        guides = ((right, left), (mid, vector_math.add(mid, vector_math.scale(normal, NORMAL_GUIDE_LENGTH))))
        l2 = vector_math.reflect(l2, normal)
        text = "Reflect the pointer over the line y = 0: \nl2 = reflect(l2, normal)"
    elif calc_type is CalculationType.PROJECTION:
        right, left = _horizontal_guide(mid)
        guides = ((right, left),)
        l2 = vector_math.projection(l2, vector_math.subtract(left, right))
        text = "Project the pointer onto the line y = 0: \nl2 = projection(l2, left - right)"
    elif calc_type is CalculationType.ROTATE:
        vector_math.rotate(l2, ROTATION_STEP_DEGREES)
        text = f"Rotate the vector by {ROTATION_STEP_DEGREES} degrees: \nrotate(l2, {ROTATION_STEP_DEGREES})"
    elif calc_type is CalculationType.INVERT:
        vector_math.invert(l2)
        text = "Invert the vector: \ninvert(l2)"
    elif calc_type is CalculationType.LENGTH:
        measurements["length"] = vector_math.get_length(l2)
        text = "Get the length of the vector: \nget_length(l2)"
    elif calc_type is CalculationType.DISTANCE:
        measurements["distance"] = vector_math.distance(mid, pointer)
        text = "Get the distance between the pointer and mid: \ndistance(mid, pointer)"
    elif calc_type is CalculationType.DOT:
        for name, axis in DOT_AXES.items():
            measurements[name] = vector_math.dot(Vector2(*axis), l2)
        text = "Get the dot product between l2 and three axis vectors: \n" + "\n".join(
            f"{name} = {{{axis[0]:g}, {axis[1]:g}}} * l2" for name, axis in DOT_AXES.items()
        )

    logger.debug("Evaluated %s: offset=%r measurements=%r", calc_type.value, l2, measurements)
    return ShowcaseFrame(
        calc_type=calc_type,
        mid=mid,
        offset=l2,
        description=PREAMBLE + text,
        measurements=measurements,
        guides=guides,
    )


__all__ = ["CalculationType", "ShowcaseFrame", "default_mid", "evaluate"]
