"""Numeric constants shared by the vector math functions."""

import math

PI = math.acos(-1)

# Degrees in one full turn; rotation angles are reported in [0, FULL_TURN_DEGREES)
FULL_TURN_DEGREES = 360.0

# Component-wise tolerance used by Vector2.__eq__
EQUALITY_TOLERANCE = 1e-9
