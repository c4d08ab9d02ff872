"""Showcase configuration constants.

The canvas size only fixes the default midpoint; nothing is drawn.
"""

CANVAS_WIDTH = 1200
CANVAS_HEIGHT = 700

# Vector added/subtracted in the ADDITION and SUBTRACTION modes
OFFSET_ADDEND = (50.0, 50.0)

# Scalar used by the MULTIPLICATION mode
MULTIPLIER = 2

# The unit normal is stretched to this length so it is visible next to the pointer
NORMAL_DISPLAY_LENGTH = 100

# Length of the normal guide drawn from mid in the REFLECT mode
NORMAL_GUIDE_LENGTH = 50

ROTATION_STEP_DEGREES = 45

# Half length of the horizontal guide line through mid (REFLECT, PROJECTION)
GUIDE_HALF_LENGTH = 200.0

# Axes the DOT mode measures the working vector against
DOT_AXES = {
    "diagonal": (1.0, 1.0),
    "vertical": (0.0, 1.0),
    "horizontal": (1.0, 0.0),
}
