"""
Default parameters and axis conventions for Bézier evaluation and inversion.
"""

# Newton iterations used by the approximator when none are given
DEFAULT_REFINEMENT = 10

# Axis indices for the 2D easing-curve case (x_1 is x, x_2 is y)
AXIS_X = 0
AXIS_Y = 1

# Parameter domain the approximator clamps to
T_MIN = 0.0
T_MAX = 1.0

# Samples returned by BezierCurve.sample() by default
DEFAULT_SAMPLE_COUNT = 20
