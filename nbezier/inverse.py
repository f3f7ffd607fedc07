"""
Iterative inversion of a Bézier curve along one axis.

Treats the curve as an implicit function x -> y and finds the parameter t at
which the curve's x component hits a target, in the manner of the shaping
function approximator at http://www.flong.com/texts/code/shapers_bez/.
"""

import warnings
from dataclasses import dataclass

from .constants import T_MIN, T_MAX
from .utils import format_number


@dataclass(frozen=True)
class ApproximationResult:
    """
    Outcome of an inverse lookup.

    Attributes:
        value: Curve component along axis_y at the final t
        t: Final curve parameter, within [T_MIN, T_MAX]
        residual: |x(t) - target| along axis_x at the final t
        iterations: Number of refinement passes performed
        exact: True if a pass hit the target exactly and stopped early
    """
    value: float
    t: float
    residual: float
    iterations: int
    exact: bool


def newton_inverse(curve, axis_x, axis_y, target_x, iterations, verbose=False):
    """
    Approximate the curve's axis_y value where its axis_x component equals target_x.

    Starting from t = target_x, each pass moves t by the axis_x error times
    the slope d(axis_y)/d(axis_x) and clamps it to [0, 1]. The loop stops after
    `iterations` passes or as soon as x(t) equals the target exactly.

    Results are only meaningful when the curve is monotonic along axis_x over
    [0, 1]; otherwise any one of several inverses, or a clamped endpoint, may
    come back.

    Args:
        curve: BezierCurve to invert
        axis_x: Index of the component the target refers to
        axis_y: Index of the component to report
        target_x: Target value along axis_x
        iterations: Maximum number of refinement passes
        verbose: Print progress for every pass

    Returns:
        ApproximationResult
    """
    curve.check_axis(axis_x)
    curve.check_axis(axis_y)

    if not (T_MIN <= target_x <= T_MAX):
        warnings.warn(
            f"target {target_x} lies outside [{T_MIN}, {T_MAX}]; "
            "the initial guess t = target may be far from the solution",
            RuntimeWarning,
        )

    t = float(target_x)
    exact = False
    passes = 0

    for it in range(iterations):
        passes = it + 1
        x1 = curve.evaluate(t)[axis_x]

        if x1 == target_x:
            exact = True
            break

        dydx = curve.slope(axis_x, axis_y, t)

        t -= (x1 - target_x) * dydx
        t = max(T_MIN, min(T_MAX, t))

        if verbose:
            print(f"Iter {it}: t={format_number(t)}, x={format_number(x1)}, "
                  f"error={format_number(x1 - target_x, '.3e')}")

    p = curve.evaluate(t)
    return ApproximationResult(
        value=float(p[axis_y]),
        t=t,
        residual=abs(float(p[axis_x]) - target_x),
        iterations=passes,
        exact=exact,
    )
