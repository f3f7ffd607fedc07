"""
General Bézier curve of any order and any number of dimensions.

Evaluation follows the generalized Bernstein form
    B(t) = Σ_{i=0..N} C(N,i) t^i (1-t)^(N-i) P_i
and the curve can be queried as an approximate function y = f(x) through the
iterative inverse in nbezier.inverse.
"""

import numpy as np

from . import vector
from .bernstein import basis_term, get_D_matrix
from .constants import AXIS_X, AXIS_Y, DEFAULT_REFINEMENT, DEFAULT_SAMPLE_COUNT
from .inverse import newton_inverse
from .utils import format_vector


def _as_control_points(points):
    """Validate a sequence of point vectors and stack them into an (order, dim) array."""
    if len(points) == 0:
        raise ValueError("at least one control point is required")

    rows = [vector.as_vector(p) for p in points]
    cardinality = rows[0].shape[0]
    if cardinality == 0:
        raise ValueError("control points must have at least one coordinate")

    for i, row in enumerate(rows):
        if row.shape[0] != cardinality:
            raise ValueError(
                f"control point {i} has {row.shape[0]} coordinates, expected {cardinality}"
            )
    return np.vstack(rows)


def _as_refinement(n):
    if isinstance(n, bool) or not isinstance(n, (int, np.integer)):
        raise ValueError(f"refinement must be an integer, got {n!r}")
    if n < 1:
        raise ValueError(f"refinement must be positive, got {n}")
    return int(n)


def _is_index(value):
    # bools are ints, but index numpy arrays as masks
    return not isinstance(value, bool) and isinstance(value, (int, np.integer))


class BezierCurve:
    """
    Bézier curve over an ordered list of control points.

    Order is the number of points (2 linear, 3 quadratic, 4 cubic, ...),
    cardinality is the number of coordinates per point. Both are derived from
    the stored points, so they follow set_points()/set_point() immediately.

    Usage:
        curve = BezierCurve([[0, 0], [0.75, 0.25], [1, 1]])
        curve.evaluate(0.5)   # position at t = 0.5
        curve.y_x(0.5)        # y where x = 0.5

    Instances hold no lock; share one across threads only with external
    serialization.
    """

    def __init__(self, points, refinement=DEFAULT_REFINEMENT):
        """
        Args:
            points: Sequence of control point vectors, all of the same length
            refinement: Iteration budget for the inverse approximator.
                        Larger values give more precision on steep curves
                        at the cost of speed.
        """
        self._points = _as_control_points(points)
        self._refinement = _as_refinement(refinement)

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def points(self):
        return self._points.copy()

    @property
    def order(self):
        return self._points.shape[0]

    @property
    def degree(self):
        return self._points.shape[0] - 1

    @property
    def cardinality(self):
        return self._points.shape[1]

    @property
    def refinement(self):
        return self._refinement

    def set_points(self, points):
        """Replace every control point. Order and cardinality follow the new list."""
        self._points = _as_control_points(points)

    def set_point(self, index, point):
        """
        Replace one control point in place.

        Raises:
            IndexError: index outside [0, order)
            ValueError: point length differs from the curve's cardinality
        """
        if not _is_index(index):
            raise IndexError(f"control point index must be an integer, got {index!r}")
        if not 0 <= index < self.order:
            raise IndexError(f"control point index {index} out of range for order {self.order}")
        p = vector.as_vector(point)
        if p.shape[0] != self.cardinality:
            raise ValueError(
                f"point has {p.shape[0]} coordinates, expected {self.cardinality}"
            )
        self._points[index] = p

    def set_refinement_iterations(self, n):
        self._refinement = _as_refinement(n)

    def get_control_points(self) -> np.ndarray:
        """Return a copy of the control points."""
        return self._points.copy()

    def get_degree(self) -> int:
        return self.degree

    def get_dimension(self) -> int:
        return self.cardinality

    def check_axis(self, axis):
        """Raise IndexError unless axis names one of the curve's coordinates."""
        if not _is_index(axis):
            raise IndexError(f"axis must be an integer, got {axis!r}")
        if not 0 <= axis < self.cardinality:
            raise IndexError(f"axis {axis} out of range for cardinality {self.cardinality}")

    # ------------------------------------------------------------------
    # Evaluation
    # ------------------------------------------------------------------

    def evaluate(self, t):
        """
        Curve position at parameter t.

        t is not clamped; values outside [0, 1] extrapolate the polynomial.
        """
        N = self.degree
        b = vector.zero(self.cardinality)
        for i in range(N + 1):
            b = vector.add(b, vector.scale(basis_term(i, N, t), self._points[i]))
        return b

    def differential(self, t):
        """
        Tangent vector dB/dt at parameter t.

        B'(t) = N * Σ(i=0 to N-1) (P_{i+1} - P_i) * B_{i,N-1}(t)

        A single-point curve is constant, so its differential is the zero vector.
        """
        N = self.degree
        g = vector.zero(self.cardinality)
        for i in range(N):
            g = vector.add(
                g,
                vector.scale(
                    basis_term(i, N - 1, t),
                    vector.sub(self._points[i + 1], self._points[i]),
                ),
            )
        return vector.scale(N, g)

    def hodograph(self) -> 'BezierCurve':
        """
        Derivative curve, with control points D @ P.

        Returns:
            BezierCurve of degree N-1 (a single zero point for a constant curve)
        """
        if self.degree == 0:
            return BezierCurve(np.zeros((1, self.cardinality)), self._refinement)
        return BezierCurve(get_D_matrix(self.degree) @ self._points, self._refinement)

    def slope(self, axis_x, axis_y, t):
        """
        Ratio of two differential components, d(axis_y)/d(axis_x), at t.

        For a 2D curve, dy/dx at t is curve.slope(0, 1, t).

        Returns 0.0 when the axis_x component of the differential is zero;
        the true slope there is infinite, and 0.0 keeps the inverse
        iteration from blowing up near vertical tangents.
        """
        self.check_axis(axis_x)
        self.check_axis(axis_y)
        g = self.differential(t)
        if g[axis_x] == 0:
            return 0.0
        return float(g[axis_y] / g[axis_x])

    def sample(self, num_points=DEFAULT_SAMPLE_COUNT):
        """
        Evaluate the curve at evenly spaced t in [0, 1].

        Returns:
            (num_points, cardinality) array
        """
        if num_points < 2:
            raise ValueError("num_points must be >= 2")
        ts = np.linspace(0, 1, num_points)
        return np.vstack([self.evaluate(t) for t in ts])

    # ------------------------------------------------------------------
    # Inversion
    # ------------------------------------------------------------------

    def approximate_result(self, axis_x, axis_y, target_x, verbose=False):
        """Inverse lookup with convergence details, see nbezier.inverse.newton_inverse."""
        return newton_inverse(self, axis_x, axis_y, target_x, self._refinement, verbose=verbose)

    def approximate(self, axis_x, axis_y, target_x):
        """
        Treat the curve as a function along axis_x and return its axis_y value.

        If the curve approximates y = f(x) with x_1 as x and x_2 as y, then
        f(x) ~~ curve.approximate(0, 1, x).
        """
        return self.approximate_result(axis_x, axis_y, target_x).value

    def y_x(self, x0):
        return self.approximate(AXIS_X, AXIS_Y, x0)

    def x_y(self, y0):
        return self.approximate(AXIS_Y, AXIS_X, y0)

    def as_function(self, axis_x=AXIS_X, axis_y=AXIS_Y):
        """One-argument callable computing approximate(axis_x, axis_y, value)."""
        def f(value):
            return self.approximate(axis_x, axis_y, value)
        return f

    def __repr__(self) -> str:
        pts = ', '.join(format_vector(p) for p in self._points)
        return (f"BezierCurve(order={self.order}, cardinality={self.cardinality}, "
                f"refinement={self._refinement}, points=[{pts}])")
