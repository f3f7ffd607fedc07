import dataclasses

import numpy as np
import pytest
from scipy.optimize import brentq

from nbezier import BezierCurve, ApproximationResult, newton_inverse


LINEAR = [[0, 0], [1, 1]]
QUADRATIC = [[0, 0], [0.75, 0.25], [1, 1]]
EASE = [[0, 0], [0.4, 0.2], [0.6, 0.8], [1, 1]]


def test_linear_midpoint_hits_exactly():
    curve = BezierCurve(LINEAR)
    assert curve.y_x(0.5) == 0.5
    result = curve.approximate_result(0, 1, 0.5)
    assert result.exact
    assert result.iterations == 1
    assert result.residual == 0.0


def test_quadratic_endpoints():
    curve = BezierCurve(QUADRATIC)
    assert curve.y_x(0) == 0
    assert curve.y_x(1) == 1


def test_quadratic_midpoint_is_interior():
    curve = BezierCurve(QUADRATIC)
    y = curve.y_x(0.5)
    assert 0 < y < 1
    # x(t) = 1.5t - 0.5t^2 = 0.5 at t = 1.5 - sqrt(1.25)
    t = 1.5 - np.sqrt(1.25)
    assert y == pytest.approx(0.5 * t + 0.5 * t * t, abs=1e-6)


@pytest.mark.parametrize("x", [0.1, 0.25, 0.5, 0.75, 0.9])
def test_y_x_and_x_y_are_inverses(x):
    curve = BezierCurve(QUADRATIC, refinement=30)
    assert curve.x_y(curve.y_x(x)) == pytest.approx(x, abs=1e-9)


@pytest.mark.parametrize("x", [0.1, 0.3, 0.6, 0.9])
def test_same_axis_round_trip(x):
    curve = BezierCurve(QUADRATIC, refinement=30)
    result = curve.approximate_result(0, 0, x)
    assert result.value == pytest.approx(x, abs=1e-9)
    assert curve.evaluate(result.t)[0] == pytest.approx(x, abs=1e-9)


def test_round_trip_tightens_with_refinement():
    curve = BezierCurve(QUADRATIC, refinement=5)
    coarse = curve.approximate_result(0, 0, 0.3).residual
    curve.set_refinement_iterations(20)
    fine = curve.approximate_result(0, 0, 0.3).residual
    assert fine < coarse


def test_refinement_reduces_residual():
    curve = BezierCurve(QUADRATIC, refinement=1)
    one = curve.approximate_result(0, 1, 0.5)
    curve.set_refinement_iterations(10)
    ten = curve.approximate_result(0, 1, 0.5)
    assert one.iterations == 1
    assert one.residual == pytest.approx(0.0078125)
    assert ten.residual < one.residual


@pytest.mark.parametrize("x", [0.05, 0.25, 0.5, 0.75, 0.95])
def test_matches_reference_root_finder(x):
    curve = BezierCurve(EASE, refinement=40)
    t_ref = brentq(lambda t: curve.evaluate(t)[0] - x, 0.0, 1.0, xtol=1e-14)
    assert curve.y_x(x) == pytest.approx(curve.evaluate(t_ref)[1], abs=1e-9)


def test_three_dimensional_curve():
    curve = BezierCurve([[0, 0, 0], [0.5, 1, 0.3], [1, 0, 0.7], [1, 1, 1]], refinement=40)
    for z in [0.2, 0.5, 0.8]:
        result = curve.approximate_result(2, 0, z)
        assert curve.evaluate(result.t)[2] == pytest.approx(z, abs=1e-9)
        assert result.value == pytest.approx(curve.evaluate(result.t)[0])


def test_vertical_line_does_not_converge_silently():
    curve = BezierCurve([[0, 0], [0, 1]])
    result = curve.approximate_result(0, 1, 0.3)
    # slope guard keeps t at its initial guess
    assert result.t == pytest.approx(0.3)
    assert result.value == pytest.approx(0.3)
    assert result.residual == pytest.approx(0.3)
    assert not result.exact
    assert result.iterations == curve.refinement


def test_out_of_range_target_warns_and_clamps():
    curve = BezierCurve(QUADRATIC)
    with pytest.warns(RuntimeWarning, match="outside"):
        result = curve.approximate_result(0, 1, 1.5)
    assert result.t == 1.0
    assert result.value == 1.0


def test_bad_axis():
    curve = BezierCurve(QUADRATIC)
    with pytest.raises(IndexError):
        curve.approximate(0, 2, 0.5)
    with pytest.raises(IndexError):
        curve.approximate(-1, 0, 0.5)


def test_as_function_follows_mutations():
    curve = BezierCurve(QUADRATIC)
    f = curve.as_function()
    assert f(0.5) == curve.y_x(0.5)
    curve.set_points(LINEAR)
    assert f(0.3) == pytest.approx(0.3)
    g = curve.as_function(1, 0)
    assert g(0.7) == pytest.approx(0.7)


def test_newton_inverse_function():
    curve = BezierCurve(QUADRATIC)
    result = newton_inverse(curve, 0, 1, 0.5, iterations=10)
    assert isinstance(result, ApproximationResult)
    assert result.value == curve.y_x(0.5)
    assert 0.0 <= result.t <= 1.0


def test_zero_iterations_evaluates_initial_guess():
    curve = BezierCurve(QUADRATIC)
    result = newton_inverse(curve, 0, 1, 0.5, iterations=0)
    assert result.iterations == 0
    assert result.t == 0.5
    assert result.value == pytest.approx(curve.evaluate(0.5)[1])


def test_result_is_frozen():
    result = BezierCurve(LINEAR).approximate_result(0, 1, 0.25)
    with pytest.raises(dataclasses.FrozenInstanceError):
        result.value = 1.0


def test_verbose_prints_each_iteration(capsys):
    curve = BezierCurve(QUADRATIC, refinement=3)
    curve.approximate_result(0, 1, 0.5, verbose=True)
    out = capsys.readouterr().out
    assert "Iter 0:" in out
    assert out.count("Iter") == 3
