#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Basic usage of nbezier: evaluation, differentials and inverse lookup.
"""

import numpy as np
import sys
import os

# Add the repository root to the Python path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from nbezier import BezierCurve, format_number, format_vector


def basic_2d_example():
    """Evaluate a quadratic curve and its tangent."""
    print("=== Quadratic Bézier curve ===")

    curve = BezierCurve([
        [0, 0],        # P0 (start)
        [0.75, 0.25],  # P1 (control)
        [1, 1],        # P2 (end)
    ])
    print(curve)
    print(f"Order: {curve.order}, cardinality: {curve.cardinality}")

    for t in np.linspace(0, 1, 5):
        print(f"  t={t:.2f}  B(t)={format_vector(curve.evaluate(t))}  "
              f"B'(t)={format_vector(curve.differential(t))}  "
              f"dy/dx={format_number(curve.slope(0, 1, t))}")


def easing_example():
    """Use a cubic curve as an easing function y = f(x)."""
    print("\n=== Easing curve y = f(x) ===")

    curve = BezierCurve([[0, 0], [0.4, 0.2], [0.6, 0.8], [1, 1]])
    ease = curve.as_function()

    for x in np.linspace(0, 1, 11):
        result = curve.approximate_result(0, 1, x)
        print(f"  x={x:.1f}  y={ease(x):.6f}  t={result.t:.6f}  "
              f"residual={result.residual:.2e}  passes={result.iterations}")


def refinement_example():
    """Show how the iteration budget affects precision."""
    print("\n=== Refinement ===")

    curve = BezierCurve([[0, 0], [0.75, 0.25], [1, 1]])
    for n in [1, 2, 5, 10, 20]:
        curve.set_refinement_iterations(n)
        result = curve.approximate_result(0, 1, 0.5)
        print(f"  refinement={n:>2d}  y_x(0.5)={result.value:.10f}  "
              f"residual={result.residual:.3e}")

    print("\nIterations for refinement=5:")
    curve.set_refinement_iterations(5)
    curve.approximate_result(0, 1, 0.5, verbose=True)


def higher_dimension_example():
    """Invert a 3D curve along its z axis."""
    print("\n=== 3D curve ===")

    curve = BezierCurve([[0, 0, 0], [0.5, 1, 0.3], [1, 0, 0.7], [1, 1, 1]],
                        refinement=40)
    for z in [0.25, 0.5, 0.75]:
        x = curve.approximate(2, 0, z)
        y = curve.approximate(2, 1, z)
        print(f"  z={z:.2f} -> x={x:.6f}, y={y:.6f}")


if __name__ == "__main__":
    basic_2d_example()
    easing_example()
    refinement_example()
    higher_dimension_example()
