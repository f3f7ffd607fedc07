"""
Bernstein basis terms and the derivative matrix for Bézier curves.

Binomial coefficients are built with the multiplicative formula so no
factorial is ever materialized, and are cached since curve orders are small.
"""

import numpy as np
from typing import Dict
from functools import lru_cache


# Derivative matrices keyed by degree
_MATRIX_CACHE: Dict[int, np.ndarray] = {}


@lru_cache(maxsize=128)
def binomial(n: int, k: int) -> float:
    """
    Binomial coefficient C(n, k) as a float.

    C(n, k) = Π_{i=0..m-1} (n - i) / (i + 1),  m = min(k, n - k)

    Args:
        n: Degree of the curve
        k: Index of the basis term

    Returns:
        C(n, k), or 0.0 when k lies outside [0, n]
    """
    if k > n or k < 0:
        return 0.0
    if k == 0 or k == n:
        return 1.0

    result = 1.0
    for i in range(min(k, n - k)):
        result = result * (n - i) / (i + 1)
    return result


def basis_term(i: int, n: int, t: float) -> float:
    """
    Single Bernstein polynomial term.

    B_{i,n}(t) = C(n, i) * t^i * (1-t)^(n-i)

    Args:
        i: Index of the control point the term weights
        n: Degree of the curve
        t: Curve parameter (not clamped)

    Returns:
        Value of the basis term at t
    """
    return binomial(n, i) * (t ** i) * ((1 - t) ** (n - i))


def get_D_matrix(degree: int) -> np.ndarray:
    """
    Compute derivative matrix D for a Bézier curve of the given degree.

    [D]_i,j = N × { -1 if j=i, 1 if j=i+1, 0 otherwise }

    so that D @ P holds the N control points of the derivative curve,
    N * (P_{i+1} - P_i).

    Args:
        degree: Degree N of the Bézier curve

    Returns:
        D: (N, N+1) matrix
    """
    if degree in _MATRIX_CACHE:
        return _MATRIX_CACHE[degree]

    N = degree
    D = np.zeros((N, N + 1))
    for i in range(N):
        D[i, i] = -N
        D[i, i + 1] = N

    _MATRIX_CACHE[degree] = D
    return D
