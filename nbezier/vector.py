"""
Fixed-length vector operations on 1-D float arrays.
"""

import numpy as np


def as_vector(v):
    """Coerce a sequence of numbers to a 1-D float vector."""
    arr = np.asarray(v, dtype=float)
    if arr.ndim != 1:
        raise ValueError(f"vector must be one-dimensional, got shape {arr.shape}")
    return arr


def _pair(u, v):
    u, v = as_vector(u), as_vector(v)
    if u.shape[0] != v.shape[0]:
        raise ValueError(f"vector lengths differ: {u.shape[0]} != {v.shape[0]}")
    return u, v


def zero(cardinality):
    """All-zero vector of the given length."""
    return np.zeros(cardinality)


def scale(scalar, v):
    return float(scalar) * as_vector(v)


def add(u, v):
    u, v = _pair(u, v)
    return u + v


def sub(u, v):
    u, v = _pair(u, v)
    return u - v
