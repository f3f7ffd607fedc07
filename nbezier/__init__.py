"""
General Bézier curves of any order and dimension, with iterative inversion.

This package evaluates Bézier curves through the Bernstein basis, computes
their differentials and slopes, and inverts them numerically so a curve can
be used as an approximate function, e.g. an easing curve y = f(x).
"""

from .bezier import BezierCurve
from .bernstein import binomial, basis_term, get_D_matrix
from .inverse import ApproximationResult, newton_inverse
from .utils import format_number, format_vector
from . import constants
from . import vector

__all__ = [
    # Core classes
    'BezierCurve',
    'ApproximationResult',

    # Inversion
    'newton_inverse',

    # Basis functions
    'binomial',
    'basis_term',
    'get_D_matrix',

    # Utility functions
    'format_number',
    'format_vector',

    # Modules
    'constants',
    'vector',
]

__version__ = "1.0.0"
