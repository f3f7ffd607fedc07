"""
Number formatting helpers for progress output and reprs.
"""

import numpy as np


def format_number(value, format_spec='.6g'):
    """
    Format a number with a proper Unicode minus sign.

    Args:
        value: Numeric value to format
        format_spec: Format specification (e.g., '.6g', '.3f')

    Returns:
        str: Formatted string
    """
    if isinstance(value, (int, float, np.floating, np.integer)):
        if value < 0:
            # U+2212 instead of hyphen-minus
            return '−' + format(abs(value), format_spec)
        return format(value, format_spec)
    return str(value)


def format_vector(v, format_spec='.6g'):
    """Format a vector as ``(a, b, ...)`` using format_number for each entry."""
    return '(' + ', '.join(format_number(float(e), format_spec) for e in v) + ')'
