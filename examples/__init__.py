"""
Example scripts for nbezier.

Included examples:
- basic_usage.py: evaluation, differentials, easing lookups, refinement

Run with:
    python examples/basic_usage.py
"""

__all__ = []
