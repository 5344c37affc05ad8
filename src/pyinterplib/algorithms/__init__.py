"""
Interpolation kernels and related algorithms.

This module provides the linear interpolation kernel, the symbolic
piecewise export of sample data, and lookup of kernels by name.
"""

from .linear_interpolator import LinearInterpolator1D
from .piecewise_builder import PiecewiseBuilder
from .registry import get_interpolator, available_interpolators

__all__ = [
    "LinearInterpolator1D",
    "PiecewiseBuilder",
    "get_interpolator",
    "available_interpolators"
]
