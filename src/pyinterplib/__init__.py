"""
PyInterpLib - A Python library for one-dimensional interpolation of sampled data.

This library evaluates interpolated values, first derivatives and node
sensitivities (the derivative of an interpolated value with respect to each
sample value) over an immutable, sorted set of (x, y) samples.

Key Features:
- Immutable sample bundles with O(log n) bracket lookup
- Linear interpolation with flat extension above and linear extension below range
- Closed-form first derivatives and node sensitivities
- Finite-difference cross-checks for any kernel
- Symbolic piecewise export with SymPy

Main Components:
- Core: Data bundle, bracket result, interpolator contract and exceptions
- Algorithms: Interpolation kernels, piecewise export and kernel lookup
- Validation: Sample array validation
- Data: Processing constants
"""

try:
    from ._version import version as __version__
except ImportError:
    try:
        from importlib.metadata import version
        __version__ = version("pyinterplib")
    except ImportError:
        __version__ = "0.1.0+unknown"  # Fallback version

# Core data structures
from .core.data_bundle import ArrayDataBundle
from .core.bounded_values import BoundedValues
from .core.interfaces import Interpolator1D
from .core.exceptions import InterpolationError, InvalidInputError, ExtrapolationNotSupportedError

# Algorithms
from .algorithms.linear_interpolator import LinearInterpolator1D
from .algorithms.piecewise_builder import PiecewiseBuilder
from .algorithms.registry import get_interpolator, available_interpolators

__all__ = [
    # Version
    '__version__',

    # Core classes
    'ArrayDataBundle',
    'BoundedValues',
    'Interpolator1D',

    # Exceptions
    'InterpolationError',
    'InvalidInputError',
    'ExtrapolationNotSupportedError',

    # Algorithms
    'LinearInterpolator1D',
    'PiecewiseBuilder',
    'get_interpolator',
    'available_interpolators'
]

# Package metadata
__description__ = "One-dimensional interpolation with derivatives and node sensitivities"
