"""
Core data structures and interpolation abstractions.

This module contains the sample data bundle, the bracket result type, the
abstract interpolator contract and the exceptions shared by every kernel.
"""

from .exceptions import InterpolationError, InvalidInputError, ExtrapolationNotSupportedError
from .bounded_values import BoundedValues
from .data_bundle import ArrayDataBundle
from .interfaces import Interpolator1D

__all__ = [
    "ArrayDataBundle",
    "BoundedValues",
    "Interpolator1D",
    "InterpolationError",
    "InvalidInputError",
    "ExtrapolationNotSupportedError"
]
