"""
Static data used by pyinterplib.

This package holds the processing constants and error message templates
shared by the core data structures, the interpolation kernels and the
validation helpers.
"""

from .constants import ProcessingConstants, ErrorMessages

__all__ = [
    "ProcessingConstants",
    "ErrorMessages"
]
