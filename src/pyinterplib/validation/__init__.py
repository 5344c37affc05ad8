"""Validation helpers for interpolation sample data."""

from .array_validator import (
    validate_sample_arrays,
    check_distinct_keys,
    check_no_nan,
    check_ascending_keys
)

__all__ = [
    "validate_sample_arrays",
    "check_distinct_keys",
    "check_no_nan",
    "check_ascending_keys"
]
