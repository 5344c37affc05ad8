from dataclasses import dataclass
from typing import Final


@dataclass(frozen=True)
class ProcessingConstants:
    """Processing constants used throughout the interpolation library."""
    # Tolerance and precision
    DEFAULT_TOLERANCE: Final[float] = 1e-8
    FINITE_DIFFERENCE_EPS: Final[float] = 1e-6
    # Data validation
    MIN_DATA_POINTS: Final[int] = 1
    # Logging
    LOG_ARRAY_PREVIEW: Final[int] = 10


@dataclass(frozen=True)
class ErrorMessages:
    """Standardized error message templates."""
    NULL_DATA_BUNDLE: Final[str] = "Data bundle must not be None"
    NULL_ARRAY: Final[str] = "{name} array must not be None"
    NOT_ONE_DIMENSIONAL: Final[str] = "{name} array must be one-dimensional, got shape {shape}"
    LENGTH_MISMATCH: Final[str] = "Array length mismatch: keys({n_keys}) != values({n_values})"
    INSUFFICIENT_DATA_POINTS: Final[str] = "Insufficient data points ({count}), minimum required: {min_points}"
    NAN_ENTRIES: Final[str] = "{name} array contains NaN at indices {indices}"
    DUPLICATE_KEYS: Final[str] = "Equal nodes in data bundle: key {key} appears at indices {i} and {j}"
    NAN_QUERY: Final[str] = "Query value must not be NaN"
    INDEX_OUT_OF_RANGE: Final[str] = "Index {index} out of range for data bundle of size {size}"
    AFTER_LAST_KEY: Final[str] = "Value of {value} after last key {last_key}. Use an extrapolator"
    UNKNOWN_INTERPOLATOR: Final[str] = "Unknown interpolator '{name}'. Available: {available}"
