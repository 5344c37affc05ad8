"""General data validation utilities."""

import logging
import numpy as np
from typing import Tuple

from pyinterplib.core.exceptions import InvalidInputError
from pyinterplib.core.typedefs import ArrayTypes
from pyinterplib.data.constants import ProcessingConstants, ErrorMessages

logger = logging.getLogger(__name__)


def preview(arr: np.ndarray) -> str:
    """Short string form of an array for log and error messages."""
    if len(arr) <= ProcessingConstants.LOG_ARRAY_PREVIEW:
        return str(arr.tolist())
    return f"[{arr[0]}, ..., {arr[-1]}] (length={len(arr)})"


def to_float_array(arr: ArrayTypes, name: str = "Input") -> np.ndarray:
    """Convert an array-like to a one-dimensional float64 copy."""
    if arr is None:
        raise InvalidInputError(ErrorMessages.NULL_ARRAY.format(name=name))
    try:
        result = np.array(arr, dtype=np.float64)
    except (ValueError, TypeError) as e:
        raise InvalidInputError(f"{name} array contains non-numeric values: {e}") from e
    if result.ndim != 1:
        raise InvalidInputError(ErrorMessages.NOT_ONE_DIMENSIONAL.format(name=name, shape=result.shape))
    return result


def check_no_nan(arr: np.ndarray, name: str = "Input") -> None:
    """Raise if any entry of ``arr`` is NaN."""
    nan_mask = np.isnan(arr)
    if np.any(nan_mask):
        indices = np.flatnonzero(nan_mask).tolist()
        raise InvalidInputError(ErrorMessages.NAN_ENTRIES.format(name=name, indices=indices))


def check_distinct_keys(sorted_keys: np.ndarray) -> None:
    """Raise if two adjacent keys of an ascending array are equal."""
    if len(sorted_keys) < 2:
        return
    equal = np.flatnonzero(np.diff(sorted_keys) == 0.0)
    if equal.size > 0:
        i = int(equal[0])
        raise InvalidInputError(ErrorMessages.DUPLICATE_KEYS.format(key=sorted_keys[i], i=i, j=i + 1))


def validate_sample_arrays(keys: ArrayTypes, values: ArrayTypes) -> Tuple[np.ndarray, np.ndarray]:
    """
    Validate and copy key/value sample arrays.
    Args:
        keys: Abscissas of the samples.
        values: Ordinates of the samples, same length as ``keys``.
    Returns:
        Tuple[np.ndarray, np.ndarray]: float64 copies of keys and values.
    Raises:
        InvalidInputError: If an array is None or not one-dimensional, the lengths differ,
            fewer than ``MIN_DATA_POINTS`` samples are given, or an entry is NaN.
    """
    keys_arr = to_float_array(keys, "Keys")
    values_arr = to_float_array(values, "Values")
    if len(keys_arr) != len(values_arr):
        raise InvalidInputError(ErrorMessages.LENGTH_MISMATCH.format(
            n_keys=len(keys_arr), n_values=len(values_arr)))
    if len(keys_arr) < ProcessingConstants.MIN_DATA_POINTS:
        raise InvalidInputError(ErrorMessages.INSUFFICIENT_DATA_POINTS.format(
            count=len(keys_arr), min_points=ProcessingConstants.MIN_DATA_POINTS))
    check_no_nan(keys_arr, "Keys")
    check_no_nan(values_arr, "Values")
    logger.debug("Validated %d samples: keys=%s", len(keys_arr), preview(keys_arr))
    return keys_arr, values_arr


def check_ascending_keys(keys: np.ndarray) -> bool:
    """Warn and return False if ``keys`` decrease anywhere; equal keys are left to ``check_distinct_keys``."""
    if len(keys) < 2:
        return True
    descending = np.flatnonzero(np.diff(keys) < 0.0)
    if descending.size > 0:
        i = int(descending[0]) + 1
        logger.warning("Keys are not ascending at index %d: %s follows %s; keys=%s",
                       i, keys[i], keys[i - 1], preview(keys))
        return False
    return True
