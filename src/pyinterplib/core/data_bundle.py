import logging
import operator
import numpy as np
from typing import Mapping, Optional

from pyinterplib.core.bounded_values import BoundedValues
from pyinterplib.core.exceptions import InvalidInputError
from pyinterplib.core.typedefs import ArrayTypes
from pyinterplib.data.constants import ErrorMessages
from pyinterplib.validation.array_validator import (
    validate_sample_arrays, check_distinct_keys, check_ascending_keys, preview
)

logger = logging.getLogger(__name__)


class ArrayDataBundle:
    """
    An immutable, ascending set of (key, value) samples used by the one-dimensional interpolators.

    The keys are strictly increasing. By default the constructor sorts the samples by key; with
    ``inputs_sorted=True`` the caller asserts the keys are already ascending and the sort is skipped.
    Equal keys are rejected on both paths. Keys and values are stored as read-only float64 copies,
    so one bundle can be shared between threads without locking.

    Below the first key, ``lower_bound_index`` returns 0. Interpolators therefore use the first
    segment for queries below range; callers needing strict range checks must do them first.
    """

    def __init__(self, keys: ArrayTypes, values: ArrayTypes, inputs_sorted: bool = False):
        """
        Args:
            keys: Sample abscissas, at least one, no NaN.
            values: Sample ordinates, same length as ``keys``, no NaN.
            inputs_sorted: Skip sorting when the caller guarantees ascending keys.
        Raises:
            InvalidInputError: If the arrays fail validation or contain equal keys.
        """
        keys_arr, values_arr = validate_sample_arrays(keys, values)
        if inputs_sorted:
            check_ascending_keys(keys_arr)
        else:
            order = np.argsort(keys_arr, kind="stable")
            keys_arr = keys_arr[order]
            values_arr = values_arr[order]
        check_distinct_keys(keys_arr)
        keys_arr.flags.writeable = False
        values_arr.flags.writeable = False
        self._keys = keys_arr
        self._values = values_arr
        self._n = len(keys_arr)
        logger.debug("Created data bundle with %d samples (inputs_sorted=%s): keys=%s",
                     self._n, inputs_sorted, preview(keys_arr))

    @classmethod
    def from_mapping(cls, data: Mapping[float, float]) -> "ArrayDataBundle":
        """Build a bundle from a ``{key: value}`` mapping."""
        if data is None:
            raise InvalidInputError(ErrorMessages.NULL_ARRAY.format(name="Mapping"))
        return cls(list(data.keys()), list(data.values()))

    @property
    def keys(self) -> np.ndarray:
        """Read-only ascending keys."""
        return self._keys

    @property
    def values(self) -> np.ndarray:
        """Read-only values in key order."""
        return self._values

    def size(self) -> int:
        return self._n

    def __len__(self) -> int:
        return self._n

    def first_key(self) -> float:
        return float(self._keys[0])

    def first_value(self) -> float:
        return float(self._values[0])

    def last_key(self) -> float:
        return float(self._keys[-1])

    def last_value(self) -> float:
        return float(self._values[-1])

    def lower_bound_index(self, value: float) -> int:
        """
        Index of the largest key less than or equal to ``value``.

        Returns 0 when ``value`` lies below the first key, and ``size() - 1`` when it is at or
        after the last key. Infinite values are accepted: ``+inf`` maps to ``size() - 1`` and
        ``-inf`` to 0.
        Raises:
            InvalidInputError: If ``value`` is NaN.
        """
        if np.isnan(value):
            raise InvalidInputError(ErrorMessages.NAN_QUERY)
        index = int(np.searchsorted(self._keys, value, side="right")) - 1
        return max(index, 0)

    def bounded_values(self, value: float) -> BoundedValues:
        """Bracketing samples of ``value``; the higher bound is absent at or after the last key."""
        index = self.lower_bound_index(value)
        if index == self._n - 1:
            return BoundedValues(index, float(self._keys[index]), float(self._values[index]))
        return BoundedValues(index, float(self._keys[index]), float(self._values[index]),
                             float(self._keys[index + 1]), float(self._values[index + 1]))

    def lower_key(self, value: float) -> float:
        return float(self._keys[self.lower_bound_index(value)])

    def lower_value(self, value: float) -> float:
        return float(self._values[self.lower_bound_index(value)])

    def higher_key(self, value: float) -> Optional[float]:
        index = self.lower_bound_index(value) + 1
        return float(self._keys[index]) if index < self._n else None

    def higher_value(self, value: float) -> Optional[float]:
        index = self.lower_bound_index(value) + 1
        return float(self._values[index]) if index < self._n else None

    def index_of(self, key: float) -> int:
        """Index of an exact key, or -1 if the key is not a sample."""
        index = int(np.searchsorted(self._keys, key, side="left"))
        if index < self._n and self._keys[index] == key:
            return index
        return -1

    def contains_key(self, key: float) -> bool:
        return self.index_of(key) >= 0

    def get(self, key: float) -> Optional[float]:
        """Value at an exact key, or None if the key is not a sample."""
        index = self.index_of(key)
        return float(self._values[index]) if index >= 0 else None

    def with_value_at_index(self, index: int, value: float) -> "ArrayDataBundle":
        """Return a new bundle with the value at ``index`` replaced; this bundle is unchanged."""
        try:
            index = operator.index(index)
        except TypeError as e:
            raise InvalidInputError(f"Index must be an integer, got {index!r}") from e
        if not 0 <= index < self._n:
            raise InvalidInputError(ErrorMessages.INDEX_OUT_OF_RANGE.format(index=index, size=self._n))
        new_values = self._values.copy()
        new_values[index] = value
        return ArrayDataBundle(self._keys, new_values, inputs_sorted=True)

    def __eq__(self, other):
        if other is self:
            return True
        if not isinstance(other, ArrayDataBundle):
            return NotImplemented
        return np.array_equal(self._keys, other._keys) and np.array_equal(self._values, other._values)

    def __hash__(self):
        return hash((tuple(self._keys.tolist()), tuple(self._values.tolist())))

    def __repr__(self):
        return f"ArrayDataBundle(keys={preview(self._keys)}, values={preview(self._values)})"
