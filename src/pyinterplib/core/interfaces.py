"""Abstract base classes for pyinterplib components."""

import logging
from abc import ABC, abstractmethod
import numpy as np

from pyinterplib.core.data_bundle import ArrayDataBundle
from pyinterplib.core.exceptions import InvalidInputError
from pyinterplib.core.typedefs import ArrayTypes
from pyinterplib.data.constants import ProcessingConstants, ErrorMessages

logger = logging.getLogger(__name__)


def require_bundle(data: ArrayDataBundle) -> ArrayDataBundle:
    """Return ``data`` unchanged, raising if it is None."""
    if data is None:
        raise InvalidInputError(ErrorMessages.NULL_DATA_BUNDLE)
    return data


class Interpolator1D(ABC):
    """Abstract base class for one-dimensional interpolation kernels.

    An interpolator is a stateless strategy: every operation is a pure function of the data
    bundle and the query passed to it. Kernels supply ``interpolate`` and
    ``get_node_sensitivities_for_value``; the first derivative defaults to a finite difference
    of ``interpolate`` and should be overridden where a closed form exists.
    """

    EPS = ProcessingConstants.FINITE_DIFFERENCE_EPS

    @abstractmethod
    def interpolate(self, data: ArrayDataBundle, value: float) -> float:
        """Interpolated value at ``value``.
        Args:
            data: Sample data
            value: Query abscissa
        Returns:
            Interpolated value
        """
        pass

    @abstractmethod
    def get_node_sensitivities_for_value(self, data: ArrayDataBundle, value: float) -> np.ndarray:
        """Sensitivity of the interpolated value at ``value`` to each sample value.
        Args:
            data: Sample data
            value: Query abscissa
        Returns:
            Array of length ``data.size()`` holding d(interpolate)/d(y[i])
        """
        pass

    def first_derivative(self, data: ArrayDataBundle, value: float) -> float:
        """First derivative by finite difference, one-sided within ``EPS`` of either end."""
        require_bundle(data)
        eps = self.EPS
        if value - eps < data.first_key():
            up = self.interpolate(data, value + eps)
            mid = self.interpolate(data, value)
            return (up - mid) / eps
        if value + eps > data.last_key():
            mid = self.interpolate(data, value)
            down = self.interpolate(data, value - eps)
            return (mid - down) / eps
        up = self.interpolate(data, value + eps)
        down = self.interpolate(data, value - eps)
        return (up - down) / (2 * eps)

    def get_finite_difference_sensitivities(self, data: ArrayDataBundle, value: float) -> np.ndarray:
        """Node sensitivities by central finite difference on each sample value."""
        require_bundle(data)
        eps = self.EPS
        values = data.values
        result = np.zeros(data.size())
        for i in range(data.size()):
            up = self.interpolate(data.with_value_at_index(i, values[i] + eps), value)
            down = self.interpolate(data.with_value_at_index(i, values[i] - eps), value)
            result[i] = (up - down) / (2 * eps)
        logger.debug("Finite-difference sensitivities at %s: %s", value, result)
        return result

    def interpolate_array(self, data: ArrayDataBundle, values: ArrayTypes) -> np.ndarray:
        """Evaluate ``interpolate`` at every entry of ``values``, keeping its shape."""
        require_bundle(data)
        query = np.asarray(values, dtype=np.float64)
        result = np.empty(query.shape, dtype=np.float64)
        for idx in np.ndindex(query.shape):
            result[idx] = self.interpolate(data, float(query[idx]))
        return result

    def get_data_bundle(self, keys: ArrayTypes, values: ArrayTypes) -> ArrayDataBundle:
        """Build a data bundle, sorting the samples by key."""
        return ArrayDataBundle(keys, values)

    def get_data_bundle_from_sorted_arrays(self, keys: ArrayTypes, values: ArrayTypes) -> ArrayDataBundle:
        """Build a data bundle from keys the caller guarantees are ascending."""
        return ArrayDataBundle(keys, values, inputs_sorted=True)

    def __eq__(self, other):
        if other is self:
            return True
        return other is not None and type(other) is type(self)

    def __hash__(self):
        return hash(type(self))

    def __repr__(self):
        return f"{type(self).__name__}()"
