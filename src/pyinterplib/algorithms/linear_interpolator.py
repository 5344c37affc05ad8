import logging
import numpy as np

from pyinterplib.core.data_bundle import ArrayDataBundle
from pyinterplib.core.exceptions import ExtrapolationNotSupportedError
from pyinterplib.core.interfaces import Interpolator1D, require_bundle
from pyinterplib.data.constants import ErrorMessages

logger = logging.getLogger(__name__)


class LinearInterpolator1D(Interpolator1D):
    """
    A one-dimensional linear interpolator.

    The interpolated value at ``x`` between samples ``(x1, y1)`` and ``(x2, y2)`` is
    ``y1 + (x - x1) * (y2 - y1) / (x2 - x1)``.

    Boundary behaviour:
        - At or above the last key, ``interpolate`` holds the last value flat.
        - Below the first key, ``interpolate`` extends the first segment linearly.
        - Infinite queries are not rejected. ``+inf`` holds the last value; ``-inf`` follows the
          first segment to ``-inf``/``+inf``, and gives NaN when that segment is flat (``inf * 0``).
          NaN queries raise ``InvalidInputError``.
        - ``first_derivative`` raises strictly above the last key; at the last key it returns
          the slope of the final segment.
    """

    def interpolate(self, data: ArrayDataBundle, value: float) -> float:
        require_bundle(data)
        bounded = data.bounded_values(value)
        x1 = bounded.lower_bound_key
        y1 = bounded.lower_bound_value
        if bounded.lower_bound_index == data.size() - 1:
            logger.debug("Value %s at or after last key %s: holding %s", value, x1, y1)
            return y1
        x2 = bounded.higher_bound_key
        y2 = bounded.higher_bound_value
        return y1 + (value - x1) / (x2 - x1) * (y2 - y1)

    def first_derivative(self, data: ArrayDataBundle, value: float) -> float:
        require_bundle(data)
        bounded = data.bounded_values(value)
        x1 = bounded.lower_bound_key
        y1 = bounded.lower_bound_value
        if bounded.lower_bound_index == data.size() - 1:
            last_key = data.last_key()
            if value > last_key:
                raise ExtrapolationNotSupportedError(
                    ErrorMessages.AFTER_LAST_KEY.format(value=value, last_key=last_key),
                    value=value, last_key=last_key)
            x = data.keys
            y = data.values
            n = len(x)
            return 0.0 if n == 1 else float((y[n - 1] - y[n - 2]) / (x[n - 1] - x[n - 2]))
        x2 = bounded.higher_bound_key
        y2 = bounded.higher_bound_value
        return (y2 - y1) / (x2 - x1)

    def get_node_sensitivities_for_value(self, data: ArrayDataBundle, value: float) -> np.ndarray:
        require_bundle(data)
        n = data.size()
        result = np.zeros(n)
        bounded = data.bounded_values(value)
        if not bounded.has_higher_bound:
            result[n - 1] = 1.0
            return result
        index = bounded.lower_bound_index
        x1 = bounded.lower_bound_key
        x2 = bounded.higher_bound_key
        a = (x2 - value) / (x2 - x1)
        b = 1 - a
        result[index] = a
        result[index + 1] = b
        logger.debug("Node sensitivities at %s: index=%d, weights=(%s, %s)", value, index, a, b)
        return result
