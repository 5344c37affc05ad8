import logging
import sympy as sp

from pyinterplib.core.data_bundle import ArrayDataBundle
from pyinterplib.core.interfaces import require_bundle

logger = logging.getLogger(__name__)


class PiecewiseBuilder:
    """Symbolic piecewise forms of interpolated sample data."""

    @staticmethod
    def build_linear(data: ArrayDataBundle, x: sp.Symbol) -> sp.Piecewise:
        """
        Create the piecewise linear interpolant of a data bundle.
        The result agrees with ``LinearInterpolator1D.interpolate`` for every real ``x``: the
        first segment is extended below the first key and the last value is held from the
        last key onwards.
        Args:
            data: Sample data
            x: Symbol for the query abscissa
        Returns:
            sp.Piecewise: Linear interpolation piecewise function
        """
        require_bundle(data)
        keys = [sp.Float(float(k)) for k in data.keys]
        values = [sp.Float(float(v)) for v in data.values]
        n = len(keys)
        logger.debug("Building linear piecewise for %d samples", n)
        if n == 1:
            logger.debug("Single-sample bundle: constant value %s", values[0])
            return sp.Piecewise((values[0], True), evaluate=False)
        conditions = []
        for i in range(n - 1):
            slope = (values[i + 1] - values[i]) / (keys[i + 1] - keys[i])
            expr = values[i] + slope * (x - keys[i])
            if i == 0:
                conditions.append((expr, x < keys[i + 1]))
            else:
                conditions.append((expr, sp.And(x >= keys[i], x < keys[i + 1])))
        conditions.append((values[-1], x >= keys[-1]))
        result = sp.Piecewise(*conditions)
        logger.debug("Built linear piecewise with %d conditions", len(conditions))
        return result
