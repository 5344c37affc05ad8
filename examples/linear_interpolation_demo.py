"""Demonstration script for linear interpolation, derivatives and node sensitivities."""
import logging
import numpy as np
import sympy as sp

from pyinterplib import (
    ExtrapolationNotSupportedError, PiecewiseBuilder, get_interpolator
)


def setup_logging():
    """Setup logging configuration."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s -> %(message)s"
    )


def demonstrate_linear_interpolation():
    """Evaluate a small curve inside, below and above its sample range."""
    setup_logging()
    interpolator = get_interpolator('linear')
    bundle = interpolator.get_data_bundle([2.0, 0.0, 1.0, 4.0], [10.0, 0.0, 2.0, 11.0])
    print(f"\n{'=' * 80}")
    print(f"Interpolator: {interpolator!r}")
    print(f"Samples: {bundle!r}")
    print(f"{'=' * 80}")
    for x in (-1.0, 0.5, 1.5, 3.0, 4.0, 5.0):
        value = interpolator.interpolate(bundle, x)
        sensitivities = interpolator.get_node_sensitivities_for_value(bundle, x)
        try:
            derivative = f"{interpolator.first_derivative(bundle, x):10.4f}"
        except ExtrapolationNotSupportedError:
            derivative = f"{'n/a':>10}"
        print(f"x={x:6.2f}  value={value:10.4f}  slope={derivative}  "
              f"sensitivities={np.array2string(sensitivities, precision=3)}")
    x = sp.Symbol('x')
    print(f"\nPiecewise form: {PiecewiseBuilder.build_linear(bundle, x)}")


if __name__ == "__main__":
    demonstrate_linear_interpolation()
