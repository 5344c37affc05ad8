"""End-to-end tests through the public API."""

import logging
import threading

import pytest
import numpy as np
import sympy as sp

from pyinterplib import (
    ArrayDataBundle, ExtrapolationNotSupportedError, PiecewiseBuilder, get_interpolator
)


class TestEndToEnd:
    """Build a bundle from raw data and run every kernel operation on it."""
    def test_unsorted_raw_data_workflow(self):
        """Test value, derivative, sensitivities and symbolic form from unsorted samples."""
        interpolator = get_interpolator('linear')
        bundle = interpolator.get_data_bundle([2.0, 0.0, 1.0], [10.0, 0.0, 2.0])
        assert interpolator.interpolate(bundle, 0.5) == pytest.approx(1.0)
        assert interpolator.interpolate(bundle, 1.5) == pytest.approx(6.0)
        assert interpolator.first_derivative(bundle, 0.5) == pytest.approx(2.0)
        assert interpolator.first_derivative(bundle, 1.5) == pytest.approx(8.0)
        assert interpolator.interpolate(bundle, 3.0) == 10.0
        with pytest.raises(ExtrapolationNotSupportedError):
            interpolator.first_derivative(bundle, 3.0)
        np.testing.assert_allclose(
            interpolator.get_node_sensitivities_for_value(bundle, 0.5), [0.5, 0.5, 0.0])
        x = sp.Symbol('x')
        pw = PiecewiseBuilder.build_linear(bundle, x)
        assert float(pw.subs(x, 1.5)) == pytest.approx(6.0)

    def test_shared_bundle_across_threads(self, wave_bundle):
        """Test that concurrent readers of one bundle see consistent results."""
        interpolator = get_interpolator('linear')
        queries = np.linspace(-1.0, 20.0, 200)
        expected = interpolator.interpolate_array(wave_bundle, queries)
        results = {}

        def worker(tid):
            results[tid] = interpolator.interpolate_array(wave_bundle, queries)

        threads = [threading.Thread(target=worker, args=(t,)) for t in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        for tid in range(4):
            np.testing.assert_array_equal(results[tid], expected)

    def test_errors_are_logged(self, caplog):
        """Test that raised errors are logged at ERROR level."""
        interpolator = get_interpolator('linear')
        bundle = ArrayDataBundle([0.0, 1.0], [0.0, 1.0])
        with caplog.at_level(logging.ERROR, logger="pyinterplib"):
            with pytest.raises(ExtrapolationNotSupportedError):
                interpolator.first_derivative(bundle, 2.0)
        assert any("after last key" in record.getMessage() for record in caplog.records)
