"""Shared pytest fixtures for pyinterplib tests."""
import pytest
import numpy as np
import sympy as sp

from pyinterplib.core.data_bundle import ArrayDataBundle
from pyinterplib.algorithms.linear_interpolator import LinearInterpolator1D


@pytest.fixture
def linear_interpolator():
    """Linear interpolation kernel."""
    return LinearInterpolator1D()


@pytest.fixture
def simple_bundle():
    """Three samples with different segment slopes: slope 2 then slope 8."""
    return ArrayDataBundle([0.0, 1.0, 2.0], [0.0, 2.0, 10.0])


@pytest.fixture
def single_point_bundle():
    """Degenerate bundle with one sample."""
    return ArrayDataBundle([5.0], [3.5])


@pytest.fixture
def sample_key_array():
    """Non-uniform, ascending sample keys."""
    return np.linspace(0, 10, 12) ** 1.2


@pytest.fixture
def sample_value_array(sample_key_array):
    """Smooth wave sampled at the keys."""
    return np.sin(sample_key_array / sample_key_array[-1] * 2 * np.pi)


@pytest.fixture
def wave_bundle(sample_key_array, sample_value_array):
    """Bundle built from the wave samples."""
    return ArrayDataBundle(sample_key_array, sample_value_array)


@pytest.fixture
def x_symbol():
    """Abscissa symbol for piecewise tests."""
    return sp.Symbol('x')
