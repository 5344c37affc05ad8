"""Test imports work correctly."""

import pytest


def test_all_imports():
    """Test that all modules can be imported without circular dependencies."""
    try:
        import pyinterplib
        import pyinterplib.core
        import pyinterplib.algorithms
        import pyinterplib.validation
        import pyinterplib.data
        from pyinterplib.core.data_bundle import ArrayDataBundle
        from pyinterplib.core.interfaces import Interpolator1D
        from pyinterplib.algorithms.linear_interpolator import LinearInterpolator1D
        from pyinterplib.algorithms.piecewise_builder import PiecewiseBuilder
    except ImportError as e:
        pytest.fail(f"Import failed: {e}")


def test_public_api():
    """Test that the top-level exports are present."""
    import pyinterplib
    for name in pyinterplib.__all__:
        assert hasattr(pyinterplib, name), f"pyinterplib is missing {name}"
    assert isinstance(pyinterplib.__version__, str)


def test_linear_is_an_interpolator():
    """Test the kernel implements the abstract contract."""
    from pyinterplib import Interpolator1D, LinearInterpolator1D
    assert issubclass(LinearInterpolator1D, Interpolator1D)
    with pytest.raises(TypeError):
        Interpolator1D()
