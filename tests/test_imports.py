"""
Test that all modules can be imported correctly.
"""

import pytest


def test_package_import():
    """Test that the main package can be imported."""
    import fourier_lab
    assert hasattr(fourier_lab, '__version__')
    assert fourier_lab.__version__ == "0.1.0"


def test_bases_import():
    """Test that basis modules can be imported."""
    from fourier_lab.bases import (
        StandardSystem, CosineSystem, SineSystem, ChebyshevSystem, LegendreSystem, LegendreTable
    )
    assert StandardSystem is not None
    assert CosineSystem is not None
    assert SineSystem is not None
    assert ChebyshevSystem is not None
    assert LegendreSystem is not None
    assert LegendreTable is not None


def test_quadrature_import():
    """Test that quadrature helpers can be imported."""
    from fourier_lab.inner_products import integrate, oversample
    assert integrate is not None
    assert oversample is not None


def test_series_import():
    """Test that the public series API can be imported."""
    from fourier_lab import compute_fourier_coefs, fourier_approx, get_system, FourierEngine
    assert compute_fourier_coefs is not None
    assert fourier_approx is not None
    assert get_system is not None
    assert FourierEngine is not None


def test_diagnostics_import():
    """Test that diagnostic modules can be imported."""
    from fourier_lab.diagnostics import core
    from fourier_lab import synthesis, config
    assert core is not None
    assert synthesis is not None
    assert config is not None


def test_utils_import():
    """Test that utility modules can be imported."""
    from fourier_lab.utils import curves
    assert curves is not None


def test_cli_import():
    """Test that CLI module can be imported."""
    from fourier_lab.cli import main, app
    assert main is not None
    assert app is not None
