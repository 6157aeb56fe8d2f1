"""
Fourier Lab - generalized Fourier-type expansions of sampled curves.

Coefficients of a curve over [a, b] are computed in one of five basis
systems (standard, cos, sin, chebyshev, legendre) and the partial sums can
be evaluated back as functions of x.
"""

__version__ = "0.1.0"

from fourier_lab.bases import OUT_OF_RANGE, LegendreTable, OutOfRange, SystemId
from fourier_lab.inner_products import integrate, oversample
from fourier_lab.series import (
    Approximation,
    CoefficientSet,
    FamilyCoefficients,
    FourierEngine,
    compute_fourier_coefs,
    fourier_approx,
    get_system,
)
from fourier_lab.utils import clean_curve, interpolate, sample_function

__all__ = [
    # Version info
    "__version__",

    # Curves & quadrature
    "clean_curve",
    "interpolate",
    "sample_function",
    "integrate",
    "oversample",

    # Series
    "SystemId",
    "OUT_OF_RANGE",
    "OutOfRange",
    "LegendreTable",
    "FourierEngine",
    "CoefficientSet",
    "FamilyCoefficients",
    "Approximation",
    "compute_fourier_coefs",
    "fourier_approx",
    "get_system",
]
