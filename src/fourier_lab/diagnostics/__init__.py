from fourier_lab.diagnostics.core import (
    CoefficientMask,
    TermSeries,
    active_coefs,
    convergence,
    frequency_range,
    full_mask,
    residual,
    term_series,
)

__all__ = [
    "CoefficientMask",
    "TermSeries",
    "active_coefs",
    "convergence",
    "frequency_range",
    "full_mask",
    "residual",
    "term_series",
]
