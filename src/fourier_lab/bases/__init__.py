from fourier_lab.bases.base import (
    OUT_OF_RANGE,
    BasisSystem,
    CoefficientFamily,
    OutOfRange,
    SystemId,
    TermValue,
)
from fourier_lab.bases.trig import CosineSystem, SineSystem, StandardSystem, TrigFamily, compute_trig_coef
from fourier_lab.bases.chebyshev import ChebyshevSystem, compute_chebyshev_coef, eval_chebyshev_term
from fourier_lab.bases.legendre import (
    LegendreSystem,
    LegendreTable,
    compute_legendre_coef,
    eval_legendre_term,
)
from fourier_lab.bases.registry import SYSTEM_ORDER, TRIG_SYSTEMS, as_system_id, build_systems

__all__ = [
    "OUT_OF_RANGE", "OutOfRange", "TermValue", "SystemId",
    "BasisSystem", "CoefficientFamily",
    "StandardSystem", "CosineSystem", "SineSystem", "TrigFamily", "compute_trig_coef",
    "ChebyshevSystem", "compute_chebyshev_coef", "eval_chebyshev_term",
    "LegendreSystem", "LegendreTable", "compute_legendre_coef", "eval_legendre_term",
    "SYSTEM_ORDER", "TRIG_SYSTEMS", "as_system_id", "build_systems",
]
