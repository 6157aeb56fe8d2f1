from __future__ import annotations
from dataclasses import dataclass
import math
from typing import Callable, List, Optional, Sequence, Tuple, Union
import numpy as np

from fourier_lab.bases.base import OUT_OF_RANGE, SystemId
from fourier_lab.series import (
    CoefficientSet,
    FamilyCoefficients,
    FourierEngine,
    compute_fourier_coefs,
    default_engine,
)
from fourier_lab.utils.curves import CurveLike, clean_curve, sample_function

# -----------------------
# activity masks
# -----------------------

@dataclass(frozen=True)
class CoefficientMask:
    """Which coefficients take part in a partial sum. Missing entries are inactive."""
    c0: bool
    families: Tuple[Tuple[bool, ...], ...]

    def is_active(self, family_index: int, k: int) -> bool:
        if family_index >= len(self.families):
            return False
        fam = self.families[family_index]
        return 1 <= k <= len(fam) and bool(fam[k - 1])


def full_mask(coefs: CoefficientSet) -> CoefficientMask:
    return CoefficientMask(
        c0=True,
        families=tuple(tuple(True for _ in f.coefficients) for f in coefs.families),
    )


def active_coefs(coefs: CoefficientSet, mask: CoefficientMask) -> CoefficientSet:
    """Copy of `coefs` with every inactive coefficient set to 0."""
    return CoefficientSet(
        system_id=coefs.system_id,
        c0=coefs.c0 if mask.c0 else 0.0,
        families=tuple(
            FamilyCoefficients(
                fam.family_id,
                tuple(c if mask.is_active(fi, k) else 0.0 for k, c in enumerate(fam.coefficients, start=1)),
            )
            for fi, fam in enumerate(coefs.families)
        ),
        domain=coefs.domain,
    )

# -----------------------
# per-harmonic series
# -----------------------

@dataclass(frozen=True)
class TermSeries:
    label: str
    points: np.ndarray     # (n + 1, 2); y is nan where the term is undefined
    active: bool


def term_series(
    coefs: CoefficientSet,
    family_index: int,
    x_domain: Tuple[float, float],
    n: int = 200,
    mask: Optional[CoefficientMask] = None,
    engine: Optional[FourierEngine] = None,
) -> List[TermSeries]:
    """
    One sampled curve c_k * term_k(x) per coefficient of a family.
    Returns [] when the family does not exist in `coefs`.
    """
    if family_index < 0 or family_index >= len(coefs.families):
        return []
    system = (engine or default_engine()).get_system(coefs.system_id)
    fam_def = system.families[family_index]
    a, b = coefs.domain

    out: List[TermSeries] = []
    for k, c in enumerate(coefs.families[family_index].coefficients, start=1):
        def f(x, k=k, c=c):
            term = fam_def.eval_term(k, x, a, b)
            if term is OUT_OF_RANGE or c is None:
                return math.nan
            return c * term

        out.append(TermSeries(
            label=f"{fam_def.prefix}{k}",
            points=np.asarray(sample_function(f, x_domain[0], x_domain[1], n), dtype=float),
            active=True if mask is None else mask.is_active(family_index, k),
        ))
    return out


def frequency_range(coefs: CoefficientSet) -> Tuple[int, int]:
    """Integer range symmetric in magnitude that covers every family coefficient."""
    values = [c for fam in coefs.families for c in fam.coefficients if c is not None]
    if not values:
        return 0, 0
    lo, hi = min(values), max(values)
    span = int(math.ceil(max(abs(lo), abs(hi))))
    return (-span if lo < 0 else 0, 0 if hi < 0 else span)

# -----------------------
# residual & convergence
# -----------------------

def residual(coefs: CoefficientSet, curve: CurveLike, engine: Optional[FourierEngine] = None) -> float:
    """
    RMS difference between the approximation and the curve samples inside the
    coefficient domain. Samples where the approximation is undefined are skipped;
    nan when none is left.
    """
    pts = clean_curve(curve)
    a, b = coefs.domain
    pts = pts[(pts[:, 0] >= a) & (pts[:, 0] <= b)]
    approx = (engine or default_engine()).approx(coefs)
    err = approx.values(pts[:, 0]) - pts[:, 1]
    err = err[np.isfinite(err)]
    if err.size == 0:
        return math.nan
    return float(np.sqrt(np.mean(err ** 2)))


def convergence(
    curve: CurveLike,
    a: float,
    b: float,
    orders: Sequence[int],
    system_id: Union[str, SystemId],
    engine: Optional[FourierEngine] = None,
    progress_hook: Optional[Callable[[dict], None]] = None,
) -> List[Tuple[int, float]]:
    """
    (order, residual) for each requested truncation order.
    `progress_hook` receives {"order", "residual"} as each order finishes.
    """
    engine = engine or default_engine()
    pts = clean_curve(curve)
    rows = []
    for order in orders:
        coefs = compute_fourier_coefs(pts, a, b, int(order), system_id, engine=engine)
        rows.append((int(order), residual(coefs, pts, engine=engine)))
        if progress_hook is not None:
            progress_hook({"order": rows[-1][0], "residual": rows[-1][1]})
    return rows
