# series.py
from __future__ import annotations
from dataclasses import dataclass
import math
from typing import Any, Callable, Dict, Iterable, Optional, Tuple, Union
import numpy as np

from fourier_lab.bases.base import OUT_OF_RANGE, BasisSystem, SystemId, TermValue
from fourier_lab.bases.legendre import LegendreTable
from fourier_lab.bases.registry import as_system_id, build_systems
from fourier_lab.utils.curves import CurveLike, clean_curve, sample_function


# ---------- coefficient sets ----------
@dataclass(frozen=True)
class FamilyCoefficients:
    family_id: str
    coefficients: Tuple[Optional[float], ...]   # index 0 holds k = 1


@dataclass(frozen=True)
class CoefficientSet:
    system_id: SystemId
    c0: Optional[float]
    families: Tuple[FamilyCoefficients, ...]
    domain: Tuple[float, float]

    @property
    def max_k(self) -> int:
        return max((len(f.coefficients) for f in self.families), default=0)

    def family(self, family_id: str) -> FamilyCoefficients:
        for fam in self.families:
            if fam.family_id == family_id:
                return fam
        raise KeyError(f"no family {family_id!r} in {self.system_id.value} coefficients")

    def coefficient(self, family_id: str, k: int) -> Optional[float]:
        """Coefficient k (1-based) of family `family_id`."""
        if k < 1:
            raise IndexError("k starts at 1; use .c0 for the constant term")
        return self.family(family_id).coefficients[k - 1]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "system": self.system_id.value,
            "c0": self.c0,
            "families": [{"id": f.family_id, "coefs": list(f.coefficients)} for f in self.families],
            "domain": list(self.domain),
        }

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "CoefficientSet":
        a, b = d["domain"]
        return cls(
            system_id=as_system_id(d["system"]),
            c0=d.get("c0"),
            families=tuple(
                FamilyCoefficients(f["id"], tuple(f["coefs"])) for f in d.get("families", [])
            ),
            domain=(float(a), float(b)),
        )


# ---------- evaluation ----------
class Approximation:
    """
    Partial sum eval_c0(c0) + sum_families sum_k c_k * term_k(x).

    Calling it returns a float, or OUT_OF_RANGE as soon as one term is outside
    its extrapolation window. The constant term shares the window of order 0,
    so a fit with no k >= 1 terms is bounded the same way. Undefined
    coefficients make the value nan.
    """
    def __init__(self, coefs: CoefficientSet, system: BasisSystem):
        if system.system_id != coefs.system_id:
            raise ValueError(
                f"coefficients of {coefs.system_id.value} cannot be evaluated with {system.system_id.value}"
            )
        self.coefs = coefs
        self.system = system

    def __call__(self, x: float) -> TermValue:
        a, b = self.coefs.domain
        if any(fam_def.eval_term(0, x, a, b) is OUT_OF_RANGE for fam_def in self.system.families):
            return OUT_OF_RANGE
        undefined = self.coefs.c0 is None
        y = 0.0 if undefined else self.system.eval_c0(self.coefs.c0)

        for fam_def, fam in zip(self.system.families, self.coefs.families):
            for k, c in enumerate(fam.coefficients, start=1):
                term = fam_def.eval_term(k, x, a, b)
                if term is OUT_OF_RANGE:
                    return OUT_OF_RANGE
                if c is None:
                    undefined = True
                    continue
                y += c * term

        return math.nan if undefined else float(y)

    def values(self, xs: Iterable[float]) -> np.ndarray:
        """Evaluate at every x; OUT_OF_RANGE becomes nan."""
        out = [self(x) for x in xs]
        return np.array([math.nan if v is OUT_OF_RANGE else v for v in out], dtype=float)

    def sample(self, x_min: float, x_max: float, n: int = 200):
        return sample_function(self, x_min, x_max, n)

    def __repr__(self) -> str:
        return f"Approximation({self.coefs.system_id.value}, max_k={self.coefs.max_k}, domain={self.coefs.domain})"


# ---------- engine ----------
class FourierEngine:
    """
    Owns one instance of each basis system and the Legendre table they share.

    Parameters
    ----------
    legendre_table : LegendreTable, optional
        Cache used by the Legendre system. A fresh table is created when
        omitted, so separate engines never share cached rows.
    """
    def __init__(self, legendre_table: Optional[LegendreTable] = None):
        self.legendre_table = legendre_table if legendre_table is not None else LegendreTable()
        self._systems = build_systems(self.legendre_table)

    def get_system(self, system_id: Union[str, SystemId]) -> BasisSystem:
        return self._systems[as_system_id(system_id)]

    def compute_coefs(
        self,
        curve: CurveLike,
        a: float,
        b: float,
        max_k: int,
        system_id: Union[str, SystemId],
        progress_hook: Optional[Callable[[dict], None]] = None,
    ) -> CoefficientSet:
        """
        Constant term plus coefficients k = 1..max_k of every family of the system.

        `progress_hook`, when given, is called once per computed coefficient with
        a dict holding `family`, `k`, `max_k` and `value` (k = 0 is the constant term).
        """
        if int(max_k) < 0:
            raise ValueError("max_k must be >= 0")
        if not a < b:
            raise ValueError(f"domain must satisfy a < b; got ({a}, {b})")
        system = self.get_system(system_id)
        a, b, max_k = float(a), float(b), int(max_k)
        pts = clean_curve(curve)

        def report(family_id: str, k: int, value: Optional[float]) -> Optional[float]:
            if progress_hook is not None:
                progress_hook({"family": family_id, "k": k, "max_k": max_k, "value": value})
            return value

        c0 = report("c0", 0, system.compute_c0(pts, a, b))
        families = tuple(
            FamilyCoefficients(
                fam.family_id,
                tuple(report(fam.family_id, k, fam.compute_coef(pts, a, b, k)) for k in range(1, max_k + 1)),
            )
            for fam in system.families
        )
        return CoefficientSet(system_id=system.system_id, c0=c0, families=families, domain=(a, b))

    def approx(self, coefs: CoefficientSet) -> Approximation:
        return Approximation(coefs, self.get_system(coefs.system_id))


_default_engine: Optional[FourierEngine] = None


def default_engine() -> FourierEngine:
    """Process-wide engine used when no engine is passed explicitly."""
    global _default_engine
    if _default_engine is None:
        _default_engine = FourierEngine()
    return _default_engine


# ---------- module-level API ----------
def get_system(system_id: Union[str, SystemId], engine: Optional[FourierEngine] = None) -> BasisSystem:
    return (engine or default_engine()).get_system(system_id)


def compute_fourier_coefs(
    curve: CurveLike,
    a: float,
    b: float,
    max_k: int,
    system_id: Union[str, SystemId],
    engine: Optional[FourierEngine] = None,
    progress_hook: Optional[Callable[[dict], None]] = None,
) -> CoefficientSet:
    return (engine or default_engine()).compute_coefs(curve, a, b, max_k, system_id, progress_hook=progress_hook)


def fourier_approx(coefs: CoefficientSet, engine: Optional[FourierEngine] = None) -> Approximation:
    return (engine or default_engine()).approx(coefs)
