# bases/trig.py
import math
from typing import Callable, Optional, Tuple
import numpy as np

from fourier_lab.bases.base import SystemId
from fourier_lab.inner_products.quadrature import integrate, oversample
from fourier_lab.utils.curves import CurveLike, clean_curve

# multiplier 2: full period over [a, b]; multiplier 1: half period
FULL_PERIOD = 2
HALF_PERIOD = 1


def trig_angle(k: float, x, a: float, b: float, multiplier: int, offset: float = 0.0):
    return multiplier * k * math.pi * (x - offset) / (b - a)


def compute_trig_coef(
    curve: CurveLike,
    a: float,
    b: float,
    k: int,
    trig_fn: Callable,
    multiplier: int,
    offset: float = 0.0,
) -> Optional[float]:
    """
    2/(b-a) * integral of y * trig_fn(multiplier*k*pi*(x - offset)/(b - a)) over [a, b].

    Half-period bases oscillate half as fast over [a, b], so they are
    oversampled as if their index were k/2.
    """
    eff_k = k if multiplier == FULL_PERIOD else k / 2.0
    fine = oversample(clean_curve(curve), a, b, eff_k)
    if fine is None:
        return None
    fine = np.asarray(fine, dtype=float)
    theta = trig_angle(k, fine[:, 0], a, b, multiplier, offset)
    product = np.column_stack([fine[:, 0], fine[:, 1] * trig_fn(theta)])
    integral = integrate(product, a, b)
    if integral is None:
        return None
    return integral * 2.0 / (b - a)


def compute_mean_c0(curve: CurveLike, a: float, b: float) -> Optional[float]:
    """a0 = 2/(b-a) * integral of y over [a, b]; enters the sum as a0 / 2."""
    integral = integrate(curve, a, b)
    if integral is None:
        return None
    return integral * 2.0 / (b - a)


class TrigFamily:
    """
    One cosine or sine family.

    Parameters
    ----------
    family_id : str
        "cos" or "sin".
    prefix : str
        Display prefix of the coefficients ("a" or "b").
    multiplier : int
        FULL_PERIOD (2) or HALF_PERIOD (1).
    anchored : bool
        When True the angle is measured from a (offset = a), otherwise from 0.
    """
    def __init__(self, family_id: str, prefix: str, multiplier: int, anchored: bool):
        if family_id not in ("cos", "sin"):
            raise ValueError("family_id must be 'cos' or 'sin'")
        self.family_id = family_id
        self.prefix = prefix
        self.multiplier = int(multiplier)
        self.anchored = bool(anchored)
        self._np_fn = np.cos if family_id == "cos" else np.sin
        self._fn = math.cos if family_id == "cos" else math.sin

    def _offset(self, a: float) -> float:
        return a if self.anchored else 0.0

    def compute_coef(self, curve: CurveLike, a: float, b: float, k: int) -> Optional[float]:
        return compute_trig_coef(curve, a, b, k, self._np_fn, self.multiplier, self._offset(a))

    def eval_term(self, k: int, x: float, a: float, b: float) -> float:
        return self._fn(trig_angle(k, float(x), a, b, self.multiplier, self._offset(a)))

    def __repr__(self) -> str:
        return f"TrigFamily({self.family_id!r}, multiplier={self.multiplier}, anchored={self.anchored})"


class StandardSystem:
    """
    Full-period series a0/2 + sum a_k cos(2k*pi*x/(b-a)) + b_k sin(2k*pi*x/(b-a)).

    The angle is measured from x = 0, not from a. On [-pi, pi] this gives the
    textbook basis, e.g. sin(x) has b_1 = +1.
    """
    system_id = SystemId.standard

    def __init__(self):
        self.families: Tuple[TrigFamily, ...] = (
            TrigFamily("cos", "a", FULL_PERIOD, anchored=False),
            TrigFamily("sin", "b", FULL_PERIOD, anchored=False),
        )

    def compute_c0(self, curve: CurveLike, a: float, b: float) -> Optional[float]:
        return compute_mean_c0(curve, a, b)

    def eval_c0(self, c0: float) -> float:
        return c0 / 2.0


class CosineSystem:
    """Half-period cosine series a0/2 + sum a_k cos(k*pi*(x-a)/(b-a))."""
    system_id = SystemId.cos

    def __init__(self):
        self.families: Tuple[TrigFamily, ...] = (
            TrigFamily("cos", "a", HALF_PERIOD, anchored=True),
        )

    def compute_c0(self, curve: CurveLike, a: float, b: float) -> Optional[float]:
        return compute_mean_c0(curve, a, b)

    def eval_c0(self, c0: float) -> float:
        return c0 / 2.0


class SineSystem:
    """Half-period sine series sum b_k sin(k*pi*(x-a)/(b-a)); no constant term."""
    system_id = SystemId.sin

    def __init__(self):
        self.families: Tuple[TrigFamily, ...] = (
            TrigFamily("sin", "b", HALF_PERIOD, anchored=True),
        )

    def compute_c0(self, curve: CurveLike, a: float, b: float) -> Optional[float]:
        return 0.0

    def eval_c0(self, c0: float) -> float:
        return 0.0
