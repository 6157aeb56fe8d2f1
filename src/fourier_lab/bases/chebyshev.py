# bases/chebyshev.py
import math
from typing import Optional, Tuple
import numpy as np

from fourier_lab.bases.base import SystemId
from fourier_lab.inner_products.quadrature import integrate, oversample
from fourier_lab.utils.curves import CurveLike, clean_curve

MIN_THETA_STEPS = 200
THETA_STEPS_PER_ORDER = 20


def theta_steps(k: int) -> int:
    return max(MIN_THETA_STEPS, THETA_STEPS_PER_ORDER * int(k))


def compute_chebyshev_coef(curve: CurveLike, a: float, b: float, k: int) -> Optional[float]:
    """
    Chebyshev coefficient T_k of `curve` over [a, b].

    With x = mid + half*cos(theta) the weighted inner product
    int f(x) T_k(x) / sqrt(1 - x^2) dx becomes int_0^pi f(theta) cos(k*theta) dtheta,
    normalised by pi (k = 0) or pi/2 (k > 0). f(theta) is read off the curve by
    linear interpolation, held constant past the curve ends.
    """
    fine = oversample(clean_curve(curve), a, b, max(k, 10))
    if fine is None:
        return None
    fine = np.asarray(fine, dtype=float)

    mid = (a + b) / 2.0
    half = (b - a) / 2.0
    steps = theta_steps(k)
    theta = np.pi * np.arange(steps + 1) / steps
    # x runs from b down to a as theta goes 0 -> pi
    x = mid + half * np.cos(theta)
    y = np.interp(x, fine[:, 0], fine[:, 1])

    integral = integrate(np.column_stack([theta, y * np.cos(k * theta)]), 0.0, math.pi)
    if integral is None:
        return None
    return integral / math.pi if k == 0 else integral / (math.pi / 2.0)


def _cosh(z: float) -> float:
    try:
        return math.cosh(z)
    except OverflowError:
        return math.inf


def chebyshev_t(k: int, t: float) -> float:
    """
    T_k(t), continued as cosh(k*acosh|t|) (with the parity sign) for |t| > 1.
    Far outside [-1, 1] high orders exceed the float range and give +/-inf.
    """
    if -1.0 <= t <= 1.0:
        return math.cos(k * math.acos(t))
    if t > 1.0:
        return _cosh(k * math.acosh(t))
    sign = 1.0 if k % 2 == 0 else -1.0
    return sign * _cosh(k * math.acosh(-t))


def eval_chebyshev_term(k: int, x: float, a: float, b: float) -> float:
    mid = (a + b) / 2.0
    half = (b - a) / 2.0
    return chebyshev_t(k, (float(x) - mid) / half)


class ChebyshevFamily:
    family_id = "T"
    prefix = "T"

    def compute_coef(self, curve: CurveLike, a: float, b: float, k: int) -> Optional[float]:
        return compute_chebyshev_coef(curve, a, b, k)

    def eval_term(self, k: int, x: float, a: float, b: float) -> float:
        return eval_chebyshev_term(k, x, a, b)


class ChebyshevSystem:
    """c0*T_0 + sum T_k coefficients; T_0 = 1 so c0 enters the sum as is."""
    system_id = SystemId.chebyshev

    def __init__(self):
        self.families: Tuple[ChebyshevFamily, ...] = (ChebyshevFamily(),)

    def compute_c0(self, curve: CurveLike, a: float, b: float) -> Optional[float]:
        return compute_chebyshev_coef(curve, a, b, 0)

    def eval_c0(self, c0: float) -> float:
        return c0
