# bases/legendre.py
import numbers
import threading
from typing import List, Optional, Tuple
import numpy as np

from fourier_lab.bases.base import OUT_OF_RANGE, SystemId, TermValue
from fourier_lab.inner_products.quadrature import integrate, oversample
from fourier_lab.utils.curves import CurveLike, clean_curve

# default extended domain of the table; also the extrapolation window of eval_legendre_term
EXTRAPOLATION_LIMIT = 1.5


def _check_order(n) -> int:
    if isinstance(n, bool) or not isinstance(n, numbers.Integral):
        raise ValueError(f"Legendre order must be an integer; got {n!r}")
    if n < 0:
        raise ValueError(f"Legendre order must be >= 0; got {n}")
    return int(n)


class LegendreTable:
    """
    Legendre polynomials P_n tabulated on a uniform grid of [x_min, x_max].

    Rows P_0 = 1 and P_1 = x are built up front; higher rows are appended on
    demand with Bonnet's recurrence

        P_{n+1}(x) = ((2n + 1) x P_n(x) - n P_{n-1}(x)) / (n + 1)

    and kept for the lifetime of the table. A cached row is never rebuilt,
    so asking for order m after order n > m returns the same values as
    asking for m first.

    Parameters
    ----------
    grid_size : int
        Number of grid points (>= 2).
    x_min, x_max : float
        Extended domain covered by the grid; [-1.5, 1.5] by default so the
        polynomials can be evaluated a little past [-1, 1].
    """
    def __init__(self, grid_size: int = 2000, x_min: float = -EXTRAPOLATION_LIMIT, x_max: float = EXTRAPOLATION_LIMIT):
        if int(grid_size) < 2:
            raise ValueError("grid_size must be >= 2")
        if not x_min < x_max:
            raise ValueError("x_min must be < x_max")
        self.grid_size = int(grid_size)
        self.x_min = float(x_min)
        self.x_max = float(x_max)
        self.grid = np.linspace(self.x_min, self.x_max, self.grid_size)
        self.grid.setflags(write=False)
        self._rows: List[np.ndarray] = [self._frozen(np.ones_like(self.grid)), self._frozen(self.grid.copy())]
        self._lock = threading.Lock()

    @staticmethod
    def _frozen(row: np.ndarray) -> np.ndarray:
        row.setflags(write=False)
        return row

    @property
    def max_order(self) -> int:
        """Highest order currently cached."""
        return len(self._rows) - 1

    def extend(self, n: int) -> None:
        """Make sure rows 0..n are cached."""
        n = _check_order(n)
        if n <= self.max_order:
            return
        with self._lock:
            x = self.grid
            while len(self._rows) <= n:
                m = len(self._rows) - 1
                nxt = ((2 * m + 1) * x * self._rows[m] - m * self._rows[m - 1]) / (m + 1)
                self._rows.append(self._frozen(nxt))

    def values(self, n: int) -> np.ndarray:
        """Read-only row of P_n on the grid."""
        n = _check_order(n)
        self.extend(n)
        return self._rows[n]

    def evaluate(self, n: int, x):
        """
        P_n at x (scalar or array), linearly interpolated between grid points.
        Values outside [x_min, x_max] are clamped to the end of the grid.
        """
        row = self.values(n)
        out = np.interp(x, self.grid, row)
        if np.ndim(out) == 0:
            return float(out)
        return out

    def __repr__(self) -> str:
        return (f"LegendreTable(grid_size={self.grid_size}, x_min={self.x_min}, "
                f"x_max={self.x_max}, max_order={self.max_order})")


def compute_legendre_coef(
    curve: CurveLike, a: float, b: float, k: int, table: LegendreTable
) -> Optional[float]:
    """(2k + 1)/2 * int_{-1}^{1} f(x~) P_k(x~) dx~ with x~ = (x - mid)/half."""
    fine = oversample(clean_curve(curve), a, b, k)
    if fine is None:
        return None
    fine = np.asarray(fine, dtype=float)

    mid = (a + b) / 2.0
    half = (b - a) / 2.0
    t = (fine[:, 0] - mid) / half
    product = np.column_stack([t, fine[:, 1] * table.evaluate(k, t)])
    integral = integrate(product, -1.0, 1.0)
    if integral is None:
        return None
    return integral * (2 * k + 1) / 2.0


def eval_legendre_term(k: int, x: float, a: float, b: float, table: LegendreTable) -> TermValue:
    mid = (a + b) / 2.0
    half = (b - a) / 2.0
    t = (float(x) - mid) / half
    # the window is the grid itself, so evaluate never clamps
    if t < table.x_min or t > table.x_max:
        return OUT_OF_RANGE
    return table.evaluate(k, t)


class LegendreFamily:
    family_id = "P"
    prefix = "P"

    def __init__(self, table: LegendreTable):
        self.table = table

    def compute_coef(self, curve: CurveLike, a: float, b: float, k: int) -> Optional[float]:
        return compute_legendre_coef(curve, a, b, k, self.table)

    def eval_term(self, k: int, x: float, a: float, b: float) -> TermValue:
        return eval_legendre_term(k, x, a, b, self.table)


class LegendreSystem:
    """c0*P_0 + sum P_k coefficients, evaluated through a shared LegendreTable."""
    system_id = SystemId.legendre

    def __init__(self, table: Optional[LegendreTable] = None):
        self.table = table if table is not None else LegendreTable()
        self.families: Tuple[LegendreFamily, ...] = (LegendreFamily(self.table),)

    def compute_c0(self, curve: CurveLike, a: float, b: float) -> Optional[float]:
        return compute_legendre_coef(curve, a, b, 0, self.table)

    def eval_c0(self, c0: float) -> float:
        return c0
