# utils/curves.py
from __future__ import annotations
from typing import Callable, List, Sequence, Tuple, Union
import numpy as np

# A curve is any (n, 2) array-like of (x, y) samples.
CurveLike = Union[np.ndarray, Sequence[Sequence[float]]]


def as_curve(points: CurveLike) -> np.ndarray:
    """View `points` as a float (n, 2) array without copying when possible."""
    arr = np.asarray(points, dtype=float)
    if arr.size == 0:
        return np.empty((0, 2), dtype=float)
    if arr.ndim != 2 or arr.shape[1] != 2:
        raise ValueError(f"Expected a curve of shape (n, 2); got {arr.shape}")
    return arr


def clean_curve(points: CurveLike) -> np.ndarray:
    """
    Keep only the points whose x strictly exceeds every x seen before them.

    Points drawn "backwards" are dropped, so the result always has strictly
    increasing x. Points with a NaN x are dropped and do not move the running
    maximum. Cleaning an already clean curve returns the same samples.
    """
    pts = as_curve(points)
    if pts.shape[0] == 0:
        return pts.copy()
    x = pts[:, 0]
    # fmax skips NaN; stays NaN only while every earlier x was NaN
    running_max = np.fmax.accumulate(x)
    keep = ~np.isnan(x)
    keep[1:] &= (x[1:] > running_max[:-1]) | np.isnan(running_max[:-1])
    return pts[keep].copy()


def is_strictly_increasing(points: CurveLike) -> bool:
    x = as_curve(points)[:, 0]
    return bool(np.all(np.diff(x) > 0.0))


def interpolate(x, x1, y1, x2, y2):
    # caller guarantees x1 != x2
    return y1 + (x - x1) * (y2 - y1) / (x2 - x1)


def sample_function(
    f: Callable[[float], float], x_min: float, x_max: float, n: int = 200
) -> List[Tuple[float, object]]:
    """Sample `f` at n + 1 uniformly spaced points of [x_min, x_max]."""
    n = int(n)
    if n < 1:
        raise ValueError("n must be >= 1")
    lo, hi = float(x_min), float(x_max)
    xs = [lo + (hi - lo) * i / n for i in range(n + 1)]
    return [(x, f(x)) for x in xs]
