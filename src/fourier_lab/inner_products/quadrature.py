# inner_products/quadrature.py
from __future__ import annotations
import math
from typing import Optional
import numpy as np

from fourier_lab.utils.curves import CurveLike, as_curve, clean_curve, interpolate, is_strictly_increasing


# ---- trapezoidal integral over a piecewise-linear curve ---------------------
def integrate(points: CurveLike, a: float, b: float) -> Optional[float]:
    """
    Definite integral of the piecewise-linear curve through `points` over [a, b].

    The curve is cleaned first. Segments straddling a or b are clipped by
    linear interpolation; the curve is never extrapolated, so only
    [max(a, x0), min(b, xn)] contributes.

    Returns None when fewer than two usable points remain or when [a, b]
    does not overlap the curve support.
    """
    pts = clean_curve(points)
    n = pts.shape[0]
    if n < 2:
        return None
    x, y = pts[:, 0], pts[:, 1]

    # smallest segment whose right end is >= a, largest whose left end is <= b
    start = min(int(np.searchsorted(x[1:], a, side="left")), n - 1)
    end = max(int(np.searchsorted(x[:-1], b, side="right")), 0)
    if start >= end:
        return None

    xs = x[start:end + 1].copy()
    ys = y[start:end + 1].copy()
    first_x = max(a, xs[0])
    last_x = min(b, xs[-1])

    # both clips read the unclipped segment ends
    y_first, y_last = ys[0], ys[-1]
    if first_x > xs[0]:
        y_first = interpolate(first_x, xs[0], ys[0], xs[1], ys[1])
    if last_x < xs[-1]:
        y_last = interpolate(last_x, xs[-2], ys[-2], xs[-1], ys[-1])
    xs[0], ys[0] = first_x, y_first
    xs[-1], ys[-1] = last_x, y_last

    return float(np.sum(np.diff(xs) * (ys[1:] + ys[:-1])) / 2.0)


# ---- adaptive resampling ------------------------------------------------------
def required_points(a: float, b: float, k: float, min_points_per_period: int = 10) -> int:
    """Sample count giving `min_points_per_period` samples per oscillation of index k."""
    # period is (b - a) for k = 0, else (b - a) / 2k
    oscillations = 1.0 if k == 0 else 2.0 * k
    return int(math.ceil(oscillations * min_points_per_period))


def oversample(
    points: CurveLike, a: float, b: float, k: float, min_points_per_period: int = 10
):
    """
    Resample `points` uniformly on [a, b] when too sparse for basis index k.

    Curves that already carry enough samples are returned unchanged (the same
    object). Sparse curves are replaced by `required_points(...)` uniform
    samples, linearly interpolated between neighbouring input points and
    linearly extended past the curve ends.

    x must be strictly increasing (see `clean_curve`); otherwise ValueError.
    Returns None when fewer than two points are available.
    """
    pts = as_curve(points)
    n = pts.shape[0]
    if not is_strictly_increasing(pts):
        raise ValueError("oversample requires strictly increasing x; clean the curve first")

    desired = max(required_points(a, b, k, min_points_per_period), 2)
    if n >= desired:
        return points
    if n < 2:
        return None

    px, py = pts[:, 0], pts[:, 1]
    xs = a + (b - a) * np.arange(desired) / (desired - 1)
    # right neighbour: first sample with x >= xs, kept inside [1, n - 1]
    j = np.clip(np.searchsorted(px, xs, side="left"), 1, n - 1)
    ys = interpolate(xs, px[j - 1], py[j - 1], px[j], py[j])
    return np.column_stack([xs, ys])
