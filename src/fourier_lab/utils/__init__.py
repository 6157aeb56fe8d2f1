from fourier_lab.utils.curves import (
    CurveLike,
    as_curve,
    clean_curve,
    interpolate,
    is_strictly_increasing,
    sample_function,
)

__all__ = [
    "CurveLike",
    "as_curve",
    "clean_curve",
    "interpolate",
    "is_strictly_increasing",
    "sample_function",
]
