from enum import Enum
from typing import Optional, Protocol, Tuple, Union

from fourier_lab.utils.curves import CurveLike


class OutOfRange(Enum):
    """Marker for a basis term evaluated outside its extrapolation window."""
    OUT_OF_RANGE = "out_of_range"

    def __repr__(self) -> str:
        return "OUT_OF_RANGE"


OUT_OF_RANGE = OutOfRange.OUT_OF_RANGE

TermValue = Union[float, OutOfRange]


class SystemId(str, Enum):
    standard = "standard"
    cos = "cos"
    sin = "sin"
    chebyshev = "chebyshev"
    legendre = "legendre"


class CoefficientFamily(Protocol):
    family_id: str
    prefix: str

    def compute_coef(self, curve: CurveLike, a: float, b: float, k: int) -> Optional[float]:
        """Coefficient of index k (k >= 1) of `curve` over [a, b]; None if undefined."""
        ...

    def eval_term(self, k: int, x: float, a: float, b: float) -> TermValue:
        """Value of the k-th basis function at x for a fit over [a, b]."""
        ...


class BasisSystem(Protocol):
    system_id: SystemId
    families: Tuple[CoefficientFamily, ...]

    def compute_c0(self, curve: CurveLike, a: float, b: float) -> Optional[float]:
        """Constant term of `curve` over [a, b]."""
        ...

    def eval_c0(self, c0: float) -> float:
        """Contribution of the constant term to the partial sum."""
        ...
