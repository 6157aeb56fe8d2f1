# bases/registry.py
from __future__ import annotations
from typing import Dict, Optional, Union

from fourier_lab.bases.base import BasisSystem, SystemId
from fourier_lab.bases.chebyshev import ChebyshevSystem
from fourier_lab.bases.legendre import LegendreSystem, LegendreTable
from fourier_lab.bases.trig import CosineSystem, SineSystem, StandardSystem

# display order
SYSTEM_ORDER = (
    SystemId.standard,
    SystemId.cos,
    SystemId.sin,
    SystemId.chebyshev,
    SystemId.legendre,
)

# systems whose families are plain harmonics (usable for synthesis)
TRIG_SYSTEMS = frozenset({SystemId.standard, SystemId.cos, SystemId.sin})


def build_systems(legendre_table: Optional[LegendreTable] = None) -> Dict[SystemId, BasisSystem]:
    """One instance of every basis system, sharing `legendre_table` for P_k."""
    return {
        SystemId.standard: StandardSystem(),
        SystemId.cos: CosineSystem(),
        SystemId.sin: SineSystem(),
        SystemId.chebyshev: ChebyshevSystem(),
        SystemId.legendre: LegendreSystem(legendre_table),
    }


def as_system_id(system_id: Union[str, SystemId]) -> SystemId:
    # unknown ids raise ValueError from the enum itself
    return SystemId(system_id)
