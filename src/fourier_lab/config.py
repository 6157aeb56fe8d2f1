# config.py
"""Static display labels and the catalog of example functions."""
from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Dict, Tuple
import math

from fourier_lab.bases.base import SystemId


@dataclass(frozen=True)
class FamilyLabel:
    family_id: str
    title: str
    plot_title: str
    prefix: str


@dataclass(frozen=True)
class SystemLabel:
    system_id: SystemId
    label: str
    families: Tuple[FamilyLabel, ...]


SYSTEM_LABELS: Dict[SystemId, SystemLabel] = {
    SystemId.standard: SystemLabel(
        SystemId.standard,
        "Standard (1/2, sin, cos)",
        (
            FamilyLabel("cos", "Cosine terms", "a_k cos(2k*pi*x/(b-a))", "a"),
            FamilyLabel("sin", "Sine terms", "b_k sin(2k*pi*x/(b-a))", "b"),
        ),
    ),
    SystemId.cos: SystemLabel(
        SystemId.cos,
        "Cosine",
        (FamilyLabel("cos", "Cosine terms", "a_k cos(k*pi*(x-a)/(b-a))", "a"),),
    ),
    SystemId.sin: SystemLabel(
        SystemId.sin,
        "Sine",
        (FamilyLabel("sin", "Sine terms", "b_k sin(k*pi*(x-a)/(b-a))", "b"),),
    ),
    SystemId.chebyshev: SystemLabel(
        SystemId.chebyshev,
        "Chebyshev",
        (FamilyLabel("T", "Chebyshev polynomials T_k", "a_k T_k(x)", "T"),),
    ),
    SystemId.legendre: SystemLabel(
        SystemId.legendre,
        "Legendre",
        (FamilyLabel("P", "Legendre polynomials P_k", "a_k P_k(x)", "P"),),
    ),
}


@dataclass(frozen=True)
class SampleFunction:
    name: str
    func: Callable[[float], float]
    domain: Tuple[float, float]


SAMPLE_FUNCTIONS: Tuple[SampleFunction, ...] = (
    SampleFunction("sin(x)", math.sin, (-math.pi, math.pi)),
    SampleFunction("x^2", lambda x: x ** 2, (-2.0, 2.0)),
    SampleFunction("e^x", math.exp, (-1.0, 1.0)),
    SampleFunction("step", lambda x: 1.0 if x > 0 else -1.0, (-1.0, 1.0)),
    SampleFunction("sawtooth", lambda x: x - math.floor(x), (0.0, 1.0)),
)


def find_sample_function(name: str) -> SampleFunction:
    for fn in SAMPLE_FUNCTIONS:
        if fn.name == name:
            return fn
    known = ", ".join(fn.name for fn in SAMPLE_FUNCTIONS)
    raise KeyError(f"unknown sample function {name!r} (known: {known})")
