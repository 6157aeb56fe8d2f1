# synthesis.py
"""
Harmonic spectra for the trigonometric systems.

Index 0 of `real`/`imag` is the DC slot and is always 0; index k carries
harmonic k. Half-period systems repeat every 2(b - a), so their fundamental
is half the base frequency.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Optional
import warnings
import numpy as np

from fourier_lab.bases.base import SystemId
from fourier_lab.bases.registry import TRIG_SYSTEMS
from fourier_lab.diagnostics.core import CoefficientMask
from fourier_lab.series import CoefficientSet


@dataclass(frozen=True)
class HarmonicSpectrum:
    real: np.ndarray
    imag: np.ndarray
    frequency: float


def harmonic_spectrum(
    coefs: CoefficientSet,
    mask: Optional[CoefficientMask] = None,
    base_freq: float = 220.0,
) -> Optional[HarmonicSpectrum]:
    if coefs.system_id not in TRIG_SYSTEMS:
        warnings.warn(f"Synthesis not supported for system: {coefs.system_id.value}", UserWarning)
        return None

    max_k = coefs.max_k
    real = np.zeros(max_k + 1, dtype=float)
    imag = np.zeros(max_k + 1, dtype=float)

    def value(fi: int, k: int) -> float:
        if mask is not None and not mask.is_active(fi, k):
            return 0.0
        c = coefs.families[fi].coefficients[k - 1] if k <= len(coefs.families[fi].coefficients) else None
        return 0.0 if c is None else float(c)

    for k in range(1, max_k + 1):
        if coefs.system_id == SystemId.standard:
            real[k] = value(0, k)
            imag[k] = value(1, k)
        elif coefs.system_id == SystemId.cos:
            real[k] = value(0, k)
        else:
            imag[k] = value(0, k)

    freq = float(base_freq)
    if coefs.system_id in (SystemId.cos, SystemId.sin):
        freq /= 2.0
    return HarmonicSpectrum(real=real, imag=imag, frequency=freq)


def synthesize(
    spectrum: HarmonicSpectrum,
    duration: float = 1.0,
    sample_rate: int = 44100,
    normalize: bool = True,
) -> np.ndarray:
    """Additive rendering: sum_k real_k cos(2 pi k f t) + imag_k sin(2 pi k f t)."""
    if duration <= 0:
        raise ValueError("duration must be > 0")
    if sample_rate <= 0:
        raise ValueError("sample_rate must be > 0")
    t = np.arange(int(round(duration * sample_rate))) / float(sample_rate)
    k = np.arange(spectrum.real.shape[0])[:, None]
    phase = 2.0 * np.pi * spectrum.frequency * k * t[None, :]
    wave = spectrum.real @ np.cos(phase) + spectrum.imag @ np.sin(phase)

    peak = float(np.max(np.abs(wave))) if wave.size else 0.0
    if normalize and peak > 0.0:
        wave = wave / peak
    return wave
