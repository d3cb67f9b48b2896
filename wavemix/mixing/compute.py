from __future__ import annotations
import numpy as np
from wavemix.dsp.crossfade import crossfade
from wavemix.dsp.resample import resample
from wavemix.dsp.spectral import spectral_mix
from wavemix.types import WORKING_LENGTH, MixResult, SpectralMode


def compute_mixes(
    raw_a: np.ndarray,
    raw_b: np.ndarray,
    mix: float,
    *,
    mode: SpectralMode = SpectralMode.POLAR
) -> tuple[np.ndarray, np.ndarray]:
    """
    Resample two raw sources to the working length and mix them both ways.

    Args:
        raw_a: Source A samples (any length, empty allowed)
        raw_b: Source B samples (any length, empty allowed)
        mix: Mix ratio, 0 = A, 1 = B; values outside [0, 1] extrapolate
        mode: Bin interpolation strategy for the spectral mix

    Returns:
        Tuple of (xfade, spectral), both float32 of length WORKING_LENGTH
    """
    a = resample(raw_a, WORKING_LENGTH)
    b = resample(raw_b, WORKING_LENGTH)
    xfade = crossfade(a, b, mix)
    spectral = spectral_mix(a, b, mix, mode=mode)
    return xfade, spectral


def compute_mix_result(
    raw_a: np.ndarray,
    raw_b: np.ndarray,
    mix: float,
    *,
    mode: SpectralMode = SpectralMode.POLAR
) -> MixResult:
    """Run compute_mixes and bundle the outputs with their parameters."""
    mode = SpectralMode(mode)
    xfade, spectral = compute_mixes(raw_a, raw_b, mix, mode=mode)
    return MixResult(
        xfade=xfade,
        spectral=spectral,
        mix=float(mix),
        mode=mode,
        length=WORKING_LENGTH
    )
