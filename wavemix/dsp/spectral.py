"""Frequency-domain mixing of two wavetables."""
from __future__ import annotations
import numpy as np
from wavemix.dsp.transform import (
    apply_forward,
    apply_inverse,
    forward_real_transform,
    inverse_real_transform,
)
from wavemix.types import SAMPLE_DTYPE, SpectralMode


def _wrap_phase(phi: np.ndarray) -> np.ndarray:
    """Wrap angles into (-pi, pi]."""
    out = np.mod(phi + np.pi, 2.0 * np.pi) - np.pi
    out[out == -np.pi] = np.pi
    return out


def normalized_spectrum(x: np.ndarray) -> np.ndarray:
    """One-sided spectrum of x with every bin scaled by 1/n."""
    x = np.asarray(x, dtype=np.float64)
    plan = forward_real_transform(x.size)
    return apply_forward(plan, x) * (1.0 / x.size)


def interpolate_bins(
    spec_a: np.ndarray,
    spec_b: np.ndarray,
    mix: float,
    mode: SpectralMode = SpectralMode.POLAR
) -> np.ndarray:
    """
    Interpolate two spectra bin by bin.

    POLAR interpolates magnitude and phase linearly. The phase is blended
    as a plain number, so bins whose phases straddle the +-pi boundary
    swing the long way round. POLAR_SHORTEST_ARC blends along the shorter
    arc instead. RECTANGULAR blends the complex values directly.
    """
    mode = SpectralMode(mode)
    mix = float(mix)
    if mode == SpectralMode.RECTANGULAR:
        return spec_a * (1.0 - mix) + spec_b * mix

    mag_a = np.abs(spec_a)
    mag_b = np.abs(spec_b)
    phase_a = np.angle(spec_a)
    phase_b = np.angle(spec_b)

    mag_ab = mag_a * (1.0 - mix) + mag_b * mix
    if mode == SpectralMode.POLAR_SHORTEST_ARC:
        phase_ab = phase_a + mix * _wrap_phase(phase_b - phase_a)
    else:
        phase_ab = phase_a * (1.0 - mix) + phase_b * mix
    return mag_ab * np.exp(1j * phase_ab)


def spectral_mix(
    a: np.ndarray,
    b: np.ndarray,
    mix: float,
    *,
    mode: SpectralMode = SpectralMode.POLAR
) -> np.ndarray:
    """
    Mix two equal-length buffers in the frequency domain.

    Both buffers are transformed, normalized by 1/N, interpolated per bin
    (DC and Nyquist included, no special casing) and transformed back.

    Args:
        a: First buffer (1D, even length N)
        b: Second buffer (same length as a)
        mix: Mix ratio, 0 = a, 1 = b; not clamped
        mode: Bin interpolation strategy

    Returns:
        float32 buffer of length N
    """
    a = np.asarray(a, dtype=np.float64)
    b = np.asarray(b, dtype=np.float64)
    if a.ndim != 1 or b.ndim != 1:
        raise ValueError("spectral_mix expects mono 1D buffers.")
    if a.size != b.size:
        raise ValueError(f"spectral_mix buffers differ in length: {a.size} != {b.size}.")
    n = a.size
    if n == 0 or n % 2 != 0:
        raise ValueError(f"spectral_mix requires a positive even length, got {n}.")

    forward = forward_real_transform(n)
    spec_a = apply_forward(forward, a) * (1.0 / n)
    spec_b = apply_forward(forward, b) * (1.0 / n)

    mixed = interpolate_bins(spec_a, spec_b, mix, mode)

    inverse = inverse_real_transform(n)
    out = apply_inverse(inverse, mixed)
    return out.astype(SAMPLE_DTYPE)
