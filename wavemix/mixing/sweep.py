"""Render a series of mixes across the full mix range."""
from __future__ import annotations
import numpy as np
from wavemix.mixing.compute import compute_mixes
from wavemix.types import SpectralMode


def sweep_ratios(steps: int) -> np.ndarray:
    """Evenly spaced mix ratios from 0 to 1 inclusive."""
    steps = int(steps)
    if steps < 2:
        raise ValueError("Sweep needs at least 2 steps.")
    return np.linspace(0.0, 1.0, steps)


def compute_sweep(
    raw_a: np.ndarray,
    raw_b: np.ndarray,
    steps: int,
    *,
    mode: SpectralMode = SpectralMode.POLAR
) -> tuple[list[np.ndarray], list[np.ndarray]]:
    """
    Compute crossfade and spectral frames for each ratio of a sweep.

    Each frame is an independent compute_mixes call, so frame k equals
    compute_mixes(raw_a, raw_b, k / (steps - 1)).
    """
    xfade_frames: list[np.ndarray] = []
    spectral_frames: list[np.ndarray] = []
    for mix in sweep_ratios(steps):
        xfade, spectral = compute_mixes(raw_a, raw_b, float(mix), mode=mode)
        xfade_frames.append(xfade)
        spectral_frames.append(spectral)
    return xfade_frames, spectral_frames
