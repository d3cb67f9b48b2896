from __future__ import annotations
import numpy as np
from wavemix.types import SAMPLE_DTYPE


def crossfade(a: np.ndarray, b: np.ndarray, mix: float) -> np.ndarray:
    """Blend two equal-length buffers sample by sample: a*(1-mix) + b*mix."""
    a = np.asarray(a, dtype=np.float64)
    b = np.asarray(b, dtype=np.float64)
    if a.ndim != 1 or b.ndim != 1:
        raise ValueError("crossfade expects mono 1D buffers.")
    if a.size != b.size:
        raise ValueError(f"crossfade buffers differ in length: {a.size} != {b.size}.")
    mix = float(mix)
    return (a * (1.0 - mix) + b * mix).astype(SAMPLE_DTYPE)
