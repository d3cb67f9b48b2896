"""Fixed-length resampling of wavetable buffers."""
from __future__ import annotations
import numpy as np
from wavemix.types import SAMPLE_DTYPE


def resample(x: np.ndarray, new_length: int) -> np.ndarray:
    """
    Resample a buffer to a new sample count by linear interpolation.

    Only the sample count changes, not the time base. No anti-aliasing
    filter is applied, so heavy downsampling aliases.

    Args:
        x: Mono input buffer (1D, any length)
        new_length: Output sample count

    Returns:
        float32 buffer of length new_length; zeros if x is empty
    """
    x = np.asarray(x, dtype=np.float64)
    if x.ndim != 1:
        raise ValueError("resample expects mono 1D buffer.")
    new_length = int(new_length)
    if new_length < 0:
        raise ValueError("new_length must be non-negative.")

    old_length = x.size
    if old_length < 1 or new_length == 0:
        return np.zeros(new_length, dtype=SAMPLE_DTYPE)

    j = np.arange(new_length, dtype=np.float64) * (float(old_length) / float(new_length))
    j1 = np.minimum(np.floor(j).astype(np.int64), old_length - 1)
    j2 = np.minimum(j1 + 1, old_length - 1)
    mu = j - j1
    out = x[j1] + mu * (x[j2] - x[j1])
    return out.astype(SAMPLE_DTYPE)
