from __future__ import annotations
import numpy as np
from wavemix.dsp.spectral import normalized_spectrum


def harmonic_magnitudes(x: np.ndarray, count: int = 8) -> np.ndarray:
    """
    Magnitudes of bins 1..count of the 1/N-normalized spectrum.

    For a single-cycle table bin k is the k-th harmonic. A full-scale
    sine reads 0.5 at bin 1 (the other half sits in the mirrored bin).
    """
    x = np.asarray(x, dtype=np.float64)
    if x.ndim != 1 or x.size < 2:
        raise ValueError("harmonic_magnitudes expects a 1D buffer of at least 2 samples.")
    mags = np.abs(normalized_spectrum(x))
    out = np.zeros(int(count), dtype=np.float64)
    avail = mags[1:1 + int(count)]
    out[:avail.size] = avail
    return out


def table_stats(x: np.ndarray) -> dict:
    """Peak, RMS, DC offset and fundamental magnitude of a buffer."""
    x = np.asarray(x, dtype=np.float64)
    if x.ndim != 1:
        raise ValueError("table_stats expects mono 1D buffer.")
    if x.size == 0:
        return {"length": 0, "peak": 0.0, "rms": 0.0, "dc": 0.0, "fundamental": 0.0}
    fundamental = float(harmonic_magnitudes(x, 1)[0]) if x.size >= 2 else 0.0
    return {
        "length": int(x.size),
        "peak": float(np.max(np.abs(x))),
        "rms": float(np.sqrt(np.mean(x ** 2))),
        "dc": float(np.mean(x)),
        "fundamental": fundamental,
    }
