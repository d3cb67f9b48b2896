"""Default source tables used before any file is loaded."""
from __future__ import annotations
import numpy as np
from wavemix.types import SAMPLE_DTYPE, WORKING_LENGTH, Wavetable


def _phase(n: int) -> np.ndarray:
    n = int(n)
    if n < 2:
        raise ValueError("Default tables need at least 2 samples.")
    # Last sample lands on phase 1.0, so both ends of the table meet.
    return np.arange(n, dtype=np.float64) / float(n - 1)


def default_sine(n: int = WORKING_LENGTH) -> np.ndarray:
    """One period of a sine wave."""
    return np.sin(2.0 * np.pi * _phase(n)).astype(SAMPLE_DTYPE)


def default_ramp(n: int = WORKING_LENGTH) -> np.ndarray:
    """One period of a rising sawtooth centered on zero."""
    p = _phase(n) + 0.5
    return ((p - np.trunc(p)) * 2.0 - 1.0).astype(SAMPLE_DTYPE)


def default_tables(n: int = WORKING_LENGTH) -> tuple[Wavetable, Wavetable]:
    """Return the (A, B) pair of built-in tables: sine and ramp."""
    return (
        Wavetable(samples=default_sine(n), name="sine"),
        Wavetable(samples=default_ramp(n), name="ramp"),
    )
