"""
Real-input FFT capability used by the spectral mixer.

Both directions are unnormalized: a forward then inverse pass scales the
signal by n. Callers compensate (the spectral mixer scales bins by 1/n
after the forward pass). Only this module touches numpy.fft.
"""
from __future__ import annotations
from dataclasses import dataclass
import numpy as np

FORWARD = "forward"
INVERSE = "inverse"


@dataclass(frozen=True)
class RealTransformPlan:
    """Configuration for one direction of a length-n real transform."""
    n: int
    direction: str

    @property
    def n_bins(self) -> int:
        return self.n // 2 + 1


def _make_plan(n: int, direction: str) -> RealTransformPlan:
    n = int(n)
    if n <= 0:
        raise ValueError("Transform length must be positive.")
    return RealTransformPlan(n=n, direction=direction)


def forward_real_transform(n: int) -> RealTransformPlan:
    """Prepare a length-n real-to-complex transform."""
    return _make_plan(n, FORWARD)


def inverse_real_transform(n: int) -> RealTransformPlan:
    """Prepare a length-n complex-to-real transform."""
    return _make_plan(n, INVERSE)


def apply_forward(plan: RealTransformPlan, x: np.ndarray) -> np.ndarray:
    """Transform n real samples into n/2+1 complex bins (unnormalized)."""
    if plan.direction != FORWARD:
        raise ValueError("apply_forward requires a forward plan.")
    x = np.asarray(x, dtype=np.float64)
    if x.ndim != 1 or x.size != plan.n:
        raise ValueError(f"Forward transform expects {plan.n} samples, got {x.size}.")
    return np.fft.rfft(x, n=plan.n)


def apply_inverse(plan: RealTransformPlan, bins: np.ndarray) -> np.ndarray:
    """Transform n/2+1 complex bins into n real samples (unnormalized)."""
    if plan.direction != INVERSE:
        raise ValueError("apply_inverse requires an inverse plan.")
    bins = np.asarray(bins, dtype=np.complex128)
    if bins.ndim != 1 or bins.size != plan.n_bins:
        raise ValueError(f"Inverse transform expects {plan.n_bins} bins, got {bins.size}.")
    # norm="forward" leaves the inverse direction unscaled
    return np.fft.irfft(bins, n=plan.n, norm="forward")
