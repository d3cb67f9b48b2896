"""Mix orchestration for WaveMix."""

from wavemix.mixing.compute import compute_mix_result, compute_mixes
from wavemix.mixing.sweep import compute_sweep, sweep_ratios

__all__ = [
    "compute_mix_result",
    "compute_mixes",
    "compute_sweep",
    "sweep_ratios",
]
