"""
WaveMix - Wavetable crossfade and spectral mixing

Blends two single-cycle waveforms by sample-domain crossfade and by
frequency-domain interpolation of magnitude and phase.
"""
from wavemix.version import __version__
from wavemix.types import (
    SAMPLE_DTYPE,
    WORKING_LENGTH,
    SpectralMode,
    Wavetable,
    MixResult,
    MixSession,
)
from wavemix.mixing.compute import compute_mixes, compute_mix_result

__all__ = [
    "__version__",
    "SAMPLE_DTYPE",
    "WORKING_LENGTH",
    "SpectralMode",
    "Wavetable",
    "MixResult",
    "MixSession",
    "compute_mixes",
    "compute_mix_result",
]
