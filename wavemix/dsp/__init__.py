"""DSP modules for WaveMix."""

from wavemix.dsp.crossfade import crossfade
from wavemix.dsp.resample import resample
from wavemix.dsp.spectral import interpolate_bins, normalized_spectrum, spectral_mix

__all__ = [
    "crossfade",
    "interpolate_bins",
    "normalized_spectrum",
    "resample",
    "spectral_mix",
]
