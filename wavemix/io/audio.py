"""Wavetable file I/O module."""
from __future__ import annotations
import warnings as py_warnings
from pathlib import Path
import numpy as np
from wavemix.types import SAMPLE_DTYPE, Wavetable

DEFAULT_FS = 48000
WAV_SUBTYPE = "FLOAT"


def _soundfile():
    try:
        import soundfile as sf
    except Exception as exc:
        raise RuntimeError("soundfile backend not available.") from exc
    return sf


def _decode_soundfile(path: str) -> tuple[np.ndarray, float, list[str]]:
    """Decode using soundfile (libsndfile)."""
    sf = _soundfile()
    with py_warnings.catch_warnings(record=True) as w:
        py_warnings.simplefilter("always")
        data, fs = sf.read(path, always_2d=True, dtype="float32")
    warn_list = [str(wi.message) for wi in w]
    return data, float(fs), warn_list


def load_wavetable(path: str) -> Wavetable:
    """
    Load a single-channel sound file as a raw wavetable source.

    The samples are kept at their native length; resampling to the working
    length happens in the mixer. Files with more or fewer than one channel
    are rejected rather than downmixed.
    """
    if not Path(path).exists():
        raise FileNotFoundError(path)
    data, fs, warn_list = _decode_soundfile(str(path))
    if data.ndim != 2 or data.shape[1] != 1:
        channels = data.shape[1] if data.ndim == 2 else 0
        raise ValueError(
            f"The audio file must contain exactly one channel (got {channels})."
        )
    samples = np.ascontiguousarray(data[:, 0], dtype=SAMPLE_DTYPE)
    if samples.size == 0:
        warn_list.append("file contains no samples; mixing will use silence.")
    return Wavetable(
        samples=samples,
        name=Path(path).stem,
        source=str(path),
        fs=fs,
        warnings=warn_list
    )


def write_wavetable(path: str, samples: np.ndarray, fs: int = DEFAULT_FS) -> Path:
    """Write a mono buffer to a 32-bit float WAV file."""
    x = np.asarray(samples, dtype=SAMPLE_DTYPE)
    if x.ndim != 1:
        raise ValueError("write_wavetable expects mono 1D buffer.")
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    _soundfile().write(str(out), x, int(fs), subtype=WAV_SUBTYPE)
    return out


def write_wavetable_frames(path: str, frames: list[np.ndarray], fs: int = DEFAULT_FS) -> Path:
    """Concatenate equal-length frames and write them as one wavetable file."""
    if not frames:
        raise ValueError("No frames to write.")
    sizes = {np.asarray(f).size for f in frames}
    if len(sizes) != 1:
        raise ValueError("All frames must have the same length.")
    return write_wavetable(path, np.concatenate([np.asarray(f, dtype=SAMPLE_DTYPE) for f in frames]), fs)
