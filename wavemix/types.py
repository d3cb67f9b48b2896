from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
import numpy as np

SAMPLE_DTYPE = np.float32
WORKING_LENGTH = 1024


class SpectralMode(str, Enum):
    POLAR = "polar"
    POLAR_SHORTEST_ARC = "polar_shortest_arc"
    RECTANGULAR = "rectangular"


@dataclass(frozen=True)
class Wavetable:
    samples: np.ndarray
    name: str
    source: str | None = None
    fs: float | None = None
    warnings: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class MixResult:
    xfade: np.ndarray
    spectral: np.ndarray
    mix: float
    mode: SpectralMode
    length: int = WORKING_LENGTH


@dataclass(frozen=True)
class MixSession:
    source_a: str | None
    source_b: str | None
    mix: float
    spectral_mode: SpectralMode = SpectralMode.POLAR
    out_dir: str | None = None
    sweep_steps: int = 16
