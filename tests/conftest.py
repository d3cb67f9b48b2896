from __future__ import annotations

import json
import sys
from pathlib import Path

import numpy as np

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


def sine_table(n: int, cycles: float = 1.0) -> np.ndarray:
    return np.sin(2.0 * np.pi * cycles * np.arange(n) / n)


def ramp_table(n: int) -> np.ndarray:
    return 2.0 * np.arange(n) / n - 1.0


def write_table(tmp_path: Path, name: str, samples: np.ndarray, fs: int = 48000) -> Path:
    import soundfile as sf

    path = tmp_path / name
    sf.write(path, np.asarray(samples, dtype=np.float32), fs, subtype="FLOAT")
    return path


def build_session_dict(
    *,
    source_a: str | None = None,
    source_b: str | None = None,
    mix: float = 0.5,
    spectral_mode: str = "polar",
    output: dict | None = None
) -> dict:
    j = {
        "source_a": source_a,
        "source_b": source_b,
        "mix": mix,
        "spectral_mode": spectral_mode,
    }
    if output is not None:
        j["output"] = output
    return j


def write_session(tmp_path: Path, session: dict) -> Path:
    path = tmp_path / "session.json"
    path.write_text(json.dumps(session), encoding="utf-8")
    return path
