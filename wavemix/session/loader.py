from __future__ import annotations
import json
from pathlib import Path
from wavemix.session.validator import validate_session_dict
from wavemix.types import MixSession, SpectralMode


def _resolve(base: Path, p: str | None) -> str | None:
    if p is None:
        return None
    path = Path(p)
    if not path.is_absolute():
        path = base / path
    return str(path)


def load_session(path: str) -> MixSession:
    """
    Load a mix session from JSON file.

    Relative source and output paths resolve against the session file's
    directory. A null source selects the built-in default table.

    Args:
        path: Path to the session JSON file

    Returns:
        MixSession with resolved paths
    """
    session_path = Path(path)
    with open(session_path, "r", encoding="utf-8") as f:
        j = json.load(f)

    validate_session_dict(j)
    base = session_path.resolve().parent
    output = j.get("output", {})

    return MixSession(
        source_a=_resolve(base, j["source_a"]),
        source_b=_resolve(base, j["source_b"]),
        mix=float(j["mix"]),
        spectral_mode=SpectralMode(j.get("spectral_mode", SpectralMode.POLAR.value)),
        out_dir=_resolve(base, output.get("dir")),
        sweep_steps=int(output.get("sweep_steps", 16)),
    )
