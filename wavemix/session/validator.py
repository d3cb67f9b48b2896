"""Mix session validation helpers."""
from __future__ import annotations
from typing import Any
import math
from wavemix.types import WORKING_LENGTH, SpectralMode

SPECTRAL_MODES = tuple(m.value for m in SpectralMode)


def _is_number(v: Any) -> bool:
    return (
        isinstance(v, (int, float))
        and not isinstance(v, bool)
        and not math.isnan(v)
        and not math.isinf(v)
    )


def validate_session_dict(j: dict) -> None:
    """Validate mix session structure and core constraints."""
    errors: list[str] = []

    def err(msg: str) -> None:
        errors.append(msg)

    if not isinstance(j, dict):
        raise ValueError("session must be a JSON object.")

    for k in ("source_a", "source_b", "mix"):
        if k not in j:
            err(f"missing key: {k}")

    if errors:
        raise ValueError("; ".join(errors))

    for k in ("source_a", "source_b"):
        v = j[k]
        if v is not None and (not isinstance(v, str) or not v):
            err(f"{k} must be a non-empty path string or null.")

    if not _is_number(j["mix"]):
        err("mix must be a finite number.")

    mode = j.get("spectral_mode", SpectralMode.POLAR.value)
    if mode not in SPECTRAL_MODES:
        err(f"spectral_mode must be one of {', '.join(SPECTRAL_MODES)}.")

    if "table_length" in j and j["table_length"] != WORKING_LENGTH:
        err(f"table_length is fixed at {WORKING_LENGTH}.")

    output = j.get("output", {})
    if not isinstance(output, dict):
        err("output must be an object.")
    else:
        out_dir = output.get("dir")
        if out_dir is not None and (not isinstance(out_dir, str) or not out_dir):
            err("output.dir must be a non-empty string.")
        steps = output.get("sweep_steps")
        if steps is not None and (
            not isinstance(steps, int) or isinstance(steps, bool) or steps < 2
        ):
            err("output.sweep_steps must be an integer >= 2.")

    if errors:
        raise ValueError("; ".join(errors))
