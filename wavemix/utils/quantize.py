from __future__ import annotations
import math


def quantize(x: float, step: float) -> float:
    """Round half away from zero to a multiple of step; non-finite values pass through."""
    x = float(x)
    if not math.isfinite(x):
        return x
    inv = 1.0 / step
    yq = math.floor(abs(x) * inv + 0.5)
    if yq == 0:
        return 0.0
    return math.copysign(yq / inv, x)


def quantize_list(xs, step: float) -> list[float]:
    return [quantize(v, step) for v in xs]
