from __future__ import annotations
import hashlib
import json
import numpy as np


def canonical_dumps(obj) -> str:
    """Serialize object to canonical JSON (sorted keys, minimal whitespace)."""
    return json.dumps(obj, ensure_ascii=False, sort_keys=True, separators=(",", ":"))


def sha256_hex_canonical_json(obj) -> str:
    """Compute SHA256 hash of canonical JSON representation."""
    return hashlib.sha256(canonical_dumps(obj).encode("utf-8")).hexdigest()


def sha256_hex_samples(samples: np.ndarray) -> str:
    """Compute SHA256 hash of a buffer as little-endian float32 bytes."""
    x = np.ascontiguousarray(samples, dtype="<f4")
    return hashlib.sha256(x.tobytes()).hexdigest()


def sha256_hex_file(path: str) -> str:
    """Compute SHA256 hash of a file."""
    h = hashlib.sha256()
    with open(path, "rb") as f:
        for chunk in iter(lambda: f.read(65536), b""):
            h.update(chunk)
    return h.hexdigest()
