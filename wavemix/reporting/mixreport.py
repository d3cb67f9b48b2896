from __future__ import annotations
from wavemix.analysis.spectrum import harmonic_magnitudes, table_stats
from wavemix.types import MixResult, Wavetable
from wavemix.utils.hashing import sha256_hex_canonical_json, sha256_hex_samples
from wavemix.utils.quantize import quantize, quantize_list

SCHEMA_VERSION = "1.0"
STAT_STEP = 1e-6
HARMONIC_COUNT = 8


def _source_meta(table: Wavetable) -> dict:
    return {
        "name": table.name,
        "path": table.source,
        "fs": table.fs,
        "length": int(table.samples.size),
        "samples_sha256": sha256_hex_samples(table.samples),
        "warnings": list(table.warnings),
    }


def _output_meta(samples) -> dict:
    stats = table_stats(samples)
    return {
        "length": stats["length"],
        "peak": quantize(stats["peak"], STAT_STEP),
        "rms": quantize(stats["rms"], STAT_STEP),
        "dc": quantize(stats["dc"], STAT_STEP),
        "harmonics": quantize_list(harmonic_magnitudes(samples, HARMONIC_COUNT), STAT_STEP),
        "samples_sha256": sha256_hex_samples(samples),
    }


def build_mix_report_dict(
    *,
    engine: dict,
    source_a: Wavetable,
    source_b: Wavetable,
    result: MixResult,
    created_utc: str = "1970-01-01T00:00:00Z",
    outputs: dict | None = None
) -> dict:
    """
    Build a mix report dictionary with quantized stats and integrity hash.

    Args:
        engine: Engine metadata (name, version)
        source_a: Raw source A as loaded
        source_b: Raw source B as loaded
        result: Mix outputs and parameters
        created_utc: Creation timestamp
        outputs: Optional map of output name to written file metadata
            (path and sha256)

    Returns:
        Report dictionary; integrity.report_hash_sha256 covers everything
        except the integrity object itself
    """
    report = {
        "schema_version": SCHEMA_VERSION,
        "created_utc": created_utc,
        "engine": engine,
        "inputs": {
            "a": _source_meta(source_a),
            "b": _source_meta(source_b),
        },
        "mix": {
            "ratio": float(result.mix),
            "spectral_mode": result.mode.value,
            "working_length": int(result.length),
        },
        "results": {
            "xfade": _output_meta(result.xfade),
            "spectral": _output_meta(result.spectral),
        },
        "files": dict(outputs or {}),
        "integrity": {"report_hash_sha256": ""},
    }

    tmp = dict(report)
    tmp.pop("integrity", None)
    report["integrity"]["report_hash_sha256"] = sha256_hex_canonical_json(tmp)
    return report
