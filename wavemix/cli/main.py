"""WaveMix CLI - Wavetable crossfade and spectral mixing."""
from __future__ import annotations
import argparse
import json
import sys
import platform
from datetime import datetime, timezone
from pathlib import Path

import numpy as np

from wavemix.version import __version__
from wavemix.types import WORKING_LENGTH, SpectralMode, Wavetable
from wavemix.io.audio import (
    DEFAULT_FS,
    load_wavetable,
    write_wavetable,
    write_wavetable_frames,
)
from wavemix.mixing.compute import compute_mix_result
from wavemix.mixing.sweep import compute_sweep
from wavemix.tables.defaults import default_tables
from wavemix.analysis.spectrum import harmonic_magnitudes, table_stats
from wavemix.reporting.mixreport import build_mix_report_dict
from wavemix.session.loader import load_session
from wavemix.utils.hashing import sha256_hex_file


EXIT_OK = 0
EXIT_BAD_ARGS = 2
EXIT_DECODE_ERROR = 3
EXIT_SESSION_ERROR = 4
EXIT_INTERNAL_ERROR = 5
DEFAULT_SWEEP_STEPS = 16
SPECTRAL_MODES = [m.value for m in SpectralMode]


def _build_engine_meta() -> dict:
    """Build engine metadata for mix reports."""
    return {
        "name": "wavemix",
        "version": __version__,
        "python": platform.python_version(),
        "numpy": np.__version__,
    }


def _load_source(path: str | None, fallback: Wavetable) -> Wavetable:
    """Load a source file, or return the built-in table when no path is given."""
    if not path:
        return fallback
    table = load_wavetable(path)
    for w in table.warnings:
        print(f"Warning: {table.name}: {w}", file=sys.stderr)
    return table


def _resolve_sources(path_a: str | None, path_b: str | None) -> tuple[Wavetable, Wavetable]:
    default_a, default_b = default_tables()
    return _load_source(path_a, default_a), _load_source(path_b, default_b)


def _resolve_mix(args, default: float = 0.5) -> float:
    """Mix ratio from --mix, or from --mix-percent scaled by 0.01."""
    mix_percent = getattr(args, "mix_percent", None)
    if mix_percent is not None:
        return float(mix_percent) * 0.01
    mix = getattr(args, "mix", None)
    return float(default) if mix is None else float(mix)


def _resolve_mode(args, default: SpectralMode = SpectralMode.POLAR) -> SpectralMode:
    mode = getattr(args, "mode", None)
    return SpectralMode(default if mode is None else mode)


def _load_session_or_none(args):
    session_path = getattr(args, "session", None)
    if not session_path:
        return None
    return load_session(session_path)


def _written_file_meta(path: Path) -> dict:
    return {"path": str(path), "sha256": sha256_hex_file(str(path))}


def _run_mix(
    table_a: Wavetable,
    table_b: Wavetable,
    *,
    mix: float,
    mode: SpectralMode,
    out_dir: str | None,
    report_path: str | None
) -> dict:
    """Compute both mixes, write requested files, return the report."""
    result = compute_mix_result(table_a.samples, table_b.samples, mix, mode=mode)
    outputs: dict[str, dict] = {}
    if out_dir:
        outputs["xfade"] = _written_file_meta(
            write_wavetable(str(Path(out_dir) / "xfade.wav"), result.xfade)
        )
        outputs["spectral"] = _written_file_meta(
            write_wavetable(str(Path(out_dir) / "spectral.wav"), result.spectral)
        )

    report = build_mix_report_dict(
        engine=_build_engine_meta(),
        source_a=table_a,
        source_b=table_b,
        result=result,
        created_utc=datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ"),
        outputs=outputs,
    )
    output_json = json.dumps(report, indent=2)
    if report_path:
        Path(report_path).parent.mkdir(parents=True, exist_ok=True)
        Path(report_path).write_text(output_json, encoding="utf-8")
        print(f"Report written to: {report_path}", file=sys.stderr)
    else:
        print(output_json)
    return report


def cmd_mix(args) -> int:
    """Handle mix command. Explicit command-line values override the session."""
    session_path = getattr(args, "session", None)
    try:
        session = _load_session_or_none(args)
        if session is not None:
            path_a = args.source_a or session.source_a
            path_b = args.source_b or session.source_b
            mix = _resolve_mix(args, session.mix)
            mode = _resolve_mode(args, session.spectral_mode)
            out_dir = args.out_dir or session.out_dir
        else:
            path_a, path_b = args.source_a, args.source_b
            mix = _resolve_mix(args)
            mode = _resolve_mode(args)
            out_dir = args.out_dir
    except FileNotFoundError as e:
        print(f"Error: Session not found - {e}", file=sys.stderr)
        return EXIT_SESSION_ERROR
    except json.JSONDecodeError as e:
        print(f"Error: Invalid session JSON - {e}", file=sys.stderr)
        return EXIT_SESSION_ERROR
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_SESSION_ERROR if session_path else EXIT_BAD_ARGS

    try:
        table_a, table_b = _resolve_sources(path_a, path_b)
        _run_mix(
            table_a,
            table_b,
            mix=mix,
            mode=mode,
            out_dir=out_dir,
            report_path=args.report
        )
        return EXIT_OK

    except FileNotFoundError as e:
        print(f"Error: File not found - {e}", file=sys.stderr)
        return EXIT_DECODE_ERROR
    except (ValueError, RuntimeError) as e:
        print(f"Error loading: {e}", file=sys.stderr)
        return EXIT_DECODE_ERROR
    except Exception as e:
        print(f"Internal error: {e}", file=sys.stderr)
        return EXIT_INTERNAL_ERROR


def cmd_sweep(args) -> int:
    """Handle sweep command. Explicit command-line values override the session."""
    session_path = getattr(args, "session", None)
    try:
        session = _load_session_or_none(args)
        if session is not None:
            path_a = args.source_a or session.source_a
            path_b = args.source_b or session.source_b
            mode = _resolve_mode(args, session.spectral_mode)
            steps = args.steps if args.steps is not None else session.sweep_steps
            out_dir = args.out_dir or session.out_dir
        else:
            path_a, path_b = args.source_a, args.source_b
            mode = _resolve_mode(args)
            steps = args.steps if args.steps is not None else DEFAULT_SWEEP_STEPS
            out_dir = args.out_dir
    except FileNotFoundError as e:
        print(f"Error: Session not found - {e}", file=sys.stderr)
        return EXIT_SESSION_ERROR
    except json.JSONDecodeError as e:
        print(f"Error: Invalid session JSON - {e}", file=sys.stderr)
        return EXIT_SESSION_ERROR
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_SESSION_ERROR if session_path else EXIT_BAD_ARGS

    if not out_dir:
        print("Error: --out-dir is required unless the session sets output.dir.", file=sys.stderr)
        return EXIT_BAD_ARGS

    try:
        table_a, table_b = _resolve_sources(path_a, path_b)
        xfade_frames, spectral_frames = compute_sweep(
            table_a.samples,
            table_b.samples,
            steps,
            mode=mode
        )
        out = Path(out_dir)
        xfade_path = write_wavetable_frames(str(out / "xfade-sweep.wav"), xfade_frames, DEFAULT_FS)
        spectral_path = write_wavetable_frames(str(out / "spectral-sweep.wav"), spectral_frames, DEFAULT_FS)
        print(f"[OK] {xfade_path}: {len(xfade_frames)} frames x {WORKING_LENGTH}")
        print(f"[OK] {spectral_path}: {len(spectral_frames)} frames x {WORKING_LENGTH}")
        return EXIT_OK

    except FileNotFoundError as e:
        print(f"Error: File not found - {e}", file=sys.stderr)
        return EXIT_DECODE_ERROR
    except (ValueError, RuntimeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_DECODE_ERROR
    except Exception as e:
        print(f"Internal error: {e}", file=sys.stderr)
        return EXIT_INTERNAL_ERROR


def cmd_defaults(args) -> int:
    """Handle defaults command."""
    try:
        out_dir = Path(args.out_dir)
        for table in default_tables():
            path = write_wavetable(str(out_dir / f"{table.name}.wav"), table.samples)
            print(f"[OK] {path}")
        return EXIT_OK
    except Exception as e:
        print(f"Internal error: {e}", file=sys.stderr)
        return EXIT_INTERNAL_ERROR


def cmd_inspect(args) -> int:
    """Handle inspect command."""
    if args.harmonics < 0:
        print("Error: --harmonics must be non-negative.", file=sys.stderr)
        return EXIT_BAD_ARGS
    try:
        table = load_wavetable(args.path)
        stats = table_stats(table.samples)

        print(f"Table: {table.name}")
        print(f"Length: {stats['length']} samples")
        if table.fs:
            print(f"Sample rate: {table.fs:.0f} Hz")
        print(f"Peak: {stats['peak']:.4f}")
        print(f"RMS: {stats['rms']:.4f}")
        print(f"DC: {stats['dc']:+.4f}")
        if stats["length"] >= 2:
            print()
            print("Harmonics (normalized magnitude):")
            for k, m in enumerate(harmonic_magnitudes(table.samples, args.harmonics), start=1):
                print(f"  {k}: {m:.4f}")
        for w in table.warnings:
            print(f"Warning: {w}", file=sys.stderr)
        return EXIT_OK

    except FileNotFoundError as e:
        print(f"Error: File not found - {e}", file=sys.stderr)
        return EXIT_DECODE_ERROR
    except (ValueError, RuntimeError) as e:
        print(f"Error loading: {e}", file=sys.stderr)
        return EXIT_DECODE_ERROR
    except Exception as e:
        print(f"Internal error: {e}", file=sys.stderr)
        return EXIT_INTERNAL_ERROR


def _add_source_args(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "source_a",
        nargs="?",
        help="Source A sound file (default: built-in sine)"
    )
    p.add_argument(
        "source_b",
        nargs="?",
        help="Source B sound file (default: built-in ramp)"
    )
    p.add_argument(
        "--mode",
        choices=SPECTRAL_MODES,
        help="Spectral bin interpolation (default: session value, else polar)"
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wavemix",
        description="WaveMix - Wavetable crossfade and spectral mixing"
    )
    parser.add_argument(
        "--version", action="version",
        version=f"wavemix {__version__}"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    # mix command
    mix_parser = subparsers.add_parser(
        "mix",
        help="Crossfade and spectrally mix two wavetables"
    )
    _add_source_args(mix_parser)
    ratio = mix_parser.add_mutually_exclusive_group()
    ratio.add_argument(
        "--mix",
        type=float,
        help="Mix ratio, 0 = A, 1 = B (default: 0.5)"
    )
    ratio.add_argument(
        "--mix-percent",
        type=float,
        help="Mix ratio in percent, 0..100"
    )
    mix_parser.add_argument(
        "--session", "-s",
        help="Mix session JSON; explicit options override its values"
    )
    mix_parser.add_argument(
        "--out-dir", "-o",
        help="Directory for xfade.wav and spectral.wav"
    )
    mix_parser.add_argument(
        "--report",
        help="Output path for mix report JSON (default: stdout)"
    )
    mix_parser.set_defaults(func=cmd_mix)

    # sweep command
    sweep_parser = subparsers.add_parser(
        "sweep",
        help="Render multi-frame wavetables across the mix range"
    )
    _add_source_args(sweep_parser)
    sweep_parser.add_argument(
        "--steps",
        type=int,
        help=f"Number of frames from A to B (default: session value, else {DEFAULT_SWEEP_STEPS})"
    )
    sweep_parser.add_argument(
        "--session", "-s",
        help="Mix session JSON; explicit options override its values"
    )
    sweep_parser.add_argument(
        "--out-dir", "-o",
        help="Directory for xfade-sweep.wav and spectral-sweep.wav (default: session output.dir)"
    )
    sweep_parser.set_defaults(func=cmd_sweep)

    # defaults command
    defaults_parser = subparsers.add_parser(
        "defaults",
        help="Write the built-in sine and ramp tables"
    )
    defaults_parser.add_argument(
        "--out-dir", "-o",
        required=True,
        help="Output directory"
    )
    defaults_parser.set_defaults(func=cmd_defaults)

    # inspect command
    inspect_parser = subparsers.add_parser(
        "inspect",
        help="Print wavetable statistics"
    )
    inspect_parser.add_argument(
        "path",
        help="Path to sound file"
    )
    inspect_parser.add_argument(
        "--harmonics",
        type=int,
        default=8,
        help="Number of harmonics to list (default: 8)"
    )
    inspect_parser.set_defaults(func=cmd_inspect)

    return parser


def main():
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args()

    if hasattr(args, "func"):
        sys.exit(args.func(args))
    else:
        parser.print_help()
        sys.exit(EXIT_BAD_ARGS)


if __name__ == "__main__":
    main()
