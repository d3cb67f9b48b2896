#!/usr/bin/env python
"""
Synthesize single-cycle test wavetables for WaveMix.

Writes basic shapes at assorted lengths so the resampler and both mixers
can be auditioned on sources that are not already 1024 samples long.
"""
from __future__ import annotations
import numpy as np
from pathlib import Path

from wavemix.io.audio import write_wavetable

LENGTHS = [256, 600, 1024, 2048, 4410]


def gen_sine(n: int) -> np.ndarray:
    """One period of a sine wave."""
    return np.sin(2.0 * np.pi * np.arange(n) / n)


def gen_saw(n: int) -> np.ndarray:
    """One period of a rising sawtooth in [-1, 1)."""
    return 2.0 * np.arange(n) / n - 1.0


def gen_square(n: int) -> np.ndarray:
    """One period of a square wave."""
    return np.where(np.arange(n) < n // 2, 1.0, -1.0)


def gen_triangle(n: int) -> np.ndarray:
    """One period of a triangle wave."""
    x = np.arange(n) / n
    return 2.0 * np.abs(2.0 * x - 1.0) - 1.0


SHAPES = {
    "sine": gen_sine,
    "saw": gen_saw,
    "square": gen_square,
    "triangle": gen_triangle,
}


def main():
    """Generate all test wavetables."""
    base_dir = Path(__file__).parent.parent / "validation" / "tables"

    print("Generating test wavetables...")
    count = 0
    for name, gen in SHAPES.items():
        for n in LENGTHS:
            path = write_wavetable(str(base_dir / f"{name}_{n}.wav"), gen(n))
            print(f"  Created: {path}")
            count += 1

    print(f"\nGenerated {count} tables in: {base_dir}")


if __name__ == "__main__":
    main()
