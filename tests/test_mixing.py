from __future__ import annotations

import numpy as np
import pytest

from wavemix.dsp.resample import resample
from wavemix.mixing.compute import compute_mix_result, compute_mixes
from wavemix.mixing.sweep import compute_sweep, sweep_ratios
from wavemix.tables.defaults import default_ramp, default_sine
from wavemix.types import WORKING_LENGTH, SpectralMode

from tests.conftest import sine_table


def test_compute_mixes_shapes():
    xfade, spectral = compute_mixes(sine_table(300), sine_table(2000), 0.5)
    assert xfade.shape == spectral.shape == (WORKING_LENGTH,)
    assert xfade.dtype == spectral.dtype == np.float32


def test_compute_mixes_empty_sources_give_silence():
    xfade, spectral = compute_mixes(np.array([]), np.array([]), 0.3)
    assert np.array_equal(xfade, np.zeros(WORKING_LENGTH))
    assert np.allclose(spectral, 0.0)


def test_compute_mixes_sine_ramp_scenario():
    a = default_sine()
    b = default_ramp()
    xfade, spectral = compute_mixes(a, b, 0.5)
    assert np.isclose(xfade[0], (float(a[0]) + float(b[0])) / 2.0, atol=1e-6)
    assert np.all(np.isfinite(spectral))


def test_compute_mixes_resamples_before_mixing():
    raw_a = sine_table(512)
    raw_b = sine_table(4096, cycles=2)
    xfade, spectral = compute_mixes(raw_a, raw_b, 0.0)
    expected = resample(raw_a, WORKING_LENGTH)
    assert np.array_equal(xfade, expected)
    assert np.max(np.abs(spectral - expected)) < 1e-4


def test_compute_mix_result_carries_parameters():
    result = compute_mix_result(default_sine(), default_ramp(), 0.7, mode="polar_shortest_arc")
    assert result.mode is SpectralMode.POLAR_SHORTEST_ARC
    assert result.mix == pytest.approx(0.7)
    assert result.length == WORKING_LENGTH
    assert result.spectral.shape == (WORKING_LENGTH,)


def test_compute_sweep_frames_match_single_mixes():
    a = default_sine()
    b = default_ramp()
    xfade_frames, spectral_frames = compute_sweep(a, b, 5)
    assert len(xfade_frames) == len(spectral_frames) == 5
    assert np.array_equal(xfade_frames[0], a)
    assert np.allclose(xfade_frames[-1], b, atol=1e-6)
    xfade, spectral = compute_mixes(a, b, 0.25)
    assert np.array_equal(xfade_frames[1], xfade)
    assert np.array_equal(spectral_frames[1], spectral)


def test_sweep_ratios():
    assert np.allclose(sweep_ratios(3), [0.0, 0.5, 1.0])
    with pytest.raises(ValueError):
        sweep_ratios(1)


def test_compute_mixes_surfaces_transform_failure(monkeypatch):
    calls = []

    def failing_forward(plan, x):
        calls.append(plan.n)
        raise RuntimeError("transform unavailable")

    monkeypatch.setattr("wavemix.dsp.spectral.apply_forward", failing_forward)
    with pytest.raises(RuntimeError, match="transform unavailable"):
        compute_mixes(default_sine(), default_ramp(), 0.5)
    assert calls == [WORKING_LENGTH]
