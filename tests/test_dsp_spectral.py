from __future__ import annotations

import numpy as np
import pytest

from wavemix.dsp.crossfade import crossfade
from wavemix.dsp.spectral import interpolate_bins, normalized_spectrum, spectral_mix
from wavemix.tables.defaults import default_ramp, default_sine
from wavemix.types import SpectralMode

from tests.conftest import ramp_table, sine_table


def _fundamental(x: np.ndarray) -> float:
    return float(np.abs(np.fft.rfft(np.asarray(x, dtype=np.float64)))[1] / len(x))


def test_spectral_mix_endpoints_reproduce_inputs():
    a = sine_table(1024) * 0.8 + 0.1 * sine_table(1024, cycles=5)
    b = ramp_table(1024)
    assert np.max(np.abs(spectral_mix(a, b, 0.0) - a)) < 1e-4
    assert np.max(np.abs(spectral_mix(a, b, 1.0) - b)) < 1e-4


def test_spectral_mix_output_shape_and_dtype():
    out = spectral_mix(np.zeros(1024), np.ones(1024), 0.5)
    assert out.shape == (1024,)
    assert out.dtype == np.float32
    assert np.allclose(out, 0.5, atol=1e-6)


def test_spectral_mix_sine_ramp_fundamental_is_mean():
    a = default_sine()
    b = default_ramp()
    out = spectral_mix(a, b, 0.5)
    expected = 0.5 * (_fundamental(a) + _fundamental(b))
    assert np.isclose(_fundamental(out), expected, atol=1e-5)


def test_spectral_mix_extrapolates_without_crashing():
    a = default_sine()
    b = default_ramp()
    for mix in (-0.2, 1.2):
        out = spectral_mix(a, b, mix)
        assert np.all(np.isfinite(out))
        expected = _fundamental(a) * (1.0 - mix) + _fundamental(b) * mix
        assert np.isclose(_fundamental(out), abs(expected), atol=1e-5)


def test_spectral_mix_rectangular_matches_crossfade():
    a = sine_table(256)
    b = ramp_table(256)
    out = spectral_mix(a, b, 0.3, mode=SpectralMode.RECTANGULAR)
    assert np.allclose(out, crossfade(a, b, 0.3), atol=1e-5)


def test_spectral_mix_rejects_bad_lengths():
    with pytest.raises(ValueError, match="differ in length"):
        spectral_mix(np.zeros(8), np.zeros(16), 0.5)
    with pytest.raises(ValueError, match="even length"):
        spectral_mix(np.zeros(7), np.zeros(7), 0.5)


def test_spectral_mix_propagates_nan():
    a = np.zeros(16)
    a[3] = np.nan
    out = spectral_mix(a, np.zeros(16), 0.5)
    assert np.all(np.isnan(out))


def test_interpolate_bins_polar_keeps_wrap_artifact():
    spec_a = np.array([np.exp(3.0j)])
    spec_b = np.array([np.exp(-3.0j)])
    linear = interpolate_bins(spec_a, spec_b, 0.5, SpectralMode.POLAR)
    arc = interpolate_bins(spec_a, spec_b, 0.5, SpectralMode.POLAR_SHORTEST_ARC)
    # plain angle blend lands on 0, the short way round lands on pi
    assert np.allclose(linear, [1.0 + 0.0j])
    assert np.allclose(arc, [-1.0 + 0.0j], atol=1e-6)


def test_interpolate_bins_magnitude_is_linear():
    spec_a = np.array([2.0 + 0.0j, 0.0 + 1.0j])
    spec_b = np.array([4.0 + 0.0j, 0.0 + 3.0j])
    out = interpolate_bins(spec_a, spec_b, 0.25)
    assert np.allclose(np.abs(out), [2.5, 1.5])
    assert np.allclose(np.angle(out), [0.0, np.pi / 2])


def test_normalized_spectrum_scales_by_length():
    x = np.ones(32)
    spec = normalized_spectrum(x)
    assert spec.shape == (17,)
    assert np.isclose(spec[0], 1.0)
