"""Tests for configuration parsing and synthetic signals."""

import numpy as np
import pytest

from fftcore import ConfigOptions, Direction
from fftcore.config import BenchmarkConfig, NoiseSignalConfig, SineSignalConfig
from fftcore.signals import (
    Signal,
    generate_dc,
    generate_impulse,
    generate_multitone,
    generate_noise,
    generate_sine_wave,
)


def test_build_is_case_insensitive():
    config = ConfigOptions.build(
        transform_parameters={"INVERSE": {"LENGTH": 12}},
        signal_parameters={"Sine": {"Frequency": 2.0}},
        computing_backend="SCIPY",
        benchmark_parameters={"Repeats": 3},
    )
    assert config.direction is Direction.INVERSE
    assert config.transform_par.length == 12
    assert config.transform_par.pad is False
    assert config.signal_name == "sine"
    assert config.signal_par == SineSignalConfig(frequency=2.0)
    assert config.computing_backend == "scipy"
    assert config.benchmark_par.repeats == 3
    assert config.benchmark_par.sizes == BenchmarkConfig().sizes


@pytest.mark.parametrize(
    "kwargs",
    [
        {"transform_parameters": {"sideways": {"length": 8}}},
        {"signal_parameters": {"chirp": {}}},
        {"computing_backend": "gpu"},
    ],
)
def test_build_rejects_unknown_names(kwargs):
    options = {
        "transform_parameters": {"forward": {"length": 8}},
        "signal_parameters": {"dc": {}},
        "computing_backend": "native",
    }
    options.update(kwargs)
    with pytest.raises(ValueError):
        ConfigOptions.build(**options)


def test_sine_wave():
    wave = generate_sine_wave(1.0, 4)
    np.testing.assert_allclose(wave, [0, 1, 0, -1], atol=1e-15)
    assert wave.dtype == np.complex128


def test_multitone_spectrum_peaks():
    n = 64
    spectrum = np.abs(np.fft.fft(generate_multitone((1.0, 10.0), n)))
    peaks = sorted(np.argsort(spectrum)[-4:])
    assert peaks == [1, 10, n - 10, n - 1]


def test_noise_is_reproducible():
    a = generate_noise(32, seed=7, complex_noise=True)
    b = generate_noise(32, seed=7, complex_noise=True)
    np.testing.assert_array_equal(a, b)
    assert np.all(np.abs(a.real) <= 1.0) and np.any(a.imag != 0)
    assert np.all(generate_noise(16, seed=1).imag == 0)


def test_dc_and_impulse():
    np.testing.assert_array_equal(generate_dc(3, 2.0), [2, 2, 2])
    np.testing.assert_array_equal(generate_impulse(4, position=2), [0, 0, 1, 0])
    with pytest.raises(ValueError):
        generate_impulse(4, position=4)


def test_signal_from_config():
    signal = Signal(16, "noise", NoiseSignalConfig(seed=3))
    np.testing.assert_array_equal(signal.generate(), generate_noise(16, seed=3))
    with pytest.raises(ValueError):
        Signal(16, "square", None)
