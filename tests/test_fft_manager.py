"""Tests for the FFT manager and the exposed helpers."""

import numpy as np
import pytest
import scipy.fft

from fftcore import FFTManager, InvalidLength, compute_fft, compute_ifft
from fftcore.functions.padding import pad_to_power_of_two
from fftcore.functions.sizes import is_power_of_two, next_power_of_two


def test_backend_not_set_up():
    manager = FFTManager()
    with pytest.raises(RuntimeError):
        manager.fft(np.ones(4))


def test_invalid_backend():
    with pytest.raises(ValueError):
        FFTManager().set_fft_backend("cuda")


@pytest.mark.parametrize("n", [16, 20])
def test_backends_agree(n, random_signal, capsys):
    x = random_signal(n)
    native = FFTManager()
    native.set_fft_backend("native")
    reference = FFTManager()
    reference.set_fft_backend("SciPy")
    assert "Using SciPy FFT" in capsys.readouterr().out

    np.testing.assert_allclose(native.fft(x), reference.fft(x), atol=1e-10)
    np.testing.assert_allclose(native.ifft(x), reference.ifft(x), atol=1e-12)
    assert len(native.plan_cache) == 2


def test_input_is_not_modified(random_signal):
    x = random_signal(8)
    original = x.copy()
    compute_fft(x)
    np.testing.assert_array_equal(x, original)


def test_real_input_is_promoted():
    x = [1.0, 1.0, 1.0, 0.0, 0.0]
    np.testing.assert_allclose(compute_fft(x), scipy.fft.fft(x), atol=1e-12)


def test_compute_round_trip(random_signal):
    x = random_signal(30)
    np.testing.assert_allclose(compute_ifft(compute_fft(x)), x, atol=1e-12)


def test_pad_to_power_of_two():
    spectrum = compute_fft([1.0, 1.0, 1.0], pad=True)
    assert spectrum.shape == (4,)
    assert spectrum[0] == pytest.approx(3.0)

    padded = pad_to_power_of_two(np.arange(5))
    np.testing.assert_array_equal(padded, [0, 1, 2, 3, 4, 0, 0, 0])
    assert pad_to_power_of_two([1.0, 2.0]).shape == (2,)


def test_padded_eight_point_values():
    spectrum = compute_fft([1.0, 1.0, 1.0, 1.0, 0.0, 0.0, 0.0, 0.0])
    assert spectrum[0] == pytest.approx(4.0)
    assert abs(spectrum[4]) < 1e-12


def test_empty_and_multidimensional_input():
    with pytest.raises(InvalidLength):
        compute_fft([])
    with pytest.raises(ValueError):
        compute_fft(np.ones((2, 2)))


def test_size_helpers():
    assert [next_power_of_two(n) for n in (1, 2, 3, 5, 9, 16)] == [1, 2, 4, 8, 16, 16]
    assert is_power_of_two(1) and is_power_of_two(64)
    assert not is_power_of_two(0) and not is_power_of_two(12)
