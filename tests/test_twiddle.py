"""Tests for the twiddle factor tables."""

import numpy as np
import pytest

from fftcore import Direction, InvalidLength, TwiddleTable
from fftcore.functions.twiddle import unit_root


@pytest.mark.parametrize("n", [1, 2, 4, 8, 64, 1024])
def test_radix2_table_matches_exponential(n):
    table = TwiddleTable.for_radix2(n, Direction.FORWARD)
    k = np.arange(n // 2)
    assert len(table) == n // 2
    np.testing.assert_allclose(
        table.factors, np.exp(-2j * np.pi * k / n), rtol=0, atol=1e-15
    )


def test_inverse_table_is_conjugate():
    forward = TwiddleTable.for_radix2(32, "forward")
    inverse = TwiddleTable.for_radix2(32, "inverse")
    np.testing.assert_array_equal(inverse.factors, np.conj(forward.factors))


@pytest.mark.parametrize("n", [3, 5, 6, 7, 12, 100, 1000])
def test_unit_magnitude(n):
    table = TwiddleTable.for_chirp(n, Direction.FORWARD)
    np.testing.assert_allclose(np.abs(table.factors), 1.0, rtol=0, atol=1e-15)


def test_quarter_turns_are_exact():
    table = TwiddleTable.for_radix2(16, Direction.FORWARD)
    assert table[0] == 1.0
    assert table[4] == -1j
    assert unit_root(8, 16) == -1.0
    assert unit_root(12, 16) == 1j


@pytest.mark.parametrize("n", [3, 5, 6, 11, 50])
def test_chirp_values(n):
    k = np.arange(n)
    forward = TwiddleTable.for_chirp(n, Direction.FORWARD)
    inverse = TwiddleTable.for_chirp(n, Direction.INVERSE)
    np.testing.assert_allclose(
        forward.factors, np.exp(-1j * np.pi * k**2 / n), rtol=0, atol=1e-12
    )
    np.testing.assert_allclose(
        inverse.factors, np.exp(1j * np.pi * k**2 / n), rtol=0, atol=1e-12
    )


def test_large_length_accuracy():
    n = 1 << 16
    table = TwiddleTable.for_radix2(n, Direction.FORWARD)
    k = np.arange(n // 2, dtype=np.float64)
    expected = np.exp(-2j * np.pi * (k / n))
    assert np.max(np.abs(table.factors - expected)) < 1e-15


def test_table_is_read_only():
    table = TwiddleTable.for_radix2(8, Direction.FORWARD)
    with pytest.raises(ValueError):
        table.factors[0] = 0.0


def test_invalid_lengths():
    with pytest.raises(InvalidLength):
        TwiddleTable.for_radix2(0, Direction.FORWARD)
    with pytest.raises(InvalidLength):
        TwiddleTable.for_chirp(0, Direction.FORWARD)
    with pytest.raises(InvalidLength):
        TwiddleTable.for_radix2(6, Direction.FORWARD)
