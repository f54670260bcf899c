"""Tests for the scalar complex arithmetic unit."""

import math

import numpy as np
import pytest

from fftcore.numbers import (
    complex_add,
    complex_conj,
    complex_mul,
    complex_scale,
    complex_sub,
    from_polar,
    norm,
)

A = complex(5.0, 3.0)
B = complex(2.0, 7.0)


def test_complex_add():
    assert complex_add(A, B) == complex(7.0, 10.0)


def test_complex_sub():
    assert complex_sub(A, B) == complex(3.0, -4.0)


def test_complex_mul():
    assert complex_mul(A, B) == complex(-11.0, 41.0)


def test_complex_mul_by_i_squared():
    assert complex_mul(1j, 1j) == complex(-1.0, 0.0)


def test_complex_scale():
    assert complex_scale(A, 0.5) == complex(2.5, 1.5)


def test_complex_conj():
    assert complex_conj(A) == complex(5.0, -3.0)


def test_from_polar_and_norm():
    z = from_polar(2.0, 0.5 * math.pi)
    assert z.real == pytest.approx(0.0, abs=1e-15)
    assert z.imag == pytest.approx(2.0)
    assert norm(complex(3.0, 4.0)) == pytest.approx(5.0)


def test_nan_propagates():
    result = complex_mul(complex(np.nan, 0.0), complex(1.0, 0.0))
    assert math.isnan(result.real)
    assert math.isnan(complex_add(complex(1.0, np.nan), B).imag)


def test_inf_propagates():
    result = complex_add(complex(np.inf, 0.0), B)
    assert math.isinf(result.real)
