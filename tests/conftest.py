"""Shared fixtures for the fftcore tests."""

import numpy as np
import pytest


@pytest.fixture
def rng():
    return np.random.default_rng(20240611)


@pytest.fixture
def random_signal(rng):
    def make(n):
        return rng.standard_normal(n) + 1j * rng.standard_normal(n)

    return make
