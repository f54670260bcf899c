"""Mathematical properties of the transforms."""

import concurrent.futures

import numpy as np
import pytest
import scipy.fft

from fftcore import Direction, build
from fftcore.data.diagnostics import parseval_ratio, relative_error
from fftcore.functions.radix2 import PARALLEL_LOCK, PARALLEL_MIN_LENGTH
from fftcore.functions.reference import direct_dft

LENGTHS = [1, 2, 3, 4, 5, 6, 7, 8, 12, 16, 31, 64, 100, 256, 1000, 1024]


@pytest.mark.parametrize("n", LENGTHS)
def test_round_trip(n, random_signal):
    x = random_signal(n)
    buf = x.copy()
    build(n, Direction.FORWARD).execute(buf)
    build(n, Direction.INVERSE).execute(buf)
    assert relative_error(buf, x) < 1e-9


@pytest.mark.parametrize("n", [8, 6, 13])
def test_linearity(n, random_signal):
    x, y = random_signal(n), random_signal(n)
    a, b = 2.5 - 1.0j, -0.75 + 3.0j
    plan = build(n, Direction.FORWARD)
    combined = plan.transform(a * x + b * y)
    separate = a * plan.transform(x) + b * plan.transform(y)
    np.testing.assert_allclose(combined, separate, atol=1e-10)


@pytest.mark.parametrize("n", [5, 6])
@pytest.mark.parametrize("seed", [0, 1, 2])
def test_bluestein_matches_direct_dft(n, seed):
    rng = np.random.default_rng(seed)
    x = rng.standard_normal(n) + 1j * rng.standard_normal(n)
    for direction in Direction:
        plan = build(n, direction)
        assert plan.algorithm == "bluestein"
        np.testing.assert_allclose(
            plan.transform(x), direct_dft(x, direction), atol=1e-12
        )


@pytest.mark.parametrize("n", [4, 32, 256])
def test_radix2_matches_direct_dft(n, random_signal):
    x = random_signal(n)
    np.testing.assert_allclose(build(n).transform(x), direct_dft(x), atol=1e-10)


@pytest.mark.parametrize("n", LENGTHS)
def test_parseval(n, random_signal):
    x = random_signal(n)
    spectrum = build(n, Direction.FORWARD).transform(x)
    assert parseval_ratio(x, spectrum) == pytest.approx(1.0, rel=1e-12)


def test_shift_becomes_phase_ramp(random_signal):
    n = 10
    x = random_signal(n)
    plan = build(n)
    k = np.arange(n)
    expected = plan.transform(x) * np.exp(-2j * np.pi * k / n)
    np.testing.assert_allclose(plan.transform(np.roll(x, 1)), expected, atol=1e-12)


def test_large_power_of_two_uses_parallel_stages(random_signal):
    n = 1 << 15
    x = random_signal(n)
    np.testing.assert_allclose(
        build(n).transform(x), scipy.fft.fft(x), atol=1e-8
    )


@pytest.mark.parametrize(
    "n",
    [64, 60, PARALLEL_MIN_LENGTH, PARALLEL_MIN_LENGTH // 2 + 1],
    ids=["radix2", "bluestein", "radix2-parallel", "bluestein-parallel"],
)
def test_shared_plan_across_threads(n, rng):
    plan = build(n)
    inputs = [rng.standard_normal(n) + 1j * rng.standard_normal(n) for _ in range(8)]

    def run(x):
        buf = x.copy()
        plan.execute(buf)
        return buf

    with concurrent.futures.ThreadPoolExecutor(max_workers=4) as pool:
        results = list(pool.map(run, inputs))

    for x, result in zip(inputs, results):
        assert relative_error(result, scipy.fft.fft(x)) < 1e-10
    assert not PARALLEL_LOCK.locked()


def test_parallel_plan_runs_serial_while_lock_is_taken(random_signal):
    n = PARALLEL_MIN_LENGTH
    plan = build(n, Direction.INVERSE)
    assert plan.engine.parallel
    x = random_signal(n)
    buf = x.copy()

    with PARALLEL_LOCK:
        plan.execute(buf)
        assert PARALLEL_LOCK.locked()

    assert relative_error(buf, scipy.fft.ifft(x)) < 1e-10
