"""Tests for the benchmark harness."""

from fftcore import build
from fftcore.benchmark import (
    bench_fft_signals,
    bench_fft_sizes,
    run_benchmarks,
    time_plan,
)
from fftcore.config import BenchmarkConfig
from fftcore.data.store import OutputManager, load_benchmark


def _small_config():
    return BenchmarkConfig(sizes=(2, 4, 8), signal_length=8, repeats=2, warmup=1)


def test_time_plan_leaves_signal_untouched(random_signal):
    x = random_signal(16)
    before = x.copy()
    times = time_plan(build(16), x, repeats=3, warmup=1)
    assert len(times) == 3
    assert all(t >= 0 for t in times)
    assert (x == before).all()


def test_size_scaling_cases():
    records = bench_fft_sizes(_small_config())
    cases = [(r.case, r.size) for r in records]
    assert ("sine_wave", 2) in cases
    assert ("sine_wave_bluestein", 3) in cases
    assert ("sine_wave_bluestein", 7) in cases
    assert ("sine_wave_bluestein", 1) not in cases
    assert all(r.repeats == 2 for r in records)
    assert all(r.best <= r.mean for r in records)


def test_signal_types_cases():
    records = bench_fft_signals(_small_config())
    assert [r.case for r in records] == [
        "sine_1hz",
        "complex_signal",
        "white_noise",
        "dc_signal",
    ]
    assert {r.size for r in records} == {8}


def test_run_benchmarks_saves(tmp_path, capsys):
    records = run_benchmarks(_small_config(), OutputManager(tmp_path))
    assert "sine_wave_scipy" in capsys.readouterr().out

    data = load_benchmark(tmp_path / "fftcore_benchmark.h5")
    saved = sum(len(case["size"]) for group in data.values() for case in group.values())
    assert saved == len(records)
