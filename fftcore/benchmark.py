"""
Benchmark harness for the transform engines.

Two groups of measurements are taken:

- "size_scaling": a 1 Hz sine wave transformed for every length in
  `BenchmarkConfig.sizes` with the radix-2 engine, with the
  Bluestein composer at length - 1, and with SciPy for comparison.
- "signal_types": a fixed length and four kinds of input (single
  sine, two-tone sum, white noise and DC).

Each case is executed `warmup` times (numba compiles the kernels
on the first call) and then timed `repeats` times on a fresh copy
of the input.
"""

import time
from dataclasses import dataclass

import numpy as np
import scipy.fft
from tqdm import tqdm

from .direction import Direction
from .plan import Plan
from .signals import generate_dc, generate_multitone, generate_noise, generate_sine_wave


@dataclass
class BenchmarkRecord:
    group: str
    case: str
    size: int
    mean: float  # [s]
    best: float  # [s]
    std: float  # [s]
    repeats: int


def _summarize(group, case, size, times):
    times = np.asarray(times)
    return BenchmarkRecord(
        group=group,
        case=case,
        size=size,
        mean=float(np.mean(times)),
        best=float(np.min(times)),
        std=float(np.std(times)),
        repeats=times.shape[0],
    )


def time_plan(plan, signal, repeats, warmup):
    """Execution times of `plan` on copies of `signal` [s]."""
    work = np.empty(plan.length, dtype=np.complex128)
    for _ in range(warmup):
        np.copyto(work, signal)
        plan.execute(work)

    times = []
    for _ in range(repeats):
        np.copyto(work, signal)
        start = time.perf_counter()
        plan.execute(work)
        times.append(time.perf_counter() - start)
    return times


def time_scipy(signal, repeats, warmup):
    """Execution times of `scipy.fft.fft` on `signal` [s]."""
    for _ in range(warmup):
        scipy.fft.fft(signal, workers=-1)

    times = []
    for _ in range(repeats):
        start = time.perf_counter()
        scipy.fft.fft(signal, workers=-1)
        times.append(time.perf_counter() - start)
    return times


def bench_fft_sizes(bench_par):
    """Time a sine wave over the configured transform lengths."""
    group = "size_scaling"
    records = []
    for size in tqdm(bench_par.sizes, desc="FFT size scaling"):
        sine = generate_sine_wave(1.0, size)
        plan = Plan.build(size, Direction.FORWARD)
        times = time_plan(plan, sine, bench_par.repeats, bench_par.warmup)
        records.append(_summarize(group, "sine_wave", size, times))

        if size > 2:
            odd_sine = generate_sine_wave(1.0, size - 1)
            odd_plan = Plan.build(size - 1, Direction.FORWARD)
            times = time_plan(odd_plan, odd_sine, bench_par.repeats, bench_par.warmup)
            records.append(_summarize(group, "sine_wave_bluestein", size - 1, times))

        times = time_scipy(sine, bench_par.repeats, bench_par.warmup)
        records.append(_summarize(group, "sine_wave_scipy", size, times))
    return records


def bench_fft_signals(bench_par):
    """Time several kinds of input at a fixed transform length."""
    group = "signal_types"
    size = bench_par.signal_length
    signals = {
        "sine_1hz": generate_sine_wave(1.0, size),
        "complex_signal": generate_multitone((1.0, 10.0), size),
        "white_noise": generate_noise(size),
        "dc_signal": generate_dc(size),
    }

    plan = Plan.build(size, Direction.FORWARD)
    records = []
    for case, signal in tqdm(signals.items(), desc="FFT signal types"):
        times = time_plan(plan, signal, bench_par.repeats, bench_par.warmup)
        records.append(_summarize(group, case, size, times))
    return records


def run_benchmarks(bench_par, output=None):
    """
    Run every benchmark group and print a summary.

    Parameters
    ----------
    bench_par : BenchmarkConfig
        Sizes, repeats and warm-up options.
    output : OutputManager, optional
        When given, the timings are saved to its benchmark file.

    Returns
    -------
    records : list of BenchmarkRecord
        All measurements.

    """
    records = bench_fft_sizes(bench_par) + bench_fft_signals(bench_par)

    print(f"{'group':<14} {'case':<22} {'size':>6} {'mean [us]':>11} {'best [us]':>11}")
    for r in records:
        print(
            f"{r.group:<14} {r.case:<22} {r.size:>6} "
            f"{1e6 * r.mean:>11.2f} {1e6 * r.best:>11.2f}"
        )

    if output is not None:
        path = output.save_benchmark(records)
        print(f"Benchmark timings saved to {path}")

    return records
