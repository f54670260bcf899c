"""Entry point for running the package with 'python -m fftcore'."""

import numpy as np

from ._version import __version__
from .benchmark import run_benchmarks
from .cli.parser import create_cli_arguments
from .config import ConfigOptions
from .data.diagnostics import transform_diagnostics
from .data.store import OutputManager
from .direction import Direction
from .functions.fft_backend import fft_manager
from .functions.padding import pad_to_power_of_two
from .signals import Signal


def _signal_parameters(args):
    if args.signal == "sine":
        return {"SINE": {"frequency": args.frequency}}
    if args.signal == "noise":
        return {"NOISE": {"seed": args.seed, "complex_noise": True}}
    return {args.signal.upper(): {}}


def main(argv=None):
    """Main function."""
    args = create_cli_arguments(argv)
    print(f"Running fftcore v{__version__} for Python")

    config = ConfigOptions.build(
        transform_parameters={
            args.direction.upper(): {"length": args.length, "pad": args.pad},
        },
        signal_parameters=_signal_parameters(args),
        computing_backend=args.backend,
        benchmark_parameters={"repeats": args.repeats},
    )

    # Initialize FFT algorithm
    fft_manager.set_fft_backend(config.computing_backend)

    signal = Signal(
        config.transform_par.length, config.signal_name, config.signal_par
    ).generate()
    if config.transform_par.pad:
        signal = pad_to_power_of_two(signal)

    length = signal.shape[0]
    plan = fft_manager.plan_cache.get_or_build(length, config.direction)
    opposite = (
        Direction.INVERSE if config.direction is Direction.FORWARD else Direction.FORWARD
    )
    inverse_plan = fft_manager.plan_cache.get_or_build(length, opposite)
    print(f"Built {plan}")

    if config.computing_backend == "native":
        spectrum = np.empty_like(signal)
        plan.execute(signal, out=spectrum)
    elif config.direction is Direction.FORWARD:
        spectrum = fft_manager.fft(signal)
    else:
        spectrum = fft_manager.ifft(signal)

    transform_diagnostics(signal, spectrum, plan, inverse_plan, check=args.check)

    output = OutputManager(args.output_dir) if args.save else None
    if output is not None:
        path = output.save_spectrum(signal, spectrum, plan, config.computing_backend)
        print(f"Spectrum saved to {path}")

    if args.benchmark:
        run_benchmarks(config.benchmark_par, output)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
