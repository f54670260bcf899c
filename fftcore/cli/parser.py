"""Command line argument parser module."""

import argparse

from .. import __version__
from ..config import SIGNAL_CONFIG_CLASSES, TRANSFORM_CONFIG_CLASSES
from ..functions.fft_manager import FFT_BACKENDS


def create_cli_arguments(argv=None):
    """Parse command line arguments with argparse."""
    parser = argparse.ArgumentParser(
        prog="fftcore",
        description=f"fftcore v{__version__} Python package "
        "for radix-2 and Bluestein fast Fourier transforms "
        "of complex samples of any length.",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        "-n",
        "--length",
        type=int,
        default=1024,
        help="Number of samples (default: 1024)",
    )
    parser.add_argument(
        "-d",
        "--direction",
        choices=list(TRANSFORM_CONFIG_CLASSES),
        default="forward",
        help="Transform direction (default: forward)",
    )
    parser.add_argument(
        "-s",
        "--signal",
        choices=list(SIGNAL_CONFIG_CLASSES),
        default="sine",
        help="Synthetic input signal (default: sine)",
    )
    parser.add_argument(
        "-f",
        "--frequency",
        type=float,
        default=1.0,
        help="Sine frequency in cycles per buffer (default: 1.0)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for the noise signal",
    )
    parser.add_argument(
        "--backend",
        choices=list(FFT_BACKENDS),
        default="native",
        help="FFT backend (native: radix-2/Bluestein engine, scipy: scipy.fft)",
    )
    parser.add_argument(
        "--pad",
        action="store_true",
        help="Zero-pad the signal to the next power of two",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Compare the result against the direct O(n^2) DFT",
    )
    parser.add_argument(
        "--save",
        action="store_true",
        help="Save signal and spectrum (and benchmark timings) to HDF5 files",
    )
    parser.add_argument(
        "--benchmark",
        action="store_true",
        help="Run the benchmark groups after the transform",
    )
    parser.add_argument(
        "--repeats",
        type=int,
        default=50,
        help="Timed repetitions per benchmark case (default: 50)",
    )
    parser.add_argument(
        "-o",
        "--output-dir",
        default=None,
        help="Output directory (default: $FFTCORE_BASE_DIR or ./results)",
    )

    return parser.parse_args(argv)
