"""Diagnosing tools module."""

import sys

import numpy as np

from ..direction import Direction
from ..functions.reference import direct_dft


def validate_spectrum(spectrum, exit_on_error=False):
    """
    Check that every transformed sample is finite.

    Parameters
    ----------
    spectrum : (N,) array_like
        Transformed samples.
    exit_on_error : bool, default: False
        Whether to exit program on validation failure.

    Returns
    -------
    binary : bool
        True if valid, False if invalid (when exit_on_error is False).

    """
    if np.any(~np.isfinite(spectrum)):
        if exit_on_error:
            print("ERROR: Non-finite values detected in spectrum")
            sys.exit(1)
        print("WARNING: Non-finite values detected in spectrum")
        return False

    return True


def relative_error(actual, expected):
    """Max-norm error of `actual` relative to the max-norm of `expected`."""
    actual = np.asarray(actual, dtype=np.complex128)
    expected = np.asarray(expected, dtype=np.complex128)
    scale = np.max(np.abs(expected), initial=0.0)
    error = np.max(np.abs(actual - expected), initial=0.0)
    return error / scale if scale > 0 else error


def roundtrip_error(signal, forward_plan, inverse_plan):
    """Relative error of inverse(forward(signal)) against signal."""
    recovered = inverse_plan.transform(forward_plan.transform(signal))
    return relative_error(recovered, signal)


def parseval_ratio(signal, spectrum):
    """
    Ratio between the spectrum energy divided by N and the signal
    energy. Equal to 1 for a forward transform, up to rounding.
    """
    signal = np.asarray(signal, dtype=np.complex128)
    spectrum = np.asarray(spectrum, dtype=np.complex128)
    energy = np.sum(np.abs(signal) ** 2)
    spectral_energy = np.sum(np.abs(spectrum) ** 2) / spectrum.shape[0]
    if energy == 0:
        return 1.0 if spectral_energy == 0 else np.inf
    return spectral_energy / energy


def reference_error(signal, spectrum, direction=Direction.FORWARD):
    """Relative error of `spectrum` against the direct O(N^2) DFT."""
    return relative_error(spectrum, direct_dft(signal, direction))


def transform_diagnostics(signal, spectrum, plan, inverse_plan=None, check=False):
    """
    Print the diagnostics of one transform.

    Parameters
    ----------
    signal : (N,) array_like
        Samples before the transform.
    spectrum : (N,) array_like
        Samples after the transform.
    plan : Plan
        Plan that produced `spectrum`.
    inverse_plan : Plan, optional
        Plan of opposite direction, used for the round-trip error.
    check : bool, default: False
        Whether to compare against the direct DFT (O(N^2) cost).

    Returns
    -------
    report : dict
        The computed figures.

    """
    report = {"finite": validate_spectrum(spectrum)}

    if plan.direction is Direction.FORWARD:
        report["parseval_ratio"] = parseval_ratio(signal, spectrum)
    if inverse_plan is not None:
        report["roundtrip_error"] = roundtrip_error(signal, plan, inverse_plan)
    if check:
        report["reference_error"] = reference_error(signal, spectrum, plan.direction)

    for key, value in report.items():
        if key != "finite":
            print(f"{key.replace('_', ' ').capitalize()}: {value:.3e}")

    return report
