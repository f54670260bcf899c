"""Helper module for zero padding signals to a power-of-two length."""

import numpy as np

from .sizes import next_power_of_two


def pad_to_power_of_two(signal):
    """
    Zero-pad a 1-D signal to the next power-of-two length.

    Parameters
    ----------
    signal : (N,) array_like
        Real or complex samples.

    Returns
    -------
    padded : (M,) ndarray
        Complex copy of `signal` followed by M - N zeros, where M is
        the smallest power of two with M >= N.

    """
    samples = np.asarray(signal, dtype=np.complex128).reshape(-1)
    n = samples.shape[0]
    if n == 0:
        return samples.copy()
    padded = np.zeros(next_power_of_two(n), dtype=np.complex128)
    padded[:n] = samples
    return padded
