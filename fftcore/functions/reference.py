"""Direct O(n^2) discrete Fourier transform used as a reference."""

import numpy as np

from ..direction import Direction


def direct_dft(signal, direction=Direction.FORWARD):
    """
    Compute the DFT by evaluating its defining sum.

    Parameters
    ----------
    signal : (N,) array_like
        Input samples.
    direction : Direction or str, default: Direction.FORWARD
        Inverse transforms use the conjugate kernel and the 1/N factor.

    Returns
    -------
    out : (N,) ndarray
        Transformed samples.

    """
    direction = Direction.parse(direction)
    x = np.asarray(signal, dtype=np.complex128).reshape(-1)
    n = x.shape[0]
    idx = np.arange(n)
    # reduce jk modulo n before scaling the angle
    exponent = np.outer(idx, idx) % n
    kernel = np.exp(-2j * np.pi * direction.sign * exponent / n)
    out = kernel @ x
    if direction is Direction.INVERSE:
        out /= n
    return out
