"""Element-wise kernels for the Bluestein chirp convolution."""

import numpy as np
from numba import njit

from ..numbers.complex import complex_conj, complex_mul, complex_scale


@njit
def chirp_modulate(src, chirp, dst):
    """
    Write src[k] * chirp[k] into the first n entries of `dst`
    and zero the remaining ones.

    Parameters
    ----------
    src : (n,) array_like
        Input samples.
    chirp : (n,) array_like
        Chirp factors.
    dst : (m,) ndarray
        Scratch buffer of the padded convolution length, m >= n.

    """
    n = src.shape[0]
    for k in range(dst.shape[0]):
        if k < n:
            dst[k] = complex_mul(src[k], chirp[k])
        else:
            dst[k] = 0.0


@njit
def wrapped_kernel(values, m):
    """
    Build the convolution kernel b of length m with
    b[k] = b[m - k] = values[k] for 0 < k < n, b[0] = values[0]
    and zeros elsewhere.
    """
    n = values.shape[0]
    out = np.zeros(m, dtype=np.complex128)
    out[0] = values[0]
    for k in range(1, n):
        out[k] = values[k]
        out[m - k] = values[k]
    return out


@njit
def pointwise_multiply(buf, other):
    """buf[k] = buf[k] * other[k], in place."""
    for k in range(buf.shape[0]):
        buf[k] = complex_mul(buf[k], other[k])


@njit
def conjugate(buf):
    """Conjugate every sample in place."""
    for k in range(buf.shape[0]):
        buf[k] = complex_conj(buf[k])


@njit
def chirp_demodulate(conv, chirp, factor, dst):
    """dst[k] = factor * conv[k] * chirp[k] for the n output samples."""
    for k in range(dst.shape[0]):
        dst[k] = complex_scale(complex_mul(conv[k], chirp[k]), factor)
