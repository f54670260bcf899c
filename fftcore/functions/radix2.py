"""
Radix-2 butterfly kernels.

How this works
--------------

1. The buffer has already been reordered with the bit-reversal
permutation, so the iterative decimation-in-time Cooley-Tukey
scheme can combine neighbouring sub-transforms of length
`size / 2` into transforms of length `size`, for
size = 2, 4, ..., n.

2. Butterfly `p` of a stage lives in block `p // half` and
pairs the entries

    lo = block * size + j,  hi = lo + half,  j = p % half,

with the twiddle factor W(j * n / size, n), which is entry
`j * stride` of the n/2 table built for the plan.

3. Inside one stage the n/2 butterflies touch disjoint pairs of
entries, so `butterfly_stages_parallel` distributes them over the
numba worker threads with `prange`. The stage loop itself is
sequential: the end of every `prange` acts as the barrier that
stage s + 1 needs before it reads the outputs of stage s.

4. Both kernels are compiled from the same Python source. Without
`parallel=True`, numba runs `prange` as a plain `range`, which is
what `butterfly_stages` does. Starting worker threads costs more
than a short transform, so the engines only use the parallel
variants from `PARALLEL_MIN_LENGTH` samples on.

5. numba threading layers are not all safe to enter from several
Python threads at once, so only the holder of `PARALLEL_LOCK` runs
the parallel variants. A thread that finds the lock taken runs the
serial kernels instead of waiting for it.

"""

import threading

from numba import njit, prange

from ..numbers.complex import complex_add, complex_mul, complex_scale, complex_sub

PARALLEL_MIN_LENGTH = 1 << 15
PARALLEL_LOCK = threading.Lock()


def _butterfly_stages(buf, twiddles):
    """
    Run all log2(n) butterfly stages in place.

    Parameters
    ----------
    buf : (n,) ndarray
        Bit-reversed complex buffer, n a power of two.
    twiddles : (n/2,) ndarray
        Twiddle factors W(k, n), k = 0..n/2-1.

    """
    n = buf.shape[0]
    n_half = n // 2
    size = 2
    while size <= n:
        half = size // 2
        stride = n // size
        for p in prange(n_half):  # pylint: disable=not-an-iterable
            j = p % half
            lo = (p // half) * size + j
            hi = lo + half
            t = complex_mul(twiddles[j * stride], buf[hi])
            buf[hi] = complex_sub(buf[lo], t)
            buf[lo] = complex_add(buf[lo], t)
        size *= 2


def _scale_buffer(buf, factor):
    """Multiply every sample by the real number `factor` in place."""
    for i in prange(buf.shape[0]):  # pylint: disable=not-an-iterable
        buf[i] = complex_scale(buf[i], factor)


butterfly_stages = njit(_butterfly_stages)
butterfly_stages_parallel = njit(parallel=True)(_butterfly_stages)
scale_buffer = njit(_scale_buffer)
scale_buffer_parallel = njit(parallel=True)(_scale_buffer)
