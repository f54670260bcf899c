"""
Bluestein chirp-z engine module.

How this works
--------------

1. Writing jk = (j^2 + k^2 - (k - j)^2) / 2, a DFT of any length n
becomes

    X[k] = c[k] * sum_j (x[j] c[j]) conj(c[k - j]),

with the chirp c[k] = exp(sign * -i pi k^2 / n). The sum is a
linear convolution, computed as a circular convolution of length
m, the first power of two with m >= 2n - 1.

2. The convolution kernel b (the conjugated chirp, mirrored into
the tail of the buffer) does not depend on the input, so its
spectrum is computed once with the nested plan when the engine
is built.

3. For every execution the modulated input a = x * c is padded
with zeros, transformed with the nested forward plan, multiplied
by the kernel spectrum and transformed back. The backward
transform reuses the same forward plan through

    ifft(y) = conj(fft(conj(y))) / m.

4. The result is demodulated with the chirp; the 1 / m factor
of the backward transform and, for inverse plans, the 1 / n
normalization are folded into that last pass.

"""

import numpy as np

from ..functions.bluestein import (
    chirp_demodulate,
    chirp_modulate,
    conjugate,
    pointwise_multiply,
    wrapped_kernel,
)
from .base import EngineBase


class BluesteinComposer(EngineBase):
    """Arbitrary-length transform through a power-of-two convolution."""

    name = "bluestein"

    def __init__(self, chirp, nested_plan):
        """Initialize the composer and precompute the kernel spectrum.

        Parameters
        ----------
        chirp : TwiddleTable
            The n chirp factors of the plan.
        nested_plan : Plan
            Forward power-of-two plan of length m >= 2n - 1.

        """
        super().__init__(chirp.length, chirp.direction)
        self.chirp = chirp
        self.nested_plan = nested_plan
        self.conv_length = nested_plan.length

        self.chirp_conj = np.conj(chirp.factors)
        self.chirp_conj.setflags(write=False)

        kernel = wrapped_kernel(self.chirp_conj, self.conv_length)
        nested_plan.execute(kernel)
        kernel.setflags(write=False)
        self.kernel_spectrum = kernel

        self.factor = 1.0 / self.conv_length
        if self.inverse:
            self.factor /= self.length

    def run(self, buf):
        work = np.empty(self.conv_length, dtype=np.complex128)

        chirp_modulate(buf, self.chirp.factors, work)
        self.nested_plan.execute(work)
        pointwise_multiply(work, self.kernel_spectrum)

        conjugate(work)
        self.nested_plan.execute(work)
        conjugate(work)

        chirp_demodulate(work, self.chirp.factors, self.factor, buf)
