"""Radix-2 Cooley-Tukey engine module."""

from ..functions.radix2 import (
    PARALLEL_LOCK,
    PARALLEL_MIN_LENGTH,
    butterfly_stages,
    butterfly_stages_parallel,
    scale_buffer,
    scale_buffer_parallel,
)
from .base import EngineBase


class Radix2Engine(EngineBase):
    """In-place iterative Cooley-Tukey transform for power-of-two lengths."""

    name = "radix2"

    def __init__(self, twiddles, permuter):
        """Initialize the engine from the plan tables.

        Parameters
        ----------
        twiddles : TwiddleTable
            The n/2 twiddle factors of the plan.
        permuter : BitReversalPermuter
            The bit-reversal permutation of the plan.

        """
        super().__init__(twiddles.length, twiddles.direction)
        self.twiddles = twiddles
        self.permuter = permuter
        self.parallel = self.length >= PARALLEL_MIN_LENGTH

    def run(self, buf):
        if self.length == 1:
            return

        self.permuter.apply(buf)

        # One thread at a time in the parallel kernels, the rest go serial
        if self.parallel and PARALLEL_LOCK.acquire(blocking=False):
            try:
                self._stages(buf, butterfly_stages_parallel, scale_buffer_parallel)
            finally:
                PARALLEL_LOCK.release()
        else:
            self._stages(buf, butterfly_stages, scale_buffer)

    def _stages(self, buf, stages, scale):
        stages(buf, self.twiddles.factors)
        if self.inverse:
            scale(buf, 1.0 / self.length)
