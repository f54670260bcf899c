"""
Fast Fourier Transform backend selection module.

How this works
--------------

1. The manager starts without a backend. `set_fft_backend` picks
one of the available backends and stores the two callables used
afterwards by `fft` and `ifft`.

2. The `native` backend runs this package's planner. Plans are
looked up in the manager's `PlanCache` by (length, direction), so
repeated transforms of the same length only build their tables
once. Any length is accepted: powers of two run on the radix-2
engine and every other length on the Bluestein composer.

3. The `scipy` backend forwards to `scipy.fft.fft` and
`scipy.fft.ifft` with `workers=-1`, which allows parallelization
across all available CPU cores. It is useful as a cross-check of
the native engine.

4. Both backends transform 1-D data and return a new complex
array; the input is never modified. With `pad=True` the data is
zero-padded to the next power of two first, so the output can
be longer than the input.

"""

import numpy as np
import scipy.fft

from ..direction import Direction
from .padding import pad_to_power_of_two
from .plan_cache import PlanCache

FFT_BACKENDS = ("native", "scipy")


class FFTManager:
    """Fast Fourier Transform options configuration."""

    def __init__(self, max_plans=32):
        self.backend = None
        self.compute_fft = None
        self.compute_ifft = None
        self.plan_cache = PlanCache(max_entries=max_plans)

    def set_fft_backend(self, backend: str, verbose=True):
        """FFT backend configuration"""
        backend_opt = backend.lower()
        if backend_opt == "native":
            self._setup_fft_native()
            message = "Using native radix-2/Bluestein FFT"
        elif backend_opt == "scipy":
            self._setup_fft_scipy()
            message = "Using SciPy FFT"
        else:
            raise ValueError(
                f"Invalid FFT backend: '{backend}'. "
                f"Choose one of {', '.join(FFT_BACKENDS)}."
            )
        self.backend = backend_opt
        if verbose:
            print(message)

    def _setup_fft_native(self):
        def run(data, direction):
            plan = self.plan_cache.get_or_build(data.shape[0], direction)
            return plan.transform(data)

        self.compute_fft = lambda data: run(data, Direction.FORWARD)
        self.compute_ifft = lambda data: run(data, Direction.INVERSE)

    def _setup_fft_scipy(self):
        self.compute_fft = lambda data: scipy.fft.fft(data, workers=-1)
        self.compute_ifft = lambda data: scipy.fft.ifft(data, workers=-1)

    @staticmethod
    def _prepare(data, pad):
        samples = np.asarray(data, dtype=np.complex128)
        if samples.ndim != 1:
            raise ValueError(f"Expected 1-D data, got {samples.ndim} dimensions.")
        if pad:
            return pad_to_power_of_two(samples)
        return samples

    def fft(self, data, pad=False):
        """
        Transform data from time domain to frequency domain
        using the selected backend.
        """
        if not self.compute_fft:
            raise RuntimeError("FFT backend not set up yet.")
        return self.compute_fft(self._prepare(data, pad))

    def ifft(self, data, pad=False):
        """
        Transform data from frequency domain to time domain
        using the selected backend.
        """
        if not self.compute_ifft:
            raise RuntimeError("FFT backend not set up yet.")
        return self.compute_ifft(self._prepare(data, pad))
