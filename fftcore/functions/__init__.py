"""
Functions subpackage initialization file for importing kernels.

The plan cache and the FFT manager depend on `fftcore.plan`, which
itself imports the kernels below, so they are imported from their
own modules (`fftcore.functions.plan_cache`,
`fftcore.functions.fft_manager`, `fftcore.functions.fft_backend`).
"""

from .bit_reversal import BitReversalPermuter, apply_permutation, bit_reverse_table
from .bluestein import (
    chirp_demodulate,
    chirp_modulate,
    conjugate,
    pointwise_multiply,
    wrapped_kernel,
)
from .padding import pad_to_power_of_two
from .radix2 import (
    PARALLEL_LOCK,
    PARALLEL_MIN_LENGTH,
    butterfly_stages,
    butterfly_stages_parallel,
    scale_buffer,
    scale_buffer_parallel,
)
from .reference import direct_dft
from .sizes import is_power_of_two, next_power_of_two, validate_length
from .twiddle import TwiddleTable, compute_chirp, compute_twiddles, unit_root

__all__ = [
    "BitReversalPermuter",
    "TwiddleTable",
    "apply_permutation",
    "bit_reverse_table",
    "PARALLEL_LOCK",
    "PARALLEL_MIN_LENGTH",
    "butterfly_stages",
    "butterfly_stages_parallel",
    "scale_buffer",
    "scale_buffer_parallel",
    "chirp_modulate",
    "chirp_demodulate",
    "conjugate",
    "pointwise_multiply",
    "wrapped_kernel",
    "compute_twiddles",
    "compute_chirp",
    "unit_root",
    "direct_dft",
    "pad_to_power_of_two",
    "is_power_of_two",
    "next_power_of_two",
    "validate_length",
]
