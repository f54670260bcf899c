"""
Root initialization file for importing fftcore package and modules.
"""

from ._version import __version__
from .direction import Direction
from .errors import FFTError, InvalidLength, LengthMismatch
from .functions.bit_reversal import BitReversalPermuter
from .functions.twiddle import TwiddleTable
from .plan import Plan, build, execute
from .engines.bluestein import BluesteinComposer
from .engines.radix2 import Radix2Engine
from .functions.plan_cache import PlanCache
from .functions.fft_manager import FFTManager
from .functions.fft_backend import compute_fft, compute_ifft, fft_manager
from .config import ConfigOptions

__all__ = [
    "__version__",
    "Direction",
    "FFTError",
    "InvalidLength",
    "LengthMismatch",
    "TwiddleTable",
    "BitReversalPermuter",
    "Radix2Engine",
    "BluesteinComposer",
    "Plan",
    "build",
    "execute",
    "PlanCache",
    "FFTManager",
    "fft_manager",
    "compute_fft",
    "compute_ifft",
    "ConfigOptions",
]
