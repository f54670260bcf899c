"""Data subpackage initialization file for importing utilities."""

from .diagnostics import (
    parseval_ratio,
    reference_error,
    relative_error,
    roundtrip_error,
    transform_diagnostics,
    validate_spectrum,
)
from .store import OutputManager, load_benchmark, load_spectrum

__all__ = [
    "OutputManager",
    "load_spectrum",
    "load_benchmark",
    "validate_spectrum",
    "relative_error",
    "roundtrip_error",
    "parseval_ratio",
    "reference_error",
    "transform_diagnostics",
]
