"""Numbers subpackage initialization file for importing utilities."""

from .complex import (
    complex_add,
    complex_conj,
    complex_mul,
    complex_scale,
    complex_sub,
    from_polar,
    norm,
)

__all__ = [
    "complex_add",
    "complex_sub",
    "complex_mul",
    "complex_scale",
    "complex_conj",
    "from_polar",
    "norm",
]
