"""
Scalar complex arithmetic used by the butterfly kernels.

How this works
--------------

1. Every sample is a NumPy/Python complex value holding two
double precision components (re, im). The functions in this
module never build intermediate arrays, they only combine the
components of their scalar arguments.

2. The product follows the textbook rule

    (a + bi) * (c + di) = (ac - bd) + (ad + bc)i

written out explicitly instead of relying on the interpreter's
complex multiplication, so the compiled kernels perform exactly
four real products and two real sums per multiplication.

3. All functions are compiled with numba, so calling them inside
another `@njit` kernel inlines the arithmetic. They can also be
called from regular Python code, which is what the tests do.

NaN and Inf components are not treated specially, they follow
IEEE 754 propagation rules.
"""

import numpy as np
from numba import njit


@njit
def complex_add(a, b):
    """Return a + b."""
    return complex(a.real + b.real, a.imag + b.imag)


@njit
def complex_sub(a, b):
    """Return a - b."""
    return complex(a.real - b.real, a.imag - b.imag)


@njit
def complex_mul(a, b):
    """Return a * b as (ac - bd, ad + bc)."""
    return complex(
        a.real * b.real - a.imag * b.imag,
        a.real * b.imag + a.imag * b.real,
    )


@njit
def complex_scale(a, factor):
    """Return a multiplied by the real number `factor`."""
    return complex(a.real * factor, a.imag * factor)


@njit
def complex_conj(a):
    """Return the complex conjugate of a."""
    return complex(a.real, -a.imag)


@njit
def from_polar(radius, theta):
    """Build r * exp(i * theta)."""
    return complex(radius * np.cos(theta), radius * np.sin(theta))


@njit
def norm(a):
    """Magnitude of a, computed without intermediate overflow."""
    return np.hypot(a.real, a.imag)
