"""
Twiddle factor table module.

How this works
--------------

1. A twiddle factor is the root of unity

    W(k, n) = exp(sign * -2 pi i k / n)

where `sign` is +1 for forward transforms and -1 for inverse
ones. The table is filled once when a plan is built and only
read afterwards.

2. The factors are evaluated one by one instead of with the
recurrence W(k + 1) = W(k) * W(1), whose rounding error grows
linearly with k. Before calling the trigonometric functions, the
exponent k / n is reduced with integer arithmetic to a quarter
turn `q` plus a remainder, and the remainder is folded into the
first octant [0, pi/4]. Only angles in that octant ever reach
`cos` and `sin`, so the factors at multiples of a quarter turn
(1, -i, -1, i) are exact and every other factor is within a few
ULPs of the true value.

3. Power-of-two plans need n/2 factors W(k, n), k = 0..n/2-1.
Arbitrary-length plans (Bluestein) need the chirp factors

    c(k) = exp(sign * -i pi k^2 / n),  k = 0..n-1,

which are roots of unity of order 2n: c(k) = W(k^2 mod 2n, 2n).
The exponent k^2 mod 2n is updated incrementally from
(k + 1)^2 = k^2 + 2k + 1, so it never overflows.

"""

from dataclasses import dataclass

import numpy as np
from numba import njit

from ..direction import Direction
from ..errors import InvalidLength
from ..numbers.complex import complex_conj
from .sizes import is_power_of_two, validate_length


@njit
def unit_root(k, n):
    """Return exp(-2 pi i k / n) evaluated through octant reduction."""
    k = k % n
    quarter = (4 * k) // n
    rem = 4 * k - quarter * n

    # the angle inside the quarter turn is (pi / 2) * rem / n
    if 2 * rem <= n:
        theta = 0.5 * np.pi * rem / n
        cos_t = np.cos(theta)
        sin_t = np.sin(theta)
    else:
        theta = 0.5 * np.pi * (n - rem) / n
        cos_t = np.sin(theta)
        sin_t = np.cos(theta)

    if quarter == 0:
        re, im = cos_t, sin_t
    elif quarter == 1:
        re, im = -sin_t, cos_t
    elif quarter == 2:
        re, im = -cos_t, -sin_t
    else:
        re, im = sin_t, -cos_t

    return complex(re, -im)


@njit
def compute_twiddles(n, count, sign):
    """
    Compute the first `count` twiddle factors of order n.

    Parameters
    ----------
    n : integer
        Transform length.
    count : integer
        Number of factors W(k, n), k = 0..count-1.
    sign : integer
        +1 for forward, -1 for inverse.

    Returns
    -------
    out : (count,) ndarray
        Complex twiddle factors.

    """
    out = np.empty(count, dtype=np.complex128)
    for k in range(count):
        w = unit_root(k, n)
        out[k] = w if sign > 0 else complex_conj(w)
    return out


@njit
def compute_chirp(n, sign):
    """Compute the n chirp factors exp(sign * -i pi k^2 / n)."""
    period = 2 * n
    out = np.empty(n, dtype=np.complex128)
    exponent = 0
    for k in range(n):
        w = unit_root(exponent, period)
        out[k] = w if sign > 0 else complex_conj(w)
        exponent = (exponent + 2 * k + 1) % period
    return out


def _freeze(array):
    array.setflags(write=False)
    return array


@dataclass(frozen=True, eq=False)
class TwiddleTable:
    """Read-only table of unit-circle factors for one length and direction."""

    length: int
    direction: Direction
    kind: str
    factors: np.ndarray

    @classmethod
    def for_radix2(cls, length, direction):
        """Table of the n/2 factors W(k, n) used by the butterfly stages."""
        length = validate_length(length)
        direction = Direction.parse(direction)
        if not is_power_of_two(length):
            raise InvalidLength(length, "radix-2 twiddles need a power of two")
        factors = compute_twiddles(length, length // 2, direction.sign)
        return cls(length, direction, "radix2", _freeze(factors))

    @classmethod
    def for_chirp(cls, length, direction):
        """Table of the n chirp factors used by the Bluestein composer."""
        length = validate_length(length)
        direction = Direction.parse(direction)
        factors = compute_chirp(length, direction.sign)
        return cls(length, direction, "chirp", _freeze(factors))

    def __len__(self):
        return self.factors.shape[0]

    def __getitem__(self, index):
        return self.factors[index]
