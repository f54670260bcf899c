"""Helper module for the bit-reversal permutation of power-of-two buffers."""

from dataclasses import dataclass

import numpy as np
from numba import njit

from ..errors import InvalidLength
from .sizes import is_power_of_two, validate_length


@njit
def bit_reverse_table(n):
    """
    Compute the bit-reversal permutation of length n = 2^m.

    Entry i holds the integer obtained by reversing the m-bit binary
    representation of i. Each entry is derived from the one of i >> 1,
    so the whole table costs O(n).

    Parameters
    ----------
    n : integer
        Power-of-two length.

    Returns
    -------
    table : (n,) ndarray
        Permutation indices.

    """
    table = np.zeros(n, dtype=np.int64)
    bits = 0
    while (1 << bits) < n:
        bits += 1
    if bits == 0:
        return table

    top = 1 << (bits - 1)
    for i in range(1, n):
        table[i] = table[i >> 1] >> 1
        if i & 1:
            table[i] |= top
    return table


@njit
def apply_permutation(buf, table):
    """Reorder `buf` in place, swapping only the pairs with table[i] > i."""
    for i in range(buf.shape[0]):
        j = table[i]
        if j > i:
            tmp = buf[i]
            buf[i] = buf[j]
            buf[j] = tmp


@dataclass(frozen=True, eq=False)
class BitReversalPermuter:
    """Precomputed bit-reversal permutation for one power-of-two length."""

    length: int
    table: np.ndarray

    @classmethod
    def build(cls, length):
        length = validate_length(length)
        if not is_power_of_two(length):
            raise InvalidLength(length, "bit reversal needs a power of two")
        table = bit_reverse_table(length)
        table.setflags(write=False)
        return cls(length, table)

    def apply(self, buf):
        """Permute a complex buffer of the permuter's length in place."""
        apply_permutation(buf, self.table)

    def __getitem__(self, index):
        return int(self.table[index])

    def __len__(self):
        return self.length
