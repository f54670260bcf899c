"""Helper module for transform length checks."""

import operator

from ..errors import InvalidLength


def validate_length(length):
    """
    Return `length` as a Python int after checking it is a valid
    transform length.

    Raises
    ------
    TypeError
        If `length` is not an integer.
    InvalidLength
        If `length` is smaller than 1.

    """
    if isinstance(length, bool):
        raise TypeError("Transform length must be an integer, not bool.")
    try:
        length = operator.index(length)
    except TypeError:
        raise TypeError(
            f"Transform length must be an integer, not {type(length).__name__}."
        ) from None
    if length < 1:
        raise InvalidLength(length)
    return length


def is_power_of_two(n):
    """True when n is 1, 2, 4, 8, ..."""
    return n > 0 and n & (n - 1) == 0


def next_power_of_two(n):
    """Smallest power of two greater than or equal to n (n >= 1)."""
    if n <= 1:
        return 1
    return 1 << (n - 1).bit_length()
