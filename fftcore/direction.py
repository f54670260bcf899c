"""Transform direction."""

import numbers
from enum import Enum


class Direction(Enum):
    """Direction of a transform, valued by the sign applied to the exponent."""

    FORWARD = 1
    INVERSE = -1

    @property
    def sign(self):
        return self.value

    @classmethod
    def parse(cls, value):
        """Return a Direction from a member, its name or its sign."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls[value.strip().upper()]
            except KeyError:
                raise ValueError(
                    f"Invalid direction: '{value}'. Choose 'forward' or 'inverse'."
                ) from None
        if isinstance(value, bool):
            raise ValueError(f"Invalid direction: {value!r}.")
        if isinstance(value, numbers.Integral) and value in (1, -1):
            return cls(value)
        raise ValueError(f"Invalid direction: {value!r}.")
