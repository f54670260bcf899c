"""Exceptions raised by the transform planner and executor."""


class FFTError(ValueError):
    """Base class for invalid transform requests."""


class InvalidLength(FFTError):
    """Transform length is not a positive integer (raised when planning)."""

    def __init__(self, length, reason="length must be a positive integer"):
        self.length = length
        super().__init__(f"Invalid transform length {length!r}: {reason}.")


class LengthMismatch(FFTError):
    """Buffer length differs from the plan length (raised when executing)."""

    def __init__(self, expected, actual, name="buffer"):
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"The {name} has {actual} samples but the plan expects {expected}."
        )
