"""Base engine module."""


class EngineBase:
    """Base class for the transform engines owned by a plan."""

    name = "base"

    def __init__(self, length, direction):
        """Initialize engine with common parameters.

        Parameters
        ----------
        length : integer
            Number of samples transformed by the engine.
        direction : Direction
            Forward or inverse transform.

        """
        self.length = length
        self.direction = direction
        self.inverse = direction.sign < 0

    def run(self, buf):
        """Transform the complex128 buffer `buf` in place.

        Look for the function in the radix2 and bluestein modules.
        """
        raise NotImplementedError("Engine must include run()")

    def __repr__(self):
        return (
            f"{type(self).__name__}(length={self.length}, "
            f"direction={self.direction.name.lower()})"
        )
