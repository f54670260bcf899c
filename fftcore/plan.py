"""
Transform plan module.

A plan binds a transform length and direction to every table the
transform needs. It is built once, never modified afterwards and
can be shared by any number of threads executing transforms on
independent buffers.

Lengths that are exact powers of two run on the radix-2 engine
(twiddle table + bit-reversal permuter). Any other length runs
on the Bluestein composer (chirp table + nested power-of-two
plan of length m >= 2n - 1).
"""

from dataclasses import dataclass
from typing import Optional

import numpy as np

from .direction import Direction
from .engines.base import EngineBase
from .engines.bluestein import BluesteinComposer
from .engines.radix2 import Radix2Engine
from .errors import LengthMismatch
from .functions.bit_reversal import BitReversalPermuter
from .functions.sizes import is_power_of_two, next_power_of_two, validate_length
from .functions.twiddle import TwiddleTable


@dataclass(frozen=True, eq=False)
class Plan:
    """Immutable, reusable transform descriptor."""

    length: int
    direction: Direction
    twiddles: TwiddleTable
    engine: EngineBase
    permuter: Optional[BitReversalPermuter] = None
    composer: Optional[BluesteinComposer] = None

    @staticmethod
    def build(length, direction=Direction.FORWARD) -> "Plan":
        """
        Build the plan for a transform length and direction.

        Parameters
        ----------
        length : integer
            Number of samples, at least 1.
        direction : Direction or str, default: Direction.FORWARD
            "forward" or "inverse".

        Returns
        -------
        plan : Plan
            Radix-2 plan for powers of two, Bluestein plan otherwise.

        Raises
        ------
        InvalidLength
            If `length` is smaller than 1.

        """
        length = validate_length(length)
        direction = Direction.parse(direction)

        if is_power_of_two(length):
            twiddles = TwiddleTable.for_radix2(length, direction)
            permuter = BitReversalPermuter.build(length)
            return Plan(
                length=length,
                direction=direction,
                twiddles=twiddles,
                engine=Radix2Engine(twiddles, permuter),
                permuter=permuter,
            )

        chirp = TwiddleTable.for_chirp(length, direction)
        nested = Plan.build(next_power_of_two(2 * length - 1), Direction.FORWARD)
        composer = BluesteinComposer(chirp, nested)
        return Plan(
            length=length,
            direction=direction,
            twiddles=chirp,
            engine=composer,
            composer=composer,
        )

    @property
    def algorithm(self):
        return self.engine.name

    def execute(self, buffer, out=None):
        """
        Transform `buffer` in place, or into `out` when it is given.

        Parameters
        ----------
        buffer : (n,) ndarray
            Complex samples. Mutated only when `out` is None.
        out : (n,) ndarray, optional
            Complex output buffer, `buffer` is left unchanged.

        Raises
        ------
        LengthMismatch
            If a buffer length differs from the plan length.
        TypeError
            If a buffer is not a 1-D NumPy array, or the buffer that
            receives the result is not complex and writeable.

        """
        _check_buffer(buffer, self.length, "buffer", writeable=out is None)
        if out is not None:
            _check_buffer(out, self.length, "output buffer", writeable=True)

        target = buffer if out is None else out
        if _is_native(target):
            if out is not None:
                np.copyto(out, buffer)
            self.engine.run(target)
            return None

        work = np.array(buffer, dtype=np.complex128)
        self.engine.run(work)
        target[...] = work
        return None

    def transform(self, signal):
        """Return the transform of any array-like input as a new array."""
        work = np.array(signal, dtype=np.complex128).reshape(-1)
        if work.shape[0] != self.length:
            raise LengthMismatch(self.length, work.shape[0], "signal")
        self.engine.run(work)
        return work

    def __repr__(self):
        return (
            f"Plan(length={self.length}, "
            f"direction={self.direction.name.lower()}, "
            f"algorithm={self.algorithm})"
        )


def _check_buffer(buf, length, name, writeable):
    if not isinstance(buf, np.ndarray):
        raise TypeError(f"The {name} must be a NumPy array, not {type(buf).__name__}.")
    if buf.ndim != 1:
        raise TypeError(f"The {name} must be one-dimensional, got {buf.ndim} dimensions.")
    if buf.shape[0] != length:
        raise LengthMismatch(length, buf.shape[0], name)
    if writeable:
        if not np.issubdtype(buf.dtype, np.complexfloating):
            raise TypeError(f"The {name} must have a complex dtype, got {buf.dtype}.")
        if not buf.flags.writeable:
            raise TypeError(f"The {name} is read-only.")


def _is_native(buf):
    return buf.dtype == np.complex128 and buf.flags.c_contiguous


def build(length, direction=Direction.FORWARD):
    """Build a plan, see `Plan.build`."""
    return Plan.build(length, direction)


def execute(plan, buffer, out=None):
    """Execute `plan` on `buffer`, see `Plan.execute`."""
    plan.execute(buffer, out=out)
