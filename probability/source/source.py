# source/source.py
from __future__ import annotations

from abc import ABC, abstractmethod

__all__ = ["Source", "u64_to_unit"]

_U64_MASK = (1 << 64) - 1
_INV_2_53 = 1.0 / (1 << 53)


def u64_to_unit(draw: int) -> float:
    """Map a 64-bit unsigned draw to a double in [0, 1).

    The top 53 bits become the mantissa: ``(draw >> 11) * 2**-53``. Every
    representable result is equally likely and 1.0 is never produced.
    """
    return ((draw & _U64_MASK) >> 11) * _INV_2_53


class Source(ABC):
    """
    Abstract source of uniformly distributed random bits.

    A source is stateful and sequential: every read advances it. It is not
    thread-safe; a sampler must have exclusive use of its source for the
    duration of a sampling session.

    Subclasses implement :meth:`read_u64`; every other draw is derived from it
    deterministically.
    """

    @abstractmethod
    def read_u64(self) -> int:
        """Return the next unsigned 64-bit integer, in [0, 2**64)."""
        raise NotImplementedError

    def read_f64(self) -> float:
        """Return the next uniform double in [0, 1)."""
        return u64_to_unit(self.read_u64())

    def read_open_f64(self) -> float:
        """Return the next uniform double in (0, 1), skipping exact zeros."""
        while True:
            u = self.read_f64()
            if u > 0.0:
                return u
