# source/xorshift.py
from __future__ import annotations

from typing import Tuple

from ..array_backend.utils import _ensure_integer
from ..errors import ConstructionError
from .source import Source

__all__ = ["Xorshift128Plus", "DEFAULT_SEED"]

_MASK = (1 << 64) - 1
DEFAULT_SEED = (42, 69)


class Xorshift128Plus(Source):
    """The Xorshift+ generator with 128 bits of state.

    Fast and statistically adequate for Monte Carlo work; not suitable for
    anything security related.

    References:
        - S. Vigna, "Further scramblings of Marsaglia's xorshift generators",
          Journal of Computational and Applied Mathematics, 2017.

    Args:
        seed: Two unsigned 64-bit words; they must not both be zero.
    """

    def __init__(self, seed: Tuple[int, int] = DEFAULT_SEED):
        try:
            s0, s1 = (_ensure_integer(word) for word in seed)
        except (TypeError, ValueError) as e:
            raise ConstructionError(f"seed must be two integers, got {seed!r}") from e
        if not (0 <= s0 <= _MASK and 0 <= s1 <= _MASK):
            raise ConstructionError(f"seed words must lie in [0, 2**64), got {seed!r}")
        if s0 == 0 and s1 == 0:
            raise ConstructionError("seed must not be all zeros")
        self._state = [s0, s1]

    @property
    def state(self) -> Tuple[int, int]:
        """A copy of the current internal state."""
        return self._state[0], self._state[1]

    def read_u64(self) -> int:
        x, y = self._state
        self._state[0] = y
        x ^= (x << 23) & _MASK
        x ^= x >> 17
        x ^= y ^ (y >> 26)
        self._state[1] = x
        return (x + y) & _MASK

    def __repr__(self) -> str:
        return f"Xorshift128Plus(state={self.state!r})"
