"""Sources of randomness consumed by the samplers."""

from .source import Source, u64_to_unit
from .xorshift import DEFAULT_SEED, Xorshift128Plus
from .numpy_source import NumpySource

__all__ = [
    "Source",
    "u64_to_unit",
    "Xorshift128Plus",
    "NumpySource",
    "DEFAULT_SEED",
    "default",
]


def default() -> Xorshift128Plus:
    """Return a new default generator (Xorshift128+ with the default seed).

    Every call starts the same stream; reseed or construct a source
    explicitly for independent streams.
    """
    return Xorshift128Plus(DEFAULT_SEED)
