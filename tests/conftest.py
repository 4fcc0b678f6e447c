import numpy as np
import pytest

from probability.source import NumpySource, Source, Xorshift128Plus


class FixedSource(Source):
    """Replays a fixed list of 64-bit draws and counts how many were read."""

    def __init__(self, draws):
        self._draws = list(draws)
        self.reads = 0

    def read_u64(self) -> int:
        if self.reads >= len(self._draws):
            raise IndexError("FixedSource exhausted")
        draw = self._draws[self.reads]
        self.reads += 1
        return draw


class CountingSource(Source):
    """Wraps another source and counts the draws taken from it."""

    def __init__(self, inner: Source):
        self.inner = inner
        self.reads = 0

    def read_u64(self) -> int:
        self.reads += 1
        return self.inner.read_u64()


@pytest.fixture
def source():
    return Xorshift128Plus((42, 69))


@pytest.fixture
def numpy_source():
    return NumpySource(np.random.default_rng(42))


@pytest.fixture
def fixed_source():
    return FixedSource


@pytest.fixture
def counting_source(source):
    return CountingSource(source)
