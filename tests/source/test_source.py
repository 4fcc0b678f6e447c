# tests/source/test_source.py
import numpy as np
import pytest

from probability.errors import ConstructionError
from probability.source import DEFAULT_SEED, NumpySource, Xorshift128Plus, default, u64_to_unit


def test_xorshift_reference_outputs():
    gen = Xorshift128Plus((42, 69))
    assert [gen.read_u64() for _ in range(3)] == [352324404, 1283466974, 2955488539098172]


def test_xorshift_is_deterministic_per_seed():
    a = Xorshift128Plus((1, 2))
    b = Xorshift128Plus((1, 2))
    assert [a.read_u64() for _ in range(10)] == [b.read_u64() for _ in range(10)]


def test_xorshift_state_advances():
    gen = Xorshift128Plus()
    before = gen.state
    gen.read_u64()
    assert gen.state != before
    assert before == DEFAULT_SEED


@pytest.mark.parametrize("seed", [(0, 0), (-1, 3), (1 << 64, 1), (1,), ("a", 2)])
def test_xorshift_rejects_bad_seeds(seed):
    with pytest.raises(ConstructionError):
        Xorshift128Plus(seed)


def test_default_source_restarts_the_stream():
    assert default().read_u64() == default().read_u64() == 352324404


def test_u64_to_unit_endpoints():
    assert u64_to_unit(0) == 0.0
    assert u64_to_unit(1 << 63) == 0.5
    assert u64_to_unit((1 << 64) - 1) == 1.0 - 2.0 ** -53


def test_read_f64_uses_top_53_bits(fixed_source):
    src = fixed_source([2047, 2048])
    assert src.read_f64() == 0.0
    assert src.read_f64() == 2.0 ** -53


def test_read_open_f64_skips_zero(fixed_source):
    src = fixed_source([0, 0, 1 << 63])
    assert src.read_open_f64() == 0.5
    assert src.reads == 3


def test_read_f64_in_unit_interval(source):
    values = [source.read_f64() for _ in range(1000)]
    assert min(values) >= 0.0
    assert max(values) < 1.0


def test_numpy_source_matches_raw_stream():
    src = NumpySource(np.random.PCG64(7))
    raw = np.random.PCG64(7).random_raw(3)
    assert [src.read_u64() for _ in range(3)] == [int(v) for v in raw]


def test_numpy_source_accepts_generator_and_seed():
    from_gen = NumpySource(np.random.default_rng(3))
    from_seed = NumpySource(3)
    assert from_gen.read_u64() == from_seed.read_u64()


def test_numpy_source_rejects_other_types():
    with pytest.raises(ConstructionError):
        NumpySource("seed")
