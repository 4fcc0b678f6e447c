# tests/special/test_incomplete.py
import math

import numpy as np
import pytest
import scipy.special as sp
from hypothesis import given, settings
from hypothesis import strategies as st

from probability.errors import DomainError
from probability.special import incomplete_beta, incomplete_gamma, incomplete_gamma_upper


GAMMA_CASES = [
    (0.5, 0.1), (0.5, 4.0), (1.0, 1.0), (2.5, 1.0), (2.5, 3.49), (2.5, 3.51),
    (10.0, 5.0), (10.0, 20.0), (100.0, 90.0), (100.0, 120.0), (0.01, 0.001),
]


@pytest.mark.parametrize("a, x", GAMMA_CASES)
def test_incomplete_gamma_matches_scipy(a, x):
    np.testing.assert_allclose(incomplete_gamma(a, x), sp.gammainc(a, x), rtol=1e-10, atol=1e-300)
    np.testing.assert_allclose(incomplete_gamma_upper(a, x), sp.gammaincc(a, x), rtol=1e-10, atol=1e-300)


def test_incomplete_gamma_endpoints():
    assert incomplete_gamma(3.0, 0.0) == 0.0
    assert incomplete_gamma(3.0, math.inf) == 1.0
    assert incomplete_gamma_upper(3.0, 0.0) == 1.0
    assert incomplete_gamma_upper(3.0, math.inf) == 0.0


def test_upper_incomplete_gamma_keeps_tail_precision():
    # 1 - P would round to 0 here
    np.testing.assert_allclose(incomplete_gamma_upper(2.0, 60.0), sp.gammaincc(2.0, 60.0), rtol=1e-10)
    assert incomplete_gamma_upper(2.0, 60.0) > 0.0


@given(st.floats(min_value=0.05, max_value=200.0), st.floats(min_value=0.0, max_value=400.0))
@settings(max_examples=200)
def test_lower_and_upper_gamma_sum_to_one(a, x):
    total = incomplete_gamma(a, x) + incomplete_gamma_upper(a, x)
    assert abs(total - 1.0) < 1e-12


BETA_CASES = [
    (0.5, 0.5, 0.3), (1.0, 1.0, 0.25), (2.0, 3.0, 0.4), (2.0, 3.0, 0.9),
    (10.0, 10.0, 0.5), (50.0, 3.0, 0.97), (0.1, 20.0, 1e-4), (200.0, 300.0, 0.41),
]


@pytest.mark.parametrize("a, b, x", BETA_CASES)
def test_incomplete_beta_matches_scipy(a, b, x):
    np.testing.assert_allclose(incomplete_beta(a, b, x), sp.betainc(a, b, x), rtol=1e-10, atol=1e-300)


def test_incomplete_beta_endpoints():
    assert incomplete_beta(2.0, 3.0, 0.0) == 0.0
    assert incomplete_beta(2.0, 3.0, 1.0) == 1.0


@given(
    st.floats(min_value=0.1, max_value=50.0),
    st.floats(min_value=0.1, max_value=50.0),
    st.floats(min_value=0.0, max_value=1.0),
)
@settings(max_examples=200)
def test_incomplete_beta_symmetry(a, b, x):
    lhs = incomplete_beta(a, b, x)
    rhs = 1.0 - incomplete_beta(b, a, 1.0 - x)
    assert 0.0 <= lhs <= 1.0
    assert abs(lhs - rhs) < 1e-10


@pytest.mark.parametrize(
    "call",
    [
        lambda: incomplete_gamma(0.0, 1.0),
        lambda: incomplete_gamma(1.0, -1.0),
        lambda: incomplete_gamma_upper(-2.0, 1.0),
        lambda: incomplete_beta(1.0, 1.0, 1.5),
        lambda: incomplete_beta(0.0, 1.0, 0.5),
        lambda: incomplete_beta(1.0, 1.0, math.nan),
    ],
)
def test_domain_errors(call):
    with pytest.raises(DomainError):
        call()
