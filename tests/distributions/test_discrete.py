# tests/distributions/test_discrete.py
import math

import numpy as np
import pytest
from scipy import stats

from probability.distributions import Bernoulli, Binomial, Categorical, Geometric, Poisson


def test_bernoulli_basics(fixed_source):
    dist = Bernoulli(0.25)
    assert dist.mass(1) == 0.25
    assert dist.mass(0) == 0.75
    assert dist.cdf(0.5) == 0.75
    assert dist.quantile(0.75) == 0
    assert dist.quantile(0.76) == 1
    assert dist.modes() == [0]
    src = fixed_source([0, (1 << 64) - 1])
    assert dist.sample(src) == 1
    assert dist.sample(src) == 0


def test_bernoulli_fair_coin_has_two_modes():
    assert Bernoulli(0.5).modes() == [0, 1]
    assert Bernoulli(0.5).median() == 0.5


def test_binomial_degenerate_cases(source):
    assert Binomial(0, 0.3).sample(source) == 0
    assert Binomial(7, 0.0).sample(source) == 0
    assert Binomial(7, 1.0).sample(source) == 7
    assert Binomial(7, 1.0).mass(7) == 1.0
    assert Binomial(7, 1.0).cdf(6) == 0.0
    assert Binomial(7, 0.0).cdf(0) == 1.0


def test_binomial_strategy_selection():
    assert Binomial(10, 0.5)._strategy == "inversion"
    assert Binomial(100, 0.95)._strategy == "inversion"
    assert Binomial(500, 0.5)._strategy == "trials"
    assert Binomial(100000, 0.4)._strategy == "search"


def test_binomial_large_n_quantile_matches_scipy():
    dist = Binomial(1_000_000, 0.3)
    ref = stats.binom(1_000_000, 0.3)
    probs = np.array([1e-6, 0.1, 0.5, 0.9, 1 - 1e-6])
    np.testing.assert_array_equal(dist.quantile(probs), ref.ppf(probs))


def test_binomial_modes():
    assert Binomial(10, 0.5).modes() == [5]
    assert Binomial(9, 0.5).modes() == [4, 5]
    assert Binomial(4, 1.0).modes() == [4]
    assert Binomial(4, 0.0).modes() == [0]


def test_poisson_quantile_far_in_the_tail():
    dist = Poisson(1e4)
    ref = stats.poisson(1e4)
    probs = np.array([1e-9, 0.5, 1 - 1e-9])
    np.testing.assert_array_equal(dist.quantile(probs), ref.ppf(probs))


def test_poisson_modes():
    assert Poisson(3.0).modes() == [2, 3]
    assert Poisson(3.4).modes() == [3]


def test_poisson_support_is_unbounded():
    dist = Poisson(2.0)
    assert dist.support == (0, math.inf)
    assert dist.quantile(1.0) == math.inf
    assert dist.quantile([0.5, 1.0]).dtype == np.float64


def test_geometric_counts_trials():
    dist = Geometric(0.5)
    assert dist.support[0] == 1
    assert dist.mass(0) == 0.0
    assert dist.mass(1) == 0.5
    assert dist.mass(3) == pytest.approx(0.125, rel=1e-15)
    assert dist.mean() == 2.0
    assert dist.quantile(0.5) == 1
    assert dist.quantile(0.51) == 2


def test_geometric_certain_success(source):
    dist = Geometric(1.0)
    assert dist.mass(1) == 1.0
    assert dist.cdf(1) == 1.0
    assert dist.quantile(0.3) == 1
    assert dist.sample(source) == 1


def test_categorical_skips_zero_mass_categories():
    dist = Categorical([0.0, 0.5, 0.0, 0.5])
    assert dist.quantile(1e-12) == 1
    assert dist.quantile(0.5) == 1
    assert dist.quantile(0.50001) == 3
    assert dist.modes() == [1, 3]


def test_categorical_probabilities_are_read_only():
    dist = Categorical([0.25, 0.75])
    with pytest.raises(ValueError):
        dist.probabilities[0] = 1.0


def test_categorical_accepts_column_vectors():
    dist = Categorical(np.array([[0.2], [0.8]]))
    assert dist.support == (0, 1)
    assert dist.mass(1) == 0.8


def test_discrete_cdf_evaluates_at_floor():
    dist = Binomial(10, 0.5)
    assert dist.cdf(4.7) == dist.cdf(4)
    assert dist.sf(4.7) == dist.sf(4)
