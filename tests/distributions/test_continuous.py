# tests/distributions/test_continuous.py
import math

import numpy as np
import pytest

from probability.distributions import (
    Beta,
    Cauchy,
    ChiSquared,
    Exponential,
    FisherF,
    Gamma,
    LogNormal,
    Pert,
    StudentT,
    Triangular,
    Uniform,
)


def test_uniform_sample_is_affine_in_the_draw(fixed_source):
    src = fixed_source([0, 1 << 63])
    dist = Uniform(2.0, 6.0)
    assert dist.sample(src) == 2.0
    assert dist.sample(src) == 4.0


def test_exponential_quantile_closed_form():
    dist = Exponential(2.0)
    assert dist.quantile(0.5) == pytest.approx(math.log(2.0) / 2.0, rel=1e-15)
    assert dist.median() == pytest.approx(dist.quantile(0.5), rel=1e-15)


def test_triangular_with_mode_on_an_endpoint():
    left = Triangular(0.0, 2.0, 0.0)
    assert left.density(0.0) == 1.0
    assert left.cdf(0.0) == 0.0
    assert left.cdf(1.0) == pytest.approx(0.75)
    right = Triangular(0.0, 2.0, 2.0)
    assert right.density(2.0) == 1.0
    assert right.cdf(1.0) == pytest.approx(0.25)
    assert right.quantile(0.25) == pytest.approx(1.0)


def test_triangular_density_is_continuous_at_the_mode():
    dist = Triangular(0.0, 4.0, 1.0)
    eps = 1e-9
    assert dist.density(1.0 - eps) == pytest.approx(dist.density(1.0), rel=1e-6)
    assert dist.density(1.0 + eps) == pytest.approx(dist.density(1.0), rel=1e-6)
    assert dist.cdf(1.0) == pytest.approx(0.25)


def test_gamma_density_at_zero():
    assert Gamma(0.5).density(0.0) == math.inf
    assert Gamma(1.0, 2.0).density(0.0) == 0.5
    assert Gamma(3.0).density(0.0) == 0.0


def test_gamma_with_tiny_shape_has_a_quantile():
    dist = Gamma(0.05)
    x = dist.quantile(0.2)
    assert 0.0 < x
    assert dist.cdf(x) == pytest.approx(0.2, rel=1e-9)


def test_gamma_modes():
    assert Gamma(0.5).modes() == [0.0]
    assert Gamma(3.0, 2.0).modes() == [4.0]


def test_chi_squared_is_a_gamma():
    chi = ChiSquared(6.0)
    gamma = Gamma(3.0, 2.0)
    assert isinstance(chi, Gamma)
    assert chi.dof == 6.0
    assert chi.cdf(4.2) == gamma.cdf(4.2)
    assert repr(chi) == "ChiSquared(dof=6.0)"


@pytest.mark.parametrize(
    "alpha, beta, modes",
    [
        (2.0, 5.0, [0.2]),
        (0.5, 3.0, [0.0]),
        (3.0, 0.5, [1.0]),
        (0.5, 0.5, [0.0, 1.0]),
        (1.0, 3.0, [0.0]),
        (3.0, 1.0, [1.0]),
    ],
)
def test_beta_modes(alpha, beta, modes):
    assert Beta(alpha, beta).modes() == pytest.approx(modes)


def test_beta_uniform_has_no_single_mode():
    with pytest.raises(NotImplementedError):
        Beta(1.0, 1.0).modes()


def test_beta_lower_tail_quantile_of_a_small_shape():
    # cdf(x) = x**0.05 on [0, 1]
    assert Beta(0.05, 1.0).quantile(1e-6) == pytest.approx(1e-120, rel=1e-9, abs=0.0)
    assert Beta(0.01, 0.01).quantile(0.01) == pytest.approx(1.247e-170, rel=1e-2, abs=0.0)


def test_beta_quantile_is_one_when_no_float_below_one_reaches_p():
    dist = Beta(0.01, 0.01)
    assert dist.cdf(math.nextafter(1.0, 0.0)) < 0.7
    assert dist.quantile(0.7) == 1.0


def test_beta_endpoint_density():
    assert Beta(1.0, 3.0).density(0.0) == pytest.approx(3.0)
    assert Beta(0.5, 2.0).density(0.0) == math.inf
    assert Beta(2.0, 2.0).density(1.0) == 0.0


def test_pert_shape_parameters():
    dist = Pert(0.0, 3.0, 10.0)
    assert dist.alpha == pytest.approx(2.2)
    assert dist.beta == pytest.approx(3.8)
    assert dist.mean() == pytest.approx(11.0 / 3.0)
    assert dist.modes() == [3.0]
    assert dist.support == (0.0, 10.0)


def test_student_t_is_symmetric():
    dist = StudentT(4.0)
    for t in (0.1, 1.0, 2.0, 10.0):
        assert dist.cdf(-t) == pytest.approx(1.0 - dist.cdf(t), abs=1e-15)
        assert dist.quantile(dist.cdf(t)) == pytest.approx(t, rel=1e-7)
    assert dist.cdf(0.0) == 0.5


def test_student_t_with_one_dof_is_cauchy():
    t1 = StudentT(1.0)
    cauchy = Cauchy()
    x = np.array([-30.0, -1.0, 0.2, 4.0])
    np.testing.assert_allclose(t1.cdf(x), cauchy.cdf(x), rtol=1e-10)
    np.testing.assert_allclose(t1.density(x), cauchy.density(x), rtol=1e-10)


def test_fisher_f_density_at_zero():
    assert FisherF(1.0, 5.0).density(0.0) == math.inf
    assert FisherF(2.0, 5.0).density(0.0) == 1.0
    assert FisherF(4.0, 5.0).density(0.0) == 0.0


def test_fisher_f_mode():
    assert FisherF(6.0, 10.0).modes() == pytest.approx([(4.0 / 6.0) * (10.0 / 12.0)])
    assert FisherF(2.0, 10.0).modes() == [0.0]


def test_lognormal_is_exp_of_normal():
    dist = LogNormal(0.5, 0.3)
    assert dist.median() == pytest.approx(math.exp(0.5))
    assert dist.cdf(math.exp(0.5)) == pytest.approx(0.5, abs=1e-15)
    assert dist.density(0.0) == 0.0


def test_cauchy_quantile_tails():
    dist = Cauchy(0.0, 1.0)
    assert dist.quantile(0.25) == pytest.approx(-1.0, rel=1e-14)
    assert dist.quantile(0.75) == pytest.approx(1.0, rel=1e-14)
    assert dist.quantile(0.5) == 0.0
    assert dist.quantile(1e-10) == pytest.approx(-1.0 / math.tan(math.pi * 1e-10), rel=1e-12)
