import math
import unittest

import numpy as np

from probability.distributions import Normal
from probability.errors import DomainError
from probability.source import Xorshift128Plus


class TestNormal(unittest.TestCase):

    def setUp(self):
        self.mu = 1.5
        self.sigma = 2.5
        self.dist = Normal(mu=self.mu, sigma=self.sigma)
        # fix the source for reproducibility
        self.source = Xorshift128Plus((123, 456))

    def test_moments(self):
        self.assertEqual(self.dist.mean(), self.mu)
        self.assertEqual(self.dist.variance(), self.sigma ** 2)
        self.assertEqual(self.dist.std(), self.sigma)
        self.assertEqual(self.dist.median(), self.mu)
        self.assertEqual(self.dist.modes(), [self.mu])
        self.assertEqual(self.dist.skewness(), 0.0)
        self.assertEqual(self.dist.kurtosis(), 0.0)

    def test_density_log_density_cdf_shapes(self):
        scalar = 0.0
        arr1d = np.linspace(-1, 1, 5)
        arr2d = arr1d.reshape(5, 1)

        for fn in (self.dist.density, self.dist.log_density, self.dist.cdf):
            self.assertIsInstance(fn(scalar), float)
            self.assertEqual(fn(arr1d).shape, (5,))
            self.assertEqual(fn(arr2d).shape, (5, 1))

    def test_log_density_consistency(self):
        x = np.array([-2.0, 0.0, 2.0])
        np.testing.assert_allclose(self.dist.log_density(x), np.log(self.dist.density(x)), rtol=1e-12)

    def test_cdf_symmetry(self):
        for z in (0.1, 1.0, 3.0):
            lower = self.dist.cdf(self.mu - z * self.sigma)
            upper = self.dist.cdf(self.mu + z * self.sigma)
            self.assertAlmostEqual(lower + upper, 1.0, places=14)
        self.assertEqual(self.dist.cdf(self.mu), 0.5)

    def test_known_quantiles(self):
        std = Normal()
        self.assertAlmostEqual(std.quantile(0.975), 1.959963984540054, places=12)
        self.assertAlmostEqual(std.quantile(0.5), 0.0, places=15)
        self.assertAlmostEqual(std.quantile(1e-10), -6.361340902404056, places=9)

    def test_deep_lower_tail_keeps_precision(self):
        std = Normal()
        self.assertGreater(std.cdf(-37.0), 0.0)
        np.testing.assert_allclose(std.cdf(-10.0), 7.619853024160527e-24, rtol=1e-10)
        np.testing.assert_allclose(std.sf(10.0), 7.619853024160527e-24, rtol=1e-10)

    def test_inv_cdf_alias_and_errors(self):
        self.assertEqual(self.dist.inv_cdf(0.3), self.dist.quantile(0.3))
        self.assertEqual(self.dist.quantile(0.0), -math.inf)
        self.assertEqual(self.dist.quantile(1.0), math.inf)
        with self.assertRaises(DomainError):
            self.dist.quantile(1.5)
        with self.assertRaises(DomainError):
            self.dist.inv_cdf(np.array([0.2, -0.1]))

    def test_samples_shape_and_dtype(self):
        draws = self.dist.samples(self.source, 10)
        self.assertEqual(draws.shape, (10,))
        self.assertEqual(draws.dtype, np.float64)

    def test_entropy(self):
        expected = 0.5 * math.log(2 * math.pi * math.e * self.sigma ** 2)
        self.assertAlmostEqual(self.dist.entropy(), expected, places=12)


if __name__ == "__main__":
    unittest.main()
