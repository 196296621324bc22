import unittest

from numpy import diff, inf, isnan, linspace, random
from scipy import stats

from landau import cumulative, sampling


class QuantileTableTests(unittest.TestCase):

    def test_table(self):
        table = sampling.QUANTILES
        self.assertIsInstance(table, tuple)
        self.assertEqual(len(table), 982)
        self.assertEqual(table[:5], (0.,) * 5)
        self.assertEqual(table[5], -2.244733)
        self.assertEqual(table[-1], 59.103894)
        self.assertTrue((diff(table[5:]) > 0).all())

    def test_table_values_are_quantiles(self):
        """Entry k is the quantile at probability (k + 1) / 1000"""

        for k in [5, 100, 286, 499, 750, 981]:
            self.assertAlmostEqual(
                cumulative.standard_cdf(sampling.QUANTILES[k]),
                (k + 1) / 1000., 5)


class StandardQuantileTests(unittest.TestCase):

    def test_table_points(self):
        """On the table grid the interpolation gives the table entries"""

        for z, expected in [(.125, -.926178), (.25, -.204641),
                            (.5, 1.35578), (.75, 4.458395),
                            (.875, 9.376233)]:
            self.assertAlmostEqual(sampling.standard_quantile(z), expected,
                                   12)

    def test_quadratic_interpolation(self):
        """Between table points the second differences are used"""

        f = sampling.QUANTILES
        linear = .5 * (f[61] + f[62])
        correction = -.25 * .5 * .5 * (f[63] - f[62] - f[61] + f[60])
        self.assertAlmostEqual(sampling.standard_quantile(.0625),
                               linear + correction, 12)
        self.assertAlmostEqual(sampling.standard_quantile(.0625),
                               -1.381965625, 9)

    def test_inverse_of_cdf(self):
        """All interpolation bands invert the distribution function"""

        for z in [.003, .0065, .0071, .05, .0699, .0701, .287, .3, .5,
                  .7995, .8005, .95, .98, .9805]:
            q = sampling.standard_quantile(z)
            self.assertAlmostEqual(cumulative.standard_cdf(q), z, 5)

    def test_left_tail(self):
        for z in [1e-6, 1e-5, 1e-4, .001, .006]:
            q = sampling.standard_quantile(z)
            self.assertLess(abs(cumulative.standard_cdf(q) - z), 1e-3 * z)

    def test_right_tail(self):
        for z in [.9815, .99, .995, .999, .9995, .99999, .999999]:
            q = sampling.standard_quantile(z)
            self.assertLess(abs(cumulative.sf(q) - (1 - z)),
                            1e-3 * (1 - z))

    def test_right_tail_formulas(self):
        u = 1 - .99
        expected = ((1.00060006 + 2.63991156e2 * u + 4.37320068e3 * u ** 2) /
                    ((1 + 2.57368075e2 * u + 3.41448018e3 * u ** 2) * u))
        self.assertAlmostEqual(sampling.standard_quantile(.99), expected, 9)
        self.assertAlmostEqual(sampling.standard_quantile(.99),
                               104.1557489, 6)

    def test_limits(self):
        self.assertEqual(sampling.standard_quantile(0.), -inf)
        self.assertEqual(sampling.standard_quantile(-.5), -inf)
        self.assertEqual(sampling.standard_quantile(1.), inf)
        self.assertEqual(sampling.standard_quantile(1.5), inf)
        self.assertTrue(isnan(sampling.standard_quantile(float('nan'))))

    def test_increasing(self):
        q = sampling.ppf(linspace(1e-4, 1 - 1e-4, 9999))
        self.assertTrue((diff(q) > 0).all())


class SampleTests(unittest.TestCase):

    def setUp(self):
        random.seed(1)

    def test_affine(self):
        """Location and scale are applied to the standard sample"""

        for uniform in [.001, .0405, .33, .5, .8123, .99, .9999]:
            standard = sampling.sample(uniform)
            for scale, location in [(2., 1.), (.5, -3.), (10., 100.)]:
                self.assertEqual(sampling.sample(uniform, scale, location),
                                 location + scale * standard)

    def test_non_positive_scale(self):
        self.assertEqual(sampling.sample(.5, 0.), 0.)
        self.assertEqual(sampling.ppf(.5, -1., 3.), 0.)

    def test_sample_is_ppf(self):
        for uniform in [.01, .5, .99]:
            self.assertEqual(sampling.sample(uniform, 2., 1.),
                             sampling.ppf(uniform, 2., 1.))

    def test_rvs_single(self):
        value = sampling.rvs()
        self.assertIsInstance(value, float)

    def test_rvs_uses_one_uniform_per_value(self):
        values = sampling.rvs(5, 2., 1.)
        random.seed(1)
        uniforms = random.random(5)
        self.assertEqual(list(values),
                         list(sampling.sample(uniforms, 2., 1.)))

    def test_rvs_shape(self):
        self.assertEqual(sampling.rvs((3, 4)).shape, (3, 4))

    def test_kolmogorov_smirnov(self):
        """The samples follow the distribution function"""

        for scale, location in [(1., 0.), (3., -2.)]:
            values = sampling.rvs(20000, scale, location)
            statistic, pvalue = stats.kstest(
                values, lambda x: cumulative.cdf(x, scale, location))
            self.assertGreater(pvalue, .001)

    def test_median(self):
        values = sampling.rvs(20000)
        self.assertAlmostEqual(sorted(values)[10000], 1.3558, delta=.15)


if __name__ == '__main__':
    unittest.main()
