import unittest

from mock import patch, sentinel
from numpy import inf, random

from landau import characteristic, cumulative, density, sampling
from landau.distribution import Landau


class LandauTests(unittest.TestCase):

    def setUp(self):
        self.landau = Landau(2., .5)

    def test_defaults(self):
        landau = Landau()
        self.assertEqual(landau.location, 0.)
        self.assertEqual(landau.scale, 1.)
        self.assertEqual(Landau(3.).params(), (3., 1.))

    def test_params(self):
        self.assertEqual(self.landau.location, 2.)
        self.assertEqual(self.landau.scale, .5)
        self.assertEqual(self.landau.params(), (2., .5))

    def test_promotion(self):
        landau = Landau(1, 2)
        self.assertIsInstance(landau.location, float)
        self.assertIsInstance(landau.scale, float)

    def test_invalid_scale(self):
        self.assertRaises(ValueError, Landau, 0., 0.)
        self.assertRaises(ValueError, Landau, 0., -1.)
        self.assertRaises(ValueError, Landau, 0., float('nan'))

    def test_unchecked_scale(self):
        landau = Landau(0., -1., check_args=False)
        self.assertEqual(landau.scale, -1.)
        self.assertEqual(landau.pdf(0.), 0.)

    def test_immutable(self):
        with self.assertRaises(AttributeError):
            self.landau.scale = 2.
        with self.assertRaises(AttributeError):
            self.landau.location = 2.

    def test_support(self):
        self.assertEqual(self.landau.support, (-inf, inf))
        self.assertEqual(self.landau.minimum, -inf)
        self.assertEqual(self.landau.maximum, inf)

    @patch.object(density, 'pdf')
    def test_pdf(self, mock_pdf):
        mock_pdf.return_value = sentinel.pdf
        self.assertIs(self.landau.pdf(sentinel.x), sentinel.pdf)
        mock_pdf.assert_called_once_with(sentinel.x, .5, 2.)

    @patch.object(cumulative, 'cdf')
    def test_cdf(self, mock_cdf):
        mock_cdf.return_value = sentinel.cdf
        self.assertIs(self.landau.cdf(sentinel.x), sentinel.cdf)
        mock_cdf.assert_called_once_with(sentinel.x, .5, 2.)

    @patch.object(characteristic, 'cf')
    def test_cf(self, mock_cf):
        mock_cf.return_value = sentinel.cf
        self.assertIs(self.landau.cf(sentinel.t), sentinel.cf)
        mock_cf.assert_called_once_with(sentinel.t, .5, 2.)

    @patch.object(sampling, 'sample')
    def test_sample(self, mock_sample):
        mock_sample.return_value = sentinel.sample
        self.assertIs(self.landau.sample(sentinel.u), sentinel.sample)
        mock_sample.assert_called_once_with(sentinel.u, .5, 2.)

    def test_values(self):
        self.assertAlmostEqual(self.landau.pdf(2.), 2 * 0.1788541609, 10)
        self.assertAlmostEqual(self.landau.logpdf(2.),
                               density.logpdf(2., .5, 2.), 14)
        self.assertAlmostEqual(self.landau.cdf(2.), 0.2868328584, 10)
        self.assertAlmostEqual(self.landau.sf(2.), 1 - 0.2868328584, 10)
        self.assertAlmostEqual(self.landau.ppf(.5), 2. + .5 * 1.35578, 10)
        self.assertAlmostEqual(self.landau.median(), 2. + .5 * 1.35578, 10)
        self.assertEqual(self.landau.cf(0.), 1.)

    def test_rvs(self):
        random.seed(1)
        values = self.landau.rvs(10)
        random.seed(1)
        self.assertEqual(list(values), list(sampling.rvs(10, .5, 2.)))
        self.assertIsInstance(self.landau.rvs(), float)

    def test_equality(self):
        self.assertEqual(self.landau, Landau(2, .5))
        self.assertNotEqual(self.landau, Landau(2., 1.))
        self.assertNotEqual(self.landau, (2., .5))
        self.assertEqual(hash(self.landau), hash(Landau(2., .5)))

    def test_repr(self):
        self.assertEqual(repr(self.landau), 'Landau(location=2.0, scale=0.5)')


if __name__ == '__main__':
    unittest.main()
