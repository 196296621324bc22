import unittest
import warnings

from numpy import array, inf, isneginf, linspace, nextafter
from scipy import integrate

from landau import cumulative, density


class StandardPdfTests(unittest.TestCase):

    def assertRelativeEqual(self, actual, expected, rtol):
        self.assertLessEqual(abs(actual - expected), rtol * abs(expected),
                             '%r != %r within rtol %r' %
                             (actual, expected, rtol))

    def test_reference_values(self):
        """Compare to values from the CERNLIB DENLAN algorithm"""

        references = [(-5., 5.72996826789e-24),
                      (-3., 0.000673728615695),
                      (-2., 0.0439854784068),
                      (-.5, 0.177333547274),
                      (0., 0.1788541609),
                      (2., 0.104912989491),
                      (8., 0.0180902839362),
                      (20., 0.0030049793941),
                      (100., 0.000107611223912),
                      (500., 4.08571274238e-06),
                      (1000., 1.01205718507e-06)]
        for v, expected in references:
            self.assertRelativeEqual(density.standard_pdf(v), expected, 1e-9)

    def test_mpv(self):
        """The peak of the Landau should be around -0.22"""

        x = linspace(-.4, 0, 100)
        self.assertAlmostEqual(x[density.pdf(x).argmax()] + 0.222, 0, 2)

    def test_region_boundaries(self):
        """Both sides of every region boundary give nearly the same value"""

        for boundary in density.BOUNDARIES:
            below = density.standard_pdf(nextafter(boundary, -inf))
            above = density.standard_pdf(boundary)
            self.assertRelativeEqual(below, above, 1e-6)

    def test_positive(self):
        v = linspace(-20, 2000, 20001)
        self.assertTrue((density.pdf(v) >= 0).all())

    def test_far_left_tail(self):
        self.assertEqual(density.standard_pdf(-30.), 0.)
        self.assertEqual(density.standard_pdf(-inf), 0.)
        self.assertGreater(density.standard_pdf(-6.), 0.)

    def test_far_right_tail(self):
        """The density falls off as 1 / v ** 2"""

        for v in [1e3, 1e5, 1e8]:
            self.assertAlmostEqual(density.standard_pdf(v) * v ** 2, 1, 1)
        self.assertEqual(density.standard_pdf(inf), 0.)

    def test_normalization(self):
        """The integral of the density matches the distribution function"""

        with warnings.catch_warnings():
            warnings.simplefilter('ignore', integrate.IntegrationWarning)
            integral = integrate.quad(density.standard_pdf, -10, 1000,
                                      points=density.BOUNDARIES,
                                      limit=200)[0]
        expected = (cumulative.standard_cdf(1000.) -
                    cumulative.standard_cdf(-10.))
        self.assertAlmostEqual(integral, expected, 5)


class PdfTests(unittest.TestCase):

    def test_scalar(self):
        self.assertAlmostEqual(density.pdf(0.), 0.1788541609, 10)

    def test_array(self):
        x = array([-1., 0., 1.])
        result = density.pdf(x)
        self.assertEqual(result.shape, (3,))
        for xi, value in zip(x, result):
            self.assertEqual(value, density.standard_pdf(xi))

    def test_location_scale(self):
        """Density scales as p((x - location) / scale) / scale"""

        for x, scale, location in [(0., 2., 1.), (3., .5, -1.),
                                   (100., 10., 5.), (-4., 1.5, 2.)]:
            expected = density.standard_pdf((x - location) / scale) / scale
            self.assertAlmostEqual(density.pdf(x, scale, location),
                                   expected, 14)

    def test_non_positive_scale(self):
        self.assertEqual(density.pdf(0., 0.), 0.)
        self.assertEqual(density.pdf(0., -1.), 0.)
        self.assertEqual(density.pdf(5., -1., 5.), 0.)

    def test_logpdf(self):
        self.assertAlmostEqual(density.logpdf(2., 1., 1.),
                               -1.92959747, 6)
        self.assertTrue(isneginf(density.logpdf(-100.)))
        self.assertTrue(isneginf(density.logpdf(1., -1.)))


if __name__ == '__main__':
    unittest.main()
