""" The Landau distribution as an object

    :class:`Landau` bundles the location and scale parameters and
    validates them.  The numerical work is done by the functions in
    :mod:`~landau.density`, :mod:`~landau.cumulative`,
    :mod:`~landau.characteristic` and :mod:`~landau.sampling`.

    Example usage::

        >>> from landau import Landau

        >>> landau = Landau(location=2., scale=.5)
        >>> landau.pdf([1., 2., 3.])
        >>> landau.rvs(1000)

"""
import numpy as np

from . import characteristic, cumulative, density, sampling


class Landau:

    """Landau distribution with location and scale parameters

    The density is ``p((x - location) / scale) / scale`` where ``p`` is
    the density of the standard Landau distribution, with

    .. math::

        p(x) = \\frac{1}{2 \\pi i} \\int_{c - i\\infty}^{c + i\\infty}
               e^{s \\log(s) + x s}\\, ds

    The mean and variance of the distribution are not defined.

    :param location: location parameter.
    :param scale: scale parameter, must be positive.
    :param check_args: if False the parameters are not validated.
    :raises ValueError: if the scale is not positive.

    """

    def __init__(self, location=0., scale=1., check_args=True):
        location = float(location)
        scale = float(scale)
        if check_args and not scale > 0:
            raise ValueError('Landau: the condition scale > 0 is not '
                             'satisfied (scale=%r).' % scale)
        self._location = location
        self._scale = scale

    @property
    def location(self):
        """Location parameter"""
        return self._location

    @property
    def scale(self):
        """Scale parameter"""
        return self._scale

    def params(self):
        """Get the parameters as (location, scale) tuple"""
        return (self._location, self._scale)

    #: The support of the distribution is the entire real line.
    minimum = -np.inf
    maximum = np.inf

    @property
    def support(self):
        return (self.minimum, self.maximum)

    def pdf(self, x):
        """Probability density function

        :param x: value or array of values.
        :return: probability density.

        """
        return density.pdf(x, self._scale, self._location)

    def logpdf(self, x):
        return density.logpdf(x, self._scale, self._location)

    def cdf(self, x):
        """Cumulative distribution function

        :param x: value or array of values.
        :return: probability to find a value below x.

        """
        return cumulative.cdf(x, self._scale, self._location)

    def sf(self, x):
        return cumulative.sf(x, self._scale, self._location)

    def ppf(self, z):
        """Quantile function, the inverse of the distribution function

        :param z: probability or array of probabilities.
        :return: value below which a fraction z of the distribution lies.

        """
        return sampling.ppf(z, self._scale, self._location)

    def median(self):
        return float(self.ppf(.5))

    def cf(self, t):
        """Characteristic function

        :param t: value or array of values.
        :return: complex value(s) of the characteristic function.

        """
        return characteristic.cf(t, self._scale, self._location)

    def sample(self, uniform_draw):
        """Convert uniform random number(s) into Landau random number(s)

        :param uniform_draw: uniform random number(s) in (0, 1).

        """
        return sampling.sample(uniform_draw, self._scale, self._location)

    def rvs(self, size=None):
        """Draw random numbers from this distribution

        :param size: number (or shape) of random numbers, if None a
                     single float is returned.

        """
        return sampling.rvs(size, self._scale, self._location)

    def __eq__(self, other):
        if not isinstance(other, Landau):
            return NotImplemented
        return self.params() == other.params()

    def __hash__(self):
        return hash(self.params())

    def __repr__(self):
        return ('%s(location=%r, scale=%r)' %
                (self.__class__.__name__, self._location, self._scale))
