""" Characteristic function of the Landau distribution

    Unlike the density and distribution functions the characteristic
    function has a closed form::

        phi(t) = exp(i t (location + scale (i sign(t) - 2 / pi ln|t|)))

    Note that this is the common parameterisation in which ``scale`` is
    the coefficient of ``|t|``.  The density of :mod:`landau.density`
    with scale s and location m has the characteristic function
    ``cf(t, pi / 2 * s, m - s * ln(s))``, see :func:`density_parameters`.

"""
from functools import partial

from numpy import exp, log, pi, sign, vectorize

TWO_INV_PI = 2. / pi


@partial(vectorize, otypes=[complex])
def cf(t, scale=1., location=0.):
    """The Landau characteristic function

    At t = 0 the logarithm is singular, but the limit is exactly 1.

    :param t: argument(s) of the characteristic function.
    :param scale: scale parameter of the distribution.
    :param location: location parameter of the distribution.
    :return: complex value of the characteristic function.

    """
    if t == 0:
        return complex(1., 0.)
    z = t * (location + scale * (sign(t) * 1j - TWO_INV_PI * log(abs(t))))
    return exp(1j * z)


def density_parameters(scale=1., location=0.):
    """Convert density parameters to characteristic function parameters

    :param scale,location: parameters as used by :func:`landau.density.pdf`.
    :return: scale and location for :func:`cf` such that it gives the
             Fourier transform of that density.

    """
    return pi / 2 * scale, location - scale * log(scale)
