""" Landau probability density function

    Fast rational approximation of the Landau density, taken from the
    CERN program library routine DENLAN (G110):

        K.S. Kolbig and B. Schorr, A program package for the Landau
        distribution, Computer Phys. Comm. 31 (1984) 97-111.

    The real line of the standardized variable ``v = (x - location) /
    scale`` is split in eight regions.  Far in the left tail an
    asymptotic expansion is used, in the bulk a ratio of two polynomials
    in ``v`` and in the right tail a ratio of two polynomials in ``1 /
    v``.  The coefficients are fitted values and must not be changed.

    For the exact (and much slower) density see :mod:`landau.exact`.

"""
from functools import partial

from numpy import errstate, exp, inf, log, sqrt, vectorize
from numpy.polynomial.polynomial import polyval

#: Region boundaries of the standardized variable.
BOUNDARIES = (-5.5, -1., 1., 5., 12., 50., 300.)

P1 = (0.4259894875, -0.1249762550, 0.03984243700, -0.006298287635,
      0.001511162253)
Q1 = (1.0, -0.3388260629, 0.09594393323, -0.01608042283, 0.003778942063)

P2 = (0.1788541609, 0.1173957403, 0.01488850518, -0.001394989411,
      0.0001283617211)
Q2 = (1.0, 0.7428795082, 0.3153932961, 0.06694219548, 0.008790609714)

P3 = (0.1788544503, 0.09359161662, 0.006325387654, 0.00006611667319,
      -0.000002031049101)
Q3 = (1.0, 0.6097809921, 0.2560616665, 0.04746722384, 0.006957301675)

P4 = (0.9874054407, 118.6723273, 849.2794360, -743.7792444, 427.0262186)
Q4 = (1.0, 106.8615961, 337.6496214, 2016.712389, 1597.063511)

P5 = (1.003675074, 167.5702434, 4789.711289, 21217.86767, -22324.94910)
Q5 = (1.0, 156.9424537, 3745.310488, 9834.698876, 66924.28357)

P6 = (1.000827619, 664.9143136, 62972.92665, 475554.6998, -5743609.109)
Q6 = (1.0, 651.4101098, 56974.73333, 165917.4725, -2815759.939)

#: Asymptotic corrections for the far left and far right tail.
A1 = (0.04166666667, -0.01996527778, 0.02709538966)
A2 = (-1.845568670, -4.284640743)

#: 1 / sqrt(2 pi)
INV_SQRT_2PI = 0.3989422803


def standard_pdf(v):
    """The density of the standard Landau distribution

    :param v: standardized variable, as float.
    :return: probability density.

    """
    if v < -5.5:
        u = exp(v + 1.)
        if u < 1e-10:
            return 0.
        ue = exp(-1. / u)
        us = sqrt(u)
        return INV_SQRT_2PI * (ue / us) * (1. + polyval(u, A1) * u)
    elif v < -1:
        u = exp(-v - 1.)
        return exp(-u) * sqrt(u) * polyval(v, P1) / polyval(v, Q1)
    elif v < 1:
        return polyval(v, P2) / polyval(v, Q2)
    elif v < 5:
        return polyval(v, P3) / polyval(v, Q3)
    elif v < 12:
        u = 1. / v
        return u * u * polyval(u, P4) / polyval(u, Q4)
    elif v < 50:
        u = 1. / v
        return u * u * polyval(u, P5) / polyval(u, Q5)
    elif v < 300:
        u = 1. / v
        return u * u * polyval(u, P6) / polyval(u, Q6)
    elif v == inf:
        return 0.
    else:
        u = 1. / (v - v * log(v) / (v + 1.))
        return u * u * (1. + polyval(u, A2) * u)


@partial(vectorize, otypes=[float])
def pdf(x, scale=1., location=0.):
    """The Landau probability density function

    A non-positive scale is not a valid distribution, in that case 0 is
    returned instead of raising an exception.  Use
    :class:`~landau.distribution.Landau` to validate the parameters.

    :param x: value(s) at which to evaluate the density.
    :param scale: scale parameter of the distribution.
    :param location: location parameter of the distribution.
    :return: probability density.

    """
    if scale <= 0:
        return 0.
    return standard_pdf((x - location) / scale) / scale


def logpdf(x, scale=1., location=0.):
    """Natural logarithm of the Landau probability density function

    Where the density underflows to zero -inf is returned.

    """
    with errstate(divide='ignore'):
        return log(pdf(x, scale, location))
