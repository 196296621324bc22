""" Landau cumulative distribution function

    Rational approximation of the Landau distribution function from the
    CERN program library routine DISLAN (G110), see Kolbig and Schorr,
    Computer Phys. Comm. 31 (1984) 97-111.

    The fit is independent of the one for the density in
    :mod:`landau.density`.  Note that the fourth region ends at ``v = 4``
    instead of ``v = 5``.

"""
from functools import partial

from numpy import exp, inf, log, sqrt, vectorize
from numpy.polynomial.polynomial import polyval

#: Region boundaries of the standardized variable.
BOUNDARIES = (-5.5, -1., 1., 4., 12., 50., 300.)

P1 = (0.2514091491, -0.06250580444, 0.01458381230, -0.002108817737,
      0.0007411247290)
Q1 = (1.0, -0.005571175625, 0.06225310236, -0.003137378427,
      0.001931496439)

P2 = (0.2868328584, 0.3564363231, 0.1523518695, 0.02251304883)
Q2 = (1.0, 0.6191136137, 0.1720721448, 0.02278594771)

P3 = (0.2868329066, 0.3003828436, 0.09950951941, 0.008733827185)
Q3 = (1.0, 0.4237190502, 0.1095631512, 0.008693851567)

P4 = (1.000351630, 4.503592498, 10.85883880, 7.536052269)
Q4 = (1.0, 5.539969678, 19.33581111, 27.21321508)

P5 = (1.000006517, 49.09414111, 85.05544753, 153.2153455)
Q5 = (1.0, 50.09928881, 139.9819104, 420.0002909)

P6 = (1.000000983, 132.9868456, 916.2149244, -960.5054274)
Q6 = (1.0, 133.9887843, 1055.990413, 553.2224619)

A1 = (-0.4583333333, 0.6675347222, -1.641741416)
A2 = (1.0, -0.4227843351, -2.043403138)

INV_SQRT_2PI = 0.3989422803


def standard_cdf(v):
    """The distribution function of the standard Landau distribution

    :param v: standardized variable, as float.
    :return: probability to find a value below v.

    """
    if v < -5.5:
        u = exp(v + 1.)
        if u < 1e-10:
            return 0.
        return (INV_SQRT_2PI * exp(-1. / u) * sqrt(u) *
                (1. + polyval(u, A1) * u))
    elif v < -1:
        u = exp(-v - 1.)
        return (exp(-u) / sqrt(u)) * polyval(v, P1) / polyval(v, Q1)
    elif v < 1:
        return polyval(v, P2) / polyval(v, Q2)
    elif v < 4:
        return polyval(v, P3) / polyval(v, Q3)
    elif v < 12:
        u = 1. / v
        return polyval(u, P4) / polyval(u, Q4)
    elif v < 50:
        u = 1. / v
        return polyval(u, P5) / polyval(u, Q5)
    elif v < 300:
        u = 1. / v
        return polyval(u, P6) / polyval(u, Q6)
    elif v == inf:
        return 1.
    else:
        u = 1. / (v - v * log(v) / (v + 1.))
        return 1. - polyval(u, A2) * u


@partial(vectorize, otypes=[float])
def cdf(x, scale=1., location=0.):
    """The Landau cumulative distribution function

    :param x: value(s) at which to evaluate the distribution function.
    :param scale: scale parameter of the distribution, must be positive.
    :param location: location parameter of the distribution.
    :return: probability to find a value below x.

    """
    return standard_cdf((x - location) / scale)


def sf(x, scale=1., location=0.):
    """Survival function, the probability to find a value above x"""

    return 1. - cdf(x, scale, location)
