""" Exact Landau density from its integral representations

    The Landau density is defined by a complex integral which can be
    rewritten as two real integrals, one suited for negative and one for
    positive values of the Landau parameter lambda.  These integrals are
    evaluated numerically, which is slow but accurate.  It is used to
    verify the fast approximation in :mod:`landau.density`.

    References are made to Fokkema2012, DOI: 10.3990/1.9789036534383.

"""
from numpy import arctan, cos, exp, inf, log, pi, sin, vectorize
from scipy import integrate

#: Below this value the density is negligible and taken as 0.
LOWER_CUTOFF = -10


@vectorize
def pdf(lf):
    """The Landau probability density function

    Fokkema2012, eq 2.13.

    :param lf: lambda parameter, the standardized variable.
    :return: probability density.

    """
    if lf < LOWER_CUTOFF:
        return 0.
    elif lf < 0:
        sf = exp(-lf - 1)
        integrant = integrate.quad(pdf_kernel, 0, inf, args=(sf,))[0]
        return 1 / pi * exp(-sf) * integrant
    else:
        integrant = integrate.quad(pdf_kernel2, 0, inf, args=(lf,))[0]
        return 1 / pi * integrant


def pdf_kernel(y, sf):
    return (exp(sf / 2 * log(1 + y ** 2 / sf ** 2) - y * arctan(y / sf)) *
            cos(.5 * y * log(1 + y ** 2 / sf ** 2) - y + sf * arctan(y / sf)))


def pdf_kernel2(u, lf):
    """The Landau kernel

    Fokkema2012, eq 2.13.

    """
    return exp(-lf * u) * u ** -u * sin(pi * u)
