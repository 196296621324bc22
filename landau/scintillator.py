""" Energy loss of charged particles in a thin scintillator

    The fluctuations in energy loss of particles travelling through a
    relatively thin layer of matter follow the Landau distribution.  This
    module maps energy losses in a HiSPARC-like plastic scintillator onto
    the Landau parameter lambda, and convolves the distribution with the
    Gaussian resolution of the detector.

    References are made to Fokkema2012, DOI: 10.3990/1.9789036534383.

"""
import warnings

from numpy import amax, amin, convolve, interp, linspace, log
from scipy import stats

from .cumulative import cdf
from .density import pdf
from .sampling import rvs


class Scintillator:

    """Landau energy loss in a scintillator

    The class attributes hold the properties of the scintillator and can
    be overridden in a subclass or on an instance.

    """

    thickness = .02  # m
    xi = 0.172018  # MeV, Fokkema2012, eq 2.12.
    epsilon = 3.10756e-11  # Fokkema2012, eq 2.11.
    delta = 2.97663  # Delta
    Euler = 0.577215665  # Euler-Mascheroni constant

    mev_scale = 1
    gauss_scale = 1

    # Fokkema2012, eq 2.10.
    _lf0 = log(xi) - log(epsilon) + 1 - Euler - delta

    full_domain = linspace(-100, 100, 1000)

    def landau_pdf(self, Delta):
        """The Landau energy loss distribution function

        Fokkema2012, eq 2.9, where lf is eq 2.10.

        :param Delta: Energy loss in the scintillator.
        :return: energy loss probability.

        """
        lf = self.lf(Delta)
        return pdf(lf) / self.xi

    def landau_cdf(self, Delta):
        """Probability of an energy loss smaller than Delta

        :param Delta: Energy loss in the scintillator.
        :return: probability.

        """
        return cdf(self.lf(Delta))

    def lf(self, Delta):
        """Calculate the lambda parameter

        Fokkema2012, eq 2.10.
        With additional shift by delta.

        :param Delta: Energy loss in the scintillator.
        :return: lambda parameter.

        """
        return Delta / self.xi - self._lf0

    def energy_loss(self, lf):
        """Calculate the energy loss for a lambda parameter

        Inverse of :meth:`lf`.

        :param lf: lambda parameter.
        :return: Energy loss in the scintillator.

        """
        return (lf + self._lf0) * self.xi

    def simulate_energy_loss(self, n=None):
        """Simulate energy losses of particles

        :param n: number of particles, if None a single float is
                  returned.
        :return: Energy loss(es) in the scintillator.

        """
        return self.energy_loss(rvs(n))

    def conv_landau_for_x(self, x, count_scale=1, mev_scale=None,
                          gauss_scale=None):
        """Landau convolved with Gaussian

        Fokkema2012, eq 5.4.

        The convolution is calculated on :attr:`full_domain` and
        interpolated.  Values of x outside that domain get the value at
        the edge of the domain, a warning is issued in that case.

        :param x: energy loss(es) for which to get the probability.
        :param count_scale: total number of counts.
        :param mev_scale: number of MeV per unit of x.
        :param gauss_scale: width of the normal distribution.
        :return: probability.

        """
        if mev_scale is None:
            mev_scale = self.mev_scale
        if gauss_scale is None:
            gauss_scale = self.gauss_scale

        resolution = stats.norm(scale=gauss_scale).pdf
        y_calc = count_scale * discrete_convolution(self.landau_pdf,
                                                    resolution,
                                                    self.full_domain)
        x_calc = self.full_domain / mev_scale

        if min(x_calc) > amin(x) or amax(x) > max(x_calc):
            warnings.warn('Energy losses outside of the convolution domain, '
                          'the result is clamped to the domain edges.')

        return interp(x, x_calc, y_calc)


def discrete_convolution(f, g, t):
    """Discrete convolution

    :param f,g: two functions that take one argument (t).
    :param t: values for which the functions will be evaluated, and the along
              which the convolution will be performed.
    :return: convolution of the two functions.

    """
    if abs(min(t) + max(t)) > 1e-6:
        raise RuntimeError("Range needs to be symmetrical around zero.")

    dt = t[1] - t[0]
    return dt * convolve(f(t), g(t), mode='same')
