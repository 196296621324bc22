"""Fast evaluation of and sampling from the Landau distribution

The Landau distribution governs the fluctuations in energy loss of charged
particles travelling through a thin layer of matter.  Its density and
distribution function have no closed form.  This package approximates them
with the piecewise rational functions of the CERN program library, gives
the closed-form characteristic function and generates random numbers by
inverting the distribution function.

The following modules are included:

:mod:`~landau.characteristic`
    characteristic function

:mod:`~landau.cli`
    command line scripts

:mod:`~landau.cumulative`
    cumulative distribution function

:mod:`~landau.density`
    probability density function

:mod:`~landau.distribution`
    the :class:`~landau.distribution.Landau` distribution object

:mod:`~landau.exact`
    exact but slow density from the integral representation

:mod:`~landau.sampling`
    quantile function and random numbers

:mod:`~landau.scintillator`
    energy loss in a thin scintillator

:mod:`~landau.simulation`
    store large numbers of random numbers in HDF5 files

:mod:`~landau.storage`
    storage-related definitions

:mod:`~landau.tests`
    code tests

:mod:`~landau.utils`
    commonly used functions such as a progressbar

"""

from . import (
    characteristic,
    cli,
    cumulative,
    density,
    distribution,
    exact,
    sampling,
    scintillator,
    simulation,
    storage,
    utils,
)
from .characteristic import cf
from .cumulative import cdf, sf
from .density import logpdf, pdf
from .distribution import Landau
from .sampling import ppf, rvs, sample
from .scintillator import Scintillator
from .simulation import LandauSimulation
from .tests import run_tests

__all__ = [
    'Landau',
    'LandauSimulation',
    'Scintillator',
    'cdf',
    'cf',
    'characteristic',
    'cli',
    'cumulative',
    'density',
    'distribution',
    'exact',
    'logpdf',
    'pdf',
    'ppf',
    'run_tests',
    'rvs',
    'sample',
    'sampling',
    'scintillator',
    'sf',
    'simulation',
    'storage',
    'utils',
]
