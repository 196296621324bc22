"""Command line scripts

:func:`evaluate`
    print the density, distribution function or quantiles
:func:`simulate`
    store Landau random numbers in a HDF5 file

Both are installed as console scripts, see ``setup.py``.

"""
import argparse
import logging

import tables

from .distribution import Landau
from .simulation import LandauSimulation

logger = logging.getLogger('landau.cli')


def _add_distribution_arguments(parser):
    parser.add_argument('--location', type=float, default=0.,
                        help='location parameter of the distribution')
    parser.add_argument('--scale', type=float, default=1.,
                        help='scale parameter of the distribution, must be '
                             'positive')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='show debug messages')


def _setup_logging(verbose):
    logging.basicConfig(
        format='%(asctime)s %(name)s %(levelname)s: %(message)s',
        datefmt='%y%m%d_%H%M%S',
        level=logging.DEBUG if verbose else logging.INFO)


def _get_distribution(parser, args):
    try:
        return Landau(args.location, args.scale)
    except ValueError as exc:
        parser.error(str(exc))


def evaluate(argv=None):
    descr = """Evaluate the Landau distribution.  For each value the density
               and the cumulative probability are printed, or with --quantile
               the values are taken as probabilities and their quantiles are
               printed."""
    parser = argparse.ArgumentParser(description=descr)
    parser.add_argument('values', type=float, nargs='+',
                        help='values at which to evaluate the distribution')
    parser.add_argument('--quantile', action='store_true',
                        help='interpret the values as probabilities')
    _add_distribution_arguments(parser)
    args = parser.parse_args(argv)
    _setup_logging(args.verbose)

    distribution = _get_distribution(parser, args)
    logger.debug('Evaluating %r.', distribution)
    if args.quantile:
        print('%-14s %s' % ('probability', 'quantile'))
        for z in args.values:
            print('%-14g %.8g' % (z, float(distribution.ppf(z))))
    else:
        print('%-14s %-14s %s' % ('x', 'pdf', 'cdf'))
        for x in args.values:
            print('%-14g %-14.8g %.8g' % (x, float(distribution.pdf(x)),
                                          float(distribution.cdf(x))))


def simulate(argv=None):
    descr = """Generate Landau distributed random numbers and store them,
               together with the uniform random numbers they were generated
               from, in a table in a HDF5 file."""
    parser = argparse.ArgumentParser(description=descr)
    parser.add_argument('datafile', help='path of the (new) HDF5 file')
    parser.add_argument('-n', type=int, default=1000,
                        help='number of random numbers to generate')
    parser.add_argument('--group', default='/landau',
                        help='group in which the samples table is created')
    parser.add_argument('--seed', type=int, default=None,
                        help='seed for the random number generator')
    parser.add_argument('--no-progress', dest='progress',
                        action='store_false', help='hide the progressbar')
    _add_distribution_arguments(parser)
    args = parser.parse_args(argv)
    _setup_logging(args.verbose)

    distribution = _get_distribution(parser, args)
    with tables.open_file(args.datafile, 'a') as data:
        sim = LandauSimulation(data, args.group, args.n,
                               *distribution.params(), seed=args.seed,
                               progress=args.progress)
        sim.run()
