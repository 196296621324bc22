"""Generate large numbers of Landau random numbers

The generated numbers are stored in a PyTables table, together with the
uniform random numbers they were generated from.  The parameters of the
distribution are stored as attributes of the table.

Example usage::

    >>> import tables

    >>> from landau.simulation import LandauSimulation

    >>> data = tables.open_file('/tmp/test_landau_simulation.h5', 'w')

    >>> sim = LandauSimulation(data, '/simulations/this_run', N=10000,
    ...                        location=2., scale=.5, seed=42)
    >>> sim.run()

"""
import logging

import numpy as np

from . import storage
from .distribution import Landau
from .utils import pbar

logger = logging.getLogger('landau.simulation')


class LandauSimulation:

    """Sample the Landau distribution and store the results.

    :param data: writeable PyTables file handle.
    :param output_path: path (as string) to the PyTables group (need not
                        exist) in which the result table will be created.
    :param N: number of random numbers to generate.
    :param location,scale: parameters of the Landau distribution.
    :param seed: seed for the pseudo-random number generator.
    :param progress: if True, show a progressbar while simulating.
    :raises ValueError: if the scale is not positive.

    """

    def __init__(self, data, output_path='/', N=1, location=0., scale=1.,
                 seed=None, progress=True):
        self.data = data
        self.output_path = output_path
        self.N = N
        self.distribution = Landau(location, scale)
        self.seed = seed
        self.progress = progress

        self._prepare_output_tables()

        if seed is not None:
            np.random.seed(seed)

    def _prepare_output_tables(self):
        """Prepare output table in the output data file.

        The group and table will be created in the output_path.

        :raises tables.NodeError: If the table already exists.
        :raises tables.FileModeError: If the datafile is not writeable.

        """
        self.samples = self.data.create_table(
            self.output_path, 'samples', storage.LandauSample,
            expectedrows=self.N, createparents=True)
        location, scale = self.distribution.params()
        self.samples._v_attrs.location = location
        self.samples._v_attrs.scale = scale
        self.samples._v_attrs.N = self.N
        self.samples._v_attrs.seed = self.seed

    def run(self):
        """Run the simulation."""

        logger.info('Generating %d samples of %r in %s.', self.N,
                    self.distribution, self.samples._v_pathname)
        for sample_id, uniform in enumerate(self.generate_uniform_draws()):
            value = float(self.distribution.sample(uniform))
            self.store_sample(sample_id, uniform, value)
        self.samples.flush()
        logger.info('Finished generating samples.')

    def generate_uniform_draws(self):
        """Generate the uniform random numbers, one per sample"""

        for _ in pbar(range(self.N), show=self.progress):
            yield np.random.random()

    def store_sample(self, sample_id, uniform, value):
        """Store a single sample

        :param sample_id: index of the sample.
        :param uniform: the uniform random number used.
        :param value: the resulting Landau random number.

        """
        row = self.samples.row
        row['id'] = sample_id
        row['uniform'] = uniform
        row['value'] = value
        row.append()

    def __repr__(self):
        return ('<%s, output_path: %r, N: %r, distribution: %r>' %
                (self.__class__.__name__, self.output_path, self.N,
                 self.distribution))
