""" PyTables table descriptions for data storage

    This module contains the table descriptions used to store generated
    Landau random numbers in a HDF5 file.

"""
import tables


class LandauSample(tables.IsDescription):

    """Store a single Landau random number.

    .. attribute:: id

        a unique identifier for the sample (only unique in this table)

    .. attribute:: uniform

        the uniform random number from which the sample was generated.
        Since sampling is deterministic given this number, the sample can
        always be regenerated from it.

    .. attribute:: value

        the Landau distributed random number, including the location and
        scale of the distribution.

    """
    id = tables.UInt32Col(pos=0)
    uniform = tables.Float64Col(pos=1)
    value = tables.Float64Col(pos=2)
