# -*- coding: utf-8 -*-
"""
mseedfast.io.mseed - fast pure numpy MiniSEED reader
====================================================
This module reads `MiniSEED
<https://ds.iris.edu/ds/nodes/dmc/data/formats/#miniseed>`_ archives (and
the data part of full SEED volumes) into continuous sample traces with
absolute timing. The whole archive is loaded into memory and all record
headers are parsed at once; the STEIM1 and STEIM2 decompression is
vectorised with numpy.

.. seealso::

    The format is defined in the
    `SEED Manual <https://www.fdsn.org/seed_manual/SEEDManual_V2.4.pdf>`_.

:copyright:
    The mseedfast Development Team
:license:
    GNU Lesser General Public License, Version 3
    (https://www.gnu.org/copyleft/lesser.html)

Supported subset
----------------

* one physical record length, one sample encoding and one header byte order
  per archive, all determined from the first record
* encodings ASCII (0), INT16 (1), INT32 (3), FLOAT32 (4), FLOAT64 (5),
  STEIM1 (10) and STEIM2 (11)
* only the data only blockette 1000 is interpreted
* records of one channel are expected in chronological order

Reading
-------

>>> from mseedfast import read  # doctest: +SKIP
>>> traces = read("/path/to/test.mseed")  # doctest: +SKIP
>>> print(traces[0])  # doctest: +SKIP
NL.HGN.00.BHZ | 2003-05-29T02:13:22.043400Z - ... | 40.0 Hz, 11947 samples

Errors and warnings
-------------------

Unrecoverable problems raise one of the exceptions below, in which case no
trace at all is returned. Records whose blockette 1000 can not be read are
decoded with default settings and a :class:`BlocketteFallback` warning.
"""
from mseedfast.core.util.exceptions import (MSeedFastException,
                                            MSeedFastReadingError)


class MSEEDError(MSeedFastException):
    pass


class FormatError(MSEEDError, MSeedFastReadingError):
    """
    Buffer size does not match the record length or no complete header.
    """
    pass


class EmptyArchive(MSEEDError, MSeedFastReadingError):
    pass


class InvalidSampleRate(MSEEDError, ValueError):
    pass


class UnsupportedEncoding(MSEEDError, MSeedFastReadingError):
    pass


class BlocketteFallback(UserWarning):
    """
    Blockette 1000 could not be read, defaults were used instead.
    """
    pass


class SteimIntegrityWarning(UserWarning):
    pass


class ChronologyWarning(UserWarning):
    pass


__all__ = ['MSEEDError', 'FormatError', 'EmptyArchive', 'InvalidSampleRate',
           'UnsupportedEncoding', 'BlocketteFallback',
           'SteimIntegrityWarning', 'ChronologyWarning']


if __name__ == '__main__':
    import doctest
    doctest.testmod(exclude_empty=True)
