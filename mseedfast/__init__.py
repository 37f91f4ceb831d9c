# -*- coding: utf-8 -*-
"""
mseedfast: fast MiniSEED decoding with numpy
============================================

mseedfast reads MiniSEED archives into continuous sample traces with
absolute per-sample timing. All record headers of an archive are parsed in
one pass and the STEIM1/STEIM2 decompression is vectorised with numpy.

>>> from mseedfast import read  # doctest: +SKIP
>>> for tr in read("/path/to/archive.mseed"):  # doctest: +SKIP
...     print(tr.id, tr.sampling_rate, len(tr))

:copyright:
    The mseedfast Development Team
:license:
    GNU Lesser General Public License, Version 3
    (https://www.gnu.org/copyleft/lesser.html)
"""
__version__ = "0.1.0"

from mseedfast.core.trace import DecodedTrace  # NOQA
from mseedfast.core.util.exceptions import (  # NOQA
    MSeedFastException, MSeedFastReadingError)
from mseedfast.io.mseed.core import read_mseed as read  # NOQA


__all__ = ["__version__", "read", "DecodedTrace", "MSeedFastException",
           "MSeedFastReadingError"]
