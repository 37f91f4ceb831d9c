# -*- coding: utf-8 -*-
"""
mseedfast.io.sac - SAC poles and zeros support for mseedfast
============================================================
Reads the channel description and the pole zero table of SACPZ instrument
response files. The MiniSEED decoder does not depend on this module.

:copyright:
    The mseedfast Development Team
:license:
    GNU Lesser General Public License, Version 3
    (https://www.gnu.org/copyleft/lesser.html)

Reading
-------

>>> from mseedfast.io.sac import read_sacpz  # doctest: +SKIP
>>> pz = read_sacpz("/path/to/SAC_PZs_IU_ANMO_BHZ_00")  # doctest: +SKIP
>>> pz.network, pz.station, pz.constant  # doctest: +SKIP
('IU', 'ANMO', 3.052e+11)
"""
from .sacpz import SacPZ, get_coordinates, get_paz, get_station, read_sacpz


__all__ = ['SacPZ', 'read_sacpz', 'get_station', 'get_coordinates',
           'get_paz']
