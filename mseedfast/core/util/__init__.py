# -*- coding: utf-8 -*-
"""
Various utilities for mseedfast

:copyright:
    The mseedfast Development Team
:license:
    GNU Lesser General Public License, Version 3
    (https://www.gnu.org/copyleft/lesser.html)
"""
from mseedfast.core.util.decorator import read_buffer
from mseedfast.core.util.exceptions import (MSeedFastException,
                                            MSeedFastReadingError)


__all__ = ['read_buffer', 'MSeedFastException', 'MSeedFastReadingError']
