# -*- coding: utf-8 -*-
"""
mseedfast.core - Format independent objects of mseedfast
========================================================

This package contains the :class:`~mseedfast.core.trace.DecodedTrace` class
returned by the readers and shared utilities such as the exception base
classes.

:copyright:
    The mseedfast Development Team
:license:
    GNU Lesser General Public License, Version 3
    (https://www.gnu.org/copyleft/lesser.html)
"""
from mseedfast.core.trace import DecodedTrace


__all__ = ['DecodedTrace']
