# -*- coding: utf-8 -*-
"""
Base exception types used in mseedfast.

:copyright:
    The mseedfast Development Team
:license:
    GNU Lesser General Public License, Version 3
    (https://www.gnu.org/copyleft/lesser.html)
"""


class MSeedFastException(Exception):
    pass


class MSeedFastReadingError(MSeedFastException):
    pass
