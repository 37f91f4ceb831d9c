# -*- coding: utf-8 -*-
"""
Decorators used in mseedfast.

:copyright:
    The mseedfast Development Team
:license:
    GNU Lesser General Public License, Version 3
    (https://www.gnu.org/copyleft/lesser.html)
"""
import os

import decorator


@decorator.decorator
def read_buffer(func, *args, **kwargs):
    """
    Ensure the complete content of the first argument is passed as a bytes
    like object to the decorated function.

    The first argument may be a filename (str or :class:`pathlib.Path`), an
    open binary file-like object or an in-memory buffer (``bytes``,
    ``bytearray`` or ``memoryview``). File-like objects are read from their
    current position and rewound to it afterwards.

    :param func: callable whose first argument is treated as a buffer.
    :return: callable
    """
    first_arg = args[0]
    if isinstance(first_arg, (bytes, bytearray, memoryview)):
        return func(*args, **kwargs)
    if isinstance(first_arg, (str, os.PathLike)):
        if not os.path.exists(first_arg):
            msg = "File not found '%s'" % (first_arg,)
            raise IOError(msg)
        with open(first_arg, 'rb') as fh:
            data = fh.read()
        return func(data, *args[1:], **kwargs)
    if not hasattr(first_arg, 'read'):
        msg = "Expected a filename, a file-like object or a bytes buffer, " \
              "got %s" % type(first_arg).__name__
        raise TypeError(msg)
    position = first_arg.tell()
    data = first_arg.read()
    try:
        return func(data, *args[1:], **kwargs)
    finally:
        first_arg.seek(position, 0)
