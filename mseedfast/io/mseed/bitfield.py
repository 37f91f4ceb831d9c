# -*- coding: utf-8 -*-
"""
Byte and bit field primitives.

All routines work on numpy arrays so that whole archives or channel runs can
be handled in one call.
"""
import numpy as np


def read_uint(buffer, offset, size, byteorder):
    """
    Read an unsigned integer of ``size`` bytes from a byte buffer.

    >>> read_uint(b'\\x07\\xe4', 0, 2, '>')
    2020
    >>> read_uint(b'\\x07\\xe4', 0, 2, '<')
    58375
    """
    return int.from_bytes(bytes(buffer[offset:offset + size]),
                          'big' if byteorder == '>' else 'little')


def words(buffer, byteorder):
    """
    View a byte buffer as unsigned 32 bit words of the given byte order.

    Trailing bytes that do not fill a complete word are ignored.
    """
    buffer = np.frombuffer(buffer, dtype=np.uint8)
    nwords = len(buffer) // 4
    return buffer[:nwords * 4].view(byteorder + 'u4')


def sign_extend(values, width):
    """
    Interpret the low ``width`` bits of ``values`` as two's complement.

    >>> sign_extend(np.array([0xFFFFFFFF, 0x7F, 0x80], dtype=np.uint32), 32)
    array([ -1, 127, 128])
    >>> sign_extend(np.array([0x3F, 0x1F], dtype=np.uint32), 6)
    array([-1, 31])
    """
    if not 1 <= width <= 32:
        raise ValueError("Bit width must be between 1 and 32, got %d"
                         % width)
    mask = (1 << width) - 1
    values = np.asarray(values).astype(np.int64) & mask
    sign = (values >> (width - 1)) & 1
    return values - (sign << width)


def split_signed(values, width, count, used_bits=32):
    """
    Split 32 bit words into ``count`` signed sub fields of ``width`` bits.

    The sub fields are taken most significant first from the lowest
    ``used_bits`` bits of every word; bits above ``used_bits`` are ignored.

    :type values: :class:`numpy.ndarray`
    :param values: 1-D array of unsigned 32 bit words.
    :rtype: :class:`numpy.ndarray`
    :return: int64 array of shape ``(len(values), count)``.

    >>> split_signed(np.array([0x01FF7F80], dtype=np.uint32), 8, 4)
    array([[   1,   -1,  127, -128]])
    >>> split_signed(np.array([0x7FFFFFFF], dtype=np.uint32), 15, 2, 30)
    array([[-1, -1]])
    """
    if width * count > used_bits or used_bits > 32:
        msg = ("%d sub fields of %d bits do not fit into %d bits"
               % (count, width, used_bits))
        raise ValueError(msg)
    values = np.asarray(values).astype(np.int64)
    shifts = used_bits - width * np.arange(1, count + 1, dtype=np.int64)
    fields = values[:, np.newaxis] >> shifts[np.newaxis, :]
    return sign_extend(fields, width)


def split_unsigned(values, width, count, used_bits=32):
    """
    Unsigned counterpart of :func:`split_signed`.

    >>> split_unsigned(np.array([0xE4000000], dtype=np.uint32), 2, 3)
    array([[3, 2, 1]])
    """
    if width * count > used_bits or used_bits > 32:
        msg = ("%d sub fields of %d bits do not fit into %d bits"
               % (count, width, used_bits))
        raise ValueError(msg)
    values = np.asarray(values).astype(np.int64)
    shifts = used_bits - width * np.arange(1, count + 1, dtype=np.int64)
    return (values[:, np.newaxis] >> shifts[np.newaxis, :]) & \
        ((1 << width) - 1)
