# -*- coding: utf-8 -*-
"""
Testing utilities for mseedfast.

Provides a small writer for synthetic MiniSEED records and STEIM1/STEIM2
encoders so that tests can build archives in memory.

:copyright:
    The mseedfast Development Team
:license:
    GNU Lesser General Public License, Version 3
    (https://www.gnu.org/copyleft/lesser.html)
"""
import datetime
from struct import pack

import numpy as np

from mseedfast.io.mseed.btime import BTime
from mseedfast.io.mseed.headers import (DATA_ONLY_BLOCKETTE,
                                        FIXED_HEADER_LENGTH,
                                        STEIM_FRAME_WORDS, Encoding)


# data offset used by all synthetic records (header + blockette 1000,
# padded to the first 64 byte frame boundary)
DATA_OFFSET = 64

# (differences per word, bits per difference, control code, dnib) in the
# order the encoders try them
STEIM1_PACKINGS = [(4, 8, 1, None), (2, 16, 2, None), (1, 32, 3, None)]
STEIM2_PACKINGS = [(7, 4, 3, 2), (6, 5, 3, 1), (5, 6, 3, 0), (4, 8, 1, None),
                   (3, 10, 2, 3), (2, 15, 2, 2), (1, 30, 2, 1)]

_STORED_TYPES = {
    Encoding.INT16: "i2",
    Encoding.INT32: "i4",
    Encoding.FLOAT32: "f4",
    Encoding.FLOAT64: "f8"}


def _fits(values, width):
    limit = 1 << (width - 1)
    return all(-limit <= v < limit for v in values)


def _pack_word(values, width, dnib):
    used_bits = 32 if dnib is None else 30
    if dnib == 2 and width == 4:
        used_bits = 28
    word = 0 if dnib is None else dnib << 30
    mask = (1 << width) - 1
    for k, value in enumerate(values):
        word |= (value & mask) << (used_bits - width * (k + 1))
    return word


def steim_words(differences, version=2):
    """
    Greedily pack differences into Steim data words.

    :return: list of ``(control code, word)`` tuples
    :raises ValueError: if a difference does not fit into the widest word.
    """
    packings = STEIM1_PACKINGS if version == 1 else STEIM2_PACKINGS
    differences = [int(d) for d in differences]
    result = []
    i = 0
    while i < len(differences):
        for count, width, code, dnib in packings:
            chunk = differences[i:i + count]
            if len(chunk) == count and _fits(chunk, width):
                break
        else:
            msg = "Difference %d can not be Steim%d encoded" % (
                differences[i], version)
            raise ValueError(msg)
        result.append((code, _pack_word(chunk, width, dnib)))
        i += count
    return result


def encode_steim(samples, version=2, byteorder='>', max_frames=None,
                 previous=None, xn=None):
    """
    Encode integer samples into Steim frames of one record.

    :type samples: list of int
    :param version: 1 for STEIM1, 2 for STEIM2.
    :param byteorder: Byte order of the written words.
    :param max_frames: Raise a ``ValueError`` if more frames are needed.
    :param previous: Last sample of the preceding record; the first
        difference is zero if not given.
    :param xn: Value written as reverse integration constant, defaults to
        the last sample.
    :rtype: bytes
    """
    samples = [int(s) for s in samples]
    if not samples:
        frames = [[0] * STEIM_FRAME_WORDS]
    else:
        first = 0 if previous is None else samples[0] - previous
        diffs = [first] + [b - a for a, b in zip(samples[:-1], samples[1:])]
        frames = [[0] * STEIM_FRAME_WORDS]
        frames[0][1] = samples[0] & 0xFFFFFFFF
        frames[0][2] = (samples[-1] if xn is None else xn) & 0xFFFFFFFF
        pos = 3
        for code, word in steim_words(diffs, version):
            if pos == STEIM_FRAME_WORDS:
                frames.append([0] * STEIM_FRAME_WORDS)
                pos = 1
            frames[-1][0] |= code << (30 - 2 * pos)
            frames[-1][pos] = word
            pos += 1
    if max_frames is not None and len(frames) > max_frames:
        msg = "%d samples need %d frames, only %d fit into the record" % (
            len(samples), len(frames), max_frames)
        raise ValueError(msg)
    return np.array(frames, dtype=byteorder + 'u4').tobytes()


def btime_from_timestamp(timestamp):
    """
    :class:`~mseedfast.io.mseed.btime.BTime` of a POSIX timestamp, rounded
    to 0.0001 s.
    """
    ticks = int(round(timestamp * 10000))
    seconds, fract = divmod(ticks, 10000)
    dt = datetime.datetime(1970, 1, 1) + datetime.timedelta(seconds=seconds)
    return BTime(dt.year, dt.timetuple().tm_yday, dt.hour, dt.minute,
                 dt.second, fract)


def make_record(samples, encoding=Encoding.STEIM2, network='XX',
                station='TEST', location='', channel='BHZ', dataquality='D',
                start=BTime(2020, 1, 0, 0, 0, 0), samp_rate_factor=100,
                samp_rate_mult=1, sequence_number=1, record_length=512,
                byteorder='>', word_order=None, blockette=True, npts=None,
                encoding_code=None, previous=None, xn=None,
                sequence_field=None):
    """
    Build the bytes of one synthetic MiniSEED data record.

    The fixed header is followed by a blockette 1000 at byte 48 (unless
    ``blockette`` is ``False``) and the samples start at byte 64.

    :param encoding: Encoding used to write ``samples``.
    :param encoding_code: Encoding number written into blockette 1000,
        defaults to ``encoding``. Allows writing unsupported codes.
    :param word_order: Byte order of the samples, defaults to ``byteorder``.
    :param npts: Sample count written into the header, defaults to the
        number of samples.
    :param sequence_field: Raw six byte sequence number field, overrides
        ``sequence_number``.
    :rtype: bytes
    """
    encoding = Encoding(encoding)
    if word_order is None:
        word_order = byteorder
    if npts is None:
        npts = len(samples)
    if encoding_code is None:
        encoding_code = int(encoding)
    if sequence_field is None:
        sequence_field = ('%06d' % sequence_number).encode('ascii')

    max_frames = (record_length - DATA_OFFSET) // 64
    if encoding.is_steim:
        payload = encode_steim(samples, 1 if encoding == Encoding.STEIM1
                               else 2, word_order, max_frames=max_frames,
                               previous=previous, xn=xn)
    elif encoding == Encoding.TEXT:
        payload = bytes(samples)
    else:
        payload = np.asarray(
            samples, dtype=word_order + _STORED_TYPES[encoding]).tobytes()

    header = pack(
        '%s6scc5s2s3s2sHHBBBBHHhhBBBBiHH' % byteorder,
        sequence_field, dataquality.encode('ascii'), b' ',
        station.ljust(5).encode('ascii'), location.ljust(2).encode('ascii'),
        channel.ljust(3).encode('ascii'), network.ljust(2).encode('ascii'),
        start.year, start.julday, start.hour, start.minute, start.second, 0,
        start.fract, npts, samp_rate_factor, samp_rate_mult, 0, 0, 0,
        1 if blockette else 0, 0, DATA_OFFSET if npts else 0,
        FIXED_HEADER_LENGTH if blockette else 0)
    if blockette:
        exponent = record_length.bit_length() - 1
        header += pack('%sHHBBBx' % byteorder, DATA_ONLY_BLOCKETTE, 0,
                       encoding_code, 1 if word_order == '>' else 0,
                       exponent)
    header = header.ljust(DATA_OFFSET, b'\x00')
    record = header + payload
    if len(record) > record_length:
        msg = "%d samples do not fit into a %d byte record" % (
            len(samples), record_length)
        raise ValueError(msg)
    return record.ljust(record_length, b'\x00')


def make_channel_records(samples, samples_per_record,
                         starttime=1577836800.0, sampling_rate=100.0,
                         sequence_number=1, **kwargs):
    """
    Split samples into consecutive records of one channel.

    Record start times follow from ``starttime`` and ``sampling_rate``; the
    rate is written as an integer factor with multiplier 1 (or as
    ``-1 / rate`` for rates below 1 Hz). Remaining keyword arguments are
    passed to :func:`make_record`.

    :rtype: list of bytes
    """
    if sampling_rate >= 1:
        factor, mult = int(round(sampling_rate)), 1
    else:
        factor, mult = -int(round(1.0 / sampling_rate)), 1
    records = []
    previous = None
    encoding = Encoding(kwargs.get('encoding', Encoding.STEIM2))
    for i, offset in enumerate(range(0, len(samples), samples_per_record)):
        chunk = samples[offset:offset + samples_per_record]
        start = btime_from_timestamp(starttime + offset / sampling_rate)
        if encoding.is_steim:
            kwargs['previous'] = previous
        records.append(make_record(
            chunk, start=start, samp_rate_factor=factor,
            samp_rate_mult=mult, sequence_number=sequence_number + i,
            **kwargs))
        previous = int(chunk[-1]) if encoding.is_steim else None
    return records


def make_archive(*records):
    """
    Concatenate records (or lists of records) into one archive.
    """
    parts = []
    for rec in records:
        if isinstance(rec, (bytes, bytearray)):
            parts.append(bytes(rec))
        else:
            parts.extend(bytes(r) for r in rec)
    return b''.join(parts)


__all__ = ['encode_steim', 'steim_words', 'make_record',
           'make_channel_records', 'make_archive', 'btime_from_timestamp']
