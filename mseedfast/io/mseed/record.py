# -*- coding: utf-8 -*-
"""
Record framing and header parsing.

An archive is a sequence of fixed size physical records. The header byte
order, the record length and the sample encoding are determined once from
the first record and stored in an :class:`ArchiveFormat` which is then
passed to everything that parses or decodes records.
"""
import logging
import warnings
from collections import namedtuple
from struct import unpack_from

import numpy as np

from . import (BlocketteFallback, EmptyArchive, FormatError,
               InvalidSampleRate, UnsupportedEncoding)
from .bitfield import read_uint
from .btime import BTime
from .headers import (DATA_ONLY_BLOCKETTE, DATA_ONLY_BLOCKETTE_LENGTH,
                      DEFAULT_BYTEORDER, DEFAULT_ENCODING,
                      DEFAULT_RECORD_LENGTH, ENDIAN,
                      ENCODINGS, FIXED_HEADER_LENGTH, UNSUPPORTED_ENCODINGS,
                      VALID_RECORD_LENGTH_EXPONENTS, WORD_ORDER, YEAR_OFFSET,
                      YEAR_THRESHOLD, Encoding, fixed_header_dtype)


logger = logging.getLogger('mseedfast.io.mseed.record')


ArchiveFormat = namedtuple(
    'ArchiveFormat', 'byteorder word_order record_length encoding fallback')

PhysicalRecord = namedtuple(
    'PhysicalRecord',
    ['index', 'offset', 'sequence_number', 'dataquality', 'station',
     'location', 'channel', 'network', 'start', 'npts', 'samp_rate_factor',
     'samp_rate_mult', 'sampling_rate', 'activity_flags', 'io_clock_flags',
     'data_quality_flags', 'number_of_blockettes', 'time_correction',
     'begin_data', 'first_blockette', 'encoding', 'word_order',
     'record_length', 'blockette_fallback'])

DataOnlyBlockette = namedtuple(
    'DataOnlyBlockette', 'encoding word_order record_length')


class _BlocketteError(Exception):
    pass


def detect_byteorder(buffer):
    """
    Guess the byte order of the fixed header from the BTIME year.

    The year is read with the default (big endian) byte order. A value that
    is not a plausible year means the archive was written little endian.

    >>> detect_byteorder(b'\\x00' * 20 + b'\\x07\\xe4' + b'\\x00' * 26)
    '>'
    >>> detect_byteorder(b'\\x00' * 20 + b'\\xe4\\x07' + b'\\x00' * 26)
    '<'
    """
    if len(buffer) < FIXED_HEADER_LENGTH:
        msg = ("Buffer of %d bytes is too small to contain a data record "
               "header." % len(buffer))
        raise FormatError(msg)
    year = read_uint(buffer, YEAR_OFFSET, 2, DEFAULT_BYTEORDER)
    if year >= YEAR_THRESHOLD:
        return '<' if DEFAULT_BYTEORDER == '>' else '>'
    return DEFAULT_BYTEORDER


def calculate_sampling_rate(samp_rate_factor, samp_rate_mult):
    """
    Calculate the nominal sampling rate from the sample rate factor and
    multiplier of the fixed header. See the SEED Manual page 100 for
    details.

    >>> calculate_sampling_rate(100, 1)
    100.0
    >>> calculate_sampling_rate(-10, 1)
    0.1
    >>> calculate_sampling_rate(-10, -10)
    0.01

    :raises InvalidSampleRate: if the factor is zero, which would need a
        division by zero.
    """
    if samp_rate_factor > 0 and samp_rate_mult >= 0:
        return float(samp_rate_factor * samp_rate_mult)
    elif samp_rate_factor > 0 and samp_rate_mult < 0:
        return -1.0 * float(samp_rate_factor) / float(samp_rate_mult)
    elif samp_rate_factor < 0 and samp_rate_mult >= 0:
        return -1.0 * float(samp_rate_mult) / float(samp_rate_factor)
    elif samp_rate_factor < 0 and samp_rate_mult < 0:
        return 1.0 / float(samp_rate_factor * samp_rate_mult)
    msg = ("Sample rate factor %d with multiplier %d does not give a valid "
           "sampling rate." % (samp_rate_factor, samp_rate_mult))
    raise InvalidSampleRate(msg)


def parse_data_only_blockette(record, first_blockette, byteorder):
    """
    Search the blockette chain of one record for blockette 1000.

    :type record: bytes-like
    :param record: The bytes of one physical record.
    :raises _BlocketteError: if the blockette is missing or malformed.
    """
    blkt_offset = first_blockette
    visited = set()
    while blkt_offset:
        if blkt_offset < FIXED_HEADER_LENGTH or \
                blkt_offset + 4 > len(record):
            msg = 'Blockette offset %d outside of the record' % blkt_offset
            raise _BlocketteError(msg)
        if blkt_offset in visited:
            msg = 'Blockette chain loops at offset %d' % blkt_offset
            raise _BlocketteError(msg)
        visited.add(blkt_offset)
        blkt_type, next_blkt = unpack_from('%sHH' % byteorder, record,
                                           blkt_offset)
        if blkt_type == DATA_ONLY_BLOCKETTE:
            if blkt_offset + DATA_ONLY_BLOCKETTE_LENGTH > len(record):
                raise _BlocketteError('Truncated blockette 1000')
            encoding, word_order, exponent = unpack_from(
                '%sBBB' % byteorder, record, blkt_offset + 4)
            if exponent not in VALID_RECORD_LENGTH_EXPONENTS:
                msg = 'Invalid record length exponent %d' % exponent
                raise _BlocketteError(msg)
            return DataOnlyBlockette(encoding, word_order, 2 ** exponent)
        blkt_offset = next_blkt
    raise _BlocketteError('No blockette 1000 found')


def read_data_only_blockette(record, first_blockette, byteorder, index=0):
    """
    Like :func:`parse_data_only_blockette` but substitutes the defaults
    (STEIM2, 4096 byte records) together with a
    :class:`~mseedfast.io.mseed.BlocketteFallback` warning when the
    blockette can not be read. The samples of such a record are then read
    with the header byte order.

    :returns: tuple of :class:`DataOnlyBlockette` and a bool telling if the
        defaults were used.
    """
    try:
        return parse_data_only_blockette(record, first_blockette,
                                         byteorder), False
    except _BlocketteError as e:
        msg = ("Cannot read blockette 1000 of record %d (%s). Assuming "
               "STEIM2 encoding, %d byte records and samples in header "
               "byte order." % (index, str(e), DEFAULT_RECORD_LENGTH))
        warnings.warn(msg, BlocketteFallback)
        return DataOnlyBlockette(DEFAULT_ENCODING, WORD_ORDER[byteorder],
                                 DEFAULT_RECORD_LENGTH), True


def _check_encoding(encoding):
    if encoding in ENCODINGS:
        return Encoding(encoding)
    name = UNSUPPORTED_ENCODINGS.get(encoding, "unknown")
    msg = "Encoding %d (%s) is not supported." % (encoding, name)
    raise UnsupportedEncoding(msg)


def _word_order(blockette, byteorder):
    try:
        return ENDIAN[blockette.word_order]
    except KeyError:
        msg = ('Invalid word order "%s" in blockette 1000. Using the '
               'header byte order instead.') % str(blockette.word_order)
        warnings.warn(msg, BlocketteFallback)
        return byteorder


def detect_archive_format(buffer, byteorder=None, check_size=True):
    """
    Determine byte order, record length and encoding from the first record.

    :type buffer: bytes-like
    :param buffer: The complete archive.
    :type byteorder: str, optional
    :param byteorder: ``'>'`` or ``'<'`` to skip the byte order detection.
    :type check_size: bool, optional
    :param check_size: Fail if the buffer is not a whole number of records.
    :rtype: :class:`ArchiveFormat`
    """
    if not len(buffer):
        raise EmptyArchive("Archive is empty, no records found.")
    if byteorder is None:
        byteorder = detect_byteorder(buffer)
    elif byteorder not in ('>', '<'):
        msg = "Invalid byte order '%s', use '>' or '<'." % byteorder
        raise ValueError(msg)
    elif len(buffer) < FIXED_HEADER_LENGTH:
        msg = ("Buffer of %d bytes is too small to contain a data record "
               "header." % len(buffer))
        raise FormatError(msg)
    first_blockette = read_uint(buffer, 46, 2, byteorder)
    blockette, fallback = read_data_only_blockette(buffer, first_blockette,
                                                   byteorder)
    record_length = blockette.record_length
    if check_size and len(buffer) % record_length:
        msg = ("Archive size of %d bytes is not a multiple of the record "
               "length of %d bytes." % (len(buffer), record_length))
        raise FormatError(msg)
    encoding = _check_encoding(blockette.encoding)
    word_order = _word_order(blockette, byteorder)
    logger.debug("byte order %s, word order %s, record length %d, "
                 "encoding %s" % (byteorder, word_order, record_length,
                                  encoding.name))
    return ArchiveFormat(byteorder, word_order, record_length, encoding,
                         fallback)


def frame_records(buffer, archive):
    """
    View the archive as a 2-D ``uint8`` array with one row per record.

    No bytes are copied.
    """
    data = np.frombuffer(buffer, dtype=np.uint8)
    return data.reshape(-1, archive.record_length)


def _decode_header_field(name, content):
    """
    Helper function to decode header fields. Fairly fault tolerant and it
    will also raise nice warnings in case in encounters anything wild.
    """
    content = content.strip()
    try:
        return content.decode("ascii", errors="strict")
    except UnicodeError:
        r = content.decode("ascii", errors="ignore")
        msg = (u"Failed to decode {name} code as ASCII. "
               u"Code in file: '{result}' (� indicates characters "
               u"that could not be decoded). "
               u"Will be interpreted as: '{f_result}'.")
        warnings.warn(msg.format(
            name=name,
            result=content.decode("ascii", errors="replace"),
            f_result=r))
        return r


def _parse_sequence_number(content, index):
    text = _decode_header_field("sequence number", content)
    if not text:
        return 0
    if not text.isdigit():
        msg = "Invalid sequence number '%s' in record %d." % (text, index)
        raise FormatError(msg)
    return int(text)


def parse_records(buffer, archive):
    """
    Parse the fixed header and blockette 1000 of every record.

    All fixed headers are read at once through a structured numpy view on
    the buffer; only the blockette chains are walked per record.

    :rtype: list of :class:`PhysicalRecord`
    :raises UnsupportedEncoding: if a record declares an encoding other than
        the one of the first record.
    """
    reclen = archive.record_length
    headers = np.frombuffer(
        buffer, dtype=fixed_header_dtype(archive.byteorder, reclen))
    frames = frame_records(buffer, archive)
    records = []
    for index, header in enumerate(headers):
        offset = index * reclen
        raw = frames[index]
        first_blockette = int(header['first_blockette'])
        if index == 0:
            blockette = DataOnlyBlockette(archive.encoding.value,
                                          archive.word_order, reclen)
            fallback = archive.fallback
            word_order = archive.word_order
        else:
            blockette, fallback = read_data_only_blockette(
                raw, first_blockette, archive.byteorder, index=index)
            if not fallback and blockette.encoding != archive.encoding:
                msg = ("Record %d uses encoding %d while the archive is "
                       "encoded with %d (%s). Mixed encodings are not "
                       "supported.") % (index, blockette.encoding,
                                        archive.encoding.value,
                                        archive.encoding.name)
                raise UnsupportedEncoding(msg)
            word_order = _word_order(blockette, archive.byteorder)
            if blockette.record_length != reclen:
                logger.debug("record %d declares a record length of %d "
                             "bytes, framing with %d" % (
                                 index, blockette.record_length, reclen))
        factor = int(header['samp_rate_factor'])
        mult = int(header['samp_rate_mult'])
        start = BTime(int(header['year']), int(header['julday']),
                      int(header['hour']), int(header['minute']),
                      int(header['second']), int(header['fract']))
        records.append(PhysicalRecord(
            index=index,
            offset=offset,
            sequence_number=_parse_sequence_number(
                header['sequence_number'], index),
            dataquality=_decode_header_field(
                "dataquality", header['dataquality']),
            station=_decode_header_field("station", header['station']),
            location=_decode_header_field("location", header['location']),
            channel=_decode_header_field("channel", header['channel']),
            network=_decode_header_field("network", header['network']),
            start=start,
            npts=int(header['npts']),
            samp_rate_factor=factor,
            samp_rate_mult=mult,
            sampling_rate=calculate_sampling_rate(factor, mult),
            activity_flags=int(header['activity_flags']),
            io_clock_flags=int(header['io_clock_flags']),
            data_quality_flags=int(header['data_quality_flags']),
            number_of_blockettes=int(header['number_of_blockettes']),
            time_correction=int(header['time_correction']),
            begin_data=int(header['begin_data']),
            first_blockette=first_blockette,
            encoding=blockette.encoding,
            word_order=word_order,
            record_length=blockette.record_length,
            blockette_fallback=fallback))
    logger.debug("parsed %d records" % len(records))
    return records


def record_payload(buffer, record, record_length):
    """
    Return the sample payload of one record (data offset to record end).

    :raises FormatError: if the record holds samples but its data offset
        points into the fixed header or beyond the record.
    """
    begin = record.begin_data
    if not record.npts:
        begin = max(begin, FIXED_HEADER_LENGTH)
    elif not FIXED_HEADER_LENGTH <= begin <= record_length:
        msg = ("Data offset %d of record %d lies outside of the %d byte "
               "record." % (begin, record.index, record_length))
        raise FormatError(msg)
    begin = min(begin, record_length)
    return memoryview(buffer)[record.offset + begin:
                              record.offset + record_length]
