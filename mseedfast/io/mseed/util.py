# -*- coding: utf-8 -*-
"""
Utilities working on the record headers of MiniSEED archives.
"""
from mseedfast.core.util.decorator import read_buffer
from . import FormatError
from .btime import SECOND_NS
from .record import detect_archive_format, parse_records


@read_buffer
def get_record_information(buffer, byteorder=None):
    """
    Returns record information about a MiniSEED archive without decoding
    any samples.

    Identifiers, flags, sampling rate and sample count describe the first
    record. The end time is the time of the last sample of the last record.
    Bytes after the last complete record are reported as ``excess_bytes``.

    :type buffer: str, file-like object or bytes-like
    :param buffer: Filename, open binary file or the archive content.
    :type byteorder: str, optional
    :param byteorder: If given, the byte order will be enforced. Can be
        either ``'<'`` or ``'>'``. If ``None``, it will be determined
        automatically.
    :rtype: dict
    """
    archive = detect_archive_format(buffer, byteorder=byteorder,
                                    check_size=False)
    filesize = len(buffer)
    number_of_records, excess_bytes = divmod(filesize, archive.record_length)
    if not number_of_records:
        msg = ("Archive of %d bytes is smaller than one record of %d "
               "bytes." % (filesize, archive.record_length))
        raise FormatError(msg)
    records = parse_records(
        memoryview(buffer)[:number_of_records * archive.record_length],
        archive)
    first, last = records[0], records[-1]
    endtime = last.start.ns / SECOND_NS
    if last.sampling_rate and last.npts:
        endtime += (last.npts - 1) / last.sampling_rate
    return {
        'filesize': filesize,
        'record_length': archive.record_length,
        'number_of_records': number_of_records,
        'excess_bytes': excess_bytes,
        'byteorder': archive.byteorder,
        'word_order': archive.word_order,
        'encoding': int(archive.encoding),
        'network': first.network,
        'station': first.station,
        'location': first.location,
        'channel': first.channel,
        'dataquality': first.dataquality,
        'activity_flags': first.activity_flags,
        'io_and_clock_flags': first.io_clock_flags,
        'data_quality_flags': first.data_quality_flags,
        'time_correction': first.time_correction,
        'samp_rate': first.sampling_rate,
        'npts': first.npts,
        'starttime': first.start.timestamp,
        'endtime': endtime,
    }
