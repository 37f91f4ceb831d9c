# -*- coding: utf-8 -*-
"""
Assembly of decoded traces from a MiniSEED archive.
"""
import logging
import warnings

import numpy as np

from mseedfast.core.trace import DecodedTrace
from mseedfast.core.util.decorator import read_buffer
from . import ChronologyWarning
from .decode import decode_run
from .record import detect_archive_format, parse_records
from .segment import segment


logger = logging.getLogger('mseedfast.io.mseed.core')


def _check_chronology(run, records):
    starts = np.array([records[i].start.ns for i in run.indices],
                      dtype=np.int64)
    if len(starts) > 1 and (np.diff(starts) < 0).any():
        msg = ("Records of %s.%s.%s.%s in logical volume %d are not in "
               "chronological order, sample times will be wrong." % (
                   run.network, run.station, run.location, run.channel,
                   run.volume))
        warnings.warn(msg, ChronologyWarning)


def assemble_trace(buffer, records, run, archive):
    """
    Decode one channel run into a :class:`~mseedfast.core.trace.DecodedTrace`.

    Identifiers, data quality, sampling rate and start time are taken from
    the first record of the run.
    """
    run_records = [records[i] for i in run.indices]
    first = run_records[0]
    data, times = decode_run(buffer, run_records, archive)
    return DecodedTrace(network=run.network, station=run.station,
                        location=run.location, channel=run.channel,
                        dataquality=first.dataquality,
                        sampling_rate=first.sampling_rate,
                        encoding=archive.encoding, start=first.start,
                        data=data, times=times)


@read_buffer
def read_mseed(buffer, byteorder=None, check_order=False):
    """
    Read all channels of a MiniSEED archive.

    :type buffer: str, file-like object or bytes-like
    :param buffer: Filename, open binary file or the archive content.
    :type byteorder: str, optional
    :param byteorder: Force the header byte order (``'>'`` big endian,
        ``'<'`` little endian) instead of guessing it from the year of the
        first record.
    :type check_order: bool, optional
    :param check_order: Emit a :class:`~mseedfast.io.mseed.ChronologyWarning`
        for every channel run whose record start times decrease. Records are
        otherwise assumed to be in chronological order.
    :rtype: list of :class:`~mseedfast.core.trace.DecodedTrace`
    :return: One trace per channel and logical volume, ordered by the first
        appearance of their station and channel.

    Either all traces are returned or an exception is raised; a failing
    channel run aborts the whole read.
    """
    archive = detect_archive_format(buffer, byteorder=byteorder)
    records = parse_records(buffer, archive)
    runs = segment(records)
    traces = []
    for run in runs:
        if check_order:
            _check_chronology(run, records)
        traces.append(assemble_trace(buffer, records, run, archive))
    logger.debug("decoded %d trace(s) with %d samples" % (
        len(traces), sum(len(tr) for tr in traces)))
    return traces
