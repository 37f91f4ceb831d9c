# -*- coding: utf-8 -*-
"""
Sample decoding of a channel run, dispatched on the archive encoding.
"""
import logging

import numpy as np

from .btime import sample_times
from .headers import Encoding
from .record import record_payload
from .steim import decode_steim_run


logger = logging.getLogger('mseedfast.io.mseed.decode')


# numpy type of the stored samples, byte order is prepended per record
STORED_TYPES = {
    Encoding.TEXT: "S1",
    Encoding.INT16: "i2",
    Encoding.INT32: "i4",
    Encoding.FLOAT32: "f4",
    Encoding.FLOAT64: "f8"}


def decode_fixed_run(buffer, records, archive):
    """
    Decode a run of uncompressed records (text, integers and floats).

    Every record contributes at most its header sample count; payload
    padding at the end of a record is dropped.

    :return: tuple of samples (``archive.encoding.dtype``) and ``float64``
        POSIX timestamps
    """
    encoding = archive.encoding
    stored = STORED_TYPES[encoding]
    size = encoding.samplesize
    data = []
    times = []
    for rec in records:
        payload = record_payload(buffer, rec, archive.record_length)
        npts = min(rec.npts, len(payload) // size)
        if npts < rec.npts:
            logger.debug("record %d holds %d of %d samples" % (
                rec.index, npts, rec.npts))
        if not npts:
            continue
        dtype = stored if encoding == Encoding.TEXT \
            else rec.word_order + stored
        samples = np.frombuffer(payload, dtype=dtype, count=npts)
        data.append(samples.astype(encoding.dtype))
        times.append(sample_times(rec.start.ns, npts, rec.sampling_rate))
    if not data:
        return (np.empty(0, dtype=encoding.dtype),
                np.empty(0, dtype=np.float64))
    return np.concatenate(data), np.concatenate(times)


DECODERS = {
    Encoding.TEXT: decode_fixed_run,
    Encoding.INT16: decode_fixed_run,
    Encoding.INT32: decode_fixed_run,
    Encoding.FLOAT32: decode_fixed_run,
    Encoding.FLOAT64: decode_fixed_run,
    Encoding.STEIM1: decode_steim_run,
    Encoding.STEIM2: decode_steim_run}

_missing = set(Encoding) - set(DECODERS)
if _missing:
    raise ImportError("No decoder registered for encoding(s) %s" % ", ".join(
        sorted(enc.name for enc in _missing)))


def decode_run(buffer, records, archive):
    """
    Decode the samples of one channel run.

    :type buffer: bytes-like
    :param buffer: The complete archive.
    :type records: list of :class:`~mseedfast.io.mseed.record.PhysicalRecord`
    :type archive: :class:`~mseedfast.io.mseed.record.ArchiveFormat`
    :return: tuple of samples and POSIX timestamps of equal length
    """
    return DECODERS[archive.encoding](buffer, records, archive)
