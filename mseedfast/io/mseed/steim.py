# -*- coding: utf-8 -*-
"""
Vectorised STEIM1 and STEIM2 decompression.

A Steim compressed payload is a sequence of 64 byte frames of sixteen 32 bit
words. The first word of every frame holds sixteen 2 bit codes, one per word
of the frame, telling how many differences of which width a word carries.
The first frame of a record additionally holds the forward (X0) and the
reverse (Xn) integration constant in its second and third word.

All words of a channel run are unpacked at once into a slot array with room
for the maximum number of differences per word (4 for STEIM1, 7 for STEIM2)
and a mask of the slots that were actually filled. Samples are then rebuilt
per record by a cumulative sum seeded with X0.

:copyright:
    The mseedfast Development Team
:license:
    GNU Lesser General Public License, Version 3
    (https://www.gnu.org/copyleft/lesser.html)
"""
import logging
import warnings

import numpy as np

from . import FormatError, SteimIntegrityWarning
from .bitfield import sign_extend, split_signed, split_unsigned, words
from .btime import sample_times
from .headers import STEIM_FRAME_WORDS, STEIM_MAX_DIFFS, Encoding
from .record import record_payload


logger = logging.getLogger('mseedfast.io.mseed.steim')


# (control code, dnib or None, bits per difference, number of differences,
# bits of the word holding the differences)
STEIM1_LAYOUT = [
    (1, None, 8, 4, 32),
    (2, None, 16, 2, 32),
    (3, None, 32, 1, 32)]

STEIM2_LAYOUT = [
    (1, None, 8, 4, 32),
    (2, 1, 30, 1, 30),
    (2, 2, 15, 2, 30),
    (2, 3, 10, 3, 30),
    (3, 0, 6, 5, 30),
    (3, 1, 5, 6, 30),
    (3, 2, 4, 7, 28)]

LAYOUTS = {Encoding.STEIM1: STEIM1_LAYOUT, Encoding.STEIM2: STEIM2_LAYOUT}


def control_codes(frames):
    """
    Expand the control words of a word array into one code per word.

    :type frames: :class:`numpy.ndarray`
    :param frames: ``uint32`` array of shape ``(records, words)`` with
        ``words`` a multiple of 16.
    :rtype: :class:`numpy.ndarray` of the same shape
    """
    nrec, nwords = frames.shape
    control = frames[:, ::STEIM_FRAME_WORDS].reshape(-1)
    codes = split_unsigned(control, 2, STEIM_FRAME_WORDS)
    return codes.reshape(nrec, nwords)


def unpack_steim(frames, encoding):
    """
    Unpack all differences of a word array into placeholder slots.

    :type frames: :class:`numpy.ndarray`
    :param frames: ``uint32`` array of shape ``(records, words)``, one row
        of Steim frames per record. ``words`` must be a multiple of 16.
    :type encoding: :class:`~mseedfast.io.mseed.headers.Encoding`
    :param encoding: STEIM1 or STEIM2.
    :return: ``(values, valid)``, an int64 array and a bool mask both of
        shape ``(records, words * max_diffs)``. Differences of one record
        appear in slot order; words with control code 0 (control words,
        integration constants, padding) and code combinations that are not
        defined for the encoding only give invalid slots.
    """
    frames = np.asarray(frames, dtype=np.uint32)
    if frames.ndim != 2 or frames.shape[1] % STEIM_FRAME_WORDS:
        msg = "Steim words must be laid out in complete frames of 16 words"
        raise ValueError(msg)
    try:
        layout = LAYOUTS[encoding]
    except KeyError:
        raise ValueError("Not a Steim encoding: %s" % str(encoding))
    maxdiff = STEIM_MAX_DIFFS[encoding]
    nrec, nwords = frames.shape

    flat = frames.reshape(-1)
    codes = control_codes(frames).reshape(-1)
    dnib = flat >> 30
    values = np.zeros((len(flat), maxdiff), dtype=np.int64)
    valid = np.zeros((len(flat), maxdiff), dtype=np.bool_)
    for code, nib, width, count, used_bits in layout:
        mask = codes == code
        if nib is not None:
            mask &= dnib == nib
        if not mask.any():
            continue
        values[mask, :count] = split_signed(flat[mask], width, count,
                                            used_bits)
        valid[mask, :count] = True
    return (values.reshape(nrec, nwords * maxdiff),
            valid.reshape(nrec, nwords * maxdiff))


def _frame_rows(buffer, records, record_length):
    rows = []
    for rec in records:
        row = words(record_payload(buffer, rec, record_length),
                    rec.word_order)
        if rec.npts and len(row) < 3:
            msg = ("Steim record %d is too short to hold its integration "
                   "constants." % rec.index)
            raise FormatError(msg)
        rows.append(row)
    width = max([len(row) for row in rows] + [STEIM_FRAME_WORDS])
    width = -(-width // STEIM_FRAME_WORDS) * STEIM_FRAME_WORDS
    frames = np.zeros((len(rows), width), dtype=np.uint32)
    for i, row in enumerate(rows):
        frames[i, :len(row)] = row
    return frames


def decode_steim_run(buffer, records, archive):
    """
    Decode the Steim compressed records of one channel run.

    :type buffer: bytes-like
    :param buffer: The complete archive.
    :type records: list of :class:`~mseedfast.io.mseed.record.PhysicalRecord`
    :param records: Records of the run in file order.
    :type archive: :class:`~mseedfast.io.mseed.record.ArchiveFormat`
    :return: tuple of ``int32`` samples and ``float64`` POSIX timestamps
    """
    if not records:
        return np.empty(0, dtype=np.int32), np.empty(0, dtype=np.float64)
    frames = _frame_rows(buffer, records, archive.record_length)
    values, valid = unpack_steim(frames, archive.encoding)
    x0 = sign_extend(frames[:, 1], 32)
    xn = sign_extend(frames[:, 2], 32)

    data = []
    times = []
    mismatches = []
    for i, rec in enumerate(records):
        diffs = values[i][valid[i]][:rec.npts]
        if not len(diffs):
            continue
        diffs[0] = x0[i]
        samples = np.cumsum(diffs)
        if samples[-1] != xn[i]:
            mismatches.append(rec.index)
        data.append(samples.astype(np.int32))
        times.append(sample_times(rec.start.ns, len(samples),
                                  rec.sampling_rate))
        if len(samples) < rec.npts:
            logger.debug("record %d holds %d of %d samples" % (
                rec.index, len(samples), rec.npts))
    if mismatches:
        msg = ("Last sample of %d record(s) does not match the reverse "
               "integration constant (first: record %d). Data may be "
               "corrupt." % (len(mismatches), mismatches[0]))
        warnings.warn(msg, SteimIntegrityWarning)
    if not data:
        return np.empty(0, dtype=np.int32), np.empty(0, dtype=np.float64)
    return np.concatenate(data), np.concatenate(times)
