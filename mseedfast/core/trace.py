# -*- coding: utf-8 -*-
"""
Module for handling decoded traces.

:copyright:
    The mseedfast Development Team
:license:
    GNU Lesser General Public License, Version 3
    (https://www.gnu.org/copyleft/lesser.html)
"""
import numpy as np


class DecodedTrace(object):
    """
    Continuous samples of one channel of one logical volume.

    Instances are immutable: attributes can not be reassigned and the sample
    and time arrays are flagged read-only.

    :type network: str
    :type station: str
    :type location: str
    :type channel: str
    :type dataquality: str
    :param dataquality: SEED data quality indicator of the first record.
    :type sampling_rate: float
    :param sampling_rate: Nominal sampling rate in Hz of the first record.
    :type encoding: :class:`~mseedfast.io.mseed.headers.Encoding`
    :param encoding: Encoding the samples were stored with.
    :type start: :class:`~mseedfast.io.mseed.btime.BTime`
    :param start: Start time of the first record.
    :type data: :class:`numpy.ndarray`
    :param data: Sample values.
    :type times: :class:`numpy.ndarray`
    :param times: POSIX timestamp of every sample.

    .. rubric:: Example

    >>> from mseedfast.io.mseed.btime import BTime
    >>> from mseedfast.io.mseed.headers import Encoding
    >>> tr = DecodedTrace('GR', 'FUR', '', 'BHZ', 'D', 1.0, Encoding.INT32,
    ...                   BTime(1970, 1, 0, 0, 0, 0), np.arange(3),
    ...                   np.arange(3.0))
    >>> print(tr)
    GR.FUR..BHZ | 1970-01-01T00:00:00.000000Z - 1970-01-01T00:00:02.000000Z \
| 1.0 Hz, 3 samples
    """
    __slots__ = ('network', 'station', 'location', 'channel', 'dataquality',
                 'sampling_rate', 'encoding', 'start', 'data', 'times')

    def __init__(self, network, station, location, channel, dataquality,
                 sampling_rate, encoding, start, data, times):
        data = np.asarray(data, dtype=encoding.dtype)
        times = np.asarray(times, dtype=np.float64)
        if len(data) != len(times):
            msg = ("Number of samples (%d) and timestamps (%d) differ." %
                   (len(data), len(times)))
            raise ValueError(msg)
        data.flags.writeable = False
        times.flags.writeable = False
        for key, value in (('network', network), ('station', station),
                           ('location', location), ('channel', channel),
                           ('dataquality', dataquality),
                           ('sampling_rate', float(sampling_rate)),
                           ('encoding', encoding), ('start', start),
                           ('data', data), ('times', times)):
            object.__setattr__(self, key, value)

    def __setattr__(self, key, value):
        raise AttributeError("DecodedTrace objects are read-only")

    def __delattr__(self, key):
        raise AttributeError("DecodedTrace objects are read-only")

    @property
    def id(self):
        """
        SEED identifier of the trace (``NET.STA.LOC.CHA``).
        """
        return "%s.%s.%s.%s" % (self.network, self.station, self.location,
                                self.channel)

    @property
    def npts(self):
        return len(self.data)

    @property
    def sample_type(self):
        """
        Sample type tag, one of ``'a'`` (text), ``'i'``, ``'f'`` or ``'d'``.
        """
        return self.encoding.sampletype

    @property
    def starttime(self):
        return self.start.timestamp

    @property
    def endtime(self):
        """
        POSIX time of the last sample, the start time for empty traces.
        """
        if not self.npts:
            return self.starttime
        return float(self.times[-1])

    def __len__(self):
        return self.npts

    def __eq__(self, other):
        if not isinstance(other, DecodedTrace):
            return False
        return (self.id == other.id and
                self.dataquality == other.dataquality and
                self.sampling_rate == other.sampling_rate and
                self.encoding == other.encoding and
                self.start == other.start and
                np.array_equal(self.data, other.data) and
                np.array_equal(self.times, other.times))

    def __ne__(self, other):
        return not self.__eq__(other)

    __hash__ = None

    def __str__(self, id_length=None):
        """
        Return short summary string of the trace.

        :rtype: str
        :return: SEED identifier, start time, end time, sampling rate and
            number of samples.
        """
        from mseedfast.io.mseed.btime import format_timestamp
        if id_length:
            trace_id = ("%%-%ds" % id_length) % self.id
        else:
            trace_id = self.id
        if self.sampling_rate < 0.1 and self.sampling_rate:
            rate = "%.1f s" % (1.0 / self.sampling_rate)
        else:
            rate = "%.1f Hz" % self.sampling_rate
        return "%s | %s - %s | %s, %d samples" % (
            trace_id, self.start, format_timestamp(self.endtime), rate,
            self.npts)

    def __repr__(self):
        return "<DecodedTrace %s>" % str(self)

    def _repr_pretty_(self, p, cycle):
        p.text(str(self))
