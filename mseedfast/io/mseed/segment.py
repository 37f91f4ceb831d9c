# -*- coding: utf-8 -*-
"""
Splitting of parsed records into logical volumes and channel runs.
"""
import logging
from collections import OrderedDict, namedtuple

from . import EmptyArchive


logger = logging.getLogger('mseedfast.io.mseed.segment')


LogicalVolume = namedtuple('LogicalVolume', 'index start stop')

ChannelRun = namedtuple(
    'ChannelRun', 'volume network station location channel indices')


def find_logical_volumes(records):
    """
    Split records into logical volumes.

    A new volume starts at every record with sequence number 1 except the
    very first record, which always starts volume 0.

    :type records: list of :class:`~mseedfast.io.mseed.record.PhysicalRecord`
    :rtype: list of :class:`LogicalVolume`, ``stop`` is exclusive
    """
    if not records:
        raise EmptyArchive("No records found.")
    starts = [0]
    starts.extend(i for i, rec in enumerate(records)
                  if i and rec.sequence_number == 1)
    stops = starts[1:] + [len(records)]
    return [LogicalVolume(i, start, stop)
            for i, (start, stop) in enumerate(zip(starts, stops))]


def group_channel_runs(records, volume):
    """
    Group the records of one volume by their identifier.

    Runs are ordered by the first appearance of their station and then by
    the first appearance of their channel code inside the volume. Records
    keep file order inside each run.
    """
    groups = OrderedDict()
    first_station = {}
    first_channel = {}
    for i in range(volume.start, volume.stop):
        rec = records[i]
        key = (rec.network, rec.station, rec.location, rec.channel)
        groups.setdefault(key, []).append(i)
        first_station.setdefault(rec.station, i)
        first_channel.setdefault(rec.channel, i)
    keys = sorted(groups, key=lambda k: (first_station[k[1]],
                                         first_channel[k[3]]))
    return [ChannelRun(volume.index, net, sta, loc, cha,
                       tuple(groups[(net, sta, loc, cha)]))
            for net, sta, loc, cha in keys]


def segment(records):
    """
    Split parsed records into channel runs over all logical volumes.

    :rtype: list of :class:`ChannelRun` in discovery order
    """
    volumes = find_logical_volumes(records)
    runs = []
    for volume in volumes:
        runs.extend(group_channel_runs(records, volume))
    logger.debug("%d logical volume(s), %d channel run(s)" % (
        len(volumes), len(runs)))
    return runs
