#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
A command-line tool to analyze MiniSEED records.

:copyright:
    The mseedfast Development Team
:license:
    GNU Lesser General Public License, Version 3
    (https://www.gnu.org/copyleft/lesser.html)
"""
from argparse import ArgumentParser

from mseedfast import __version__
from mseedfast.core.util.decorator import read_buffer
from mseedfast.io.mseed.btime import format_timestamp
from mseedfast.io.mseed.record import detect_archive_format, parse_records


# fields printed in the fixed header and blockette sections
FIXED_HEADER_FIELDS = [
    'sequence_number', 'dataquality', 'station', 'location', 'channel',
    'network', 'start', 'npts', 'samp_rate_factor', 'samp_rate_mult',
    'activity_flags', 'io_clock_flags', 'data_quality_flags',
    'number_of_blockettes', 'time_correction', 'begin_data',
    'first_blockette']
BLOCKETTE_FIELDS = ['encoding', 'word_order', 'record_length']


@read_buffer
def analyze_record(buffer, n=0, filename=None):
    """
    Return a printable description of the ``n``-th record of an archive.

    :raises IndexError: if the archive has less than ``n + 1`` records.
    """
    archive = detect_archive_format(buffer)
    records = parse_records(buffer, archive)
    if not 0 <= n < len(records):
        msg = "Record %d requested but the archive holds %d record(s)." % (
            n, len(records))
        raise IndexError(msg)
    rec = records[n]
    if archive.byteorder == '<':
        endian = 'Little Endian'
    else:
        endian = 'Big Endian'
    ret_val = ('FILE: %s\nRecord Number: %i\nRecord Offset: %i byte\n' +
               'Header Endianness: %s\n\n') % \
        (filename or 'Unknown', rec.index, rec.offset, endian)
    ret_val += 'FIXED SECTION OF DATA HEADER\n'
    for key in FIXED_HEADER_FIELDS:
        ret_val += '\t%s: %s\n' % (key, getattr(rec, key))
    ret_val += '\nBLOCKETTE 1000\n'
    if rec.blockette_fallback:
        ret_val += '\tNOT READABLE, DEFAULTS USED\n'
    for key in BLOCKETTE_FIELDS:
        ret_val += '\t%s: %s\n' % (key, getattr(rec, key))
    ret_val += '\nCALCULATED VALUES\n'
    ret_val += '\tSampling Rate: %s Hz\n' % rec.sampling_rate
    ret_val += '\tStarttime: %s\n' % format_timestamp(rec.start.timestamp)
    return ret_val


def main(argv=None):
    """
    Entry point for setup.py.
    """
    parser = ArgumentParser(prog='mseedfast-recordanalyzer',
                            description=__doc__.split('\n')[1])
    parser.add_argument('-V', '--version', action='version',
                        version='%(prog)s ' + __version__)
    parser.add_argument('-n', default=0, type=int,
                        help='show info about N-th record (default: 0)')
    parser.add_argument('filename', help='file to analyze')
    args = parser.parse_args(argv)

    try:
        info = analyze_record(args.filename, n=args.n,
                              filename=args.filename)
    except IndexError as e:
        parser.error(str(e))
    print(info)


if __name__ == "__main__":
    main()
