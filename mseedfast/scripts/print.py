#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Print trace information for MiniSEED data in local files.
"""
from argparse import ArgumentParser

from mseedfast import __version__, read


def main(argv=None):
    parser = ArgumentParser(prog='mseedfast-print',
                            description=__doc__.strip())
    parser.add_argument('-V', '--version', action='version',
                        version='%(prog)s ' + __version__)
    parser.add_argument('-b', '--byteorder', choices=['>', '<'],
                        help='Header byte order (guessed if not given).')
    parser.add_argument('-c', '--check-order', action='store_true',
                        help='Warn about records out of chronological '
                             'order.')
    parser.add_argument('files', nargs='+',
                        help='Files to process.')

    args = parser.parse_args(argv)

    traces = []
    for f in args.files:
        traces += read(f, byteorder=args.byteorder,
                       check_order=args.check_order)
    print("%d Trace(s) in Archive:" % len(traces))
    id_length = max([len(tr.id) for tr in traces] + [0])
    for tr in traces:
        print(tr.__str__(id_length=id_length))


if __name__ == "__main__":
    main()
