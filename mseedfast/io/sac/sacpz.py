"""
Module for reading SAC poles and zero (SACPZ) files.

SACPZ files as written by ``rdseed`` or the IRIS web services describe one
channel in a block of ``*`` comment lines (``* KEY (SAC HEADER) : value``)
followed by a numeric ``ZEROS n`` / ``POLES n`` / ``CONSTANT v`` table.

:copyright:
    The mseedfast Development Team
:license:
    GNU Lesser General Public License, Version 3
    (https://www.gnu.org/copyleft/lesser.html)
"""
import io
import re
from collections import namedtuple


SacPZ = namedtuple('SacPZ', [
    'network', 'station', 'location', 'channel', 'created', 'start', 'end',
    'description', 'latitude', 'longitude', 'elevation', 'depth', 'dip',
    'azimuth', 'sample_rate', 'input_unit', 'output_unit', 'insttype',
    'instgain', 'comment', 'sensitivity', 'a0', 'site_name', 'owner',
    'zeros', 'poles', 'constant'])

# comment keys (without the SAC header name in brackets) and the field and
# converter they map to
COMMENT_KEYS = {
    'NETWORK': ('network', str),
    'STATION': ('station', str),
    'LOCATION': ('location', str),
    'CHANNEL': ('channel', str),
    'CREATED': ('created', str),
    'START': ('start', str),
    'END': ('end', str),
    'DESCRIPTION': ('description', str),
    'LATITUDE': ('latitude', float),
    'LONGITUDE': ('longitude', float),
    'ELEVATION': ('elevation', float),
    'DEPTH': ('depth', float),
    'DIP': ('dip', float),
    'AZIMUTH': ('azimuth', float),
    'SAMPLE RATE': ('sample_rate', float),
    'INPUT UNIT': ('input_unit', str),
    'OUTPUT UNIT': ('output_unit', str),
    'INSTTYPE': ('insttype', str),
    'INSTGAIN': ('instgain', str),
    'COMMENT': ('comment', str),
    'SENSITIVITY': ('sensitivity', float),
    'A0': ('a0', float),
    'SITE NAME': ('site_name', str),
    'OWNER': ('owner', str),
}

_BRACKETS = re.compile(r'\(.*?\)')


def _parse_comment(line):
    """
    Split a ``* KEY (HEADER) : value`` comment line.

    Returns ``None`` for comment lines without a known key.
    """
    key, sep, value = line.lstrip('*').partition(':')
    if not sep:
        return None
    key = ' '.join(_BRACKETS.sub('', key).split()).upper()
    if key not in COMMENT_KEYS:
        return None
    field, converter = COMMENT_KEYS[key]
    value = value.strip()
    if converter is float:
        # numbers may be followed by a unit, e.g. "4.88E+08 (M/S)"
        value = float(value.split()[0]) if value else None
    return field, value


def _parse_table(lines, i, count):
    """
    Read up to ``count`` complex numbers starting at line ``i``.

    Missing rows are padded with ``0j`` (SAC convention of leaving out zeros
    at the origin). Returns the values and the index of the first line not
    consumed.
    """
    values = []
    while len(values) < count and i < len(lines):
        parts = lines[i].split()
        try:
            values.append(complex(float(parts[0]), float(parts[1])))
        except (IndexError, ValueError):
            break
        i += 1
    while len(values) < count:
        values.append(0j)
    return values, i


def read_sacpz(paz_file):
    """
    Read the commented information and the pole zero table of a SACPZ file.

    :type paz_file: str or file-like object
    :param paz_file: Path to the SACPZ file or an open file (text or
        binary mode).
    :rtype: :class:`SacPZ`
    :return: Values not present in the file are ``None``, zeros and poles
        are lists of complex numbers.

    >>> f = io.StringIO('''* NETWORK   (KNETWK): IU
    ... * STATION    (KSTNM): ANMO
    ... * LOCATION   (KHOLE): 00
    ... * CHANNEL   (KCMPNM): BHZ
    ... * LATITUDE    (deg) : 34.945981
    ... * LONGITUDE   (deg) : -106.457133
    ... ZEROS 3
    ... POLES 2
    ... -0.0139 0.0100
    ... -0.0139 -0.0100
    ... CONSTANT 3.052e+11''')
    >>> pz = read_sacpz(f)
    >>> get_station(pz)
    ('IU', 'ANMO', '00', 'BHZ')
    >>> get_paz(pz)[1]
    [0j, 0j, 0j]
    """
    if isinstance(paz_file, str):
        with io.open(paz_file, 'r') as fh:
            content = fh.read()
    else:
        content = paz_file.read()
    if isinstance(content, bytes):
        content = content.decode('ascii', errors='replace')

    values = dict.fromkeys(SacPZ._fields)
    values['zeros'] = []
    values['poles'] = []
    lines = content.splitlines()
    i = 0
    while i < len(lines):
        line = lines[i].strip()
        i += 1
        if line.startswith('*'):
            parsed = _parse_comment(line)
            if parsed is not None:
                values[parsed[0]] = parsed[1]
            continue
        parts = line.split()
        if len(parts) < 2:
            continue
        key = parts[0].upper()
        if key == 'ZEROS':
            values['zeros'], i = _parse_table(lines, i, int(parts[1]))
        elif key == 'POLES':
            values['poles'], i = _parse_table(lines, i, int(parts[1]))
        elif key == 'CONSTANT':
            values['constant'] = float(parts[1])
    return SacPZ(**values)


def get_station(pz):
    """
    Network, station, location and channel code of a :class:`SacPZ`.
    """
    return pz.network, pz.station, pz.location, pz.channel


def get_coordinates(pz):
    return pz.latitude, pz.longitude


def get_paz(pz):
    """
    Poles, zeros and the gain constant of a :class:`SacPZ`.
    """
    return pz.poles, pz.zeros, pz.constant


if __name__ == '__main__':
    import doctest
    doctest.testmod(exclude_empty=True)
