# -*- coding: utf-8 -*-
"""
Defines the fixed header layout, the data only blockette and the supported
encodings of MiniSEED data records.
"""
import enum

import numpy as np


ENDIAN = {0: '<', 1: '>'}
WORD_ORDER = {v: k for k, v in ENDIAN.items()}

# Byte order used when nothing else is known.
DEFAULT_BYTEORDER = '>'

# Substituted when blockette 1000 of a record can not be read.
DEFAULT_ENCODING = 11
DEFAULT_RECORD_LENGTH = 4096

# Year values at or above this threshold read with the default byte order
# mean the header was written with the opposite byte order.
YEAR_THRESHOLD = 2056

# Length of the fixed section of the data header.
FIXED_HEADER_LENGTH = 48

# Offset of the BTIME year inside the fixed header.
YEAR_OFFSET = 20

# Blockette 1000 (data only SEED blockette).
DATA_ONLY_BLOCKETTE = 1000
DATA_ONLY_BLOCKETTE_LENGTH = 8

# Valid record length exponents (256 bytes up to 1 MiB, plus 128 byte
# records written by some dataloggers).
VALID_RECORD_LENGTH_EXPONENTS = range(7, 21)

# Steim frames are 16 words of 32 bit.
STEIM_FRAME_WORDS = 16

# The fixed section of the data header. Tuples are field name, numpy type
# (without byte order) and offset in bytes.
FIXED_HEADER = [
    ("sequence_number", "S6", 0),
    ("dataquality", "S1", 6),
    ("reserved", "S1", 7),
    ("station", "S5", 8),
    ("location", "S2", 13),
    ("channel", "S3", 15),
    ("network", "S2", 18),
    ("year", "u2", 20),
    ("julday", "u2", 22),
    ("hour", "u1", 24),
    ("minute", "u1", 25),
    ("second", "u1", 26),
    ("unused", "u1", 27),
    ("fract", "u2", 28),
    ("npts", "u2", 30),
    ("samp_rate_factor", "i2", 32),
    ("samp_rate_mult", "i2", 34),
    ("activity_flags", "u1", 36),
    ("io_clock_flags", "u1", 37),
    ("data_quality_flags", "u1", 38),
    ("number_of_blockettes", "u1", 39),
    ("time_correction", "i4", 40),
    ("begin_data", "u2", 44),
    ("first_blockette", "u2", 46)]


def fixed_header_dtype(byteorder, record_length=FIXED_HEADER_LENGTH):
    """
    Structured numpy dtype of the fixed header.

    With ``record_length`` set to the record size the dtype can be laid
    over a whole archive, giving a view on the headers of all records at
    once without copying any bytes.

    >>> dt = fixed_header_dtype('>', 512)
    >>> dt.itemsize, dt['year'].str
    (512, '>u2')
    """
    names, formats, offsets = [], [], []
    for name, fmt, offset in FIXED_HEADER:
        names.append(name)
        formats.append(fmt if fmt.startswith("S") else byteorder + fmt)
        offsets.append(offset)
    return np.dtype({"names": names, "formats": formats, "offsets": offsets,
                     "itemsize": record_length})


# allowed encodings:
# id: (name, sample type a/i/f/d, output numpy type, stored sample size)
ENCODINGS = {0: ("ASCII", "a", np.dtype("|S1"), 1),
             1: ("INT16", "i", np.dtype(np.int32), 2),
             3: ("INT32", "i", np.dtype(np.int32), 4),
             4: ("FLOAT32", "f", np.dtype(np.float32), 4),
             5: ("FLOAT64", "d", np.dtype(np.float64), 8),
             10: ("STEIM1", "i", np.dtype(np.int32), None),
             11: ("STEIM2", "i", np.dtype(np.int32), None)}

# Encodings defined by SEED which can not be read.
UNSUPPORTED_ENCODINGS = {
    2: "INT24",
    12: "GEOSCOPE24",
    13: "GEOSCOPE16_3",
    14: "GEOSCOPE16_4",
    15: "US National Network compression",
    16: "CDSN",
    17: "Graefenberg 16 bit gain ranged",
    18: "IPG - Strasbourg 16 bit gain ranged",
    19: "STEIM (3) Comprssion",
    30: "SRO",
    31: "HGLP Format",
    32: "DWWSSN",
    33: "RSTN 16 bit gain ranged"
}


class Encoding(enum.IntEnum):
    """
    Sample encodings that can be decoded.

    >>> Encoding(11).name, Encoding(11).sampletype
    ('STEIM2', 'i')
    """
    TEXT = 0
    INT16 = 1
    INT32 = 3
    FLOAT32 = 4
    FLOAT64 = 5
    STEIM1 = 10
    STEIM2 = 11

    @property
    def sampletype(self):
        return ENCODINGS[self.value][1]

    @property
    def dtype(self):
        return ENCODINGS[self.value][2]

    @property
    def samplesize(self):
        """
        Bytes per stored sample, ``None`` for the Steim compressions.
        """
        return ENCODINGS[self.value][3]

    @property
    def is_steim(self):
        return self in (Encoding.STEIM1, Encoding.STEIM2)


# Number of sample differences a Steim word can carry at most.
STEIM_MAX_DIFFS = {Encoding.STEIM1: 4, Encoding.STEIM2: 7}
