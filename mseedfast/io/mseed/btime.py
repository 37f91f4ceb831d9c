# -*- coding: utf-8 -*-
"""
SEED binary time (BTIME) handling.

A BTIME is stored in the fixed section of every data record as year,
day of year, hour, minute, second, one unused byte and the fraction of a
second in units of 0.0001 s. This module converts it into calendar dates and
POSIX epoch times.

.. note::
    Month and day are derived with the simplified leap year rule used by the
    archives this reader was written for: February has 29 days whenever
    ``(year - 2000) % 4 == 0``. This differs from the Gregorian calendar for
    the years 1900 and 2100. Epoch times count days from January 1st, so
    the extra "February 29th" of such a year shifts the calendar form but
    never maps two days of year onto the same epoch day.

:copyright:
    The mseedfast Development Team
:license:
    GNU Lesser General Public License, Version 3
    (https://www.gnu.org/copyleft/lesser.html)
"""
import warnings
from collections import namedtuple

import numpy as np

from . import FormatError


DAYS_PER_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

# one BTIME fraction unit (0.0001 s) in nanoseconds
FRACT_NS = 100000
SECOND_NS = 1000000000
DAY_NS = 86400 * SECOND_NS


def is_leap_year(year):
    """
    Simplified leap year rule of the archive format.

    >>> is_leap_year(2020), is_leap_year(2021), is_leap_year(2100)
    (True, False, True)
    """
    return (year - 2000) % 4 == 0


def days_in_year(year):
    return 366 if is_leap_year(year) else 365


def julday_to_month_day(year, julday):
    """
    Map a day of year (1-based) onto month and day of month.

    >>> julday_to_month_day(2020, 60)
    (2, 29)
    >>> julday_to_month_day(2021, 60)
    (3, 1)

    :raises FormatError: if ``julday`` lies outside of the year.
    """
    if not 1 <= julday <= days_in_year(year):
        msg = 'julday out of bounds (wrong endian?): {!s}'.format(julday)
        raise FormatError(msg)
    day = julday
    for month, ndays in enumerate(DAYS_PER_MONTH, start=1):
        if month == 2 and is_leap_year(year):
            ndays = 29
        if day <= ndays:
            return month, day
        day -= ndays


def days_from_civil(year, month, day):
    """
    Number of days between 1970-01-01 and the given calendar date.

    Pure integer arithmetic on the proleptic calendar, so no floating point
    drift builds up for dates far away from the epoch.

    >>> days_from_civil(1970, 1, 1)
    0
    >>> days_from_civil(2020, 1, 1)
    18262
    """
    year -= month <= 2
    era = (year if year >= 0 else year - 399) // 400
    yoe = year - era * 400
    doy = (153 * (month + (-3 if month > 2 else 9)) + 2) // 5 + day - 1
    doe = yoe * 365 + yoe // 4 - yoe // 100 + doy
    return era * 146097 + doe - 719468


class BTime(namedtuple('BTime', 'year julday hour minute second fract')):
    """
    Start time of a data record as stored in the fixed header.

    >>> t = BTime(2020, 1, 0, 0, 0, 0)
    >>> t.timestamp
    1577836800.0
    >>> print(t)
    2020-01-01T00:00:00.000000Z
    """
    __slots__ = ()

    @property
    def month(self):
        return julday_to_month_day(self.year, self.julday)[0]

    @property
    def day(self):
        return julday_to_month_day(self.year, self.julday)[1]

    @property
    def ns(self):
        """
        POSIX time of the record start as integer nanoseconds.
        """
        if self.fract > 9999:
            warnings.warn(
                "Record contains a fractional seconds (.0001 secs) of %i - "
                "the maximum strictly allowed value is 9999. It will be "
                "interpreted as one or more additional seconds." % self.fract,
                category=UserWarning)
        # validates the day of year
        julday_to_month_day(self.year, self.julday)
        days = days_from_civil(self.year, 1, 1) + self.julday - 1
        seconds = self.hour * 3600 + self.minute * 60 + self.second
        return days * DAY_NS + seconds * SECOND_NS + self.fract * FRACT_NS

    @property
    def timestamp(self):
        """
        POSIX time of the record start as float seconds.
        """
        return self.ns / SECOND_NS

    def __str__(self):
        month, day = julday_to_month_day(self.year, self.julday)
        # carry fractions >= 1 s over into the seconds as done in ``ns``
        second, fract = divmod(self.fract, 10000)
        return "%04d-%02d-%02dT%02d:%02d:%02d.%06dZ" % (
            self.year, month, day, self.hour, self.minute,
            self.second + second, fract * 100)


def format_timestamp(timestamp):
    """
    Format a float POSIX timestamp the same way :class:`BTime` is printed.

    >>> format_timestamp(1577836800.09)
    '2020-01-01T00:00:00.090000Z'
    """
    us = int(round(timestamp * 1000000))
    days, rest = divmod(us, 86400 * 1000000)
    # inverse of days_from_civil
    z = days + 719468
    era = (z if z >= 0 else z - 146096) // 146097
    doe = z - era * 146097
    yoe = (doe - doe // 1460 + doe // 36524 - doe // 146096) // 365
    doy = doe - (365 * yoe + yoe // 4 - yoe // 100)
    mp = (5 * doy + 2) // 153
    day = doy - (153 * mp + 2) // 5 + 1
    month = mp + 3 if mp < 10 else mp - 9
    year = yoe + era * 400 + (month <= 2)
    seconds, rest = divmod(rest, 1000000)
    hour, seconds = divmod(seconds, 3600)
    minute, second = divmod(seconds, 60)
    return "%04d-%02d-%02dT%02d:%02d:%02d.%06dZ" % (
        year, month, day, hour, minute, second, rest)


def sample_times(start_ns, npts, sampling_rate):
    """
    POSIX timestamps of ``npts`` samples starting at ``start_ns``.

    A sampling rate of zero gives every sample the start time.

    :type start_ns: int
    :param start_ns: Time of the first sample in nanoseconds.
    :rtype: :class:`numpy.ndarray` of float64
    """
    times = np.arange(npts, dtype=np.float64)
    if sampling_rate:
        times /= sampling_rate
    else:
        times[:] = 0.0
    # split the start into whole seconds and a remainder so the float
    # addition only happens once per sample
    seconds, rest = divmod(start_ns, SECOND_NS)
    times += rest / SECOND_NS
    times += seconds
    return times
