# -*- coding: utf-8 -*-
import calendar
import datetime

import numpy as np
import pytest

from mseedfast.io.mseed import FormatError
from mseedfast.io.mseed.btime import (BTime, days_from_civil,
                                      format_timestamp, is_leap_year,
                                      julday_to_month_day, sample_times)


class TestBTime():
    """
    Test suite for the SEED binary time handling.
    """
    def test_leap_year_rule(self):
        assert is_leap_year(2000)
        assert is_leap_year(2024)
        assert not is_leap_year(2023)
        # simplified rule, not Gregorian
        assert is_leap_year(2100)

    def test_julday_to_month_day(self):
        assert julday_to_month_day(2020, 1) == (1, 1)
        assert julday_to_month_day(2020, 31) == (1, 31)
        assert julday_to_month_day(2020, 32) == (2, 1)
        assert julday_to_month_day(2020, 60) == (2, 29)
        assert julday_to_month_day(2020, 366) == (12, 31)
        assert julday_to_month_day(2019, 60) == (3, 1)
        assert julday_to_month_day(2019, 365) == (12, 31)

    def test_julday_out_of_bounds(self):
        for year, julday in ((2019, 366), (2020, 367), (2020, 0)):
            with pytest.raises(FormatError):
                julday_to_month_day(year, julday)

    def test_days_from_civil_matches_calendar(self):
        for date in (datetime.date(1970, 1, 1), datetime.date(1969, 12, 31),
                     datetime.date(2003, 5, 29), datetime.date(2020, 2, 29),
                     datetime.date(2038, 1, 19)):
            expected = calendar.timegm(date.timetuple()) // 86400
            assert days_from_civil(date.year, date.month, date.day) == \
                expected

    def test_timestamp(self):
        t = BTime(2020, 1, 0, 0, 0, 0)
        assert t.timestamp == 1577836800.0
        assert t.ns == 1577836800 * 10 ** 9
        t = BTime(2003, 149, 2, 13, 22, 434)
        assert t.month == 5
        assert t.day == 29
        expected = calendar.timegm((2003, 5, 29, 2, 13, 22)) + 0.0434
        assert abs(t.timestamp - expected) < 1e-6

    def test_epoch_days_follow_day_of_year(self):
        # 2100 has a "February 29th" under the simplified rule
        jan1 = days_from_civil(2100, 1, 1)
        assert BTime(2100, 1, 0, 0, 0, 0).ns == jan1 * 86400 * 10 ** 9
        days = [BTime(2100, julday, 0, 0, 0, 0).ns // (86400 * 10 ** 9)
                for julday in (59, 60, 61, 366)]
        assert days == [jan1 + 58, jan1 + 59, jan1 + 60, jan1 + 365]
        assert str(BTime(2100, 60, 0, 0, 0, 0)).startswith("2100-02-29")

    def test_fract_is_exact_in_nanoseconds(self):
        t = BTime(2020, 1, 0, 0, 0, 1)
        assert t.ns == 1577836800 * 10 ** 9 + 100000

    def test_fract_overflow_warns(self):
        t = BTime(2020, 1, 0, 0, 0, 12000)
        with pytest.warns(UserWarning, match='9999'):
            ns = t.ns
        assert ns == (1577836800 + 1) * 10 ** 9 + 2000 * 100000

    def test_invalid_julday(self):
        with pytest.raises(FormatError):
            BTime(2021, 366, 0, 0, 0, 0).timestamp

    def test_str(self):
        assert str(BTime(2003, 149, 2, 13, 22, 434)) == \
            '2003-05-29T02:13:22.043400Z'

    def test_format_timestamp(self):
        assert format_timestamp(1577836800.0) == \
            '2020-01-01T00:00:00.000000Z'
        assert format_timestamp(1054174402.0434) == \
            '2003-05-29T02:13:22.043400Z'
        assert format_timestamp(0.5) == '1970-01-01T00:00:00.500000Z'

    def test_sample_times(self):
        times = sample_times(1577836800 * 10 ** 9, 10, 100.0)
        assert times.dtype == np.float64
        np.testing.assert_allclose(times - 1577836800.0,
                                   np.arange(10) / 100.0, atol=1e-6)

    def test_sample_times_zero_rate(self):
        times = sample_times(10 ** 9, 3, 0.0)
        assert times.tolist() == [1.0, 1.0, 1.0]
