#! /usr/bin/env python
# -*- coding: utf-8 -*-
import pytest

from mseedfast.core.util.testing import make_archive, make_record
from mseedfast.io.mseed.btime import BTime
from mseedfast.io.mseed.headers import Encoding
from mseedfast.io.mseed.scripts.recordanalyzer import \
    main as mseedfast_recordanalyzer


class TestRecordAnalyser():
    @pytest.fixture(scope='class')
    def test_file(self, tmp_path_factory):
        filename = tmp_path_factory.mktemp('recordanalyzer') / 'test.mseed'
        filename.write_bytes(make_archive(
            make_record(list(range(412)), encoding=Encoding.STEIM1,
                        network='BW', station='BGLD', channel='EHE',
                        start=BTime(2007, 365, 23, 59, 59, 9150),
                        samp_rate_factor=200, sequence_number=763445),
            make_record(list(range(10)), encoding=Encoding.STEIM1,
                        network='BW', station='BGLD', channel='EHE',
                        start=BTime(2008, 1, 0, 0, 1, 9750),
                        samp_rate_factor=200, sequence_number=763446,
                        byteorder='>', blockette=True)))
        return str(filename)

    def test_default_record(self, test_file, capsys):
        mseedfast_recordanalyzer([test_file])

        expected = '''FILE: %s
Record Number: 0
Record Offset: 0 byte
Header Endianness: Big Endian

FIXED SECTION OF DATA HEADER
	sequence_number: 763445
	dataquality: D
	station: BGLD
	location: 
	channel: EHE
	network: BW
	start: 2007-12-31T23:59:59.915000Z
	npts: 412
	samp_rate_factor: 200
	samp_rate_mult: 1
	activity_flags: 0
	io_clock_flags: 0
	data_quality_flags: 0
	number_of_blockettes: 1
	time_correction: 0
	begin_data: 64
	first_blockette: 48

BLOCKETTE 1000
	encoding: 10
	word_order: >
	record_length: 512

CALCULATED VALUES
	Sampling Rate: 200.0 Hz
	Starttime: 2007-12-31T23:59:59.915000Z

'''  # noqa
        assert expected % (test_file,) == capsys.readouterr().out

    def test_second_record(self, test_file, capsys):
        mseedfast_recordanalyzer(['-n', '1', test_file])
        out = capsys.readouterr().out
        assert 'Record Number: 1\nRecord Offset: 512 byte\n' in out
        assert '\tsequence_number: 763446\n' in out
        assert '\tStarttime: 2008-01-01T00:00:01.975000Z\n' in out

    def test_record_out_of_range(self, test_file, capsys):
        with pytest.raises(SystemExit):
            mseedfast_recordanalyzer(['-n', '2', test_file])
        assert 'holds 2 record(s)' in capsys.readouterr().err
