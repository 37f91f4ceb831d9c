# -*- coding: utf-8 -*-
import io
import os

import pytest

from mseedfast.io.sac.sacpz import (get_coordinates, get_paz, get_station,
                                    read_sacpz)


class TestSACPZ():
    """
    Test suite for reading SAC poles and zeros files.
    """
    @pytest.fixture(scope='class')
    def pz_file(self):
        return os.path.join(os.path.dirname(__file__), 'data',
                            'SAC_PZs_IU_ANMO_BHZ_00')

    def test_station(self, pz_file):
        pz = read_sacpz(pz_file)
        assert get_station(pz) == ('IU', 'ANMO', '00', 'BHZ')
        assert pz.created == '2020-03-02T12:51:03'
        assert pz.end == '2599-12-31T23:59:59'
        assert pz.description == 'Albuquerque, New Mexico, USA'
        assert pz.insttype == 'Streckeisen STS-6A VBB Seismometer'

    def test_coordinates(self, pz_file):
        pz = read_sacpz(pz_file)
        assert get_coordinates(pz) == (34.945981, -106.457133)
        assert pz.elevation == 1671.0
        assert pz.depth == 145.0
        assert pz.sample_rate == 40.0

    def test_numbers_with_units(self, pz_file):
        pz = read_sacpz(pz_file)
        assert pz.sensitivity == 3.224180e+09
        assert pz.a0 == 8.608300e+04
        assert pz.instgain == '1.500000e+03 (M/S)'

    def test_paz(self, pz_file):
        poles, zeros, constant = get_paz(read_sacpz(pz_file))
        assert constant == 2.775517e+14
        assert poles == [complex(-1.234e-02, 1.234e-02),
                         complex(-1.234e-02, -1.234e-02),
                         complex(-39.178, 49.121),
                         complex(-39.178, -49.121)]
        # two of five zeros are left out and padded at the end
        assert zeros == [0j, 0j, complex(-12.566, 0), 0j, 0j]

    def test_open_files(self, pz_file):
        expected = read_sacpz(pz_file)
        with open(pz_file, 'rb') as fh:
            assert read_sacpz(fh) == expected
        with open(pz_file, 'r') as fh:
            assert read_sacpz(fh) == expected

    def test_missing_values(self):
        pz = read_sacpz(io.StringIO("ZEROS 0\nPOLES 1\n-1.0 2.0\n"))
        assert get_station(pz) == (None, None, None, None)
        assert get_coordinates(pz) == (None, None)
        assert get_paz(pz) == ([complex(-1, 2)], [], None)
