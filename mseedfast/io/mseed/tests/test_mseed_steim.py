# -*- coding: utf-8 -*-
import numpy as np
import pytest

from mseedfast.core.util.testing import (encode_steim, make_archive,
                                         make_channel_records, make_record,
                                         steim_words)
from mseedfast.io.mseed import SteimIntegrityWarning
from mseedfast.io.mseed.headers import Encoding
from mseedfast.io.mseed.record import detect_archive_format, parse_records
from mseedfast.io.mseed.steim import (control_codes, decode_steim_run,
                                      unpack_steim)


def _decode(data):
    archive = detect_archive_format(data)
    records = parse_records(data, archive)
    return decode_steim_run(data, records, archive)


class TestSteim():
    """
    Test suite for the STEIM1 and STEIM2 decompression.
    """
    def test_control_codes(self):
        frames = np.zeros((1, 16), dtype=np.uint32)
        frames[0, 0] = 0x1B000000  # 00 01 10 11 ...
        assert control_codes(frames)[0, :5].tolist() == [0, 1, 2, 3, 0]

    def test_unpack_steim1_word_types(self):
        frames = np.zeros((1, 16), dtype=np.uint32)
        frames[0, 0] = (1 << 24) | (2 << 22) | (3 << 20)
        frames[0, 3] = 0x01FF0280  # 1, -1, 2, -128
        frames[0, 4] = 0xFFFE0003  # -2, 3
        frames[0, 5] = 0xFFFFFFFB  # -5
        values, valid = unpack_steim(frames, Encoding.STEIM1)
        assert values.shape == valid.shape == (1, 64)
        assert values[0][valid[0]].tolist() == [1, -1, 2, -128, -2, 3, -5]

    def test_unpack_steim2_word_types(self):
        words = [
            (1, 0x01FF0280),  # 1, -1, 2, -128
            (2, (1 << 30) | 0x3FFFFFFF),  # -1
            (2, (2 << 30) | (3 << 15) | 0x7FFE),  # 3, -2
            (2, (3 << 30) | (1 << 20) | (0x3FF << 10) | 5),  # 1, -1, 5
            (3, (1 << 24) | (2 << 18) | (3 << 12) | (0x3F << 6) | 0x3E),
            (3, (1 << 30) | (1 << 25) | (0x1F << 20) | (2 << 15) |
             (0x1E << 10) | (0x0F << 5) | 0x10),
            (3, (2 << 30) | 0x1234F67)]
        frames = np.zeros((1, 16), dtype=np.uint32)
        for pos, (code, word) in enumerate(words, start=3):
            frames[0, 0] |= code << (30 - 2 * pos)
            frames[0, pos] = word
        values, valid = unpack_steim(frames, Encoding.STEIM2)
        assert values.shape == valid.shape == (1, 112)
        assert values[0][valid[0]].tolist() == [
            1, -1, 2, -128, -1, 3, -2, 1, -1, 5,
            1, 2, 3, -1, -2,
            1, -1, 2, -2, 15, -16,
            1, 2, 3, 4, -1, 6, 7]

    def test_undefined_steim2_combination_is_skipped(self):
        frames = np.zeros((1, 16), dtype=np.uint32)
        frames[0, 0] = (2 << 24) | (3 << 22)
        frames[0, 3] = 0x12345678  # code 2 with dnib 0
        frames[0, 4] = 0xC0000001  # code 3 with dnib 3
        values, valid = unpack_steim(frames, Encoding.STEIM2)
        assert not valid.any()

    def test_unpack_requires_complete_frames(self):
        with pytest.raises(ValueError):
            unpack_steim(np.zeros((1, 15), dtype=np.uint32), Encoding.STEIM1)
        with pytest.raises(ValueError):
            unpack_steim(np.zeros((1, 16), dtype=np.uint32), Encoding.INT32)

    @pytest.mark.parametrize('encoding', [Encoding.STEIM1, Encoding.STEIM2])
    @pytest.mark.parametrize('byteorder', ['>', '<'])
    def test_round_trip(self, random_samples, encoding, byteorder):
        samples = list(random_samples)
        data = make_archive(make_channel_records(
            samples, 90, encoding=encoding, byteorder=byteorder))
        decoded, times = _decode(data)
        assert decoded.dtype == np.int32
        np.testing.assert_array_equal(decoded, random_samples)
        assert len(times) == len(decoded)

    def test_extreme_values(self):
        samples = [2 ** 31 - 1, 2 ** 30, 0, -2 ** 30, -2 ** 31 + 1]
        data = make_record(samples, encoding=Encoding.STEIM1)
        decoded, _ = _decode(data)
        assert decoded.tolist() == samples

    def test_steim2_large_differences(self):
        samples = [0, 2 ** 28, -2 ** 28, 0, 7]
        data = make_record(samples, encoding=Encoding.STEIM2)
        decoded, _ = _decode(data)
        assert decoded.tolist() == samples

    def test_header_npts_truncates(self):
        # the STEIM2 word holds 4 differences, only 3 samples are counted
        data = make_record([5, 6, 7, 8], encoding=Encoding.STEIM2, npts=3,
                           xn=7)
        decoded, times = _decode(data)
        assert decoded.tolist() == [5, 6, 7]
        assert len(times) == 3

    def test_integrity_warning(self):
        data = make_record([1, 2, 3, 4], encoding=Encoding.STEIM2, xn=99)
        with pytest.warns(SteimIntegrityWarning):
            decoded, _ = _decode(data)
        # values are still returned
        assert decoded.tolist() == [1, 2, 3, 4]

    def test_empty_record_contributes_nothing(self):
        data = make_archive(
            make_record([1, 2, 3], encoding=Encoding.STEIM2),
            make_record([], encoding=Encoding.STEIM2, sequence_number=2),
            make_record([4, 5], encoding=Encoding.STEIM2, sequence_number=3))
        decoded, times = _decode(data)
        assert decoded.tolist() == [1, 2, 3, 4, 5]
        assert len(times) == 5

    def test_x0_reseeds_every_record(self):
        # first differences of the later records are left at zero, so only
        # X0 of every record gives the right values
        data = make_archive(
            make_record([10, 11], encoding=Encoding.STEIM1),
            make_record([-500, -499], encoding=Encoding.STEIM1,
                        sequence_number=2))
        decoded, _ = _decode(data)
        assert decoded.tolist() == [10, 11, -500, -499]

    def test_timestamps_per_record(self):
        data = make_archive(make_channel_records(
            list(range(250)), 100, sampling_rate=50.0))
        decoded, times = _decode(data)
        assert len(times) == 250
        diffs = np.diff(times)
        assert (diffs > 0).all()
        np.testing.assert_allclose(diffs, 0.02, atol=1e-6)

    def test_steim_words_packing(self):
        # seven 4 bit differences fit into a single STEIM2 word
        assert len(steim_words([1] * 7, version=2)) == 1
        assert len(steim_words([1] * 7, version=1)) == 3
        with pytest.raises(ValueError):
            steim_words([2 ** 30], version=2)

    def test_encode_steim_frame_layout(self):
        data = np.frombuffer(encode_steim([3, 4, 5], version=1), '>u4')
        assert len(data) == 16
        assert data[1] == 3
        assert data[2] == 5
        # two 16 bit differences in word 3, one 32 bit difference in word 4
        assert (data[0] >> 24) & 3 == 2
        assert (data[0] >> 22) & 3 == 3
