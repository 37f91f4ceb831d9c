# -*- coding: utf-8 -*-
import numpy as np
import pytest

from mseedfast.io.mseed.bitfield import (read_uint, sign_extend, split_signed,
                                         split_unsigned, words)


class TestBitfield():
    """
    Test suite for the byte and bit field primitives.
    """
    def test_read_uint_both_byte_orders(self):
        buf = b'\x00\x07\xe4\x00'
        assert read_uint(buf, 1, 2, '>') == 2020
        assert read_uint(buf, 1, 2, '<') == 0xe407

    def test_words_ignores_trailing_bytes(self):
        w = words(b'\x00\x00\x00\x01\x00\x00\x00\x02\xff', '>')
        assert w.tolist() == [1, 2]
        w = words(b'\x01\x00\x00\x00', '<')
        assert w.tolist() == [1]

    def test_sign_extend(self):
        values = np.array([0x7, 0x8, 0xF], dtype=np.uint32)
        assert sign_extend(values, 4).tolist() == [7, -8, -1]
        values = np.array([0x80000000, 0x7FFFFFFF], dtype=np.uint32)
        assert sign_extend(values, 32).tolist() == [-2 ** 31, 2 ** 31 - 1]

    def test_sign_extend_invalid_width(self):
        with pytest.raises(ValueError):
            sign_extend(np.array([1]), 0)
        with pytest.raises(ValueError):
            sign_extend(np.array([1]), 33)

    def test_split_signed_msb_first(self):
        # 0x12 0x34 0xFE 0x80
        values = np.array([0x1234FE80], dtype=np.uint32)
        assert split_signed(values, 8, 4).tolist() == [[18, 52, -2, -128]]
        assert split_signed(values, 16, 2).tolist() == [[4660, -384]]

    def test_split_signed_ignores_high_bits(self):
        # top two bits are a STEIM2 dnib and must not leak into the values
        word = (2 << 30) | (5 << 15) | 0x7FFF
        values = np.array([word], dtype=np.uint32)
        assert split_signed(values, 15, 2, 30).tolist() == [[5, -1]]
        # seven 4 bit fields in the low 28 bits
        word = (2 << 30) | 0x0123456
        values = np.array([word], dtype=np.uint32)
        assert split_signed(values, 4, 7, 28).tolist() == \
            [[0, 1, 2, 3, 4, 5, 6]]

    def test_split_shape(self):
        values = np.arange(5, dtype=np.uint32)
        assert split_signed(values, 6, 5, 30).shape == (5, 5)
        assert split_unsigned(values, 2, 16).shape == (5, 16)

    def test_split_too_wide(self):
        values = np.arange(2, dtype=np.uint32)
        with pytest.raises(ValueError):
            split_signed(values, 8, 5)
        with pytest.raises(ValueError):
            split_unsigned(values, 10, 3, 28)

    def test_split_unsigned(self):
        values = np.array([0x55555555], dtype=np.uint32)
        assert split_unsigned(values, 2, 16).tolist() == [[1] * 16]
