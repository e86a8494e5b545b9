"""Tests for BPP-aware multi-byte constant filters."""

import pytest
from engines.multibyte import add_uint, sub_uint, shift_left_uint, shift_right_uint, split_constant


def run(func, src, bpp, param, fill=0):
    dest = bytearray([fill] * len(src))
    assert func(bytes(src), dest, len(src), bpp, param) is True
    return list(dest)


def test_split_constant_is_big_endian():
    assert split_constant(0x0A0B0C, 3).tolist() == [0x0A, 0x0B, 0x0C]
    assert split_constant(0x01, 4).tolist() == [0, 0, 0, 1]


def test_split_constant_drops_bytes_above_unit():
    assert split_constant(0x0102, 1).tolist() == [0x02]


def test_add_uint_distributes_constant():
    src = [10, 20, 30, 40, 50, 60]
    assert run(add_uint, src, 3, 0x010203) == [11, 22, 33, 41, 52, 63]


def test_add_uint_saturates_per_byte():
    assert run(add_uint, [250, 250, 250, 250], 2, 0x0A00) == [255, 250, 255, 250]


def test_sub_uint_saturates_per_byte():
    assert run(sub_uint, [5, 100, 5, 100], 2, 0x0A0A) == [0, 90, 0, 90]


def test_bpp_one_matches_add_byte():
    from engines.scalar import add_byte
    src = bytes(range(256))
    expected = bytearray(256)
    add_byte(src, expected, 256, 77)
    assert bytes(run(add_uint, src, 1, 77)) == bytes(expected)


@pytest.mark.parametrize("func", [add_uint, sub_uint])
def test_trailing_partial_unit_untouched(func):
    assert run(func, [1, 1, 1, 1, 1], 2, 0x0101, fill=0xEE)[4] == 0xEE


@pytest.mark.parametrize("func", [add_uint, sub_uint, shift_left_uint, shift_right_uint])
def test_zero_parameter_copies_source(func):
    src = bytes(range(7))
    assert bytes(run(func, src, 2, 0)) == src


def test_shift_left_uint_crosses_byte_boundary():
    assert run(shift_left_uint, [0x01, 0x80], 2, 1) == [0x03, 0x00]


def test_shift_left_uint_drops_bits_past_unit():
    assert run(shift_left_uint, [0xFF, 0xFF], 2, 16) == [0, 0]
    assert run(shift_left_uint, [0, 0, 0, 1], 4, 31) == [0x80, 0, 0, 0]
    assert run(shift_left_uint, [0xFF] * 4, 4, 32) == [0, 0, 0, 0]


def test_shift_left_uint_wide_units():
    src = [0, 0, 0, 0, 0, 0, 0, 1]
    assert run(shift_left_uint, src, 8, 32) == [0, 0, 0, 1, 0, 0, 0, 0]


def test_shift_right_uint():
    assert run(shift_right_uint, [0x03, 0x00], 2, 1) == [0x01, 0x80]
    assert run(shift_right_uint, [0x80, 0, 0, 0], 4, 31) == [0, 0, 0, 1]
    assert run(shift_right_uint, [0x12, 0x34, 0x56, 0x78], 2, 8) == [0, 0x12, 0, 0x56]


@pytest.mark.parametrize("func", [shift_left_uint, shift_right_uint])
def test_shift_uint_trailing_partial_unit_untouched(func):
    assert run(func, [1, 2, 3], 2, 1, fill=0xEE)[2] == 0xEE


@pytest.mark.parametrize("func", [shift_left_uint, shift_right_uint])
def test_shift_uint_out_of_range_fails(func):
    dest = bytearray(4)
    assert func(b'\x01' * 4, dest, 4, 4, 33) is False
    assert func(b'\x01' * 4, dest, 4, 4, -1) is False
    assert dest == bytearray(4)


@pytest.mark.parametrize("func", [add_uint, sub_uint, shift_left_uint, shift_right_uint])
@pytest.mark.parametrize("bpp", [0, 17, -2])
def test_bpp_out_of_range_fails(func, bpp):
    assert func(b'\x01' * 4, bytearray(4), 4, bpp, 1) is False


@pytest.mark.parametrize("func", [add_uint, sub_uint])
def test_negative_constant_fails(func):
    assert func(b'\x01' * 4, bytearray(4), 4, 2, -1) is False


def test_sixteen_byte_units():
    src = [0] * 32
    c = int.from_bytes(bytes(range(1, 17)), 'big')
    assert run(add_uint, src, 16, c) == list(range(1, 17)) * 2


@pytest.mark.parametrize("func", [add_uint, sub_uint, shift_left_uint, shift_right_uint])
def test_zero_length_and_unset_buffers(func):
    assert func(b'', bytearray(), 0, 2, 1) is True
    assert func(None, bytearray(2), 2, 2, 1) is False
    assert func(b'\x00\x00', None, 2, 2, 1) is False


def test_in_place():
    buf = bytearray([0x01, 0x80, 0x00, 0x01])
    assert shift_left_uint(buf, buf, 4, 2, 1)
    assert list(buf) == [0x03, 0x00, 0x00, 0x02]
