"""Tests for the neighborhood filter family (validated, not implemented)."""

import logging

import numpy as np
import pytest
from engines.errors import InvalidArgumentError, KernelNotImplementedError, ParameterRangeError
from engines.neighborhood import (
    convolve_kernel_3x3_divide,
    convolve_kernel_5x5_divide,
    convolve_kernel_7x7_divide,
    convolve_kernel_9x9_divide,
    convolve_kernel_3x3_shift_right,
    convolve_kernel_5x5_shift_right,
    convolve_kernel_7x7_shift_right,
    convolve_kernel_9x9_shift_right,
    kernel_matrix,
    sobel_x,
    sobel_x_shift_right,
)

DIVIDE = {
    3: convolve_kernel_3x3_divide,
    5: convolve_kernel_5x5_divide,
    7: convolve_kernel_7x7_divide,
    9: convolve_kernel_9x9_divide,
}
SHIFT = {
    3: convolve_kernel_3x3_shift_right,
    5: convolve_kernel_5x5_shift_right,
    7: convolve_kernel_7x7_shift_right,
    9: convolve_kernel_9x9_shift_right,
}


def buffers(rows=10, columns=10):
    return bytes(rows * columns), bytearray([0xEE] * (rows * columns))


@pytest.mark.parametrize("size", [3, 5, 7, 9])
def test_valid_convolution_still_fails(size):
    src, dest = buffers()
    kernel = [1] * (size * size)
    assert DIVIDE[size](src, dest, 10, 10, kernel, 1) is False
    assert SHIFT[size](src, dest, 10, 10, kernel, 2) is False
    assert dest == bytearray([0xEE] * 100)


def test_three_by_three_minimum_geometry():
    src, dest = buffers(5, 5)
    assert convolve_kernel_3x3_divide(src, dest, 5, 5, [1] * 9, 1) is False
    assert convolve_kernel_3x3_divide(src, dest, 2, 5, [1] * 9, 1) is False


@pytest.mark.parametrize("size", [3, 5, 7, 9])
def test_rejected_and_unimplemented_look_the_same(size):
    src, dest = buffers()
    kernel = [1] * (size * size)
    valid = DIVIDE[size](src, dest, 10, 10, kernel, 1)
    too_small = DIVIDE[size](src, dest, size - 1, 10, kernel, 1)
    zero_divisor = DIVIDE[size](src, dest, 10, 10, kernel, 0)
    big_shift = SHIFT[size](src, dest, 10, 10, kernel, 8)
    assert valid is too_small is zero_divisor is big_shift is False


def test_valid_call_raises_not_implemented_internally():
    src, dest = buffers()
    with pytest.raises(KernelNotImplementedError):
        convolve_kernel_3x3_divide.__wrapped__(src, dest, 5, 5, np.ones((3, 3)), 1)
    with pytest.raises(KernelNotImplementedError):
        sobel_x.__wrapped__(src, dest, 3, 8)


def test_validation_raises_before_not_implemented():
    src, dest = buffers()
    with pytest.raises(ParameterRangeError):
        convolve_kernel_3x3_divide.__wrapped__(src, dest, 2, 5, [1] * 9, 1)
    with pytest.raises(ParameterRangeError):
        convolve_kernel_5x5_shift_right.__wrapped__(src, dest, 5, 5, [1] * 25, 8)
    with pytest.raises(InvalidArgumentError):
        convolve_kernel_7x7_divide.__wrapped__(src, dest, 7, 7, None, 1)
    with pytest.raises(InvalidArgumentError):
        sobel_x_shift_right.__wrapped__(None, dest, 3, 8, 1)


def test_not_implemented_is_logged(caplog):
    src, dest = buffers()
    with caplog.at_level(logging.DEBUG, logger='engines.registry'):
        assert sobel_x(src, dest, 3, 8) is False
    assert "reserved for future kernel support" in caplog.text


@pytest.mark.parametrize("rows, columns", [(3, 8), (10, 10)])
def test_sobel_valid_geometry_fails(rows, columns):
    src, dest = buffers(rows, columns)
    assert sobel_x(src, dest, rows, columns) is False
    assert sobel_x_shift_right(src, dest, rows, columns, 1) is False


@pytest.mark.parametrize("rows, columns", [(2, 8), (3, 7)])
def test_sobel_small_geometry_rejected(rows, columns):
    with pytest.raises(ParameterRangeError):
        sobel_x.__wrapped__(b'\x00' * 64, bytearray(64), rows, columns)


def test_kernel_matrix_accepts_flat_and_square():
    flat = kernel_matrix(list(range(9)), 3)
    square = kernel_matrix(np.arange(9).reshape(3, 3), 3)
    assert flat.shape == (3, 3)
    assert flat.dtype == np.int16
    assert np.array_equal(flat, square)


@pytest.mark.parametrize("kernel, size", [
    ([1] * 8, 3),
    ([1] * 9, 4),
    ([40000] + [0] * 8, 3),
    ([-40000] + [0] * 8, 3),
    (["a"] * 9, 3),
])
def test_kernel_matrix_rejects(kernel, size):
    with pytest.raises(ParameterRangeError):
        kernel_matrix(kernel, size)
