"""Neighborhood filters: 2-D convolution and Sobel-X edge detection.

Reserved for future kernel support. Every call validates its parameters the
same way a working implementation would and then raises
:class:`~engines.errors.KernelNotImplementedError`, so callers always get
``False``. ``dest`` is never written.
"""

import numpy as np

from engines.buffers import check_range, require_buffers
from engines.errors import KernelNotImplementedError, ParameterRangeError
from engines.registry import byte_filter
from utils.constants import (
    BYTE_MAX,
    INT16_MAX,
    INT16_MIN,
    KERNEL_SIZES,
    MAX_KERNEL_RIGHT_SHIFT,
    SOBEL_MIN_COLUMNS,
    SOBEL_MIN_ROWS,
)


def kernel_matrix(kernel, size: int) -> np.ndarray:
    """Validate a flat or 2-D kernel of ``size * size`` int16 weights."""
    if size not in KERNEL_SIZES:
        raise ParameterRangeError(f"Kernel size must be one of {KERNEL_SIZES}, got {size}")
    try:
        weights = np.asarray(kernel, dtype=np.int64)
    except (TypeError, ValueError) as e:
        raise ParameterRangeError(f"Kernel is not numeric: {e}") from None
    if weights.size != size * size:
        raise ParameterRangeError(f"Kernel needs {size * size} weights, got {weights.size}")
    if weights.min() < INT16_MIN or weights.max() > INT16_MAX:
        raise ParameterRangeError("Kernel weights must fit in signed 16 bits")
    return weights.reshape(size, size).astype(np.int16)


def check_geometry(rows, columns, min_rows: int, min_columns: int) -> None:
    check_range(rows, min_rows, np.iinfo(np.int32).max, 'rows')
    check_range(columns, min_columns, np.iinfo(np.int32).max, 'columns')


def _convolve(src, dest, rows, columns, kernel, size, divisor=None, n_right_shift=None):
    require_buffers(src=src, dest=dest, kernel=kernel)
    check_geometry(rows, columns, size, size)
    if n_right_shift is None:
        check_range(divisor, 1, BYTE_MAX, 'divisor')
    else:
        check_range(n_right_shift, 0, MAX_KERNEL_RIGHT_SHIFT, 'n_right_shift')
    kernel_matrix(kernel, size)
    raise KernelNotImplementedError(f"{size}x{size} convolution is reserved for future kernel support")


def _sobel_x(src, dest, rows, columns, n_right_shift=None):
    require_buffers(src=src, dest=dest)
    check_geometry(rows, columns, SOBEL_MIN_ROWS, SOBEL_MIN_COLUMNS)
    if n_right_shift is not None:
        check_range(n_right_shift, 0, MAX_KERNEL_RIGHT_SHIFT, 'n_right_shift')
    raise KernelNotImplementedError("Sobel-X edge detection is reserved for future kernel support")


@byte_filter('neighborhood')
def convolve_kernel_3x3_divide(src, dest, rows, columns, kernel, divisor):
    """Dij = saturation0and255(sum(K * S) / divisor). Not implemented."""
    _convolve(src, dest, rows, columns, kernel, 3, divisor=divisor)


@byte_filter('neighborhood')
def convolve_kernel_5x5_divide(src, dest, rows, columns, kernel, divisor):
    _convolve(src, dest, rows, columns, kernel, 5, divisor=divisor)


@byte_filter('neighborhood')
def convolve_kernel_7x7_divide(src, dest, rows, columns, kernel, divisor):
    _convolve(src, dest, rows, columns, kernel, 7, divisor=divisor)


@byte_filter('neighborhood')
def convolve_kernel_9x9_divide(src, dest, rows, columns, kernel, divisor):
    _convolve(src, dest, rows, columns, kernel, 9, divisor=divisor)


@byte_filter('neighborhood')
def convolve_kernel_3x3_shift_right(src, dest, rows, columns, kernel, n_right_shift):
    """Dij = saturation0and255(sum(K * S) >> n_right_shift). Not implemented."""
    _convolve(src, dest, rows, columns, kernel, 3, n_right_shift=n_right_shift)


@byte_filter('neighborhood')
def convolve_kernel_5x5_shift_right(src, dest, rows, columns, kernel, n_right_shift):
    _convolve(src, dest, rows, columns, kernel, 5, n_right_shift=n_right_shift)


@byte_filter('neighborhood')
def convolve_kernel_7x7_shift_right(src, dest, rows, columns, kernel, n_right_shift):
    _convolve(src, dest, rows, columns, kernel, 7, n_right_shift=n_right_shift)


@byte_filter('neighborhood')
def convolve_kernel_9x9_shift_right(src, dest, rows, columns, kernel, n_right_shift):
    _convolve(src, dest, rows, columns, kernel, 9, n_right_shift=n_right_shift)


@byte_filter('neighborhood')
def sobel_x(src, dest, rows, columns):
    """Horizontal gradient with the 3x3 Sobel-X operator. Not implemented."""
    _sobel_x(src, dest, rows, columns)


@byte_filter('neighborhood')
def sobel_x_shift_right(src, dest, rows, columns, n_right_shift):
    _sobel_x(src, dest, rows, columns, n_right_shift=n_right_shift)
