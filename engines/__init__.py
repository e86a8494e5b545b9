"""Byte-buffer filters - pure computation, no I/O."""

from .errors import FilterError, InvalidArgumentError, ParameterRangeError, KernelNotImplementedError
from .registry import FilterInfo, byte_filter, get_filter, list_filters
from .arithmetic import (
    add, mean, sub, abs_diff, mult, mult_unbound, mult_inv,
    mult_div_by2, mult_div_by4, bit_and, bit_or, div,
)
from .scalar import (
    bit_negation, add_byte, add_byte_to_half, sub_byte, mult_by_byte,
    shift_right, shift_right_and_mult_by_byte, shift_left, shift_left_byte,
    binarize_using_threshold, clip_to_range, normalize_linear,
)
from .multibyte import add_uint, sub_uint, shift_left_uint, shift_right_uint, split_constant
from .neighborhood import (
    convolve_kernel_3x3_divide,
    convolve_kernel_5x5_divide,
    convolve_kernel_7x7_divide,
    convolve_kernel_9x9_divide,
    convolve_kernel_3x3_shift_right,
    convolve_kernel_5x5_shift_right,
    convolve_kernel_7x7_shift_right,
    convolve_kernel_9x9_shift_right,
    sobel_x,
    sobel_x_shift_right,
)
from .pipeline import apply_filter

__all__ = [
    'FilterError',
    'InvalidArgumentError',
    'ParameterRangeError',
    'KernelNotImplementedError',
    'FilterInfo',
    'byte_filter',
    'get_filter',
    'list_filters',
    # Dual-source
    'add',
    'mean',
    'sub',
    'abs_diff',
    'mult',
    'mult_unbound',
    'mult_inv',
    'mult_div_by2',
    'mult_div_by4',
    'bit_and',
    'bit_or',
    'div',
    # Single-source
    'bit_negation',
    'add_byte',
    'add_byte_to_half',
    'sub_byte',
    'mult_by_byte',
    'shift_right',
    'shift_right_and_mult_by_byte',
    'shift_left',
    'shift_left_byte',
    'binarize_using_threshold',
    'clip_to_range',
    'normalize_linear',
    # BPP-aware
    'add_uint',
    'sub_uint',
    'shift_left_uint',
    'shift_right_uint',
    'split_constant',
    # Neighborhood
    'convolve_kernel_3x3_divide',
    'convolve_kernel_5x5_divide',
    'convolve_kernel_7x7_divide',
    'convolve_kernel_9x9_divide',
    'convolve_kernel_3x3_shift_right',
    'convolve_kernel_5x5_shift_right',
    'convolve_kernel_7x7_shift_right',
    'convolve_kernel_9x9_shift_right',
    'sobel_x',
    'sobel_x_shift_right',
    'apply_filter',
]
