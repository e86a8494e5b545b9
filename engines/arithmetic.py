"""Dual-source elementwise filters: D[i] = f(S1[i], S2[i]).

Unit-interval blends (mult, mult_inv, mult_div_by*, div) are evaluated in
integer arithmetic. The result equals truncating the exact real-valued
formula, so it does not depend on float rounding.
"""

import numpy as np

from engines.buffers import open_dual, saturate, store, widen
from engines.registry import byte_filter


@byte_filter('dual')
def add(src1, src2, dest, length):
    """D = saturation255(S1 + S2)"""
    a, b, out = open_dual(src1, src2, dest, length)
    store(out, saturate(widen(a) + widen(b)))


@byte_filter('dual')
def mean(src1, src2, dest, length):
    """D = S1/2 + S2/2, halves rounded up."""
    a, b, out = open_dual(src1, src2, dest, length)
    store(out, ((widen(a) + widen(b) + 1) >> 1).astype(np.uint8))


@byte_filter('dual')
def sub(src1, src2, dest, length):
    """D = saturation0(S1 - S2)"""
    a, b, out = open_dual(src1, src2, dest, length)
    store(out, saturate(widen(a) - widen(b)))


@byte_filter('dual')
def abs_diff(src1, src2, dest, length):
    """D = |S1 - S2|"""
    a, b, out = open_dual(src1, src2, dest, length)
    store(out, np.abs(widen(a) - widen(b)).astype(np.uint8))


@byte_filter('dual')
def mult(src1, src2, dest, length):
    """D = (S1/255 * S2/255) * 255"""
    a, b, out = open_dual(src1, src2, dest, length)
    store(out, saturate((widen(a) * widen(b)) // 255))


@byte_filter('dual')
def mult_unbound(src1, src2, dest, length):
    """D = S1 * S2, low 8 bits only. Wraps on purpose."""
    a, b, out = open_dual(src1, src2, dest, length)
    store(out, ((widen(a) * widen(b)) & 0xFF).astype(np.uint8))


@byte_filter('dual')
def mult_inv(src1, src2, dest, length):
    """D = (1 - (1 - S1/255) * (1 - S2/255)) * 255, the "screen" blend."""
    a, b, out = open_dual(src1, src2, dest, length)
    inverse = (255 - widen(a)) * (255 - widen(b))
    # 255 - ceil(inverse / 255)
    store(out, saturate(255 + (-inverse // 255)))


@byte_filter('dual')
def mult_div_by2(src1, src2, dest, length):
    """D = min(1, S1/255 * S2/255 / 2) * 255"""
    a, b, out = open_dual(src1, src2, dest, length)
    store(out, saturate((widen(a) * widen(b)) // 510))


@byte_filter('dual')
def mult_div_by4(src1, src2, dest, length):
    """D = min(1, S1/255 * S2/255 / 4) * 255"""
    a, b, out = open_dual(src1, src2, dest, length)
    store(out, saturate((widen(a) * widen(b)) // 1020))


@byte_filter('dual')
def bit_and(src1, src2, dest, length):
    """D = S1 & S2"""
    a, b, out = open_dual(src1, src2, dest, length)
    store(out, np.bitwise_and(a, b))


@byte_filter('dual')
def bit_or(src1, src2, dest, length):
    """D = S1 | S2"""
    a, b, out = open_dual(src1, src2, dest, length)
    store(out, np.bitwise_or(a, b))


@byte_filter('dual')
def div(src1, src2, dest, length):
    """D = min(1, S1 / S2) * 255, and 0 wherever S2 is 0."""
    a, b, out = open_dual(src1, src2, dest, length)
    numerator = widen(a) * 255
    denominator = widen(b)
    zero = denominator == 0
    quotient = numerator // np.where(zero, 1, denominator)
    store(out, np.where(zero, 0, saturate(quotient)).astype(np.uint8))
