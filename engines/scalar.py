"""Single-source filters that combine each byte with a scalar.

Identity settings (``c == 0`` for add/sub, ``c == 1`` for mult_by_byte,
``n == 0`` for shifts) copy the source unchanged.
"""

import logging

import numpy as np

from engines.buffers import check_byte, check_range, open_single, saturate, store, widen
from engines.registry import byte_filter
from utils.constants import BYTE_MAX, MAX_BYTE_SHIFT

logger = logging.getLogger(__name__)

# C int bounds for the normalisation constants
_INT32_MIN = -(1 << 31)
_INT32_MAX = (1 << 31) - 1


@byte_filter('scalar')
def bit_negation(src, dest, length):
    """D = ~S"""
    s, out = open_single(src, dest, length)
    store(out, np.invert(s))


@byte_filter('scalar')
def add_byte(src, dest, length, c):
    """D = saturation255(S + C)"""
    s, out = open_single(src, dest, length)
    if not out.size:
        return
    c = check_byte(c, 'c')
    if c == 0:
        store(out, s)
        return
    store(out, saturate(widen(s) + c))


@byte_filter('scalar')
def add_byte_to_half(src, dest, length, c):
    """D = saturation255(S/2 + C)"""
    s, out = open_single(src, dest, length)
    if not out.size:
        return
    c = check_byte(c, 'c')
    store(out, saturate((widen(s) >> 1) + c))


@byte_filter('scalar')
def sub_byte(src, dest, length, c):
    """D = saturation0(S - C)"""
    s, out = open_single(src, dest, length)
    if not out.size:
        return
    c = check_byte(c, 'c')
    if c == 0:
        store(out, s)
        return
    store(out, saturate(widen(s) - c))


def _scale(values: np.ndarray, c: int) -> np.ndarray:
    # (values/255) * (c/255) * 255, truncated
    return saturate((values * c) // BYTE_MAX)


@byte_filter('scalar')
def mult_by_byte(src, dest, length, c):
    """D = saturation255(S/255 * C/255 * 255). ``c == 1`` copies the source."""
    s, out = open_single(src, dest, length)
    if not out.size:
        return
    c = check_byte(c, 'c')
    if c == 1:
        store(out, s)
        return
    store(out, _scale(widen(s), c))


@byte_filter('scalar')
def shift_right_and_mult_by_byte(src, dest, length, n, c):
    """D = saturation255((S >> N) * C), with C on the unit interval."""
    s, out = open_single(src, dest, length)
    if not out.size:
        return
    n = check_range(n, 0, MAX_BYTE_SHIFT, 'n')
    c = check_byte(c, 'c')
    if n == 0 and c == 1:
        store(out, s)
        return
    store(out, _scale(widen(s) >> n, c))


@byte_filter('scalar')
def shift_right(src, dest, length, n):
    """D = saturation0(S >> N), N in 0..8."""
    s, out = open_single(src, dest, length)
    if not out.size:
        return
    n = check_range(n, 0, MAX_BYTE_SHIFT, 'n')
    if n == 0:
        store(out, s)
        return
    store(out, saturate(widen(s) >> n))


@byte_filter('scalar')
def shift_left(src, dest, length, n):
    """D = saturation255(S << N), N in 0..8."""
    s, out = open_single(src, dest, length)
    if not out.size:
        return
    n = check_range(n, 0, MAX_BYTE_SHIFT, 'n')
    if n == 0:
        store(out, s)
        return
    store(out, saturate(widen(s) << n))


@byte_filter('scalar')
def shift_left_byte(src, dest, length, n):
    """D = (S << N) & 0xFF. Truncates instead of saturating."""
    s, out = open_single(src, dest, length)
    if not out.size:
        return
    n = check_range(n, 0, MAX_BYTE_SHIFT, 'n')
    if n == 0:
        store(out, s)
        return
    store(out, ((widen(s) << n) & 0xFF).astype(np.uint8))


@byte_filter('scalar')
def binarize_using_threshold(src, dest, length, t):
    """D = 255 if S >= T else 0. ``t == 0`` fills with 255."""
    s, out = open_single(src, dest, length)
    if not out.size:
        return
    t = check_byte(t, 't')
    if t == 0:
        out.fill(BYTE_MAX)
        return
    store(out, np.where(s >= t, BYTE_MAX, 0).astype(np.uint8))


@byte_filter('scalar')
def clip_to_range(src, dest, length, tmin, tmax):
    """D = Tmin if S < Tmin, Tmax if S > Tmax, else S."""
    s, out = open_single(src, dest, length)
    if not out.size:
        return
    tmin = check_byte(tmin, 'tmin')
    tmax = check_byte(tmax, 'tmax')
    # Lower bound wins when tmin > tmax
    clipped = np.where(s < tmin, tmin, np.where(s > tmax, tmax, s))
    store(out, clipped.astype(np.uint8))


@byte_filter('scalar')
def normalize_linear(src, dest, length, cmin, cmax, nmin, nmax):
    """D = saturation255((Nmax - Nmin) / (Cmax - Cmin) * (S - Cmin) + Nmin)

    The mapping is undefined when ``cmax == cmin``; the call then succeeds
    without touching ``dest``.
    """
    s, out = open_single(src, dest, length)
    if not out.size:
        return
    cmin = check_range(cmin, _INT32_MIN, _INT32_MAX, 'cmin')
    cmax = check_range(cmax, _INT32_MIN, _INT32_MAX, 'cmax')
    nmin = check_range(nmin, _INT32_MIN, _INT32_MAX, 'nmin')
    nmax = check_range(nmax, _INT32_MIN, _INT32_MAX, 'nmax')
    span = cmax - cmin
    if span == 0:
        logger.debug("normalize_linear: cmin == cmax == %d, nothing written", cmin)
        return
    # Python ints keep the products exact; the table is indexed by byte value.
    table = np.array(
        [min(max(nmin + ((nmax - nmin) * (v - cmin)) // span, 0), BYTE_MAX)
         for v in range(BYTE_MAX + 1)],
        dtype=np.uint8,
    )
    store(out, table[s])
