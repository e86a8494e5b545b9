"""BPP-aware filters over fixed-width big-endian units.

The buffer is split into consecutive ``bpp``-byte units. A trailing partial
unit cannot take a unit-wise operation and is left as it is in ``dest``.
"""

from typing import Tuple

import numpy as np

from engines.buffers import check_range, open_single, saturate, store, widen
from engines.registry import byte_filter
from utils.constants import MAX_BYTES_PER_PIXEL, MAX_UINT_SHIFT


def split_constant(c: int, bpp: int) -> np.ndarray:
    """Decompose ``c`` into ``bpp`` big-endian bytes.

    Bytes above the unit width are dropped, so ``split_constant(0x0102, 1)``
    is ``[0x02]``.
    """
    mask = (1 << (8 * bpp)) - 1
    return np.frombuffer((c & mask).to_bytes(bpp, 'big'), dtype=np.uint8)


def full_units(s: np.ndarray, out: np.ndarray, bpp: int) -> Tuple[np.ndarray, np.ndarray]:
    """Reshape the whole-unit prefix of source and destination to (units, bpp)."""
    covered = (s.size // bpp) * bpp
    return s[:covered].reshape(-1, bpp), out[:covered].reshape(-1, bpp)


def _open_units(src, dest, length, bpp):
    s, out = open_single(src, dest, length)
    if not out.size:
        return s, out, None
    bpp = check_range(bpp, 1, MAX_BYTES_PER_PIXEL, 'bpp')
    return s, out, bpp


def _check_constant(c) -> int:
    return check_range(c, 0, (1 << (8 * MAX_BYTES_PER_PIXEL)) - 1, 'c')


@byte_filter('multibyte')
def add_uint(src, dest, length, bpp, c):
    """D[i] = saturation255(S[i] + Cs[i % bpp]), Cs = big-endian bytes of C."""
    s, out, bpp = _open_units(src, dest, length, bpp)
    if bpp is None:
        return
    c = _check_constant(c)
    if c == 0:
        store(out, s)
        return
    units, out_units = full_units(s, out, bpp)
    store(out_units, saturate(widen(units) + split_constant(c, bpp)))


@byte_filter('multibyte')
def sub_uint(src, dest, length, bpp, c):
    """D[i] = saturation0(S[i] - Cs[i % bpp]), Cs = big-endian bytes of C."""
    s, out, bpp = _open_units(src, dest, length, bpp)
    if bpp is None:
        return
    c = _check_constant(c)
    if c == 0:
        store(out, s)
        return
    units, out_units = full_units(s, out, bpp)
    store(out_units, saturate(widen(units) - split_constant(c, bpp)))


def _shift_units(units: np.ndarray, n: int, left: bool) -> np.ndarray:
    # Each row of bits is one unit, most significant bit first.
    bits = np.unpackbits(units, axis=1)
    width = bits.shape[1]
    shifted = np.zeros_like(bits)
    if n < width:
        if left:
            shifted[:, :width - n] = bits[:, n:]
        else:
            shifted[:, n:] = bits[:, :width - n]
    return np.packbits(shifted, axis=1)


@byte_filter('multibyte')
def shift_left_uint(src, dest, length, bpp, n):
    """D = (uint)S << N per unit, N in 0..32. Bits past the unit width are lost."""
    s, out, bpp = _open_units(src, dest, length, bpp)
    if bpp is None:
        return
    n = check_range(n, 0, MAX_UINT_SHIFT, 'n')
    if n == 0:
        store(out, s)
        return
    units, out_units = full_units(s, out, bpp)
    store(out_units, _shift_units(units, n, left=True))


@byte_filter('multibyte')
def shift_right_uint(src, dest, length, bpp, n):
    """D = (uint)S >> N per unit, N in 0..32, zero filled."""
    s, out, bpp = _open_units(src, dest, length, bpp)
    if bpp is None:
        return
    n = check_range(n, 0, MAX_UINT_SHIFT, 'n')
    if n == 0:
        store(out, s)
        return
    units, out_units = full_units(s, out, bpp)
    store(out_units, _shift_units(units, n, left=False))
