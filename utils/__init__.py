"""Shared utilities."""

from .constants import MAX_BYTES_PER_PIXEL, MAX_BYTE_SHIFT, MAX_UINT_SHIFT, KERNEL_SIZES
from .metrics import compute_psnr, Timer

__all__ = [
    'MAX_BYTES_PER_PIXEL',
    'MAX_BYTE_SHIFT',
    'MAX_UINT_SHIFT',
    'KERNEL_SIZES',
    'compute_psnr',
    'Timer',
]
