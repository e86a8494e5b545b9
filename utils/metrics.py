"""Metrics: PSNR and runtime."""

import time

import numpy as np
from skimage.metrics import peak_signal_noise_ratio


def compute_psnr(original: np.ndarray, filtered: np.ndarray) -> float:
    """PSNR of a filtered buffer against its source, in dB.

    Identical buffers give ``inf``.
    """
    if original.shape != filtered.shape:
        raise ValueError(f"Shape mismatch: {original.shape} vs {filtered.shape}")
    if original.size == 0 or np.array_equal(original, filtered):
        return float('inf')
    return float(peak_signal_noise_ratio(original, filtered, data_range=255))


class Timer:
    """Simple timer for filter runtime."""

    def __init__(self):
        self.elapsed_ms = 0.0

    def measure(self, func, *args, **kwargs):
        start = time.perf_counter()
        result = func(*args, **kwargs)
        self.elapsed_ms = (time.perf_counter() - start) * 1000.0
        return result
