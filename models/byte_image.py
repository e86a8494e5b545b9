"""Packed pixel buffer with the geometry that describes it."""

from dataclasses import dataclass

import numpy as np

from utils.constants import MAX_BYTES_PER_PIXEL


@dataclass
class ByteImage:
    """A flat byte buffer of ``rows * columns * bpp`` bytes."""

    data: bytearray
    rows: int
    columns: int
    bpp: int = 1

    def __post_init__(self):
        if not (1 <= self.bpp <= MAX_BYTES_PER_PIXEL):
            raise ValueError(f"bpp must be 1-{MAX_BYTES_PER_PIXEL}, got {self.bpp}")
        if self.rows < 0 or self.columns < 0:
            raise ValueError(f"Invalid geometry {self.rows}x{self.columns}")
        expected = self.rows * self.columns * self.bpp
        if len(self.data) != expected:
            raise ValueError(f"Buffer holds {len(self.data)} bytes, geometry needs {expected}")

    @property
    def length(self) -> int:
        return len(self.data)

    def as_array(self) -> np.ndarray:
        """Shaped view of the buffer: (rows, columns) or (rows, columns, bpp)."""
        array = np.frombuffer(self.data, dtype=np.uint8)
        if self.bpp == 1:
            return array.reshape(self.rows, self.columns)
        return array.reshape(self.rows, self.columns, self.bpp)

    @classmethod
    def from_array(cls, array: np.ndarray) -> "ByteImage":
        """Copy a 2-D or 3-D uint8 array into a new buffer."""
        if array.dtype != np.uint8:
            raise ValueError(f"Expected uint8 pixels, got {array.dtype}")
        if array.ndim == 2:
            rows, columns = array.shape
            bpp = 1
        elif array.ndim == 3:
            rows, columns, bpp = array.shape
        else:
            raise ValueError(f"Expected 2-D or 3-D array, got shape {array.shape}")
        return cls(bytearray(np.ascontiguousarray(array).tobytes()), rows, columns, bpp)

    def blank_like(self) -> "ByteImage":
        """Zeroed buffer with the same geometry."""
        return ByteImage(bytearray(self.length), self.rows, self.columns, self.bpp)
