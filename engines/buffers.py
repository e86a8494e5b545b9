"""Buffer views, parameter checks and saturation helpers."""

import operator
from typing import Any, Tuple

import numpy as np

from engines.errors import InvalidArgumentError, ParameterRangeError
from utils.constants import BYTE_MAX


def require_buffers(**buffers: Any) -> None:
    """Reject unset buffer references. Always checked before any read."""
    for name, buf in buffers.items():
        if buf is None:
            raise InvalidArgumentError(f"{name} is not set")


def check_length(length: Any) -> int:
    """Validate the declared byte count."""
    try:
        length = operator.index(length)
    except TypeError:
        raise InvalidArgumentError(f"length must be an integer, got {length!r}") from None
    if length < 0:
        raise InvalidArgumentError(f"length must be >= 0, got {length}")
    return length


def check_range(value: Any, low: int, high: int, name: str) -> int:
    """Validate an integer parameter against an inclusive range. Never clamps."""
    try:
        value = operator.index(value)
    except TypeError:
        raise ParameterRangeError(f"{name} must be an integer, got {value!r}") from None
    if not (low <= value <= high):
        raise ParameterRangeError(f"{name} must be {low}-{high}, got {value}")
    return value


def check_byte(value: Any, name: str) -> int:
    return check_range(value, 0, BYTE_MAX, name)


def byte_view(buf: Any, length: int, name: str, writable: bool = False) -> np.ndarray:
    """View the first ``length`` bytes of ``buf`` as a flat uint8 array."""
    if length == 0:
        return np.empty(0, dtype=np.uint8)
    try:
        view = np.frombuffer(buf, dtype=np.uint8)
    except (TypeError, ValueError, BufferError) as e:
        raise InvalidArgumentError(f"{name} is not a contiguous byte buffer: {e}") from None
    if view.size < length:
        raise InvalidArgumentError(f"{name} holds {view.size} bytes, {length} required")
    if writable and not view.flags.writeable:
        raise InvalidArgumentError(f"{name} is read-only")
    return view[:length]


def open_single(src: Any, dest: Any, length: Any) -> Tuple[np.ndarray, np.ndarray]:
    """Validate and view a source/destination pair."""
    require_buffers(src=src, dest=dest)
    length = check_length(length)
    return byte_view(src, length, 'src'), byte_view(dest, length, 'dest', writable=True)


def open_dual(src1: Any, src2: Any, dest: Any, length: Any) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Validate and view two sources and a destination."""
    require_buffers(src1=src1, src2=src2, dest=dest)
    length = check_length(length)
    return (
        byte_view(src1, length, 'src1'),
        byte_view(src2, length, 'src2'),
        byte_view(dest, length, 'dest', writable=True),
    )


def widen(view: np.ndarray) -> np.ndarray:
    """Promote bytes so intermediate results cannot wrap."""
    return view.astype(np.int64)


def saturate(values: np.ndarray) -> np.ndarray:
    """Clamp to [0, 255] and narrow back to bytes."""
    return np.clip(values, 0, BYTE_MAX).astype(np.uint8)


def store(dest: np.ndarray, values: np.ndarray) -> None:
    """Write a fully computed result; the destination is never half-written."""
    dest[...] = values
