"""Outcome of one filter run through the pipeline."""

from dataclasses import dataclass
from typing import Optional

from models.byte_image import ByteImage


@dataclass
class FilterResult:
    """Filter outcome with timing and a similarity metric."""

    filter_name: str
    success: bool
    output: ByteImage

    # Runtime
    elapsed_ms: float = 0.0

    # Similarity to the (first) source; None when the filter failed
    psnr: Optional[float] = None
