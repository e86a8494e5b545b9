"""Data models for buffers, filter options and results."""

from .byte_image import ByteImage
from .filter_result import FilterResult
from .filter_params import FilterParams

__all__ = ['ByteImage', 'FilterResult', 'FilterParams']
