"""Data models for raster shapes, filter results and errors."""

from .errors import RasterError, InvalidDimensions, DecodeError
from .raster_shape import RasterShape, DEFAULT_SHAPE
from .filter_result import FilterResult

__all__ = [
    'RasterError',
    'InvalidDimensions',
    'DecodeError',
    'RasterShape',
    'DEFAULT_SHAPE',
    'FilterResult',
]
