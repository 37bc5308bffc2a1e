"""Raster filters - pure computation, no GUI dependencies."""

from .raster_ops import new_raster, check_raster, copy_raster, clamp, clamp_array
from .synthesis import make_aqua, make_gradient
from .channel_shift import red_shift
from .blur import blur
from .rotation import rotate_right
from .pipeline import run_filters, FILTER_LABELS

__all__ = [
    'new_raster',
    'check_raster',
    'copy_raster',
    'clamp',
    'clamp_array',
    'make_aqua',
    'make_gradient',
    'red_shift',
    'blur',
    'rotate_right',
    'run_filters',
    'FILTER_LABELS',
]
