"""Raster allocation, validation and sample clamping."""

import numpy as np

from models.errors import InvalidDimensions, RasterError
from models.raster_shape import RasterShape, DEFAULT_SHAPE
from utils.constants import NUM_CHANNELS, MAX_SAMPLE


def new_raster(shape: RasterShape = DEFAULT_SHAPE) -> np.ndarray:
    """All-black uint8 raster."""
    return np.zeros(shape.as_tuple(), dtype=np.uint8)


def check_raster(source: np.ndarray) -> np.ndarray:
    """Validate an RGB raster and return it as an ndarray."""
    raster = np.asarray(source)
    if raster.ndim != 3 or raster.shape[2] != NUM_CHANNELS:
        raise InvalidDimensions(
            f"Expected (height, width, {NUM_CHANNELS}) raster, got shape {raster.shape}"
        )
    if raster.dtype != np.uint8:
        raise RasterError(f"Expected uint8 samples, got {raster.dtype}")
    return raster


def clamp(value: float) -> int:
    """
    Force a value into the 0-255 sample range.
    
    Values above 255 become 255, below 0 become 0, anything else is
    truncated toward zero.
    """
    value = min(value, float(MAX_SAMPLE))
    value = max(value, 0.0)
    return int(value)


def clamp_array(values: np.ndarray) -> np.ndarray:
    """Element-wise clamp() returning uint8 samples."""
    clipped = np.clip(values, 0, MAX_SAMPLE)
    return np.trunc(clipped).astype(np.uint8)


def copy_raster(source: np.ndarray) -> np.ndarray:
    """Independent C-ordered copy of source."""
    return np.array(check_raster(source), order='C')
