"""Rasters built from scratch: solid aqua and vertical gradient."""

import numpy as np

from models.raster_shape import RasterShape, DEFAULT_SHAPE
from engines.raster_ops import new_raster
from utils.constants import AQUA_RGB


def make_aqua(shape: RasterShape = DEFAULT_SHAPE) -> np.ndarray:
    """Raster filled with pure aqua (0, 128, 255)."""
    image = new_raster(shape)
    image[:, :] = AQUA_RGB
    return image


def make_gradient(shape: RasterShape = DEFAULT_SHAPE) -> np.ndarray:
    """
    Black to white vertical gradient.
    
    Every channel of row i holds i * 2, so a 128-row raster spans 0-254.
    The value is stored into 8 bits without clamping: rows from 128 on wrap
    around modulo 256 (row 128 is black again).
    """
    image = new_raster(shape)
    rows = (np.arange(shape.height, dtype=np.int64) * 2) % 256
    image[:, :, :] = rows.astype(np.uint8)[:, None, None]
    return image
