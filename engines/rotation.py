"""Quarter-turn rotation."""

import numpy as np

from models.errors import InvalidDimensions
from models.raster_shape import RasterShape
from engines.raster_ops import check_raster, new_raster


def rotate_right(source: np.ndarray) -> np.ndarray:
    """
    Copy of source rotated 90 degrees clockwise.
    
    Pixel (i, j) moves to (j, width - 1 - i). Only square rasters keep their
    shape under this mapping, so anything else raises InvalidDimensions.
    """
    source = check_raster(source)
    shape = RasterShape.of(source)
    if not shape.is_square:
        raise InvalidDimensions(
            f"rotate_right needs a square raster, got {shape.width}x{shape.height}"
        )
    
    w = shape.width
    rows, cols = np.indices((shape.height, w))
    image = new_raster(shape)
    image[cols, (w - 1) - rows] = source[rows, cols]
    return image
