"""Image I/O using OpenCV."""

from typing import Optional

import cv2
import numpy as np

from models.errors import DecodeError, RasterError
from models.raster_shape import RasterShape, DEFAULT_SHAPE
from utils.logging import logger


def load_image(
    path: str,
    shape: Optional[RasterShape] = DEFAULT_SHAPE,
    fit: bool = False
) -> np.ndarray:
    """
    Load image as an RGB uint8 raster.
    
    The image must match shape unless fit is set, in which case it is
    resized to shape. Pass shape=None to accept any size.
    """
    img = cv2.imread(str(path), cv2.IMREAD_COLOR)
    if img is None:
        raise DecodeError(f"Could not load image from {path}")
    rgb = cv2.cvtColor(img, cv2.COLOR_BGR2RGB)
    
    if shape is not None and rgb.shape != shape.as_tuple():
        h, w = rgb.shape[:2]
        if not fit:
            raise DecodeError(
                f"{path} is {w}x{h}, expected {shape.width}x{shape.height}"
            )
        logger.info("Resizing %s from %dx%d to %dx%d", path, w, h, shape.width, shape.height)
        rgb = cv2.resize(rgb, (shape.width, shape.height), interpolation=cv2.INTER_AREA)
    
    logger.info("Loaded %s (%dx%d)", path, rgb.shape[1], rgb.shape[0])
    return np.ascontiguousarray(rgb)


def save_image(image: np.ndarray, path: str) -> None:
    """Save RGB image."""
    if not cv2.imwrite(str(path), cv2.cvtColor(image, cv2.COLOR_RGB2BGR)):
        raise RasterError(f"Could not save image to {path}")
