"""Per-channel intensity shifts."""

import numpy as np

from engines.raster_ops import check_raster, clamp_array
from utils.constants import RED, GREEN, BLUE, MAX_SAMPLE


def red_shift(source: np.ndarray, shift_amount: int) -> np.ndarray:
    """Copy of source with shift_amount added to the red channel, clamped to 0-255."""
    source = check_raster(source)
    
    # Any shift beyond +-255 saturates every sample anyway
    shift = max(-MAX_SAMPLE, min(MAX_SAMPLE, int(shift_amount)))
    
    image = np.empty(source.shape, dtype=np.uint8)
    image[:, :, RED] = clamp_array(source[:, :, RED].astype(np.int16) + shift)
    image[:, :, GREEN] = source[:, :, GREEN]
    image[:, :, BLUE] = source[:, :, BLUE]
    return image
