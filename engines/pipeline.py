"""Runs every filter on one source raster, in display order."""

import numpy as np
from typing import List

from models.filter_result import FilterResult
from models.raster_shape import RasterShape
from engines.raster_ops import check_raster, copy_raster
from engines.synthesis import make_aqua, make_gradient
from engines.channel_shift import red_shift
from engines.blur import blur
from engines.rotation import rotate_right
from utils.constants import DEFAULT_RED_SHIFT
from utils.logging import logger
from utils.metrics import Timer

FILTER_LABELS = ("Original", "Red", "Blurred", "Gradient", "Aqua", "Rotated")


def run_filters(source: np.ndarray, shift_amount: int = DEFAULT_RED_SHIFT) -> List[FilterResult]:
    """
    Apply each filter to source and collect the labelled outputs.
    
    Synthesised rasters take the source's dimensions. Errors raised by a
    filter (e.g. rotating a non-square source) propagate to the caller.
    """
    source = check_raster(source)
    shape = RasterShape.of(source)
    timer = Timer()
    
    steps = [
        ("Original", copy_raster, (source,)),
        ("Red", red_shift, (source, shift_amount)),
        ("Blurred", blur, (source,)),
        ("Gradient", make_gradient, (shape,)),
        ("Aqua", make_aqua, (shape,)),
        ("Rotated", rotate_right, (source,)),
    ]
    
    results = []
    for label, func, args in steps:
        image = timer.measure(label, func, *args)
        elapsed = timer.timings_ms[label]
        logger.debug("%s filter took %.2f ms", label, elapsed)
        results.append(FilterResult(label=label, image=image, elapsed_ms=elapsed))
    
    logger.debug("Filter pipeline finished in %.2f ms", timer.total_ms)
    return results
