"""Output of one filter step."""

from dataclasses import dataclass
import numpy as np


@dataclass
class FilterResult:
    """A labelled raster produced by the filter pipeline."""
    
    label: str
    image: np.ndarray
    elapsed_ms: float = 0.0
