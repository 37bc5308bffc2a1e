"""Background worker for the filter pipeline."""

import numpy as np
from PySide6.QtCore import QObject, Signal

from engines.pipeline import run_filters
from utils.constants import DEFAULT_RED_SHIFT
from utils.logging import logger


class FilterWorker(QObject):
    """Runs every filter in a background thread."""
    
    finished = Signal(list)
    error = Signal(str)
    progress = Signal(str)
    
    def __init__(self, image: np.ndarray, shift_amount: int = DEFAULT_RED_SHIFT):
        super().__init__()
        self.image = image
        self.shift_amount = shift_amount
    
    def run(self):
        try:
            h, w = self.image.shape[:2]
            self.progress.emit(f"Filtering ({w}×{h})...")
            results = run_filters(self.image, self.shift_amount)
            self.finished.emit(results)
        except Exception as e:
            logger.error("Filter pipeline failed: %s", e)
            self.error.emit(str(e))
