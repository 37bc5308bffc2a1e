"""Tests for the background filter worker."""

import numpy as np

from gui.worker import FilterWorker
from utils.test_images import generate_colored_checkerboard


def test_worker_emits_results():
    """Successful run emits the result list on finished."""
    worker = FilterWorker(generate_colored_checkerboard(16), shift_amount=10)
    finished, errors = [], []
    worker.finished.connect(finished.append)
    worker.error.connect(errors.append)
    worker.run()
    assert not errors
    assert [r.label for r in finished[0]][0] == "Original"


def test_worker_reports_errors():
    """Filter failures are emitted on error, not raised."""
    worker = FilterWorker(np.zeros((4, 6, 3), dtype=np.uint8))
    finished, errors = [], []
    worker.finished.connect(finished.append)
    worker.error.connect(errors.append)
    worker.run()
    assert not finished
    assert "square" in errors[0]
