"""Tests for the filter pipeline."""

import numpy as np
import pytest
from engines.pipeline import run_filters, FILTER_LABELS
from engines.blur import blur
from engines.channel_shift import red_shift
from engines.rotation import rotate_right
from engines.synthesis import make_aqua, make_gradient
from models.errors import InvalidDimensions
from models.raster_shape import RasterShape
from utils.test_images import generate_colored_checkerboard, generate_demo_image


def test_labels_in_display_order():
    """Results come back in display order with timings."""
    results = run_filters(generate_colored_checkerboard(32))
    assert tuple(r.label for r in results) == FILTER_LABELS
    assert all(r.elapsed_ms >= 0 for r in results)


def test_outputs_match_filters():
    """Each result equals the corresponding filter called directly."""
    source = generate_colored_checkerboard(32, block_size=4)
    results = {r.label: r.image for r in run_filters(source, shift_amount=40)}
    shape = RasterShape(32, 32)
    assert np.array_equal(results["Original"], source)
    assert np.array_equal(results["Red"], red_shift(source, 40))
    assert np.array_equal(results["Blurred"], blur(source))
    assert np.array_equal(results["Gradient"], make_gradient(shape))
    assert np.array_equal(results["Aqua"], make_aqua(shape))
    assert np.array_equal(results["Rotated"], rotate_right(source))


def test_source_untouched_and_outputs_independent():
    """Source is not modified and no output aliases it."""
    source = generate_colored_checkerboard(16)
    before = source.copy()
    results = run_filters(source)
    assert np.array_equal(source, before)
    for result in results:
        assert not np.shares_memory(result.image, source)


def test_outputs_c_ordered_for_fortran_source():
    """Every output is C-contiguous even from a Fortran-ordered source."""
    source = np.asfortranarray(generate_colored_checkerboard(16))
    for result in run_filters(source):
        assert result.image.flags['C_CONTIGUOUS'], result.label


def test_non_square_source_raises():
    """Rotation error propagates out of the pipeline."""
    with pytest.raises(InvalidDimensions):
        run_filters(np.zeros((8, 10, 3), dtype=np.uint8))


def test_demo_images():
    """Demo generators return default-size rasters; unknown keys give None."""
    for key in ["checkerboard", "color_bars", "arrow"]:
        image = generate_demo_image(key)
        assert image.shape == (128, 128, 3)
        assert image.dtype == np.uint8
    assert generate_demo_image("missing") is None
