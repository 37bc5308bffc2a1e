"""Tests for red channel shift."""

import numpy as np
from engines.channel_shift import red_shift
from engines.raster_ops import clamp


def _random_raster(h=16, w=12, seed=0):
    rng = np.random.default_rng(seed)
    return rng.integers(0, 256, (h, w, 3), dtype=np.uint8)


def test_zero_shift_is_identity():
    """Shifting by 0 reproduces the source."""
    source = _random_raster()
    assert np.array_equal(red_shift(source, 0), source)


def test_shift_only_touches_red():
    """Red is clamped source + shift, green and blue are copied."""
    source = _random_raster()
    for shift in [-300, -100, -1, 1, 100, 300]:
        shifted = red_shift(source, shift)
        assert shifted.shape == source.shape
        assert np.array_equal(shifted[:, :, 1], source[:, :, 1])
        assert np.array_equal(shifted[:, :, 2], source[:, :, 2])
        expected = np.vectorize(lambda r: clamp(int(r) + shift))(source[:, :, 0])
        assert np.array_equal(shifted[:, :, 0], expected)


def test_extreme_shift_saturates():
    """Huge shifts clamp instead of overflowing."""
    source = _random_raster()
    assert np.all(red_shift(source, 10**20)[:, :, 0] == 255)
    assert np.all(red_shift(source, -10**20)[:, :, 0] == 0)


def test_source_untouched():
    """Input raster is not modified."""
    source = _random_raster()
    before = source.copy()
    red_shift(source, 100)
    assert np.array_equal(source, before)


def test_fortran_input_gives_c_ordered_output():
    """Output is C-contiguous whatever the input memory order."""
    source = np.asfortranarray(_random_raster(6, 6))
    shifted = red_shift(source, 30)
    assert shifted.flags['C_CONTIGUOUS']
    assert np.array_equal(shifted[:, :, 1:], source[:, :, 1:])
