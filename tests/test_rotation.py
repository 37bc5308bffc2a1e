"""Tests for clockwise rotation."""

import numpy as np
import pytest
from engines.rotation import rotate_right
from models.errors import InvalidDimensions


def test_four_rotations_identity():
    """Four quarter turns return the original raster."""
    source = np.random.default_rng(1).integers(0, 256, (9, 9, 3), dtype=np.uint8)
    rotated = source
    for _ in range(4):
        rotated = rotate_right(rotated)
    assert np.array_equal(rotated, source)


def test_corner_mapping_2x2():
    """(i, j) moves to (j, width - 1 - i)."""
    source = np.zeros((2, 2, 3), dtype=np.uint8)
    source[0, 0] = [1, 1, 1]
    source[0, 1] = [2, 2, 2]
    source[1, 0] = [3, 3, 3]
    source[1, 1] = [4, 4, 4]
    rotated = rotate_right(source)
    assert rotated[0, 1, 0] == 1
    assert rotated[1, 1, 0] == 2
    assert rotated[0, 0, 0] == 3
    assert rotated[1, 0, 0] == 4


def test_channels_copied_verbatim():
    """No colour transform is applied."""
    source = np.zeros((3, 3, 3), dtype=np.uint8)
    source[0, 0] = [10, 20, 30]
    rotated = rotate_right(source)
    assert rotated[0, 2].tolist() == [10, 20, 30]


def test_matches_numpy_clockwise():
    """Agrees with numpy's clockwise quarter turn."""
    source = np.random.default_rng(2).integers(0, 256, (7, 7, 3), dtype=np.uint8)
    assert np.array_equal(rotate_right(source), np.rot90(source, k=-1))


def test_non_square_rejected():
    """Non-square rasters raise InvalidDimensions."""
    with pytest.raises(InvalidDimensions):
        rotate_right(np.zeros((4, 5, 3), dtype=np.uint8))


def test_fortran_input_gives_c_ordered_output():
    """Output is C-contiguous whatever the input memory order."""
    source = np.random.default_rng(6).integers(0, 256, (6, 6, 3), dtype=np.uint8)
    rotated = rotate_right(np.asfortranarray(source))
    assert rotated.flags['C_CONTIGUOUS']
    assert np.array_equal(rotated, rotate_right(source))
