"""Raster dimensions and channel layout."""

IMG_HEIGHT = 128
IMG_WIDTH = 128
NUM_CHANNELS = 3

# Channel indices
RED = 0
GREEN = 1
BLUE = 2

MAX_SAMPLE = 255

AQUA_RGB = (0, 128, 255)
DEFAULT_RED_SHIFT = 100
