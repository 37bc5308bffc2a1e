"""Shared utilities."""

from .constants import IMG_HEIGHT, IMG_WIDTH, NUM_CHANNELS, RED, GREEN, BLUE
from .logging import get_logger
from .metrics import Timer
from .test_images import generate_colored_checkerboard, generate_color_bars, generate_demo_image

__all__ = [
    'IMG_HEIGHT',
    'IMG_WIDTH',
    'NUM_CHANNELS',
    'RED',
    'GREEN',
    'BLUE',
    'get_logger',
    'Timer',
    'generate_colored_checkerboard',
    'generate_color_bars',
    'generate_demo_image',
]
