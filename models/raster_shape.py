"""Raster dimensions."""

from dataclasses import dataclass
from typing import Tuple

from models.errors import InvalidDimensions
from utils.constants import IMG_HEIGHT, IMG_WIDTH, NUM_CHANNELS


@dataclass(frozen=True)
class RasterShape:
    """Height, width and channel count of an RGB raster."""
    
    height: int = IMG_HEIGHT
    width: int = IMG_WIDTH
    channels: int = NUM_CHANNELS
    
    def __post_init__(self):
        if self.height < 1 or self.width < 1:
            raise InvalidDimensions(
                f"Height and width must be positive, got {self.height}x{self.width}"
            )
        if self.channels != NUM_CHANNELS:
            raise InvalidDimensions(f"Channels must be {NUM_CHANNELS}, got {self.channels}")
    
    @property
    def is_square(self) -> bool:
        return self.height == self.width
    
    def as_tuple(self) -> Tuple[int, int, int]:
        return (self.height, self.width, self.channels)
    
    @classmethod
    def of(cls, raster) -> 'RasterShape':
        """Shape of an existing raster array."""
        h, w, c = raster.shape
        return cls(height=h, width=w, channels=c)


DEFAULT_SHAPE = RasterShape()
