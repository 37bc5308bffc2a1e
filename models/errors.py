"""Errors raised by the filter library and its collaborators."""


class RasterError(ValueError):
    """Base error for raster handling."""


class InvalidDimensions(RasterError):
    """Raster shape does not satisfy an operation's precondition."""


class DecodeError(RasterError):
    """Image file could not be read into a raster of the expected shape."""
