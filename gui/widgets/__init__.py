"""GUI widgets for the filter lab."""

from .image_viewer import ImageViewer, ImageViewerWithControls, raster_to_pixmap

__all__ = ['ImageViewer', 'ImageViewerWithControls', 'raster_to_pixmap']
