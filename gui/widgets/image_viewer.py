"""Image viewer with zoom and pan."""

import numpy as np
from PySide6.QtWidgets import (
    QGraphicsView, QGraphicsScene, QWidget, QVBoxLayout, QHBoxLayout,
    QLabel, QPushButton, QFrame
)
from PySide6.QtGui import QPixmap, QImage, QColor, QWheelEvent, QPainter
from PySide6.QtCore import Qt, QRectF


def raster_to_pixmap(image: np.ndarray) -> QPixmap:
    """Convert an RGB uint8 raster to a QPixmap."""
    image = np.ascontiguousarray(image)
    h, w, c = image.shape
    bytes_per_line = 3 * w
    qimage = QImage(image.data, w, h, bytes_per_line, QImage.Format.Format_RGB888)
    # QImage borrows the buffer; copy before the array goes away
    return QPixmap.fromImage(qimage.copy())


class ImageViewer(QGraphicsView):
    """QGraphicsView with wheel zoom and drag pan, nearest-neighbour scaling."""
    
    def __init__(self, parent=None):
        super().__init__(parent)
        
        self._scene = QGraphicsScene(self)
        self.setScene(self._scene)
        
        self._pixmap_item = None
        self._image_array = None
        
        self.setDragMode(QGraphicsView.DragMode.ScrollHandDrag)
        self.setTransformationAnchor(QGraphicsView.ViewportAnchor.AnchorUnderMouse)
        self.setResizeAnchor(QGraphicsView.ViewportAnchor.AnchorUnderMouse)
        self.setVerticalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAsNeeded)
        self.setHorizontalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAsNeeded)
        self.setRenderHint(QPainter.RenderHint.SmoothPixmapTransform, False)
        self.setBackgroundBrush(QColor(40, 40, 40))
        self.setMinimumSize(160, 160)
        
        self._zoom_factor = 1.0
        self._min_zoom = 0.1
        self._max_zoom = 40.0
    
    def set_image(self, image: np.ndarray):
        """Display RGB numpy array."""
        self._image_array = image
        pixmap = raster_to_pixmap(image)
        
        self._scene.clear()
        self._pixmap_item = self._scene.addPixmap(pixmap)
        
        self.setSceneRect(QRectF(pixmap.rect()))
        self.reset_view()
    
    def reset_view(self):
        if self._pixmap_item:
            self.fitInView(self._pixmap_item, Qt.AspectRatioMode.KeepAspectRatio)
            self._zoom_factor = self.transform().m11()
    
    def resizeEvent(self, event):
        super().resizeEvent(event)
        self.reset_view()
    
    def wheelEvent(self, event: QWheelEvent):
        if self._image_array is None:
            event.ignore()
            return
        
        factor = 1.15 if event.angleDelta().y() > 0 else 1 / 1.15
        new_zoom = self._zoom_factor * factor
        
        if self._min_zoom <= new_zoom <= self._max_zoom:
            self._zoom_factor = new_zoom
            self.scale(factor, factor)
        event.accept()


class ImageViewerWithControls(QWidget):
    """ImageViewer with header bar (label, resolution badge, fit button)."""
    
    def __init__(self, label: str = "", parent=None):
        super().__init__(parent)
        
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(2)
        
        header = QFrame()
        header.setStyleSheet("""
            QFrame {
                background: qlineargradient(x1:0, y1:0, x2:0, y2:1,
                    stop:0 #3a3a3a, stop:1 #303030);
                border: 1px solid #3d3d3d;
                border-radius: 5px;
            }
        """)
        header_layout = QHBoxLayout(header)
        header_layout.setContentsMargins(10, 5, 10, 5)
        header_layout.setSpacing(8)
        
        self._label_widget = QLabel(label)
        self._label_widget.setStyleSheet("color: #e8e8e8; font-weight: 600; font-size: 11px; background: transparent;")
        header_layout.addWidget(self._label_widget)
        
        self._res_badge = QLabel("")
        self._res_badge.setStyleSheet(
            "color: #bbb; font-size: 10px; background: #4a4a4a; "
            "padding: 3px 8px; border-radius: 4px; font-weight: 500;"
        )
        self._res_badge.setVisible(False)
        header_layout.addWidget(self._res_badge)
        
        header_layout.addStretch()
        
        self._reset_btn = QPushButton("Fit")
        self._reset_btn.setToolTip("Fit to Window")
        self._reset_btn.setFixedHeight(24)
        self._reset_btn.clicked.connect(self._on_reset_view)
        header_layout.addWidget(self._reset_btn)
        
        layout.addWidget(header)
        
        self._viewer = ImageViewer()
        layout.addWidget(self._viewer)
    
    def label(self) -> str:
        return self._label_widget.text()
    
    def set_image(self, image: np.ndarray):
        self._viewer.set_image(image)
        h, w = image.shape[:2]
        self._res_badge.setText(f"{w}×{h}")
        self._res_badge.setVisible(True)
    
    def _on_reset_view(self):
        self._viewer.reset_view()
