"""Main application window."""

from pathlib import Path
from typing import List, Optional

import numpy as np
from PySide6.QtWidgets import (
    QMainWindow, QWidget, QHBoxLayout, QVBoxLayout, QScrollArea, QStatusBar,
    QFileDialog, QMessageBox
)
from PySide6.QtCore import QThread
from PySide6.QtGui import QAction

from gui.widgets.image_viewer import ImageViewerWithControls
from gui.worker import FilterWorker
from models.filter_result import FilterResult
from utils.constants import DEFAULT_RED_SHIFT
from utils.image_io import load_image, save_image
from utils.logging import logger
from utils.test_images import generate_demo_image

APP_VERSION = "1.0"
APP_NAME = "Raster Filter Lab"


class MainWindow(QMainWindow):
    """
    Window showing the source raster and every filter output side by side.

    Each result gets its own labelled viewer in a single horizontal row.
    """

    def __init__(self, shift_amount: int = DEFAULT_RED_SHIFT, fit: bool = False):
        super().__init__()

        self.setWindowTitle(f"{APP_NAME}: Elementary Raster Filters")
        self.setMinimumSize(1200, 360)

        self._shift_amount = shift_amount
        self._fit = fit
        self._image: Optional[np.ndarray] = None
        self._results: List[FilterResult] = []
        self._panels: List[ImageViewerWithControls] = []
        self._thread = None
        self._worker = None

        self._init_ui()
        self._init_menu()
        self._init_statusbar()

        self._apply_dark_theme()

    def _init_ui(self):
        """Scrollable row of result panels."""
        central_widget = QWidget()
        self.setCentralWidget(central_widget)

        layout = QVBoxLayout(central_widget)
        layout.setContentsMargins(6, 6, 6, 6)

        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        layout.addWidget(scroll)

        row = QWidget()
        self._results_layout = QHBoxLayout(row)
        self._results_layout.setContentsMargins(0, 0, 0, 0)
        self._results_layout.setSpacing(8)
        scroll.setWidget(row)

    def _init_menu(self):
        """Initialize menu bar."""
        menubar = self.menuBar()

        file_menu = menubar.addMenu("&File")

        load_action = QAction("&Load Image", self)
        load_action.setShortcut("Ctrl+O")
        load_action.triggered.connect(self._on_load_image)
        file_menu.addAction(load_action)

        export_action = QAction("&Export Results...", self)
        export_action.setShortcut("Ctrl+S")
        export_action.triggered.connect(self._on_export)
        file_menu.addAction(export_action)

        file_menu.addSeparator()

        exit_action = QAction("E&xit", self)
        exit_action.setShortcut("Ctrl+Q")
        exit_action.triggered.connect(self.close)
        file_menu.addAction(exit_action)

        demo_menu = menubar.addMenu("&Demo")
        demo_submenu = demo_menu.addMenu("Load Demo Image")

        demo_images = [
            ("Checkerboard", "checkerboard"),
            ("Color Bars", "color_bars"),
            ("Arrow", "arrow"),
        ]

        for label, key in demo_images:
            action = QAction(label, self)
            action.setData(key)
            action.triggered.connect(lambda checked, k=key: self.load_demo_image(k))
            demo_submenu.addAction(action)

    def _init_statusbar(self):
        self._statusbar = QStatusBar()
        self.setStatusBar(self._statusbar)
        self._statusbar.showMessage("Ready. Load an image to begin.")

    def display(self, image: np.ndarray, label: str) -> ImageViewerWithControls:
        """Append a labelled panel showing image."""
        panel = ImageViewerWithControls(label)
        panel.set_image(image)
        self._results_layout.addWidget(panel)
        self._panels.append(panel)
        return panel

    def clear_results(self):
        for panel in self._panels:
            self._results_layout.removeWidget(panel)
            panel.deleteLater()
        self._panels = []
        self._results = []

    def panel_labels(self) -> List[str]:
        return [panel.label() for panel in self._panels]

    def set_source(self, image: np.ndarray, name: str):
        """Replace the source raster and filter it in the background."""
        if self._thread is not None:
            self._statusbar.showMessage("Still filtering, try again in a moment")
            return

        self._image = image
        self.clear_results()
        h, w = image.shape[:2]
        self._statusbar.showMessage(f"Loaded: {name} ({w}x{h})")
        self._run_filters()

    def load_demo_image(self, key: str):
        demo_image = generate_demo_image(key)

        if demo_image is None:
            QMessageBox.warning(self, "Demo Error", f"Could not load demo image: {key}")
            return

        self.set_source(demo_image, f"demo {key}")

    def _on_load_image(self):
        file_path, _ = QFileDialog.getOpenFileName(
            self, "Open Image",
            "",
            "Images (*.png *.jpg *.jpeg *.bmp *.tiff);;All Files (*)"
        )

        if file_path:
            try:
                image = load_image(file_path, fit=self._fit)
            except Exception as e:
                QMessageBox.critical(self, "Error", f"Failed to load image:\n{e}")
                return
            self.set_source(image, Path(file_path).name)

    def _on_export(self):
        if not self._results:
            QMessageBox.information(self, "Export", "Nothing to export yet.")
            return

        folder = QFileDialog.getExistingDirectory(self, "Export Results To")
        if not folder:
            return

        try:
            for result in self._results:
                save_image(result.image, str(Path(folder) / f"filtered_{result.label.lower()}.png"))
        except Exception as e:
            QMessageBox.critical(self, "Export Error", f"Failed to save:\n{e}")
            return

        self._statusbar.showMessage(f"Exported {len(self._results)} files to {folder}")

    def _run_filters(self):
        self._thread = QThread()
        self._worker = FilterWorker(self._image, self._shift_amount)
        self._worker.moveToThread(self._thread)

        self._thread.started.connect(self._worker.run)
        self._worker.progress.connect(self._statusbar.showMessage)
        self._worker.finished.connect(self._on_filters_finished)
        self._worker.error.connect(self._on_filters_error)
        self._worker.finished.connect(self._thread.quit)
        self._worker.error.connect(self._thread.quit)
        self._thread.finished.connect(self._cleanup_thread)

        self._thread.start()

    def _on_filters_finished(self, results: List[FilterResult]):
        self._results = results
        for result in results:
            self.display(result.image, result.label)

        total_time = sum(result.elapsed_ms for result in results)
        self._statusbar.showMessage(f"Applied {len(results) - 1} filters in {total_time:.1f}ms")

    def _on_filters_error(self, error_msg: str):
        QMessageBox.critical(self, "Filter Error", error_msg)
        self._statusbar.showMessage(f"Error: {error_msg}")

    def _cleanup_thread(self):
        if self._thread:
            self._thread.deleteLater()
            self._thread = None
        if self._worker:
            self._worker.deleteLater()
            self._worker = None

    def closeEvent(self, event):
        if self._thread is not None:
            self._thread.quit()
            self._thread.wait()
        logger.debug("Main window closed")
        super().closeEvent(event)

    def _apply_dark_theme(self):
        self.setStyleSheet("""
            QMainWindow {
                background-color: #1a1a1a;
            }
            QWidget {
                background-color: #242424;
                color: #e8e8e8;
                font-family: 'Segoe UI', 'SF Pro Display', 'Arial', sans-serif;
                font-size: 12px;
            }
            QPushButton {
                background: qlineargradient(x1:0, y1:0, x2:0, y2:1,
                    stop:0 #4a4a4a, stop:1 #404040);
                border: 1px solid #555;
                border-radius: 4px;
                color: #ccc;
                font-size: 10px;
                padding: 2px 8px;
            }
            QPushButton:hover {
                background: qlineargradient(x1:0, y1:0, x2:0, y2:1,
                    stop:0 #555, stop:1 #4a4a4a);
                color: #fff;
            }
            QPushButton:pressed {
                background: #383838;
            }
            QMenuBar {
                background-color: #1e1e1e;
            }
            QMenuBar::item:selected, QMenu::item:selected {
                background-color: #4a9eff;
            }
            QStatusBar {
                background-color: #1e1e1e;
                color: #999;
            }
            QScrollArea {
                border: none;
            }
        """)
