#!/usr/bin/env python
"""
Result Viewer for the Machine Vision demos
Shows the annotated image with the analysis statistics and saves them on request
"""

import logging

import cv2
from PySide6.QtWidgets import (
    QDialog, QVBoxLayout, QLabel, QPushButton, QFileDialog, QMessageBox
)
from PySide6.QtCore import Qt
from PySide6.QtGui import QImage, QPixmap

from machine_vision.config import RESULT_IMAGE_WIDTH, RESULT_WINDOW_HEIGHT, RESULT_WINDOW_WIDTH
from machine_vision.utils.results import format_stats, save_results
from machine_vision.utils.visualization import resize_with_aspect_ratio

logger = logging.getLogger(__name__)


def to_qimage(image):
    """Convert a BGR numpy image to a QImage owning its data"""
    rgb = cv2.cvtColor(image, cv2.COLOR_BGR2RGB)
    h, w, ch = rgb.shape
    bytes_per_line = ch * w
    return QImage(rgb.data, w, h, bytes_per_line, QImage.Format_RGB888).copy()


class ResultViewer(QDialog):
    """Window displaying one analysis result"""

    def __init__(self, result, parent=None):
        """Initialize the result viewer

        Args:
            result: Analysis result with annotated_image and summary()
            parent: Parent widget
        """
        super().__init__(parent)
        self.result = result
        self.stats = format_stats(result)

        self.setWindowTitle("Analysis Results")
        self.resize(RESULT_WINDOW_WIDTH, RESULT_WINDOW_HEIGHT)
        self.setup_ui()

    def setup_ui(self):
        """Set up the user interface"""
        layout = QVBoxLayout(self)
        layout.setSpacing(10)

        # Annotated image
        preview = resize_with_aspect_ratio(self.result.annotated_image, width=RESULT_IMAGE_WIDTH)
        self.image_label = QLabel()
        self.image_label.setAlignment(Qt.AlignCenter)
        self.image_label.setPixmap(QPixmap.fromImage(to_qimage(preview)))
        layout.addWidget(self.image_label)

        # Statistics
        self.stats_label = QLabel(self.stats)
        if getattr(self.result, "is_defective", False):
            self.stats_label.setStyleSheet("color: red;")
            self.stats_label.setText(self.stats + "\nDEFECTIVE")
        layout.addWidget(self.stats_label)

        self.save_button = QPushButton("Save Results")
        self.save_button.clicked.connect(self.save)
        layout.addWidget(self.save_button)
        layout.addStretch()

    def save(self):
        """Ask for a report file and save the statistics and image"""
        path, _ = QFileDialog.getSaveFileName(self, "Save Results", "", "Text Files (*.txt)")
        if not path:
            return

        try:
            save_results(path, self.stats, self.result.annotated_image)
        except OSError as e:
            logger.exception("Could not save results")
            QMessageBox.warning(self, "Save Results", f"Could not save results: {e}")
