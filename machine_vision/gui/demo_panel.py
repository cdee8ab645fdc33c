#!/usr/bin/env python
"""
Demo Panels
-----------
One page per vision demo: pick an image, start processing and show the
result in a separate window.
"""

import logging
from pathlib import Path

from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QLabel, QPushButton,
    QFileDialog, QDoubleSpinBox
)
from PySide6.QtCore import Signal

from machine_vision import colors_thresholding, multiple_objects
from machine_vision.config import DEFAULT_MIN_PERCENT, DEFAULT_TEMPLATE_PATH
from machine_vision.gui.processing_thread import ProcessingThread
from machine_vision.gui.result_viewer import ResultViewer
from machine_vision.utils.file_selector import file_filter, select_file

logger = logging.getLogger(__name__)


class DemoPanel(QWidget):
    """Base page with file selection and a start button"""

    title = "Demo"
    description = ""

    back_requested = Signal()

    def __init__(self, parent=None):
        super().__init__(parent)
        self.selected_file = None
        self.processing_thread = None
        self.viewers = []
        self.setup_ui()

    def setup_ui(self):
        """Set up the UI components"""
        self.main_layout = QVBoxLayout(self)

        self.description_label = QLabel(self.description)
        self.description_label.setWordWrap(True)
        self.main_layout.addWidget(self.description_label)

        self.choose_button = QPushButton("Choose File")
        self.choose_button.clicked.connect(self.choose_file)
        self.main_layout.addWidget(self.choose_button)

        self.file_name_label = QLabel("No file selected.")
        self.main_layout.addWidget(self.file_name_label)

        # Demo specific controls go here
        self.setup_options()

        buttons_layout = QHBoxLayout()
        self.back_button = QPushButton("Back")
        self.back_button.clicked.connect(self.back_requested.emit)
        self.start_button = QPushButton("Start Image Processing")
        self.start_button.setEnabled(False)
        self.start_button.clicked.connect(self.start_image_processing)
        buttons_layout.addWidget(self.back_button)
        buttons_layout.addStretch()
        buttons_layout.addWidget(self.start_button)

        self.main_layout.addStretch()
        self.main_layout.addLayout(buttons_layout)

    def setup_options(self):
        """Add demo specific controls (optional)"""

    def choose_file(self):
        """Open a file dialog and validate the selection"""
        path, _ = QFileDialog.getOpenFileName(self, "Select Image", "", file_filter())
        self.selected_file = select_file(path)

        if self.selected_file is not None:
            self.file_name_label.setText(f"Selected file: {self.selected_file.name}")
            self.start_button.setEnabled(True)
        else:
            self.file_name_label.setText("No valid file selected.")
            self.start_button.setEnabled(False)

    def analysis_call(self):
        """Return (callable, args, kwargs) for the analysis"""
        raise NotImplementedError("Subclasses must implement analysis_call()")

    def start_image_processing(self):
        """Run the analysis in a worker thread"""
        if self.selected_file is None:
            self.file_name_label.setText("No file selected. Please select a file.")
            return

        if self.processing_thread is not None and self.processing_thread.isRunning():
            return

        try:
            analyze, args, kwargs = self.analysis_call()
        except (ValueError, ImportError) as e:
            logger.error("Cannot start processing: %s", e)
            self.file_name_label.setText(str(e))
            return

        self.start_button.setEnabled(False)
        self.start_button.setText("Processing...")

        self.processing_thread = ProcessingThread(analyze, *args, **kwargs)
        self.processing_thread.finished_result.connect(self.show_result)
        self.processing_thread.error.connect(self.handle_error)
        self.processing_thread.finished.connect(self._processing_done)
        self.processing_thread.start()

    def _processing_done(self):
        self.start_button.setText("Start Image Processing")
        self.start_button.setEnabled(self.selected_file is not None)

    def show_result(self, result):
        """Display a result window"""
        viewer = ResultViewer(result, self)
        viewer.finished.connect(lambda _code, v=viewer: self.viewers.remove(v))
        self.viewers.append(viewer)
        viewer.show()

    def handle_error(self, message):
        """Handle errors from the processing thread"""
        logger.error("Error processing image: %s", message)
        self.file_name_label.setText("Error processing image. Please try again.")


class ColorsThresholdingPanel(DemoPanel):
    """Colors thresholding page"""

    title = "Colors Thresholding"
    description = (
        "Detects red, yellow, green and blue regions. Regions whose color "
        "covers at least the minimum percentage of their bounding box are outlined."
    )

    def setup_options(self):
        options_layout = QHBoxLayout()
        options_layout.addWidget(QLabel("Minimum percentage:"))
        self.min_percent_spin = QDoubleSpinBox()
        self.min_percent_spin.setRange(0.0, 100.0)
        self.min_percent_spin.setSingleStep(5.0)
        self.min_percent_spin.setSuffix(" %")
        self.min_percent_spin.setValue(DEFAULT_MIN_PERCENT)
        options_layout.addWidget(self.min_percent_spin)
        options_layout.addStretch()
        self.main_layout.addLayout(options_layout)

    def analysis_call(self):
        return (
            colors_thresholding.analyze_image,
            (self.selected_file, self.selected_file.name),
            {"min_percent": self.min_percent_spin.value()},
        )


class BarcodeReaderPanel(DemoPanel):
    """Barcode reader page"""

    title = "Barcode View"
    description = "Reads a barcode from the image and shows the part category it belongs to."

    def analysis_call(self):
        # pyzbar needs the native zbar library; import only when this demo runs
        from machine_vision import barcode_reader
        return barcode_reader.analyze_image, (self.selected_file, self.selected_file.name), {}


class MultipleObjectsPanel(DemoPanel):
    """Multiple objects page"""

    title = "Multiple Objects View"
    description = (
        "Finds every copy of the template in the image, including scaled "
        "down and rotated copies."
    )

    def __init__(self, parent=None):
        self.template_file = Path(DEFAULT_TEMPLATE_PATH) if DEFAULT_TEMPLATE_PATH else None
        super().__init__(parent)

    def setup_options(self):
        template_layout = QHBoxLayout()
        self.template_label = QLabel(self._template_text())
        self.template_button = QPushButton("Choose Template")
        self.template_button.clicked.connect(self.choose_template)
        template_layout.addWidget(self.template_label)
        template_layout.addStretch()
        template_layout.addWidget(self.template_button)
        self.main_layout.addLayout(template_layout)

    def _template_text(self):
        if self.template_file is None:
            return "Template: none"
        return f"Template: {self.template_file.name}"

    def choose_template(self):
        """Pick the template image"""
        path, _ = QFileDialog.getOpenFileName(self, "Select Template", "", file_filter())
        template = select_file(path)
        if template is not None:
            self.template_file = template
        self.template_label.setText(self._template_text())

    def analysis_call(self):
        if self.template_file is None:
            raise ValueError("Template image not found.")
        return (
            multiple_objects.analyze_image,
            (self.selected_file, self.template_file, self.selected_file.name),
            {},
        )
