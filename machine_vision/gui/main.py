#!/usr/bin/env python
"""
Machine Vision - GUI Application
Main window with the demo menu
"""

import logging
import sys

from PySide6.QtWidgets import (
    QApplication, QMainWindow, QWidget, QVBoxLayout, QLabel,
    QPushButton, QStackedWidget
)
from PySide6.QtCore import Qt

from machine_vision.config import WINDOW_HEIGHT, WINDOW_TITLE, WINDOW_WIDTH
from machine_vision.gui.demo_panel import (
    BarcodeReaderPanel, ColorsThresholdingPanel, MultipleObjectsPanel
)

logger = logging.getLogger(__name__)


class MachineVisionApp(QMainWindow):
    """Main application window"""

    def __init__(self):
        super().__init__()

        self.setWindowTitle(WINDOW_TITLE)
        self.resize(WINDOW_WIDTH, WINDOW_HEIGHT)

        self.panels = {}
        self.setup_ui()

    def setup_ui(self):
        """Set up the user interface"""
        self.stack = QStackedWidget()
        self.setCentralWidget(self.stack)

        # Main menu
        self.menu = QWidget()
        menu_layout = QVBoxLayout(self.menu)

        self.description_label = QLabel("Select a machine vision demo:")
        self.description_label.setAlignment(Qt.AlignCenter)
        menu_layout.addWidget(self.description_label)

        self.colors_button = QPushButton("Colors Thresholding")
        self.objects_button = QPushButton("Multiple Objects")
        self.barcode_button = QPushButton("Barcode Reader")
        for button in (self.colors_button, self.objects_button, self.barcode_button):
            menu_layout.addWidget(button)
        menu_layout.addStretch()

        self.stack.addWidget(self.menu)

        # Demo pages
        for key, panel_class in (
            ("colors", ColorsThresholdingPanel),
            ("objects", MultipleObjectsPanel),
            ("barcode", BarcodeReaderPanel),
        ):
            panel = panel_class()
            panel.back_requested.connect(self.go_back)
            self.panels[key] = panel
            self.stack.addWidget(panel)

        self.colors_button.clicked.connect(lambda: self.show_panel("colors"))
        self.objects_button.clicked.connect(lambda: self.show_panel("objects"))
        self.barcode_button.clicked.connect(lambda: self.show_panel("barcode"))

    def show_panel(self, key):
        """Switch to a demo page"""
        panel = self.panels[key]
        self.stack.setCurrentWidget(panel)
        self.setWindowTitle(panel.title)
        logger.debug("Opened %s", panel.title)

    def go_back(self):
        """Return to the main menu"""
        self.stack.setCurrentWidget(self.menu)
        self.setWindowTitle(WINDOW_TITLE)


def main():
    """Application entry point"""
    app = QApplication(sys.argv)
    app.setStyle("Fusion")

    window = MachineVisionApp()
    window.show()

    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
