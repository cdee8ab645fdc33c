#!/usr/bin/env python3
"""
Machine Vision - GUI Launcher
-----------------------------
This module launches the GUI application.
"""

import logging
import sys
import traceback
from pathlib import Path

import cv2
from PySide6.QtWidgets import QApplication, QMessageBox

from machine_vision.config import DEFAULT_TEMPLATE_PATH, WINDOW_TITLE

logger = logging.getLogger(__name__)


def main():
    """Main entry point for the application"""
    logging.basicConfig(level=logging.INFO, format="[MV] %(levelname)s %(name)s: %(message)s")
    logger.info("OpenCV %s loaded successfully!", cv2.__version__)

    # Import after logging is configured so start-up problems are reported
    from machine_vision.gui.main import MachineVisionApp

    app = QApplication(sys.argv)
    app.setApplicationName(WINDOW_TITLE)
    app.setStyle("Fusion")

    window = MachineVisionApp()

    # Warn if the configured template is missing
    if DEFAULT_TEMPLATE_PATH and not Path(DEFAULT_TEMPLATE_PATH).is_file():
        QMessageBox.warning(
            window,
            "Missing Template",
            f"The template image configured in MV_TEMPLATE_PATH was not found:\n{DEFAULT_TEMPLATE_PATH}\n\n"
            "Choose a template in the Multiple Objects view before processing."
        )

    window.show()

    # Run the event loop
    return app.exec()


if __name__ == "__main__":
    try:
        sys.exit(main())
    except Exception as e:
        error_msg = f"Critical error: {str(e)}\n\n{traceback.format_exc()}"
        logger.critical(error_msg)
        sys.exit(1)
