#!/usr/bin/env python
"""
Processing Thread Module
Runs an image analysis in a separate thread to keep the UI responsive
"""

import logging

from PySide6.QtCore import QThread, Signal

logger = logging.getLogger(__name__)


class ProcessingThread(QThread):
    """Thread running a single analysis call"""

    # Signal carrying the analysis result
    finished_result = Signal(object)

    # Signal for error notifications
    error = Signal(str)

    def __init__(self, analyze, *args, **kwargs):
        """Initialize processing thread

        Args:
            analyze: Callable performing the analysis
            *args: Positional arguments for the callable
            **kwargs: Keyword arguments for the callable
        """
        super().__init__()
        self.analyze = analyze
        self.args = args
        self.kwargs = kwargs

    def run(self):
        """Thread main function"""
        try:
            result = self.analyze(*self.args, **self.kwargs)
        except Exception as e:
            logger.exception("Error processing image")
            self.error.emit(str(e))
            return

        self.finished_result.emit(result)
