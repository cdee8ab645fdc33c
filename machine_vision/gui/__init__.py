"""
Machine Vision GUI Package
--------------------------
This package contains the Qt widgets of the Machine Vision application.
"""

# Make important classes available at the package level
from .processing_thread import ProcessingThread
from .result_viewer import ResultViewer
from .demo_panel import (
    DemoPanel,
    ColorsThresholdingPanel,
    BarcodeReaderPanel,
    MultipleObjectsPanel
)
from .main import MachineVisionApp
