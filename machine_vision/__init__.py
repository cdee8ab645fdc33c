"""
Machine Vision
--------------
Desktop demonstrations of classic machine vision techniques: color
thresholding, barcode reading and multiple object detection.
"""

__version__ = '0.1.0'

# The demo and GUI packages are imported on demand so that the image
# processing code can be used without a display.
