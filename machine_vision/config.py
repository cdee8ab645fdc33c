"""
Application configuration
-------------------------
Constants shared by the vision demos and the GUI. A few values can be
overridden through environment variables.
"""

import logging
import os

logger = logging.getLogger(__name__)


def env_float(name, default):
    """Read a float from the environment, falling back to default if unset or malformed"""
    value = os.environ.get(name)
    if value is None:
        return default
    try:
        return float(value)
    except ValueError:
        logger.warning("Ignoring invalid %s=%r, using %s", name, value, default)
        return default


# Main window
WINDOW_WIDTH = 500
WINDOW_HEIGHT = 300
WINDOW_TITLE = "Machine Vision"

# Result viewer window
RESULT_WINDOW_WIDTH = 600
RESULT_WINDOW_HEIGHT = 800
RESULT_IMAGE_WIDTH = 400

# Files accepted by the file choosers
ALLOWED_IMAGE_EXTENSIONS = ("png", "jpg", "jpeg")

# Colors thresholding: HSV ranges (OpenCV scale, H in 0-179), inclusive
COLOR_RANGES = {
    "Red": ((0, 100, 100), (10, 255, 255)),
    "Yellow": ((20, 100, 100), (30, 255, 255)),
    "Green": ((35, 100, 100), (85, 255, 255)),
    "Blue": ((100, 100, 100), (140, 255, 255)),
}
MORPH_KERNEL_SIZE = (5, 5)
MIN_CONTOUR_AREA = 500.0
MERGE_DISTANCE = 20.0
DEFAULT_MIN_PERCENT = env_float("MV_MIN_PERCENT", 10.0)

# Barcode reader: known part numbers
BARCODE_CATEGORIES = {
    "AAA-bbb-0000": "Sensors",
    "BBB-ccc-0001": "Cameras",
    "CCC-ddd-1000": "Batteries",
    "EEE-fff-9999": "Defective Parts",
}
UNKNOWN_CATEGORY = "Unknown"
DEFECTIVE_CATEGORY = "Defective Parts"

# Multiple objects: template matching search space
TEMPLATE_SCALES = (1.0, 0.8, 0.6)
TEMPLATE_ANGLES = tuple(float(angle) for angle in range(0, 360, 10))
MATCH_THRESHOLD = 0.8
MIN_TEMPLATE_SIDE = 10
DEFAULT_TEMPLATE_PATH = os.environ.get("MV_TEMPLATE_PATH")

# Annotation colors (BGR)
GREEN = (0, 255, 0)
RED = (0, 0, 255)
BLACK = (0, 0, 0)
