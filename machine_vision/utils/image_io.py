"""
Image loading helpers shared by the vision demos.
"""

import logging
from pathlib import Path

import cv2

logger = logging.getLogger(__name__)


class ImageLoadError(ValueError):
    """Raised when an image file cannot be read"""


def load_image(path):
    """
    Load an image from disk in BGR order.

    Args:
        path (str or Path): Image file path

    Returns:
        numpy.ndarray: Loaded image

    Raises:
        ImageLoadError: If the file is missing or cannot be decoded
    """
    path = Path(path)
    image = cv2.imread(str(path)) if path.is_file() else None

    if image is None or image.size == 0:
        raise ImageLoadError(f"Image could not be loaded: {path}")

    logger.debug("Loaded %s (%dx%d)", path, image.shape[1], image.shape[0])
    return image


def image_size(image):
    """Return (width, height) of an image"""
    height, width = image.shape[:2]
    return width, height
