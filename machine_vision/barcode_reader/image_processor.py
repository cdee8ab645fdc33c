#!/usr/bin/env python
"""
Barcode Reader Image Processor
------------------------------
Reads a barcode from an image with ZBar, looks up the part category for the
decoded text and annotates the image with both.

Processing steps:
    1. Load the image with OpenCV.
    2. Decode barcodes with pyzbar and keep the first symbol found.
    3. Map the decoded text to a category (unknown codes are "Unknown").
    4. Write the barcode text and category near the bottom of the image,
       flagging defective parts in red.
"""

import logging
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple

import cv2
import numpy as np
from pyzbar.pyzbar import decode
from pyzbar.pyzbar_error import PyZbarError

from machine_vision.config import (
    BARCODE_CATEGORIES,
    DEFECTIVE_CATEGORY,
    RED,
    UNKNOWN_CATEGORY,
)
from machine_vision.utils.image_io import image_size, load_image
from machine_vision.utils.visualization import put_label

logger = logging.getLogger(__name__)


@dataclass
class BarcodeAnalysisResult:
    """Result of a barcode reading run"""

    file_name: str
    annotated_image: np.ndarray
    processing_time_ms: int
    image_size: Tuple[int, int]
    barcode_data: Optional[str] = None
    barcode_type: Optional[str] = None
    category: str = UNKNOWN_CATEGORY

    @property
    def is_defective(self):
        return self.category == DEFECTIVE_CATEGORY

    def summary(self):
        width, height = self.image_size
        return [
            ("File Name", self.file_name),
            ("Barcode Data", self.barcode_data or "No Barcode Found"),
            ("Barcode Type", self.barcode_type or "N/A"),
            ("Processing Time", f"{self.processing_time_ms} ms"),
            ("Image Size", f"{width}x{height}"),
            ("Category", self.category),
        ]


def categorize(barcode_data):
    """Return the part category for decoded barcode text"""
    if not barcode_data:
        return UNKNOWN_CATEGORY
    return BARCODE_CATEGORIES.get(barcode_data, UNKNOWN_CATEGORY)


def read_barcode(image):
    """
    Decode the first barcode in an image.

    Args:
        image (numpy.ndarray): BGR or grayscale image

    Returns:
        tuple: (data, symbology) or (None, None) when nothing was decoded
    """
    if image.ndim == 3:
        image = cv2.cvtColor(image, cv2.COLOR_BGR2GRAY)

    try:
        symbols = decode(image)
    except PyZbarError as e:
        logger.error("Error decoding barcode: %s", e)
        return None, None

    if not symbols:
        logger.info("No barcode found in the image.")
        return None, None

    symbol = symbols[0]
    data = symbol.data.decode("utf-8", errors="replace")
    return data, symbol.type


def annotate(image, barcode_data, category):
    """Draw the barcode text and its category near the bottom edge"""
    rows = image.shape[0]
    put_label(image, f"Barcode: {barcode_data}", (10, rows - 30))

    if category == DEFECTIVE_CATEGORY:
        put_label(image, "DEFECTIVE", (10, rows - 60), color=RED)
    else:
        put_label(image, f"Category: {category}", (10, rows - 60))

    return image


def analyze_image(image_path, file_name: Optional[str] = None) -> BarcodeAnalysisResult:
    """
    Read and categorize the barcode in an image.

    Args:
        image_path (str or Path): Image to analyze
        file_name (str, optional): Name shown in the report, defaults to the file name

    Returns:
        BarcodeAnalysisResult: Annotated image, timing, barcode text and category

    Raises:
        ImageLoadError: If the image cannot be loaded
    """
    start_time = time.perf_counter()

    image = load_image(image_path)
    annotated = image.copy()

    barcode_data, barcode_type = read_barcode(image)
    category = categorize(barcode_data)

    if barcode_data is not None:
        logger.info("Barcode %s (%s) -> %s", barcode_data, barcode_type, category)
        annotate(annotated, barcode_data, category)

    elapsed_ms = int((time.perf_counter() - start_time) * 1000)

    return BarcodeAnalysisResult(
        file_name=file_name or Path(image_path).name,
        annotated_image=annotated,
        processing_time_ms=elapsed_ms,
        image_size=image_size(image),
        barcode_data=barcode_data,
        barcode_type=barcode_type,
        category=category,
    )
