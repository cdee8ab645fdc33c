#!/usr/bin/env python
"""
Colors Thresholding Image Processor
-----------------------------------
Detects regions of red, yellow, green and blue in an image using HSV
thresholds. Each region with enough of its color inside the bounding box is
outlined and labelled with the color and its percentage.

Processing steps:
    1. Load the image and convert it from BGR to HSV.
    2. For each color range build a binary mask and clean it with a
       morphological close followed by an open.
    3. Find external contours, drop small ones and suppress regions whose
       centres are close to an already kept region.
    4. Annotate regions whose mask coverage reaches the minimum percentage.
"""

import logging
import math
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Tuple

import cv2
import numpy as np

from machine_vision.config import (
    BLACK,
    COLOR_RANGES,
    DEFAULT_MIN_PERCENT,
    MERGE_DISTANCE,
    MIN_CONTOUR_AREA,
    MORPH_KERNEL_SIZE,
)
from machine_vision.utils.image_io import image_size, load_image
from machine_vision.utils.visualization import draw_box, put_label

logger = logging.getLogger(__name__)

Box = Tuple[int, int, int, int]


@dataclass
class ColorRegion:
    """A detected color region"""

    color: str
    box: Box
    percentage: float


@dataclass
class ColorAnalysisResult:
    """Result of a colors thresholding run"""

    file_name: str
    annotated_image: np.ndarray
    processing_time_ms: int
    image_size: Tuple[int, int]
    color_counts: Dict[str, int]
    min_percent: float = DEFAULT_MIN_PERCENT
    regions: List[ColorRegion] = field(default_factory=list)

    def summary(self):
        width, height = self.image_size
        rows = [
            ("File Name", self.file_name),
            ("Processing Time", f"{self.processing_time_ms} ms"),
            ("Image Size", f"{width}x{height}"),
            ("Minimum Percentage", f"{self.min_percent:.2f}%"),
        ]
        rows.extend((f"{color} Regions", count) for color, count in self.color_counts.items())
        return rows


def box_center(box):
    """Integer centre of an (x, y, w, h) box"""
    x, y, w, h = box
    return x + w // 2, y + h // 2


def boxes_are_close(box1, box2, max_distance):
    """Return True if the centres of two boxes are closer than max_distance"""
    cx1, cy1 = box_center(box1)
    cx2, cy2 = box_center(box2)
    return math.hypot(cx1 - cx2, cy1 - cy2) < max_distance


def suppress_close_regions(boxes, max_distance=MERGE_DISTANCE):
    """
    Keep the first of every group of nearby boxes.

    A box is dropped when its centre lies within max_distance of a box that
    comes earlier in the list and was itself kept.

    Args:
        boxes (list): Bounding boxes as (x, y, w, h)
        max_distance (float): Centre distance below which boxes are merged

    Returns:
        list: Indices of the kept boxes, in input order
    """
    visited = [False] * len(boxes)
    kept = []

    for i, box in enumerate(boxes):
        if visited[i]:
            continue

        for j in range(i + 1, len(boxes)):
            if not visited[j] and boxes_are_close(box, boxes[j], max_distance):
                visited[j] = True

        kept.append(i)

    return kept


def find_color_regions(mask):
    """
    Find candidate regions in a cleaned binary mask.

    Args:
        mask (numpy.ndarray): Binary mask (0 or 255)

    Returns:
        list: Bounding boxes of large, well separated contours
    """
    contours, _ = cv2.findContours(mask, cv2.RETR_EXTERNAL, cv2.CHAIN_APPROX_SIMPLE)
    large = [c for c in contours if cv2.contourArea(c) > MIN_CONTOUR_AREA]
    boxes = [tuple(int(v) for v in cv2.boundingRect(c)) for c in large]
    return [boxes[i] for i in suppress_close_regions(boxes, MERGE_DISTANCE)]


def color_mask(hsv_image, lower, upper, kernel):
    """Threshold an HSV image and remove noise from the mask"""
    mask = cv2.inRange(hsv_image, np.array(lower, dtype=np.uint8), np.array(upper, dtype=np.uint8))
    mask = cv2.morphologyEx(mask, cv2.MORPH_CLOSE, kernel)
    mask = cv2.morphologyEx(mask, cv2.MORPH_OPEN, kernel)
    return mask


def coverage_percentage(mask, box):
    """Percentage of non-zero mask pixels inside a box"""
    x, y, w, h = box
    total = w * h
    if total == 0:
        return 0.0
    return cv2.countNonZero(mask[y:y + h, x:x + w]) / total * 100.0


def analyze_image(image_path, file_name: Optional[str] = None,
                  min_percent: float = DEFAULT_MIN_PERCENT) -> ColorAnalysisResult:
    """
    Detect and annotate color regions in an image.

    Args:
        image_path (str or Path): Image to analyze
        file_name (str, optional): Name shown in the report, defaults to the file name
        min_percent (float): Minimum color coverage of a box, in percent, for it to be drawn

    Returns:
        ColorAnalysisResult: Annotated image, timing and per-color region counts

    Raises:
        ImageLoadError: If the image cannot be loaded
    """
    start_time = time.perf_counter()

    original = load_image(image_path)
    hsv_image = cv2.cvtColor(original, cv2.COLOR_BGR2HSV)
    annotated = original.copy()
    kernel = cv2.getStructuringElement(cv2.MORPH_RECT, MORPH_KERNEL_SIZE)

    color_counts = {}
    regions = []

    for color_name, (lower, upper) in COLOR_RANGES.items():
        mask = color_mask(hsv_image, lower, upper, kernel)
        boxes = find_color_regions(mask)

        for box in boxes:
            percentage = coverage_percentage(mask, box)
            if percentage < min_percent:
                continue

            regions.append(ColorRegion(color_name, box, percentage))
            draw_box(annotated, box)
            x, y = box[:2]
            put_label(annotated, f"{color_name}: {percentage:.2f}%", (x, y - 10),
                      color=BLACK, scale=0.5, thickness=1)

        color_counts[color_name] = len(boxes)

    elapsed_ms = int((time.perf_counter() - start_time) * 1000)
    logger.info("Color thresholding finished in %d ms: %s", elapsed_ms, color_counts)

    return ColorAnalysisResult(
        file_name=file_name or Path(image_path).name,
        annotated_image=annotated,
        processing_time_ms=elapsed_ms,
        image_size=image_size(original),
        color_counts=color_counts,
        min_percent=min_percent,
        regions=regions,
    )
