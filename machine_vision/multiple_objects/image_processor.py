#!/usr/bin/env python
"""
Multiple Objects Image Processor
--------------------------------
Finds every occurrence of a template in an image, allowing for the template
to appear scaled down and rotated.

Processing steps:
    1. Load the input image and the template.
    2. For every scale (one worker per scale) and every rotation angle,
       transform the template and run normalized cross-correlation matching.
    3. Collect a box for every location scoring at least the threshold.
    4. Merge overlapping boxes into one box per object and draw them.
"""

import logging
import os
import threading
import time
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Tuple

import cv2
import numpy as np

from machine_vision.config import (
    MATCH_THRESHOLD,
    MIN_TEMPLATE_SIDE,
    TEMPLATE_ANGLES,
    TEMPLATE_SCALES,
)
from machine_vision.utils.image_io import image_size, load_image
from machine_vision.utils.visualization import draw_box

logger = logging.getLogger(__name__)

Box = Tuple[int, int, int, int]


@dataclass
class ObjectsAnalysisResult:
    """Result of a multiple objects run"""

    file_name: str
    annotated_image: np.ndarray
    processing_time_ms: int
    image_size: Tuple[int, int]
    boxes: List[Box] = field(default_factory=list)

    @property
    def detected_objects_count(self):
        return len(self.boxes)

    def summary(self):
        width, height = self.image_size
        return [
            ("File Name", self.file_name),
            ("Processing Time", f"{self.processing_time_ms} ms"),
            ("Image Size", f"{width}x{height}"),
            ("Detected Object Count", self.detected_objects_count),
        ]


def transform_template(template, scale, angle):
    """
    Scale a template and rotate it about its centre.

    The rotated template keeps the scaled size; uncovered corners are black.

    Args:
        template (numpy.ndarray): Template image
        scale (float): Resize factor
        angle (float): Rotation in degrees, counter-clockwise

    Returns:
        numpy.ndarray: Transformed template
    """
    height, width = template.shape[:2]
    new_size = (max(1, int(width * scale)), max(1, int(height * scale)))
    resized = cv2.resize(template, new_size)

    center = (resized.shape[1] / 2.0, resized.shape[0] / 2.0)
    rotation = cv2.getRotationMatrix2D(center, angle, 1.0)
    return cv2.warpAffine(
        resized,
        rotation,
        (resized.shape[1], resized.shape[0]),
        flags=cv2.INTER_LINEAR,
        borderMode=cv2.BORDER_CONSTANT,
        borderValue=(0, 0, 0),
    )


def match_locations(image, template, threshold=MATCH_THRESHOLD):
    """
    Return a box for every location where the template matches.

    Args:
        image (numpy.ndarray): Image to search
        template (numpy.ndarray): Template to look for
        threshold (float): Minimum TM_CCOEFF_NORMED score

    Returns:
        list: Boxes (x, y, w, h) sized like the template
    """
    scores = cv2.matchTemplate(image, template, cv2.TM_CCOEFF_NORMED)
    ys, xs = np.where(scores >= threshold)
    h, w = template.shape[:2]
    return [(int(x), int(y), w, h) for y, x in zip(ys, xs)]


def boxes_overlap(box1, box2):
    """Return True if two boxes overlap on both axes"""
    x1, y1, w1, h1 = box1
    x2, y2, w2, h2 = box2
    x_overlap = x1 < x2 + w2 and x1 + w1 > x2
    y_overlap = y1 < y2 + h2 and y1 + h1 > y2
    return x_overlap and y_overlap


def union_boxes(box1, box2):
    """Smallest box containing both boxes"""
    x1 = min(box1[0], box2[0])
    y1 = min(box1[1], box2[1])
    x2 = max(box1[0] + box1[2], box2[0] + box2[2])
    y2 = max(box1[1] + box1[3], box2[1] + box2[3])
    return x1, y1, x2 - x1, y2 - y1


def merge_bounding_boxes(boxes):
    """
    Merge overlapping boxes in a single left-to-right sweep.

    Boxes are sorted by x. The current box absorbs the next one while they
    overlap; otherwise it is emitted and the next box becomes current.

    Args:
        boxes (list): Boxes as (x, y, w, h)

    Returns:
        list: Merged boxes
    """
    if not boxes:
        return []

    ordered = sorted(boxes, key=lambda box: box[0])
    merged = []
    current = ordered[0]

    for box in ordered[1:]:
        if boxes_overlap(current, box):
            current = union_boxes(current, box)
        else:
            merged.append(current)
            current = box

    merged.append(current)
    return merged


def _search_scale(image, template, scale, angles, threshold, detected, lock):
    """Match every rotation of the template at one scale"""
    image_h, image_w = image.shape[:2]

    for angle in angles:
        transformed = transform_template(template, scale, angle)
        h, w = transformed.shape[:2]

        if w < MIN_TEMPLATE_SIDE or h < MIN_TEMPLATE_SIDE:
            continue
        if w > image_w or h > image_h:
            continue

        found = match_locations(image, transformed, threshold)
        if found:
            with lock:
                detected.extend(found)


def find_objects(image, template, scales=TEMPLATE_SCALES, angles=TEMPLATE_ANGLES,
                 threshold=MATCH_THRESHOLD, max_workers=None):
    """
    Search an image for scaled and rotated copies of a template.

    Args:
        image (numpy.ndarray): Image to search
        template (numpy.ndarray): Template with the same channel count as image
        scales (iterable): Template scale factors
        angles (iterable): Rotation angles in degrees
        threshold (float): Minimum match score
        max_workers (int, optional): Thread pool size, defaults to the CPU count

    Returns:
        list: Merged boxes, one per detected object
    """
    detected = []
    lock = threading.Lock()
    angles = list(angles)

    with ThreadPoolExecutor(max_workers=max_workers or os.cpu_count()) as executor:
        futures = [
            executor.submit(_search_scale, image, template, scale, angles, threshold, detected, lock)
            for scale in scales
        ]
        for future in futures:
            future.result()

    logger.debug("Template matching produced %d raw matches", len(detected))
    return merge_bounding_boxes(detected)


def analyze_image(image_path, template_path, file_name: Optional[str] = None) -> ObjectsAnalysisResult:
    """
    Detect and outline every object matching a template.

    Args:
        image_path (str or Path): Image to analyze
        template_path (str or Path): Template image
        file_name (str, optional): Name shown in the report, defaults to the file name

    Returns:
        ObjectsAnalysisResult: Annotated image, timing and merged boxes

    Raises:
        ImageLoadError: If the image or the template cannot be loaded
    """
    start_time = time.perf_counter()

    image = load_image(image_path)
    template = load_image(template_path)
    annotated = image.copy()

    boxes = find_objects(image, template)
    for box in boxes:
        draw_box(annotated, box)

    elapsed_ms = int((time.perf_counter() - start_time) * 1000)
    logger.info("Detected %d objects in %d ms", len(boxes), elapsed_ms)

    return ObjectsAnalysisResult(
        file_name=file_name or Path(image_path).name,
        annotated_image=annotated,
        processing_time_ms=elapsed_ms,
        image_size=image_size(image),
        boxes=boxes,
    )
