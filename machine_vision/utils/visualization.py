"""
Visualization utilities for the vision demos.
"""

import cv2

from machine_vision.config import GREEN


def draw_box(frame, box, color=GREEN, thickness=2):
    """
    Draw a bounding box given as (x, y, w, h).

    Args:
        frame (numpy.ndarray): Frame to draw on
        box (tuple): Bounding box (x, y, width, height)
        color (tuple, optional): BGR color for the box
        thickness (int, optional): Line thickness

    Returns:
        numpy.ndarray: Frame with bounding box
    """
    x, y, w, h = (int(v) for v in box)
    cv2.rectangle(frame, (x, y), (x + w, y + h), color, thickness)
    return frame


def put_label(frame, text, origin, color=GREEN, scale=1.0, thickness=2):
    """
    Draw text with the Hershey simplex font.

    Args:
        frame (numpy.ndarray): Frame to draw on
        text (str): Text to draw
        origin (tuple): Bottom-left corner of the text (x, y)
        color (tuple, optional): BGR text color
        scale (float, optional): Font scale
        thickness (int, optional): Stroke thickness

    Returns:
        numpy.ndarray: Frame with text
    """
    x, y = origin
    cv2.putText(
        frame,
        text,
        (int(x), int(y)),
        cv2.FONT_HERSHEY_SIMPLEX,
        scale,
        color,
        thickness
    )
    return frame


def resize_with_aspect_ratio(image, width=None, height=None, inter=cv2.INTER_AREA):
    """
    Resize image while preserving aspect ratio.

    Args:
        image (numpy.ndarray): Input image
        width (int, optional): Target width
        height (int, optional): Target height
        inter (int, optional): Interpolation method

    Returns:
        numpy.ndarray: Resized image
    """
    h, w = image.shape[:2]

    if width is None and height is None:
        return image

    if width is None:
        r = height / float(h)
        dim = (int(w * r), height)
    else:
        r = width / float(w)
        dim = (width, int(h * r))

    return cv2.resize(image, dim, interpolation=inter)
