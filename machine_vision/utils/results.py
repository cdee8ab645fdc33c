"""
Result reporting
----------------
Turns analysis results into text reports and saves them next to a copy of
the annotated image.
"""

import logging
from pathlib import Path

import cv2
from tabulate import tabulate

logger = logging.getLogger(__name__)


def format_stats(result):
    """
    Build the plain-text statistics block shown in the result viewer.

    Args:
        result: Any analysis result exposing summary()

    Returns:
        str: One "Label: value" line per summary entry
    """
    return "".join(f"{label}: {value}\n" for label, value in result.summary())


def format_table(result):
    """Render a result summary as a grid table for the console"""
    return tabulate(result.summary(), headers=["Field", "Value"], tablefmt="grid")


def save_results(report_path, stats, image):
    """
    Save the statistics text and the annotated image.

    The image is written beside the report as "<report stem>_image.png".

    Args:
        report_path (str or Path): Text file to write
        stats (str): Statistics text
        image (numpy.ndarray): Annotated BGR image

    Returns:
        tuple: (report path, image path)

    Raises:
        OSError: If either file cannot be written
    """
    report_path = Path(report_path)
    report_path.parent.mkdir(parents=True, exist_ok=True)
    report_path.write_text(stats, encoding="utf-8")

    image_path = report_path.with_name(f"{report_path.stem}_image.png")
    if not cv2.imwrite(str(image_path), image):
        raise OSError(f"Could not write image: {image_path}")

    logger.info("Results saved to %s and %s", report_path, image_path)
    return report_path, image_path
