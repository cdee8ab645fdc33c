"""
File selection helpers
----------------------
Validation of user-selected files, shared by the GUI file dialogs and the
command-line runner.
"""

import logging
from pathlib import Path

from machine_vision.config import ALLOWED_IMAGE_EXTENSIONS

logger = logging.getLogger(__name__)


def validate_file(path, allowed_extensions=ALLOWED_IMAGE_EXTENSIONS):
    """
    Check that a file exists and has one of the allowed extensions.

    Args:
        path (str or Path): File to validate
        allowed_extensions (iterable): Extensions without the leading dot

    Returns:
        bool: True if the file is acceptable
    """
    path = Path(path)
    extension = path.suffix.lower().lstrip(".")
    allowed = {ext.lower() for ext in allowed_extensions}
    return path.is_file() and extension in allowed


def select_file(path, allowed_extensions=ALLOWED_IMAGE_EXTENSIONS):
    """
    Validate a path picked by the user.

    Args:
        path (str or Path, optional): Picked file, empty if the dialog was cancelled
        allowed_extensions (iterable): Extensions without the leading dot

    Returns:
        Path: The file if valid, otherwise None
    """
    if not path:
        logger.info("No file selected.")
        return None

    path = Path(path)
    if validate_file(path, allowed_extensions):
        logger.info("File selected: %s", path.resolve())
        return path

    logger.warning("Invalid file type: %s", path)
    return None


def file_filter(allowed_extensions=ALLOWED_IMAGE_EXTENSIONS, label="Allowed Files"):
    """Build a Qt file dialog filter such as 'Allowed Files (*.png *.jpg)'"""
    patterns = " ".join(f"*.{ext}" for ext in allowed_extensions)
    return f"{label} ({patterns})"
