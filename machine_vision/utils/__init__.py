"""
Shared helpers for image loading, file validation, drawing and reporting.
"""

from .image_io import ImageLoadError, load_image, image_size
from .file_selector import validate_file, select_file, file_filter
from .results import format_stats, format_table, save_results
