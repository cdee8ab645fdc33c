"""
Colors thresholding demo: HSV color region detection.
"""

from .image_processor import ColorAnalysisResult, ColorRegion, analyze_image
