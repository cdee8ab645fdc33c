"""
Multiple objects demo: multi-scale, multi-angle template matching.
"""

from .image_processor import ObjectsAnalysisResult, analyze_image, find_objects
