"""
Barcode reader demo: decoding and part categorization.
"""

from .image_processor import BarcodeAnalysisResult, analyze_image, categorize
