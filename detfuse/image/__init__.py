"""
Image module - Borrowed pixel buffers and channel order conversion

Provides:
- Image header over a caller-owned buffer with layout validation
- In-place RGB <-> BGR conversion
"""

from .pixel_format import (
    Image,
    ConversionResult,
    convert_rgb_to_bgr,
    convert_bgr_to_rgb,
)

__all__ = [
    "Image",
    "ConversionResult",
    "convert_rgb_to_bgr",
    "convert_bgr_to_rgb",
]
