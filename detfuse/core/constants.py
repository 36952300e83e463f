"""
Global constants for detfuse

Includes:
- Pixel format and detection class enumerations
- Channel counts per pixel format
- Default IoU thresholds
"""

from enum import IntEnum


# ===== Pixel Formats =====

class PixelFormat(IntEnum):
    """Channel layout of an image buffer"""
    GRAY = 0
    RGB = 1
    BGR = 2


# Bytes per pixel for each format (interleaved, no padding)
PIXEL_FORMAT_CHANNELS = {
    PixelFormat.GRAY: 1,
    PixelFormat.RGB: 3,
    PixelFormat.BGR: 3,
}


# ===== Detection Classes =====

class BoxType(IntEnum):
    """Classification label attached to a detection box"""
    FACE = 0
    GUN = 1
    MASK = 2


# ===== Default Thresholds =====
DEFAULT_CLEAN_IOU_THRESHOLD = 0.5
DEFAULT_UNION_IOU_THRESHOLD = 0.5

# ===== Validation Ranges =====
VALID_IOU_THRESHOLD_RANGE = (0.0, 1.0)

# ===== Environment Variables =====
ENV_CLEAN_IOU_THRESHOLD = "DETFUSE_CLEAN_IOU_THRESHOLD"
ENV_UNION_IOU_THRESHOLD = "DETFUSE_UNION_IOU_THRESHOLD"
