"""
detfuse - Detection post-processing utilities

A small Python package for:
- In-place RGB <-> BGR conversion of borrowed image buffers
- IoU between detection boxes (single and batch)
- Single-frame deduplication of overlapping boxes
- Union of detections from two frames of the same image
"""

__version__ = "0.1.0"
__author__ = "detfuse Team"

# Core imports (no external dependencies beyond PyYAML)
from .core.config import PostprocessConfig, DedupConfig, UnionConfig
from .core.constants import (
    PixelFormat,
    BoxType,
    PIXEL_FORMAT_CHANNELS,
    DEFAULT_CLEAN_IOU_THRESHOLD,
    DEFAULT_UNION_IOU_THRESHOLD,
)
from .core.exceptions import (
    DetFuseException,
    InvalidBufferError,
    ValidationError,
    ConfigError,
)

_IMAGE_NAMES = ("Image", "ConversionResult", "convert_rgb_to_bgr", "convert_bgr_to_rgb")
_DETECTION_NAMES = ("Box", "Frame", "iou", "iou_batch", "bounding_union",
                    "deduplicate_boxes", "clean_frame", "union_frames")


# Lazy imports for modules that pull in numpy
def __getattr__(name):
    """Lazy loading for modules with external dependencies"""
    if name in _IMAGE_NAMES:
        from .image import pixel_format
        return getattr(pixel_format, name)
    elif name in _DETECTION_NAMES:
        from . import detection
        return getattr(detection, name)
    elif name == "FramePostprocessor":
        from .pipeline import FramePostprocessor
        return FramePostprocessor
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    # Version
    "__version__",
    # Config
    "PostprocessConfig",
    "DedupConfig",
    "UnionConfig",
    # Constants
    "PixelFormat",
    "BoxType",
    "PIXEL_FORMAT_CHANNELS",
    "DEFAULT_CLEAN_IOU_THRESHOLD",
    "DEFAULT_UNION_IOU_THRESHOLD",
    # Exceptions
    "DetFuseException",
    "InvalidBufferError",
    "ValidationError",
    "ConfigError",
    # Image
    *_IMAGE_NAMES,
    # Detection
    *_DETECTION_NAMES,
    "FramePostprocessor",
]
