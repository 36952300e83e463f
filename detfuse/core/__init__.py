"""
Core module - Configuration, constants, and exceptions for detfuse
"""

from .config import (
    PostprocessConfig,
    DedupConfig,
    UnionConfig,
)
from .constants import (
    PixelFormat,
    BoxType,
    PIXEL_FORMAT_CHANNELS,
    DEFAULT_CLEAN_IOU_THRESHOLD,
    DEFAULT_UNION_IOU_THRESHOLD,
)
from .exceptions import (
    DetFuseException,
    InvalidBufferError,
    ValidationError,
    ConfigError,
    SelfCheckError,
    handle_detfuse_exception,
)

__all__ = [
    "PostprocessConfig",
    "DedupConfig",
    "UnionConfig",
    "PixelFormat",
    "BoxType",
    "PIXEL_FORMAT_CHANNELS",
    "DEFAULT_CLEAN_IOU_THRESHOLD",
    "DEFAULT_UNION_IOU_THRESHOLD",
    "DetFuseException",
    "InvalidBufferError",
    "ValidationError",
    "ConfigError",
    "SelfCheckError",
    "handle_detfuse_exception",
]
