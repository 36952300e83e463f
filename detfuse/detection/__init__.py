"""
Detection module - Box geometry and detection post-processing

Provides:
- Box value type and IoU utilities (single and batch)
- Frame container
- Single-frame deduplication
- Two-frame union
"""

from .bbox_utils import (
    Box,
    iou,
    iou_batch,
    bounding_union,
)
from .frame import Frame
from .nms import deduplicate_boxes, clean_frame
from .union import union_frames

__all__ = [
    # Bbox utilities
    "Box",
    "iou",
    "iou_batch",
    "bounding_union",
    # Frames
    "Frame",
    "deduplicate_boxes",
    "clean_frame",
    "union_frames",
]
