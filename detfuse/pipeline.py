"""
Config-driven post-processing of detector frames

Wraps clean_frame and union_frames with thresholds taken from a
PostprocessConfig, the way a detector loop holds one configured object
instead of passing thresholds around.
"""

import logging
from typing import Optional

from .core.config import PostprocessConfig
from .detection.frame import Frame
from .detection.nms import clean_frame
from .detection.union import union_frames

logger = logging.getLogger(__name__)


class FramePostprocessor:
    """
    Post-processor for detector frames

    Example:
        >>> from detfuse.core.config import PostprocessConfig
        >>> post = FramePostprocessor(PostprocessConfig())
        >>> merged = post.merge_and_clean(frame_a, frame_b)
    """

    def __init__(self, config: Optional[PostprocessConfig] = None):
        """
        Args:
            config: Thresholds to use (default: PostprocessConfig())
        """
        self.config = config if config is not None else PostprocessConfig()

    def clean(self, frame: Frame) -> Frame:
        """Deduplicate a frame at the configured dedup threshold"""
        return clean_frame(frame, self.config.dedup.iou_threshold)

    def union(self, frame1: Frame, frame2: Frame) -> Frame:
        """
        Merge two frames at the configured union threshold

        The merged frame is also deduplicated when ``union.clean_after``
        is set.
        """
        merged = union_frames(frame1, frame2, self.config.union.iou_threshold)
        if self.config.union.clean_after:
            merged = self.clean(merged)
        return merged

    def merge_and_clean(self, frame1: Frame, frame2: Frame) -> Frame:
        """Union two frames, then always deduplicate the result"""
        merged = union_frames(frame1, frame2, self.config.union.iou_threshold)
        cleaned = self.clean(merged)
        logger.debug("merge_and_clean: %d + %d boxes -> %d merged -> %d kept",
                     len(frame1), len(frame2), len(merged), len(cleaned))
        return cleaned
