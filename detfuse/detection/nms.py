"""
Single-frame deduplication of overlapping boxes

Greedy suppression in detector output order. There is no confidence score
in this model, so the earlier box always wins. Only surviving boxes act as
suppressors: once a box is suppressed it is skipped as a comparator, so
if A hides B and B overlaps C, C survives unless A reaches it too.
"""

import logging
from typing import List, Sequence

from .bbox_utils import Box, iou_batch
from .frame import Frame

logger = logging.getLogger(__name__)


def deduplicate_boxes(boxes: Sequence[Box], threshold: float) -> List[Box]:
    """
    Drop boxes that overlap an earlier surviving box

    Args:
        boxes: Boxes in original order
        threshold: IoU at or above which a later box is suppressed (inclusive)

    Returns:
        Order-preserving subsequence of ``boxes``

    Example:
        >>> boxes = [Box(0, 0, 4, 4), Box(1, 1, 5, 5), Box(5, 5, 9, 9)]
        >>> len(deduplicate_boxes(boxes, 0.3))
        2
    """
    n = len(boxes)
    if n == 0:
        return []

    ious = iou_batch(boxes, boxes)
    keep = [True] * n

    for i in range(n):
        if not keep[i]:
            continue
        for j in range(i + 1, n):
            if ious[i, j] >= threshold:
                keep[j] = False

    survivors = [box for box, kept in zip(boxes, keep) if kept]
    logger.debug("Dedup at IoU>=%.3f kept %d of %d boxes", threshold, len(survivors), n)
    return survivors


def clean_frame(frame: Frame, threshold: float, inplace: bool = False) -> Frame:
    """
    Remove redundant boxes from a frame

    Args:
        frame: Frame to clean
        threshold: Inclusive IoU suppression threshold
        inplace: Replace ``frame.boxes`` and return ``frame`` itself

    Returns:
        Cleaned frame; a new Frame sharing the same image unless ``inplace``
    """
    survivors = deduplicate_boxes(frame.boxes, threshold)
    if inplace:
        frame.boxes = survivors
        return frame
    return Frame(image=frame.image, boxes=survivors)
