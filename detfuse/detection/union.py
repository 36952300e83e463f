"""
Two-frame union of detections on the same image

Boxes of the second frame are folded into a copy of the first frame's
boxes. Each incoming box fuses into the first existing box it overlaps
enough (first match, not best match), growing it to the bounding union;
otherwise it is appended. Grown boxes keep competing for later matches.
"""

import logging

from .bbox_utils import bounding_union, iou
from .frame import Frame

logger = logging.getLogger(__name__)


def union_frames(frame1: Frame, frame2: Frame, threshold: float) -> Frame:
    """
    Merge the detections of two frames of the same image

    Both frames must describe the same image; this is not enforced and
    the result reuses ``frame1.image``. Neither input is modified. No
    dedup is run on the result.

    Args:
        frame1: Base frame, its boxes keep their order and labels
        frame2: Frame whose boxes are fused or appended, in order
        threshold: Inclusive IoU at which two boxes count as one object

    Returns:
        New Frame with between max(len1, len2) and len1 + len2 boxes

    Example:
        >>> f1 = Frame(boxes=[Box(0, 0, 4, 4), Box(5, 5, 9, 9)])
        >>> f2 = Frame(boxes=[Box(2, 2, 6, 6), Box(10, 10, 14, 14)])
        >>> len(union_frames(f1, f2, 0.1))
        3
    """
    # Headers only, the buffers are never read here
    image1, image2 = frame1.image, frame2.image
    if image1 is not None and image2 is not None and (
        (image1.width, image1.height, image1.format)
        != (image2.width, image2.height, image2.format)
    ):
        logger.debug("union_frames called with frames of different images")

    result = frame1.copy()
    fused = 0

    for b2 in frame2.boxes:
        for idx, b1 in enumerate(result.boxes):
            if iou(b1, b2) >= threshold:
                result.boxes[idx] = bounding_union(b1, b2)
                fused += 1
                break
        else:
            result.boxes.append(b2)

    logger.debug("Union at IoU>=%.3f: %d fused, %d appended, %d total",
                 threshold, fused, len(frame2.boxes) - fused, len(result.boxes))
    return result
