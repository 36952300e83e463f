"""
Bounding box utilities for detection post-processing

Provides:
- Box value type with label and corner validation
- Single and batch IoU computation
- Bounding union of two boxes
"""

from dataclasses import dataclass, replace
from typing import Sequence, Tuple, Union

import numpy as np

from ..core.constants import BoxType
from ..core.exceptions import ValidationError


@dataclass(frozen=True)
class Box:
    """
    Axis-aligned detection box in integer pixel coordinates

    (x1, y1) is the top-left corner and (x2, y2) the bottom-right one.
    Zero-area boxes are allowed.

    Example:
        >>> box = Box(0, 0, 4, 4, BoxType.GUN)
        >>> box.area
        16
    """
    x1: int
    y1: int
    x2: int
    y2: int
    label: BoxType = BoxType.FACE

    def __post_init__(self):
        try:
            object.__setattr__(self, 'label', BoxType(self.label))
        except ValueError:
            raise ValidationError(f"Unknown box label: {self.label!r}")
        if self.x2 < self.x1 or self.y2 < self.y1:
            raise ValidationError(
                f"Box corners out of order: ({self.x1}, {self.y1}, {self.x2}, {self.y2})"
            )

    @property
    def width(self) -> int:
        return self.x2 - self.x1

    @property
    def height(self) -> int:
        return self.y2 - self.y1

    @property
    def area(self) -> int:
        return self.width * self.height

    def as_tuple(self) -> Tuple[int, int, int, int]:
        """Corners as (x1, y1, x2, y2), label dropped"""
        return (self.x1, self.y1, self.x2, self.y2)


def iou(b1: Box, b2: Box) -> float:
    """
    Compute Intersection over Union (IoU) between two boxes

    Labels are ignored. Boxes that do not overlap, or only touch along an
    edge, give exactly 0.0. Two zero-area boxes have an empty union and
    also give 0.0.

    Args:
        b1: First box
        b2: Second box

    Returns:
        IoU score between 0 and 1

    Example:
        >>> iou(Box(0, 0, 2, 2), Box(1, 1, 3, 3))  # 1 / 7
        0.14285714285714285
    """
    x_left = max(b1.x1, b2.x1)
    x_right = min(b1.x2, b2.x2)
    y_top = max(b1.y1, b2.y1)
    y_bottom = min(b1.y2, b2.y2)

    if x_left > x_right or y_bottom < y_top:
        return 0.0

    intersection = (x_right - x_left) * (y_bottom - y_top)
    union_area = b1.area + b2.area - intersection

    if union_area == 0:
        return 0.0

    return intersection / union_area


BoxesLike = Union[Sequence[Box], np.ndarray]


def _as_corner_array(boxes: BoxesLike) -> np.ndarray:
    if isinstance(boxes, np.ndarray):
        return boxes.astype(np.float64).reshape(-1, 4)
    return np.array([b.as_tuple() for b in boxes], dtype=np.float64).reshape(-1, 4)


def iou_batch(boxes1: BoxesLike, boxes2: BoxesLike) -> np.ndarray:
    """
    Compute pairwise IoU between two sets of boxes (vectorized)

    Same semantics as iou(), evaluated with numpy broadcasting.

    Args:
        boxes1: N boxes, as Box objects or an (N, 4) array of [x1, y1, x2, y2]
        boxes2: M boxes, as Box objects or an (M, 4) array of [x1, y1, x2, y2]

    Returns:
        IoU matrix of shape (N, M), float64

    Example:
        >>> m = iou_batch([Box(0, 0, 2, 2)], [Box(1, 1, 3, 3), Box(4, 4, 6, 6)])
        >>> m.shape
        (1, 2)
    """
    # Reshape for broadcasting: (N, 1, 4) and (1, M, 4)
    bboxes1 = np.expand_dims(_as_corner_array(boxes1), 1)
    bboxes2 = np.expand_dims(_as_corner_array(boxes2), 0)

    # Intersection box
    xx1 = np.maximum(bboxes1[..., 0], bboxes2[..., 0])
    yy1 = np.maximum(bboxes1[..., 1], bboxes2[..., 1])
    xx2 = np.minimum(bboxes1[..., 2], bboxes2[..., 2])
    yy2 = np.minimum(bboxes1[..., 3], bboxes2[..., 3])

    # Intersection area
    w = np.maximum(0., xx2 - xx1)
    h = np.maximum(0., yy2 - yy1)
    wh = w * h

    # Areas
    area1 = (bboxes1[..., 2] - bboxes1[..., 0]) * (bboxes1[..., 3] - bboxes1[..., 1])
    area2 = (bboxes2[..., 2] - bboxes2[..., 0]) * (bboxes2[..., 3] - bboxes2[..., 1])

    union_area = area1 + area2 - wh

    return np.divide(wh, union_area, out=np.zeros_like(wh), where=union_area > 0)


def bounding_union(b1: Box, b2: Box) -> Box:
    """
    Smallest box containing both inputs, keeping the label of b1

    Example:
        >>> bounding_union(Box(0, 0, 4, 4, BoxType.MASK), Box(2, 2, 6, 6))
        Box(x1=0, y1=0, x2=6, y2=6, label=<BoxType.MASK: 2>)
    """
    return replace(
        b1,
        x1=min(b1.x1, b2.x1),
        y1=min(b1.y1, b2.y1),
        x2=max(b1.x2, b2.x2),
        y2=max(b1.y2, b2.y2),
    )
