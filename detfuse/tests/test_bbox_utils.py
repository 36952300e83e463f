"""
Tests for box geometry

Tests:
- Reference IoU values
- Symmetry and range
- Degenerate boxes
- Batch IoU agreement with the scalar version
"""

import dataclasses
import random

import numpy as np
import pytest

from detfuse.core.constants import BoxType
from detfuse.core.exceptions import ValidationError
from detfuse.detection.bbox_utils import Box, iou, iou_batch, bounding_union


def _random_boxes(n, seed, extent=20):
    rnd = random.Random(seed)
    boxes = []
    for _ in range(n):
        x1, y1 = rnd.randint(0, extent), rnd.randint(0, extent)
        boxes.append(Box(x1, y1, x1 + rnd.randint(0, 8), y1 + rnd.randint(0, 8)))
    return boxes


def test_iou_reference_values():
    """Test the reference overlap and disjoint cases"""
    b1 = Box(0, 0, 2, 2)
    b2 = Box(1, 1, 3, 3)
    b3 = Box(4, 4, 6, 6)

    assert iou(b1, b2) == 1.0 / 7.0
    assert iou(b1, b3) == 0.0
    print("✓ Reference IoU")


def test_iou_identical_boxes():
    box = Box(3, 4, 10, 12)
    assert iou(box, box) == 1.0


def test_iou_ignores_label():
    assert iou(Box(0, 0, 4, 4, BoxType.GUN), Box(0, 0, 4, 4, BoxType.MASK)) == 1.0


def test_iou_touching_edge_is_zero():
    assert iou(Box(0, 0, 2, 2), Box(2, 0, 4, 2)) == 0.0
    assert iou(Box(0, 0, 2, 2), Box(2, 2, 4, 4)) == 0.0


def test_iou_degenerate_boxes():
    """Test zero-area boxes never produce NaN or raise"""
    point = Box(1, 1, 1, 1)
    line = Box(0, 1, 3, 1)

    assert iou(point, point) == 0.0
    assert iou(point, line) == 0.0
    assert iou(point, Box(0, 0, 2, 2)) == 0.0
    print("✓ Degenerate IoU is 0.0")


def test_iou_symmetry_and_range():
    boxes = _random_boxes(30, seed=7)
    for a in boxes:
        for b in boxes:
            value = iou(a, b)
            assert value == iou(b, a)
            assert 0.0 <= value <= 1.0
    print("✓ IoU symmetry and range")


def test_iou_batch_matches_scalar():
    boxes1 = _random_boxes(12, seed=1)
    boxes2 = _random_boxes(9, seed=2)

    matrix = iou_batch(boxes1, boxes2)

    assert matrix.shape == (12, 9)
    for i, a in enumerate(boxes1):
        for j, b in enumerate(boxes2):
            assert matrix[i, j] == pytest.approx(iou(a, b))
    print("✓ Batch IoU")


def test_iou_batch_accepts_arrays_and_empty_input():
    arr = np.array([[0, 0, 2, 2], [4, 4, 6, 6]])
    matrix = iou_batch(arr, [Box(1, 1, 3, 3)])

    assert matrix.shape == (2, 1)
    assert matrix[0, 0] == pytest.approx(1.0 / 7.0)
    assert matrix[1, 0] == 0.0
    assert iou_batch([], [Box(0, 0, 1, 1)]).shape == (0, 1)


def test_iou_batch_degenerate_is_zero():
    point = Box(2, 2, 2, 2)
    with np.errstate(all='raise'):
        matrix = iou_batch([point], [point])
    assert matrix[0, 0] == 0.0


def test_box_validation():
    with pytest.raises(ValidationError):
        Box(5, 0, 4, 4)
    with pytest.raises(ValidationError):
        Box(0, 5, 4, 4)
    with pytest.raises(ValidationError):
        Box(0, 0, 4, 4, 9)

    box = Box(0, 0, 4, 4, 1)
    assert box.label is BoxType.GUN
    assert box.area == 16
    assert box.as_tuple() == (0, 0, 4, 4)


def test_box_is_immutable():
    box = Box(0, 0, 1, 1)
    with pytest.raises(dataclasses.FrozenInstanceError):
        box.x1 = 3


def test_bounding_union_keeps_first_label():
    merged = bounding_union(Box(0, 2, 4, 4, BoxType.MASK), Box(2, 0, 6, 3, BoxType.FACE))
    assert merged == Box(0, 0, 6, 4, BoxType.MASK)
