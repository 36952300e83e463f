"""
Tests for single-frame deduplication
"""

import random

from detfuse.core.constants import PixelFormat
from detfuse.detection import Box, Frame, clean_frame, deduplicate_boxes
from detfuse.image import Image


def _is_subsequence(sub, seq):
    it = iter(seq)
    return all(any(x is y for y in it) for x in sub)


def test_clean_reference_frame():
    """Test the reference three-box frame"""
    frame = Frame(boxes=[Box(0, 0, 4, 4), Box(1, 1, 5, 5), Box(5, 5, 9, 9)])

    cleaned = clean_frame(frame, 0.3)

    assert cleaned.boxes == [Box(0, 0, 4, 4), Box(5, 5, 9, 9)]
    print("✓ Reference dedup")


def test_suppressed_box_does_not_suppress():
    """Test A hides B, B overlaps C, C survives because A misses it"""
    a = Box(0, 0, 4, 4)
    b = Box(2, 0, 6, 4)   # IoU(a, b) == 1/3
    c = Box(4, 0, 8, 4)   # IoU(b, c) == 1/3, IoU(a, c) == 0

    assert deduplicate_boxes([a, b, c], 0.3) == [a, c]
    print("✓ Asymmetric suppression")


def test_earlier_box_wins():
    a = Box(0, 0, 4, 4)
    b = Box(1, 1, 5, 5)

    assert deduplicate_boxes([a, b], 0.3) == [a]
    assert deduplicate_boxes([b, a], 0.3) == [b]


def test_threshold_is_inclusive():
    a = Box(0, 0, 4, 4)
    b = Box(2, 0, 6, 4)   # IoU == 1/3

    assert deduplicate_boxes([a, b], 1.0 / 3.0) == [a]
    assert deduplicate_boxes([a, b], 0.34) == [a, b]


def test_zero_threshold_suppresses_everything_after_first():
    boxes = [Box(0, 0, 1, 1), Box(50, 50, 60, 60), Box(100, 100, 101, 101)]
    assert deduplicate_boxes(boxes, 0.0) == [boxes[0]]


def test_identical_degenerate_boxes_survive():
    point = Box(3, 3, 3, 3)
    assert deduplicate_boxes([point, point], 0.5) == [point, point]


def test_empty_frame():
    assert clean_frame(Frame(), 0.5).boxes == []


def test_output_is_ordered_subsequence():
    rnd = random.Random(3)
    for _ in range(20):
        boxes = []
        for _ in range(rnd.randint(0, 15)):
            x1, y1 = rnd.randint(0, 30), rnd.randint(0, 30)
            boxes.append(Box(x1, y1, x1 + rnd.randint(1, 10), y1 + rnd.randint(1, 10)))
        threshold = rnd.choice([0.1, 0.3, 0.5, 0.9])

        kept = deduplicate_boxes(boxes, threshold)

        assert len(kept) <= len(boxes)
        assert _is_subsequence(kept, boxes)
    print("✓ Dedup keeps an ordered subsequence")


def test_clean_frame_is_pure_by_default():
    image = Image(10, 10, PixelFormat.GRAY, bytearray(100))
    boxes = [Box(0, 0, 4, 4), Box(1, 1, 5, 5)]
    frame = Frame(image=image, boxes=list(boxes))

    cleaned = clean_frame(frame, 0.3)

    assert cleaned is not frame
    assert cleaned.image is image
    assert frame.boxes == boxes
    assert len(cleaned) == 1


def test_clean_frame_inplace():
    frame = Frame(boxes=[Box(0, 0, 4, 4), Box(1, 1, 5, 5)])

    returned = clean_frame(frame, 0.3, inplace=True)

    assert returned is frame
    assert frame.boxes == [Box(0, 0, 4, 4)]
