"""
Command-line self-test for detfuse

Runs the reference scenarios for each operation and prints one pass/fail
line per scenario.

Usage:
    detfuse-selftest
    detfuse-selftest --verbose
"""

import argparse
import logging
import sys
from typing import Callable, List, Optional, Tuple

from .core.constants import PixelFormat
from .core.exceptions import DetFuseException, SelfCheckError, handle_detfuse_exception
from .detection.bbox_utils import Box, iou
from .detection.frame import Frame
from .detection.nms import clean_frame
from .detection.union import union_frames
from .image.pixel_format import Image, convert_rgb_to_bgr

logger = logging.getLogger(__name__)


def _expect(what: str, actual, expected) -> None:
    if actual != expected:
        raise SelfCheckError(f"{what} = {actual!r}, expected {expected!r}")


def check_rgb2bgr() -> None:
    data = bytearray([255, 0, 0, 0, 255, 0, 0, 0, 255, 255, 255, 255])
    img = Image(2, 2, PixelFormat.RGB, data)

    _expect("convert_rgb_to_bgr(img)", bool(convert_rgb_to_bgr(img)), True)
    _expect("img.format", img.format, PixelFormat.BGR)
    _expect("converted bytes", list(data), [0, 0, 255, 0, 255, 0, 255, 0, 0, 255, 255, 255])


def check_calculate_iou() -> None:
    b1 = Box(0, 0, 2, 2)
    b2 = Box(1, 1, 3, 3)
    b3 = Box(4, 4, 6, 6)

    _expect("iou(b1, b2)", iou(b1, b2), 1.0 / 7.0)
    _expect("iou(b1, b3)", iou(b1, b3), 0.0)


def check_frame_clean() -> None:
    f = Frame(boxes=[Box(0, 0, 4, 4), Box(1, 1, 5, 5), Box(5, 5, 9, 9)])

    clean_frame(f, 0.3, inplace=True)

    _expect("boxes kept", len(f.boxes), 2)


def check_union_frames() -> None:
    f1 = Frame(boxes=[Box(0, 0, 4, 4), Box(5, 5, 9, 9)])
    f2 = Frame(boxes=[Box(2, 2, 6, 6), Box(10, 10, 14, 14)])

    result = union_frames(f1, f2, 0.1)

    _expect("boxes after union", len(result.boxes), 3)


SELF_CHECKS: List[Tuple[str, Callable[[], None]]] = [
    ("test_rgb2bgr", check_rgb2bgr),
    ("test_calculate_iou", check_calculate_iou),
    ("test_frame_clean", check_frame_clean),
    ("test_union_frames", check_union_frames),
]


def run_self_checks() -> bool:
    """Run every reference scenario, return True if all passed"""
    failed = 0
    for name, check in SELF_CHECKS:
        try:
            check()
        except DetFuseException as e:
            print(f"{name} FAILED: {handle_detfuse_exception(e, verbose=False)}")
            failed += 1
        except Exception as e:
            print(f"{name} FAILED: {type(e).__name__}: {e}")
            failed += 1
        else:
            print(f"{name} passed!")

    logger.info("%d of %d self checks passed", len(SELF_CHECKS) - failed, len(SELF_CHECKS))
    return failed == 0


def selftest_main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description='Run the detfuse reference self checks',
    )
    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Enable verbose logging'
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s - %(levelname)s - %(message)s'
    )

    return 0 if run_self_checks() else 1


if __name__ == '__main__':
    sys.exit(selftest_main())
