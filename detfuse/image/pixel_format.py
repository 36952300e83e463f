"""
Pixel format utilities for borrowed image buffers

The Image type wraps a caller-owned byte buffer without copying it. Every
access goes through a zero-copy uint8 view that is validated against the
declared width, height and format first, so a short or read-only buffer
fails with InvalidBufferError instead of being read out of bounds.

Provides:
- Image: width/height/format plus a borrowed interleaved buffer
- ConversionResult: outcome of a channel-order conversion
- In-place RGB <-> BGR channel swap
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any

import numpy as np

from ..core.constants import PixelFormat, PIXEL_FORMAT_CHANNELS
from ..core.exceptions import InvalidBufferError, ValidationError

logger = logging.getLogger(__name__)


class ConversionResult(Enum):
    """
    Outcome of a pixel format conversion

    Truthy only for OK, so callers can keep treating the result as a
    success flag while still being able to tell why a conversion was
    refused.
    """
    OK = "ok"
    WRONG_FORMAT = "wrong_format"

    def __bool__(self) -> bool:
        return self is ConversionResult.OK


def _byte_view(data: Any) -> np.ndarray:
    """Flat writable uint8 view over a buffer, never a copy."""
    if isinstance(data, np.ndarray):
        if data.dtype != np.uint8:
            raise InvalidBufferError(f"Image buffer must be uint8, got {data.dtype}")
        if not data.flags.c_contiguous:
            raise InvalidBufferError("Image buffer must be C-contiguous")
        if not data.flags.writeable:
            raise InvalidBufferError("Image buffer is read-only")
        return data.reshape(-1)

    try:
        mv = memoryview(data)
    except TypeError:
        raise InvalidBufferError(
            f"Image buffer of type {type(data).__name__} does not expose the buffer protocol"
        )
    if mv.readonly:
        raise InvalidBufferError("Image buffer is read-only")
    if not mv.c_contiguous:
        raise InvalidBufferError("Image buffer must be C-contiguous")
    return np.frombuffer(mv.cast('B'), dtype=np.uint8)


@dataclass(eq=False)
class Image:
    """
    Image header over an externally owned pixel buffer

    Layout is channel-interleaved, row-major, no padding. The buffer must
    hold exactly width * height * channels bytes.

    Example:
        >>> data = bytearray([255, 0, 0, 0, 255, 0, 0, 0, 255, 255, 255, 255])
        >>> img = Image(2, 2, PixelFormat.RGB, data)
        >>> img.expected_size
        12
    """
    width: int
    height: int
    format: PixelFormat
    data: Any

    def __post_init__(self):
        try:
            self.format = PixelFormat(self.format)
        except ValueError:
            raise ValidationError(f"Unknown pixel format: {self.format!r}")
        if self.width < 0 or self.height < 0:
            raise ValidationError(
                f"Image dimensions must be non-negative, got {self.width}x{self.height}"
            )
        self.pixels()

    @classmethod
    def from_array(cls, array: np.ndarray, format: PixelFormat) -> "Image":
        """
        Wrap an (H, W) or (H, W, C) uint8 array without copying it

        Args:
            array: Pixel array, e.g. a frame from cv2 or a camera driver
            format: Pixel format of the array

        Returns:
            Image sharing memory with ``array``
        """
        if not isinstance(array, np.ndarray) or array.ndim not in (2, 3):
            raise InvalidBufferError("Expected an (H, W) or (H, W, C) numpy array")
        height, width = array.shape[:2]
        return cls(width=width, height=height, format=format, data=array)

    @property
    def channels(self) -> int:
        return PIXEL_FORMAT_CHANNELS[self.format]

    @property
    def num_pixels(self) -> int:
        return self.width * self.height

    @property
    def expected_size(self) -> int:
        return self.num_pixels * self.channels

    def pixels(self) -> np.ndarray:
        """
        Validated flat uint8 view of the buffer

        Raises:
            InvalidBufferError: If the buffer does not match the declared layout
        """
        view = _byte_view(self.data)
        if view.size != self.expected_size:
            raise InvalidBufferError(
                f"Buffer holds {view.size} bytes, expected {self.expected_size} "
                f"for {self.width}x{self.height} {self.format.name}"
            )
        return view

    def as_array(self) -> np.ndarray:
        """Zero-copy (H, W, C) view of the buffer, (H, W) for GRAY"""
        view = self.pixels()
        if self.channels == 1:
            return view.reshape(self.height, self.width)
        return view.reshape(self.height, self.width, self.channels)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Image):
            return NotImplemented
        return (
            self.width == other.width
            and self.height == other.height
            and self.format == other.format
            and np.array_equal(self.pixels(), other.pixels())
        )


def _swap_red_blue(image: Image, source: PixelFormat, target: PixelFormat) -> ConversionResult:
    if image.format != source:
        logger.debug("Skipping %s->%s conversion, image is %s",
                     source.name, target.name, image.format.name)
        return ConversionResult.WRONG_FORMAT

    # Fancy indexing on the right-hand side copies, so the swap is safe
    pixels = image.pixels().reshape(-1, 3)
    pixels[:, [0, 2]] = pixels[:, [2, 0]]

    image.format = target
    logger.debug("Converted %dx%d image %s->%s",
                 image.width, image.height, source.name, target.name)
    return ConversionResult.OK


def convert_rgb_to_bgr(image: Image) -> ConversionResult:
    """
    Swap the R and B bytes of every pixel in place

    Byte 1 (G) is left untouched. On success the image format becomes BGR.

    Args:
        image: RGB image whose buffer is rewritten in place

    Returns:
        ConversionResult.OK, or ConversionResult.WRONG_FORMAT (falsy) if the
        image is not RGB; in that case the buffer is not touched

    Raises:
        InvalidBufferError: If the buffer does not match the declared layout

    Example:
        >>> data = bytearray([255, 0, 0, 0, 255, 0, 0, 0, 255, 255, 255, 255])
        >>> img = Image(2, 2, PixelFormat.RGB, data)
        >>> bool(convert_rgb_to_bgr(img))
        True
        >>> list(data[:3])
        [0, 0, 255]
    """
    return _swap_red_blue(image, PixelFormat.RGB, PixelFormat.BGR)


def convert_bgr_to_rgb(image: Image) -> ConversionResult:
    """Inverse of convert_rgb_to_bgr: BGR in, RGB out, same contract"""
    return _swap_red_blue(image, PixelFormat.BGR, PixelFormat.RGB)
