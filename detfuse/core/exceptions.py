"""
Custom exceptions for detfuse

Provides specific exception types for:
- Image buffer errors
- Input validation errors
- Configuration errors
"""


class DetFuseException(Exception):
    """
    Base exception class for all detfuse exceptions

    All custom exceptions should inherit from this class for easy
    exception catching and handling at the application level.
    """
    pass


class InvalidBufferError(DetFuseException):
    """
    Raised when an image buffer does not match its declared layout

    Reasons:
    - Buffer length differs from width * height * channels
    - Buffer is read-only
    - Buffer is not C-contiguous
    - Buffer element type is not uint8

    Example:
        >>> from detfuse.core.exceptions import InvalidBufferError
        >>> from detfuse.core.constants import PixelFormat
        >>> from detfuse.image import Image
        >>> try:
        ...     img = Image(2, 2, PixelFormat.RGB, bytearray(5))
        ... except InvalidBufferError as e:
        ...     print(f"Bad buffer: {e}")
    """
    pass


class ValidationError(DetFuseException):
    """
    Raised when input data validation fails

    Applicable to:
    - Box corners (x2 < x1 or y2 < y1)
    - Negative image dimensions
    - Unknown pixel format or box label values
    """
    pass


class ConfigError(DetFuseException):
    """
    Raised when configuration is invalid or missing

    Reasons:
    - IoU threshold outside [0, 1]
    - Invalid configuration file format
    - Configuration file not found
    - Environment variable cannot be parsed

    Example:
        >>> from detfuse.core.exceptions import ConfigError
        >>> from detfuse.core.config import PostprocessConfig
        >>> try:
        ...     config = PostprocessConfig.from_yaml("nonexistent.yaml")
        ... except ConfigError as e:
        ...     print(f"Configuration error: {e}")
    """
    pass


class SelfCheckError(DetFuseException):
    """
    Raised when a reference scenario of the self-test gives a wrong result

    Used by detfuse-selftest instead of assert so the checks still run
    under python -O.
    """
    pass


def handle_detfuse_exception(e: DetFuseException, verbose: bool = True) -> str:
    """
    Handle detfuse exceptions with formatted error message

    Args:
        e: The DetFuseException instance
        verbose: If True, print error message to console

    Returns:
        Formatted error message string
    """
    error_type = type(e).__name__
    error_msg = str(e)
    formatted_msg = f"[{error_type}] {error_msg}"

    if verbose:
        print(formatted_msg)

    return formatted_msg
