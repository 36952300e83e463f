"""
Tests module - Unit and integration tests for detfuse

Provides:
- Core module tests (config, constants, exceptions)
- Image module tests (buffer validation, channel swap)
- Detection module tests (IoU, dedup, union)
- Pipeline and self-test CLI tests
"""

__all__ = []
