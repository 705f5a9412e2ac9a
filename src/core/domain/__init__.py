"""
Domain models and value objects.

Contains the FixedWidthInteger value object.
"""

from src.core.domain.fixed_width import SUPPORTED_WIDTHS, FixedWidthInteger

__all__ = [
    "FixedWidthInteger",
    "SUPPORTED_WIDTHS",
]
