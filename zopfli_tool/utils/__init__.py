"""Utility functions for zopfli-tool"""

from .formatting import (
    format_size,
    pluralize,
)

__all__ = [
    "format_size",
    "pluralize",
]
