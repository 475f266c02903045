"""Compression module for zopfli-tool"""

from .adapters import FormatAdapter, get_format_adapter
from .engine import ZopfliEngine
from .utils import detect_signature, sniff_source

__all__ = [
    "FormatAdapter",
    "get_format_adapter",
    "ZopfliEngine",
    "detect_signature",
    "sniff_source",
]
