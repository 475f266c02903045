"""Business logic services for zopfli-tool"""

from .compress_service import CompressService

__all__ = [
    "CompressService",
]
