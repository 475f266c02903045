"""Output format adapters"""

from abc import ABC, abstractmethod
from typing import Dict, Optional

import zopfli.zopfli

from ...constants import CompressionFormat

# zlib framing around the deflate stream: CMF/FLG header and Adler-32 trailer
ZLIB_HEADER_LENGTH = 2
ZLIB_TRAILER_LENGTH = 4


class FormatAdapter(ABC):
    """Abstract base class for output format adapters"""

    @abstractmethod
    def get_format(self) -> CompressionFormat:
        """Get output format"""
        pass

    @abstractmethod
    def get_extension(self) -> str:
        """Get default file suffix"""
        pass

    @abstractmethod
    def get_description(self) -> str:
        """Get format description"""
        pass

    @abstractmethod
    def encode(self, data: bytes, iterations: int) -> bytes:
        """
        Compress a complete buffer into this format

        Args:
            data: Uncompressed input
            iterations: Number of Zopfli iterations

        Returns:
            Compressed bytes, container included
        """
        pass


class GzipAdapter(FormatAdapter):
    """GZIP container adapter"""

    def get_format(self) -> CompressionFormat:
        return CompressionFormat.GZIP

    def get_extension(self) -> str:
        return ".gz"

    def get_description(self) -> str:
        return "gzip file format (RFC 1952)"

    def encode(self, data: bytes, iterations: int) -> bytes:
        return zopfli.zopfli.compress(data, numiterations=iterations, gzip_mode=1)


class ZlibAdapter(FormatAdapter):
    """ZLIB container adapter"""

    def get_format(self) -> CompressionFormat:
        return CompressionFormat.ZLIB

    def get_extension(self) -> str:
        return ".zlib"

    def get_description(self) -> str:
        return "zlib file format (RFC 1950)"

    def encode(self, data: bytes, iterations: int) -> bytes:
        return zopfli.zopfli.compress(data, numiterations=iterations, gzip_mode=0)


class DeflateAdapter(ZlibAdapter):
    """Raw DEFLATE stream adapter

    The binding only writes gzip or zlib, so the raw stream is cut out of
    the zlib container.
    """

    def get_format(self) -> CompressionFormat:
        return CompressionFormat.DEFLATE

    def get_extension(self) -> str:
        return ".deflate"

    def get_description(self) -> str:
        return "raw DEFLATE stream (RFC 1951)"

    def encode(self, data: bytes, iterations: int) -> bytes:
        wrapped = super().encode(data, iterations)
        return wrapped[ZLIB_HEADER_LENGTH:-ZLIB_TRAILER_LENGTH]


# Registry of format adapters
FORMAT_ADAPTERS: Dict[str, FormatAdapter] = {
    "gzip": GzipAdapter(),
    "zlib": ZlibAdapter(),
    "deflate": DeflateAdapter(),
}


def get_format_adapter(name) -> Optional[FormatAdapter]:
    """
    Get format adapter by name

    Args:
        name: Format name (gzip, zlib, deflate) or CompressionFormat

    Returns:
        Format adapter or None
    """
    if isinstance(name, CompressionFormat):
        name = name.value
    return FORMAT_ADAPTERS.get(name.lower())
