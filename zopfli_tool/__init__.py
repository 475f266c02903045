"""Zopfli Tool - Compress files into gzip, zlib, or raw deflate streams with Zopfli.

This tool decides how bytes flow from each input, through the Zopfli
compressor, to an output file or standard output, and takes care of the
bookkeeping around it: already-compressed detection, exclusive output
creation, size reporting, and optional removal of the input.
"""

from .__version__ import __version__, __version_info__, __author__, __email__, __license__

# Core API
from .services import CompressService
from .core import OutputPathResolver, open_source, open_sink
from .core.compression import ZopfliEngine, detect_signature, sniff_source

# Data models
from .constants import CompressionFormat, LogLevel, Signature, JobState
from .models import CompressConfig, JobResult, SizeReport

# Exceptions
from .api.exceptions import (
    ZopfliToolError,
    ConfigError,
    SourceError,
    SinkError,
    OutputExistsError,
    TerminalError,
    CompressionError,
    MetadataError,
    CleanupError,
)

__all__ = [
    # Version information
    "__version__",
    "__version_info__",
    "__author__",
    "__email__",
    "__license__",

    # Main classes
    "CompressService",
    "OutputPathResolver",
    "ZopfliEngine",

    # Core API functions
    "open_source",
    "open_sink",
    "detect_signature",
    "sniff_source",

    # Data models
    "CompressionFormat",
    "LogLevel",
    "Signature",
    "JobState",
    "CompressConfig",
    "JobResult",
    "SizeReport",

    # Exceptions
    "ZopfliToolError",
    "ConfigError",
    "SourceError",
    "SinkError",
    "OutputExistsError",
    "TerminalError",
    "CompressionError",
    "MetadataError",
    "CleanupError",
]
