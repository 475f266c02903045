"""Public API of zopfli-tool"""

from .exceptions import (
    ZopfliToolError,
    ConfigError,
    SourceError,
    SinkError,
    OutputExistsError,
    TerminalError,
    CompressionError,
    MetadataError,
    CleanupError,
    exit_code_for,
)

__all__ = [
    "ZopfliToolError",
    "ConfigError",
    "SourceError",
    "SinkError",
    "OutputExistsError",
    "TerminalError",
    "CompressionError",
    "MetadataError",
    "CleanupError",
    "exit_code_for",
]
