"""Core functionality for zopfli-tool"""

from .path_resolver import OutputPathResolver
from .streams import (
    Source,
    Sink,
    SourceKind,
    SinkKind,
    open_source,
    open_sink,
    is_terminal,
)

__all__ = [
    "OutputPathResolver",
    "Source",
    "Sink",
    "SourceKind",
    "SinkKind",
    "open_source",
    "open_sink",
    "is_terminal",
]
