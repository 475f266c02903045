"""Byte sources and sinks for compression jobs

A job reads from exactly one Source and writes to exactly one Sink. Both
are small closed variants: a regular file, or the process's standard
stream. The variant is chosen once when the job resolves its I/O.
"""

import logging
import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import BinaryIO, Optional

from ..api.exceptions import (
    MetadataError,
    OutputExistsError,
    SinkError,
    SourceError,
    TerminalError,
)
from ..constants import STDIO_DESIGNATOR

logger = logging.getLogger(__name__)


class SourceKind(Enum):
    FILE = "file"
    STDIN = "stdin"


class SinkKind(Enum):
    FILE = "file"
    STDOUT = "stdout"


@dataclass
class Source:
    """Readable input of a job"""

    kind: SourceKind
    stream: BinaryIO
    path: Optional[Path] = None
    size: Optional[int] = None

    def read(self, size: int = -1) -> bytes:
        return self.stream.read(size)

    @property
    def is_file(self) -> bool:
        return self.kind == SourceKind.FILE

    def close(self) -> None:
        """Close the underlying file; standard input stays open"""
        if self.kind == SourceKind.FILE:
            self.stream.close()


@dataclass
class Sink:
    """Writable output of a job"""

    kind: SinkKind
    stream: BinaryIO
    path: Optional[Path] = None

    def write(self, data: bytes) -> int:
        return self.stream.write(data)

    def flush(self) -> None:
        self.stream.flush()

    @property
    def is_file(self) -> bool:
        return self.kind == SinkKind.FILE

    def final_size(self) -> Optional[int]:
        """
        Size of the written output as reported by the filesystem

        Returns:
            Size in bytes for file sinks, None for standard output
        """
        if self.kind != SinkKind.FILE:
            return None
        try:
            self.stream.flush()
            return os.fstat(self.stream.fileno()).st_size
        except OSError as e:
            raise MetadataError("could not query metadata about output file") from e

    def close(self) -> None:
        """Close the underlying file; standard output is only flushed"""
        if self.kind == SinkKind.FILE:
            self.stream.close()
        else:
            self.stream.flush()


def is_terminal(stream) -> bool:
    """Check whether a stream is attached to an interactive terminal"""
    isatty = getattr(stream, "isatty", None)
    if isatty is None:
        return False
    try:
        return bool(isatty())
    except ValueError:
        # closed stream
        return False


def open_source(designator: str, force: bool, stdin: BinaryIO) -> Source:
    """
    Open the input named by a designator

    Args:
        designator: File path, or "-" for standard input
        force: Allow reading from a terminal
        stdin: Binary standard input stream

    Returns:
        Source ready for reading
    """
    if designator == STDIO_DESIGNATOR:
        if is_terminal(stdin) and not force:
            raise TerminalError("standard input is a terminal")
        logger.debug("Reading from standard input")
        return Source(kind=SourceKind.STDIN, stream=stdin)

    path = Path(designator)
    try:
        stream = open(path, 'rb')
    except OSError as e:
        raise SourceError(f"could not open {path}", str(path)) from e

    try:
        size = os.fstat(stream.fileno()).st_size
    except OSError as e:
        stream.close()
        raise MetadataError("could not query metadata about input file") from e

    logger.debug(f"Opened {path} ({size} bytes)")
    return Source(kind=SourceKind.FILE, stream=stream, path=path, size=size)


def open_sink(output_path: Optional[Path],
              stdout_requested: bool,
              force: bool,
              stdout: BinaryIO) -> Sink:
    """
    Open the output of a job

    A file is used when an output path was resolved and --stdout was not
    given. The file is created exclusively unless force is set.

    Args:
        output_path: Destination path, None when the source has no path
        stdout_requested: --stdout was given
        force: Overwrite existing files and allow terminal output
        stdout: Binary standard output stream

    Returns:
        Sink ready for writing
    """
    if output_path is not None and not stdout_requested:
        mode = 'wb' if force else 'xb'
        try:
            stream = open(output_path, mode)
        except FileExistsError as e:
            raise OutputExistsError(str(output_path)) from e
        except OSError as e:
            raise SinkError(f"could not open {output_path}", str(output_path)) from e

        logger.info(f"Saving to: {output_path}")
        return Sink(kind=SinkKind.FILE, stream=stream, path=output_path)

    if is_terminal(stdout) and not (stdout_requested or force):
        raise TerminalError("compressed data not written to a terminal")
    return Sink(kind=SinkKind.STDOUT, stream=stdout)
