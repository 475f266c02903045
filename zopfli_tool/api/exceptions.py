"""Exception definitions for zopfli-tool API"""

from typing import Optional

from ..constants import ErrorCode, ExitCode


class ZopfliToolError(Exception):
    """Base exception for zopfli-tool"""

    def __init__(self, message: str, error_code: str = None):
        super().__init__(message)
        self.error_code = error_code


class ConfigError(ZopfliToolError):
    """Configuration error"""

    def __init__(self, message: str):
        super().__init__(message, ErrorCode.CONFIG_INVALID)


class SourceError(ZopfliToolError):
    """Input could not be opened or read"""

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message, ErrorCode.SOURCE_UNAVAILABLE)
        self.path = path


class SinkError(ZopfliToolError):
    """Output could not be opened or written"""

    def __init__(self, message: str, path: Optional[str] = None,
                 error_code: str = ErrorCode.SINK_UNAVAILABLE):
        super().__init__(message, error_code)
        self.path = path


class OutputExistsError(SinkError):
    """Output file already exists and --force was not given"""

    def __init__(self, path: str):
        message = f"could not open {path}: file already exists (use --force to overwrite)"
        super().__init__(message, path, ErrorCode.OUTPUT_EXISTS)


class TerminalError(ZopfliToolError):
    """Refusing to read from or write compressed data to a terminal"""

    def __init__(self, message: str):
        super().__init__(message, ErrorCode.TERMINAL_REFUSED)


class CompressionError(ZopfliToolError):
    """The compression engine failed"""

    def __init__(self, message: str = "data could not be compressed"):
        super().__init__(message, ErrorCode.COMPRESSION_FAILED)


class MetadataError(ZopfliToolError):
    """File metadata could not be queried"""

    def __init__(self, message: str):
        super().__init__(message, ErrorCode.METADATA_UNAVAILABLE)


class CleanupError(ZopfliToolError):
    """Input file could not be removed after compression"""

    def __init__(self, path: str):
        super().__init__(f"could not remove {path}", ErrorCode.CLEANUP_FAILED)
        self.path = path


# Checked in order, subclasses first
_OS_ERROR_EXIT_CODES = [
    (FileNotFoundError, ExitCode.NOINPUT),
    (PermissionError, ExitCode.NOPERM),
    (FileExistsError, ExitCode.CANTCREAT),
    (BrokenPipeError, ExitCode.IOERR),
    (ConnectionError, ExitCode.PROTOCOL),
    (TimeoutError, ExitCode.TEMPFAIL),
    (InterruptedError, ExitCode.TEMPFAIL),
    (BlockingIOError, ExitCode.TEMPFAIL),
]


def find_os_error(error: BaseException) -> Optional[OSError]:
    """Find the first OSError in an exception's cause chain"""
    seen = set()
    current = error
    while current is not None and id(current) not in seen:
        if isinstance(current, OSError):
            return current
        seen.add(id(current))
        current = current.__cause__
    return None


def exit_code_for(error: BaseException) -> int:
    """
    Derive the process exit code for an error

    The code follows sysexits.h and is chosen from the underlying
    OSError category when one is present in the cause chain.

    Args:
        error: Error that ended the run

    Returns:
        Exit code
    """
    os_error = find_os_error(error)
    if os_error is None:
        return ExitCode.FAILURE

    for error_type, code in _OS_ERROR_EXIT_CODES:
        if isinstance(os_error, error_type):
            return code
    return ExitCode.IOERR
