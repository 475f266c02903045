"""Global constants for zopfli-tool"""

from enum import Enum
import logging

APP_NAME = "zopfli-tool"
PACKAGE_LOGGER = "zopfli_tool"

# Logging
LOG_FORMAT = "%(message)s"
PLAIN_LOG_FORMAT = "[%(levelname)s] %(message)s"
TRACE = 5  # below DEBUG, for --log-level TRACE
LOG_LEVEL_OFF = logging.CRITICAL + 10

# Compression defaults
DEFAULT_ITERATIONS = 15
DEFAULT_FORMAT = "gzip"
DEFAULT_LOG_LEVEL = "INFO"
READ_CHUNK_SIZE = 64 * 1024  # 64KB

# Number of leading bytes inspected when looking for a known signature
SIGNATURE_PROBE_LENGTH = 262

# Designator for standard input / output
STDIO_DESIGNATOR = "-"

# Shells supported by --generate-completion
COMPLETION_SHELLS = ["bash", "zsh", "fish"]


class CompressionFormat(Enum):
    """Container format written around the deflate stream"""
    GZIP = "gzip"        # RFC 1952
    ZLIB = "zlib"        # RFC 1950
    DEFLATE = "deflate"  # RFC 1951, raw


class LogLevel(Enum):
    OFF = "OFF"
    ERROR = "ERROR"
    WARN = "WARN"
    INFO = "INFO"
    DEBUG = "DEBUG"
    TRACE = "TRACE"

    @property
    def logging_level(self) -> int:
        """Numeric level understood by the logging module"""
        return {
            LogLevel.OFF: LOG_LEVEL_OFF,
            LogLevel.ERROR: logging.ERROR,
            LogLevel.WARN: logging.WARNING,
            LogLevel.INFO: logging.INFO,
            LogLevel.DEBUG: logging.DEBUG,
            LogLevel.TRACE: TRACE,
        }[self]


class Signature(Enum):
    """Already-compressed formats recognised by their magic bytes"""
    GZIP = "application/gzip"
    BZIP2 = "application/x-bzip2"
    COMPRESS = "application/x-compress"
    LZIP = "application/x-lzip"
    XZ = "application/x-xz"
    ZSTD = "application/zstd"


# Magic numbers, checked in order against the start of the input
MAGIC_SIGNATURES = [
    (b"\x1f\x8b\x08", Signature.GZIP),
    (b"BZh", Signature.BZIP2),
    (b"\x1f\x9d", Signature.COMPRESS),
    (b"\x1f\xa0", Signature.COMPRESS),
    (b"LZIP", Signature.LZIP),
    (b"\xfd7zXZ\x00", Signature.XZ),
    (b"\x28\xb5\x2f\xfd", Signature.ZSTD),
]


class JobState(Enum):
    RESOLVING = "resolving"
    SNIFFING = "sniffing"
    COMPRESSING = "compressing"
    REPORTING = "reporting"
    CLEANING_UP = "cleaning_up"
    DONE = "done"
    FAILED = "failed"


# Error codes
class ErrorCode:
    CONFIG_INVALID = "ZT001"
    SOURCE_UNAVAILABLE = "ZT002"
    TERMINAL_REFUSED = "ZT003"
    SINK_UNAVAILABLE = "ZT004"
    OUTPUT_EXISTS = "ZT005"
    COMPRESSION_FAILED = "ZT006"
    METADATA_UNAVAILABLE = "ZT007"
    CLEANUP_FAILED = "ZT008"


# Process exit codes (sysexits.h)
class ExitCode:
    SUCCESS = 0
    FAILURE = 1
    NOINPUT = 66
    CANTCREAT = 73
    IOERR = 74
    TEMPFAIL = 75
    PROTOCOL = 76
    NOPERM = 77
    INTERRUPTED = 130
