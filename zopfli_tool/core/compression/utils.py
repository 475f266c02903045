"""Compression utility functions"""

import io
import logging
from typing import Optional

from ...api.exceptions import SourceError
from ...constants import MAGIC_SIGNATURES, SIGNATURE_PROBE_LENGTH, Signature

logger = logging.getLogger(__name__)


def detect_signature(header: bytes) -> Optional[Signature]:
    """
    Detect an already-compressed format from leading bytes

    Args:
        header: First bytes of the input

    Returns:
        Matching signature, or None
    """
    for magic, signature in MAGIC_SIGNATURES:
        if header.startswith(magic):
            return signature
    return None


def _is_seekable(stream) -> bool:
    seekable = getattr(stream, "seekable", None)
    if seekable is None:
        return False
    try:
        return bool(seekable())
    except (OSError, ValueError):
        return False


def sniff_source(source) -> Optional[Signature]:
    """
    Peek at the start of a source and classify it

    The read position is restored before returning. Sources without a
    known size, or that cannot seek, are not probed.

    Args:
        source: Source to inspect

    Returns:
        Matching signature, or None
    """
    if source.size is None or not _is_seekable(source.stream):
        logger.debug("Skipping signature check for unseekable input")
        return None

    probe_length = min(source.size, SIGNATURE_PROBE_LENGTH)
    try:
        start = source.stream.tell()
        header = source.stream.read(probe_length)
    except OSError as e:
        raise SourceError("could not read file header", _path_of(source)) from e

    try:
        source.stream.seek(start, io.SEEK_SET)
    except OSError as e:
        raise SourceError("could not rewind to beginning of file", _path_of(source)) from e

    signature = detect_signature(header)
    if signature is not None:
        logger.warning("input data is already compressed")
        logger.debug(f"Detected signature: {signature.value}")
    return signature


def _path_of(source) -> Optional[str]:
    return str(source.path) if source.path is not None else None
