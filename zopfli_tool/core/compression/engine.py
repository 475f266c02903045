"""Zopfli compression engine wrapper"""

import logging
import time

import zopfli.zopfli

from ...api.exceptions import CompressionError
from ...constants import CompressionFormat, DEFAULT_ITERATIONS, READ_CHUNK_SIZE, TRACE
from .adapters import get_format_adapter

logger = logging.getLogger(__name__)


class ZopfliEngine:
    """
    Compresses a whole source into a sink with Zopfli

    Zopfli works on the complete input, so the source is read to the end
    before any output is produced.
    """

    def __init__(self,
                 format: CompressionFormat = CompressionFormat.GZIP,
                 iterations: int = DEFAULT_ITERATIONS,
                 chunk_size: int = READ_CHUNK_SIZE):
        """
        Initialize engine

        Args:
            format: Output container format
            iterations: Number of Zopfli iterations (>= 1)
            chunk_size: Read chunk size
        """
        self.format = format
        self.iterations = iterations
        self.chunk_size = chunk_size
        self._adapter = get_format_adapter(format)

    def _read_all(self, source) -> bytes:
        chunks = []
        while chunk := source.read(self.chunk_size):
            logger.log(TRACE, f"Read {len(chunk)} bytes")
            chunks.append(chunk)
        return b"".join(chunks)

    def compress(self, source, sink) -> None:
        """
        Compress everything readable from source into sink

        Args:
            source: Object with read(size)
            sink: Object with write(data) and flush()
        """
        start_time = time.time()
        logger.debug(
            f"Compressing to {self._adapter.get_description()} "
            f"with {self.iterations} iterations"
        )

        try:
            data = self._read_all(source)
            output = self._adapter.encode(data, self.iterations)
            sink.write(output)
            sink.flush()
        except (OSError, ValueError, MemoryError, zopfli.zopfli.error) as e:
            raise CompressionError() from e

        logger.debug(
            f"Compressed {len(data)} bytes into {len(output)} bytes "
            f"in {time.time() - start_time:.2f}s"
        )
