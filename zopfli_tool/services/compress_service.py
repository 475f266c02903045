# zopfli_tool/services/compress_service.py
"""Compression service implementation"""

import logging
import sys
import time
from typing import BinaryIO, List, Optional

from ..api.exceptions import CleanupError, ZopfliToolError
from ..constants import JobState
from ..core import OutputPathResolver, Sink, Source, open_sink, open_source
from ..core.compression import ZopfliEngine, sniff_source
from ..models import CompressConfig, JobResult, SizeReport
from ..utils.formatting import pluralize

logger = logging.getLogger(__name__)


class CompressService:
    """Runs one compression job per input designator"""

    def __init__(self,
                 config: CompressConfig,
                 stdin: Optional[BinaryIO] = None,
                 stdout: Optional[BinaryIO] = None):
        """
        Initialize compression service

        Args:
            config: Validated configuration
            stdin: Binary standard input (default: sys.stdin.buffer)
            stdout: Binary standard output (default: sys.stdout.buffer)
        """
        self.config = config
        self.stdin = stdin if stdin is not None else sys.stdin.buffer
        self.stdout = stdout if stdout is not None else sys.stdout.buffer
        self.path_resolver = OutputPathResolver(config.output_suffix)
        self.engine = ZopfliEngine(config.format, config.iterations)
        self.results: List[JobResult] = []

    def run(self) -> List[JobResult]:
        """
        Compress all inputs in order

        The run stops at the first failing job; its error propagates and
        the remaining inputs are not started.

        Returns:
            Results of all jobs
        """
        designators = self.config.designators
        logger.debug(f"Processing {pluralize(len(designators), 'input')}")

        for designator in designators:
            self.compress(designator)

        return self.results

    def compress(self, designator: str) -> JobResult:
        """
        Compress a single input

        Args:
            designator: File path, or "-" for standard input

        Returns:
            JobResult of the finished job
        """
        result = JobResult(designator=designator)
        self.results.append(result)
        start_time = time.time()

        source: Optional[Source] = None
        sink: Optional[Sink] = None
        try:
            # 1. Resolve input and output
            source = open_source(designator, self.config.force, self.stdin)
            result.source_path = source.path
            result.original_size = source.size

            output_path = self.path_resolver.resolve(source.path)
            sink = open_sink(output_path, self.config.stdout, self.config.force, self.stdout)
            if sink.is_file:
                result.output_path = sink.path

            # 2. Warn about input that is already compressed
            result.state = JobState.SNIFFING
            result.signature = sniff_source(source)

            # 3. Compress
            result.state = JobState.COMPRESSING
            self.engine.compress(source, sink)

            # 4. Report
            result.state = JobState.REPORTING
            result.compressed_size = sink.final_size()
            report = SizeReport.from_sizes(result.original_size, result.compressed_size)
            if report is not None:
                logger.info(report.message)

        except ZopfliToolError as e:
            result.state = JobState.FAILED
            logger.debug(f"Job for {designator} failed: {e}")
            raise

        finally:
            if source is not None:
                source.close()
            if sink is not None:
                sink.close()

        # 5. Remove input once its handles are released
        result.state = JobState.CLEANING_UP
        if self.config.remove and source.is_file:
            self._remove_source(source, result)

        result.state = JobState.DONE
        result.duration = time.time() - start_time
        return result

    def _remove_source(self, source: Source, result: JobResult) -> None:
        try:
            source.path.unlink()
        except OSError as e:
            result.state = JobState.FAILED
            raise CleanupError(str(source.path)) from e

        result.removed = True
        logger.info(f"{source.path} has been removed")
