"""Data models for zopfli-tool"""

from .config import CompressConfig
from .result import SizeReport, JobResult

__all__ = [
    "CompressConfig",
    "SizeReport",
    "JobResult",
]
