"""Operation result models"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from ..constants import JobState, Signature
from ..utils.formatting import format_size


@dataclass(frozen=True)
class SizeReport:
    """Before/after sizes of one compressed input"""

    original_size: int
    compressed_size: int

    @classmethod
    def from_sizes(cls,
                   original_size: Optional[int],
                   compressed_size: Optional[int]) -> Optional['SizeReport']:
        """
        Build a report when both sizes are known

        Args:
            original_size: Input size in bytes, None for streams
            compressed_size: Output size in bytes, None for standard output

        Returns:
            SizeReport, or None when a size is unknown or the input is empty
        """
        if original_size is None or compressed_size is None:
            return None
        if original_size == 0:
            return None
        return cls(original_size=original_size, compressed_size=compressed_size)

    @property
    def space_saving(self) -> float:
        """Percentage removed; negative when the output grew"""
        return (1 - self.compressed_size / self.original_size) * 100

    @property
    def message(self) -> str:
        return (
            f"Original Size: {format_size(self.original_size)}, "
            f"Compressed: {format_size(self.compressed_size)}, "
            f"Compression: {self.space_saving:.2f}% Removed"
        )


@dataclass
class JobResult:
    """Outcome of compressing one input designator"""

    designator: str
    state: JobState = JobState.RESOLVING
    source_path: Optional[Path] = None
    output_path: Optional[Path] = None
    original_size: Optional[int] = None
    compressed_size: Optional[int] = None
    signature: Optional[Signature] = None
    removed: bool = False
    duration: float = 0.0

    @property
    def is_success(self) -> bool:
        """Check if the job finished"""
        return self.state == JobState.DONE

    @property
    def is_failed(self) -> bool:
        return self.state == JobState.FAILED

    @property
    def size_report(self) -> Optional[SizeReport]:
        return SizeReport.from_sizes(self.original_size, self.compressed_size)
