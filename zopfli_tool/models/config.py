"""Configuration data models"""

import os
from dataclasses import dataclass, field
from typing import Optional, Tuple

from ..api.exceptions import ConfigError
from ..core.compression.adapters import get_format_adapter
from ..constants import (
    CompressionFormat,
    LogLevel,
    DEFAULT_ITERATIONS,
    STDIO_DESIGNATOR,
)


@dataclass(frozen=True)
class CompressConfig:
    """Validated options for one invocation"""

    inputs: Tuple[str, ...] = field(default_factory=tuple)
    stdout: bool = False
    force: bool = False
    remove: bool = False
    suffix: Optional[str] = None
    format: CompressionFormat = CompressionFormat.GZIP
    iterations: int = DEFAULT_ITERATIONS
    log_level: LogLevel = LogLevel.INFO

    def __post_init__(self):
        """Validate option combinations"""
        if self.stdout and self.remove:
            raise ConfigError("--stdout cannot be used with --rm")
        if self.stdout and self.suffix is not None:
            raise ConfigError("--stdout cannot be used with --suffix")
        if self.iterations < 1:
            raise ConfigError(f"iteration count must be at least 1, got {self.iterations}")
        if self.suffix is not None and _has_separator(self.suffix):
            raise ConfigError("the suffix contains a path separator")

    @property
    def designators(self) -> Tuple[str, ...]:
        """Inputs to process; standard input when none were given"""
        return self.inputs or (STDIO_DESIGNATOR,)

    @property
    def output_suffix(self) -> str:
        """Explicit suffix, or the default one for the output format"""
        if self.suffix is not None:
            return self.suffix
        return get_format_adapter(self.format).get_extension()


def _has_separator(value: str) -> bool:
    separators = {os.sep}
    if os.altsep:
        separators.add(os.altsep)
    return any(sep in value for sep in separators)
