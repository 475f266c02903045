"""Output path resolution for zopfli-tool"""

import logging
import os
from pathlib import Path
from typing import Optional, Union

from ..constants import STDIO_DESIGNATOR

logger = logging.getLogger(__name__)


class OutputPathResolver:
    """Derives output file names from input file names"""

    def __init__(self, suffix: str):
        """Initialize output path resolver

        Args:
            suffix: Suffix appended to every input path
        """
        self.suffix = suffix
        if not suffix:
            logger.warning(
                "the suffix is an empty string; output files will have "
                "the same name as their input files"
            )
        elif not suffix.startswith("."):
            logger.warning(f"the suffix does not start with `.`: {suffix}")

    def resolve(self, source_path: Optional[Union[str, Path]]) -> Optional[Path]:
        """Resolve the output path for an input

        The suffix is appended to the full input path; an existing
        extension is kept.

        Args:
            source_path: Input path, or None / "-" for standard input

        Returns:
            Output path, or None when the input has no path
        """
        if source_path is None or str(source_path) == STDIO_DESIGNATOR:
            return None

        return Path(os.fspath(source_path) + self.suffix)
