"""Shared pytest fixtures for zopfli-tool tests."""

from __future__ import annotations

import io
import logging
from pathlib import Path

import pytest

from zopfli_tool.constants import PACKAGE_LOGGER

DATA_DIR = Path(__file__).parent / "data"
TEST_DATA = (DATA_DIR / "MIT.txt").read_bytes()


class TtyBytesIO(io.BytesIO):
    """In-memory stream that claims to be a terminal."""

    def isatty(self) -> bool:
        return True


class UnseekableBytesIO(io.BytesIO):
    """In-memory stream that behaves like a pipe."""

    def seekable(self) -> bool:
        return False


@pytest.fixture(autouse=True)
def _reset_package_logger():
    """Undo handlers and levels installed by setup_logging."""
    yield
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
    package_logger.setLevel(logging.NOTSET)


@pytest.fixture
def test_data() -> bytes:
    return TEST_DATA


@pytest.fixture
def input_file(tmp_path: Path) -> Path:
    path = tmp_path / "foo.txt"
    path.write_bytes(TEST_DATA)
    return path
