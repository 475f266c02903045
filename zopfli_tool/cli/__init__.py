"""Command line interface for zopfli-tool"""

from .main import cli, main

__all__ = ["cli", "main"]
