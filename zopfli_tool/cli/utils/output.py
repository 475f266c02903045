# zopfli_tool/cli/utils/output.py
"""Output formatting utilities"""

from rich.console import Console
from rich.markup import escape

# Standard output carries compressed data, so all messages go to stderr
console = Console(stderr=True)


def print_error(error: BaseException) -> None:
    """Print an error followed by the chain of errors that caused it"""
    console.print(f"[red]Error:[/red] {escape(str(error))}", soft_wrap=True)

    cause = error.__cause__
    if cause is not None:
        console.print("\nCaused by:", soft_wrap=True)
    while cause is not None:
        console.print(f"    {escape(str(cause))}", soft_wrap=True)
        cause = cause.__cause__

