"""Formatting utilities for display"""

from typing import Union

BINARY_UNITS = ['B', 'KiB', 'MiB', 'GiB', 'TiB', 'PiB', 'EiB']


def format_size(size_bytes: Union[int, float]) -> str:
    """Format byte size using binary (1024-based) units

    Args:
        size_bytes: Size in bytes

    Returns:
        Human readable size string

    Examples:
        >>> format_size(640)
        '640 B'
        >>> format_size(1083)
        '1.06 KiB'
        >>> format_size(1048576)
        '1.00 MiB'
    """
    if size_bytes < 0:
        return "Invalid size"

    size = float(size_bytes)
    unit_index = 0

    while size >= 1024 and unit_index < len(BINARY_UNITS) - 1:
        size /= 1024
        unit_index += 1

    if unit_index == 0:
        # Bytes - show as integer
        return f"{int(size)} {BINARY_UNITS[unit_index]}"
    else:
        return f"{size:.2f} {BINARY_UNITS[unit_index]}"


def pluralize(count: int, singular: str, plural: str = None) -> str:
    """Pluralize a word based on count

    Args:
        count: Number of items
        singular: Singular form
        plural: Plural form (optional, will add 's' if not provided)

    Returns:
        Pluralized string with count
    """
    if plural is None:
        plural = singular + 's'

    word = singular if count == 1 else plural
    return f"{count} {word}"
