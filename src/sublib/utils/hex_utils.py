"""
Utility functions for hex string operations.
"""

from typing import Iterable, Optional

from .sequence import index_of


def make_hex_string(data: Iterable[int]) -> str:
    """
    Render bytes as uppercase hex with two digits per byte and no separators.

    Args:
        data (Iterable[int]): Byte values to render

    Returns:
        str: Hex string, empty for empty input
    """

    return ''.join(f"{b:02X}" for b in data)


def parse_hex_string(hex_str: str) -> Optional[bytes]:
    """
    Parse a hex string into bytes.

    Args:
        hex_str (str): String of hex values (e.g. "FF 00 A5")

    Returns:
        bytes: Parsed bytes or None if invalid
    """

    clean_str = ''.join(hex_str.split())
    if not all(c in '0123456789ABCDEFabcdef' for c in clean_str):
        return None

    try:
        return bytes.fromhex(clean_str)
    except ValueError:
        pass

    return None


def format_offset(offset: int, width: int = 8) -> str:
    """
    Format a byte offset as a hex string.

    Args:
        offset (int): Byte offset to format
        width (int): Number of hex digits to use

    Returns:
        str: Formatted hex string
    """

    return f"{offset:0{width}X}"


def find_pattern(data: bytes, pattern: bytes, start: int = 0) -> Optional[int]:
    """
    Find the next occurrence of a byte pattern.

    Args:
        data (bytes): Data to search in
        pattern (bytes): Pattern to search for
        start (int): Starting position for search

    Returns:
        int: Position of pattern or None if not found
    """

    if not pattern:
        return None

    start = max(0, start)
    pos = index_of(data[start:], pattern)
    if pos is None:
        return None

    return start + pos
