"""
Dump module for viewing byte data as hex lines.
"""

from typing import Iterator, Optional, Tuple

from ..utils.hex_utils import find_pattern, format_offset
from ..utils.text import printable_ascii


class HexDump:
    """Read-only view splitting a byte buffer into hex viewer lines."""

    DEFAULT_BYTES_PER_LINE = 16
    OFFSET_WIDTH = 8

    def __init__(self, data: bytes = b'', bytes_per_line: int = DEFAULT_BYTES_PER_LINE) -> None:
        if bytes_per_line <= 0:
            raise ValueError("bytes_per_line must be positive")

        self.data = bytes(data)
        self.bytes_per_line = bytes_per_line

    def get_line(self, line_number: int) -> Tuple[bytes, str]:
        """Get a line of hex data and its ASCII representation."""

        if not 0 <= line_number < self.get_line_count():
            return b'', ''

        start = line_number * self.bytes_per_line
        end = min(start + self.bytes_per_line, len(self.data))
        hex_data = self.data[start:end]

        return hex_data, printable_ascii(hex_data)

    def get_line_count(self) -> int:
        """Get the total number of lines based on bytes_per_line."""

        return (len(self.data) + self.bytes_per_line - 1) // self.bytes_per_line

    def format_line(self, line_number: int) -> str:
        """
        Format a single line as offset, hex bytes and ASCII gutter.

        Args:
            line_number (int): Zero-based line to format

        Returns:
            str: The formatted line, or an empty string if out of range
        """

        hex_data, ascii_str = self.get_line(line_number)
        if not hex_data:
            return ''

        offset = format_offset(line_number * self.bytes_per_line, self.OFFSET_WIDTH)
        hex_column = ' '.join(f"{b:02X}" for b in hex_data)
        hex_column = hex_column.ljust(self.bytes_per_line * 3 - 1)

        return f"{offset}  {hex_column}  |{ascii_str}|"

    def lines(self) -> Iterator[str]:
        """Yield every formatted line in order."""

        for line_number in range(self.get_line_count()):
            yield self.format_line(line_number)

    def render(self) -> str:
        return '\n'.join(self.lines())

    def find(self, needle: bytes, start: int = 0) -> Optional[int]:
        """Find the next occurrence of needle at or after start."""

        return find_pattern(self.data, needle, start)
