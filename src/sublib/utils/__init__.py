"""
Utility package for sequence search and byte conversion functions.
"""

from .sequence import index_of, index_of_from, index_of_all, accumulate
from .hex_utils import (
    make_hex_string,
    parse_hex_string,
    format_offset,
    find_pattern
)
from .text import to_string, to_string_s, printable_ascii

__all__ = [
    'index_of',
    'index_of_from',
    'index_of_all',
    'accumulate',
    'make_hex_string',
    'parse_hex_string',
    'format_offset',
    'find_pattern',
    'to_string',
    'to_string_s',
    'printable_ascii'
]
