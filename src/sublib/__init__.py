"""
Sublib - sequence search, hex encoding and byte-to-text helpers.
"""

from .utils import (
    index_of,
    index_of_from,
    index_of_all,
    accumulate,
    make_hex_string,
    to_string,
    to_string_s
)

__version__ = "0.1.0"

__all__ = [
    'index_of',
    'index_of_from',
    'index_of_all',
    'accumulate',
    'make_hex_string',
    'to_string',
    'to_string_s'
]
