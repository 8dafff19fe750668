"""
Core package for line-oriented views over byte data.

This package implements the HexDump class for splitting a byte buffer into
offset/hex/ASCII lines, as well as the DumpHighlighter class for colouring
the rendered dump on a terminal.
"""

from .dump import HexDump
from .syntax import DumpHighlighter

__all__ = ['HexDump', 'DumpHighlighter']
