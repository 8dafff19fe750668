"""
Syntax highlighting module for hex dumps using Pygments.
"""

from typing import Final

from pygments import highlight
from pygments.formatters import Terminal256Formatter
from pygments.lexers.hexdump import HexdumpLexer
from pygments.styles import get_style_by_name
from pygments.util import ClassNotFound

DEFAULT_STYLE: Final[str] = 'default'


class DumpHighlighter:
    """Handles terminal colouring of rendered hex dumps using Pygments."""

    def __init__(self, style: str = DEFAULT_STYLE) -> None:
        try:
            get_style_by_name(style)
        except ClassNotFound as e:
            raise ValueError(f"Unknown highlight style: {style}") from e

        self.style = style
        self.lexer = HexdumpLexer()
        self.formatter = Terminal256Formatter(style=style)

    def highlight(self, text: str) -> str:
        """
        Colour a rendered dump for terminal output.

        Args:
            text: Dump text as produced by HexDump.render

        Returns:
            The text with ANSI colour escapes, without a trailing newline
        """

        if not text:
            return text

        return highlight(text, self.lexer, self.formatter).rstrip('\n')
