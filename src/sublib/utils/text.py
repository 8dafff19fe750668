"""
Best-effort conversion of raw bytes into displayable text.
"""

import logging
from typing import Iterable, Union

logger = logging.getLogger(__name__)

BytesLike = Union[bytes, bytearray, memoryview]


def to_string(data: Union[BytesLike, Iterable[int]]) -> str:
    """
    Decode bytes as UTF-8, falling back to a list rendering of the byte values.

    Args:
        data: Bytes-like object or iterable of byte values

    Returns:
        str: Decoded text, or e.g. "[255, 254]" when data is not valid UTF-8
    """

    if isinstance(data, memoryview):
        data = data.cast('B') if data.c_contiguous else data.tobytes()
    elif not isinstance(data, (bytes, bytearray)):
        data = bytes(data)

    try:
        return str(data, 'utf-8')
    except UnicodeDecodeError as e:
        logger.debug("Falling back to byte list rendering: %s", e)

    return str(list(data))


to_string_s = to_string


def printable_ascii(data: Iterable[int]) -> str:
    """Render printable ASCII bytes as characters and everything else as '.'."""

    return ''.join(chr(b) if 32 <= b <= 126 else '.' for b in data)
