"""
Generic search and accumulation helpers over in-memory sequences.
"""

from typing import Callable, List, Optional, Sequence, TypeVar

T = TypeVar('T')
R = TypeVar('R')

EMPTY_NEEDLE_MESSAGE = "cannot search for an empty subsequence"


def _matches_at(haystack: Sequence[T], needle: Sequence[T], h: int) -> bool:
    if h + len(needle) > len(haystack):
        return False

    for n in range(len(needle)):
        if haystack[h + n] != needle[n]:
            return False

    return True


def index_of(haystack: Sequence[T], needle: Sequence[T]) -> Optional[int]:
    """
    Find the first position where needle occurs contiguously in haystack.

    Args:
        haystack (Sequence): Sequence to search in
        needle (Sequence): Non-empty sequence to search for

    Returns:
        int: Index of the first match or None if not found

    Raises:
        AssertionError: If needle is empty
    """

    if len(needle) == 0:
        raise AssertionError(EMPTY_NEEDLE_MESSAGE)

    for h in range(len(haystack)):
        if _matches_at(haystack, needle, h):
            return h

    return None


def index_of_from(haystack: Sequence[T], target: T, start_at: int) -> Optional[int]:
    """
    Find the first element equal to target at or after start_at.

    Args:
        haystack (Sequence): Sequence to search in
        target: Element to search for
        start_at (int): Index to start searching from

    Returns:
        int: Index of the match or None if not found
    """

    index = max(0, start_at)
    while index < len(haystack) and haystack[index] != target:
        index += 1

    if index >= len(haystack):
        return None

    return index


def index_of_all(haystack: Sequence[T], needle: Sequence[T]) -> List[int]:
    """
    Find every start index of needle in haystack, overlapping matches included.

    Args:
        haystack (Sequence): Sequence to search in
        needle (Sequence): Non-empty sequence to search for

    Returns:
        List[int]: Ascending start indices of all matches
    """

    if len(needle) == 0:
        raise AssertionError(EMPTY_NEEDLE_MESSAGE)

    return [h for h in range(len(haystack)) if _matches_at(haystack, needle, h)]


def accumulate(producer: Callable[[], Optional[R]]) -> List[R]:
    """Call producer until it returns None and collect its results in order."""

    result = []
    while True:
        value = producer()
        if value is None:
            break

        result.append(value)

    return result
