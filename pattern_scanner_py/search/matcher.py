"""
Brute-force wildcard pattern matching over a byte buffer.

Every candidate start is compared token by token, stopping at the first
mismatch. The comparison of the first exact token is delegated to the
buffer's own ``find`` so that long runs of non-matching bytes are skipped
without a Python-level loop.
"""

from typing import Iterator, List, Optional, Union

from ..pattern.parser import Pattern


def _window(data, pattern: Pattern, start: int, end: Optional[int]):
    """Clamp [start, end) to the buffer and return (start, last_start)."""
    data_len = len(data)
    if end is None or end > data_len:
        end = data_len
    start = max(start, 0)
    return start, end - len(pattern)


def matches_at(data: Union[bytes, bytearray], pattern: Pattern, offset: int) -> bool:
    """
    Check whether the pattern fully matches at the given offset.

    Args:
        data: Buffer to test
        pattern: Parsed pattern
        offset: Candidate start offset

    Returns:
        True if every exact token equals the byte at its position
    """
    if offset < 0 or offset + len(pattern) > len(data):
        return False

    for j, token in enumerate(pattern):
        if token.value is not None and data[offset + j] != token.value:
            return False
    return True


def iter_matches(
    data: Union[bytes, bytearray],
    pattern: Pattern,
    start: int = 0,
    end: Optional[int] = None
) -> Iterator[int]:
    """
    Yield match offsets in ascending order.

    Only matches lying entirely inside data[start:end] are reported.
    Offsets are relative to the start of `data`, not to `start`.

    Args:
        data: Buffer to scan (bytes, bytearray or mmap)
        pattern: Parsed pattern
        start: First candidate offset
        end: End of the window (exclusive), defaults to len(data)

    Yields:
        Offsets where the pattern matches
    """
    start, last = _window(data, pattern, start, end)
    if last < start:
        return

    anchor = pattern.anchor
    if anchor is None:
        # All wildcards: every position that fits is a match
        yield from range(start, last + 1)
        return

    needle = bytes((pattern[anchor].value,))
    checks = [
        (j, token.value)
        for j, token in enumerate(pattern)
        if token.value is not None and j != anchor
    ]

    i = start
    while i <= last:
        pos = data.find(needle, i + anchor, last + anchor + 1)
        if pos == -1:
            return
        i = pos - anchor

        for j, value in checks:
            if data[i + j] != value:
                break
        else:
            yield i

        i += 1


def find_all(
    data: Union[bytes, bytearray],
    pattern: Pattern,
    start: int = 0,
    end: Optional[int] = None
) -> List[int]:
    """
    Find all matches of a pattern.

    Args:
        data: Buffer to scan
        pattern: Parsed pattern
        start: First candidate offset
        end: End of the window (exclusive)

    Returns:
        Ascending list of match offsets; empty if the pattern does not fit
    """
    return list(iter_matches(data, pattern, start, end))


def find_first(
    data: Union[bytes, bytearray],
    pattern: Pattern,
    start: int = 0,
    end: Optional[int] = None
) -> Optional[int]:
    """
    Find the lowest match offset of a pattern.

    Returns:
        The first match offset, or None if there is no match
    """
    return next(iter_matches(data, pattern, start, end), None)
