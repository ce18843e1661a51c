"""
Haystack partitioning for parallel scans.

The haystack is cut into nominal spans that tile [0, L) without gaps.
Each span's scan window is extended forward by (pattern length - 1)
bytes, so a match that starts inside the span but ends in the next one
is still fully visible to the worker scanning that span.
"""

from dataclasses import dataclass
from typing import List


@dataclass(frozen=True)
class Partition:
    """
    One unit of work for a scan worker.

    Attributes:
        index: Position of the partition in haystack order
        start: Nominal span start (inclusive)
        end: Nominal span end (exclusive)
        scan_start: Scan window start (inclusive)
        scan_end: Scan window end (exclusive), at most the haystack length
    """
    index: int
    start: int
    end: int
    scan_start: int
    scan_end: int

    def owns(self, offset: int) -> bool:
        """A match belongs to the partition whose nominal span holds its start."""
        return self.start <= offset < self.end

    @property
    def size(self) -> int:
        return self.end - self.start

    @property
    def scan_size(self) -> int:
        return self.scan_end - self.scan_start


def partition(length: int, workers: int, pattern_length: int) -> List[Partition]:
    """
    Split a haystack into overlapping scan partitions.

    The nominal spans are as even as possible: the first ``length % n``
    spans are one byte longer than the rest, where ``n = min(workers, length)``.

    Args:
        length: Haystack length in bytes
        workers: Requested number of partitions
        pattern_length: Number of bytes the pattern spans

    Returns:
        Partitions in haystack order; empty when the haystack is empty,
        no workers are requested or the pattern cannot fit

    Raises:
        ValueError: If a negative count is given
    """
    if length < 0 or workers < 0 or pattern_length < 1:
        raise ValueError(
            f"invalid partition request (length={length}, workers={workers}, "
            f"pattern_length={pattern_length})"
        )

    if length == 0 or workers == 0 or pattern_length > length:
        return []

    count = min(workers, length)
    base, extra = divmod(length, count)
    overlap = pattern_length - 1

    partitions = []
    start = 0
    for index in range(count):
        end = start + base + (1 if index < extra else 0)
        partitions.append(Partition(
            index=index,
            start=start,
            end=end,
            scan_start=start,
            scan_end=min(end + overlap, length),
        ))
        start = end

    return partitions
