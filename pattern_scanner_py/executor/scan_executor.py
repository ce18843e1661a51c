"""
Parallel scan orchestration.

A scan parses the pattern once, partitions the haystack, runs the matcher
on every partition in a thread pool and merges the per-partition results
into one ascending, duplicate-free offset list.
"""

import heapq
import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Iterable, List, Optional, Union

from ..config import resolve_worker_count
from ..pattern.parser import Pattern, as_pattern
from ..search.matcher import iter_matches
from ..search.partitioner import Partition, partition

logger = logging.getLogger(__name__)

Haystack = Union[bytes, bytearray, memoryview]
PatternLike = Union[str, Pattern]


class NonUniquePatternError(Exception):
    """Raised when a pattern expected to be unique matches more than once."""

    def __init__(self, pattern: Pattern, offsets: List[int]):
        self.pattern = pattern
        self.offsets = offsets
        super().__init__(f"pattern '{pattern}' is not unique ({len(offsets)} matches)")


def _as_buffer(haystack: Haystack):
    # memoryview has no find(); everything else we accept does
    if isinstance(haystack, memoryview):
        return haystack.tobytes()
    return haystack


def scan_partition(haystack, pattern: Pattern, part: Partition, first_only: bool = False) -> List[int]:
    """
    Scan one partition and keep only the offsets it owns.

    Args:
        haystack: Full haystack buffer (shared, read-only)
        pattern: Parsed pattern
        part: Partition to scan
        first_only: Stop after the first owned match

    Returns:
        Ascending absolute offsets whose start lies in the nominal span
    """
    offsets = []
    for offset in iter_matches(haystack, pattern, part.scan_start, part.scan_end):
        if not part.owns(offset):
            continue
        offsets.append(offset)
        if first_only:
            break
    return offsets


def merge_offsets(results: Iterable[List[int]]) -> List[int]:
    """
    Merge ascending per-partition offset lists.

    Returns:
        One ascending list with every offset appearing once
    """
    merged: List[int] = []
    for offset in heapq.merge(*results):
        if not merged or merged[-1] != offset:
            merged.append(offset)
    return merged


class ScanExecutor:
    """
    Runs one pattern over one haystack with a fixed number of workers.

    Workers only read the haystack and pattern and each returns its own
    offset list, so no locking is involved. Results are collected in
    partition order after every worker has finished.

    Attributes:
        haystack: Buffer being scanned
        pattern: Parsed pattern
        workers: Requested worker count
        partitions: Partitions computed for this scan
    """

    def __init__(self, haystack: Haystack, pattern: Pattern, workers: int):
        self.haystack = _as_buffer(haystack)
        self.pattern = pattern
        self.workers = workers
        self.partitions = partition(len(self.haystack), workers, len(pattern))

        logger.debug(
            f"Scanning {len(self.haystack):,} bytes for '{pattern}' "
            f"({len(self.partitions)} partitions, {workers} workers)"
        )

    def collect(self, first_only: bool = False) -> List[List[int]]:
        """
        Scan every partition and wait for all of them.

        Args:
            first_only: Let each worker stop at its first owned match

        Returns:
            Per-partition offset lists, in partition order
        """
        if not self.partitions:
            return []

        if len(self.partitions) == 1:
            return [scan_partition(self.haystack, self.pattern, self.partitions[0], first_only)]

        with ThreadPoolExecutor(max_workers=len(self.partitions)) as pool:
            futures = [
                pool.submit(scan_partition, self.haystack, self.pattern, part, first_only)
                for part in self.partitions
            ]
            # result() re-raises worker exceptions
            return [future.result() for future in futures]

    def run_all(self) -> List[int]:
        """Return every match offset in ascending order."""
        results = self.collect()
        offsets = merge_offsets(results)
        logger.debug(f"Found {len(offsets)} matches for '{self.pattern}'")
        return offsets

    def run_first(self) -> Optional[int]:
        """Return the lowest match offset across all partitions, or None."""
        firsts = [offsets[0] for offsets in self.collect(first_only=True) if offsets]
        return min(firsts) if firsts else None


def scan_all(haystack: Haystack, pattern: PatternLike, worker_count: Optional[int] = None) -> List[int]:
    """
    Find every occurrence of a pattern.

    Args:
        haystack: Buffer to scan
        pattern: Pattern string or parsed Pattern
        worker_count: Number of workers, None for available parallelism

    Returns:
        Ascending list of distinct match offsets

    Raises:
        PatternError: If the pattern string is malformed
    """
    parsed = as_pattern(pattern)
    return ScanExecutor(haystack, parsed, resolve_worker_count(worker_count)).run_all()


def scan(haystack: Haystack, pattern: PatternLike, worker_count: Optional[int] = None) -> Optional[int]:
    """
    Find the lowest offset where a pattern occurs.

    Every partition is scanned before the minimum is taken, so the result
    does not depend on worker count or completion order.

    Returns:
        The lowest match offset, or None if there is no match

    Raises:
        PatternError: If the pattern string is malformed
    """
    parsed = as_pattern(pattern)
    return ScanExecutor(haystack, parsed, resolve_worker_count(worker_count)).run_first()


def scan_unique(haystack: Haystack, pattern: PatternLike, worker_count: Optional[int] = None) -> Optional[int]:
    """
    Find the only occurrence of a pattern.

    Returns:
        The match offset, or None if there is no match

    Raises:
        PatternError: If the pattern string is malformed
        NonUniquePatternError: If the pattern matches more than once
    """
    parsed = as_pattern(pattern)
    offsets = scan_all(haystack, parsed, worker_count)
    if len(offsets) > 1:
        raise NonUniquePatternError(parsed, offsets)
    return offsets[0] if offsets else None
