"""
High-level scanner bound to a haystack and a worker count.
"""

from typing import List, Optional

from .config import ScannerConfig, resolve_worker_count
from .executor.scan_executor import Haystack, PatternLike, scan, scan_all, scan_unique


class PatternScanner:
    """
    Scans a stored byte buffer for wildcard patterns.

    Example:
        scanner = PatternScanner(data, threads=4)
        scanner.scan_all("33 35 ?")

    Attributes:
        data: The stored haystack
        threads: Worker count used for every scan
    """

    def __init__(self, data: Haystack = b'', threads: Optional[int] = None):
        self.data = data
        self.threads = resolve_worker_count(threads)

    @classmethod
    def from_config(cls, data: Haystack, config: ScannerConfig) -> 'PatternScanner':
        return cls(data, config.threads)

    def scan(self, pattern: PatternLike) -> Optional[int]:
        """Lowest match offset in the stored bytes, or None."""
        return scan(self.data, pattern, self.threads)

    def scan_all(self, pattern: PatternLike) -> List[int]:
        """All match offsets in the stored bytes, ascending."""
        return scan_all(self.data, pattern, self.threads)

    def scan_unique(self, pattern: PatternLike) -> Optional[int]:
        """The only match offset in the stored bytes; raises if there are several."""
        return scan_unique(self.data, pattern, self.threads)

    def scan_with_bytes(self, data: Haystack, pattern: PatternLike) -> Optional[int]:
        return scan(data, pattern, self.threads)

    def scan_all_with_bytes(self, data: Haystack, pattern: PatternLike) -> List[int]:
        return scan_all(data, pattern, self.threads)
