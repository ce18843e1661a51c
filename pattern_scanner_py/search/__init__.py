"""
Search primitives for wildcard byte patterns.

This module provides:
- Matcher functions: brute-force sliding comparison over one window
- Partition / partition(): overlapping haystack spans for parallel scans
"""

from .matcher import matches_at, iter_matches, find_all, find_first
from .partitioner import Partition, partition

__all__ = [
    'matches_at', 'iter_matches', 'find_all', 'find_first',
    'Partition', 'partition',
]
