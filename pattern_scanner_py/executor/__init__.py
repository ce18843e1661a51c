"""
Parallel scan execution.
"""

from .scan_executor import (
    ScanExecutor,
    NonUniquePatternError,
    scan,
    scan_all,
    scan_unique,
    scan_partition,
    merge_offsets,
)

__all__ = [
    'ScanExecutor', 'NonUniquePatternError', 'scan', 'scan_all',
    'scan_unique', 'scan_partition', 'merge_offsets',
]
