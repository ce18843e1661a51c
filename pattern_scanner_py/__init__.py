"""
Pattern Scanner
Multi-threaded search for wildcard byte signatures in large buffers.

Patterns are written as hex bytes and '?' wildcards, e.g. "48 8B ? ? 89".
"""

__version__ = "0.1.0"
__author__ = "Pattern Scanner contributors"

from .config import ScannerConfig
from .pattern.parser import (
    Token,
    Pattern,
    PatternError,
    EmptyPatternError,
    InvalidTokenError,
    parse,
)
from .search.matcher import matches_at
from .executor.scan_executor import NonUniquePatternError, scan, scan_all, scan_unique
from .scanner import PatternScanner

__all__ = [
    'ScannerConfig', 'Token', 'Pattern', 'PatternError', 'EmptyPatternError',
    'InvalidTokenError', 'NonUniquePatternError', 'PatternScanner',
    'parse', 'scan', 'scan_all', 'scan_unique', 'matches_at', '__version__',
]
