"""
Utility functions.
"""

from .formatting import format_offset, hex_dump
from .logger import setup_logger

__all__ = ['format_offset', 'hex_dump', 'setup_logger']
