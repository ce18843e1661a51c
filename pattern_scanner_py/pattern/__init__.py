"""
Byte pattern language: tokens, patterns and the string parser.
"""

from .parser import (
    Token,
    Pattern,
    PatternError,
    EmptyPatternError,
    InvalidTokenError,
    parse,
    parse_token,
    as_pattern,
)

__all__ = [
    'Token', 'Pattern', 'PatternError', 'EmptyPatternError',
    'InvalidTokenError', 'parse', 'parse_token', 'as_pattern',
]
