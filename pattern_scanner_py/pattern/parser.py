"""
Pattern parser for byte signatures.

A pattern is written as whitespace-separated tokens, each either two hex
digits (an exact byte) or a single '?' (any byte), e.g. "48 8B ? ? 89".
"""

from dataclasses import dataclass
from typing import Iterator, Optional, Sequence, Tuple, Union, overload


WILDCARD = '?'
HEX_DIGITS = frozenset('0123456789abcdefABCDEF')


class PatternError(ValueError):
    """Base class for pattern parsing errors."""
    pass


class EmptyPatternError(PatternError):
    """Raised when a pattern string contains no tokens."""

    def __init__(self):
        super().__init__("pattern is empty")


class InvalidTokenError(PatternError):
    """Raised when a token is neither two hex digits nor '?'."""

    def __init__(self, token: str, position: int):
        self.token = token
        self.position = position
        super().__init__(
            f"invalid pattern token {token!r} at position {position} "
            f"(expected two hex digits or '{WILDCARD}')"
        )


@dataclass(frozen=True)
class Token:
    """
    A single pattern position.

    Attributes:
        value: Required byte value (0-255), or None for a wildcard
    """
    value: Optional[int] = None

    @classmethod
    def exact(cls, value: int) -> 'Token':
        if not 0 <= value <= 0xFF:
            raise ValueError(f"byte value out of range: {value}")
        return cls(value)

    @classmethod
    def wildcard(cls) -> 'Token':
        return cls(None)

    @property
    def is_wildcard(self) -> bool:
        return self.value is None

    def matches(self, byte: int) -> bool:
        return self.value is None or self.value == byte

    def __str__(self) -> str:
        return WILDCARD if self.value is None else f'{self.value:02X}'


class Pattern(Sequence[Token]):
    """
    Immutable, non-empty sequence of tokens.

    The length of a pattern is the number of haystack bytes it spans.
    """

    __slots__ = ('_tokens',)

    def __init__(self, tokens: Sequence[Token]):
        tokens = tuple(tokens)
        if not tokens:
            raise EmptyPatternError()
        self._tokens: Tuple[Token, ...] = tokens

    @classmethod
    def parse(cls, text: str) -> 'Pattern':
        return parse(text)

    @property
    def tokens(self) -> Tuple[Token, ...]:
        return self._tokens

    @property
    def anchor(self) -> Optional[int]:
        """Index of the first exact token, or None if all are wildcards."""
        for i, token in enumerate(self._tokens):
            if token.value is not None:
                return i
        return None

    def __len__(self) -> int:
        return len(self._tokens)

    def __iter__(self) -> Iterator[Token]:
        return iter(self._tokens)

    @overload
    def __getitem__(self, index: int) -> Token: ...

    @overload
    def __getitem__(self, index: slice) -> Tuple[Token, ...]: ...

    def __getitem__(self, index):
        return self._tokens[index]

    def __eq__(self, other) -> bool:
        if isinstance(other, Pattern):
            return self._tokens == other._tokens
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._tokens)

    def __str__(self) -> str:
        return ' '.join(str(token) for token in self._tokens)

    def __repr__(self) -> str:
        return f"Pattern('{self}')"


def parse_token(text: str, position: int = 0) -> Token:
    """
    Parse a single token.

    Args:
        text: Token text ("3F", "ae" or "?")
        position: Token index, used for error reporting

    Returns:
        The parsed token

    Raises:
        InvalidTokenError: If the text is not a valid token
    """
    if text == WILDCARD:
        return Token.wildcard()
    if len(text) != 2 or not all(c in HEX_DIGITS for c in text):
        raise InvalidTokenError(text, position)
    return Token.exact(int(text, 16))


def parse(text: str) -> Pattern:
    """
    Parse a pattern string into a Pattern.

    Tokens are separated by runs of whitespace; leading and trailing
    whitespace is ignored.

    Args:
        text: Pattern string such as "33 35 ?"

    Returns:
        Parsed pattern, tokens in input order

    Raises:
        EmptyPatternError: If the string has no tokens
        InvalidTokenError: If a token is not two hex digits or '?'
    """
    parts = text.split()
    if not parts:
        raise EmptyPatternError()
    return Pattern([parse_token(part, i) for i, part in enumerate(parts)])


def as_pattern(pattern: Union[str, Pattern]) -> Pattern:
    """Return `pattern` parsed if it is a string, unchanged otherwise."""
    if isinstance(pattern, Pattern):
        return pattern
    return parse(pattern)
