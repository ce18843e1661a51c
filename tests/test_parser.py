import pytest

from pattern_scanner_py.pattern import (
    EmptyPatternError,
    InvalidTokenError,
    Pattern,
    PatternError,
    Token,
    parse,
)


def test_parse_exact_bytes():
    assert parse("AA BB CC").tokens == (Token(0xAA), Token(0xBB), Token(0xCC))


def test_parse_is_case_insensitive():
    assert parse("ae Ae aE") == parse("AE AE AE")


def test_parse_wildcards():
    pattern = parse("? AA BB ? ? CC ? ? ? FF")
    assert len(pattern) == 10
    assert [t.value for t in pattern] == [None, 0xAA, 0xBB, None, None, 0xCC, None, None, None, 0xFF]


def test_parse_tolerates_extra_whitespace():
    assert parse("   33   35\t?  ") == parse("33 35 ?")


@pytest.mark.parametrize("text", ["", "   ", "\t\n"])
def test_parse_empty(text):
    with pytest.raises(EmptyPatternError):
        parse(text)


@pytest.mark.parametrize("text, token, position", [
    ("AA GG", "GG", 1),
    ("A A BB", "A", 0),
    ("AAA", "AAA", 0),
    ("33 ?? 35", "??", 1),
    ("0x10", "0x10", 0),
    ("33 * 35", "*", 1),
])
def test_parse_invalid_token(text, token, position):
    with pytest.raises(InvalidTokenError) as exc_info:
        parse(text)
    assert exc_info.value.token == token
    assert exc_info.value.position == position
    assert token in str(exc_info.value)


def test_pattern_errors_are_value_errors():
    assert issubclass(EmptyPatternError, PatternError)
    assert issubclass(InvalidTokenError, PatternError)
    assert issubclass(PatternError, ValueError)


def test_pattern_str_is_canonical():
    pattern = parse("de ad ? ef")
    assert str(pattern) == "DE AD ? EF"
    assert parse(str(pattern)) == pattern


def test_pattern_anchor():
    assert parse("? ? 35").anchor == 2
    assert parse("33 ?").anchor == 0
    assert parse("? ?").anchor is None


def test_empty_pattern_cannot_be_constructed():
    with pytest.raises(EmptyPatternError):
        Pattern([])


def test_pattern_is_hashable_and_indexable():
    pattern = Pattern.parse("33 ? 42")
    assert pattern[1].is_wildcard
    assert pattern[-1] == Token.exact(0x42)
    assert {pattern: 1}[parse("33 ? 42")] == 1


def test_token_matches():
    assert Token.wildcard().matches(0x00)
    assert Token.exact(0x33).matches(0x33)
    assert not Token.exact(0x33).matches(0x34)
    with pytest.raises(ValueError):
        Token.exact(256)
