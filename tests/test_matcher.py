from pattern_scanner_py.pattern import parse
from pattern_scanner_py.search import find_all, find_first, iter_matches, matches_at

DATA = bytes([0x00, 0x01, 0x02, 0x33, 0x35, 0x42, 0x33, 0x35, 0x69, 0x09])


def test_find_all_exact():
    assert find_all(DATA, parse("33 35")) == [3, 6]


def test_find_all_trailing_wildcard():
    assert find_all(DATA, parse("33 35 ?")) == [3, 6]


def test_find_all_leading_wildcard():
    assert find_all(DATA, parse("? 35")) == [3, 6]


def test_find_first():
    assert find_first(DATA, parse("33 ? 42")) == 3
    assert find_first(DATA, parse("33 ? 43")) is None


def test_pattern_longer_than_data():
    assert find_all(b"\x33\x35", parse("33 35 ?")) == []
    assert find_first(b"", parse("?")) is None


def test_all_wildcards_match_every_position():
    assert find_all(DATA, parse("? ? ?")) == list(range(8))
    assert find_all(DATA, parse("?")) == list(range(10))


def test_window_bounds():
    pattern = parse("33 35")
    # a match must fit entirely inside [start, end)
    assert find_all(DATA, pattern, 4) == [6]
    assert find_all(DATA, pattern, 0, 7) == [3]
    assert find_all(DATA, pattern, 0, 8) == [3, 6]
    assert find_all(DATA, pattern, 7) == []


def test_overlapping_matches():
    assert find_all(b"\xAA" * 5, parse("AA AA")) == [0, 1, 2, 3]


def test_iter_matches_is_lazy_and_ascending():
    data = bytes(range(256)) * 4
    offsets = iter_matches(data, parse("10 ? 12"))
    assert next(offsets) == 0x10
    assert list(offsets) == [0x110, 0x210, 0x310]


def test_matches_bytearray():
    assert find_all(bytearray(DATA), parse("35 ? 33")) == [4]


def test_matches_at():
    pattern = parse("33 ? 42")
    assert matches_at(DATA, pattern, 3)
    assert not matches_at(DATA, pattern, 6)
    assert not matches_at(DATA, pattern, -1)
    assert not matches_at(DATA, parse("09 ?"), 9)


def test_large_buffer_single_match():
    data = bytearray(1_000_000)
    data[600_000] = 0x33
    data[600_001] = 0x35
    assert find_all(bytes(data), parse("33 35")) == [600_000]
