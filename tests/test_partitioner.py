import pytest

from pattern_scanner_py.search import partition


@pytest.mark.parametrize("length, workers, pattern_length", [
    (10, 1, 2),
    (10, 3, 2),
    (10, 4, 3),
    (100, 7, 5),
    (5, 16, 1),
    (5, 16, 4),
])
def test_nominal_spans_tile_haystack(length, workers, pattern_length):
    parts = partition(length, workers, pattern_length)
    assert len(parts) == min(workers, length)
    assert parts[0].start == 0
    assert parts[-1].end == length
    for prev, nxt in zip(parts, parts[1:]):
        assert prev.end == nxt.start
    assert [p.index for p in parts] == list(range(len(parts)))


def test_scan_windows_extend_by_pattern_length_minus_one():
    parts = partition(10, 3, 3)
    assert [(p.start, p.end) for p in parts] == [(0, 4), (4, 7), (7, 10)]
    assert [(p.scan_start, p.scan_end) for p in parts] == [(0, 6), (4, 9), (7, 10)]


def test_spans_are_balanced():
    sizes = [p.size for p in partition(103, 10, 1)]
    assert max(sizes) - min(sizes) <= 1
    assert sum(sizes) == 103


def test_every_match_position_is_inside_some_window():
    length, k = 37, 4
    parts = partition(length, 6, k)
    for offset in range(length - k + 1):
        owners = [p for p in parts if p.owns(offset)]
        assert len(owners) == 1
        owner = owners[0]
        assert owner.scan_start <= offset
        assert offset + k <= owner.scan_end


@pytest.mark.parametrize("length, workers, pattern_length", [
    (0, 4, 1),
    (10, 0, 1),
    (3, 2, 4),
])
def test_degenerate_requests_yield_nothing(length, workers, pattern_length):
    assert partition(length, workers, pattern_length) == []


def test_negative_worker_count_is_rejected():
    with pytest.raises(ValueError):
        partition(10, -1, 1)


def test_owns():
    part = partition(10, 2, 3)[0]
    assert part.owns(0)
    assert part.owns(4)
    assert not part.owns(5)
    assert part.scan_size == 7
