import pytest

from algokit.search import search_insert, search_range

SORTED = [1, 3, 3, 3, 5, 7, 7, 9]


@pytest.mark.parametrize("target", sorted(set(SORTED)))
def test_search_range_present(target):
    first, last = search_range(SORTED, target)
    assert first == SORTED.index(target)
    assert last == len(SORTED) - 1 - SORTED[::-1].index(target)
    assert all(v == target for v in SORTED[first : last + 1])


@pytest.mark.parametrize("target", [0, 2, 6, 10])
def test_search_range_absent(target):
    assert search_range(SORTED, target) == (-1, -1)


def test_search_range_empty():
    assert search_range([], 4) == (-1, -1)


@pytest.mark.parametrize("target", [0, 1, 2, 3, 4, 8, 9, 10])
def test_search_insert_keeps_order(target):
    index = search_insert(SORTED, target)
    merged = SORTED[:index] + [target] + SORTED[index:]
    assert merged == sorted(merged)
    assert all(v < target for v in SORTED[:index])


def test_search_insert_bounds():
    assert search_insert(SORTED, 100) == len(SORTED)
    assert search_insert(SORTED, -100) == 0
    assert search_insert(SORTED, 3) == SORTED.index(3)