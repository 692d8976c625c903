import sys

import pytest

from lokit.subsets import (
    compact,
    count,
    count_by,
    count_values,
    count_values_by,
    drop,
    drop_by_index,
    drop_right,
    drop_right_while,
    drop_while,
    filter_reject,
    is_sorted,
    is_sorted_by_key,
    reject,
    reject_map,
    replace,
    replace_all,
    slice_of,
    splice,
    subset,
)

BIG = 2**64 - 1


@pytest.mark.parametrize(
    "n, expected",
    [(1, [1, 2, 3, 4]), (2, [2, 3, 4]), (3, [3, 4]), (4, [4]), (5, []), (6, [])],
)
def test_drop(n, expected):
    assert drop([0, 1, 2, 3, 4], n) == expected


def test_drop_negative_raises():
    with pytest.raises(ValueError):
        drop([1, 2], -1)


@pytest.mark.parametrize(
    "n, expected",
    [(1, [0, 1, 2, 3]), (2, [0, 1, 2]), (3, [0, 1]), (4, [0]), (5, []), (6, [])],
)
def test_drop_right(n, expected):
    assert drop_right([0, 1, 2, 3, 4], n) == expected


def test_drop_right_negative_raises():
    with pytest.raises(ValueError):
        drop_right([1, 2], -1)


def test_drop_while():
    data = [0, 1, 2, 3, 4, 5, 6]
    assert drop_while(data, lambda t: t != 4) == [4, 5, 6]
    assert drop_while(data, lambda t: True) == []
    assert drop_while(data, lambda t: t == 10) == [0, 1, 2, 3, 4, 5, 6]


def test_drop_right_while():
    data = [0, 1, 2, 3, 4, 5, 6]
    assert drop_right_while(data, lambda t: t != 3) == [0, 1, 2, 3]
    assert drop_right_while(data, lambda t: t != 1) == [0, 1]
    assert drop_right_while(data, lambda t: t == 10) == [0, 1, 2, 3, 4, 5, 6]
    assert drop_right_while(data, lambda t: t != 10) == []


@pytest.mark.parametrize(
    "collection, indexes, expected",
    [
        ([0, 1, 2, 3, 4], (0,), [1, 2, 3, 4]),
        ([0, 1, 2, 3, 4], (0, 1, 2), [3, 4]),
        ([0, 1, 2, 3, 4], (-4, -2, -3), [0, 4]),
        ([0, 1, 2, 3, 4], (-4, -4), [0, 2, 3, 4]),
        ([0, 1, 2, 3, 4], (3, 1, 0), [2, 4]),
        ([0, 1, 2, 3, 4], (2,), [0, 1, 3, 4]),
        ([0, 1, 2, 3, 4], (4,), [0, 1, 2, 3]),
        ([0, 1, 2, 3, 4], (5,), [0, 1, 2, 3, 4]),
        ([0, 1, 2, 3, 4], (100,), [0, 1, 2, 3, 4]),
        ([0, 1, 2, 3, 4], (-1,), [0, 1, 2, 3]),
        ([], (0, 1), []),
        ([42], (0, 1), []),
        ([42], (1, 0), []),
        ([], (1,), []),
        ([1], (0,), []),
    ],
)
def test_drop_by_index(collection, indexes, expected):
    assert drop_by_index(collection, *indexes) == expected


def test_drop_by_index_leaves_input_untouched():
    data = [0, 1, 2]
    drop_by_index(data, 0)
    assert data == [0, 1, 2]


def test_reject():
    assert reject([1, 2, 3, 4], lambda x, _: x % 2 == 0) == [1, 3]
    assert reject(["Smith", "foo", "Domin", "bar", "Olivia"], lambda x, _: len(x) > 3) == [
        "foo",
        "bar",
    ]


def test_reject_map():
    r1 = reject_map([1, 2, 3, 4], lambda x, _: (str(x), False) if x % 2 == 0 else ("", True))
    r2 = reject_map(
        ["cpu", "gpu", "mouse", "keyboard"],
        lambda x, _: ("xpu", False) if x.endswith("pu") else ("", True),
    )
    assert r1 == ["2", "4"]
    assert r2 == ["xpu", "xpu"]


def test_filter_reject():
    left, right = filter_reject([1, 2, 3, 4], lambda x, _: x % 2 == 0)
    assert left == [2, 4]
    assert right == [1, 3]

    left, right = filter_reject(
        ["Smith", "foo", "Domin", "bar", "Olivia"], lambda x, _: len(x) > 3
    )
    assert left == ["Smith", "Domin", "Olivia"]
    assert right == ["foo", "bar"]


def test_count():
    assert count([1, 2, 1], 1) == 2
    assert count([1, 2, 1], 3) == 0
    assert count([], 1) == 0


def test_count_by():
    assert count_by([1, 2, 1], lambda i: i < 2) == 2
    assert count_by([1, 2, 1], lambda i: i > 2) == 0
    assert count_by([], lambda i: i <= 2) == 0


def test_count_values():
    assert count_values([]) == {}
    assert count_values([1, 2]) == {1: 1, 2: 1}
    assert count_values([1, 2, 2]) == {1: 1, 2: 2}
    assert count_values(["foo", "bar", ""]) == {"": 1, "foo": 1, "bar": 1}
    assert count_values(["foo", "bar", "bar"]) == {"foo": 1, "bar": 2}


def test_count_values_by():
    odd_even = lambda v: v % 2 == 0  # noqa: E731
    assert count_values_by([], odd_even) == {}
    assert count_values_by([1, 2], odd_even) == {True: 1, False: 1}
    assert count_values_by([1, 2, 2], odd_even) == {True: 2, False: 1}
    assert count_values_by(["foo", "bar", ""], len) == {0: 1, 3: 2}
    assert count_values_by(["foo", "bar", "bar"], len) == {3: 3}


@pytest.mark.parametrize(
    "offset, length, expected",
    [
        (0, 0, []),
        (10, 2, []),
        (-10, 2, [0, 1]),
        (0, 10, [0, 1, 2, 3, 4]),
        (0, 2, [0, 1]),
        (2, 2, [2, 3]),
        (2, 5, [2, 3, 4]),
        (2, 3, [2, 3, 4]),
        (2, 4, [2, 3, 4]),
        (-2, 4, [3, 4]),
        (-4, 1, [1]),
        (-4, BIG, [1, 2, 3, 4]),
    ],
)
def test_subset(offset, length, expected):
    assert subset([0, 1, 2, 3, 4], offset, length) == expected


def test_subset_negative_length_raises():
    with pytest.raises(ValueError):
        subset([1, 2, 3], 0, -1)


@pytest.mark.parametrize(
    "start, end, expected",
    [
        (0, 0, []),
        (0, 1, [0]),
        (0, 5, [0, 1, 2, 3, 4]),
        (0, 6, [0, 1, 2, 3, 4]),
        (1, 1, []),
        (1, 5, [1, 2, 3, 4]),
        (1, 6, [1, 2, 3, 4]),
        (4, 5, [4]),
        (5, 5, []),
        (6, 5, []),
        (6, 6, []),
        (1, 0, []),
        (5, 0, []),
        (6, 4, []),
        (6, 7, []),
        (-10, 1, [0]),
        (-1, 3, [0, 1, 2]),
        (-10, 7, [0, 1, 2, 3, 4]),
    ],
)
def test_slice_of(start, end, expected):
    assert slice_of([0, 1, 2, 3, 4], start, end) == expected


@pytest.mark.parametrize(
    "old, n, expected",
    [
        (0, 2, [42, 1, 42, 1, 2, 3, 0]),
        (0, 1, [42, 1, 0, 1, 2, 3, 0]),
        (0, 0, [0, 1, 0, 1, 2, 3, 0]),
        (0, -1, [42, 1, 42, 1, 2, 3, 42]),
        (-1, 2, [0, 1, 0, 1, 2, 3, 0]),
        (-1, 1, [0, 1, 0, 1, 2, 3, 0]),
        (-1, 0, [0, 1, 0, 1, 2, 3, 0]),
        (-1, -1, [0, 1, 0, 1, 2, 3, 0]),
    ],
)
def test_replace(old, n, expected):
    data = [0, 1, 0, 1, 2, 3, 0]
    assert replace(data, old, 42, n) == expected
    assert data == [0, 1, 0, 1, 2, 3, 0]


def test_replace_all():
    data = [0, 1, 0, 1, 2, 3, 0]
    assert replace_all(data, 0, 42) == [42, 1, 42, 1, 2, 3, 42]
    assert replace_all(data, -1, 42) == [0, 1, 0, 1, 2, 3, 0]


def test_compact():
    assert compact([2, 0, 4, 0]) == [2, 4]
    assert compact(["", "foo", "", "bar", ""]) == ["foo", "bar"]
    assert compact([True, False, True, False]) == [True, True]


def test_compact_removes_none_but_keeps_objects():
    first, second = object(), object()
    assert compact([first, None, second]) == [first, second]


def test_is_sorted():
    assert is_sorted([0, 1, 2, 3, 4, 5, 6, 7, 8, 9]) is True
    assert is_sorted(list("abcdefghij")) is True
    assert is_sorted([0, 1, 4, 3, 2, 5, 6, 7, 8, 9, 10]) is False
    assert is_sorted(list("abdcefghij")) is False


def test_is_sorted_by_key():
    assert is_sorted_by_key(["a", "bb", "ccc"], len) is True
    assert is_sorted_by_key(["aa", "b", "ccc"], len) is False
    assert is_sorted_by_key(["1", "2", "3", "11"], int) is True


SAMPLE = ["a", "b", "c", "d", "e", "f", "g"]


@pytest.mark.parametrize(
    "index, expected",
    [
        (1, ["a", "1", "2", "b", "c", "d", "e", "f", "g"]),
        (42, ["a", "b", "c", "d", "e", "f", "g", "1", "2"]),
        (-42, ["1", "2", "a", "b", "c", "d", "e", "f", "g"]),
        (-2, ["a", "b", "c", "d", "e", "1", "2", "f", "g"]),
        (-7, ["1", "2", "a", "b", "c", "d", "e", "f", "g"]),
    ],
)
def test_splice(index, expected):
    sample = list(SAMPLE)
    assert splice(sample, index, "1", "2") == expected
    assert sample == SAMPLE


def test_splice_has_no_side_effect():
    sample = list(SAMPLE)
    result = splice(sample, 1)
    result[0] = "b"
    assert sample == SAMPLE


@pytest.mark.parametrize(
    "collection, index, expected",
    [
        ([], 0, ["1", "2"]),
        ([], 1, ["1", "2"]),
        ([], -1, ["1", "2"]),
        (["0"], 0, ["1", "2", "0"]),
        (["0"], 1, ["0", "1", "2"]),
        (["0"], -1, ["1", "2", "0"]),
    ],
)
def test_splice_small(collection, index, expected):
    assert splice(collection, index, "1", "2") == expected


def test_subset_max_size():
    assert subset([0, 1, 2], 1, sys.maxsize) == [1, 2]