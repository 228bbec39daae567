from itertools import permutations

import pytest

from columnize.extents import (
    Extent,
    attempt_merge,
    fields_from_extents,
    merge_all,
    merge_extents,
    scan_extents,
)

E = Extent


# ——— Scanning ———————————————————————————————————————
@pytest.mark.parametrize("line, expected", [
    ("", []),
    ("   ", []),
    ("\t \t", []),
    ("item", [E(1, 4)]),
    (" item ", [E(2, 5)]),
    ("one two", [E(1, 3), E(5, 7)]),
    (" one two ", [E(2, 4), E(6, 8)]),
    ("a\tb", [E(1, 1), E(3, 3)]),
    ("héllo wörld", [E(1, 5), E(7, 11)]),
    ("日本 語", [E(1, 2), E(4, 4)]),
])
def test_scan_extents(line, expected):
    assert scan_extents(line) == expected


def test_scan_handles_many_fields():
    assert len(scan_extents(" item " * 17)) == 17


def test_extent_rejects_inverted_bounds():
    with pytest.raises(ValueError):
        Extent(5, 4)


def test_extent_width():
    assert E(8, 10).width == 3
    assert E(3, 3).width == 1


# ——— Merging ————————————————————————————————————————
def test_attempt_merge_without_overlap():
    assert attempt_merge(E(11, 15), E(6, 8)) is None
    assert attempt_merge(E(1, 3), E(4, 5)) is None  # touching is not sharing a column


def test_attempt_merge_with_overlap():
    assert attempt_merge(E(1, 3), E(2, 3)) == E(1, 3)
    assert attempt_merge(E(2, 6), E(1, 3)) == E(1, 6)


def test_merge_extent_lists():
    ee1 = [E(1, 3), E(11, 15)]
    ee2 = [E(2, 5), E(6, 8), E(10, 12)]
    assert merge_extents(ee1, ee2) == [E(1, 5), E(6, 8), E(10, 15)]


@pytest.mark.parametrize("ee", [
    [],
    [E(1, 3)],
    [E(1, 3), E(5, 7), E(20, 21)],
])
def test_merge_identity(ee):
    assert merge_extents(ee, []) == ee
    assert merge_extents([], ee) == ee


def test_merge_two_lines():
    merged = merge_extents(
        scan_extents("one    two    three"),
        scan_extents(" one" + " " * 12 + "three"),
    )
    assert merged == [E(1, 4), E(8, 10), E(15, 21)]
    assert [e.width for e in merged] == [4, 3, 7]


def test_merge_joins_extents_bridged_by_a_wider_one():
    assert merge_extents([E(1, 3), E(5, 7)], [E(2, 6)]) == [E(1, 7)]
    assert merge_extents([E(2, 6)], [E(1, 3), E(5, 7)]) == [E(1, 7)]


PAIRS = [
    ([E(1, 3), E(11, 15)], [E(2, 5), E(6, 8), E(10, 12)]),
    ([E(1, 3), E(5, 7)], [E(2, 6)]),
    ([E(1, 1), E(3, 3), E(5, 5)], [E(2, 2), E(4, 4)]),
    ([E(4, 9)], [E(1, 2), E(5, 6), E(8, 12), E(20, 22)]),
]


@pytest.mark.parametrize("a, b", PAIRS)
def test_merge_contains_every_input_exactly_once(a, b):
    merged = merge_extents(a, b)
    for extent in a + b:
        assert sum(m.contains(extent) for m in merged) == 1
    for left, right in zip(merged, merged[1:]):
        assert left.right < right.left


@pytest.mark.parametrize("a, b", PAIRS)
def test_merge_is_commutative(a, b):
    assert merge_extents(a, b) == merge_extents(b, a)


def test_merge_is_associative():
    # each line has a column the other two lack
    a = [E(1, 3), E(8, 10)]
    b = [E(1, 3), E(15, 19)]
    c = [E(8, 9), E(15, 17), E(22, 25)]
    expected = [E(1, 3), E(8, 10), E(15, 19), E(22, 25)]

    assert merge_extents(merge_extents(a, b), c) == expected
    assert merge_extents(a, merge_extents(b, c)) == expected


def test_merge_all_ignores_line_order():
    lines = ["one    two", "one           three", "       tw     thr    four"]
    results = {tuple(merge_all(order)) for order in permutations(lines)}
    assert results == {(E(1, 3), E(8, 10), E(15, 19), E(22, 25))}


# ——— Field extraction ———————————————————————————————
@pytest.fixture
def three_columns():
    return scan_extents("one    two    three")


def test_fields_nothing_missing(three_columns):
    assert fields_from_extents("one    two    three", three_columns) == ["one", "two", "three"]


def test_fields_middle_column_missing(three_columns):
    assert fields_from_extents("one           three", three_columns) == ["one", "", "three"]


def test_fields_leading_column_missing(three_columns):
    # later fields must not shift left into the blank first column
    assert fields_from_extents("       two    three", three_columns) == ["", "two", "three"]


def test_fields_trailing_column_missing(three_columns):
    assert fields_from_extents("one    two", three_columns) == ["one", "two", ""]


def test_fields_only_last_column_present(three_columns):
    assert fields_from_extents("              three", three_columns) == ["", "", "three"]


def test_fields_blank_line(three_columns):
    assert fields_from_extents("", three_columns) == ["", "", ""]
    assert fields_from_extents("      ", three_columns) == ["", "", ""]


def test_fields_shorter_words_are_trimmed():
    extents = merge_all(["apple  1.25", "fig     0.5"])
    assert fields_from_extents("fig     0.5", extents) == ["fig", "0.5"]


def test_fields_keep_words_sharing_a_column():
    extents = merge_all(["a b  x", "abc  y"])
    assert extents == [E(1, 3), E(6, 6)]
    assert fields_from_extents("a b  x", extents) == ["a b", "x"]


def test_fields_count_columns_not_bytes():
    lines = ["héllo  wörld", "ab     c"]
    extents = merge_all(lines)
    assert extents == [E(1, 5), E(8, 12)]
    assert fields_from_extents(lines[0], extents) == ["héllo", "wörld"]
    assert fields_from_extents(lines[1], extents) == ["ab", "c"]


def test_fields_without_extents():
    assert fields_from_extents("anything at all", []) == []
