"""
Column inference from the positions of words on each line.

An extent is the inclusive, 1-indexed column range of one run of non-space
characters. Columns count code points, so a multi-byte character takes one column.
Merging the extents of every line gives the column boundaries of the whole table.
"""

from dataclasses import dataclass
from functools import reduce
from typing import Iterable, Optional


@dataclass(frozen=True, order=True)
class Extent:
    left: int
    right: int

    def __post_init__(self):
        if self.left > self.right:
            raise ValueError(f"extent left {self.left} is past right {self.right}")

    @property
    def width(self) -> int:
        return 1 + self.right - self.left

    def overlaps(self, other: "Extent") -> bool:
        return not (self.right < other.left or other.right < self.left)

    def contains(self, other: "Extent") -> bool:
        return self.left <= other.left and other.right <= self.right


# ——— Scanning ———————————————————————————————————————
def scan_extents(line: str) -> list[Extent]:
    extents = []
    in_word = False
    word_left = 0
    column = 0

    for column, char in enumerate(line, start=1):
        if char.isspace() != in_word:
            continue  # still in the same word, or the same gap
        in_word = not in_word
        if in_word:
            word_left = column
        else:
            extents.append(Extent(word_left, column - 1))

    if in_word:
        extents.append(Extent(word_left, column))
    return extents


# ——— Merging ————————————————————————————————————————
def attempt_merge(a: Extent, b: Extent) -> Optional[Extent]:
    """Return the union of two extents when they share a column, otherwise None."""
    if not a.overlaps(b):
        return None
    return Extent(min(a.left, b.left), max(a.right, b.right))


def _append(merged: list[Extent], extent: Extent) -> None:
    # a union can reach the extent emitted before it, so fold into the tail
    if merged and (union := attempt_merge(merged[-1], extent)):
        merged[-1] = union
    else:
        merged.append(extent)


def merge_extents(a: list[Extent], b: list[Extent]) -> list[Extent]:
    """
    Consolidate two sorted, non-overlapping extent lists.

    Every extent of either input ends up inside exactly one extent of the result,
    and the result does not depend on which list is passed first.
    """
    merged: list[Extent] = []
    i = j = 0

    while i < len(a) and j < len(b):
        if union := attempt_merge(a[i], b[j]):
            _append(merged, union)
            i += 1
            j += 1
        elif a[i].left < b[j].left:
            _append(merged, a[i])
            i += 1
        else:
            _append(merged, b[j])
            j += 1

    for extent in a[i:] + b[j:]:
        _append(merged, extent)
    return merged


def merge_all(lines: Iterable[str]) -> list[Extent]:
    return reduce(merge_extents, map(scan_extents, lines), [])


# ——— Field extraction ———————————————————————————————
def fields_from_extents(line: str, extents: list[Extent]) -> list[str]:
    """
    Slice one field per extent out of line, in extent order.

    Each word of the line is matched to the extent it falls in by comparing the
    word's own columns with the extent bounds, so a column the line leaves blank
    (leading, middle or trailing) becomes an empty string without shifting the
    fields after it. Words sharing an extent are kept together with their spacing.
    Words outside every extent are dropped.
    """
    fields = [""] * len(extents)
    spans: list[Optional[tuple[int, int]]] = [None] * len(extents)
    index = 0

    for word in scan_extents(line):
        while index < len(extents) and extents[index].right < word.left:
            index += 1  # extent ends before this word: a blank cell
        if index == len(extents):
            break
        if not extents[index].overlaps(word):
            continue  # word sits in the gap before the current extent
        start, _ = spans[index] or (word.left, word.right)
        spans[index] = (start, word.right)

    for index, span in enumerate(spans):
        if span:
            fields[index] = line[span[0] - 1:span[1]]
    return fields
