"""Sequence helpers: dropping, rejecting, counting, slicing and splicing."""

from __future__ import annotations

from collections import Counter
from itertools import pairwise
from typing import Callable, Hashable, Iterable, Sequence, TypeVar

T = TypeVar("T")
R = TypeVar("R")
K = TypeVar("K", bound=Hashable)


def drop(collection: Sequence[T], n: int) -> list[T]:
    """Return a copy without the first ``n`` items."""
    if n < 0:
        raise ValueError("n must not be negative")
    return list(collection[n:])


def drop_right(collection: Sequence[T], n: int) -> list[T]:
    """Return a copy without the last ``n`` items."""
    if n < 0:
        raise ValueError("n must not be negative")
    if len(collection) <= n:
        return []
    return list(collection[: len(collection) - n])


def drop_while(collection: Sequence[T], predicate: Callable[[T], bool]) -> list[T]:
    """Drop items from the start while ``predicate`` holds."""
    start = len(collection)
    for index, item in enumerate(collection):
        if not predicate(item):
            start = index
            break
    return list(collection[start:])


def drop_right_while(
    collection: Sequence[T], predicate: Callable[[T], bool]
) -> list[T]:
    """Drop items from the end while ``predicate`` holds."""
    end = 0
    for index in reversed(range(len(collection))):
        if not predicate(collection[index]):
            end = index + 1
            break
    return list(collection[:end])


def drop_by_index(collection: Sequence[T], *args: int) -> list[T]:
    """Drop the items at the given positions; negative positions count from the end.

    Positions outside the collection are ignored.
    """
    size = len(collection)
    dropped = {index + size if index < 0 else index for index in args}
    return [item for index, item in enumerate(collection) if index not in dropped]


def reject(collection: Iterable[T], predicate: Callable[[T, int], bool]) -> list[T]:
    """Return the items for which ``predicate(item, index)`` is false."""
    return [item for index, item in enumerate(collection) if not predicate(item, index)]


def reject_map(
    collection: Iterable[T], callback: Callable[[T, int], tuple[R, bool]]
) -> list[R]:
    """Map and filter in one pass, keeping values whose flag is false."""
    result: list[R] = []
    for index, item in enumerate(collection):
        value, flagged = callback(item, index)
        if not flagged:
            result.append(value)
    return result


def filter_reject(
    collection: Iterable[T], predicate: Callable[[T, int], bool]
) -> tuple[list[T], list[T]]:
    """Split items into ``(kept, rejected)`` by ``predicate(item, index)``."""
    kept: list[T] = []
    rejected: list[T] = []
    for index, item in enumerate(collection):
        (kept if predicate(item, index) else rejected).append(item)
    return kept, rejected


def count(collection: Iterable[T], value: T) -> int:
    """Number of items equal to ``value``."""
    return sum(1 for item in collection if item == value)


def count_by(collection: Iterable[T], predicate: Callable[[T], bool]) -> int:
    """Number of items for which ``predicate`` holds."""
    return sum(1 for item in collection if predicate(item))


def count_values(collection: Iterable[K]) -> dict[K, int]:
    """Map each distinct item to the number of times it occurs."""
    return dict(Counter(collection))


def count_values_by(collection: Iterable[T], mapper: Callable[[T], K]) -> dict[K, int]:
    """Map each distinct ``mapper`` result to the number of times it occurs."""
    return dict(Counter(mapper(item) for item in collection))


def subset(collection: Sequence[T], offset: int, length: int) -> list[T]:
    """Return up to ``length`` items from ``offset``; negative offsets count from the end."""
    if length < 0:
        raise ValueError("length must not be negative")
    size = len(collection)
    if offset < 0:
        offset = max(size + offset, 0)
    if offset > size:
        return []
    return list(collection[offset : offset + length])


def slice_of(collection: Sequence[T], start: int, end: int) -> list[T]:
    """Return items from ``start`` up to ``end``, with both bounds clamped to the collection."""
    if start >= end:
        return []
    size = len(collection)
    start = min(max(start, 0), size)
    end = min(max(end, 0), size)
    return list(collection[start:end])


def replace(collection: Iterable[T], old: T, new: T, n: int) -> list[T]:
    """Return a copy with the first ``n`` items equal to ``old`` replaced; negative ``n`` means all."""
    result: list[T] = []
    remaining = n
    for item in collection:
        if item == old and remaining != 0:
            result.append(new)
            remaining -= 1
        else:
            result.append(item)
    return result


def replace_all(collection: Iterable[T], old: T, new: T) -> list[T]:
    """Return a copy with every item equal to ``old`` replaced by ``new``."""
    return replace(collection, old, new, -1)


def compact(collection: Iterable[T]) -> list[T]:
    """Return the items that are not empty or zero (falsy)."""
    return [item for item in collection if item]


def is_sorted(collection: Iterable[T]) -> bool:
    """True when no item is greater than the one after it."""
    return all(not (left > right) for left, right in pairwise(collection))


def is_sorted_by_key(collection: Iterable[T], iteratee: Callable[[T], object]) -> bool:
    """True when the keys ``iteratee`` returns are in non-decreasing order."""
    return is_sorted(iteratee(item) for item in collection)


def splice(collection: Sequence[T], index: int, *args: T) -> list[T]:
    """Insert ``args`` at ``index``; negative indexes count from the end and overflow is clamped."""
    items = list(collection)
    size = len(items)
    if not args:
        return items
    if index > size:
        return items + list(args)
    if index < -size:
        return list(args) + items
    if index < 0:
        index += size
    return items[:index] + list(args) + items[index:]