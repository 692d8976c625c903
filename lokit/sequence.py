"""Sequence helpers: filtering, mapping, grouping, chunking and keyed lookups."""

from __future__ import annotations

import copy
from itertools import chain, zip_longest
from typing import Callable, Hashable, Iterable, Sequence, TypeVar

T = TypeVar("T")
R = TypeVar("R")
K = TypeVar("K", bound=Hashable)
V = TypeVar("V")

_MISSING = object()


def select(collection: Iterable[T], predicate: Callable[[T, int], bool]) -> list[T]:
    """Return the items for which ``predicate(item, index)`` is true."""
    return [item for index, item in enumerate(collection) if predicate(item, index)]


def map_items(collection: Iterable[T], iteratee: Callable[[T, int], R]) -> list[R]:
    """Return ``iteratee(item, index)`` for every item."""
    return [iteratee(item, index) for index, item in enumerate(collection)]


def uniq_map(collection: Iterable[T], iteratee: Callable[[T, int], K]) -> list[K]:
    """Map every item and keep only the first occurrence of each result."""
    return list(dict.fromkeys(map_items(collection, iteratee)))


def filter_map(
    collection: Iterable[T], callback: Callable[[T, int], tuple[R, bool]]
) -> list[R]:
    """Map and filter in one pass; ``callback`` returns ``(value, keep)``."""
    result: list[R] = []
    for index, item in enumerate(collection):
        value, keep = callback(item, index)
        if keep:
            result.append(value)
    return result


def flat_map(
    collection: Iterable[T], iteratee: Callable[[T, int], Iterable[R] | None]
) -> list[R]:
    """Map every item to a sequence and concatenate them; ``None`` adds nothing."""
    return list(
        chain.from_iterable(
            iteratee(item, index) or () for index, item in enumerate(collection)
        )
    )


def reduce(
    collection: Iterable[T], accumulator: Callable[[R, T, int], R], initial: R
) -> R:
    """Fold the items from left to right into ``initial``."""
    for index, item in enumerate(collection):
        initial = accumulator(initial, item, index)
    return initial


def reduce_right(
    collection: Sequence[T], accumulator: Callable[[R, T, int], R], initial: R
) -> R:
    """Fold the items from right to left into ``initial``."""
    for index in reversed(range(len(collection))):
        initial = accumulator(initial, collection[index], index)
    return initial


def for_each(collection: Iterable[T], iteratee: Callable[[T, int], object]) -> None:
    """Call ``iteratee(item, index)`` for every item."""
    for index, item in enumerate(collection):
        iteratee(item, index)


def for_each_while(
    collection: Iterable[T], iteratee: Callable[[T, int], bool]
) -> None:
    """Call ``iteratee(item, index)`` until it returns a false value."""
    for index, item in enumerate(collection):
        if not iteratee(item, index):
            break


def times(count: int, iteratee: Callable[[int], R]) -> list[R]:
    """Return the results of calling ``iteratee`` with 0 .. count-1."""
    return [iteratee(index) for index in range(count)]


def uniq(collection: Iterable[K]) -> list[K]:
    """Drop duplicates, keeping the first occurrence of each item in order."""
    return list(dict.fromkeys(collection))


def uniq_by(collection: Iterable[T], iteratee: Callable[[T], Hashable]) -> list[T]:
    """Drop items whose key was already seen, keeping the first of each."""
    seen: set[Hashable] = set()
    result: list[T] = []
    for item in collection:
        key = iteratee(item)
        if key not in seen:
            seen.add(key)
            result.append(item)
    return result


def group_by(collection: Iterable[T], iteratee: Callable[[T], K]) -> dict[K, list[T]]:
    """Group items by the key ``iteratee`` returns, keeping their order."""
    result: dict[K, list[T]] = {}
    for item in collection:
        result.setdefault(iteratee(item), []).append(item)
    return result


def group_by_map(
    collection: Iterable[T], iteratee: Callable[[T], tuple[K, V]]
) -> dict[K, list[V]]:
    """Group the values ``iteratee`` returns under the keys it returns with them."""
    result: dict[K, list[V]] = {}
    for item in collection:
        key, value = iteratee(item)
        result.setdefault(key, []).append(value)
    return result


def chunk(collection: Sequence[T], size: int) -> list[list[T]]:
    """Split into lists of ``size`` items; the last may be shorter."""
    if size <= 0:
        raise ValueError("Second parameter must be greater than 0")
    return [list(collection[start : start + size]) for start in range(0, len(collection), size)]


def partition_by(collection: Iterable[T], iteratee: Callable[[T], K]) -> list[list[T]]:
    """Split items into groups by key, ordered by each key's first appearance."""
    return list(group_by(collection, iteratee).values())


def flatten(collections: Iterable[Iterable[T]]) -> list[T]:
    """Concatenate the inner sequences one level deep."""
    return list(chain.from_iterable(collections))


def interleave(*args: Iterable[T] | None) -> list[T]:
    """Take one item from each sequence in turn until all are exhausted."""
    rows = zip_longest(*(collection or () for collection in args), fillvalue=_MISSING)
    return [item for row in rows for item in row if item is not _MISSING]


def fill(collection: Iterable[object], initial: T) -> list[T]:
    """Return a list as long as ``collection`` holding copies of ``initial``."""
    return [copy.copy(initial) for _ in collection]


def repeat(count: int, initial: T) -> list[T]:
    """Return ``count`` copies of ``initial``."""
    return [copy.copy(initial) for _ in range(count)]


def repeat_by(count: int, callback: Callable[[int], R]) -> list[R]:
    """Return the results of ``count`` calls to ``callback`` with the index."""
    return [callback(index) for index in range(count)]


def key_by(collection: Iterable[V], iteratee: Callable[[V], K]) -> dict[K, V]:
    """Map each key ``iteratee`` returns to its item; later items win."""
    return {iteratee(item): item for item in collection}


def associate(
    collection: Iterable[T], transform: Callable[[T], tuple[K, V]]
) -> dict[K, V]:
    """Build a dict from the ``(key, value)`` pairs ``transform`` returns; later pairs win."""
    return dict(transform(item) for item in collection)


def slice_to_map(
    collection: Iterable[T], transform: Callable[[T], tuple[K, V]]
) -> dict[K, V]:
    """Alias of :func:`associate`."""
    return associate(collection, transform)


def filter_slice_to_map(
    collection: Iterable[T], transform: Callable[[T], tuple[K, V, bool]]
) -> dict[K, V]:
    """Like :func:`associate`, keeping only pairs whose third element is true."""
    result: dict[K, V] = {}
    for item in collection:
        key, value, keep = transform(item)
        if keep:
            result[key] = value
    return result


def keyify(collection: Iterable[K]) -> set[K]:
    """Return the set of distinct items."""
    return set(collection)