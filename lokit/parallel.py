"""Sequence helpers whose callbacks run concurrently on threads."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Hashable, Iterable, TypeVar

T = TypeVar("T")
R = TypeVar("R")
K = TypeVar("K", bound=Hashable)


def _run_all(calls: list[Callable[[], R]]) -> list[R]:
    if not calls:
        return []
    with ThreadPoolExecutor(max_workers=len(calls)) as executor:
        futures = [executor.submit(call) for call in calls]
        return [future.result() for future in futures]


def map_items(collection: Iterable[T], iteratee: Callable[[T, int], R]) -> list[R]:
    """Return ``iteratee(item, index)`` for every item, calling it concurrently.

    The results keep the order of the collection.
    """
    return _run_all(
        [
            (lambda item=item, index=index: iteratee(item, index))
            for index, item in enumerate(collection)
        ]
    )


def for_each(collection: Iterable[T], iteratee: Callable[[T, int], object]) -> None:
    """Call ``iteratee(item, index)`` for every item concurrently and wait for all."""
    map_items(collection, iteratee)


def times(count: int, iteratee: Callable[[int], R]) -> list[R]:
    """Return the results of calling ``iteratee`` with 0 .. count-1 concurrently."""
    return _run_all([(lambda index=index: iteratee(index)) for index in range(count)])


def group_by(collection: Iterable[T], iteratee: Callable[[T], K]) -> dict[K, list[T]]:
    """Group items by key, computing the keys concurrently; item order is kept."""
    items = list(collection)
    keys = map_items(items, lambda item, _: iteratee(item))
    result: dict[K, list[T]] = {}
    for key, item in zip(keys, items):
        result.setdefault(key, []).append(item)
    return result


def partition_by(collection: Iterable[T], iteratee: Callable[[T], K]) -> list[list[T]]:
    """Split items into groups by key, ordered by each key's first appearance."""
    return list(group_by(collection, iteratee).values())