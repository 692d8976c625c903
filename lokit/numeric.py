"""Numeric helpers: ranges, clamping, sums, products and means."""

from __future__ import annotations

import operator
from functools import reduce
from typing import Callable, Iterable, Sequence, TypeVar

T = TypeVar("T")
N = TypeVar("N", int, float, complex)


def int_range(element_num: int) -> list[int]:
    """Return ``abs(element_num)`` integers from 0, counting down when negative."""
    step = -1 if element_num < 0 else 1
    return list(range(0, element_num, step))


def range_from(start: N, element_num: int) -> list[N]:
    """Return ``abs(element_num)`` numbers from ``start``, counting down when negative."""
    step = -1 if element_num < 0 else 1
    return [start + index * step for index in range(abs(element_num))]


def range_with_steps(start: N, end: N, step: N) -> list[N]:
    """Return numbers from ``start`` up to, but not including, ``end`` by ``step``.

    A zero step, or a step pointing away from ``end``, gives an empty list.
    """
    result: list[N] = []
    if start == end or step == 0:
        return result
    if start < end:
        if step < 0:
            return result
        value = start
        while value < end:
            result.append(value)
            value += step
        return result
    if step > 0:
        return result
    value = start
    while value > end:
        result.append(value)
        value += step
    return result


def clamp(value: T, minimum: T, maximum: T) -> T:
    """Clamp ``value`` within the inclusive bounds."""
    if value < minimum:
        return minimum
    if value > maximum:
        return maximum
    return value


def sum_of(collection: Iterable[N]) -> N:
    """Sum the values; an empty collection sums to 0."""
    return sum(collection, 0)


def sum_by(collection: Iterable[T], iteratee: Callable[[T], N]) -> N:
    """Sum the values that ``iteratee`` returns for each item."""
    return sum((iteratee(item) for item in collection), 0)


def product(collection: Iterable[N] | None) -> N:
    """Multiply the values; an empty or missing collection gives 1."""
    if not collection:
        return 1
    return reduce(operator.mul, collection, 1)


def product_by(collection: Iterable[T] | None, iteratee: Callable[[T], N]) -> N:
    """Multiply the values that ``iteratee`` returns for each item."""
    if not collection:
        return 1
    return reduce(operator.mul, (iteratee(item) for item in collection), 1)


def _divide(total: N, count: int) -> N:
    if isinstance(total, int):
        quotient = abs(total) // count
        return -quotient if total < 0 else quotient
    return total / count


def mean(collection: Sequence[N]) -> N:
    """Mean of the values; integers divide with truncation toward zero."""
    if not collection:
        return 0
    return _divide(sum_of(collection), len(collection))


def mean_by(collection: Sequence[T], iteratee: Callable[[T], N]) -> N:
    """Mean of the values that ``iteratee`` returns for each item."""
    if not collection:
        return 0
    return _divide(sum_by(collection, iteratee), len(collection))