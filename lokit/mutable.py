"""In-place operations on mutable sequences."""

from __future__ import annotations

import random
from typing import MutableSequence, TypeVar

T = TypeVar("T")


def shuffle(collection: MutableSequence[T]) -> None:
    """Shuffle ``collection`` in place (Fisher-Yates)."""
    random.shuffle(collection)


def reverse(collection: MutableSequence[T]) -> None:
    """Reverse ``collection`` in place."""
    collection[:] = collection[::-1]


def fill(collection: MutableSequence[T], initial: T) -> None:
    """Set every element of ``collection`` to ``initial`` in place."""
    collection[:] = [initial] * len(collection)