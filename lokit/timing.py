"""Measure how long a callable takes to run."""

from __future__ import annotations

import time
from typing import Callable, TypeVar

R = TypeVar("R")


def duration(callback: Callable[[], object]) -> float:
    """Run ``callback`` and return the elapsed time in seconds."""
    start = time.perf_counter()
    callback()
    return time.perf_counter() - start


def timed(callback: Callable[[], R]) -> tuple[R, float]:
    """Run ``callback`` and return its result with the elapsed time in seconds."""
    start = time.perf_counter()
    result = callback()
    return result, time.perf_counter() - start