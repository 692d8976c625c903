"""Retrying, debouncing, throttling and saga-style transactions."""

from __future__ import annotations

import itertools
import threading
import time
from dataclasses import dataclass, field
from typing import Any, Callable, Generic, Hashable, Iterator, TypeVar

S = TypeVar("S")
K = TypeVar("K", bound=Hashable)


class AttemptError(Exception):
    """Raised when every allowed attempt failed, or a callable asked to stop on an error."""

    def __init__(
        self, attempts: int, error: BaseException, elapsed: float | None = None
    ) -> None:
        super().__init__(f"failed after {attempts} attempt(s): {error!r}")
        self.attempts = attempts
        self.error = error
        self.elapsed = elapsed


class StopAttempts(Exception):
    """Raised by an attempted callable to stop retrying at once.

    With an ``error`` the attempt fails with that error; without one it
    counts as a success.
    """

    def __init__(self, error: BaseException | None = None) -> None:
        super().__init__(error)
        self.error = error


def _indexes(max_iteration: int) -> Iterator[int]:
    return itertools.count() if max_iteration <= 0 else iter(range(max_iteration))


def _run(
    max_iteration: int,
    delay: float,
    invoke: Callable[[int, float], Any],
    stoppable: bool,
) -> tuple[int, float]:
    start = time.monotonic()
    last_error: BaseException | None = None

    def elapsed() -> float:
        return time.monotonic() - start

    for index in _indexes(max_iteration):
        try:
            invoke(index, elapsed())
        except StopAttempts as stop:
            if not stoppable:
                raise
            if stop.error is None:
                return index + 1, elapsed()
            raise AttemptError(index + 1, stop.error, elapsed()) from stop.error
        except Exception as exc:
            last_error = exc
        else:
            return index + 1, elapsed()

        if delay > 0 and (max_iteration <= 0 or index + 1 < max_iteration):
            time.sleep(delay)

    assert last_error is not None
    raise AttemptError(max_iteration, last_error, elapsed()) from last_error


def attempt(max_iteration: int, func: Callable[[int], Any]) -> int:
    """Call ``func(index)`` until it returns without raising.

    Returns the number of calls made. A ``max_iteration`` below 1 retries
    forever; otherwise :class:`AttemptError` is raised after the last failure.
    """
    attempts, _ = _run(max_iteration, 0.0, lambda index, _: func(index), False)
    return attempts


def attempt_with_delay(
    max_iteration: int, delay: float, func: Callable[[int, float], Any]
) -> tuple[int, float]:
    """Like :func:`attempt`, sleeping ``delay`` seconds between calls.

    ``func`` receives the index and the seconds elapsed so far; returns the
    number of calls and the total elapsed seconds.
    """
    return _run(max_iteration, delay, func, False)


def attempt_while(max_iteration: int, func: Callable[[int], Any]) -> int:
    """Like :func:`attempt`, but ``func`` may raise :class:`StopAttempts` to stop at once."""
    attempts, _ = _run(max_iteration, 0.0, lambda index, _: func(index), True)
    return attempts


def attempt_while_with_delay(
    max_iteration: int, delay: float, func: Callable[[int, float], Any]
) -> tuple[int, float]:
    """Like :func:`attempt_with_delay`, honouring :class:`StopAttempts`."""
    return _run(max_iteration, delay, func, True)


class Debounce:
    """Call the callbacks once ``wait`` seconds have passed since the last call."""

    def __init__(self, wait: float, *args: Callable[[], Any]) -> None:
        self._wait = wait
        self._callbacks = args
        self._lock = threading.Lock()
        self._timer: threading.Timer | None = None
        self._done = False

    def _fire(self) -> None:
        for callback in self._callbacks:
            callback()

    def __call__(self) -> None:
        with self._lock:
            if self._done:
                return
            if self._timer is not None:
                self._timer.cancel()
            self._timer = threading.Timer(self._wait, self._fire)
            self._timer.daemon = True
            self._timer.start()

    def cancel(self) -> None:
        """Drop any pending call and ignore all later ones."""
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None
            self._done = True


@dataclass
class _Pending:
    lock: threading.Lock = field(default_factory=threading.Lock)
    timer: threading.Timer | None = None
    count: int = 0


class DebounceBy(Generic[K]):
    """Debounce separately for each key; callbacks get the key and the call count."""

    def __init__(self, wait: float, *args: Callable[[K, int], Any]) -> None:
        self._wait = wait
        self._callbacks = args
        self._lock = threading.Lock()
        self._items: dict[K, _Pending] = {}

    def _fire(self, key: K, item: _Pending) -> None:
        with item.lock:
            calls = item.count
            item.count = 0
        for callback in self._callbacks:
            callback(key, calls)

    def __call__(self, key: K) -> None:
        with self._lock:
            item = self._items.get(key)
            if item is None:
                item = self._items[key] = _Pending()
        with item.lock:
            item.count += 1
            if item.timer is not None:
                item.timer.cancel()
            item.timer = threading.Timer(self._wait, self._fire, (key, item))
            item.timer.daemon = True
            item.timer.start()

    def cancel(self, key: K) -> None:
        """Drop the pending call for ``key`` and forget its count."""
        with self._lock:
            item = self._items.pop(key, None)
            if item is None:
                return
            with item.lock:
                if item.timer is not None:
                    item.timer.cancel()
                    item.timer = None


class TransactionStepError(Exception):
    """Raised by a transaction step to fail while reporting the state it reached."""

    def __init__(self, state: Any) -> None:
        super().__init__(state)
        self.state = state


class TransactionError(Exception):
    """Raised when a transaction step failed; ``state`` is the rolled-back state."""

    def __init__(self, state: Any, error: BaseException) -> None:
        super().__init__(f"transaction failed: {error!r}")
        self.state = state
        self.error = error


class Transaction(Generic[S]):
    """A chain of steps, each with a compensating rollback (saga pattern)."""

    def __init__(self) -> None:
        self._steps: list[tuple[Callable[[S], S], Callable[[S], S]]] = []

    def then(
        self, execute: Callable[[S], S], on_rollback: Callable[[S], S]
    ) -> Transaction[S]:
        """Append a step and return the same transaction."""
        self._steps.append((execute, on_rollback))
        return self

    def process(self, state: S) -> S:
        """Run the steps in order and return the final state.

        When a step raises, the rollbacks of the steps that completed run in
        reverse order and :class:`TransactionError` is raised.
        """
        done = 0
        error: BaseException | None = None
        for execute, _ in self._steps:
            try:
                state = execute(state)
            except TransactionStepError as exc:
                state = exc.state
                error = exc.__cause__ or exc
                break
            except Exception as exc:
                error = exc
                break
            done += 1

        if error is None:
            return state

        for _, on_rollback in reversed(self._steps[:done]):
            state = on_rollback(state)
        raise TransactionError(state, error) from error


class ThrottleBy(Generic[K]):
    """Call the callbacks at most ``count`` times per key in every interval."""

    def __init__(
        self, interval: float, *args: Callable[[K], Any], count: int = 1
    ) -> None:
        self._interval = interval
        self._callbacks = args
        self._limit = count if count > 0 else 1
        self._lock = threading.Lock()
        self._timer: threading.Timer | None = None
        self._counts: dict[K, int] = {}

    def __call__(self, key: K) -> None:
        with self._lock:
            used = self._counts.get(key, 0)
            if used < self._limit:
                self._counts[key] = used + 1
                for callback in self._callbacks:
                    callback(key)
            if self._timer is None:
                self._timer = threading.Timer(self._interval, self.reset)
                self._timer.daemon = True
                self._timer.start()

    def reset(self) -> None:
        """Start a new interval, clearing every key's count."""
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self._counts = {}
            self._timer = None


class Throttle:
    """Call the callbacks at most ``count`` times in every interval."""

    def __init__(
        self, interval: float, *args: Callable[[], Any], count: int = 1
    ) -> None:
        self._throttle: ThrottleBy[None] = ThrottleBy(
            interval,
            *((lambda _key, callback=callback: callback()) for callback in args),
            count=count,
        )

    def __call__(self) -> None:
        self._throttle(None)

    def reset(self) -> None:
        """Start a new interval, clearing the count."""
        self._throttle.reset()