# lokit

Small helpers for everyday Python work, with no dependencies beyond the
standard library. They cover transforming and slicing sequences, simple
numeric aggregates, string case conversion, timing calls, retrying, saga-style
transactions, and debouncing or throttling callbacks.

## Installation

```
pip install lokit
```

## Modules

| Module            | What it offers |
|-------------------|----------------|
| `lokit.sequence`  | `select`, `map_items`, `uniq_map`, `filter_map`, `flat_map`, `reduce`, `reduce_right`, `for_each`, `for_each_while`, `times`, `uniq`, `uniq_by`, `group_by`, `group_by_map`, `chunk`, `partition_by`, `flatten`, `interleave`, `fill`, `repeat`, `repeat_by`, `key_by`, `associate`, `slice_to_map`, `filter_slice_to_map`, `keyify` |
| `lokit.subsets`   | `drop`, `drop_right`, `drop_while`, `drop_right_while`, `drop_by_index`, `reject`, `reject_map`, `filter_reject`, `count`, `count_by`, `count_values`, `count_values_by`, `subset`, `slice_of`, `replace`, `replace_all`, `compact`, `is_sorted`, `is_sorted_by_key`, `splice` |
| `lokit.numeric`   | `int_range`, `range_from`, `range_with_steps`, `clamp`, `sum_of`, `sum_by`, `product`, `product_by`, `mean`, `mean_by` |
| `lokit.text`      | `words`, `pascal_case`, `camel_case`, `kebab_case`, `snake_case`, `capitalize`, `substring`, `chunk_string`, `rune_length`, `ellipsis`, `random_string`, and character-set constants such as `LOWER_CASE_LETTERS_CHARSET` and `ALPHANUMERIC_CHARSET` |
| `lokit.timing`    | `duration` and `timed`, measuring a call in seconds |
| `lokit.mutable`   | in-place `shuffle`, `reverse` and `fill` |
| `lokit.parallel`  | `map_items`, `for_each`, `times`, `group_by`, `partition_by` with callbacks run on threads; results keep the input order |
| `lokit.retry`     | `attempt`, `attempt_with_delay`, `attempt_while`, `attempt_while_with_delay`, `Transaction`, `Debounce`, `DebounceBy`, `Throttle`, `ThrottleBy` |

Functions that take an `iteratee`, `predicate` or `callback` in `sequence`
and `subsets` mostly call it with `(item, index)`; the `*_by` helpers and the
drop/count predicates call it with the item alone.

## Examples

```python
from lokit.sequence import chunk, group_by, uniq
from lokit.subsets import drop, splice
from lokit.text import snake_case, camel_case

chunk([0, 1, 2, 3, 4], 2)            # [[0, 1], [2, 3], [4]]
group_by(range(6), lambda i: i % 3)  # {0: [0, 3], 1: [1, 4], 2: [2, 5]}
uniq([1, 2, 2, 1])                   # [1, 2]
drop([0, 1, 2, 3, 4], 2)             # [2, 3, 4]
splice(["a", "b"], 1, "x")           # ['a', 'x', 'b']

snake_case("HTTPStatusCode")         # 'http_status_code'
camel_case("Hello world!")           # 'helloWorld'
```

Invalid arguments, such as a chunk size of 0 or an empty charset for
`random_string`, raise `ValueError`.

### Retrying

An attempt fails when the callable raises. `attempt` returns the number of
calls made; the `*_with_delay` variants sleep between calls and also return
the elapsed seconds. A `max_iteration` below 1 retries until success. When
every attempt fails, `AttemptError` is raised, carrying `attempts`, the last
`error` and `elapsed`.

```python
from lokit.retry import attempt, AttemptError

def flaky(index):
    if index < 2:
        raise ConnectionError("not yet")

attempt(5, flaky)   # 3

try:
    attempt(2, flaky)
except AttemptError as exc:
    exc.attempts    # 2
```

With `attempt_while` and `attempt_while_with_delay` the callable may raise
`StopAttempts()` to stop at once counting as a success, or
`StopAttempts(error)` to stop at once with `AttemptError`.

### Transactions

`Transaction` chains steps, each with a rollback. If a step raises, the
rollbacks of the completed steps run in reverse order and `TransactionError`
is raised with the rolled-back `state` and the original `error`. A step that
raises `TransactionStepError(state)` fails while reporting the state it
reached, so that state is what the rollbacks start from.

```python
from lokit.retry import Transaction

tx = (
    Transaction()
    .then(lambda s: s + 100, lambda s: s - 100)
    .then(lambda s: s + 21, lambda s: s - 21)
)
tx.process(21)  # 142
```

### Debouncing and throttling

Callbacks of `Debounce` and `DebounceBy` run on a timer thread once `wait`
seconds pass without a new call. `DebounceBy` keeps a separate timer per key
and passes each callback the key and the number of calls it collected.

```python
from lokit.retry import Debounce, Throttle

save = Debounce(0.5, lambda: print("saved"))
save()          # fires once, 0.5 s after the last call
save.cancel()   # drops the pending call and ignores later ones

ping = Throttle(1.0, lambda: print("ping"), count=1)
ping()          # runs the callback at most `count` times per interval
ping.reset()    # starts a new interval
```

`ThrottleBy` does the same with a separate count for each key passed in.

## Running the tests

```
pip install -e ".[test]"
pytest
```