# accessmatch

Small building blocks for tools that read and evaluate access-control
models. It provides helpers for matcher expressions that contain `eval(...)`,
string utilities for reading model text, helpers for lists of strings, a
periodic ticker and a shared exception hierarchy.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Strings and model text

`accessmatch.strings`:

```python
from accessmatch.strings import (
    split, join, trim, ltrim, rtrim, ends_with, find_all_occurrences,
    remove_comments, escape_assertion,
    has_eval, get_eval_value, replace_eval_with_map,
)

split("a, b, c", ", ", 2)                 # ["a", "b, c"]
split("a, b, c", ", ")                    # ["a", "b", "c"]  (limit <= 0 means no limit)
join(["a", "b"])                          # "a b"  (default separator is a space)
trim("  x \n")                            # "x"
ends_with("policy.csv", ".csv")           # True
find_all_occurrences("abcabc", "bc")      # [1, 4]

remove_comments("p = sub, obj  # note")   # "p = sub, obj"
escape_assertion("r.sub == p.sub")        # "r_sub == p_sub"

has_eval("eval(p.sub_rule) && r.act == p.act")  # True
get_eval_value("eval(a) || eval(b)")            # ["a", "b"]
replace_eval_with_map("eval(a) || eval(b)", {"a": "x == 1"})
# "x == 1 || eval(b)"
```

`split` and `find_all_occurrences` raise `ValueError` when given an empty
separator or search string. `ltrim`, `rtrim` and `trim` strip whitespace by
default, or the characters passed as `chars`. Matching of `eval(` is
case-insensitive.

## Lists of strings

`accessmatch.arrays`:

```python
from accessmatch.arrays import (
    array_equals, remove_duplicates, array_to_string, join_slice, set_subtract,
)

array_equals(["a", "b"], ["b", "a"])      # True  (order is ignored)
remove_duplicates(["a", "b", "a"])        # ["a", "b"]
array_to_string(["a", "b"])               # "a, b"
join_slice("x", ["a", "b"])               # ["x", "a", "b"]
set_subtract(["a", "b", "c"], ["b"])      # ["a", "c"]
```

## Ticker

`accessmatch.ticker.Ticker(on_tick, interval)` calls `on_tick` once per
`interval` (seconds, or a `datetime.timedelta`) from a background thread;
each call runs in its own thread. `start()` does nothing if it is already
running; `stop()` waits for the loop and any running callbacks to finish.
The `running` and `interval` properties report its state. It also works as
a context manager:

```python
from accessmatch.ticker import Ticker

with Ticker(reload_policy, 5.0):
    serve_requests()
```

## Errors

`accessmatch.errors` defines `CasbinError` and these subclasses:
`CasbinAdapterError`, `CasbinEnforcerError` (also a `RuntimeError`),
`CasbinRBACError`, `IllegalArgumentError`, `MissingRequiredSectionsError`
and `ParserError` (all also `ValueError`), `CasbinIOError` (also an
`OSError`) and `UnsupportedOperationError` (also a `NotImplementedError`).

## What this package does not do

It does not evaluate policies or match requests itself. There are no
RESTful key-pattern matchers, no regular-expression or IP/CIDR matching
functions, no model or policy loading, no role manager and no enforcer.
It offers only the helpers listed above.