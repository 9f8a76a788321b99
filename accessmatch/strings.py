"""String helpers for model text, matchers and policy lines."""

from __future__ import annotations

import re
import string
from collections.abc import Iterable, Mapping

WHITESPACE = string.whitespace

_ASSERTION_WORD = re.compile(r"[a-zA-Z0-9. ]+")
_EVAL_CALL = re.compile(r"\beval\(([^)]*)\)", re.IGNORECASE)


def ends_with(base: str, suffix: str) -> bool:
    """Return True if ``base`` ends with ``suffix``."""
    return base.endswith(suffix)


def escape_assertion(s: str) -> str:
    """Replace the first dot of each identifier run with an underscore.

    Matcher and effect expressions refer to fields as ``r.sub``; the
    expression evaluator cannot handle dotted names, so they become ``r_sub``.
    """
    return _ASSERTION_WORD.sub(lambda m: m.group(0).replace(".", "_", 1), s)


def has_eval(s: str) -> bool:
    """Return True if the matcher calls ``eval(...)``."""
    return _EVAL_CALL.search(s) is not None


def replace_eval_with_map(src: str, sets: Mapping[str, str]) -> str:
    """Replace each ``eval(name)`` whose name is in ``sets`` with its value.

    Calls naming an unknown key are left as they are.
    """

    def substitute(match: re.Match[str]) -> str:
        key = match.group(1)
        return sets[key] if key in sets else match.group(0)

    return _EVAL_CALL.sub(substitute, src)


def get_eval_value(s: str) -> list[str]:
    """Return the arguments of every ``eval(...)`` call, in order."""
    return _EVAL_CALL.findall(s)


def find_all_occurrences(data: str, to_search: str) -> list[int]:
    """Return the start positions of non-overlapping occurrences of ``to_search``."""
    if not to_search:
        raise ValueError("search string must not be empty")
    positions = []
    pos = data.find(to_search)
    while pos != -1:
        positions.append(pos)
        pos = data.find(to_search, pos + len(to_search))
    return positions


def join(items: Iterable[str], sep: str = " ") -> str:
    """Join the items with ``sep``."""
    return sep.join(items)


def remove_comments(s: str) -> str:
    """Drop everything from the first ``#`` on and trim what is left.

    Text without a ``#`` is returned unchanged.
    """
    pos = s.find("#")
    if pos == -1:
        return s
    return trim(s[:pos])


def split(s: str, sep: str, limit: int = 0) -> list[str]:
    """Split ``s`` on ``sep`` into at most ``limit`` pieces.

    A ``limit`` of zero or less means no limit.
    """
    if not sep:
        raise ValueError("separator must not be empty")
    if limit <= 0:
        return s.split(sep)
    return s.split(sep, limit - 1)


def ltrim(s: str, chars: str = WHITESPACE) -> str:
    """Strip the given characters from the start of ``s``."""
    return s.lstrip(chars)


def rtrim(s: str, chars: str = WHITESPACE) -> str:
    """Strip the given characters from the end of ``s``."""
    return s.rstrip(chars)


def trim(s: str, chars: str = WHITESPACE) -> str:
    """Strip the given characters from both ends of ``s``."""
    return ltrim(rtrim(s, chars), chars)