"""Helpers for lists of strings used in policy rules."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def array_equals(a: Sequence[str], b: Sequence[str]) -> bool:
    """Return True if both sequences hold the same elements, ignoring order."""
    if len(a) != len(b):
        return False
    return sorted(a) == sorted(b)


def remove_duplicates(items: Iterable[str]) -> list[str]:
    """Return the items with repeats dropped, keeping first occurrences in order."""
    return list(dict.fromkeys(items))


def array_to_string(items: Iterable[str]) -> str:
    """Join the items with ", "."""
    return ", ".join(items)


def join_slice(first: str, items: Iterable[str]) -> list[str]:
    """Return a new list with ``first`` followed by the items."""
    return [first, *items]


def set_subtract(a: Iterable[str], b: Iterable[str]) -> list[str]:
    """Return the elements of ``a`` that are not in ``b``, in their original order."""
    excluded = set(b)
    return [item for item in a if item not in excluded]