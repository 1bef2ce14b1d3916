"""Presence and uniqueness checks over sequences."""

from __future__ import annotations

from typing import Any, Callable, Hashable, Optional, Sequence, TypeVar

T = TypeVar("T")


def is_present(value: Sequence[Any]) -> bool:
    """True for a non-empty sequence."""
    return len(value) > 0


def is_unique(value: Sequence[T], key: Optional[Callable[[T], Hashable]] = None) -> bool:
    """
    True if no two items share the same key.

    `key` works like the `key` argument of `sorted()`; by default items are
    compared directly. Keys must be hashable.

    Examples:
        is_unique(["a", "b", "c"])                         -> True
        is_unique([(1, 2), (1, 4)], key=lambda p: p[0])    -> False
    """
    seen = set()
    for item in value:
        k = key(item) if key else item
        if k in seen:
            return False
        seen.add(k)
    return True
