"""Equality search over sequences.

Every helper compares with ``==`` only, so elements need neither hashing nor
ordering. ``value in seq`` is avoided because it short-circuits on identity,
which would treat ``float("nan")`` as present.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any


def contains(src: Iterable[Any], value: Any) -> bool:
    """Return True if some element of *src* equals *value*.

    >>> contains([0, 1, 2, 3, 4], 3)
    True
    """
    for item in src:
        if item == value:
            return True
    return False


def index(src: Iterable[Any], value: Any) -> int:
    """Return the position of the first element equal to *value*, or -1."""
    for i, item in enumerate(src):
        if item == value:
            return i
    return -1


def any_match(src: Iterable[Any], value: Any) -> bool:
    return contains(src, value)


def all_match(src: Iterable[Any], value: Any) -> bool:
    """True if every element equals *value*. An empty *src* matches vacuously."""
    for item in src:
        if item != value:
            return False
    return True
