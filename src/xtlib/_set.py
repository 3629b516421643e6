"""Ordered, deduplicating set over values that only need ``==``.

Elements are kept in a plain list and every lookup is a linear scan through
``xtlib._iterable``. That keeps insertion order as the iteration order and
admits unhashable elements, at O(n) per membership test.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any, Generic, TypeVar, overload

from xtlib._errors import NotFoundError
from xtlib._iterable import contains, index

T = TypeVar("T")
D = TypeVar("D")

_MISSING: Any = object()


class Set(Generic[T]):
    """An array-like collection that never holds two equal values.

    >>> s = Set()
    >>> s.add("hello")
    >>> s.add("hello")
    >>> s.items()
    ['hello']

    Equality is ``==`` throughout, including ``Set == Set``. A Set holding
    ``float("nan")`` is therefore not equal to itself.
    """

    __slots__ = ("_items",)

    def __init__(self, iterable: Iterable[T] = ()) -> None:
        self._items: list[T] = []
        for item in iterable:
            self.add(item)

    # ------------------------------------------------------------------
    # Single-set mutation and queries
    # ------------------------------------------------------------------

    def add(self, value: T) -> None:
        if not contains(self._items, value):
            self._items.append(value)

    def update(self, *iterables: Iterable[T]) -> None:
        for iterable in iterables:
            for item in iterable:
                self.add(item)

    def remove(self, value: T) -> None:
        """Delete *value*, raising ``NotFoundError`` if it is not in the set."""
        self._take(value)

    @overload
    def pop(self, value: T) -> T: ...

    @overload
    def pop(self, value: T, default: D) -> T | D: ...

    def pop(self, value: T, default: Any = _MISSING) -> Any:
        """Delete *value* and return the stored element equal to it.

        If nothing matches, *default* is returned when given; otherwise
        ``NotFoundError`` is raised.
        """
        try:
            return self._take(value)
        except NotFoundError:
            if default is _MISSING:
                raise
            return default

    def discard(self, value: T) -> None:
        i = index(self._items, value)
        if i != -1:
            del self._items[i]

    def clear(self) -> None:
        self._items = []

    def contains(self, value: T) -> bool:
        return contains(self._items, value)

    def items(self) -> list[T]:
        """Return a copy of the elements in insertion order."""
        return list(self._items)

    def copy(self) -> Set[T]:
        new = self._new()
        new._items = list(self._items)
        return new

    def _take(self, value: T) -> T:
        i = index(self._items, value)
        if i == -1:
            raise NotFoundError(value)
        return self._items.pop(i)

    def _new(self) -> Set[T]:
        return type(self)()

    # ------------------------------------------------------------------
    # Relational predicates
    # ------------------------------------------------------------------

    def is_disjoint(self, other: Iterable[T]) -> bool:
        other = _as_set(other)
        for item in self._items:
            if other.contains(item):
                return False
        return True

    def is_subset(self, other: Iterable[T]) -> bool:
        # NOTE: strict only by length. Sets of equal size are never subsets of
        # each other, so s.is_subset(s) is False. Element-wise equality is not
        # what decides strictness here; do not relax this to a <= test.
        other = _as_set(other)
        for item in self._items:
            if not other.contains(item):
                return False
        return len(self) != len(other)

    def is_superset(self, other: Iterable[T]) -> bool:
        # NOTE: same strict-by-length rule as is_subset.
        other = _as_set(other)
        for item in other._items:
            if not self.contains(item):
                return False
        return len(self) != len(other)

    # ------------------------------------------------------------------
    # Algebra. Receiver and arguments are never modified.
    # ------------------------------------------------------------------

    def union(self, *others: Iterable[T]) -> Set[T]:
        result = self._new()
        result.update(self._items, *others)
        return result

    def intersection(self, *others: Iterable[T]) -> Set[T]:
        result = self._new()
        # NOTE: with no other sets the result is empty, not a copy of self.
        # Returning self here would be a behaviour change.
        if not others:
            return result
        required = [_as_set(o) for o in others]
        for item in self._items:
            if all(o.contains(item) for o in required):
                result.add(item)
        return result

    def difference(self, *others: Iterable[T]) -> Set[T]:
        result = self._new()
        excluded = [_as_set(o) for o in others]
        for item in self._items:
            if not any(o.contains(item) for o in excluded):
                result.add(item)
        return result

    def symmetric_difference(self, other: Iterable[T]) -> Set[T]:
        other = _as_set(other)
        result = self._new()
        for item in self._items:
            if not other.contains(item):
                result.add(item)
        for item in other._items:
            if not self.contains(item):
                result.add(item)
        return result

    # ------------------------------------------------------------------
    # Python protocols
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self.items())

    def __contains__(self, value: object) -> bool:
        return contains(self._items, value)

    def __repr__(self) -> str:
        if not self._items:
            return f"{type(self).__name__}()"
        return f"{type(self).__name__}({self._items!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Set):
            return NotImplemented
        return len(self) == len(other) and all(other.contains(item) for item in self._items)

    __hash__ = None  # type: ignore[assignment]

    def __or__(self, other: object) -> Set[T]:
        if not isinstance(other, Set):
            return NotImplemented
        return self.union(other)

    def __and__(self, other: object) -> Set[T]:
        if not isinstance(other, Set):
            return NotImplemented
        return self.intersection(other)

    def __sub__(self, other: object) -> Set[T]:
        if not isinstance(other, Set):
            return NotImplemented
        return self.difference(other)

    def __xor__(self, other: object) -> Set[T]:
        if not isinstance(other, Set):
            return NotImplemented
        return self.symmetric_difference(other)


def _as_set(obj: Iterable[Any]) -> Set[Any]:
    if isinstance(obj, Set):
        return obj
    return Set(obj)
