"""Hypothesis strategies for property-testing code that consumes xtlib types."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, get_args

from hypothesis import strategies as st

from xtlib._random import DEFAULT_CHARSET
from xtlib._set import Set


def sets(
    elements: st.SearchStrategy[Any] | None = None,
    *,
    min_size: int = 0,
    max_size: int | None = None,
    unique_by: Callable[[Any], Any] | None = None,
) -> st.SearchStrategy[Set[Any]]:
    """Strategy producing ``Set`` instances.

    Elements are drawn as a duplicate-free list. Hypothesis deduplicates by
    hashing; pass *unique_by* when *elements* produces unhashable values.
    *unique_by* must agree with ``==``: values it keeps apart but ``==``
    merges (``repr`` keeps ``1`` and ``1.0`` apart) shrink the Set, and
    draws that fall below *min_size* are filtered out.
    """
    if elements is None:
        elements = st.integers()
    if unique_by is not None:
        draws = st.lists(elements, min_size=min_size, max_size=max_size, unique_by=unique_by)
    else:
        draws = st.lists(elements, min_size=min_size, max_size=max_size, unique=True)
    result = draws.map(Set)
    if min_size:
        result = result.filter(lambda s: len(s) >= min_size)
    return result


def random_strings(
    *,
    charset: str = DEFAULT_CHARSET,
    min_size: int = 0,
    max_size: int | None = None,
) -> st.SearchStrategy[str]:
    return st.text(alphabet=charset, min_size=min_size, max_size=max_size)


def _set_strategy_for_type(tp: Any) -> st.SearchStrategy[Set[Any]]:
    args = get_args(tp)
    if args:
        return sets(st.from_type(args[0]), max_size=20)
    return sets(max_size=20)


def register_strategies() -> None:
    """Make ``st.from_type(Set)`` and ``st.from_type(Set[int])`` resolve."""
    st.register_type_strategy(Set, _set_strategy_for_type)
