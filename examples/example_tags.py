"""Tag bookkeeping: merge, compare and diff tag lists with ``xtlib.Set``.

Tags here are dicts (unhashable), which a builtin ``set`` cannot hold.
"""

from __future__ import annotations

from xtlib import NotFoundError, Set


# ---------------------------------------------------------------------------
# merging
# ---------------------------------------------------------------------------

def merge_tags(*groups: list[dict[str, str]]) -> list[dict[str, str]]:
    """All tags across groups, first occurrence wins, original order kept."""
    if not groups:
        return []
    first, *rest = (Set(g) for g in groups)
    return first.union(*rest).items()


def common_tags(*groups: list[dict[str, str]]) -> list[dict[str, str]]:
    """Tags present in every group, in the first group's order."""
    if len(groups) < 2:
        return list(groups[0]) if groups else []
    first, *rest = (Set(g) for g in groups)
    return first.intersection(*rest).items()


# ---------------------------------------------------------------------------
# diffing
# ---------------------------------------------------------------------------

def tag_changes(before: list[dict[str, str]], after: list[dict[str, str]]) -> dict[str, list[dict[str, str]]]:
    old, new = Set(before), Set(after)
    return {
        "added": new.difference(old).items(),
        "removed": old.difference(new).items(),
        "changed": old.symmetric_difference(new).items(),
    }


def untag(tags: list[dict[str, str]], tag: dict[str, str]) -> tuple[list[dict[str, str]], bool]:
    s = Set(tags)
    try:
        s.remove(tag)
    except NotFoundError:
        return s.items(), False
    return s.items(), True
