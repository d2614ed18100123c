"""Two-keyword OR search over descending occurrence lists."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ._index import KeywordIndex
    from ._types import Occurrence

    IndexLike = KeywordIndex | Mapping[str, Sequence[Occurrence]]

DEFAULT_LIMIT = 5


def _lookup(index: IndexLike, keyword: str) -> Sequence[Occurrence]:
    occs = index.get(keyword.strip().lower())
    return occs if occs is not None else ()


def top_five(
    index: IndexLike, kw1: str, kw2: str, *, limit: int = DEFAULT_LIMIT
) -> list[str]:
    """Documents in which kw1 or kw2 occurs, highest frequency first.

    Both occurrence lists are walked like the merge step of merge sort.
    On equal frequencies kw1's document goes first. A document already in
    the result is skipped. Unknown keywords count as empty lists, so a
    query with no matches returns an empty list.

    Args:
        index: A KeywordIndex or any mapping of keyword to occurrence list.
        kw1: First keyword, wins frequency ties.
        kw2: Second keyword.
        limit: Maximum number of documents returned.
    """
    if limit < 1:
        raise ValueError(f"limit must be >= 1, got {limit}")

    first = _lookup(index, kw1)
    second = _lookup(index, kw2)

    result: list[str] = []
    seen: set[str] = set()
    i = j = 0
    while len(result) < limit and (i < len(first) or j < len(second)):
        if j >= len(second) or (
            i < len(first) and first[i].frequency >= second[j].frequency
        ):
            doc = first[i].document
            i += 1
        else:
            doc = second[j].document
            j += 1
        if doc not in seen:
            seen.add(doc)
            result.append(doc)

    return result
