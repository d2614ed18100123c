"""KeywordIndex: keyword -> occurrence lists kept in descending frequency order."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping

from ._errors import DuplicateDocumentError, IndexFrozenError, SourceUnavailable
from ._search import top_five
from ._types import Occurrence

logger = logging.getLogger(__name__)


def insert_last_occurrence(
    occurrences: list[Occurrence], trace: list[int] | None = None
) -> None:
    """Move the last occurrence into place by binary search.

    occurrences[0:n-1] must already be in descending frequency order. The
    last element is reinserted before the first entry whose frequency is
    strictly lower, so it lands after every entry of equal frequency.

    Args:
        occurrences: List to reorder in place.
        trace: If given, each midpoint probed by the search is appended.
    """
    n = len(occurrences)
    if n < 2:
        return

    target = occurrences[-1].frequency
    low, high = 0, n - 2
    while low <= high:
        mid = (low + high) // 2
        if trace is not None:
            trace.append(mid)
        if occurrences[mid].frequency >= target:
            low = mid + 1
        else:
            high = mid - 1

    if low < n - 1:
        occurrences.insert(low, occurrences.pop())


class KeywordIndex:
    """Inverted index built one document at a time, then frozen for queries."""

    __slots__ = ("_lists", "_documents", "_merged", "_frozen", "_skipped")

    def __init__(self) -> None:
        self._lists: dict[str, list[Occurrence]] = {}
        self._documents: list[str] = []
        self._merged: set[str] = set()
        self._frozen = False
        self._skipped: list[tuple[str, SourceUnavailable]] = []

    # -- Construction --

    def merge(
        self,
        document_id: str,
        table: Mapping[str, int],
        *,
        trace: dict[str, list[int]] | None = None,
    ) -> None:
        """Fold one document's keyword counts into the index.

        Args:
            document_id: Identifier of the document the counts came from.
            table: keyword -> number of occurrences in the document.
            trace: If given, receives keyword -> binary-search midpoints
                for every keyword whose list needed a search.

        Raises:
            IndexFrozenError: If the index has been frozen.
            DuplicateDocumentError: If the document was already merged.
            ValueError: If any count is below 1. Nothing is merged then.
        """
        if self._frozen:
            raise IndexFrozenError(
                f"Cannot merge {document_id!r}: index is frozen"
            )
        if not table:
            return
        if document_id in self._merged:
            raise DuplicateDocumentError(
                f"Document {document_id!r} already merged"
            )

        # Validate everything before touching any list
        new = [(kw, Occurrence(document_id, count)) for kw, count in table.items()]

        for keyword, occ in new:
            occs = self._lists.get(keyword)
            if occs is None:
                self._lists[keyword] = [occ]
                continue
            occs.append(occ)
            if trace is None:
                insert_last_occurrence(occs)
            else:
                probes: list[int] = []
                insert_last_occurrence(occs, probes)
                trace[keyword] = probes

        self._documents.append(document_id)
        self._merged.add(document_id)
        logger.debug(
            "Merged document %r: %d keywords, index now %d keywords",
            document_id, len(new), len(self._lists),
        )

    def freeze(self) -> None:
        """End construction. Later merges raise IndexFrozenError."""
        self._frozen = True

    def _record_skipped(self, document_id: str, error: SourceUnavailable) -> None:
        self._skipped.append((document_id, error))

    # -- Read access --

    @property
    def frozen(self) -> bool:
        return self._frozen

    @property
    def documents(self) -> tuple[str, ...]:
        """Documents merged so far, in merge order."""
        return tuple(self._documents)

    @property
    def skipped(self) -> tuple[tuple[str, SourceUnavailable], ...]:
        """Documents dropped during the build because they were unreadable."""
        return tuple(self._skipped)

    def occurrences(self, keyword: str) -> tuple[Occurrence, ...]:
        """Occurrence list for ``keyword``, empty if it is not indexed."""
        return tuple(self._lists.get(keyword, ()))

    def get(
        self, keyword: str, default: tuple[Occurrence, ...] = ()
    ) -> tuple[Occurrence, ...]:
        occs = self._lists.get(keyword)
        if occs is None:
            return default
        return tuple(occs)

    def keywords(self) -> list[str]:
        return list(self._lists)

    def __getitem__(self, keyword: str) -> tuple[Occurrence, ...]:
        return tuple(self._lists[keyword])

    def __contains__(self, keyword: object) -> bool:
        return keyword in self._lists

    def __iter__(self) -> Iterator[str]:
        return iter(self._lists)

    def __len__(self) -> int:
        return len(self._lists)

    def __repr__(self) -> str:
        state = "frozen" if self._frozen else "building"
        return (
            f"KeywordIndex({len(self._lists)} keywords, "
            f"{len(self._documents)} documents, {state})"
        )

    def top_five(self, kw1: str, kw2: str) -> list[str]:
        """Documents containing kw1 or kw2, best first, at most five."""
        return top_five(self, kw1, kw2)
