"""Per-document keyword frequency tables."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING

from ._errors import SourceUnavailable

if TYPE_CHECKING:
    from ._normalizer import KeywordNormalizer

logger = logging.getLogger(__name__)

# Raw text, a path to a UTF-8 file, or an iterable of text lines.
TextSource = str | os.PathLike[str] | Iterable[str]


def _iter_lines(source: TextSource) -> Iterator[str]:
    if isinstance(source, str):
        yield source
    elif isinstance(source, os.PathLike):
        with open(source, encoding="utf-8") as f:
            yield from f
    else:
        yield from source


def load_keywords(
    document_id: str,
    source: TextSource,
    normalizer: KeywordNormalizer,
) -> dict[str, int]:
    """Scan one document and count its keywords.

    Every whitespace-delimited token is passed through ``normalizer``;
    accepted keywords are counted in a table owned by this call. The table
    is returned only once the whole source has been read.

    Raises:
        SourceUnavailable: If the source cannot be opened or read to the end.
    """
    counts: dict[str, int] = {}
    try:
        for line in _iter_lines(source):
            for token in line.split():
                keyword = normalizer.normalize(token)
                if keyword is not None:
                    counts[keyword] = counts.get(keyword, 0) + 1
    except (OSError, UnicodeDecodeError) as e:
        raise SourceUnavailable(document_id, str(e)) from e

    logger.debug(
        "Loaded %d distinct keywords from document %r", len(counts), document_id
    )
    return counts
