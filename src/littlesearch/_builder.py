"""Index construction from (document id, text source) pairs."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from ._document import load_keywords
from ._errors import SourceUnavailable
from ._index import KeywordIndex
from ._loader import load_noise_words, read_document_list, read_noise_words
from ._normalizer import KeywordNormalizer

if TYPE_CHECKING:
    from collections.abc import Iterable

    from ._document import TextSource

logger = logging.getLogger(__name__)


def build_index(
    documents: Iterable[tuple[str, TextSource]],
    noise_words: Iterable[str] | None = None,
    *,
    skip_unreadable: bool = False,
) -> KeywordIndex:
    """Index every document and return the frozen index.

    Documents are processed one at a time: each is read completely into its
    own keyword table before that table is merged, so a read failure never
    leaves a partial document in the index.

    Args:
        documents: (document_id, source) pairs. A source is the document
            text, a path to a UTF-8 file, or an iterable of lines.
        noise_words: Words never indexed. If None, uses the bundled list.
        skip_unreadable: If True, an unreadable document is logged, recorded
            in ``index.skipped`` and left out. Otherwise its
            SourceUnavailable propagates and the build stops.

    Raises:
        SourceUnavailable: If the noise words cannot be read, or a document
            cannot be read and skip_unreadable is False.
        TypeError: If noise_words is a bare string.
    """
    if noise_words is None:
        noise_words = load_noise_words()
    elif isinstance(noise_words, str):
        raise TypeError(
            "noise_words must be an iterable of words, not a str; "
            "use read_noise_words() for a file"
        )
    try:
        normalizer = KeywordNormalizer(noise_words)
    except (OSError, UnicodeDecodeError) as e:
        raise SourceUnavailable("noise words", str(e)) from e
    index = KeywordIndex()

    for document_id, source in documents:
        try:
            table = load_keywords(document_id, source, normalizer)
        except SourceUnavailable as e:
            if not skip_unreadable:
                raise
            logger.warning("Skipping document %r: %s", document_id, e)
            index._record_skipped(document_id, e)
            continue
        index.merge(document_id, table)

    index.freeze()
    logger.info(
        "Built index: %d keywords from %d documents (%d skipped)",
        len(index), len(index.documents), len(index.skipped),
    )
    return index


def make_index(
    docs_file: Path | str,
    noise_words_file: Path | str | None = None,
    *,
    skip_unreadable: bool = False,
) -> KeywordIndex:
    """Build an index from a document-list file and a noise-word file.

    The list file holds whitespace-separated document names. Relative names
    are resolved against the list file's directory; the name as listed is
    the document id.

    Args:
        docs_file: Path to the document-list file.
        noise_words_file: Path to a whitespace-separated noise-word file.
            If None, uses the bundled list.
        skip_unreadable: Passed through to build_index.

    Raises:
        SourceUnavailable: If the list or noise-word file cannot be read,
            or a document cannot be read and skip_unreadable is False.
    """
    docs_file = Path(docs_file)
    noise_words = None
    if noise_words_file is not None:
        noise_words = read_noise_words(Path(noise_words_file))

    base = docs_file.parent
    documents = [(name, base / name) for name in read_document_list(docs_file)]
    return build_index(documents, noise_words, skip_unreadable=skip_unreadable)
