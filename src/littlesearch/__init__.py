"""littlesearch: in-memory keyword index with two-keyword top-five search."""

from __future__ import annotations

from ._builder import build_index, make_index
from ._document import load_keywords
from ._errors import (
    DuplicateDocumentError,
    IndexFrozenError,
    LittleSearchChecksumError,
    LittleSearchError,
    LittleSearchVersionError,
    SourceUnavailable,
)
from ._index import KeywordIndex, insert_last_occurrence
from ._loader import load_noise_words, read_document_list, read_noise_words
from ._normalizer import TRAILING_PUNCTUATION, KeywordNormalizer, normalize_keyword
from ._search import DEFAULT_LIMIT, top_five
from ._types import Occurrence

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "build_index",
    "make_index",
    "top_five",
    "DEFAULT_LIMIT",
    "DuplicateDocumentError",
    "IndexFrozenError",
    "KeywordIndex",
    "KeywordNormalizer",
    "LittleSearchChecksumError",
    "LittleSearchError",
    "LittleSearchVersionError",
    "Occurrence",
    "SourceUnavailable",
    "TRAILING_PUNCTUATION",
    "insert_last_occurrence",
    "load_keywords",
    "load_noise_words",
    "normalize_keyword",
    "read_document_list",
    "read_noise_words",
]
