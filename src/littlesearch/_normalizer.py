"""Keyword normalization: trailing punctuation strip, alphabetic and noise-word checks."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

TRAILING_PUNCTUATION = ".,?:;!"

_KEYWORD_RE = re.compile(r"[a-z]+")


class KeywordNormalizer:
    """Turns raw tokens into canonical keywords, or rejects them.

    A keyword is a token that, once trimmed, lowercased and stripped of
    trailing punctuation, consists only of the letters a-z and is not a
    noise word. Rejection is reported as ``None``.
    """

    __slots__ = ("_noise_words",)

    def __init__(self, noise_words: Iterable[str] = ()) -> None:
        self._noise_words = frozenset(w.strip().lower() for w in noise_words)

    @property
    def noise_words(self) -> frozenset[str]:
        return self._noise_words

    def is_noise_word(self, word: str) -> bool:
        return word.strip().lower() in self._noise_words

    def normalize(self, raw_token: str) -> str | None:
        word = raw_token.strip().lower().rstrip(TRAILING_PUNCTUATION)

        # Leading or embedded punctuation, digits and the empty remainder
        # all fail the full match.
        if not _KEYWORD_RE.fullmatch(word):
            return None
        if word in self._noise_words:
            return None
        return word

    __call__ = normalize


def normalize_keyword(
    raw_token: str, noise_words: Iterable[str] = ()
) -> str | None:
    """One-off normalization without building a reusable normalizer."""
    return KeywordNormalizer(noise_words).normalize(raw_token)
