"""Data structures for littlesearch."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class Occurrence:
    document: str   # document identifier
    frequency: int  # times the keyword appears in document, >= 1

    def __post_init__(self) -> None:
        if self.frequency < 1:
            raise ValueError(
                f"frequency must be >= 1, got {self.frequency} "
                f"for document {self.document!r}"
            )

    def __str__(self) -> str:
        return f"({self.document},{self.frequency})"
