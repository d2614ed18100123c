"""littlesearch error types."""


class LittleSearchError(Exception):
    """Base error for all littlesearch failures."""


class SourceUnavailable(LittleSearchError):
    """A document or noise-word source could not be read."""

    def __init__(self, source: str, reason: str = "") -> None:
        self.source = source
        msg = f"Cannot read source {source!r}"
        if reason:
            msg += f": {reason}"
        super().__init__(msg)


class IndexFrozenError(LittleSearchError):
    """Attempt to merge into an index that has been frozen."""


class DuplicateDocumentError(LittleSearchError):
    """A document was merged into the same index twice."""


class LittleSearchVersionError(LittleSearchError):
    """Manifest version mismatch."""


class LittleSearchChecksumError(LittleSearchError):
    """File checksum verification failed."""
