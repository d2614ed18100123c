"""Noise-word and document-list loading, manifest validation, SHA-256 checks."""

from __future__ import annotations

import functools
import hashlib
import json
import logging
from importlib import resources
from pathlib import Path
from typing import TYPE_CHECKING, Any

import msgpack

from ._document import _iter_lines
from ._errors import (
    LittleSearchChecksumError,
    LittleSearchError,
    LittleSearchVersionError,
    SourceUnavailable,
)

if TYPE_CHECKING:
    from collections.abc import Iterable

logger = logging.getLogger(__name__)

_EXPECTED_VERSION = "1.0"

_NOISE_WORDS_FILE = "noise_words.bin"


def _default_data_dir() -> Path:
    return Path(str(resources.files("littlesearch") / "data"))


def _sha256(path: Path) -> str:
    h = hashlib.sha256()
    with open(path, "rb") as f:
        for chunk in iter(lambda: f.read(65536), b""):
            h.update(chunk)
    return h.hexdigest()


def _read_manifest(data_dir: Path) -> dict[str, Any]:
    manifest_path = data_dir / "manifest.json"
    if not manifest_path.exists():
        raise LittleSearchError(f"manifest.json not found in {data_dir}")
    with open(manifest_path) as f:
        return json.load(f)


def _validate_manifest(manifest: dict[str, Any], data_dir: Path) -> None:
    version = manifest.get("version")
    if version != _EXPECTED_VERSION:
        raise LittleSearchVersionError(
            f"Expected data version {_EXPECTED_VERSION!r}, got {version!r}"
        )
    filepath = data_dir / _NOISE_WORDS_FILE
    if not filepath.exists():
        raise LittleSearchError(f"Missing data file: {filepath}")
    expected = manifest.get("files", {}).get(_NOISE_WORDS_FILE)
    if expected is None:
        raise LittleSearchError(
            f"No checksum in manifest for {_NOISE_WORDS_FILE}"
        )
    actual = _sha256(filepath)
    if actual != expected:
        raise LittleSearchChecksumError(
            f"Checksum mismatch for {_NOISE_WORDS_FILE}: "
            f"expected {expected[:16]}..., got {actual[:16]}..."
        )


def _load_msgpack(path: Path, **kwargs: Any) -> Any:
    with open(path, "rb") as f:
        return msgpack.unpackb(f.read(), raw=False, **kwargs)


@functools.lru_cache(maxsize=8)
def _load_bundled(data_dir: Path) -> frozenset[str]:
    manifest = _read_manifest(data_dir)
    _validate_manifest(manifest, data_dir)

    raw = _load_msgpack(data_dir / _NOISE_WORDS_FILE)
    if not isinstance(raw, list) or not all(isinstance(w, str) for w in raw):
        raise LittleSearchError(
            f"{_NOISE_WORDS_FILE} in {data_dir} is not a list of strings"
        )
    words = frozenset(w.lower() for w in raw)
    logger.debug("Loaded %d noise words from %s", len(words), data_dir)
    return words


def load_noise_words(data_dir: Path | str | None = None) -> frozenset[str]:
    """Load and validate the noise-word list shipped as package data.

    Args:
        data_dir: Directory holding manifest.json and noise_words.bin.
            If None, uses bundled package data.
    """
    if data_dir is None:
        data_dir = _default_data_dir()
    return _load_bundled(Path(data_dir).resolve())


def read_noise_words(source: Path | str | Iterable[str]) -> frozenset[str]:
    """Read whitespace-separated noise words from a file or an iterable of lines.

    A str is taken as a path, the same as in read_document_list.

    Raises:
        SourceUnavailable: If the source cannot be read.
    """
    if isinstance(source, str):
        source = Path(source)
    try:
        words = frozenset(
            w.lower() for line in _iter_lines(source) for w in line.split()
        )
    except (OSError, UnicodeDecodeError) as e:
        raise SourceUnavailable(str(source), str(e)) from e
    return words


def read_document_list(path: Path | str) -> list[str]:
    """Read whitespace-separated document names, in listed order.

    Raises:
        SourceUnavailable: If the list file cannot be read.
    """
    path = Path(path)
    try:
        return [name for line in _iter_lines(path) for name in line.split()]
    except (OSError, UnicodeDecodeError) as e:
        raise SourceUnavailable(str(path), str(e)) from e
