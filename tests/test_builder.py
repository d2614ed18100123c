"""Tests for index construction and the file-based make_index entry point."""

import logging

import pytest

import littlesearch
from littlesearch import (
    IndexFrozenError,
    Occurrence,
    SourceUnavailable,
    build_index,
    make_index,
)


def test_cat_scenario(cat_index):
    assert cat_index.occurrences("cat") == (Occurrence("D2", 2), Occurrence("D1", 1))
    assert "the" not in cat_index
    assert cat_index.occurrences("sat") == (Occurrence("D1", 1),)
    assert cat_index.occurrences("won") == (Occurrence("D2", 1),)


def test_article_a_is_a_keyword_without_bundled_list(cat_index):
    """Only the supplied noise words are excluded."""
    assert cat_index.occurrences("a") == (Occurrence("D2", 1),)


def test_build_returns_frozen(cat_index):
    assert cat_index.frozen
    with pytest.raises(IndexFrozenError):
        cat_index.merge("D3", {"cat": 1})


def test_cat_scenario_query():
    index = build_index(
        [
            ("D1", "The cat sat."),
            ("D2", "A cat ran, the cat won!"),
            ("D3", "Dog eat dog."),
        ],
        {"the", "is"},
    )
    assert index.top_five("cat", "dog") == ["D2", "D3", "D1"]
    assert index.top_five("cow", "eel") == []


def test_bundled_noise_words_by_default():
    index = build_index([("D1", "The cat and the dog")])
    assert sorted(index) == ["cat", "dog"]


def test_documents_recorded_in_order(cat_index):
    assert cat_index.documents == ("D1", "D2")
    assert cat_index.skipped == ()


def test_unreadable_document_propagates(tmp_path):
    with pytest.raises(SourceUnavailable) as excinfo:
        build_index(
            [("D1", "cat"), ("missing.txt", tmp_path / "missing.txt")],
            {"the"},
        )
    assert excinfo.value.source == "missing.txt"


def test_unreadable_document_skipped(tmp_path, caplog):
    def failing():
        yield "dog dog dog\n"
        raise OSError("read failed")

    with caplog.at_level(logging.WARNING, logger="littlesearch"):
        index = build_index(
            [
                ("D1", "cat"),
                ("D2", failing()),
                ("D3", tmp_path / "missing.txt"),
                ("D4", "cat cat"),
            ],
            {"the"},
            skip_unreadable=True,
        )
    assert index.documents == ("D1", "D4")
    assert [doc for doc, _ in index.skipped] == ["D2", "D3"]
    assert all(isinstance(e, SourceUnavailable) for _, e in index.skipped)
    # Nothing from the partially read document reached the index
    assert "dog" not in index
    assert index.occurrences("cat") == (Occurrence("D4", 2), Occurrence("D1", 1))
    assert "Skipping document 'D2'" in caplog.text


def test_document_without_keywords():
    index = build_index([("D1", "the the"), ("D2", "cat")], {"the"})
    assert index.documents == ("D2",)
    assert list(index) == ["cat"]


def test_build_logs_summary(caplog):
    with caplog.at_level(logging.INFO, logger="littlesearch"):
        build_index([("D1", "cat dog")], {"the"})
    assert "Built index: 2 keywords from 1 documents (0 skipped)" in caplog.text


# --- make_index ---

@pytest.fixture
def corpus(tmp_path):
    (tmp_path / "d1.txt").write_text("The cat sat.\n", encoding="utf-8")
    (tmp_path / "d2.txt").write_text("A cat ran, the cat won!\n", encoding="utf-8")
    (tmp_path / "d3.txt").write_text("Dog eat dog.\n", encoding="utf-8")
    (tmp_path / "docs.txt").write_text("d1.txt\nd2.txt d3.txt\n", encoding="utf-8")
    (tmp_path / "noisewords.txt").write_text("the\nis\n", encoding="utf-8")
    return tmp_path


def test_make_index(corpus):
    index = make_index(corpus / "docs.txt", corpus / "noisewords.txt")
    assert index.documents == ("d1.txt", "d2.txt", "d3.txt")
    assert index.occurrences("cat") == (
        Occurrence("d2.txt", 2), Occurrence("d1.txt", 1),
    )
    assert index.top_five("cat", "dog") == ["d2.txt", "d3.txt", "d1.txt"]


def test_make_index_bundled_noise_words(corpus):
    index = make_index(str(corpus / "docs.txt"))
    assert "a" not in index
    assert "cat" in index


def test_make_index_missing_list(tmp_path):
    with pytest.raises(SourceUnavailable):
        make_index(tmp_path / "docs.txt")


def test_make_index_missing_noise_words(corpus):
    with pytest.raises(SourceUnavailable):
        make_index(corpus / "docs.txt", corpus / "nope.txt")


def test_make_index_missing_document(corpus):
    (corpus / "docs.txt").write_text("d1.txt gone.txt d3.txt\n", encoding="utf-8")
    with pytest.raises(SourceUnavailable, match="gone.txt"):
        make_index(corpus / "docs.txt", corpus / "noisewords.txt")

    index = make_index(
        corpus / "docs.txt", corpus / "noisewords.txt", skip_unreadable=True,
    )
    assert index.documents == ("d1.txt", "d3.txt")
    assert [doc for doc, _ in index.skipped] == ["gone.txt"]


def test_public_api():
    for name in littlesearch.__all__:
        assert hasattr(littlesearch, name)


def test_unreadable_noise_words():
    def noise():
        yield "the"
        raise OSError("noise list went away")

    with pytest.raises(SourceUnavailable, match="noise list went away") as excinfo:
        build_index([("D1", "cat")], noise())
    assert excinfo.value.source == "noise words"
    assert isinstance(excinfo.value.__cause__, OSError)


def test_noise_words_as_str_rejected():
    with pytest.raises(TypeError):
        build_index([("D1", "the cat")], "the is")
