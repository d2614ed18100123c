"""Shared fixtures for littlesearch tests."""

import pytest

import littlesearch


@pytest.fixture(scope="session")
def noise_words():
    """Load the bundled noise-word list once for all tests."""
    return littlesearch.load_noise_words()


@pytest.fixture
def normalizer(noise_words):
    return littlesearch.KeywordNormalizer(noise_words)


@pytest.fixture
def cat_index():
    """Index from the two-document cat scenario."""
    return littlesearch.build_index(
        [
            ("D1", "The cat sat."),
            ("D2", "A cat ran, the cat won!"),
        ],
        {"the", "is"},
    )
