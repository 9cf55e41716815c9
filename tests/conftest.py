# tests/conftest.py
# shared fixtures: small in-memory dictionaries and vocabulary files

import pytest

from trie_spellcheck.core.dictionary import Dictionary

ANIMALS = ["cat", "car", "cart", "dog"]


@pytest.fixture
def small_dictionary():
    return Dictionary.from_words(ANIMALS)


@pytest.fixture
def vocab_file(tmp_path):
    path = tmp_path / "dictionary.txt"
    path.write_text("the cat sat\non a mat\n", encoding="utf-8")
    return path
