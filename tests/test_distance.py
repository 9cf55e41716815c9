# tests/test_distance.py
import pytest

from trie_spellcheck.core.distance import edit_distance, next_row


@pytest.mark.parametrize(
    ["a", "b", "expected"],
    [
        ("kitten", "sitting", 3),
        ("flaw", "lawn", 2),
        ("cat", "caat", 1),
        ("car", "caat", 2),
        ("cart", "caat", 1),
        ("dog", "caat", 4),
        ("", "abc", 3),
        ("abc", "", 3),
        ("", "", 0),
        ("teh", "the", 2),  # transposition costs two edits
    ],
)
def test_edit_distance(a, b, expected):
    assert edit_distance(a, b) == expected


@pytest.mark.parametrize("a", ["", "a", "spell", "checker"])
def test_distance_to_self_is_zero(a):
    assert edit_distance(a, a) == 0


@pytest.mark.parametrize(["a", "b"], [("spell", "spill"), ("ab", "ba"), ("", "xyz"), ("abcdef", "azced")])
def test_distance_is_symmetric(a, b):
    assert edit_distance(a, b) == edit_distance(b, a)


@pytest.mark.parametrize(["word", "target"], [("cart", "caat"), ("sitting", "kitten"), ("a", ""), ("", "ab")])
def test_next_row_builds_the_same_table(word, target):
    row = list(range(len(target) + 1))
    for ch in word:
        row = next_row(row, ch, target)
    assert row[-1] == edit_distance(word, target)
