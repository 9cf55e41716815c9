"""
trie_spellcheck.core

The lookup engine:
 - Trie / TrieNode: prefix tree holding normalized words
 - edit_distance: Levenshtein distance
 - SuggestionEngine: bounded edit-distance search over the trie
 - Dictionary: load-once, read-only facade exposing exists() / suggest()
"""

from .trie import Trie, TrieNode
from .distance import edit_distance
from .suggestion_engine import SuggestionEngine
from .dictionary import Dictionary

__all__ = [
    "Dictionary",
    "SuggestionEngine",
    "Trie",
    "TrieNode",
    "edit_distance",
]
