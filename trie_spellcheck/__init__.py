"""
trie_spellcheck

Fuzzy-matching dictionary for spell checking: a prefix tree of normalized
words with exact lookup and bounded edit-distance suggestions.

    >>> d = Dictionary.from_words(["cat", "car", "cart", "dog"])
    >>> d.exists("Cat!")
    True
    >>> d.suggest("caat")
    ['cat']
"""

from .core import Dictionary, SuggestionEngine, Trie, TrieNode, edit_distance
from .context import CheckedWord, CheckPipeline, normalize
from .errors import ConfigError, SourceUnavailable, SpellcheckError

__all__ = [
    "CheckedWord",
    "CheckPipeline",
    "ConfigError",
    "Dictionary",
    "SourceUnavailable",
    "SpellcheckError",
    "SuggestionEngine",
    "Trie",
    "TrieNode",
    "edit_distance",
    "normalize",
]

__version__ = "0.1.0"
