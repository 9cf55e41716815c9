# trie_spellcheck/context/__init__.py
# text handling around the dictionary: normalization, tokenizing, checking

from .normalizer import normalize, is_checkable  # token -> lookup key
from .tokenizer import iter_tokens, simple_tokenize  # whitespace tokenizing
from .pipeline import CheckedWord, CheckPipeline  # classify + correct a text

__all__ = [
    "CheckedWord",
    "CheckPipeline",
    "is_checkable",
    "iter_tokens",
    "normalize",
    "simple_tokenize",
]
