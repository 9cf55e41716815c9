# dictionary.py
"""
Dictionary - the vocabulary the rest of the program checks against.

Built once from a vocabulary source (path or any iterable of text), then
read-only: every consumer gets the same instance and only calls
exists() / suggest(). No module-level instance; tests build their own
with Dictionary.from_words([...]).
"""

from __future__ import annotations

import logging
import os
from typing import Iterable, List, Union

from trie_spellcheck.context.normalizer import normalize
from trie_spellcheck.context.tokenizer import iter_tokens
from trie_spellcheck.core.suggestion_engine import (
    DEFAULT_LIMIT,
    DEFAULT_MAX_DISTANCE,
    Suggestion,
    SuggestionEngine,
)
from trie_spellcheck.core.trie import Trie
from trie_spellcheck.errors import SourceUnavailable
from trie_spellcheck.utils.logger_utils import time_block

logger = logging.getLogger(__name__)

VocabularySource = Union[str, "os.PathLike[str]", Iterable[str]]


class Dictionary:
    """
    Read-only fuzzy dictionary over a Trie.
    Public API:
      - exists(word) -> bool
      - suggest(word) -> list[str]   (<= max_suggestions, distance <= max_distance)
    """

    def __init__(
        self,
        trie: Trie,
        max_distance: int = DEFAULT_MAX_DISTANCE,
        max_suggestions: int = DEFAULT_LIMIT,
        strategy: str = "pruned",
        ordering: str = "ranked",
    ) -> None:
        self._trie = trie
        self.max_distance = max_distance
        self.max_suggestions = max_suggestions
        self._engine = SuggestionEngine(trie, strategy=strategy, ordering=ordering)

    # building ------------------------------------------------------------
    @classmethod
    def load(cls, source: VocabularySource, **settings) -> "Dictionary":
        """
        Build a Dictionary from a file path or an iterable of text.
        Every whitespace-separated token is normalized; letterless tokens
        are skipped. Raises SourceUnavailable when the source cannot be
        read or contains no usable word.
        """
        trie = Trie()
        label = os.fspath(source) if isinstance(source, (str, os.PathLike)) else "<iterable>"

        with time_block(f"load vocabulary {label}"):
            try:
                if isinstance(source, (str, os.PathLike)):
                    with open(source, "r", encoding="utf-8") as f:
                        _fill(trie, f)
                else:
                    # streams can fail mid-read too
                    _fill(trie, source)
            # ValueError covers decode errors and reads from a closed stream
            except (OSError, ValueError) as e:
                raise SourceUnavailable(label, f"cannot be read: {e}") from e

        if not len(trie):
            raise SourceUnavailable(label, "contains no words")

        logger.info("Loaded %s words from %s", f"{len(trie):,}", label)
        return cls(trie, **settings)

    @classmethod
    def from_words(cls, words: Iterable[str], **settings) -> "Dictionary":
        return cls.load(list(words), **settings)

    # queries ---------------------------------------------------------------
    def exists(self, word: str) -> bool:
        """
        Exact membership of the normalized word. A word that normalizes to
        "" is never a member; treating letterless tokens as correct is the
        text checker's policy (see CheckPipeline), not this method's.
        """
        return self._trie.contains(normalize(word))

    def suggest(self, word: str) -> List[str]:
        return [w for w, _d in self.suggest_with_distance(word)]

    def suggest_with_distance(self, word: str) -> List[Suggestion]:
        key = normalize(word)
        if not key:
            return []
        return self._engine.suggest_with_distance(key, self.max_distance, self.max_suggestions)

    # convenience -----------------------------------------------------------
    @property
    def strategy(self) -> str:
        return self._engine.strategy

    @property
    def ordering(self) -> str:
        return self._engine.ordering

    def words(self) -> Iterable[str]:
        return self._trie.walk()

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.exists(word)

    def __len__(self) -> int:
        return len(self._trie)


def _fill(trie: Trie, chunks: Iterable[str]) -> None:
    for tok in iter_tokens(chunks):
        key = normalize(tok)
        if key:
            trie.insert(key)
