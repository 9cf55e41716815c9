# suggestion_engine.py
"""
SuggestionEngine - bounded edit-distance search over a Trie.

Two strategies, same observable result:
 - "scan":   walk every stored word and score it with edit_distance().
             Cost grows with vocabulary size x word length x query length.
 - "pruned": carry one Levenshtein row per trie node while walking; a
             subtree is dropped as soon as the smallest value in its row
             exceeds the bound (no word below it can get back under).

Both visit words in the trie's walk order and stop after `limit` matches,
so they return the same words. Ordering of that set is either walk order
("dfs") or ascending (distance, word) ("ranked").
"""

from __future__ import annotations

import logging
from typing import List, Tuple

from trie_spellcheck.core.distance import edit_distance, next_row
from trie_spellcheck.core.trie import Trie, TrieNode

logger = logging.getLogger(__name__)

Suggestion = Tuple[str, int]  # (word, distance)

STRATEGIES = ("scan", "pruned")
ORDERINGS = ("dfs", "ranked")

DEFAULT_MAX_DISTANCE = 1
DEFAULT_LIMIT = 10


class SuggestionEngine:
    """Finds stored words within a maximum edit distance of a query."""

    def __init__(self, trie: Trie, strategy: str = "pruned", ordering: str = "dfs") -> None:
        if strategy not in STRATEGIES:
            raise ValueError(f"unknown strategy {strategy!r}, expected one of {STRATEGIES}")
        if ordering not in ORDERINGS:
            raise ValueError(f"unknown ordering {ordering!r}, expected one of {ORDERINGS}")
        self.trie = trie
        self.strategy = strategy
        self.ordering = ordering

    # public API ---------------------------------------------------------
    def suggest(
        self,
        query: str,
        max_distance: int = DEFAULT_MAX_DISTANCE,
        limit: int = DEFAULT_LIMIT,
    ) -> List[str]:
        return [w for w, _d in self.suggest_with_distance(query, max_distance, limit)]

    def suggest_with_distance(
        self,
        query: str,
        max_distance: int = DEFAULT_MAX_DISTANCE,
        limit: int = DEFAULT_LIMIT,
    ) -> List[Suggestion]:
        """
        Return up to `limit` (word, distance) pairs with distance <= max_distance.
        The pairs are the first matches in walk order; "ranked" only
        re-sorts them.
        """
        if max_distance < 0 or limit <= 0:
            return []

        if self.strategy == "scan":
            found = self._scan(query, max_distance, limit)
        else:
            found = self._pruned(query, max_distance, limit)

        if self.ordering == "ranked":
            found.sort(key=lambda item: (item[1], item[0]))
        logger.debug("suggest(%r, max_distance=%d) -> %d match(es) via %s",
                     query, max_distance, len(found), self.strategy)
        return found

    # strategies ---------------------------------------------------------
    def _scan(self, query: str, max_distance: int, limit: int) -> List[Suggestion]:
        out: List[Suggestion] = []
        for word in self.trie.walk():
            d = edit_distance(word, query)
            if d <= max_distance:
                out.append((word, d))
                if len(out) >= limit:
                    break
        return out

    def _pruned(self, query: str, max_distance: int, limit: int) -> List[Suggestion]:
        out: List[Suggestion] = []
        first_row = list(range(len(query) + 1))

        # same preorder as Trie.walk(): (node, path, row for path vs query)
        stack: List[Tuple[TrieNode, str, List[int]]] = [(self.trie.root, "", first_row)]
        while stack:
            node, path, row = stack.pop()
            if node.is_word and path and row[-1] <= max_distance:
                out.append((path, row[-1]))
                if len(out) >= limit:
                    break

            children = []
            for ch, child in node.children.items():
                child_row = next_row(row, ch, query)
                if min(child_row) <= max_distance:
                    children.append((child, path + ch, child_row))
            stack.extend(reversed(children))
        return out
