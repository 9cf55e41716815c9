# trie.py
# Prefix tree holding the normalized vocabulary.
# Built once at load time, then only read: exact membership and a lazy
# depth-first walk over every stored word (used by the suggestion engine).

from __future__ import annotations
from typing import Dict, Iterator, List, Optional, Tuple


class TrieNode:
    """
    A single node in the Trie.
    children: char -> TrieNode, one entry per distinct outgoing letter
    is_word: True when the path from the root to here spells a stored word
    """

    __slots__ = ("children", "is_word")

    def __init__(self) -> None:
        self.children: Dict[str, TrieNode] = {}
        self.is_word = False


class Trie:
    """
    Set of normalized words stored as a prefix tree.
    Callers normalize before inserting or looking up; the trie stores
    exactly what it is given.
    """

    def __init__(self) -> None:
        self._root = TrieNode()
        self._size = 0

    @property
    def root(self) -> TrieNode:
        return self._root

    # insertion -----------------------------------------------------
    def insert(self, word: str) -> None:
        """Add a word. Empty words are ignored; re-inserting is a no-op."""
        if not word:
            return

        node = self._root
        for ch in word:
            nxt = node.children.get(ch)
            if nxt is None:
                nxt = node.children[ch] = TrieNode()
            node = nxt
        if not node.is_word:
            node.is_word = True
            self._size += 1

    # lookup ---------------------------------------------------------
    def contains(self, word: str) -> bool:
        if not word:
            return False
        node = self._walk(word)
        return node is not None and node.is_word

    def has_prefix(self, prefix: str) -> bool:
        return self._walk(prefix) is not None

    def _walk(self, s: str) -> Optional[TrieNode]:
        node = self._root
        for ch in s:
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    # traversal ---------------------------------------------------------
    def walk(self) -> Iterator[str]:
        """
        Lazily yield every stored word, depth-first, children in insertion
        order. Uses an explicit stack so deep words never hit the recursion
        limit. Each call starts a fresh traversal.
        """
        stack: List[Tuple[TrieNode, str]] = [(self._root, "")]
        while stack:
            node, path = stack.pop()
            if node.is_word and path:
                yield path
            # reversed so the first child is popped first (preorder)
            for ch, child in reversed(list(node.children.items())):
                stack.append((child, path + ch))

    # convenience -----------------------------------------------------
    def __iter__(self) -> Iterator[str]:
        return self.walk()

    def __len__(self) -> int:
        return self._size

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.contains(word)
