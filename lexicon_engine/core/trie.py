# trie.py
# Trie (prefix tree) holding the dictionary words and their definitions.
# Exact lookup and prefix location are O(len(word)).

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Optional


def normalize(word: str) -> str:
    """Case-fold used for every insert and query."""
    return word.lower()


@dataclass(frozen=True)
class LookupResult:
    found: bool
    definition: str = ""


NOT_FOUND = LookupResult(found=False, definition="")


class TrieNode:
    """
    A single node in the Trie.
    children: char -> TrieNode
    is_word: bool marker to know if this path forms a stored word
    definition: text attached to the word ("" = none recorded)
    """

    __slots__ = ("children", "is_word", "definition")

    def __init__(self) -> None:
        self.children: Dict[str, TrieNode] = {}
        self.is_word = False
        self.definition = ""


class Trie:
    """
    Trie storing normalized words, used by the Lexicon for:
     - exact lookup with definitions
     - locating the subtree below a prefix (for completions)
    Duplicate tracking lives in the Lexicon, the trie only holds paths.
    """

    def __init__(self) -> None:
        self._root = TrieNode()
        self._size = 0

    @property
    def root(self) -> TrieNode:
        return self._root

    # insertion -----------------------------------------------------
    def insert(self, word: str, definition: str = "") -> TrieNode:
        """
        Walk/create the path for `word`, mark it terminal and set its definition.
        `word` is expected to be normalized already. Returns the terminal node.
        An empty word marks the root itself.
        """
        node = self._root
        for ch in word:
            nxt = node.children.get(ch)
            if nxt is None:
                nxt = TrieNode()
                node.children[ch] = nxt
            node = nxt
        if not node.is_word:
            node.is_word = True
            self._size += 1
        node.definition = definition
        return node

    # search/traversal ---------------------------------------------------------
    def find_node(self, prefix: str) -> Optional[TrieNode]:
        """Node reached by consuming `prefix` from the root, or None if an edge is missing."""
        node = self._root
        for ch in prefix:
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    def lookup(self, word: str) -> LookupResult:
        """
        Exact lookup. A path that exists but ends on a non-terminal node
        (a prefix of stored words) reports found=False with an empty definition.
        """
        node = self.find_node(normalize(word))
        if node is None:
            return NOT_FOUND
        return LookupResult(found=node.is_word, definition=node.definition)

    # convenience -----------------------------------------------------
    def size(self) -> int:
        """Number of terminal nodes."""
        return self._size

    def __contains__(self, word: str) -> bool:
        node = self.find_node(normalize(word))
        return node is not None and node.is_word
