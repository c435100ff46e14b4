# lexicon.py
"""
Lexicon - the dictionary engine facade.

Owns:
 - the Trie (words + definitions)
 - a set of normalized words (duplicate guard)
 - the insertion-ordered word list (candidate pool for corrections)
 - optionally a BKTree over the same words

Public API:
  - insert(word, definition="") -> None
  - lookup(word) -> LookupResult(found, definition)
  - suggest_prefix(prefix, max_suggestions=10) -> List[str]
  - correct(word, max_distance=2, max_suggestions=5) -> List[str]

The lexicon is meant to be loaded first and then queried; queries never
mutate it, so concurrent readers are fine once loading is done.
"""

from __future__ import annotations
from typing import Iterable, List, Optional, Set, Tuple

from lexicon_engine.core.bktree import BKTree
from lexicon_engine.core.fuzzy import edit_distance, rank_corrections, scan_corrections
from lexicon_engine.core.suggestions import suggest_prefix
from lexicon_engine.core.trie import LookupResult, Trie, normalize
from lexicon_engine.errors import ConfigError

Pair = Tuple[str, str]

FUZZY_INDEXES = ("scan", "bktree")


class Lexicon:
    """In-memory dictionary with exact, prefix and fuzzy lookup."""

    def __init__(self, fuzzy_index: str = "scan") -> None:
        if fuzzy_index not in FUZZY_INDEXES:
            raise ConfigError(
                f"unknown fuzzy index {fuzzy_index!r} (expected one of {', '.join(FUZZY_INDEXES)})"
            )
        self.fuzzy_index = fuzzy_index
        self._trie = Trie()
        self._seen: Set[str] = set()
        self._words: List[str] = []
        self._bk: Optional[BKTree] = BKTree() if fuzzy_index == "bktree" else None

    @classmethod
    def from_pairs(cls, pairs: Iterable[Pair], fuzzy_index: str = "scan") -> "Lexicon":
        lex = cls(fuzzy_index=fuzzy_index)
        lex.load(pairs)
        return lex

    # mutation ---------------------------------------------------------
    def insert(self, word: str, definition: str = "") -> None:
        """
        Add `word` (case-folded). Re-inserting a known word only updates its
        definition, and only when the new definition is non-empty.
        """
        key = normalize(word)
        if key in self._seen:
            if definition:
                self._trie.insert(key, definition)
            return

        self._trie.insert(key, definition)
        self._seen.add(key)
        self._words.append(key)
        if self._bk is not None:
            self._bk.insert(key)

    def load(self, pairs: Iterable[Pair]) -> int:
        """Bulk insert; returns how many pairs were consumed."""
        count = 0
        for word, definition in pairs:
            self.insert(word, definition)
            count += 1
        return count

    # queries ---------------------------------------------------------
    def lookup(self, word: str) -> LookupResult:
        return self._trie.lookup(word)

    def suggest_prefix(self, prefix: str, max_suggestions: int = 10) -> List[str]:
        return suggest_prefix(self._trie, prefix, max_suggestions)

    def correct(self, word: str, max_distance: int = 2, max_suggestions: int = 5) -> List[str]:
        """
        Words at edit distance 1..max_distance from `word`, closest first,
        ties in alphabetical order. The word itself is never returned.
        """
        query = normalize(word)
        if self._bk is None:
            return scan_corrections(query, self._words, max_distance, max_suggestions)
        if max_distance < 1:
            return []
        hits = [(w, d) for w, d in self._bk.query(query, max_distance) if d > 0]
        return rank_corrections(hits, max_suggestions)

    @staticmethod
    def edit_distance(a: str, b: str) -> int:
        return edit_distance(a, b)

    # introspection ---------------------------------------------------------
    def words(self) -> List[str]:
        """Normalized words in first-insertion order (copy)."""
        return list(self._words)

    def __len__(self) -> int:
        return len(self._words)

    def __contains__(self, word: str) -> bool:
        return normalize(word) in self._seen

    def __repr__(self) -> str:
        return f"Lexicon(words={len(self._words)}, fuzzy_index={self.fuzzy_index!r})"
