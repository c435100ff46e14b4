# bktree.py
# BK-tree over the lexicon's words for typo-tolerant lookup.
# Optional replacement for the linear scan in Lexicon.correct: it returns
# exactly the words within max_dist, so ranking stays the same.
# Query uses an explicit stack (no recursion) and prunes using the triangle inequality.

from typing import Dict, Iterable, List, Optional, Tuple

from lexicon_engine.core.fuzzy import edit_distance


class BKTree:
    """BK-tree for approximate string lookup. Words are stored as given (already normalized)."""

    class Node:
        __slots__ = ("word", "children")

        def __init__(self, word: str):
            self.word = word
            self.children: Dict[int, "BKTree.Node"] = {}

    def __init__(self):
        self.root: Optional[BKTree.Node] = None
        self._size = 0

    # insertion/building -------------------------------------------------------------
    def insert(self, word: str) -> bool:
        """Add `word` to the tree. Returns False if it was already present."""
        if self.root is None:
            self.root = BKTree.Node(word)
            self._size = 1
            return True

        node = self.root
        while True:
            # exact distance needed here, it becomes the edge key
            d = edit_distance(word, node.word)
            if d == 0:
                return False
            child = node.children.get(d)
            if child is None:
                node.children[d] = BKTree.Node(word)
                self._size += 1
                return True
            node = child

    def insert_many(self, words: Iterable[str]) -> None:
        for w in words:
            self.insert(w)

    # query ---------------------------------------------------------------------------
    def query(self, word: str, max_dist: int = 2) -> List[Tuple[str, int]]:
        """
        Return (word, distance) for every stored word within max_dist of `word`.
        Unsorted; callers rank the result.
        """
        if self.root is None or max_dist < 0:
            return []

        results: List[Tuple[str, int]] = []
        stack = [self.root]
        while stack:
            node = stack.pop()
            # children must be chosen from the exact distance, so no cutoff here
            d = edit_distance(word, node.word)
            if d <= max_dist:
                results.append((node.word, d))

            # children distances to consider: [d - max_dist, d + max_dist]
            low = max(1, d - max_dist)
            high = d + max_dist
            for dist_key, child in node.children.items():
                if low <= dist_key <= high:
                    stack.append(child)
        return results

    # utilities -------------------------------------------------------------------
    def __contains__(self, word: str) -> bool:
        """True if `word` is stored (follows the distance edges, no full walk)."""
        node = self.root
        while node is not None:
            d = edit_distance(word, node.word)
            if d == 0:
                return True
            node = node.children.get(d)
        return False

    def size(self) -> int:
        return self._size

    def clear(self) -> None:
        """Remove all nodes."""
        self.root = None
        self._size = 0
