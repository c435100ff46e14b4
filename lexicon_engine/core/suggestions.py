# suggestions.py
# Bounded prefix completion over a Trie.
# Walks the subtree below the prefix depth-first with an explicit stack,
# visiting edges in codepoint order so results are reproducible.

from __future__ import annotations
from typing import Iterator, List, Tuple

from lexicon_engine.core.trie import Trie, TrieNode, normalize

# collect a little extra then dedupe & trim
OVERSCAN = 3


def iter_words(node: TrieNode, prefix: str, budget: int) -> Iterator[str]:
    """
    Yield up to `budget` stored words in the subtree of `node`.
    Pre-order: a node's own word comes before its descendants, children
    are taken in ascending character order.
    """
    if budget <= 0:
        return
    emitted = 0
    stack: List[Tuple[TrieNode, str]] = [(node, prefix)]
    while stack:
        current, spelled = stack.pop()
        if current.is_word:
            yield spelled
            emitted += 1
            if emitted >= budget:
                return
        # push in reverse so the smallest character is popped first
        for ch in sorted(current.children, reverse=True):
            stack.append((current.children[ch], spelled + ch))


def suggest_prefix(trie: Trie, prefix: str, max_suggestions: int = 10) -> List[str]:
    """
    Return up to `max_suggestions` distinct words starting with `prefix`.
    A prefix with no path in the trie gives an empty list.
    """
    if max_suggestions <= 0:
        return []
    key = normalize(prefix)
    node = trie.find_node(key)
    if node is None:
        return []

    # ordered dedupe
    unique = dict.fromkeys(iter_words(node, key, max_suggestions * OVERSCAN))
    return list(unique)[:max_suggestions]
