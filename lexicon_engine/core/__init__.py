"""
lexicon_engine.core

The dictionary engine. Contains:
 - the Trie store with definitions (Trie, TrieNode, LookupResult)
 - bounded prefix completion (suggest_prefix)
 - Levenshtein scoring and correction ranking (edit_distance)
 - an optional BK-tree index for corrections (BKTree)
 - the Lexicon facade tying them together
"""

from .trie import Trie, TrieNode, LookupResult, normalize
from .suggestions import suggest_prefix
from .fuzzy import edit_distance
from .bktree import BKTree
from .lexicon import Lexicon

__all__ = [
    "Trie",
    "TrieNode",
    "LookupResult",
    "normalize",
    "suggest_prefix",
    "edit_distance",
    "BKTree",
    "Lexicon",
]
