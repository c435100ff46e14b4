"""
lexicon_engine

In-memory dictionary lookup engine: exact lookup with definitions,
prefix autocompletion and "did you mean" corrections by edit distance.
"""

from .core.lexicon import Lexicon
from .core.trie import LookupResult
from .core.fuzzy import edit_distance
from .errors import LexiconError, LoadError, ConfigError

__all__ = [
    "Lexicon",
    "LookupResult",
    "edit_distance",
    "LexiconError",
    "LoadError",
    "ConfigError",
]

__version__ = "0.1.0"
