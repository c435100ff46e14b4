# errors.py - exception types raised outside the engine's query paths


class LexiconError(Exception):
    """Base class for lexicon_engine errors."""


class LoadError(LexiconError):
    """A dictionary source could not be read or parsed."""

    def __init__(self, path, reason: str):
        self.path = str(path)
        self.reason = reason
        super().__init__(f"failed to load {self.path}: {reason}")


class ConfigError(LexiconError):
    """Bad configuration key or value."""
