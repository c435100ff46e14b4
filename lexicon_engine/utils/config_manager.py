# config_manager.py - JSON config manager

import json
import os

from lexicon_engine.core.lexicon import FUZZY_INDEXES
from lexicon_engine.errors import ConfigError

DEFAULTS = {
    "dictionary_path": "dictionary.csv",
    "suggest_limit": 15,
    "correct_distance": 3,
    "correct_limit": 10,
    "did_you_mean_distance": 2,
    "did_you_mean_limit": 3,
    "fuzzy_index": "scan",
    "log_path": os.path.join("logs", "lexicon.log"),
}

# keys whose value must be a positive integer
POSITIVE = ("suggest_limit", "correct_distance", "correct_limit", "did_you_mean_distance", "did_you_mean_limit")


def _coerce(key, val):
    """Convert `val` to the type of the key's default and check its range."""
    default = DEFAULTS[key]
    try:
        out = type(default)(val)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"{key}: cannot use {val!r} ({e})") from e
    if key in POSITIVE and out < 1:
        raise ConfigError(f"{key}: must be a positive integer, got {val!r}")
    if key == "fuzzy_index" and out not in FUZZY_INDEXES:
        raise ConfigError(f"{key}: expected one of {', '.join(FUZZY_INDEXES)}, got {val!r}")
    return out


class Config:
    def __init__(self, path="lexicon_config.json", log=None):
        self.path = path
        self.log = log
        self.data = dict(DEFAULTS)
        self._load()

    def _load(self):
        if not os.path.exists(self.path):
            self.save()
            return
        try:
            with open(self.path, "r", encoding="utf8") as f:
                stored = json.load(f)
        except (OSError, ValueError) as e:
            # keep defaults, the file is left untouched for the user to fix
            if self.log:
                self.log.warning(f"config {self.path} unreadable, using defaults: {e}")
            return
        if not isinstance(stored, dict):
            if self.log:
                self.log.warning(f"config {self.path} is not a JSON object, using defaults")
            return
        for k, v in stored.items():
            if k in DEFAULTS:
                self.data[k] = _coerce(k, v)

    def save(self):
        folder = os.path.dirname(self.path)
        if folder:
            os.makedirs(folder, exist_ok=True)
        with open(self.path, "w", encoding="utf8") as f:
            json.dump(self.data, f, indent=2)

    def get(self, key):
        return self.data[key]

    def __getitem__(self, key):
        return self.data[key]

    def items(self):
        return self.data.items()

    def set(self, key, val):
        if key not in self.data:
            raise ConfigError(f"no such option: {key}")
        self.data[key] = _coerce(key, val)
        self.save()
