# config_manager.py - JSON config manager

import json
import os

from trie_spellcheck.core.suggestion_engine import ORDERINGS, STRATEGIES
from trie_spellcheck.errors import ConfigError

DEFAULT_CONFIG_PATH = "spellcheck.json"

DEFAULTS = {
    "dictionary": "dictionary.txt",  # vocabulary source, whitespace separated words
    "max_distance": 1,
    "max_suggestions": 10,
    "strategy": "pruned",  # scan | pruned
    "ordering": "ranked",  # dfs | ranked
}


class Config:
    """
    Settings with defaults, optionally overridden by a JSON file.
    The file is only written by an explicit save().
    """

    def __init__(self, path=DEFAULT_CONFIG_PATH, required=False):
        self.path = path
        self.data = dict(DEFAULTS)
        self._load(required)

    def _load(self, required):
        if not self.path or not os.path.exists(self.path):
            if required:
                raise ConfigError(f"config file not found: {self.path}")
            return
        try:
            with open(self.path, "r", encoding="utf8") as f:
                raw = json.load(f)
        except (OSError, ValueError) as e:
            raise ConfigError(f"cannot read config {self.path}: {e}") from e
        if not isinstance(raw, dict):
            raise ConfigError(f"config {self.path} must hold a JSON object")
        for k, v in raw.items():
            self.set(k, v)

    def save(self):
        with open(self.path, "w", encoding="utf8") as f:
            json.dump(self.data, f, indent=2)

    def get(self, key, default=None):
        return self.data.get(key, default)

    def set(self, key, val):
        if key not in DEFAULTS:
            raise ConfigError(f"no such option: {key}")
        if isinstance(val, float) and not val.is_integer() and isinstance(DEFAULTS[key], int):
            raise ConfigError(f"bad value for {key}: {val!r} is not a whole number")
        try:
            val = type(DEFAULTS[key])(val)
        except (TypeError, ValueError) as e:
            raise ConfigError(f"bad value for {key}: {val!r}") from e
        _validate(key, val)
        self.data[key] = val

    def update(self, **overrides):
        """Apply overrides, skipping None (unset CLI flags)."""
        for k, v in overrides.items():
            if v is not None:
                self.set(k, v)

    def dictionary_settings(self):
        """Keyword arguments for Dictionary.load()."""
        return {
            "max_distance": self.data["max_distance"],
            "max_suggestions": self.data["max_suggestions"],
            "strategy": self.data["strategy"],
            "ordering": self.data["ordering"],
        }


def _validate(key, val):
    if key == "max_distance" and val < 0:
        raise ConfigError("max_distance must be >= 0")
    if key == "max_suggestions" and val <= 0:
        raise ConfigError("max_suggestions must be > 0")
    if key == "strategy" and val not in STRATEGIES:
        raise ConfigError(f"strategy must be one of {', '.join(STRATEGIES)}")
    if key == "ordering" and val not in ORDERINGS:
        raise ConfigError(f"ordering must be one of {', '.join(ORDERINGS)}")
