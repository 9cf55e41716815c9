# trie_spellcheck/errors.py
# exceptions raised by the package; the CLI maps them to exit codes


class SpellcheckError(Exception):
    """Base class for every error raised by trie_spellcheck."""


class SourceUnavailable(SpellcheckError):
    """
    The vocabulary source could not be opened or read, or it held no
    usable word. Fatal: no Dictionary can be built without it.
    """

    def __init__(self, source: object, reason: str = "cannot be read") -> None:
        self.source = source
        self.reason = reason
        super().__init__(f"vocabulary source {source!r} {reason}")


class ConfigError(SpellcheckError):
    """Invalid configuration file or setting value."""
