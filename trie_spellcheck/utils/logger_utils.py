# logger_utils.py - logging setup for the CLI and a timer for code blocks

import logging
import time

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "trie_spellcheck"

log = logging.getLogger(LOGGER_NAME)


def setup_logging(verbose: bool = False, console: Console = None) -> logging.Logger:
    """
    Route the package's log records through Rich (to stderr by default).
    Safe to call more than once: previous Rich handlers are replaced.
    """
    root = logging.getLogger(LOGGER_NAME)
    for h in list(root.handlers):
        if isinstance(h, RichHandler):
            root.removeHandler(h)

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    root.addHandler(handler)
    root.setLevel(logging.DEBUG if verbose else logging.WARNING)
    return root


def time_block(label: str, level: int = logging.INFO):
    """
    Helper for measuring execution time of a code block.
    To use:
        with time_block("load vocabulary"):
            do_some_work()
    The duration is logged when the block exits.
    """
    return _Timer(label, level)


class _Timer:
    """Context manager used internally to measure time for a code block."""

    def __init__(self, label, level):
        self.label = label
        self.level = level
        self.start = 0.0
        self.elapsed = 0.0

    def __enter__(self):
        self.start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.elapsed = time.perf_counter() - self.start
        if exc_type is None:
            log.log(self.level, "%s done in %.3fs", self.label, self.elapsed)
        else:
            log.debug("%s failed after %.3fs", self.label, self.elapsed)
        return False
