# tests/test_logger_utils.py
import logging

import pytest
from rich.logging import RichHandler

from trie_spellcheck.core.dictionary import Dictionary
from trie_spellcheck.utils.logger_utils import LOGGER_NAME, setup_logging, time_block


def test_time_block_logs_duration(caplog):
    caplog.set_level(logging.INFO, logger=LOGGER_NAME)
    with time_block("unit of work") as t:
        pass
    assert t.elapsed >= 0
    assert "unit of work done in" in caplog.text


def test_time_block_does_not_swallow_errors():
    with pytest.raises(RuntimeError):
        with time_block("boom"):
            raise RuntimeError("boom")


def test_dictionary_load_logs_word_count(caplog):
    caplog.set_level(logging.INFO, logger=LOGGER_NAME)
    Dictionary.from_words(["one", "two", "three"])
    assert "Loaded 3 words" in caplog.text


def test_setup_logging_replaces_rich_handler():
    setup_logging(verbose=True)
    root = setup_logging(verbose=False)
    assert sum(isinstance(h, RichHandler) for h in root.handlers) == 1
    assert root.level == logging.WARNING
