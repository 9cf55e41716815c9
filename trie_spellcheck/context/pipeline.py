# trie_spellcheck/context/pipeline.py
# checks a text against a Dictionary, renders it and applies corrections

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Dict, Iterable, List, Optional, Union

from rich.text import Text

from .normalizer import normalize
from .tokenizer import iter_tokens

if TYPE_CHECKING:
    from trie_spellcheck.core.dictionary import Dictionary

logger = logging.getLogger(__name__)

# chooser(token, suggestions) -> replacement, or None to keep the token
Chooser = Callable[[str, List[str]], Optional[str]]

MISSPELLED_STYLE = "bold red"


@dataclass(frozen=True)
class CheckedWord:
    token: str  # raw token as it appeared in the text
    correct: bool


class CheckPipeline:
    """
    Small pipeline object:
     - process(text) / process_file(path) -> list[CheckedWord]
     - render() -> rich Text with misspelled tokens highlighted
     - correct(chooser) -> {token: replacement}
     - save(path, replacements)
    Tokens with no letters are exempt and always count as correct.
    """

    def __init__(self, dictionary: "Dictionary") -> None:
        self.dictionary = dictionary
        self.words: List[CheckedWord] = []

    def process(self, text: Union[str, Iterable[str]]) -> List[CheckedWord]:
        self.words = [CheckedWord(tok, self.is_correct(tok)) for tok in iter_tokens(text)]
        logger.debug("checked %d tokens, %d misspelled", len(self.words), len(self.misspelled()))
        return self.words

    def process_file(self, path) -> List[CheckedWord]:
        # OSError and UnicodeDecodeError propagate, the caller decides how fatal they are
        with open(path, "r", encoding="utf-8") as f:
            return self.process(f)

    def is_correct(self, token: str) -> bool:
        key = normalize(token)
        return not key or self.dictionary.exists(key)

    def misspelled(self) -> List[str]:
        """Distinct misspelled tokens in order of first appearance."""
        seen: Dict[str, None] = {}
        for w in self.words:
            if not w.correct:
                seen.setdefault(w.token, None)
        return list(seen)

    # display -----------------------------------------------------------------
    def render(self) -> Text:
        out = Text()
        for i, w in enumerate(self.words):
            if i:
                out.append(" ")
            out.append(w.token, style=None if w.correct else MISSPELLED_STYLE)
        return out

    # correction -----------------------------------------------------------------
    def correct(self, chooser: Chooser) -> Dict[str, str]:
        """
        Ask `chooser` once per distinct misspelled token and collect the
        replacements. A None answer keeps the token unchanged.
        """
        replacements: Dict[str, str] = {}
        for token in self.misspelled():
            choice = chooser(token, self.dictionary.suggest(token))
            if choice is not None and choice != token:
                replacements[token] = choice
        return replacements

    def apply(self, replacements: Dict[str, str]) -> List[str]:
        return [replacements.get(w.token, w.token) for w in self.words]

    def corrected_text(self, replacements: Dict[str, str]) -> str:
        return " ".join(self.apply(replacements))

    def save(self, path, replacements: Dict[str, str]) -> None:
        with open(path, "w", encoding="utf-8") as f:
            f.write(self.corrected_text(replacements))
        logger.info("saved corrected text to %s (%d replacement(s))", path, len(replacements))
