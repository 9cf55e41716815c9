# trie_spellcheck/context/tokenizer.py
# whitespace tokenizer shared by vocabulary loading and text checking

from typing import Iterable, Iterator, List, Union

TextSource = Union[str, Iterable[str]]


def iter_tokens(source: TextSource) -> Iterator[str]:
    """
    Yield whitespace-separated tokens from a string or from any iterable
    of text chunks (an open file, a list of lines, a list of words).
    Tokens are returned untouched, punctuation included.
    """
    if isinstance(source, str):
        source = (source,)
    for chunk in source:
        for tok in chunk.split():
            yield tok


def simple_tokenize(s: str) -> List[str]:
    if not s:
        return []
    return list(iter_tokens(s))
