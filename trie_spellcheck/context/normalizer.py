# trie_spellcheck/context/normalizer.py
import re

_non_letter_re = re.compile(r"[^A-Za-z]+")  # ASCII letters only, everything else is dropped


def normalize(token: str) -> str:
    """
    Map a raw token to its lookup key: ASCII letters only, lowercased,
    in input order. "Hello!123" -> "hello". Letterless input gives "".
    """
    if not token:
        return ""
    return _non_letter_re.sub("", token).lower()


def is_checkable(token: str) -> bool:
    # tokens without letters (numbers, punctuation) are exempt from checking
    return bool(normalize(token))
