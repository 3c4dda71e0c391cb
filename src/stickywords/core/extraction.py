"""Text heuristics: search-term parsing and complex-word extraction.

Both functions are pure and deterministic so the pipeline produces identical
cards for identical upstream responses.
"""

from __future__ import annotations

import re

_TERM_SEPARATORS = re.compile(r"[,\r\n]")
_NON_ALPHA = re.compile(r"[^A-Za-z]+")

# A single token at least this long counts as a "complex" word.
MIN_WORD_LENGTH = 7
# Two adjacent tokens, joined by one space, at least this long form a phrase.
MIN_PHRASE_LENGTH = 10


def parse_terms(raw_prefs: str | None) -> list[str]:
    """Split free-text preferences into ordered search terms.

    Terms are separated by commas or newlines, trimmed, and empty entries are
    dropped. Duplicates are kept. When nothing remains, the result is ``[""]``
    so the quote source is still queried once with "no preference".
    """
    if not raw_prefs:
        return [""]
    terms = [part.strip() for part in _TERM_SEPARATORS.split(raw_prefs)]
    return [t for t in terms if t] or [""]


def tokenize(text: str) -> list[str]:
    """Return the alphabetic tokens of ``text`` in order."""
    return [t for t in _NON_ALPHA.split(text) if t]


def extract_phrase(text: str) -> str:
    """Pick the vocabulary word or phrase for a quote.

    1. The first token of at least ``MIN_WORD_LENGTH`` letters wins.
    2. Otherwise the first adjacent pair whose space-joined length reaches
       ``MIN_PHRASE_LENGTH`` wins.
    3. Otherwise the first token, or ``""`` for text without letters.

    >>> extract_phrase("the quick elephant")
    'elephant'
    >>> extract_phrase("super calif")
    'super calif'
    >>> extract_phrase("it was rainy day")
    'it'
    """
    tokens = tokenize(text)
    if not tokens:
        return ""

    for token in tokens:
        if len(token) >= MIN_WORD_LENGTH:
            return token

    for left, right in zip(tokens, tokens[1:]):
        phrase = f"{left} {right}"
        if len(phrase) >= MIN_PHRASE_LENGTH:
            return phrase

    return tokens[0]


def first_word(phrase: str) -> str:
    """Return the first whitespace-delimited word of ``phrase`` (or ``""``)."""
    parts = phrase.split()
    return parts[0] if parts else ""


__all__ = [
    "MIN_PHRASE_LENGTH",
    "MIN_WORD_LENGTH",
    "extract_phrase",
    "first_word",
    "parse_terms",
    "tokenize",
]
