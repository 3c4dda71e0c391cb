"""
Word-card pipeline: from raw preference text to a WordCard.

Flow Overview
-------------
1. **Terms**: the raw preferences are split into ordered search terms.
2. **Quote**: terms are tried one at a time against the quote source; the
   first term yielding a usable quote wins and no further calls are made.
3. **Phrase**: a complex word (or two-word phrase) is picked from the quote.
4. **Definition**: the first word of the phrase is looked up. This step
   never fails; a missing definition is just an empty string.

Outcomes
--------
- ``Ok(WordCard)`` on success.
- ``Err(CardError(kind="not_found"))`` when no term matched.
- ``Err(CardError(kind="service_error"))`` when the quote source failed.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from stickywords.core.contracts.quote import QuoteRecord
from stickywords.core.contracts.word_card import CardError, WordCard
from stickywords.core.extraction import extract_phrase, first_word, parse_terms
from stickywords.core.result import Result, err, ok
from stickywords.core.settings import get_logger
from stickywords.sources.http import SourceError

logger = get_logger(__name__)


class QuoteSearcher(Protocol):
    def search(self, term: str) -> QuoteRecord | None: ...


class DefinitionLookup(Protocol):
    def lookup_definition(self, term: str) -> str: ...


def first_quote(terms: Sequence[str], source: QuoteSearcher) -> QuoteRecord | None:
    """Return the quote for the first term that yields one, else ``None``.

    Exactly one ``source.search`` call is issued per term tried. A
    :class:`SourceError` aborts the loop and propagates.
    """
    for term in terms:
        logger.debug("Searching quotes for term %r", term)
        record = source.search(term)
        if record is not None:
            logger.info("Quote found for term %r", term)
            return record
    return None


def acquire_quote(raw_prefs: str | None, source: QuoteSearcher) -> QuoteRecord | None:
    """Parse ``raw_prefs`` into search terms and return the first matching quote."""
    return first_quote(parse_terms(raw_prefs), source)


def get_word_card(
    raw_prefs: str | None,
    *,
    quotes: QuoteSearcher,
    dictionary: DefinitionLookup,
) -> Result[WordCard, CardError]:
    """Build a :class:`WordCard` for the given preference text.

    Parameters
    ----------
    raw_prefs:
        Free text; terms separated by commas or newlines. May be empty.
    quotes:
        Quote source (anything with ``search(term)``).
    dictionary:
        Definition source (anything with ``lookup_definition(term)``).
    """
    terms = parse_terms(raw_prefs)

    try:
        quote = first_quote(terms, quotes)
    except SourceError as exc:
        logger.error("Quote source failed: %s", exc)
        return err(CardError.service_error(str(exc)))

    if quote is None:
        logger.info("No quote matched terms %s", terms)
        return err(CardError.not_found(terms))

    phrase = extract_phrase(quote.text)
    definition = dictionary.lookup_definition(first_word(phrase))
    return ok(WordCard.from_quote(quote, word=phrase, definition=definition))


__all__ = [
    "DefinitionLookup",
    "QuoteSearcher",
    "acquire_quote",
    "first_quote",
    "get_word_card",
]
