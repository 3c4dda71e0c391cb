"""Tests for the quote → phrase → definition pipeline."""

from __future__ import annotations

from stickywords.core.contracts.quote import QuoteRecord
from stickywords.core.contracts.word_card import CardError, WordCard
from stickywords.pipelines.word_card import acquire_quote, first_quote, get_word_card
from stickywords.sources.http import SourceError

_JAZZ = QuoteRecord(
    text="Jazz is the extraordinary sound of freedom.",
    speaker="Anonymous Trumpeter",
    source_title="Late Night Sessions",
)


class FakeQuoteSource:
    """Returns canned results per term and records every search."""

    def __init__(self, results: dict[str, QuoteRecord | None | Exception]) -> None:
        self.results = results
        self.calls: list[str] = []

    def search(self, term: str) -> QuoteRecord | None:
        self.calls.append(term)
        result = self.results.get(term)
        if isinstance(result, Exception):
            raise result
        return result


class FakeDictionary:
    def __init__(self, definitions: dict[str, str] | None = None) -> None:
        self.definitions = definitions or {}
        self.calls: list[str] = []

    def lookup_definition(self, term: str) -> str:
        self.calls.append(term)
        return self.definitions.get(term, "")


def test_acquire_quote_parses_raw_prefs_and_stops_at_first_match() -> None:
    source = FakeQuoteSource({"noir": None, "jazz": _JAZZ, "space": _JAZZ})

    record = acquire_quote(" noir, jazz\nspace", source)

    assert record == _JAZZ
    assert source.calls == ["noir", "jazz"]


def test_acquire_quote_with_empty_prefs_searches_once_with_empty_term() -> None:
    source = FakeQuoteSource({"": _JAZZ})

    assert acquire_quote("", source) == _JAZZ
    assert source.calls == [""]


def test_first_quote_tries_empty_term_first() -> None:
    source = FakeQuoteSource({"": None, "jazz": _JAZZ})

    assert first_quote(["", "jazz"], source) == _JAZZ
    assert source.calls == ["", "jazz"]


def test_first_quote_returns_none_after_one_call_per_term() -> None:
    source = FakeQuoteSource({})

    assert first_quote(["a", "b", "a"], source) is None
    assert source.calls == ["a", "b", "a"]


def test_word_card_happy_path() -> None:
    quotes = FakeQuoteSource({"jazz": _JAZZ})
    dictionary = FakeDictionary({"extraordinary": "Very unusual or remarkable."})

    result = get_word_card("jazz", quotes=quotes, dictionary=dictionary)

    assert result.is_ok()
    assert result.unwrap() == WordCard(
        word="extraordinary",
        definition="Very unusual or remarkable.",
        quote=_JAZZ.text,
        character="Anonymous Trumpeter",
        title="Late Night Sessions",
    )


def test_word_card_parses_comma_separated_preferences() -> None:
    quotes = FakeQuoteSource({"jazz": _JAZZ})

    result = get_word_card(" , noir,\n jazz ", quotes=quotes, dictionary=FakeDictionary())

    assert result.is_ok()
    assert quotes.calls == ["noir", "jazz"]


def test_phrase_lookup_uses_only_its_first_word() -> None:
    quotes = FakeQuoteSource({"": QuoteRecord(text="super calif")})
    dictionary = FakeDictionary({"super": "Excellent."})

    card = get_word_card("", quotes=quotes, dictionary=dictionary).unwrap()

    assert card.word == "super calif"
    assert card.definition == "Excellent."
    assert dictionary.calls == ["super"]


def test_missing_definition_still_returns_card() -> None:
    quotes = FakeQuoteSource({"jazz": _JAZZ})

    card = get_word_card("jazz", quotes=quotes, dictionary=FakeDictionary()).unwrap()

    assert card.word == "extraordinary"
    assert card.definition == ""


def test_all_terms_failing_is_not_found_not_service_error() -> None:
    quotes = FakeQuoteSource({})
    dictionary = FakeDictionary()

    result = get_word_card("noir, westerns", quotes=quotes, dictionary=dictionary)

    assert result.is_err()
    error = result.unwrap_err()
    assert error.kind == "not_found"
    assert "noir" in error.message and "westerns" in error.message
    assert dictionary.calls == []


def test_source_failure_is_service_error() -> None:
    quotes = FakeQuoteSource({"noir": None, "jazz": SourceError("HTTP error 502", status=502)})

    result = get_word_card("noir, jazz, space", quotes=quotes, dictionary=FakeDictionary())

    assert result.unwrap_err() == CardError(kind="service_error", message="HTTP error 502")
    # The failing term ends the request; later terms are not tried.
    assert quotes.calls == ["noir", "jazz"]


def test_identical_upstream_responses_give_identical_cards() -> None:
    def run() -> WordCard:
        quotes = FakeQuoteSource({"jazz": _JAZZ})
        dictionary = FakeDictionary({"extraordinary": "Very unusual."})
        return get_word_card("jazz", quotes=quotes, dictionary=dictionary).unwrap()

    assert run() == run()
