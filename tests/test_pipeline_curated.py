"""Tests for curated words and their screenplay enrichment."""

from __future__ import annotations

import random

from stickywords.core.contracts.curated import CuratedWord, ScriptRecord
from stickywords.core.progress import LearnerProgress
from stickywords.pipelines.curated import get_curated_word, search_terms_for
from stickywords.sources.http import SourceError

_WORD = CuratedWord(
    word="Laconic",
    pronunciation="luh-KON-ik",
    definition="Using very few words.",
    example="His laconic reply silenced the room.",
    source="Westerns",
    category="western",
)


class FakeScripts:
    def __init__(
        self,
        results: dict[str, list[ScriptRecord] | Exception] | None = None,
        *,
        configured: bool = True,
    ) -> None:
        self.results = results or {}
        self._configured = configured
        self.calls: list[str] = []

    @property
    def configured(self) -> bool:
        return self._configured

    def search(self, term: str) -> list[ScriptRecord]:
        self.calls.append(term)
        result = self.results.get(term, [])
        if isinstance(result, Exception):
            raise result
        return result


def test_search_terms_go_from_specific_to_generic() -> None:
    assert search_terms_for(_WORD) == ["laconic", "western", "drama", "movie"]


def test_first_term_with_scripts_wins_and_enriches_word() -> None:
    scripts = FakeScripts(
        {"western": [ScriptRecord(title="Unforgiven", writer="David Webb Peoples")]}
    )

    word = get_curated_word(scripts, words=[_WORD], rng=random.Random(0))

    assert scripts.calls == ["laconic", "western"]
    assert word.script_context is not None
    assert word.script_context.title == "Unforgiven"
    assert word.source == 'Found in "Unforgiven" by David Webb Peoples'
    assert word.example.startswith(_WORD.example)
    assert 'scripts like "Unforgiven"' in word.example


def test_no_scripts_found_annotates_source() -> None:
    scripts = FakeScripts()

    word = get_curated_word(scripts, words=[_WORD])

    assert scripts.calls == ["laconic", "western", "drama", "movie"]
    assert word.source == "Westerns (No matching scripts found)"
    assert word.script_context is None


def test_unconfigured_scripts_source_is_not_queried() -> None:
    scripts = FakeScripts(configured=False)

    word = get_curated_word(scripts, words=[_WORD])

    assert scripts.calls == []
    assert word.source == "Westerns (Connect API for real script data)"


def test_scripts_api_failure_degrades_gracefully() -> None:
    scripts = FakeScripts({"laconic": SourceError("Network error: timed out")})

    word = get_curated_word(scripts, words=[_WORD])

    assert word.word == "Laconic"
    assert word.source == "Westerns (API temporarily unavailable)"


def test_curated_words_do_not_repeat_until_list_is_exhausted() -> None:
    words = [_WORD.model_copy(update={"word": f"word{i}"}) for i in range(3)]
    progress = LearnerProgress()
    scripts = FakeScripts(configured=False)
    rng = random.Random(7)

    seen = {
        get_curated_word(scripts, progress=progress, rng=rng, words=words).word for _ in range(3)
    }

    assert seen == {"word0", "word1", "word2"}
    assert progress.words_learned == 3
    assert progress.streak == 3


def test_base_word_list_is_not_mutated() -> None:
    scripts = FakeScripts({"laconic": [ScriptRecord(title="Shane", writer="A.B. Guthrie")]})
    get_curated_word(scripts, words=[_WORD])
    assert _WORD.script_context is None
    assert _WORD.source == "Westerns"
