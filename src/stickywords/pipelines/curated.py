"""
Curated-word pipeline: a word from the built-in list, paired with a screenplay.

The word is picked without repeats (via :class:`LearnerProgress`), then the
scripts API is searched with progressively broader terms: the word itself,
its category, and finally the generic ``"drama"`` and ``"movie"``. The first
term that returns any scripts wins and one of them is chosen at random.

Script context is an enrichment only. When it is unavailable the word is
still returned, with a note appended to its ``source``.
"""

from __future__ import annotations

import random
from collections.abc import Sequence
from typing import Protocol

from stickywords.core.contracts.curated import CuratedWord, ScriptContext, ScriptRecord
from stickywords.core.progress import LearnerProgress
from stickywords.core.settings import get_logger
from stickywords.core.word_list import CURATED_WORDS
from stickywords.sources.http import SourceError

logger = get_logger(__name__)

FALLBACK_SEARCH_TERMS: tuple[str, ...] = ("drama", "movie")


class ScriptSearcher(Protocol):
    @property
    def configured(self) -> bool: ...

    def search(self, term: str) -> list[ScriptRecord]: ...


def search_terms_for(word: CuratedWord) -> list[str]:
    """Return the ordered search strategy for ``word``."""
    terms = [word.word.lower(), word.category, *FALLBACK_SEARCH_TERMS]
    return [t for t in terms if t]


def _find_scripts(word: CuratedWord, scripts: ScriptSearcher) -> list[ScriptRecord]:
    for term in search_terms_for(word):
        found = scripts.search(term)
        if found:
            logger.info("Found scripts using term %r", term)
            return found
    return []


def get_curated_word(
    scripts: ScriptSearcher,
    *,
    progress: LearnerProgress | None = None,
    rng: random.Random | None = None,
    words: Sequence[CuratedWord] = CURATED_WORDS,
) -> CuratedWord:
    """Pick the next curated word and try to attach a screenplay to it."""
    rng = rng or random.Random()
    progress = progress if progress is not None else LearnerProgress()

    index = progress.next_index(len(words), rng)
    progress.record_view()
    base = words[index]

    if not scripts.configured:
        note = "(Connect API for real script data)"
        return base.model_copy(update={"source": f"{base.source} {note}"})

    try:
        found = _find_scripts(base, scripts)
    except SourceError as exc:
        logger.warning("Scripts API error, serving %r without context: %s", base.word, exc)
        return base.model_copy(update={"source": f"{base.source} (API temporarily unavailable)"})

    if not found:
        return base.model_copy(update={"source": f"{base.source} (No matching scripts found)"})

    script = rng.choice(found)
    logger.info("Enhanced word %r with script context from %r", base.word, script.title)
    return base.model_copy(
        update={
            "script_context": ScriptContext.from_record(script),
            "source": f'Found in "{script.title}" by {script.writer}',
            "example": (
                f"{base.example} This sophisticated word might appear in scripts "
                f'like "{script.title}".'
            ),
        }
    )


__all__ = ["FALLBACK_SEARCH_TERMS", "get_curated_word", "search_terms_for"]
