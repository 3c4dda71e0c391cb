"""WordService: the configured sources behind the API and the CLI."""

from __future__ import annotations

import random
from dataclasses import dataclass, field

from stickywords.core.contracts.curated import CuratedWord
from stickywords.core.contracts.word_card import CardError, WordCard
from stickywords.core.progress import LearnerProgress
from stickywords.core.quota import DailyQuota, QuotaStatus
from stickywords.core.result import Result
from stickywords.core.settings import Settings, load_settings
from stickywords.sources.dictionary import DictionarySource
from stickywords.sources.http import JsonHttpClient
from stickywords.sources.quotes import QuoteSource
from stickywords.sources.scripts import ScriptSource

from .curated import get_curated_word
from .word_card import get_word_card


@dataclass(slots=True)
class WordService:
    """Holds one instance of each source plus the shared request quota."""

    quotes: QuoteSource
    dictionary: DictionarySource
    scripts: ScriptSource
    quota: DailyQuota
    rng: random.Random = field(default_factory=random.Random)

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> WordService:
        """Wire the sources from configuration."""
        settings = settings or load_settings()
        http = JsonHttpClient(timeout_seconds=settings.http_timeout_seconds)
        quota = DailyQuota(
            settings.daily_request_limit,
            configured=settings.stands4_configured,
            enabled=settings.scripts_enabled,
        )
        return cls(
            quotes=QuoteSource(
                uid=settings.stands4_uid,
                token=settings.stands4_token,
                base_url=settings.quotes_url,
                http=http,
                quota=quota,
            ),
            dictionary=DictionarySource(base_url=settings.dictionary_url, http=http),
            scripts=ScriptSource(
                uid=settings.stands4_uid,
                token=settings.stands4_token,
                base_url=settings.scripts_url,
                enabled=settings.scripts_enabled,
                http=http,
                quota=quota,
            ),
            quota=quota,
        )

    def word_card(self, raw_prefs: str | None) -> Result[WordCard, CardError]:
        return get_word_card(raw_prefs, quotes=self.quotes, dictionary=self.dictionary)

    def curated_word(self, progress: LearnerProgress | None = None) -> CuratedWord:
        return get_curated_word(self.scripts, progress=progress, rng=self.rng)

    def status(self) -> QuotaStatus:
        return self.quota.status()


__all__ = ["WordService"]
