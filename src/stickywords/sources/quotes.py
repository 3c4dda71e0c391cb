"""STANDS4 quotes API: one search call per term, normalized to QuoteRecord."""

from __future__ import annotations

from dataclasses import dataclass, field

from stickywords.core.contracts.quote import QuoteRecord, normalize_quote_payload
from stickywords.core.quota import RequestQuota
from stickywords.core.settings import DEFAULT_QUOTES_URL, get_logger

from .http import JsonFetcher, JsonHttpClient, QuotaExceededError, SourceError

logger = get_logger(__name__)


@dataclass(slots=True)
class QuoteSource:
    """Search-by-term client for the STANDS4 quotes endpoint.

    Parameters
    ----------
    uid, token:
        STANDS4 account credentials. Searching without them raises
        :class:`SourceError`.
    quota:
        Optional daily request budget, shared with the scripts source.
    """

    uid: str | None
    token: str | None
    base_url: str = DEFAULT_QUOTES_URL
    http: JsonFetcher = field(default_factory=JsonHttpClient)
    quota: RequestQuota | None = None

    @property
    def configured(self) -> bool:
        return bool(self.uid and self.token)

    def search(self, term: str) -> QuoteRecord | None:
        """Query the quotes API once for ``term``.

        Returns
        -------
        QuoteRecord | None
            The first usable quote, or ``None`` if the response holds none.

        Raises
        ------
        SourceError
            If the source is not configured, the quota is spent, or the call fails.
        """
        if not self.configured:
            raise SourceError("STANDS4 credentials are not configured")
        if self.quota is not None and not self.quota.try_acquire():
            raise QuotaExceededError("Daily STANDS4 request limit reached")

        params = {
            "uid": str(self.uid),
            "tokenid": str(self.token),
            "search": term,
            "format": "json",
        }
        try:
            payload = self.http.get_json(self.base_url, params)
        except Exception:
            if self.quota is not None:
                self.quota.release()
            raise

        record = normalize_quote_payload(payload)
        if record is None:
            logger.debug("No usable quote in response for term %r", term)
        return record


__all__ = ["QuoteSource"]
