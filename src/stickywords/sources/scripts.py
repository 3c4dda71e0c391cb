"""STANDS4 scripts API: screenplays matching a search term."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from stickywords.core.contracts.curated import ScriptRecord
from stickywords.core.quota import RequestQuota
from stickywords.core.settings import DEFAULT_SCRIPTS_URL, get_logger

from .http import JsonFetcher, JsonHttpClient

logger = get_logger(__name__)


def normalize_scripts_payload(payload: Any) -> list[ScriptRecord]:
    """Decode ``results.result`` (one object or a list) into script records."""
    if not isinstance(payload, Mapping):
        return []
    results = payload.get("results")
    if not isinstance(results, Mapping):
        return []

    raw = results.get("result")
    items = raw if isinstance(raw, list) else [raw]

    records: list[ScriptRecord] = []
    for item in items:
        if not isinstance(item, Mapping):
            continue
        title = item.get("title")
        if not isinstance(title, str) or not title.strip():
            continue
        records.append(
            ScriptRecord(
                title=title.strip(),
                writer=str(item.get("writer") or ""),
                link=str(item.get("link") or ""),
                subtitle=str(item.get("subtitle") or ""),
            )
        )
    return records


@dataclass(slots=True)
class ScriptSource:
    """Search client for the STANDS4 scripts endpoint.

    A missing configuration or a spent quota returns no scripts (with a
    warning); transport failures propagate as ``SourceError``.
    """

    uid: str | None
    token: str | None
    base_url: str = DEFAULT_SCRIPTS_URL
    enabled: bool = True
    http: JsonFetcher = field(default_factory=JsonHttpClient)
    quota: RequestQuota | None = None

    @property
    def configured(self) -> bool:
        return bool(self.enabled and self.uid and self.token)

    def search(self, term: str) -> list[ScriptRecord]:
        if not self.configured:
            logger.warning("STANDS4 scripts API not configured")
            return []
        if self.quota is not None and not self.quota.try_acquire():
            logger.warning("Daily API limit reached")
            return []

        params = {
            "uid": str(self.uid),
            "tokenid": str(self.token),
            "term": term,
            "format": "json",
        }
        try:
            payload = self.http.get_json(self.base_url, params)
        except Exception:
            if self.quota is not None:
                self.quota.release()
            raise

        records = normalize_scripts_payload(payload)
        logger.debug("Found %d scripts for term %r", len(records), term)
        return records


__all__ = ["ScriptSource", "normalize_scripts_payload"]
