# -----------------------------------------------------------------------------
# Minimal JSON-over-HTTP client shared by the quote, scripts and dictionary
# sources.
#
# The implementation uses only the Python standard library (`urllib.request`).
# Unit tests either hand a fake object with a `get_json()` method to the
# sources, or patch the internal `_get()` method so that no real HTTP calls
# are made during CI.
#
# Every failure (network, non-2xx status, undecodable body) is raised as a
# `SourceError`; callers decide whether that is fatal or just means "no data".
# -----------------------------------------------------------------------------
from __future__ import annotations

import http.client
import json
import urllib.error
import urllib.parse
import urllib.request
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Protocol

USER_AGENT = "StickyWords/1.0"


class SourceError(RuntimeError):
    """An upstream API could not be reached or returned an unusable response."""

    def __init__(self, message: str, *, status: int | None = None) -> None:
        super().__init__(message)
        self.status = status


class QuotaExceededError(SourceError):
    """The daily STANDS4 request budget is used up."""


class JsonFetcher(Protocol):
    """Anything that can GET a URL and return decoded JSON."""

    def get_json(self, url: str, params: Mapping[str, str] | None = None) -> Any: ...


@dataclass(slots=True)
class JsonHttpClient:
    """Synchronous GET-and-decode client.

    Parameters
    ----------
    timeout_seconds:
        Network timeout for each request.
    user_agent:
        Value of the ``User-Agent`` header; some upstreams reject blank agents.
    """

    timeout_seconds: float = 10.0
    user_agent: str = USER_AGENT

    def get_json(self, url: str, params: Mapping[str, str] | None = None) -> Any:
        """GET ``url`` with ``params`` as the query string and decode the body.

        Raises
        ------
        SourceError
            On transport errors, non-2xx statuses, or a body that is not JSON.
        """
        if params:
            url = f"{url}?{urllib.parse.urlencode(params)}"
        headers = {"Accept": "application/json", "User-Agent": self.user_agent}
        return self._get(url=url, headers=headers)

    def _get(self, *, url: str, headers: Mapping[str, str]) -> Any:
        """Perform the request; the main seam for unit tests."""
        request = urllib.request.Request(url=url, headers=dict(headers), method="GET")

        try:
            with urllib.request.urlopen(request, timeout=self.timeout_seconds) as resp:
                raw = resp.read()
        except urllib.error.HTTPError as exc:
            raise SourceError(f"HTTP error {exc.code}: {exc.reason}", status=exc.code) from exc
        except urllib.error.URLError as exc:
            raise SourceError(f"Network error: {exc.reason}") from exc
        except TimeoutError as exc:
            raise SourceError(f"Request timed out after {self.timeout_seconds}s") from exc
        except (OSError, http.client.HTTPException) as exc:
            # Dropped or truncated connections surface from getresponse()/read().
            raise SourceError(f"Connection error: {exc!r}") from exc

        try:
            return json.loads(raw.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as exc:
            raise SourceError("Failed to decode response as JSON") from exc


__all__ = ["JsonFetcher", "JsonHttpClient", "QuotaExceededError", "SourceError", "USER_AGENT"]
