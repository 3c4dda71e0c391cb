from __future__ import annotations

from .dictionary import DictionarySource
from .http import JsonFetcher, JsonHttpClient, QuotaExceededError, SourceError
from .quotes import QuoteSource
from .scripts import ScriptSource

__all__ = [
    "DictionarySource",
    "JsonFetcher",
    "JsonHttpClient",
    "QuotaExceededError",
    "QuoteSource",
    "ScriptSource",
    "SourceError",
]
