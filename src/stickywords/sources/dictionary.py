"""Definition lookups against the free dictionaryapi.dev service."""

from __future__ import annotations

import urllib.parse
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from stickywords.core.settings import DEFAULT_DICTIONARY_URL, get_logger

from .http import JsonFetcher, JsonHttpClient, SourceError

logger = get_logger(__name__)


def extract_first_definition(payload: Any) -> str:
    """Return ``payload[0].meanings[0].definitions[0].definition`` or ``""``.

    Any missing level, or a level of the wrong type, yields ``""``.
    """
    if not isinstance(payload, list) or not payload:
        return ""
    entry = payload[0]
    if not isinstance(entry, Mapping):
        return ""

    meanings = entry.get("meanings")
    if not isinstance(meanings, list) or not meanings or not isinstance(meanings[0], Mapping):
        return ""

    definitions = meanings[0].get("definitions")
    if (
        not isinstance(definitions, list)
        or not definitions
        or not isinstance(definitions[0], Mapping)
    ):
        return ""

    definition = definitions[0].get("definition")
    return definition.strip() if isinstance(definition, str) else ""


@dataclass(slots=True)
class DictionarySource:
    """Lookup-by-word client. Failures never escape; they yield ``""``."""

    base_url: str = DEFAULT_DICTIONARY_URL
    http: JsonFetcher = field(default_factory=JsonHttpClient)

    def lookup_definition(self, term: str) -> str:
        """Return the first definition of ``term``, or ``""`` if there is none."""
        term = term.strip()
        if not term:
            return ""

        url = f"{self.base_url.rstrip('/')}/{urllib.parse.quote(term)}"
        try:
            payload = self.http.get_json(url)
        except SourceError as exc:
            logger.warning("Dictionary lookup for %r failed: %s", term, exc)
            return ""

        definition = extract_first_definition(payload)
        if not definition:
            logger.info("No definition found for %r", term)
        return definition


__all__ = ["DictionarySource", "extract_first_definition"]
