"""QuoteRecord and the normalization of STANDS4 quote payloads.

The quotes API is loose about its response shape. Observed variants::

    {"result": {"quote": "...", "author": "..."}}
    {"result": [{"quote": "..."}, ...]}
    {"results": {"result": {"quote": "..."}}}
    {"results": {"result": [{"quote": "..."}, ...]}}

Screenplay-flavoured entries use ``line``/``character``/``script`` instead of
``quote``/``author``/``title``. :func:`normalize_quote_payload` tries each
shape in a fixed order and fails closed: anything it does not recognise, or a
record without quote text, is reported as "no result" (``None``).
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class QuoteRecord(BaseModel):
    """One quote as returned by the quote source, after normalization."""

    model_config = ConfigDict(frozen=True)

    text: str = Field(default="", description="The quote itself")
    speaker: str = Field(default="", description="Author or character who said it")
    source_title: str = Field(default="", description="Work the quote comes from")


def _first_text(item: Mapping[str, Any], *keys: str) -> str:
    """Return the first non-blank string value found under ``keys``."""
    for key in keys:
        value = item.get(key)
        if isinstance(value, str) and value.strip():
            return value.strip()
    return ""


def _select_item(payload: Mapping[str, Any]) -> Any:
    item = payload.get("result")
    if not item:
        results = payload.get("results")
        item = results.get("result") if isinstance(results, Mapping) else None
    if isinstance(item, list):
        item = item[0] if item else None
    return item


def normalize_quote_payload(payload: Any) -> QuoteRecord | None:
    """Decode a raw quotes-API payload into a :class:`QuoteRecord`.

    Parameters
    ----------
    payload:
        The decoded JSON body, of any shape.

    Returns
    -------
    QuoteRecord | None
        The record, or ``None`` when the payload holds no usable quote.
    """
    if not isinstance(payload, Mapping):
        return None

    item = _select_item(payload)
    if not isinstance(item, Mapping):
        return None

    text = _first_text(item, "quote", "line")
    if not text:
        return None

    return QuoteRecord(
        text=text,
        speaker=_first_text(item, "author", "character"),
        source_title=_first_text(item, "title", "script"),
    )


__all__ = ["QuoteRecord", "normalize_quote_payload"]
