"""Pydantic contracts shared by the sources, pipelines and API layers."""

from __future__ import annotations

from .curated import CuratedWord, ScriptContext, ScriptRecord
from .quote import QuoteRecord, normalize_quote_payload
from .word_card import CardError, CardErrorKind, WordCard

__all__ = [
    "CardError",
    "CardErrorKind",
    "CuratedWord",
    "QuoteRecord",
    "ScriptContext",
    "ScriptRecord",
    "WordCard",
    "normalize_quote_payload",
]
