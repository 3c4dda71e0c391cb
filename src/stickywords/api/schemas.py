"""
Request/response schemas for the Sticky Words HTTP API.

The success payloads reuse the core contracts (:class:`WordCard`,
:class:`CuratedWord`, :class:`QuotaStatus`) so the JSON shape is defined in
exactly one place. This module adds the error and health envelopes.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from stickywords.core.contracts.curated import CuratedWord
from stickywords.core.contracts.word_card import WordCard
from stickywords.core.quota import QuotaStatus


class ErrorResponse(BaseModel):
    """Body returned for 404/500 responses."""

    error: str = Field(description="Short, user-facing error message")
    detail: str | None = Field(default=None, description="Extra context, if any")


class HealthResponse(BaseModel):
    status: str = "ok"
    environment: str
    version: str


__all__ = ["CuratedWord", "ErrorResponse", "HealthResponse", "QuotaStatus", "WordCard"]
