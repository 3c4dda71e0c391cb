"""
API routes for word cards, curated words and quota status.

Endpoints
---------
- `GET /api/quote?prefs=...`: quote-derived WordCard (404 / 500 on failure).
- `GET /api/word/curated`: a curated word with screenplay context.
- `GET /api/status`: STANDS4 configuration and daily usage.

The handlers are plain ``def`` functions; the upstream calls block, so
FastAPI runs them in its worker thread pool.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query, Request

from stickywords.api.errors import WordCardUnavailable
from stickywords.api.schemas import CuratedWord, ErrorResponse, QuotaStatus, WordCard
from stickywords.pipelines.service import WordService

router = APIRouter(prefix="/api", tags=["Words"])


def get_word_service(request: Request) -> WordService:
    """Return the service instance attached by the application factory."""
    service: WordService = request.app.state.word_service
    return service


@router.get(
    "/quote",
    response_model=WordCard,
    responses={404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    summary="Get a vocabulary word from a quote",
)
def get_quote(
    prefs: str = Query(
        default="",
        description="Search terms separated by commas or newlines",
    ),
    service: WordService = Depends(get_word_service),
) -> WordCard:
    """Fetch a quote for the first matching term and define its complex word."""
    result = service.word_card(prefs)
    if result.is_err():
        raise WordCardUnavailable(result.unwrap_err())
    return result.unwrap()


@router.get(
    "/word/curated",
    response_model=CuratedWord,
    summary="Get a curated word with screenplay context",
)
def get_curated(service: WordService = Depends(get_word_service)) -> CuratedWord:
    return service.curated_word()


@router.get("/status", response_model=QuotaStatus, summary="STANDS4 API usage")
def get_status(service: WordService = Depends(get_word_service)) -> QuotaStatus:
    return service.status()


__all__ = ["get_word_service", "router"]
