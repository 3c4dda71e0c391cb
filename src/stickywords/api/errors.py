"""Exceptions raised by routes and translated by the app's exception handlers."""

from __future__ import annotations

from stickywords.core.contracts.word_card import CardError

NOT_FOUND_MESSAGE = "No quote found."
SERVICE_ERROR_MESSAGE = "Failed to fetch quote"


class WordCardUnavailable(Exception):
    """Raised when the word-card pipeline returned an ``Err``."""

    def __init__(self, error: CardError) -> None:
        super().__init__(error.message)
        self.error = error

    @property
    def status_code(self) -> int:
        return 404 if self.error.kind == "not_found" else 500

    @property
    def public_message(self) -> str:
        return NOT_FOUND_MESSAGE if self.error.kind == "not_found" else SERVICE_ERROR_MESSAGE


__all__ = ["NOT_FOUND_MESSAGE", "SERVICE_ERROR_MESSAGE", "WordCardUnavailable"]
