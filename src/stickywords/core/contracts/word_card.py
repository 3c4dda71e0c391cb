"""WordCard, the final output of the quote pipeline, and its error payload."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from .quote import QuoteRecord

CardErrorKind = Literal["not_found", "service_error"]


class WordCard(BaseModel):
    """A vocabulary word shown together with the quote it came from."""

    model_config = ConfigDict(frozen=True)

    word: str = Field(description="Extracted word or two-word phrase")
    definition: str = Field(default="", description="Dictionary definition, may be empty")
    quote: str = Field(default="", description="Full quote text")
    character: str = Field(default="", description="Speaker of the quote")
    title: str = Field(default="", description="Title of the source work")

    @classmethod
    def from_quote(cls, quote: QuoteRecord, *, word: str, definition: str) -> WordCard:
        """Assemble a card from a normalized quote and the extraction output."""
        return cls(
            word=word,
            definition=definition,
            quote=quote.text,
            character=quote.speaker,
            title=quote.source_title,
        )


@dataclass(frozen=True, slots=True)
class CardError:
    """Why no WordCard could be produced.

    ``not_found`` means no supplied term matched a quote (user-correctable);
    ``service_error`` means the quote source could not be reached or parsed.
    """

    kind: CardErrorKind
    message: str

    @classmethod
    def not_found(cls, terms: list[str]) -> CardError:
        shown = ", ".join(repr(t) for t in terms)
        return cls(kind="not_found", message=f"No quote found for terms: {shown}")

    @classmethod
    def service_error(cls, message: str) -> CardError:
        return cls(kind="service_error", message=message)


__all__ = ["CardError", "CardErrorKind", "WordCard"]
