"""Contracts for curated vocabulary words and their screenplay context."""

from __future__ import annotations

from pydantic import BaseModel, Field


class ScriptRecord(BaseModel):
    """One screenplay returned by the STANDS4 scripts API."""

    title: str = ""
    writer: str = ""
    link: str = ""
    subtitle: str = ""


class ScriptContext(BaseModel):
    """The screenplay a curated word was paired with."""

    title: str
    writer: str = ""
    link: str = ""
    subtitle: str = ""

    @classmethod
    def from_record(cls, record: ScriptRecord) -> ScriptContext:
        return cls(
            title=record.title,
            writer=record.writer,
            link=record.link,
            subtitle=record.subtitle,
        )


class CuratedWord(BaseModel):
    """An entry of the built-in word list, optionally enriched with a script."""

    word: str
    pronunciation: str = ""
    definition: str
    example: str = ""
    source: str = ""
    category: str = ""
    script_context: ScriptContext | None = Field(
        default=None, description="Screenplay the word was matched with, if any"
    )


__all__ = ["CuratedWord", "ScriptContext", "ScriptRecord"]
