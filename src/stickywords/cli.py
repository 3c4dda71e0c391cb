# src/stickywords/cli.py
"""
Sticky Words Command Line Interface (CLI).

This module implements the terminal front-end using `typer` and `rich`. It is
a thin presentation layer over :class:`WordService`; all fetching and
extraction happens in the pipelines.

Commands
--------
- ``word``: fetch a quote for your interests and show its complex word.
- ``curated``: show a word from the built-in list with screenplay context.
- ``practice``: interactive session (new word / favorite / quit) with stats.
- ``status``: STANDS4 credentials and today's request usage.

Usage
-----
    $ stickywords word "jazz, space travel"
    $ stickywords practice
"""

from __future__ import annotations

from typing import Annotated

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.prompt import Prompt
from rich.table import Table

from stickywords.core.contracts.curated import CuratedWord
from stickywords.core.contracts.word_card import WordCard
from stickywords.core.progress import LearnerProgress
from stickywords.pipelines.service import WordService

# Ensure STANDS4 credentials from .env are visible before settings are read.
load_dotenv()

app = typer.Typer(
    help="Sticky Words: learn sophisticated vocabulary from quotes and screenplays.",
    rich_markup_mode="markdown",
)
console = Console()


def _build_service() -> WordService:
    """Construct the service from the environment (patched in tests)."""
    return WordService.from_settings()


# --------------------------------------------------------------------------- #
# Rendering
# --------------------------------------------------------------------------- #


def _render_card(card: WordCard) -> None:
    body = f"[bold cyan]{escape(card.word)}[/bold cyan]\n\n"
    body += escape(card.definition) if card.definition else "[dim]No definition found.[/dim]"
    body += f'\n\n[italic]"{escape(card.quote)}"[/italic]'
    attribution = ", ".join(part for part in (card.character, card.title) if part)
    if attribution:
        body += f"\n[dim]- {escape(attribution)}[/dim]"
    console.print(Panel(body, title="Word of the Quote", border_style="cyan"))


def _render_curated(word: CuratedWord, *, favorite: bool = False) -> None:
    heart = " [red]♥[/red]" if favorite else ""
    body = f"[bold magenta]{escape(word.word)}[/bold magenta]{heart}"
    if word.pronunciation:
        body += f"  [dim]/{escape(word.pronunciation)}/[/dim]"
    body += f"\n\n{escape(word.definition)}"
    if word.example:
        body += f'\n\n[italic]"{escape(word.example)}"[/italic]'
    if word.source:
        body += f"\n[dim]{escape(word.source)}[/dim]"
    console.print(Panel(body, title="Curated Word", border_style="magenta"))


def _render_stats(progress: LearnerProgress) -> None:
    stats = progress.stats()
    table = Table(title="Session Stats")
    table.add_column("Words learned", justify="right")
    table.add_column("Favorites", justify="right")
    table.add_column("Streak", justify="right")
    table.add_row(str(stats["words_learned"]), str(stats["favorites"]), str(stats["streak"]))
    console.print(table)


# --------------------------------------------------------------------------- #
# Commands
# --------------------------------------------------------------------------- #


@app.command()  # type: ignore[misc]
def word(
    prefs: Annotated[
        str,
        typer.Argument(help="Interests to search quotes for, separated by commas."),
    ] = "",
) -> None:
    """Fetch a quote matching your interests and define its complex word."""
    service = _build_service()

    with console.status("[cyan]Searching quotes...", spinner="dots"):
        result = service.word_card(prefs)

    if result.is_err():
        error = result.unwrap_err()
        if error.kind == "not_found":
            console.print(f"[bold yellow]No quote found.[/bold yellow] {escape(error.message)}")
        else:
            console.print(f"[bold red]❌ Service Error:[/bold red] {escape(error.message)}")
        raise typer.Exit(code=1)

    _render_card(result.unwrap())


@app.command()  # type: ignore[misc]
def curated() -> None:
    """Show one word from the curated list, paired with a screenplay if possible."""
    service = _build_service()
    with console.status("[magenta]Looking for scripts...", spinner="dots"):
        chosen = service.curated_word()
    _render_curated(chosen)


@app.command()  # type: ignore[misc]
def practice() -> None:
    """
    Interactive practice session.

    Press **n** for a new word, **f** to toggle the current word as favorite,
    and **q** to quit and see your stats.
    """
    service = _build_service()
    progress = LearnerProgress()

    current = service.curated_word(progress)
    _render_curated(current)

    while True:
        choice = Prompt.ask(
            "New word (n), favorite (f), quit (q)", choices=["n", "f", "q"], default="n"
        )
        if choice == "q":
            break
        if choice == "f":
            index = progress.used[-1]
            added = progress.toggle_favorite(index)
            console.print("Added to favorites" if added else "Removed from favorites")
            continue
        current = service.curated_word(progress)
        _render_curated(current, favorite=progress.is_favorite(progress.used[-1]))

    _render_stats(progress)


@app.command()  # type: ignore[misc]
def status() -> None:
    """Show whether the STANDS4 API is configured and today's request usage."""
    service = _build_service()
    info = service.status()

    table = Table(title="STANDS4 API Status")
    table.add_column("Field")
    table.add_column("Value")
    table.add_row("Configured", "✅ yes" if info.configured else "❌ no")
    table.add_row("Scripts enabled", "yes" if info.enabled else "no")
    table.add_row("Requests used", f"{info.request_count}/{info.daily_limit}")
    table.add_row("Remaining today", str(info.remaining_requests))
    console.print(table)

    if not info.configured:
        console.print(
            Panel(
                "Set [bold]STANDS4_UID[/bold] and [bold]STANDS4_API_KEY[/bold] in your "
                "environment or .env file.\nGet free credentials at https://www.stands4.com/",
                title="API Setup Required",
                border_style="yellow",
            )
        )


if __name__ == "__main__":
    app()
