"""
Note Commands.

Export, import and search notes directly against the configured database.
No running server is needed.
"""

import asyncio
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from notafacil.backend.core.database import dispose_engine, get_session_factory
from notafacil.backend.core.exceptions import ApplicationError
from notafacil.backend.core.logging import get_logger, log_with_source
from notafacil.backend.domain.note import Note
from notafacil.backend.repositories.note import SqlNoteRepository
from notafacil.backend.services.note_export import ExportNotesService
from notafacil.backend.services.note_import import ImportMode, ImportNotesService, ImportResult
from notafacil.backend.services.note_search import SearchNotesService, SearchScope

app = typer.Typer(help="Note export, import and search")
console = Console()
logger = get_logger(__name__)


def _split_ids(value: str | None) -> list[str]:
    if not value:
        return []
    return [part.strip() for part in value.split(",") if part.strip()]


@asynccontextmanager
async def note_repository() -> AsyncIterator[SqlNoteRepository]:
    """Yield a repository on a fresh session; commit on success, roll back on error."""
    try:
        async with get_session_factory()() as session:
            try:
                yield SqlNoteRepository(session)
                await session.commit()
            except Exception:
                await session.rollback()
                raise
    finally:
        await dispose_engine()


async def run_export(note_ids: list[str]) -> str:
    async with note_repository() as notes:
        return await ExportNotesService(notes).execute(note_ids=note_ids)


async def run_import(json_data: str, mode: ImportMode) -> ImportResult:
    async with note_repository() as notes:
        return await ImportNotesService(notes).execute(json_data, mode=mode)


async def run_search(text: str, tag_ids: list[str], scope: SearchScope) -> list[Note]:
    async with note_repository() as notes:
        return await SearchNotesService(notes).execute(search_text=text, tag_ids=tag_ids, scope=scope)


@app.command("export")
def export_notes(
    ids: Optional[str] = typer.Option(None, "--ids", help="Comma-separated note ids (default: all notes)"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write to this file instead of stdout"),
) -> None:
    """
    Export notes as a JSON document.

    Examples:
        notafacil notes export -o notes.json
        notafacil notes export --ids 1f0c...,9ab2...
    """
    try:
        document = asyncio.run(run_export(_split_ids(ids)))
    except ApplicationError as e:
        console.print(f"[red]Export failed: {e.message}[/red]")
        raise typer.Exit(1)

    if output is None:
        typer.echo(document)
        return

    output.write_text(document, encoding="utf-8")
    log_with_source(logger, "cli", "info", "Export written", path=str(output))
    console.print(f"[green]Export written to {output}[/green]")


@app.command("import")
def import_notes(
    file: Path = typer.Argument(..., exists=True, dir_okay=False, readable=True, help="Export document to import"),
    mode: ImportMode = typer.Option(ImportMode.SKIP, "--mode", "-m", help="What to do with notes that already exist"),
) -> None:
    """
    Import notes from an export document.

    The import is all-or-nothing: if any record is rejected, nothing is written.

    Examples:
        notafacil notes import notes.json
        notafacil notes import notes.json --mode update
    """
    json_data = file.read_text(encoding="utf-8")

    try:
        result = asyncio.run(run_import(json_data, mode))
    except ApplicationError as e:
        log_with_source(logger, "cli", "warning", "Import rejected", path=str(file), code=e.code)
        console.print(f"[red]Import failed: {e.message}[/red]")
        raise typer.Exit(1)

    table = Table(title=f"Import ({mode.value})", show_header=True)
    table.add_column("Imported", justify="right")
    table.add_column("Updated", justify="right")
    table.add_column("Skipped", justify="right")
    table.add_row(str(result.imported), str(result.updated), str(result.skipped))
    console.print(table)


@app.command("search")
def search_notes(
    text: str = typer.Argument("", help="Text to look for (case-insensitive)"),
    tags: Optional[str] = typer.Option(None, "--tags", "-t", help="Comma-separated tag ids"),
    scope: SearchScope = typer.Option(SearchScope.TITLE_ONLY, "--scope", "-s", help="Fields to search"),
) -> None:
    """
    Search notes and print them as a table.

    Examples:
        notafacil notes search proyecto --scope both
        notafacil notes search --tags 1f0c...
    """
    try:
        notes = asyncio.run(run_search(text, _split_ids(tags), scope))
    except ApplicationError as e:
        console.print(f"[red]Search failed: {e.message}[/red]")
        raise typer.Exit(1)

    if not notes:
        console.print("[yellow]No notes found[/yellow]")
        return

    table = Table(title=f"Notes ({len(notes)})", show_header=True)
    table.add_column("ID", style="dim")
    table.add_column("Title", style="cyan")
    table.add_column("Tags")
    table.add_column("Updated")
    for note in notes:
        table.add_row(
            note.id,
            note.title,
            ", ".join(note.tags) or "-",
            note.updated_at.strftime("%Y-%m-%d %H:%M"),
        )
    console.print(table)
