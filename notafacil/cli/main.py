"""
notafacil CLI.

Usage:
    notafacil --help

    # Server
    notafacil server start                      # Start FastAPI server
    notafacil server start --reload             # Start with auto-reload

    # Database migrations
    notafacil db upgrade                        # Upgrade to latest
    notafacil db current                        # Show current revision

    # Notes
    notafacil notes export -o notes.json        # Export every note
    notafacil notes import notes.json -m update # Import, overwriting existing notes
    notafacil notes search plan --scope both    # Search titles and content

    # Health and system info
    notafacil health check                      # Local check (no server)
    notafacil health status                     # Backend readiness (requires server)
    notafacil system info                       # Show app info

Options:
    --verbose, -v     INFO level logging
    --debug, -d       DEBUG level logging
"""

import typer
from rich.console import Console

from notafacil.backend.core.config import find_project_root
from notafacil.cli.commands import db_app, health_app, notes_app, server_app, system_app

app = typer.Typer(
    name="notafacil",
    help="notafacil CLI - server, database migrations, note import/export and health checks.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

console = Console()

app.add_typer(server_app, name="server")
app.add_typer(db_app, name="db")
app.add_typer(notes_app, name="notes")
app.add_typer(health_app, name="health")
app.add_typer(system_app, name="system")


def _validate_project_root() -> None:
    """Exit with a clear message unless run inside a project with a .project_root marker."""
    try:
        find_project_root()
    except RuntimeError:
        console.print("[red]Error: .project_root not found. Run from the project directory.[/red]")
        raise typer.Exit(1)


@app.callback()
def main(
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose output (INFO level logging)",
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        "-d",
        help="Enable debug mode (DEBUG level logging)",
    ),
) -> None:
    """
    notafacil CLI.

    Built with Typer for type-safe commands and Rich for formatted output.
    """
    _validate_project_root()

    from notafacil.backend.core.logging import setup_logging

    if debug:
        setup_logging(level="DEBUG", format_type="console")
        console.print("[dim]Debug mode enabled[/dim]")
    elif verbose:
        setup_logging(level="INFO", format_type="console")
    else:
        setup_logging(level="WARNING", format_type="console")


if __name__ == "__main__":
    app()
