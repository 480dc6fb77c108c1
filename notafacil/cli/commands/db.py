"""
Database Commands.

Commands for database migrations using Alembic.
"""

import subprocess
import sys
from pathlib import Path

import typer
from rich.console import Console

from notafacil.backend.core.config import find_project_root

app = typer.Typer(help="Database migration commands")
console = Console()

ALEMBIC_INI = Path(__file__).resolve().parents[2] / "backend" / "migrations" / "alembic.ini"


def _check_alembic() -> None:
    """Check that alembic.ini exists."""
    if not ALEMBIC_INI.exists():
        console.print(f"[red]Error: {ALEMBIC_INI} not found[/red]")
        raise typer.Exit(1)


def _run_alembic(args: list[str]) -> None:
    """Run an alembic command from the project root."""
    cmd = [sys.executable, "-m", "alembic", "-c", str(ALEMBIC_INI)] + args
    result = subprocess.run(cmd, cwd=find_project_root())
    if result.returncode != 0:
        raise typer.Exit(result.returncode)


@app.command()
def upgrade(
    revision: str = typer.Option("head", "--revision", "-r", help="Target revision"),
) -> None:
    """
    Upgrade database to a revision.

    Examples:
        notafacil db upgrade
        notafacil db upgrade -r 0001
    """
    _check_alembic()
    console.print(f"[bold]Upgrading database to revision: {revision}[/bold]\n")
    _run_alembic(["upgrade", revision])
    console.print("\n[green]Upgrade completed[/green]")


@app.command()
def downgrade(
    revision: str = typer.Option(..., "--revision", "-r", help="Target revision"),
) -> None:
    """
    Downgrade database to a revision.

    Examples:
        notafacil db downgrade --revision -1
        notafacil db downgrade --revision base
    """
    _check_alembic()
    console.print(f"[bold]Downgrading database to revision: {revision}[/bold]\n")
    _run_alembic(["downgrade", revision])
    console.print("\n[green]Downgrade completed[/green]")


@app.command()
def current() -> None:
    """Show current database revision."""
    _check_alembic()
    console.print("[bold]Current database revision:[/bold]\n")
    _run_alembic(["current"])


@app.command()
def history() -> None:
    """Show migration history."""
    _check_alembic()
    console.print("[bold]Migration history:[/bold]\n")
    _run_alembic(["history", "--verbose"])


@app.command()
def revision(
    message: str = typer.Option(..., "--message", "-m", help="Migration message"),
    autogenerate: bool = typer.Option(False, "--autogenerate", help="Diff models against the database"),
) -> None:
    """
    Create a new migration file.

    Examples:
        notafacil db revision -m "add pinned flag" --autogenerate
    """
    _check_alembic()
    console.print(f"[bold]Creating migration: {message}[/bold]\n")
    args = ["revision", "-m", message]
    if autogenerate:
        args.append("--autogenerate")
    _run_alembic(args)
    console.print("\n[green]Migration created[/green]")
