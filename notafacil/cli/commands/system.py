"""
System Commands.

Commands for system information and configuration.
"""

from typing import Any, Optional

import typer
from pydantic import BaseModel
from rich.console import Console
from rich.panel import Panel
from rich.tree import Tree

from notafacil.backend.core.config import get_app_config

app = typer.Typer(help="System information commands")
console = Console()

SECTIONS = ("application", "database", "logging", "features", "observability")


@app.command()
def info() -> None:
    """
    Display application information.

    Shows app name, version, environment and description.
    """
    try:
        app_settings = get_app_config().application
    except Exception as e:
        console.print(f"[red]Error loading configuration: {e}[/red]")
        raise typer.Exit(1)

    console.print(Panel(
        f"[bold]{app_settings.name}[/bold]\n"
        f"Version: {app_settings.version}\n"
        f"Environment: {app_settings.environment}\n"
        f"Description: {app_settings.description}",
        title="Application Info",
    ))


@app.command()
def config(
    section: Optional[str] = typer.Argument(None, help=f"Config section to show ({', '.join(SECTIONS)})"),
) -> None:
    """
    Display configuration settings.

    Shows all configuration or a specific section. Secrets are never shown.
    """
    if section and section not in SECTIONS:
        console.print(f"[red]Unknown section: {section}[/red]")
        console.print(f"Available sections: {', '.join(SECTIONS)}")
        raise typer.Exit(1)

    try:
        app_config = get_app_config()
    except Exception as e:
        console.print(f"[red]Error loading configuration: {e}[/red]")
        raise typer.Exit(1)

    for name in (section,) if section else SECTIONS:
        _display_config_section(name, getattr(app_config, name))
        console.print()


def _display_config_section(name: str, data: BaseModel) -> None:
    """Display a configuration section as a tree."""
    tree = Tree(f"[bold cyan]{name}[/bold cyan]")

    def add_items(parent: Tree, items: dict[str, Any]) -> None:
        for key, value in items.items():
            if isinstance(value, dict):
                branch = parent.add(f"[cyan]{key}[/cyan]")
                add_items(branch, value)
            else:
                parent.add(f"[cyan]{key}[/cyan]: {value}")

    add_items(tree, data.model_dump())
    console.print(tree)


@app.command()
def version() -> None:
    """Display version information."""
    try:
        console.print(f"[bold]{get_app_config().application.version}[/bold]")
    except Exception:
        console.print("[yellow]unknown[/yellow]")
