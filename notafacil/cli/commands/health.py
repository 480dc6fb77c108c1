"""
Health Check Commands.

Commands for checking backend health and status.
"""

import asyncio

import httpx
import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from notafacil.cli.client import APIClient

app = typer.Typer(help="Health check commands")
console = Console()


def _status_color(status: str) -> str:
    if status == "healthy":
        return "green"
    if status == "unhealthy":
        return "red"
    return "yellow"


@app.command()
def status(
    detailed: bool = typer.Option(False, "--detailed", "-d", help="Show detailed status"),
) -> None:
    """
    Check backend readiness (requires running server).

    Examples:
        notafacil health status
        notafacil health status -d
    """
    asyncio.run(_status(detailed))


async def _status(detailed: bool) -> None:
    client = APIClient()

    try:
        response = await client.get("/health/detailed" if detailed else "/health/ready")
    except httpx.ConnectError:
        console.print("[red]Error: Cannot connect to backend[/red]")
        console.print("[dim]Is the server running? Start with: notafacil server start[/dim]")
        raise typer.Exit(1)
    except httpx.HTTPError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)
    finally:
        await client.close()

    if response.status_code not in (200, 503):
        console.print(f"[red]Unexpected response: {response.status_code}[/red]")
        raise typer.Exit(1)

    data = response.json()
    # 503 bodies from /health/ready are wrapped in FastAPI's "detail"
    data = data.get("detail", data)
    _display_health(data, detailed)

    if response.status_code == 503 or data.get("status") != "healthy":
        raise typer.Exit(1)


def _display_health(data: dict, detailed: bool) -> None:
    """Display health check results."""
    status = data.get("status", "unknown")

    if detailed and "checks" in data:
        table = Table(title="Health Status", show_header=True)
        table.add_column("Component", style="cyan")
        table.add_column("Status")
        table.add_column("Details")

        for component, check_data in data.get("checks", {}).items():
            check_status = check_data.get("status", "unknown")
            color = _status_color(check_status)

            details = []
            if "latency_ms" in check_data:
                details.append(f"latency: {check_data['latency_ms']}ms")
            if "error" in check_data:
                details.append(f"error: {check_data['error']}")

            table.add_row(
                component,
                f"[{color}]{check_status}[/{color}]",
                ", ".join(details) if details else "-",
            )

        console.print(table)

        if "application" in data:
            app_info = data["application"]
            console.print(f"\n[dim]Application: {app_info.get('name', 'N/A')} v{app_info.get('version', 'N/A')}[/dim]")
            console.print(f"[dim]Environment: {app_info.get('environment', 'N/A')}[/dim]")
    else:
        color = _status_color(status)
        console.print(Panel(f"[{color}]{status.upper()}[/{color}]", title="Backend Status"))


@app.command()
def ping() -> None:
    """
    Check that the backend answers on /health.

    Examples:
        notafacil health ping
    """
    asyncio.run(_ping())


async def _ping() -> None:
    client = APIClient()

    try:
        response = await client.get("/health")
    except httpx.ConnectError:
        console.print("[red]✗ Backend is not reachable[/red]")
        raise typer.Exit(1)
    except httpx.HTTPError as e:
        console.print(f"[red]✗ Error: {e}[/red]")
        raise typer.Exit(1)
    finally:
        await client.close()

    if response.status_code == 200:
        console.print("[green]✓ Backend is reachable[/green]")
    else:
        console.print(f"[yellow]Backend responded with status {response.status_code}[/yellow]")


@app.command()
def check() -> None:
    """
    Check the application locally (config, secrets, app factory).

    Does NOT require a running server.

    Examples:
        notafacil health check
    """
    console.print("[bold]Checking application health...[/bold]\n")

    checks: list[tuple[str, bool, str | None]] = []

    try:
        from notafacil.backend.core.config import get_app_config

        app_config = get_app_config()
        checks.append(("YAML configuration", True, f"App: {app_config.application.name}"))
    except Exception as e:
        checks.append(("YAML configuration", False, str(e)))

    try:
        from notafacil.backend.core.config import get_database_url

        url = get_database_url()
        checks.append(("Database URL", True, url.split("://", 1)[0]))
    except Exception as e:
        checks.append(("Database URL", False, str(e)))

    try:
        from notafacil.backend.main import create_app

        fastapi_app = create_app()
        checks.append(("FastAPI application", True, f"Title: {fastapi_app.title}"))
    except Exception as e:
        checks.append(("FastAPI application", False, str(e)))

    table = Table(title="Health Check Results", show_header=True)
    table.add_column("Check", style="cyan")
    table.add_column("Status")
    table.add_column("Details")

    all_passed = True
    for name, passed, detail in checks:
        status = "[green]✓ PASS[/green]" if passed else "[red]✗ FAIL[/red]"
        table.add_row(name, status, detail or "-")
        all_passed = all_passed and passed

    console.print(table)

    if all_passed:
        console.print("\n[green]All checks passed![/green]")
    else:
        console.print("\n[yellow]Some checks failed. See details above.[/yellow]")
        console.print("[dim]Set DB_PASSWORD in config/.env or export DATABASE_URL.[/dim]")
        raise typer.Exit(1)
