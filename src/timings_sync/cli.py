"""Command-line interface for the timings synchronizer."""

import logging
import sys
from pathlib import Path
from typing import Optional

import httpx
import typer
from rich.console import Console
from rich.prompt import Prompt
from rich.table import Table

from timings_sync import __version__
from timings_sync.config import Config
from timings_sync.errors import InvalidProjectMappingError
from timings_sync.invoiceninja import InvoiceNinjaClient
from timings_sync.sync import RunWindow, SyncOrchestrator
from timings_sync.toggl import TogglClient
from timings_sync.utils import setup_logging
from timings_sync.utils.logging import SHOWN_TO_USER
from timings_sync.utils.reporting import Reporter

app = typer.Typer(help="Synchronize time entries from Toggl to Invoice Ninja")
mapping_app = typer.Typer(help="View and edit the Toggl to Invoice Ninja project mapping")
app.add_typer(mapping_app, name="mapping")
console = Console()
logger = logging.getLogger(__name__)


@app.command()
def sync(
    since: str = typer.Option(
        "yesterday",
        "--since",
        help="Since when to import (YYYY-MM-DD, 'yesterday', '3 days ago', ...).",
    ),
    until: str = typer.Option(
        "today",
        "--until",
        help="Until when to import (YYYY-MM-DD, 'today', ...).",
    ),
    dry_run: bool = typer.Option(
        False,
        "--dry-run",
        help="Dry run: do not import into Invoice Ninja, print the payloads instead.",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose logging.",
    ),
    config_dir: Optional[Path] = typer.Option(
        None,
        "--config-dir",
        help="Configuration directory. Defaults to ~/.toggl-ninja-sync/",
    ),
) -> None:
    """Sync timings from Toggl to Invoice Ninja."""
    setup_logging(
        log_level=logging.DEBUG if verbose else logging.INFO,
        config_dir=config_dir,
        console=console,
    )

    logger.info(f"Toggl Ninja Sync v{__version__}")

    try:
        window = RunWindow.from_expressions(since, until)
    except ValueError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(code=1)

    config = Config(config_dir)

    try:
        mapping = config.project_mapping()
    except InvalidProjectMappingError as e:
        logger.error(f"Invalid configuration: {e}", extra={SHOWN_TO_USER: True})
        console.print(f"[red]Invalid configuration: {e}[/red]")
        raise typer.Exit(code=1)

    toggl_token = config.get_token("toggl")
    ninja_token = config.get_token("invoiceninja")
    if not toggl_token or not ninja_token:
        console.print("[yellow]API tokens not found. Please configure them first.[/yellow]")
        console.print("Run: toggl-ninja-sync configure")
        raise typer.Exit(code=1)

    try:
        with TogglClient(toggl_token, user_agent=config.toggl_user_agent) as toggl_client, InvoiceNinjaClient(
            ninja_token, base_url=config.invoiceninja_url
        ) as ninja_client:
            orchestrator = SyncOrchestrator(
                source=toggl_client,
                sink=ninja_client,
                mapping=mapping,
                reporter=Reporter(console),
            )

            mode_str = "[bold cyan]DRY RUN[/bold cyan]" if dry_run else "[bold green]SYNC[/bold green]"
            console.print(f"Starting {mode_str} mode for {window}...")

            result = orchestrator.sync(window, dry_run=dry_run)

    except httpx.HTTPError as e:
        logger.error(f"API request failed: {e}", exc_info=True, extra={SHOWN_TO_USER: True})
        console.print(f"[red]Error: API request failed: {e}[/red]")
        raise typer.Exit(code=1)

    if result.workspaces:
        table = Table(title="Sync Results")
        table.add_column("Metric", style="cyan")
        table.add_column("Count", style="magenta")
        table.add_row("Workspaces", str(result.workspaces))
        table.add_row("Sent", str(result.entries_sent))
        table.add_row("Previewed", str(result.entries_previewed))
        table.add_row("Skipped", str(result.entries_skipped))
        console.print(table)


@app.command()
def configure(
    config_dir: Optional[Path] = typer.Option(
        None,
        "--config-dir",
        help="Configuration directory. Defaults to ~/.toggl-ninja-sync/",
    ),
) -> None:
    """Configure Toggl and Invoice Ninja credentials."""
    setup_logging(config_dir=config_dir, console=console)

    config = Config(config_dir)

    console.print("[bold cyan]Toggl Ninja Sync Configuration[/bold cyan]")
    console.print()

    console.print("[yellow]Toggl[/yellow]")
    toggl_token = Prompt.ask("Enter your Toggl API token", password=True)
    config.storage.set_token("toggl", toggl_token)
    user_agent = Prompt.ask(
        "Identifier sent to the Toggl Reports API (e.g. your email)",
        default=config.toggl_user_agent,
    )
    config.set_toggl_user_agent(user_agent)
    console.print("[green]✓ Toggl settings saved[/green]")
    console.print()

    console.print("[yellow]Invoice Ninja[/yellow]")
    url = Prompt.ask(
        "Invoice Ninja URL",
        default=config.invoiceninja_url or InvoiceNinjaClient.DEFAULT_URL,
    )
    config.set_invoiceninja_url(url)
    ninja_token = Prompt.ask("Enter your Invoice Ninja API token", password=True)
    config.storage.set_token("invoiceninja", ninja_token)
    console.print("[green]✓ Invoice Ninja settings saved[/green]")
    console.print()

    console.print("[cyan]Testing Toggl connection...[/cyan]")
    try:
        with TogglClient(toggl_token, user_agent=user_agent) as toggl_client:
            workspaces = toggl_client.list_workspaces()
            console.print(f"[green]✓ Connected to Toggl (found {len(workspaces)} workspaces)[/green]")
    except (httpx.HTTPError, ValueError) as e:
        console.print(f"[red]✗ Failed to connect to Toggl: {e}[/red]")

    console.print("\n[green]Configuration complete![/green]")
    console.print("Run 'toggl-ninja-sync mapping add <toggl_project_id> --client-id N --project-id N' to bill a project.")


@mapping_app.command("list")
def list_mapping(
    config_dir: Optional[Path] = typer.Option(
        None,
        "--config-dir",
        help="Configuration directory. Defaults to ~/.toggl-ninja-sync/",
    ),
) -> None:
    """View the Toggl to Invoice Ninja project mapping."""
    setup_logging(config_dir=config_dir, console=console)

    config = Config(config_dir)
    try:
        projects = config.project_mapping()
    except InvalidProjectMappingError as e:
        console.print(f"[red]Invalid configuration: {e}[/red]")
        raise typer.Exit(code=1)

    if not projects:
        console.print("[yellow]No project mappings configured yet.[/yellow]")
        return

    table = Table(title="Project Mappings")
    table.add_column("Toggl Project", style="cyan")
    table.add_column("Invoice Ninja Client", style="magenta")
    table.add_column("Invoice Ninja Project", style="magenta")

    for toggl_id, record in projects.items():
        table.add_row(str(toggl_id), str(record.client_id), str(record.project_id))

    console.print(table)


@mapping_app.command("add")
def add_mapping(
    toggl_project_id: int = typer.Argument(..., help="Toggl project id."),
    client_id: int = typer.Option(..., "--client-id", help="Invoice Ninja client id."),
    project_id: int = typer.Option(..., "--project-id", help="Invoice Ninja project id."),
    config_dir: Optional[Path] = typer.Option(
        None,
        "--config-dir",
        help="Configuration directory. Defaults to ~/.toggl-ninja-sync/",
    ),
) -> None:
    """Bill a Toggl project to an Invoice Ninja client and project."""
    setup_logging(config_dir=config_dir, console=console)

    config = Config(config_dir)
    try:
        config.update_project(toggl_project_id, client_id=client_id, project_id=project_id)
    except InvalidProjectMappingError as e:
        console.print(f"[red]Invalid configuration: {e}[/red]")
        raise typer.Exit(code=1)

    logger.info(f"Mapped Toggl project {toggl_project_id} to client {client_id}, project {project_id}")
    console.print(
        f"[green]✓ Toggl project {toggl_project_id} -> "
        f"client {client_id}, project {project_id}[/green]"
    )


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"Toggl Ninja Sync v{__version__}")


def main() -> None:
    """Main entry point."""
    try:
        app()
    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted by user[/yellow]")
        sys.exit(0)
    except Exception as e:
        logger.error(f"Unexpected error: {e}", exc_info=True, extra={SHOWN_TO_USER: True})
        console.print(f"[red]Unexpected error: {e}[/red]")
        sys.exit(1)


if __name__ == "__main__":
    main()
