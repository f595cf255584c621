"""User-facing notifications printed to the console."""

from rich.console import Console
from rich.markup import escape

from timings_sync.invoiceninja.models import Task


class Reporter:
    """Prints sync outcomes to a rich console."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def success(self, message: str) -> None:
        self.console.print(f"[green][OK] {escape(message)}[/green]")

    def error(self, message: str) -> None:
        self.console.print(f"[bold red][ERROR] {escape(message)}[/bold red]")

    def preview(self, task: Task) -> None:
        """Show the payload that would have been submitted."""
        self.console.print(f"Would have sent {escape(task.to_json())} to InvoiceNinja")
