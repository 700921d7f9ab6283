"""Terminal output formatter using Rich."""
from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from spm_acknowledgements.models.acknowledgement import Acknowledgement


class TerminalFormatter:
    """Display a summary table of acknowledgements using Rich."""

    def __init__(self, console: Optional[Console] = None) -> None:
        """Initialize the formatter with a Rich console.

        Args:
            console: Optional Rich Console instance. If not provided,
                a new Console will be created.
        """
        self._console = console if console is not None else Console()

    def format_acknowledgements(self, acknowledgements: list[Acknowledgement]) -> None:
        """Print one row per package with license and source status.

        Args:
            acknowledgements: Records to display.
        """
        if not acknowledgements:
            self._console.print("[yellow]No packages found[/yellow]")
            return

        table = Table(title="Acknowledgements")

        table.add_column("Package", style="cyan", no_wrap=True)
        table.add_column("License", style="green")
        table.add_column("URL", style="magenta")

        for ack in acknowledgements:
            license_display = "found" if ack.has_license else "[yellow]missing[/yellow]"
            url_display = escape(ack.url) if ack.url else "[dim]-[/dim]"
            table.add_row(escape(ack.package_name), license_display, url_display)

        self._console.print(table)

        missing = sum(1 for ack in acknowledgements if not ack.has_license)
        if missing:
            self._console.print(
                f"[yellow]{missing} package(s) without a LICENSE file[/yellow]"
            )
