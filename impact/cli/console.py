"""Console output for the CLI.

Provides a Console class that wraps rich for consistent output.
All CLI output should go through this module.
"""

from typing import Any

from rich.console import Console as RichConsole
from rich.panel import Panel
from rich.table import Table


def funding_progress(funded: float, total: float) -> str:
    """Format funded/total as e.g. '$75 of $100 (75%)'."""
    if total <= 0:
        return f"${funded:,.0f} raised"
    percent = min(funded / total * 100, 100)
    return f"${funded:,.0f} of ${total:,.0f} ({percent:.0f}%)"


class Console:
    """CLI output manager wrapping rich."""

    def __init__(
        self,
        *,
        force_terminal: bool | None = None,
        quiet: bool = False,
    ) -> None:
        """Initialize the console.

        Args:
            force_terminal: Force terminal mode (True/False) or auto-detect (None).
            quiet: Suppress non-essential output.
        """
        self._console = RichConsole(force_terminal=force_terminal, stderr=False)
        self._err_console = RichConsole(force_terminal=force_terminal, stderr=True)
        self._quiet = quiet

    # -------------------------------------------------------------------------
    # Status messages
    # -------------------------------------------------------------------------

    def success(self, message: str) -> None:
        self._console.print(f"[green]✓[/green] {message}")

    def error(self, message: str, *, hint: str | None = None) -> None:
        """Print an error message to stderr."""
        self._err_console.print(f"[red]✗[/red] {message}")
        if hint:
            self._err_console.print(f"  [dim]{hint}[/dim]")

    def warning(self, message: str) -> None:
        self._console.print(f"[yellow]⚠[/yellow] {message}")

    def info(self, message: str) -> None:
        """Print an info message (suppressed in quiet mode)."""
        if not self._quiet:
            self._console.print(f"[dim]{message}[/dim]")

    def print(self, *args: Any, **kwargs: Any) -> None:
        self._console.print(*args, **kwargs)

    # -------------------------------------------------------------------------
    # Structured output
    # -------------------------------------------------------------------------

    def table(
        self,
        rows: list[dict[str, Any]],
        columns: list[tuple[str, str]],  # (key, header)
        *,
        title: str | None = None,
    ) -> None:
        """Print a table.

        Args:
            rows: List of dicts containing row data.
            columns: List of (key, header) tuples defining columns.
            title: Optional table title.
        """
        table = Table(title=title, show_header=True, header_style="bold")
        for _, header in columns:
            table.add_column(header)
        for row in rows:
            table.add_row(*[str(row.get(key) or "") for key, _ in columns])
        self._console.print(table)

    def report_detail(self, report: dict[str, Any]) -> None:
        """Print a report document as returned by the API."""
        lines = []

        if report.get("summary"):
            lines.append(report["summary"])
            lines.append("")

        meta_parts = []
        if report.get("category"):
            meta_parts.append(f"[cyan]Category:[/cyan] {report['category']}")
        if report.get("state"):
            meta_parts.append(f"[cyan]State:[/cyan] {report['state']}")
        if report.get("workTimeframe"):
            meta_parts.append(f"[cyan]Work:[/cyan] {report['workTimeframe']}")
        if meta_parts:
            lines.append("    ".join(meta_parts))

        progress = funding_progress(report.get("fundedSoFar") or 0, report.get("totalCost") or 0)
        lines.append(f"[cyan]Funding:[/cyan] {progress}")

        self._console.print(
            Panel(
                "\n".join(lines),
                title=f"[bold]{report.get('title', 'Untitled')}[/bold]",
                subtitle=f"[dim]{report.get('slug', '')} · {report.get('hypercertId', '')}[/dim]",
                border_style="blue",
                padding=(1, 2),
            )
        )


# Module-level default instance for convenience
_default: Console | None = None


def get_console() -> Console:
    """Get the default console instance."""
    global _default
    if _default is None:
        _default = Console()
    return _default
