"""Console output for the CLI.

Provides a Console class that wraps rich for consistent output.
All CLI output should go through this module.
"""

from typing import Any

from rich.console import Console as RichConsole
from rich.panel import Panel
from rich.table import Table

from recast.domain.index.model.record import IndexRecord


class Console:
    """CLI output manager wrapping rich."""

    def __init__(self, *, force_terminal: bool | None = None) -> None:
        self._console = RichConsole(force_terminal=force_terminal, stderr=False)
        self._err_console = RichConsole(force_terminal=force_terminal, stderr=True)

    def success(self, message: str) -> None:
        """Print a success message."""
        self._console.print(f"[green]✓[/green] {message}")

    def error(self, message: str, *, hint: str | None = None) -> None:
        """Print an error message to stderr."""
        self._err_console.print(f"[red]✗[/red] {message}")
        if hint:
            self._err_console.print(f"  [dim]{hint}[/dim]")

    def print(self, *args: Any, **kwargs: Any) -> None:
        """Print to console (pass-through to rich)."""
        self._console.print(*args, **kwargs)

    def table(
        self,
        rows: list[dict[str, Any]],
        columns: list[tuple[str, str]],  # (key, header)
        *,
        title: str | None = None,
    ) -> None:
        """Print a table."""
        table = Table(title=title, show_header=True, header_style="bold")
        for _, header in columns:
            table.add_column(header)
        for row in rows:
            table.add_row(*[str(row.get(key, "")) for key, _ in columns])
        self._console.print(table)

    def record(self, record: IndexRecord, *, added: set[str] | None = None) -> None:
        """Print a record's fields; fields in ``added`` are highlighted."""
        lines = []
        for name, values in record.fields.items():
            label = f"[green]{name}[/green]" if added and name in added else f"[cyan]{name}[/cyan]"
            rendered = " | ".join("null" if v is None else str(v) for v in values)
            lines.append(f"{label}: {rendered}")

        content = "\n".join(lines) if lines else "[dim]No fields[/dim]"
        subtitle = record.category if record.item_type is None else f"{record.category}/{record.item_type}"
        self._console.print(
            Panel(
                content,
                title=f"[bold]{record.id}[/bold]",
                subtitle=f"[dim]{subtitle}[/dim]",
                border_style="blue",
                padding=(1, 2),
            )
        )
