"""
EntPass Console Interface
==========================

Rich-powered console abstraction for the EntPass command-line tool.

The console writes to stderr by default so that status messages, progress
bars and spinners never mix with the passwords written to stdout or to an
output file.

References:
    - Rich library: https://github.com/Textualize/rich
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Generator, Sequence

from rich.console import Console
from rich.progress import (
    BarColumn,
    Progress,
    SpinnerColumn,
    TaskProgressColumn,
    TextColumn,
    TimeElapsedColumn,
    TimeRemainingColumn,
)
from rich.table import Table
from rich.theme import Theme

_ENTPASS_THEME = Theme(
    {
        "entpass.section": "bold bright_magenta",
        "entpass.success": "bold green",
        "entpass.warning": "bold yellow",
        "entpass.error": "bold red",
        "entpass.info": "bold bright_blue",
        "entpass.dim": "dim white",
        "entpass.value": "bold bright_white",
    }
)


class EntPassConsole:
    """Unified console interface for EntPass output.

    Usage::

        con = EntPassConsole()
        con.section("Entropy Report")
        con.success("Report saved")
    """

    def __init__(
        self, *, quiet: bool = False, stderr: bool = True, record: bool = False
    ) -> None:
        """Initialise the console.

        Args:
            quiet:  Suppress all output (useful in library / test mode).
            stderr: Write to stderr instead of stdout.
            record: Enable Rich recording for text export.
        """
        self._console = Console(
            theme=_ENTPASS_THEME,
            quiet=quiet,
            stderr=stderr,
            record=record,
            highlight=False,
        )

    @property
    def rich(self) -> Console:
        """Direct access to the underlying Rich Console instance."""
        return self._console

    @property
    def is_terminal(self) -> bool:
        return self._console.is_terminal

    # ------------------------------------------------------------------ #
    #  Section header and messages
    # ------------------------------------------------------------------ #

    def section(self, title: str) -> None:
        """Print a section header rule."""
        self._console.rule(f"  {title}  ", style="entpass.section")

    def success(self, message: str) -> None:
        self._console.print(
            f"[entpass.success][✔] SUCCESS:[/entpass.success] {message}"
        )

    def warning(self, message: str) -> None:
        self._console.print(
            f"[entpass.warning][⚠] WARNING:[/entpass.warning] {message}"
        )

    def error(self, message: str) -> None:
        self._console.print(
            f"[entpass.error][✘] ERROR:[/entpass.error] {message}"
        )

    def info(self, message: str) -> None:
        self._console.print(
            f"[entpass.info][ℹ] INFO:[/entpass.info] {message}"
        )

    # ------------------------------------------------------------------ #
    #  Progress bar
    # ------------------------------------------------------------------ #

    @contextmanager
    def progress(
        self,
        description: str = "Calculating...",
        total: float | None = None,
    ) -> Generator[tuple[Progress, Any], None, None]:
        """Context manager wrapping a transient Rich progress bar.

        Yields:
            ``(progress, task_id)``. Call ``progress.update(task_id,
            advance=n)`` as work completes; the call is thread-safe.
        """
        progress_bar = Progress(
            SpinnerColumn("dots", style="bright_cyan"),
            TextColumn("[entpass.info]{task.description}"),
            BarColumn(bar_width=40, style="bright_cyan", complete_style="bright_green"),
            TaskProgressColumn(),
            TimeElapsedColumn(),
            TimeRemainingColumn(),
            console=self._console,
            transient=True,
        )
        with progress_bar:
            task_id = progress_bar.add_task(description, total=total)
            yield progress_bar, task_id

    # ------------------------------------------------------------------ #
    #  Table display
    # ------------------------------------------------------------------ #

    def table(
        self,
        title: str,
        columns: Sequence[str],
        rows: Sequence[Sequence[Any]],
        *,
        caption: str | None = None,
        styles: Sequence[str] | None = None,
    ) -> None:
        """Render a styled Rich table.

        Args:
            title:    Table title.
            columns:  Column header labels.
            rows:     Iterable of row tuples; each element is stringified.
            caption:  Optional footer caption.
            styles:   Optional per-column Rich style strings.
        """
        tbl = Table(
            title=title,
            caption=caption,
            border_style="bright_cyan",
            header_style="bold bright_magenta",
            padding=(0, 1),
        )
        for idx, col_name in enumerate(columns):
            style = styles[idx] if styles and idx < len(styles) else ""
            tbl.add_column(col_name, style=style)

        for row in rows:
            tbl.add_row(*(str(cell) for cell in row))

        self._console.print(tbl)

    # ------------------------------------------------------------------ #
    #  Utility
    # ------------------------------------------------------------------ #

    def print(self, *args: Any, **kwargs: Any) -> None:
        """Proxy to :meth:`rich.console.Console.print`."""
        self._console.print(*args, **kwargs)

    def export_text(self) -> str:
        """Export recorded console output as plain text (requires ``record=True``)."""
        return self._console.export_text()
