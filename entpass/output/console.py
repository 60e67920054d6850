"""
EntPass Console Output
=======================

Rich-based display of entropy reports on an interactive console. Reports
that go to a file or through a pipe use the plain text renderer in
:mod:`entpass.output.report` instead.
"""

from __future__ import annotations

from typing import Optional

from shared.console import EntPassConsole
from entpass.core.models import PasswordRecord
from entpass.output.report import report_rows


class EntPassConsoleOutput:
    """Console formatter for entropy reports.

    Usage::

        output = EntPassConsoleOutput(EntPassConsole(stderr=False))
        output.display_report(record)
    """

    def __init__(self, console: Optional[EntPassConsole] = None) -> None:
        self.console = console or EntPassConsole(stderr=False)

    def display_report(self, record: PasswordRecord) -> None:
        """Show the report as a two-column table."""
        self.console.section("Entropy Report")
        self.console.table(
            "Entropy Report",
            ["Setting", "Value"],
            report_rows(record),
            caption="Scores are length-scaled Shannon entropy (bits)",
            styles=["bold", "entpass.value"],
        )
