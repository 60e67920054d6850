"""
EntPass Output Module
======================

Text/JSON rendering of results and Rich console display of reports.
"""

from entpass.output.console import EntPassConsoleOutput
from entpass.output.report import ResultWriter, render_report, render_results

__all__ = [
    "EntPassConsoleOutput",
    "ResultWriter",
    "render_report",
    "render_results",
]
