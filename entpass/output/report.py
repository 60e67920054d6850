"""
EntPass Result Rendering
=========================

Turns generation results and entropy reports into text or JSON documents
and delivers them to stdout or to a file.

Text output:
    - one password: the value with no trailing newline;
    - several passwords: one value per line.

JSON output:
    - one password: a single object;
    - several passwords: an array of objects.

Zero-valued fields are left out of every JSON object.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Optional

import click

from entpass.core.models import PasswordRecord, ResultSet

OUTPUT_FORMATS = ("text", "json")


def _dumps(payload: Any) -> str:
    return json.dumps(payload, ensure_ascii=False) + "\n"


def render_results(results: ResultSet, output_format: str = "text") -> str:
    """Render accepted passwords in *output_format*."""
    records = results.records()
    if output_format == "json":
        if len(records) == 1:
            return _dumps(records[0].as_json())
        return _dumps([record.as_json() for record in records])
    if len(records) == 1:
        return records[0].value
    return "".join(f"{record.value}\n" for record in records)


def report_rows(record: PasswordRecord) -> list[tuple[str, str]]:
    """Label/value pairs of an entropy report."""
    stats = record.sample
    if stats is None:
        raise ValueError("an entropy report needs sample statistics")
    return [
        ("Samples", f"{stats.limit}"),
        ("Length", f"{record.length}"),
        ("Uppercase", str(record.uppercase).lower()),
        ("Lowercase", str(record.lowercase).lower()),
        ("Digits", str(record.digits).lower()),
        ("Symbols", str(record.symbols).lower()),
        ("Use Words", str(record.words).lower()),
        ("Average", f"{stats.average:.3f}"),
        ("Minimum", f"{stats.min:.3f}"),
        ("Maximum", f"{stats.max:.3f}"),
        ("Recommended", f"{stats.recommended:.3f}"),
    ]


def render_report(record: PasswordRecord, output_format: str = "text") -> str:
    """Render an entropy report in *output_format*."""
    if output_format == "json":
        return _dumps(record.as_json())
    lines = ["Entropy Report: "]
    lines.extend(f"  {label}: {value}" for label, value in report_rows(record))
    return "\n".join(lines) + "\n"


class ResultWriter:
    """Delivers rendered output to a file, or to stdout when none is set.

    Args:
        output_file: Destination file; ``None`` writes to stdout.
    """

    def __init__(self, output_file: Optional[Path] = None) -> None:
        self.output_file = output_file

    @property
    def to_file(self) -> bool:
        return self.output_file is not None

    def write(self, document: str) -> Optional[Path]:
        """Write *document*; return the file path when writing to a file."""
        if self.output_file is None:
            click.echo(document, nl=False)
            return None
        self.output_file.parent.mkdir(parents=True, exist_ok=True)
        self.output_file.write_text(document, encoding="utf-8")
        return self.output_file
