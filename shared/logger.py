"""
EntPass Structured Logger
==========================

:class:`EntPassLogger` wraps a stdlib logger named ``entpass.<component>``.
Records go to a Rich handler on stderr and, when a log file is configured,
to a rotating file as plain lines or JSON lines. stdout is never touched:
it carries the generated passwords.

References:
    - Python logging HOWTO. https://docs.python.org/3/howto/logging.html
    - Rich library. https://github.com/Textualize/rich
"""

from __future__ import annotations

import json
import logging
import time
from contextlib import contextmanager
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Iterator

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

_LOG_THEME = Theme(
    {
        "log.level.debug": "dim cyan",
        "log.level.info": "bold bright_blue",
        "log.level.warning": "bold yellow",
        "log.level.error": "bold red",
    }
)

_PLAIN_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


class _JSONFormatter(logging.Formatter):
    """One JSON object per record: timestamp, level, logger, message, and
    the ``operation`` and ``extra`` fields when present."""

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(
                record.created, tz=timezone.utc
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        operation = getattr(record, "operation", None)
        if operation is not None:
            entry["operation"] = operation
        extra = getattr(record, "entpass_extra", None)
        if extra:
            entry["extra"] = extra
        return json.dumps(entry, ensure_ascii=False, default=str)


def _console_handler(level: int) -> RichHandler:
    handler = RichHandler(
        console=Console(theme=_LOG_THEME, stderr=True),
        show_path=False,
        markup=False,
        rich_tracebacks=True,
    )
    handler.setLevel(level)
    return handler


def _file_handler(
    path: Path, level: int, json_logs: bool, max_bytes: int, backup_count: int
) -> RotatingFileHandler:
    path.parent.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        filename=str(path),
        maxBytes=max_bytes,
        backupCount=backup_count,
        encoding="utf-8",
    )
    handler.setLevel(level)
    if json_logs:
        handler.setFormatter(_JSONFormatter())
    else:
        handler.setFormatter(
            logging.Formatter(fmt=_PLAIN_FORMAT, datefmt="%Y-%m-%dT%H:%M:%S%z")
        )
    return handler


class EntPassLogger:
    """Logger bound to one EntPass component.

    Usage::

        log = EntPassLogger("engine", log_level="INFO", log_file="entpass.log")
        with log.operation("sample"), log.timed("entropy sampling"):
            stats = sampler.sample(100_000)
        log.info("Sampled %d candidates", stats.limit, workers=8)

    Keyword arguments other than the stdlib ones (``exc_info`` and friends)
    are collected into the record's ``extra`` field.

    Args:
        component:      Component name; the stdlib logger is ``entpass.<component>``.
        log_level:      Minimum severity name; unknown names fall back to WARNING.
        log_file:       Rotating log file path, or ``None`` for no file.
        json_logs:      Write JSON lines to the log file.
        max_bytes:      Log file size that triggers rotation.
        backup_count:   Rotated files to keep.
        console_output: Attach the Rich stderr handler.
    """

    _STDLIB_KEYS = frozenset({"exc_info", "stack_info", "stacklevel"})

    def __init__(
        self,
        component: str,
        *,
        log_level: str = "WARNING",
        log_file: str | Path | None = None,
        json_logs: bool = False,
        max_bytes: int = 10_485_760,
        backup_count: int = 5,
        console_output: bool = True,
    ) -> None:
        self.component = component
        self._operation: str | None = None
        level = getattr(logging, log_level.upper(), logging.WARNING)

        self.logger = logging.getLogger(f"entpass.{component}")
        self.logger.setLevel(level)
        self.logger.propagate = False
        # re-binding a component replaces its handlers
        for handler in list(self.logger.handlers):
            self.logger.removeHandler(handler)
            handler.close()

        if console_output:
            self.logger.addHandler(_console_handler(level))
        if log_file:
            self.logger.addHandler(
                _file_handler(Path(log_file), level, json_logs, max_bytes, backup_count)
            )

    @contextmanager
    def operation(self, name: str) -> Iterator[EntPassLogger]:
        """Tag records logged inside the block with ``operation=name``."""
        previous, self._operation = self._operation, name
        try:
            yield self
        finally:
            self._operation = previous

    @contextmanager
    def timed(self, label: str) -> Iterator[None]:
        """Log the start (debug) and the duration (info) of the block."""
        start = time.perf_counter()
        self.debug("Started: %s", label)
        try:
            yield
        finally:
            self.info("Completed: %s (%.3f sec)", label, time.perf_counter() - start)

    def log(self, level: int, msg: str, *args: Any, **kwargs: Any) -> None:
        fields = {k: kwargs.pop(k) for k in list(kwargs) if k not in self._STDLIB_KEYS}
        kwargs["extra"] = {"operation": self._operation, "entpass_extra": fields}
        self.logger.log(level, msg, *args, **kwargs)

    def debug(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self.log(logging.DEBUG, msg, *args, **kwargs)

    def info(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self.log(logging.INFO, msg, *args, **kwargs)

    def error(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self.log(logging.ERROR, msg, *args, **kwargs)
