"""
PwGuard Structured Logger
==========================

:class:`PwGuardLogger` sends records for one PwGuard component to a Rich
console handler on stderr and, when configured, to a rotating log file
as plain text or JSON lines. Keyword arguments passed to the log methods
become structured fields; an active :meth:`PwGuardLogger.operation`
tags every record with the operation name.

Passwords must never reach a log record. Callers log lengths, verdicts
and masked forms only.

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
from typing import Any, Iterator, Optional

from rich.console import Console
from rich.logging import RichHandler

from shared.config import GlobalConfig

_ROOT_NAME = "pwguard"
_MAX_LOG_BYTES = 5 * 1024 * 1024
_LOG_BACKUPS = 3
_TEXT_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(operation)s | %(message)s"


class _JSONFormatter(logging.Formatter):
    """One JSON object per record: timestamp, level, logger, message,
    operation and the structured ``extra`` fields."""

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.operation != "-":
            entry["operation"] = record.operation
        if record.fields:
            entry["extra"] = record.fields
        if record.exc_info:
            entry["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False, default=str)


class PwGuardLogger:
    """Logger bound to one PwGuard component.

    Usage::

        log = PwGuardLogger("engine")
        with log.operation("check"), log.timed("strength check"):
            log.info("Strength computed", length=12, verdict="strong")

    Args:
        tool_name: Component name, appended to the ``pwguard.`` root.
        log_level: Minimum level name. Unknown names fall back to INFO.
        log_file: Log file path; ``None`` disables file logging.
        json_logs: Write JSON lines instead of text to the log file.
        console_output: Attach the Rich stderr handler.
    """

    def __init__(
        self,
        tool_name: str,
        *,
        log_level: str = "INFO",
        log_file: str | Path | None = None,
        json_logs: bool = False,
        console_output: bool = True,
    ) -> None:
        self._operation: Optional[str] = None
        level = getattr(logging, log_level.upper(), logging.INFO)

        self._logger = logging.getLogger(f"{_ROOT_NAME}.{tool_name}")
        self._logger.setLevel(level)
        self._logger.propagate = False
        self._logger.handlers.clear()

        if console_output:
            self._logger.addHandler(RichHandler(
                console=Console(stderr=True),
                level=level,
                show_path=False,
                markup=False,
                rich_tracebacks=True,
            ))

        if log_file:
            path = Path(log_file)
            path.parent.mkdir(parents=True, exist_ok=True)
            handler = RotatingFileHandler(
                path, maxBytes=_MAX_LOG_BYTES, backupCount=_LOG_BACKUPS, encoding="utf-8"
            )
            handler.setLevel(level)
            handler.setFormatter(_JSONFormatter() if json_logs else logging.Formatter(_TEXT_FORMAT))
            self._logger.addHandler(handler)

    @classmethod
    def from_config(
        cls, tool_name: str, settings: GlobalConfig, *, console_output: bool = True
    ) -> PwGuardLogger:
        """Build a logger from the ``[global]`` section; ``debug`` forces DEBUG."""
        return cls(
            tool_name,
            log_level="DEBUG" if settings.debug else settings.log_level,
            log_file=settings.log_file or None,
            json_logs=settings.log_json,
            console_output=console_output,
        )

    @property
    def underlying(self) -> logging.Logger:
        return self._logger

    # ------------------------------------------------------------------ #
    #  Context
    # ------------------------------------------------------------------ #

    @contextmanager
    def operation(self, name: str) -> Iterator[PwGuardLogger]:
        """Tag records emitted inside the block with *name*."""
        previous, self._operation = self._operation, name
        try:
            yield self
        finally:
            self._operation = previous

    @contextmanager
    def timed(self, label: str) -> Iterator[None]:
        """Log the elapsed time of the block at DEBUG level."""
        start = time.perf_counter()
        try:
            yield
        finally:
            self.debug("Completed: %s (%.6f sec)", label, time.perf_counter() - start)

    # ------------------------------------------------------------------ #
    #  Log methods
    # ------------------------------------------------------------------ #

    def _log(self, level: int, msg: str, args: tuple[Any, ...], fields: dict[str, Any],
             exc_info: bool = False) -> None:
        self._logger.log(
            level, msg, *args,
            exc_info=exc_info,
            extra={"operation": self._operation or "-", "fields": fields},
        )

    def debug(self, msg: str, *args: Any, **fields: Any) -> None:
        self._log(logging.DEBUG, msg, args, fields)

    def info(self, msg: str, *args: Any, **fields: Any) -> None:
        self._log(logging.INFO, msg, args, fields)

    def warning(self, msg: str, *args: Any, **fields: Any) -> None:
        self._log(logging.WARNING, msg, args, fields)

    def exception(self, msg: str, *args: Any, **fields: Any) -> None:
        """ERROR-level record carrying the active traceback."""
        self._log(logging.ERROR, msg, args, fields, exc_info=True)
