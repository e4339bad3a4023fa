"""
Security Playground Structured Logger
======================================

Provides :class:`PlaygroundLogger`, a context-aware logging facade that
emits Rich console output to stderr and, optionally, plain-text or JSON
lines to a rotating log file.

Analyzer inputs are secrets or attack payloads; callers log lengths and
masked forms only, never the raw values.

References:
    - Python logging HOWTO. https://docs.python.org/3/howto/logging.html
    - Rich library. https://github.com/Textualize/rich
"""

from __future__ import annotations

import json
import logging
import time
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

_LOG_THEME = Theme(
    {
        "log.level.debug": "dim cyan",
        "log.level.info": "bold bright_blue",
        "log.level.warning": "bold yellow",
        "log.level.error": "bold red",
        "log.level.critical": "bold white on red",
    }
)

_CONTEXT_FIELDS = ("tool_name", "operation")


class _JSONFormatter(logging.Formatter):
    """Render each record as one JSON object per line.

    Output fields: ``timestamp``, ``level``, ``logger``, ``message``, the
    context fields ``tool_name`` / ``operation`` when bound, ``extra`` for
    keyword data passed to the log call, and ``exc_info`` on errors.
    """

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(
                record.created, tz=timezone.utc
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for attr in _CONTEXT_FIELDS:
            val = getattr(record, attr, None)
            if val is not None:
                entry[attr] = val

        extra = getattr(record, "playground_extra", None)
        if extra is not None:
            entry["extra"] = extra

        if record.exc_info and record.exc_info[1] is not None:
            entry["exc_info"] = self.formatException(record.exc_info)

        return json.dumps(entry, ensure_ascii=False, default=str)


class _ColorConsoleHandler(RichHandler):
    """RichHandler bound to a themed stderr console."""

    def __init__(self, **kwargs: Any) -> None:
        super().__init__(
            console=Console(theme=_LOG_THEME, stderr=True),
            show_path=False,
            show_time=True,
            rich_tracebacks=True,
            markup=False,
            **kwargs,
        )


class PlaygroundLogger:
    """Structured logger bound to one playground component.

    Usage::

        log = PlaygroundLogger("engine", log_file="playground.log", json_logs=True)
        with log.operation("password_analysis"):
            log.info("Analysing password", length=12)
        with log.timed("rule scan"):
            findings = detector.detect(text)

    Args:
        tool_name:       Component name, used as ``playground.<tool_name>``.
        log_level:       Minimum severity name.
        log_file:        Rotating log file path; ``None`` disables it.
        json_logs:       Emit JSON lines to the file handler.
        max_bytes:       File size before rotation.
        backup_count:    Rotated files to keep.
        console_output:  Attach the Rich stderr handler.
    """

    def __init__(
        self,
        tool_name: str,
        *,
        log_level: str = "INFO",
        log_file: str | Path | None = None,
        json_logs: bool = False,
        max_bytes: int = 10_485_760,
        backup_count: int = 5,
        console_output: bool = True,
    ) -> None:
        self._tool_name = tool_name
        self._operation: str | None = None
        level = getattr(logging, log_level.upper(), logging.INFO)

        self._logger = logging.getLogger(f"playground.{tool_name}")
        self._logger.setLevel(level)
        self._logger.propagate = False
        # Re-instantiation must not stack handlers
        self._logger.handlers.clear()

        if console_output:
            self._logger.addHandler(_ColorConsoleHandler(level=level))

        if log_file is not None:
            file_path = Path(log_file)
            file_path.parent.mkdir(parents=True, exist_ok=True)
            fh = RotatingFileHandler(
                filename=str(file_path),
                maxBytes=max_bytes,
                backupCount=backup_count,
                encoding="utf-8",
            )
            fh.setLevel(level)
            if json_logs:
                fh.setFormatter(_JSONFormatter())
            else:
                fh.setFormatter(
                    logging.Formatter(
                        fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
                        datefmt="%Y-%m-%dT%H:%M:%S%z",
                    )
                )
            self._logger.addHandler(fh)

    # ------------------------------------------------------------------ #
    #  Operation scope
    # ------------------------------------------------------------------ #

    class _OperationContext:
        def __init__(self, parent: PlaygroundLogger, operation: str) -> None:
            self._parent = parent
            self._operation = operation
            self._prev: str | None = None

        def __enter__(self) -> PlaygroundLogger:
            self._prev = self._parent._operation
            self._parent._operation = self._operation
            return self._parent

        def __exit__(self, *exc: Any) -> None:
            self._parent._operation = self._prev

    def operation(self, name: str) -> _OperationContext:
        """Bind ``operation=<name>`` to every record logged inside the block."""
        return self._OperationContext(self, name)

    # ------------------------------------------------------------------ #
    #  Log methods
    # ------------------------------------------------------------------ #

    def _enrich(self, kwargs: dict[str, Any]) -> dict[str, Any]:
        """Move context and free-form keyword data into ``extra``."""
        extra = kwargs.pop("extra", {}) or {}
        standard_keys = {"exc_info", "stack_info", "stacklevel"}
        data = {k: kwargs.pop(k) for k in list(kwargs) if k not in standard_keys}

        extra["tool_name"] = self._tool_name
        extra["operation"] = self._operation
        if data:
            extra["playground_extra"] = data

        kwargs["extra"] = extra
        return kwargs

    def debug(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._logger.debug(msg, *args, **self._enrich(kwargs))

    def info(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._logger.info(msg, *args, **self._enrich(kwargs))

    def warning(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._logger.warning(msg, *args, **self._enrich(kwargs))

    def error(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._logger.error(msg, *args, **self._enrich(kwargs))

    def exception(self, msg: str, *args: Any, **kwargs: Any) -> None:
        """Log at ERROR with the active exception's traceback."""
        kwargs.setdefault("exc_info", True)
        self._logger.error(msg, *args, **self._enrich(kwargs))

    # ------------------------------------------------------------------ #
    #  Timing helper
    # ------------------------------------------------------------------ #

    class _TimingContext:
        def __init__(self, logger_inst: PlaygroundLogger, label: str) -> None:
            self._logger = logger_inst
            self._label = label
            self._start: float = 0.0

        def __enter__(self) -> PlaygroundLogger._TimingContext:
            self._start = time.perf_counter()
            self._logger.debug("Started: %s", self._label)
            return self

        def __exit__(self, *exc: Any) -> None:
            self._logger.debug(
                "Completed: %s (%.3f ms)", self._label, self.elapsed * 1000
            )

        @property
        def elapsed(self) -> float:
            """Seconds since the block was entered."""
            return time.perf_counter() - self._start

    def timed(self, label: str) -> _TimingContext:
        """Log start / finish of a block together with its duration."""
        return self._TimingContext(self, label)

    @property
    def tool_name(self) -> str:
        return self._tool_name

    @property
    def underlying(self) -> logging.Logger:
        """Direct access to the stdlib :class:`logging.Logger`."""
        return self._logger
