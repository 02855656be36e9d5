#!/usr/bin/env python3
"""
logging_manager.py
--------------------
Logging for store, import and export operations.

A ``TankaLogger`` owns two stdlib loggers per component:

    <component>.operations -> <component>.log (DEBUG+) and the console (WARNING+)
    <component>.errors     -> errors.log, shared by every component

Every line has the form ``LABEL - message: {json details}`` so the logs can
be grepped by label and the details parsed back.

Components take ``logger: Optional[TankaLogger] = None`` and call through
``safe_logger(logger)``; without a logger nothing is written.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import json
import logging
import sys
import traceback
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Dict, Optional

# --- Third party imports ---
import click

FILE_FORMAT = logging.Formatter(
    "%(asctime)s %(levelname)-7s %(name)s [%(funcName)s:%(lineno)d] %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
CONSOLE_FORMAT = logging.Formatter("%(levelname)s %(name)s: %(message)s")

Details = Optional[Dict[str, Any]]


def _rotating_handler(
    path: Path, level: int, max_bytes: int, backup_count: int
) -> RotatingFileHandler:
    handler = RotatingFileHandler(
        path, maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8"
    )
    handler.setLevel(level)
    handler.setFormatter(FILE_FORMAT)
    return handler


def _fresh_logger(name: str, level: int) -> logging.Logger:
    """Return the named logger with its level set and no handlers."""
    logger = logging.getLogger(name)
    logger.setLevel(level)
    logger.propagate = False
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    return logger


def format_line(label: str, message: str, details: Details = None) -> str:
    """
    Render one log line.

    input:  ("OPERATION", "save", {"entries": 3})
    output: 'OPERATION - save: {"entries": 3}'
    """
    if not details:
        return f"{label} - {message}"
    return f"{label} - {message}: {json.dumps(details, default=str, ensure_ascii=False)}"


def error_summary(error: Exception) -> str:
    """One-line CLI message for an exception."""
    return f"❌ {type(error).__name__}: {error}"


class TankaLogger:
    """
    Rotating-file logger for one component.

    Attributes:
        log_dir: Directory holding the log files
        component_name: Prefix for the stdlib logger names and the log file
        main_logger: All levels, to ``<component>.log`` and the console
        error_logger: Errors only, to the shared ``errors.log``
    """

    def __init__(
        self,
        log_dir: Path,
        component_name: str = "tankacho",
        max_bytes: int = 5 * 1024 * 1024,
        backup_count: int = 3,
    ) -> None:
        self.log_dir = Path(log_dir)
        self.component_name = component_name
        self.log_dir.mkdir(parents=True, exist_ok=True)

        self.main_logger = _fresh_logger(f"{component_name}.operations", logging.DEBUG)
        self.main_logger.addHandler(
            _rotating_handler(
                self.log_dir / f"{component_name}.log", logging.DEBUG, max_bytes, backup_count
            )
        )
        console = logging.StreamHandler()
        console.setLevel(logging.WARNING)
        console.setFormatter(CONSOLE_FORMAT)
        self.main_logger.addHandler(console)

        self.error_logger = _fresh_logger(f"{component_name}.errors", logging.ERROR)
        self.error_logger.addHandler(
            _rotating_handler(
                self.log_dir / "errors.log", logging.ERROR, max_bytes, backup_count
            )
        )

    def log_operation(self, operation: str, details: Details = None) -> None:
        """Record a completed operation, e.g. ``import_merge`` with its counts."""
        self.main_logger.info(format_line("OPERATION", operation, details or {}))

    def log_debug(self, message: str, details: Details = None) -> None:
        self.main_logger.debug(format_line("DEBUG", message, details))

    def log_info(self, message: str, details: Details = None) -> None:
        self.main_logger.info(format_line("INFO", message, details))

    def log_warning(self, message: str, details: Details = None) -> None:
        self.main_logger.warning(format_line("WARNING", message, details))

    def log_error(self, error: Exception, context: Details = None) -> None:
        """
        Write an error and its context to ``errors.log``.

        The traceback is appended when called while the exception is being
        handled.
        """
        line = format_line("ERROR", f"{type(error).__name__}: {error}", context)
        if sys.exc_info()[1] is error:
            line = f"{line}\n{traceback.format_exc().rstrip()}"
        self.error_logger.error(line)

    def log_cli_error(
        self,
        error: Exception,
        context: Details = None,
        show_traceback: bool = False,
    ) -> str:
        """
        Log an error raised by a CLI command and return the message to print.

        Examples:
            >>> logger.log_cli_error(PersistenceError("disk full"))
            '❌ PersistenceError: disk full'
        """
        self.log_error(error, context or {"source": "cli"})
        if show_traceback:
            return f"{error_summary(error)}\n\n{traceback.format_exc()}"
        return error_summary(error)


def handle_cli_error(
    ctx: "click.Context",
    error: Exception,
    operation: str,
    additional_context: Details = None,
    exit_code: int = 1,
) -> None:
    """
    Report a failed command and exit.

    The logger and verbose flag come from ``ctx.obj``; with ``-v`` the
    traceback is printed as well. Never returns.
    """
    obj = ctx.obj or {}
    context = {"operation": operation, **(additional_context or {})}
    message = safe_logger(obj.get("logger")).log_cli_error(
        error, context, show_traceback=obj.get("verbose", False)
    )
    click.echo(message, err=True)
    sys.exit(exit_code)


class NullLogger:
    """TankaLogger stand-in that writes nothing."""

    def _ignore(self, *args: Any, **kwargs: Any) -> None:
        return None

    log_operation = log_debug = log_info = log_warning = log_error = _ignore

    def log_cli_error(
        self,
        error: Exception,
        context: Details = None,
        show_traceback: bool = False,
    ) -> str:
        return error_summary(error)


_null_logger = NullLogger()


def safe_logger(logger: Optional[TankaLogger]) -> TankaLogger:
    """
    Return ``logger``, or the shared NullLogger when it is None.

    Usage:
        safe_logger(self.logger).log_info("message")
    """
    return logger if logger is not None else _null_logger  # type: ignore[return-value]
