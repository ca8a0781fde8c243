#!/usr/bin/env python3
"""
logging_manager.py
--------------------
Logging for keepdoc conversion runs.

A run writes two rotating files under the log directory (by default
``logs/operations/``):

    keepdoc.log   every operation record: run start and end, notes parsed,
                  files written, ledger saves, slug collisions
    errors.log    per-note failures and fatal CLI errors, with context
                  (the note path, the ledger path) and a traceback

Only warnings reach the console through logging; per-note progress is
printed by the pipeline with ``click.echo``.

Library code takes an optional logger and wraps it with ``safe_logger`` so
it can log unconditionally. CLI commands route fatal errors through
``handle_cli_error``.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import json
import logging
import traceback
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Dict, Optional

# --- Third party imports ---
import click


# ----- Formats -----
FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(funcName)s:%(lineno)d] - %(message)s"
FILE_DATEFMT = "%Y-%m-%d %H:%M:%S"
CONSOLE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
CONSOLE_DATEFMT = "%H:%M:%S"


class KeepDocLogger:
    """
    File-backed logger shared by the conversion pipeline and the CLI.

    One instance is created per CLI invocation (see ``setup_logger``) and
    passed down to the orchestrator, the ledger and the writers.

    Attributes:
        log_dir: Directory holding ``{component_name}.log`` and ``errors.log``
        component_name: Logger namespace and component log file stem
        main_logger: Receives every record; mirrors warnings to the console
        error_logger: Receives note failures and CLI errors only

    Example:
        >>> logger = KeepDocLogger(Path("logs/operations"))
        >>> logger.log_operation("pdf_created", {"file": "generated/Plan.pdf"})
        >>> logger.log_error(err, {"file": "keep/broken.json"})
    """

    def __init__(
        self,
        log_dir: Path,
        component_name: str = "keepdoc",
        max_bytes: int = 10 * 1024 * 1024,
        backup_count: int = 5,
    ) -> None:
        """
        Args:
            log_dir: Directory for log files, created if missing
            component_name: Component identifier (e.g. 'keepdoc')
            max_bytes: Size at which a log file rotates (default: 10MB)
            backup_count: Rotated files kept per log (default: 5)
        """
        self.log_dir = Path(log_dir)
        self.component_name = component_name
        self.max_bytes = max_bytes
        self.backup_count = backup_count
        self._setup_loggers()

    def _setup_loggers(self) -> None:
        self.log_dir.mkdir(parents=True, exist_ok=True)

        # Loggers are process-global; repeated CLI invocations in one
        # process must not stack handlers.
        self.main_logger = self._fresh_logger("operations", logging.DEBUG)
        self.error_logger = self._fresh_logger("errors", logging.ERROR)

        self.main_logger.addHandler(
            self._file_handler(self.log_dir / f"{self.component_name}.log", logging.DEBUG)
        )
        self.error_logger.addHandler(
            self._file_handler(self.log_dir / "errors.log", logging.ERROR)
        )

        console = logging.StreamHandler()
        console.setLevel(logging.WARNING)
        console.setFormatter(logging.Formatter(CONSOLE_FORMAT, datefmt=CONSOLE_DATEFMT))
        self.main_logger.addHandler(console)

    def _fresh_logger(self, channel: str, level: int) -> logging.Logger:
        logger = logging.getLogger(f"{self.component_name}.{channel}")
        logger.setLevel(level)
        logger.handlers = []
        return logger

    def _file_handler(self, file_path: Path, level: int) -> RotatingFileHandler:
        handler = RotatingFileHandler(
            file_path,
            maxBytes=self.max_bytes,
            backupCount=self.backup_count,
            encoding="utf-8",
        )
        handler.setLevel(level)
        handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt=FILE_DATEFMT))
        return handler

    def _emit(
        self, level: int, tag: str, message: str, details: Optional[Dict[str, Any]]
    ) -> None:
        """Write ``TAG - message[: {json details}]`` to the component log."""
        line = f"{tag} - {message}"
        if details:
            line += f": {json.dumps(details, default=str)}"
        self.main_logger.log(level, line)

    # ---- Public API ----
    def log_operation(
        self, operation: str, details: Optional[Dict[str, Any]] = None
    ) -> None:
        """
        Record a pipeline step such as ``convert_notes_start``,
        ``pdf_created`` or ``ledger_saved``.

        Details are always serialised, ``{}`` when none are given, so every
        operation line has the same shape.
        """
        self.main_logger.info(
            f"OPERATION - {operation}: {json.dumps(details or {}, default=str)}"
        )

    def log_error(
        self, error: Exception, context: Optional[Dict[str, Any]] = None
    ) -> None:
        """
        Record a failure in errors.log.

        Args:
            error: The exception raised while handling a note or command
            context: Where it happened, e.g. ``{"file": "keep/a.json"}``
        """
        self.error_logger.error(f"ERROR - {type(error).__name__}: {error}")
        if context:
            pairs = ", ".join(f"{k}={v}" for k, v in context.items())
            self.error_logger.error(f"Context: {pairs}")
        self.error_logger.error(f"Traceback:\n{traceback.format_exc()}")

    def log_debug(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        self._emit(logging.DEBUG, "DEBUG", message, details)

    def log_info(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        self._emit(logging.INFO, "INFO", message, details)

    def log_warning(
        self, message: str, details: Optional[Dict[str, Any]] = None
    ) -> None:
        """Warnings also show on the console (slug collisions, for instance)."""
        self._emit(logging.WARNING, "WARNING", message, details)

    def log_cli_error(
        self,
        error: Exception,
        context: Optional[Dict[str, Any]] = None,
        show_traceback: bool = False,
    ) -> str:
        """
        Log a fatal command error and build the line shown to the user.

        Returns:
            ``"❌ {ErrorType}: {message}"``, followed by the traceback when
            ``show_traceback`` is set

        Examples:
            >>> logger.log_cli_error(LedgerError("Cannot write processed.txt"))
            '❌ LedgerError: Cannot write processed.txt'
        """
        self.log_error(error, context or {"source": "cli"})

        message = f"❌ {type(error).__name__}: {error}"
        if show_traceback:
            message += f"\n\n{traceback.format_exc()}"
        return message


def handle_cli_error(
    ctx: "click.Context",
    error: Exception,
    operation: str,
    additional_context: Optional[Dict[str, Any]] = None,
    exit_code: int = 1,
) -> None:
    """
    Report a fatal error from a keepdoc command and exit.

    The logger and verbose flag come from the click context set up by the
    ``keepdoc`` group. The error goes to errors.log with the command name
    and any extra context; the user sees one line on stderr (plus the
    traceback with ``-v``).

    Args:
        ctx: Click context carrying ``logger`` and ``verbose``
        error: Exception that stopped the command
        operation: Command name (e.g. 'convert')
        additional_context: Extra context such as the input dir or ledger path
        exit_code: Process exit status (default: 1)

    Note:
        Never returns; always calls sys.exit()
    """
    logger: Optional[KeepDocLogger] = ctx.obj.get("logger")
    verbose: bool = ctx.obj.get("verbose", False)

    context = {"operation": operation, **(additional_context or {})}
    message = safe_logger(logger).log_cli_error(error, context, show_traceback=verbose)

    click.echo(message, err=True)
    sys.exit(exit_code)


class NullLogger:
    """Stand-in with KeepDocLogger's methods that records nothing."""

    def log_operation(self, operation: str, details: Optional[Dict[str, Any]] = None) -> None:
        pass

    def log_error(self, error: Exception, context: Optional[Dict[str, Any]] = None) -> None:
        pass

    def log_debug(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        pass

    def log_info(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        pass

    def log_warning(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        pass

    def log_cli_error(
        self,
        error: Exception,
        context: Optional[Dict[str, Any]] = None,
        show_traceback: bool = False,
    ) -> str:
        return f"❌ {type(error).__name__}: {error}"


_null_logger = NullLogger()


def safe_logger(logger: Optional[KeepDocLogger]) -> KeepDocLogger:
    """
    Return ``logger``, or a shared NullLogger when it is None.

    Lets the pipeline write ``safe_logger(logger).log_info(...)`` instead of
    guarding every call with ``if logger:``.
    """
    return logger if logger is not None else _null_logger  # type: ignore[return-value]
