#!/usr/bin/env python3
"""
base.py
-------------------
Base class for note writers in the keepdoc project.

Provides:
- BaseWriter: Abstract base class for output sinks

Writers share the output-directory handling and optional logger
integration; subclasses implement ``write()`` for their format.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

from keepdoc.core.logging_manager import KeepDocLogger, safe_logger


class BaseWriter(ABC):
    """
    Abstract base class for note output sinks.

    Writers never create ``output_dir``: preparing the output location is
    the caller's concern.

    Attributes:
        output_dir: Directory receiving the generated files
        suffix: File extension written by this sink (e.g. '.pdf')
        logger: Optional logger for operation tracking
    """

    suffix: str = ""

    def __init__(self, output_dir: Path, logger: Optional[KeepDocLogger] = None):
        """
        Initialize writer.

        Args:
            output_dir: Directory receiving the generated files
            logger: Optional logger for operation tracking
        """
        self.output_dir = Path(output_dir)
        self.logger = logger

    def target(self, filename: str) -> Path:
        """Destination path for a filename stem."""
        return self.output_dir / f"{filename}{self.suffix}"

    @abstractmethod
    def write(self, filename: str, content: str) -> Path:
        """
        Write ``content`` to the destination for ``filename``.

        Returns:
            Path of the file written

        Note:
            Existing files are overwritten, never appended to.
        """
        pass

    def _log_operation(
        self, operation: str, details: Optional[dict] = None
    ) -> None:
        """Log an operation if logger is available."""
        safe_logger(self.logger).log_operation(operation, details or {})

    def _log_debug(self, message: str) -> None:
        """Log a debug message if logger is available."""
        safe_logger(self.logger).log_debug(message)
