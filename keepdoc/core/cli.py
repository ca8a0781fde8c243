#!/usr/bin/env python3
"""
cli.py
------
Shared CLI utilities and statistics for keepdoc commands.

Functions:
    setup_logger: Initialize KeepDocLogger for CLI operations

Classes:
    OperationStats: Base class for all statistics
    ConversionStats: For note conversion runs

Usage:
    from keepdoc.core.cli import setup_logger, ConversionStats

    logger = setup_logger(log_dir, "convert")
    stats = ConversionStats()
    stats.notes_converted += 1
    print(stats.summary())
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from pathlib import Path
from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, Any, List

# --- Local imports ---
from keepdoc.core.logging_manager import KeepDocLogger


# ═══════════════════════════════════════════════════════════════════════════
# LOGGER SETUP
# ═══════════════════════════════════════════════════════════════════════════

def setup_logger(log_dir: Path, component_name: str) -> KeepDocLogger:
    """
    Setup logging for CLI operations.

    Creates the operations log directory if it doesn't exist and initializes
    a KeepDocLogger instance for the specified component.

    Args:
        log_dir: Base log directory (typically from paths.LOG_DIR)
        component_name: Component identifier for logging (e.g. 'convert')

    Returns:
        Configured KeepDocLogger instance
    """
    operations_log_dir = log_dir / "operations"
    operations_log_dir.mkdir(parents=True, exist_ok=True)
    return KeepDocLogger(operations_log_dir, component_name=component_name)


# ═══════════════════════════════════════════════════════════════════════════
# STATISTICS CLASSES
# ═══════════════════════════════════════════════════════════════════════════

@dataclass
class OperationStats:
    """
    Base class for CLI operation statistics.

    Attributes:
        files_processed: Number of files looked at
        errors: Number of errors encountered
        start_time: Operation start timestamp
    """
    files_processed: int = 0
    errors: int = 0
    start_time: datetime = field(default_factory=datetime.now)

    def duration(self) -> float:
        """Get elapsed time in seconds."""
        return (datetime.now() - self.start_time).total_seconds()

    def summary(self) -> str:
        """Get formatted summary string."""
        return (
            f"{self.files_processed} files processed, "
            f"{self.errors} errors, "
            f"{self.duration():.2f}s"
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON output."""
        return {
            "files_processed": self.files_processed,
            "errors": self.errors,
            "duration": self.duration(),
        }


@dataclass
class ConversionStats(OperationStats):
    """
    Statistics for a note conversion run.

    Attributes:
        notes_converted: Notes converted to PDF and Markdown this run
        notes_skipped: Notes skipped because the ledger already lists them
        failed: Paths of notes whose conversion failed, in order
    """
    notes_converted: int = 0
    notes_skipped: int = 0
    failed: List[str] = field(default_factory=list)

    def summary(self) -> str:
        """Get formatted summary with note metrics."""
        return (
            f"{self.files_processed} files processed, "
            f"{self.notes_converted} converted, "
            f"{self.notes_skipped} skipped, "
            f"{self.errors} errors, "
            f"{self.duration():.2f}s"
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary with note metrics."""
        d = super().to_dict()
        d.update({
            "notes_converted": self.notes_converted,
            "notes_skipped": self.notes_skipped,
            "failed": list(self.failed),
        })
        return d
