#!/usr/bin/env python3
"""
ledger.py
-------------------
Record of note files that have already been converted.

The ledger is a flat text file with one note path per line. It is read
once when a run starts and rewritten in full when the run ends, so entries
never pile up as duplicates.

    processed.txt
    ─────────────
    keep/Shopping_list.json
    keep/Trip_notes.json

Programmatic API:
    from keepdoc.pipeline.ledger import ProcessedLedger

    ledger = ProcessedLedger(Path("processed.txt"))
    processed = ledger.load()
    processed.add("keep/new.json")
    ledger.save(processed)
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from pathlib import Path
from typing import Iterable, Optional, Set

# --- Local imports ---
from keepdoc.core.exceptions import LedgerError
from keepdoc.core.logging_manager import KeepDocLogger, safe_logger


class ProcessedLedger:
    """
    Load and save the set of converted note paths.

    Paths are normalised with ``Path`` on load, so ledgers written with a
    leading ``./`` (``./keep/a.json``) match the ``keep/a.json`` form the
    enumerator yields.

    Attributes:
        path: Location of the ledger file
        logger: Optional logger
    """

    def __init__(self, path: Path, logger: Optional[KeepDocLogger] = None):
        self.path = Path(path)
        self.logger = logger

    def load(self) -> Set[str]:
        """
        Read the ledger.

        Returns:
            Set of recorded note paths; empty if the file does not exist

        Raises:
            LedgerError: If the file exists but cannot be read
        """
        if not self.path.exists():
            safe_logger(self.logger).log_debug(f"No ledger at {self.path}, starting fresh")
            return set()

        try:
            contents = self.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise LedgerError(f"Cannot read ledger {self.path}: {e}") from e

        processed = {str(Path(line)) for line in contents.splitlines() if line.strip()}
        safe_logger(self.logger).log_debug(
            f"Loaded ledger {self.path}", {"entries": len(processed)}
        )
        return processed

    def save(self, processed: Iterable[str]) -> None:
        """
        Overwrite the ledger with ``processed``, one path per line.

        Raises:
            LedgerError: If the file cannot be written
        """
        entries = sorted(set(processed))
        try:
            self.path.write_text("\n".join(entries), encoding="utf-8")
        except OSError as e:
            raise LedgerError(f"Cannot write ledger {self.path}: {e}") from e

        safe_logger(self.logger).log_operation(
            "ledger_saved", {"file": str(self.path), "entries": len(entries)}
        )
