#!/usr/bin/env python3
"""
paths.py
-------------------
Default path constants for keepdoc.

All defaults are relative to the directory the tool is run from, so a
takeout can be converted in place:

    ./
    ├── keep/            # Exported notes (*.json)
    ├── generated/       # Converted notes (*.pdf, *.md)
    ├── processed.txt    # Ledger of converted note paths
    └── logs/            # Application logs

Paths are kept relative on purpose: ledger entries are recorded exactly as
enumerated (e.g. ``keep/note.json``), which keeps the ledger portable
between machines.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from pathlib import Path


# ----- Input / Output -----
KEEP_DIR = Path("keep")
NOTE_PATTERN = "*.json"
GENERATED_DIR = Path("generated")

# ----- State -----
LEDGER_PATH = Path("processed.txt")

# ---- Logs ----
LOG_DIR = Path("logs")
