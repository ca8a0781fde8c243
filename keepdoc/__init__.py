"""
keepdoc
=======

Convert exported notes (one JSON file per note, as produced by a Google
Keep takeout) into PDF and Markdown documents.

Main Components:
    - pipeline: Conversion run, processed ledger and CLI
    - dataclasses: KeepNote, the parsed form of a note
    - builders: PDF (Pandoc) and Markdown output sinks
    - core: Logging, exceptions, paths, statistics
    - utils: Note discovery, JSON loading, slugs

Primary Interfaces:
    - keepdoc.pipeline.cli: Command-line interface (``keepdoc``)
    - keepdoc.pipeline.keep2doc.convert_notes: Programmatic API

Example Usage:
    >>> from pathlib import Path
    >>> from keepdoc.pipeline.keep2doc import convert_notes
    >>> stats = convert_notes(Path("keep"), Path("generated"), Path("processed.txt"))
    >>> stats.notes_converted
"""

__version__ = "1.0.0"

from keepdoc.core.paths import GENERATED_DIR, KEEP_DIR, LEDGER_PATH, LOG_DIR
from keepdoc.dataclasses.keep_note import KeepNote

__all__ = [
    "KeepNote",
    "KEEP_DIR",
    "GENERATED_DIR",
    "LEDGER_PATH",
    "LOG_DIR",
]
